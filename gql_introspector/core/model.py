"""Schema model mirroring the GraphQL introspection JSON contract.

Every attribute is optional because servers omit properties that do not apply
to a given kind. Models are frozen once validated.
"""

import json
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import InvalidIntrospectionError, MissingResultError


class TypeKind(str, Enum):
    """The `__TypeKind` values defined by GraphQL introspection."""

    OBJECT = "OBJECT"
    INTERFACE = "INTERFACE"
    ENUM = "ENUM"
    SCALAR = "SCALAR"
    INPUT_OBJECT = "INPUT_OBJECT"
    UNION = "UNION"
    LIST = "LIST"
    NON_NULL = "NON_NULL"

    @classmethod
    def lookup(cls, value: str | None) -> "TypeKind | None":
        """Return the kind named by `value`, or None if it is unknown."""
        try:
            return cls(value)
        except ValueError:
            return None

    @property
    def is_wrapper(self) -> bool:
        return self in (TypeKind.LIST, TypeKind.NON_NULL)


# Kinds that define a top-level type; LIST and NON_NULL only wrap references.
TypeKind.NAMED = frozenset(
    {
        TypeKind.OBJECT,
        TypeKind.INTERFACE,
        TypeKind.ENUM,
        TypeKind.SCALAR,
        TypeKind.INPUT_OBJECT,
        TypeKind.UNION,
    }
)


class _IntrospectionModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class IntrospectionEnumValue(_IntrospectionModel):
    """One member of an enum type."""

    name: str | None = None
    description: str | None = None
    is_deprecated: bool | None = Field(default=None, alias="isDeprecated")
    deprecation_reason: str | None = Field(default=None, alias="deprecationReason")


class IntrospectionType(_IntrospectionModel):
    """A named type definition, or a type reference nested under `ofType`.

    LIST and NON_NULL references have no name and wrap `of_type`.
    """

    kind: str | None = None
    name: str | None = None
    description: str | None = None
    fields: list["IntrospectionField"] | None = None
    input_fields: list["IntrospectionField"] | None = Field(default=None, alias="inputFields")
    interfaces: list["IntrospectionType"] | None = None
    enum_values: list[IntrospectionEnumValue] | None = Field(default=None, alias="enumValues")
    possible_types: list["IntrospectionType"] | None = Field(default=None, alias="possibleTypes")
    of_type: "IntrospectionType | None" = Field(default=None, alias="ofType")

    @property
    def type_kind(self) -> TypeKind | None:
        return TypeKind.lookup(self.kind)

    @property
    def is_introspection_type(self) -> bool:
        """True for the server's own `__Schema`, `__Type`, ... types."""
        return bool(self.name) and self.name.startswith("__")


class IntrospectionField(_IntrospectionModel):
    """A field, input field or argument.

    Arguments share this shape; they never carry `args` of their own.
    """

    name: str | None = None
    description: str | None = None
    field_type: IntrospectionType | None = Field(default=None, alias="type")
    default_value: str | None = Field(default=None, alias="defaultValue")
    is_deprecated: bool | None = Field(default=None, alias="isDeprecated")
    deprecation_reason: str | None = Field(default=None, alias="deprecationReason")
    args: list["IntrospectionField"] | None = None


IntrospectionType.model_rebuild()
IntrospectionField.model_rebuild()


class IntrospectionSchema(_IntrospectionModel):
    """The `__schema` object: every type known to the server, in server order."""

    types: list[IntrospectionType] = Field(default_factory=list)


class IntrospectionResult(_IntrospectionModel):
    """Top-level introspection document, `{"__schema": {...}}`."""

    type_system: IntrospectionSchema = Field(alias="__schema")

    @property
    def types(self) -> list[IntrospectionType]:
        return self.type_system.types


def load_introspection(payload: dict[str, Any]) -> IntrospectionResult:
    """Validate an introspection document.

    Accepts the bare `{"__schema": ...}` document as well as a full GraphQL
    response wrapping it in `data`.

    Raises:
        MissingResultError: If the payload holds no `__schema`
        InvalidIntrospectionError: If the payload cannot be coerced to the model
    """
    if isinstance(payload, dict) and "__schema" not in payload and isinstance(payload.get("data"), dict):
        payload = payload["data"]

    if not isinstance(payload, dict) or payload.get("__schema") is None:
        raise MissingResultError("Introspection result is missing")

    try:
        return IntrospectionResult.model_validate(payload)
    except ValidationError as e:
        raise InvalidIntrospectionError(f"Invalid introspection result: {e}") from e


def load_introspection_file(path: str | Path) -> IntrospectionResult:
    """Read an introspection document from a JSON file."""
    try:
        with open(path, encoding="utf-8") as f:
            payload = json.load(f)
    except json.JSONDecodeError as e:
        raise InvalidIntrospectionError(f"{path} is not valid JSON: {e}") from e
    except UnicodeDecodeError as e:
        raise InvalidIntrospectionError(f"{path} is not valid UTF-8: {e}") from e
    except OSError as e:
        raise InvalidIntrospectionError(f"Cannot read {path}: {e}") from e
    return load_introspection(payload)
