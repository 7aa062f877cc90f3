"""SDL renderer for introspected schemas.

Walks the top-level types in server order and emits one SDL block per
object, interface, enum, scalar, input object and union type. A malformed
type or field only degrades its own output; rendering always continues.
"""

import logging
from enum import Enum
from typing import Collection, Iterable

from .errors import MissingResultError
from .hooks import HookRunner
from .model import IntrospectionField, IntrospectionResult, IntrospectionType, TypeKind

logger = logging.getLogger(__name__)


class ArgumentTypes(str, Enum):
    """How field argument types are rendered.

    FIELD reproduces the historical output, where every argument is shown
    with the return type of the field it belongs to. Existing golden files
    depend on it, so it stays the default. DECLARED renders each argument's
    own type.
    """

    FIELD = "field"
    DECLARED = "declared"


def build_implements_index(
    types: Iterable[IntrospectionType],
    exclude: Collection[str] = (),
) -> dict[str, list[str]]:
    """Map object type names to the interface names they implement.

    Types without interfaces are absent from the mapping. Entries with no
    name are skipped, as are interfaces named in `exclude`.
    """
    index: dict[str, list[str]] = {}
    for t in types:
        if not t.interfaces:
            continue
        if not t.name:
            logger.warning("Skipping interfaces of a type without a name")
            continue
        names = [iface.name for iface in t.interfaces if iface.name and iface.name not in exclude]
        if names:
            index[t.name] = names
    return index


def format_type_ref(type_ref: IntrospectionType | None) -> str:
    """Format a type reference, e.g. `NON_NULL(LIST(String))` as `[String]!`.

    Returns an empty string for references that cannot be rendered, including
    wrappers whose inner reference was cut off by the query depth.
    """
    if type_ref is None:
        return ""

    if type_ref.of_type is not None:
        inner = format_type_ref(type_ref.of_type)
        if not inner:
            return ""
        kind = type_ref.type_kind
        if kind is TypeKind.LIST:
            return f"[{inner}]"
        if kind is TypeKind.NON_NULL:
            return f"{inner}!"
        return inner

    return type_ref.name or ""


class SDLRenderer:
    """Renders introspected types as SDL text.

    A renderer holds no state between calls; `render` may be called any
    number of times.
    """

    def __init__(self, argument_types: ArgumentTypes = ArgumentTypes.FIELD):
        self.argument_types = ArgumentTypes(argument_types)

    def render(
        self,
        types: list[IntrospectionType],
        implements: dict[str, list[str]] | None = None,
    ) -> str:
        """Render every renderable type in `types`, in order.

        `implements` defaults to the index built from `types`.
        """
        logger.debug("Rendering %d types (argument types: %s)", len(types), self.argument_types.value)
        if implements is None:
            implements = build_implements_index(types)
        parts: list[str] = []

        for t in types:
            if not t.name or t.is_introspection_type:
                continue

            kind = t.type_kind
            if kind is None or kind not in TypeKind.NAMED:
                logger.warning("Unhandled type kind %r for type %s", t.kind, t.name)
                continue

            if kind is TypeKind.OBJECT:
                parts.append(self._object_type(t, implements.get(t.name, [])))
            elif kind is TypeKind.INTERFACE:
                parts.append(self._interface_type(t))
            elif kind is TypeKind.ENUM:
                parts.append(self._enum_type(t))
            elif kind is TypeKind.SCALAR:
                parts.append(f"scalar {t.name}\n\n")
            elif kind is TypeKind.INPUT_OBJECT:
                parts.append(self._input_object_type(t))
            elif kind is TypeKind.UNION:
                parts.append(self._union_type(t))

        return "".join(parts)

    def _object_type(self, t: IntrospectionType, interfaces: list[str]) -> str:
        header = f"type {t.name}"
        if interfaces:
            header += f" implements {' & '.join(interfaces)}"
        return self._block(header, self._field_lines(t))

    def _interface_type(self, t: IntrospectionType) -> str:
        return self._block(f"interface {t.name}", self._field_lines(t))

    def _enum_type(self, t: IntrospectionType) -> str:
        # Deprecated values are kept; deprecation is not rendered.
        lines = [f"  {value.name}" for value in t.enum_values or [] if value.name]
        return self._block(f"enum {t.name}", lines)

    def _input_object_type(self, t: IntrospectionType) -> str:
        lines = []
        for input_field in t.input_fields or []:
            field_type = format_type_ref(input_field.field_type)
            if not input_field.name or not field_type:
                logger.warning("Skipping malformed input field %r on %s", input_field.name, t.name)
                continue
            lines.append(f"  {input_field.name}: {field_type}")
        return self._block(f"input {t.name}", lines)

    def _union_type(self, t: IntrospectionType) -> str:
        members = [p.name for p in t.possible_types or [] if p.name]
        return f"union {t.name} = {' | '.join(members)}\n\n"

    def _field_lines(self, t: IntrospectionType) -> list[str]:
        lines = []
        for f in t.fields or []:
            line = self._field_line(f)
            if line is None:
                logger.warning("Skipping malformed field %r on %s", f.name, t.name)
                continue
            lines.append(line)
        return lines

    def _field_line(self, f: IntrospectionField) -> str | None:
        field_type = format_type_ref(f.field_type)
        if not f.name or not field_type:
            return None

        args = []
        for arg in f.args or []:
            arg_type = self._argument_type(f, arg)
            if not arg.name or not arg_type:
                logger.warning("Skipping malformed argument %r of field %s", arg.name, f.name)
                continue
            args.append(f"{arg.name}: {arg_type}")
        if args:
            return f"  {f.name}({', '.join(args)}): {field_type}"
        return f"  {f.name}: {field_type}"

    def _argument_type(self, f: IntrospectionField, arg: IntrospectionField) -> str:
        if self.argument_types is ArgumentTypes.DECLARED:
            return format_type_ref(arg.field_type)
        return format_type_ref(f.field_type)

    @staticmethod
    def _block(header: str, lines: list[str]) -> str:
        body = "".join(f"{line}\n" for line in lines)
        return f"{header} {{\n{body}}}\n\n"


def render_sdl(
    result: IntrospectionResult | None,
    argument_types: ArgumentTypes = ArgumentTypes.FIELD,
    hooks: HookRunner | None = None,
) -> str:
    """Render an introspection result as SDL.

    Args:
        result: The introspection result to render
        argument_types: How field argument types are rendered
        hooks: Optional hooks run before and after rendering

    Raises:
        MissingResultError: If `result` is None
    """
    if result is None:
        raise MissingResultError("Introspection result is missing")

    types = list(result.types)
    implements = None
    if hooks is not None:
        types = hooks.run_pre_hooks(types)
        # Interfaces dropped by a pre-hook must not be named in implements clauses
        removed = {t.name for t in result.types} - {t.name for t in types}
        implements = build_implements_index(types, exclude=removed)

    sdl = SDLRenderer(argument_types).render(types, implements)

    if hooks is not None:
        sdl = hooks.run_post_hooks(sdl)
    return sdl
