"""Core modules for GraphQL introspection to SDL conversion."""

from .errors import (
    EmptyOutputError,
    GraphQLError,
    IntrospectorError,
    InvalidIntrospectionError,
    InvalidResponseError,
    MissingResultError,
    SDLSyntaxError,
)
from .executor import GraphQLExecutor, fetch_introspection
from .hooks import (
    AddHeaderHook,
    FilterTypesHook,
    HookRunner,
    PostRenderHook,
    PreRenderHook,
)
from .introspector import Introspector
from .model import (
    IntrospectionEnumValue,
    IntrospectionField,
    IntrospectionResult,
    IntrospectionSchema,
    IntrospectionType,
    TypeKind,
    load_introspection,
    load_introspection_file,
)
from .query import INTROSPECTION_QUERY
from .renderer import (
    ArgumentTypes,
    SDLRenderer,
    build_implements_index,
    format_type_ref,
    render_sdl,
)
from .syntax import check_sdl_syntax
from .writer import write_sdl

__all__ = [
    # Errors
    "IntrospectorError",
    "GraphQLError",
    "MissingResultError",
    "InvalidIntrospectionError",
    "InvalidResponseError",
    "EmptyOutputError",
    "SDLSyntaxError",
    # Model
    "TypeKind",
    "IntrospectionEnumValue",
    "IntrospectionField",
    "IntrospectionType",
    "IntrospectionSchema",
    "IntrospectionResult",
    "load_introspection",
    "load_introspection_file",
    # Transport
    "INTROSPECTION_QUERY",
    "GraphQLExecutor",
    "fetch_introspection",
    # Hooks
    "PreRenderHook",
    "PostRenderHook",
    "AddHeaderHook",
    "FilterTypesHook",
    "HookRunner",
    # Rendering
    "ArgumentTypes",
    "SDLRenderer",
    "build_implements_index",
    "format_type_ref",
    "render_sdl",
    "check_sdl_syntax",
    # Output
    "write_sdl",
    # Pipeline
    "Introspector",
]
