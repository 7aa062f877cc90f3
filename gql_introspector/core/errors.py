"""Exceptions raised by gql-introspector.

Transport failures are not wrapped: httpx exceptions reach the caller as-is.
"""

from typing import Any


class IntrospectorError(Exception):
    """Base class for all gql-introspector errors."""


class GraphQLError(IntrospectorError):
    """Exception raised when the server answers with a GraphQL errors array."""

    def __init__(self, message: str, errors: list[dict[str, Any]]):
        self.message = message
        self.errors = errors
        super().__init__(message)


class MissingResultError(IntrospectorError):
    """No introspection result is available to render."""


class InvalidIntrospectionError(IntrospectorError):
    """The introspection document does not have the expected shape."""


class InvalidResponseError(IntrospectorError):
    """The server answered with a body that is not a JSON object."""


class EmptyOutputError(IntrospectorError):
    """There is no SDL text to write."""


class SDLSyntaxError(IntrospectorError):
    """Rendered SDL could not be parsed."""

    def __init__(self, message: str, source_error: Exception | None = None):
        self.source_error = source_error
        super().__init__(message)
