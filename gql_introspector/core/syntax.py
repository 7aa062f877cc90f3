"""Syntax check for rendered SDL using graphql-core's parser."""

from graphql import GraphQLSyntaxError, parse

from .errors import SDLSyntaxError


def check_sdl_syntax(sdl: str) -> None:
    """Parse `sdl` and raise SDLSyntaxError if it is not valid SDL syntax.

    Only the grammar is checked. Unknown type references and other schema
    level problems are not reported.
    """
    try:
        parse(sdl, no_location=True)
    except GraphQLSyntaxError as e:
        raise SDLSyntaxError(f"Rendered SDL is not valid: {e.message}", e) from e
