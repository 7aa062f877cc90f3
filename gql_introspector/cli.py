"""Command-line interface for gql-introspector."""

import logging
from pathlib import Path

import click
import httpx

from .core.errors import IntrospectorError
from .core.executor import fetch_introspection
from .core.hooks import AddHeaderHook, FilterTypesHook, HookRunner
from .core.model import IntrospectionResult, load_introspection_file
from .core.renderer import ArgumentTypes, render_sdl
from .core.syntax import check_sdl_syntax
from .core.writer import write_sdl


def parse_header(value: str) -> tuple[str, str]:
    """Split a `Key: Value` header option."""
    key, sep, header_value = value.partition(":")
    if not sep or not key.strip():
        raise click.BadParameter(f"Expected 'Key: Value', got {value!r}", param_hint="--header")
    return key.strip(), header_value.strip()


def _configure_logging(verbose: bool):
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


_RENDER_OPTIONS = [
    click.option(
        "--output",
        "-o",
        required=True,
        type=click.Path(dir_okay=False),
        help="Output file for the SDL (e.g., schema.graphql).",
    ),
    click.option(
        "--declared-arg-types",
        is_flag=True,
        help="Render arguments with their own declared types instead of the field type.",
    ),
    click.option(
        "--check",
        is_flag=True,
        help="Parse the rendered SDL and fail if it is not valid syntax.",
    ),
    click.option(
        "--exclude-prefix",
        default=None,
        help="Skip types whose name starts with this prefix.",
    ),
    click.option(
        "--banner",
        default=None,
        help="Comment text written at the top of the SDL file.",
    ),
    click.option(
        "--verbose",
        "-v",
        is_flag=True,
        help="Enable verbose output.",
    ),
]


def render_options(func):
    """Options shared by every command that renders SDL."""
    for option in reversed(_RENDER_OPTIONS):
        func = option(func)
    return func


def _render_and_write(
    result: IntrospectionResult,
    output: str,
    declared_arg_types: bool,
    check: bool,
    exclude_prefix: str | None,
    banner: str | None,
    verbose: bool,
):
    hooks = HookRunner()
    if exclude_prefix:
        hooks.add_pre_hook(FilterTypesHook(exclude_prefix=exclude_prefix))
    if banner:
        hooks.add_post_hook(AddHeaderHook(banner))

    argument_types = ArgumentTypes.DECLARED if declared_arg_types else ArgumentTypes.FIELD

    click.echo("Rendering SDL...")
    sdl = render_sdl(result, argument_types, hooks)

    if verbose:
        click.echo(f"  Types: {len(result.types)}")
        click.echo(f"  Argument types: {argument_types.value}")

    if check:
        click.echo("Checking SDL syntax...")
        check_sdl_syntax(sdl)

    output_path = Path(output).resolve()
    click.echo(f"Writing to {output_path}...")
    write_sdl(sdl, output_path)
    click.echo(f"Done! Output: {output_path}")


@click.group()
@click.version_option(package_name="gql-introspector")
def main():
    """Convert GraphQL introspection results into SDL."""
    pass


@main.command()
@click.argument("url")
@click.option(
    "--header",
    "-H",
    "headers",
    multiple=True,
    help="Request header as 'Key: Value'. May be repeated.",
)
@click.option(
    "--bearer-token",
    envvar="GQL_INTROSPECTOR_TOKEN",
    default=None,
    help="Send 'Authorization: Bearer <token>' (env: GQL_INTROSPECTOR_TOKEN).",
)
@click.option(
    "--timeout",
    default=30.0,
    show_default=True,
    type=float,
    help="Request timeout in seconds.",
)
@render_options
def fetch(url: str, headers: tuple[str, ...], bearer_token: str | None, timeout: float, **options):
    """Introspect the GraphQL endpoint at URL and write its SDL.

    Examples:

        gql-introspector fetch https://api.github.com/graphql -o schema.graphql -H "User-Agent: me"

        GQL_INTROSPECTOR_TOKEN=... gql-introspector fetch https://api.example.com/graphql -o schema.graphql
    """
    _configure_logging(options["verbose"])
    request_headers = dict(parse_header(h) for h in headers)
    if bearer_token:
        request_headers["Authorization"] = f"Bearer {bearer_token}"

    try:
        click.echo(f"Introspecting {url}...")
        result = fetch_introspection(url, request_headers, timeout=timeout)
        _render_and_write(result, **options)
    except (IntrospectorError, httpx.HTTPError, OSError) as e:
        raise click.ClickException(str(e)) from e


@main.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
@render_options
def convert(source: str, **options):
    """Convert an introspection result saved as JSON in SOURCE into SDL.

    Examples:

        gql-introspector convert introspection.json -o schema.graphql
    """
    _configure_logging(options["verbose"])
    try:
        click.echo(f"Loading {source}...")
        result = load_introspection_file(source)
        _render_and_write(result, **options)
    except (IntrospectorError, OSError) as e:
        raise click.ClickException(str(e)) from e


if __name__ == "__main__":
    main()
