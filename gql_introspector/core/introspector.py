"""Fluent fetch -> build -> write pipeline.

Example:
    (
        Introspector()
        .add("Authorization", "Bearer <TOKEN>")
        .add("User-Agent", "Awesome-Octocat-App")
        .get_schema("https://api.github.com/graphql")
        .build()
        .write("./schema.graphql")
    )
"""

from pathlib import Path
from typing import Any

import httpx

from .errors import MissingResultError
from .executor import fetch_introspection
from .hooks import HookRunner
from .model import IntrospectionResult, load_introspection
from .renderer import ArgumentTypes, render_sdl
from .writer import write_sdl


class Introspector:
    """Collects headers, fetches an introspection result and renders it as SDL.

    Each stage keeps its output on the instance: `result` after
    `get_schema`/`load`, `sdl` after `build`.
    """

    def __init__(
        self,
        *,
        timeout: float = 30.0,
        argument_types: ArgumentTypes = ArgumentTypes.FIELD,
        hooks: HookRunner | None = None,
        client: httpx.Client | None = None,
    ):
        self.headers: dict[str, str] = {}
        self.timeout = timeout
        self.argument_types = argument_types
        self.hooks = hooks
        self.result: IntrospectionResult | None = None
        self.sdl = ""
        self._client = client

    def add(self, key: str, value: str) -> "Introspector":
        """Add a header sent with the introspection request."""
        self.headers[key] = value
        return self

    def get_schema(self, url: str) -> "Introspector":
        """Fetch the introspection result from `url`."""
        self.result = fetch_introspection(
            url, self.headers, timeout=self.timeout, client=self._client
        )
        return self

    def load(self, payload: dict[str, Any] | IntrospectionResult) -> "Introspector":
        """Use an introspection document obtained elsewhere."""
        if isinstance(payload, IntrospectionResult):
            self.result = payload
        else:
            self.result = load_introspection(payload)
        return self

    def build(self) -> "Introspector":
        """Render the stored result as SDL.

        Raises:
            MissingResultError: If no result was fetched or loaded
        """
        if self.result is None:
            raise MissingResultError("Introspection result is missing")
        self.sdl = render_sdl(self.result, self.argument_types, self.hooks)
        return self

    def write(self, path: str | Path) -> Path:
        """Write the built SDL to `path`.

        Raises:
            EmptyOutputError: If nothing was built or the schema rendered empty
        """
        return write_sdl(self.sdl, path)
