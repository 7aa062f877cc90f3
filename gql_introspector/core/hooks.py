"""Render hooks for customizing SDL output.

Provides protocols for pre- and post-render hooks that can filter the
introspected types before rendering or transform the SDL text after.

Example usage:
    from gql_introspector.core.hooks import PreRenderHook, PostRenderHook

    # Pre-render hook to drop relay plumbing
    class DropConnections(PreRenderHook):
        def pre_render(self, types):
            return [t for t in types if not (t.name or "").endswith("Connection")]

    # Post-render hook to add a header
    class AddNotice(PostRenderHook):
        def post_render(self, sdl):
            return "# Do not edit\\n\\n" + sdl
"""

from typing import Protocol, runtime_checkable

from .model import IntrospectionType


@runtime_checkable
class PreRenderHook(Protocol):
    """Protocol for pre-render hooks.

    Pre-render hooks receive the top-level types before rendering and
    return the types to render, in the order they should appear.
    """

    def pre_render(self, types: list[IntrospectionType]) -> list[IntrospectionType]:
        """Called before rendering.

        Args:
            types: The top-level introspected types

        Returns:
            The (possibly filtered) types to render
        """
        ...


@runtime_checkable
class PostRenderHook(Protocol):
    """Protocol for post-render hooks.

    Post-render hooks receive the rendered SDL and can transform it before
    it is written to disk.
    """

    def post_render(self, sdl: str) -> str:
        """Called after rendering.

        Args:
            sdl: The rendered SDL text

        Returns:
            The (possibly transformed) SDL text
        """
        ...


class AddHeaderHook:
    """Built-in hook to prepend a comment block to the SDL.

    Example:
        hook = AddHeaderHook("Generated from https://api.example.com/graphql")
    """

    def __init__(self, header: str):
        self.header = header

    def post_render(self, sdl: str) -> str:
        """Add the header, one `#` comment per line, before the SDL."""
        if not sdl:
            return sdl
        lines = self.header.rstrip("\n").splitlines()
        comment = "".join(f"# {line}\n" if line else "#\n" for line in lines)
        return comment + "\n" + sdl


class FilterTypesHook:
    """Built-in hook to filter types by name prefix/suffix.

    Example:
        # Remove all types starting with an underscore
        hook = FilterTypesHook(exclude_prefix="_")
    """

    def __init__(
        self,
        exclude_prefix: str | None = None,
        exclude_suffix: str | None = None,
        include_prefix: str | None = None,
        include_suffix: str | None = None,
    ):
        self.exclude_prefix = exclude_prefix
        self.exclude_suffix = exclude_suffix
        self.include_prefix = include_prefix
        self.include_suffix = include_suffix

    def _should_include(self, name: str) -> bool:
        """Check if a type should be included."""
        if self.exclude_prefix and name.startswith(self.exclude_prefix):
            return False
        if self.exclude_suffix and name.endswith(self.exclude_suffix):
            return False
        if self.include_prefix and not name.startswith(self.include_prefix):
            return False
        if self.include_suffix and not name.endswith(self.include_suffix):
            return False
        return True

    def pre_render(self, types: list[IntrospectionType]) -> list[IntrospectionType]:
        """Filter types by name; unnamed types pass through untouched."""
        return [t for t in types if not t.name or self._should_include(t.name)]


class HookRunner:
    """Runs a collection of hooks in order."""

    def __init__(self):
        self.pre_hooks: list[PreRenderHook] = []
        self.post_hooks: list[PostRenderHook] = []

    def add_pre_hook(self, hook: PreRenderHook):
        """Add a pre-render hook."""
        self.pre_hooks.append(hook)

    def add_post_hook(self, hook: PostRenderHook):
        """Add a post-render hook."""
        self.post_hooks.append(hook)

    def run_pre_hooks(self, types: list[IntrospectionType]) -> list[IntrospectionType]:
        """Run all pre-render hooks in order."""
        for hook in self.pre_hooks:
            types = hook.pre_render(types)
        return types

    def run_post_hooks(self, sdl: str) -> str:
        """Run all post-render hooks in order."""
        for hook in self.post_hooks:
            sdl = hook.post_render(sdl)
        return sdl
