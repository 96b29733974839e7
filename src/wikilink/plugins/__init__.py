"""Plugin system for the wikilink host pipeline.

Plugins (extensions) hook into two extension points:

1. Inline parsers: registered with the inline parser registry and called
   when one of their trigger characters is encountered.
2. Node renderers: registered with the renderer registry and called for
   every node of the types they handle.

Built-in plugins can be enabled by name; configured extension instances
can be passed directly.

Usage:
    >>> from wikilink import Markdown, new, with_alias_delimiter
    >>>
    >>> md = Markdown(plugins=["wikilink"])
    >>> html = md("[[Home]]")
    >>>
    >>> md = Markdown(extensions=[new(with_alias_delimiter("|"))])

Thread Safety:
All plugins are immutable. State is stored in AST nodes or passed as arguments.
Multiple threads can use the same plugin instances concurrently.

"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from wikilink.extension import WikiLinkExtension

if TYPE_CHECKING:
    from wikilink.registry import InlineParserRegistryBuilder, NodeRendererRegistryBuilder

__all__ = [
    "BUILTIN_PLUGINS",
    "Extension",
    "apply_plugins",
    "get_plugin",
    "register_plugin",
]


@runtime_checkable
class Extension(Protocol):
    """Protocol for host pipeline extensions.

    Thread Safety:
        Extensions must be immutable. All state should be in AST nodes.

    """

    @property
    def name(self) -> str:
        """Plugin identifier."""
        ...

    def extend_parser(self, builder: InlineParserRegistryBuilder) -> None:
        """Register inline parsers.

        Called once when a Markdown instance is created.
        """
        ...

    def extend_renderer(self, builder: NodeRendererRegistryBuilder) -> None:
        """Register node renderers.

        Called once when a Markdown instance is created.
        """
        ...


# Registry of built-in plugins
BUILTIN_PLUGINS: dict[str, type[Extension]] = {}


def register_plugin(
    name: str,
) -> Callable[[type[Extension]], type[Extension]]:
    """Decorator to register a plugin.

    Args:
        name: Plugin name for lookup

    Returns:
        Decorator function that registers and returns the class

    """

    def decorator(cls: type[Extension]) -> type[Extension]:
        BUILTIN_PLUGINS[name] = cls
        return cls

    return decorator


def get_plugin(name: str) -> Extension:
    """Get a built-in plugin instance by name.

    Args:
        name: Plugin name (e.g., "wikilink")

    Returns:
        Plugin instance with default configuration

    Raises:
        KeyError: If plugin name is not recognized

    """
    if name not in BUILTIN_PLUGINS:
        available = ", ".join(sorted(BUILTIN_PLUGINS.keys()))
        raise KeyError(f"Unknown plugin: {name!r}. Available: {available}")
    return BUILTIN_PLUGINS[name]()


def resolve_plugins(names: Iterable[str]) -> list[Extension]:
    """Instantiate built-in plugins by name; "all" expands to every plugin."""
    names = list(names)
    if "all" in names:
        names = list(BUILTIN_PLUGINS)
    return [get_plugin(name) for name in names]


def apply_plugins(
    extensions: Iterable[Extension],
    inline_builder: InlineParserRegistryBuilder,
    renderer_builder: NodeRendererRegistryBuilder,
) -> None:
    """Let each extension register its rules with the builders.

    Args:
        extensions: Extensions to apply, in order
        inline_builder: Inline parser registry builder to extend
        renderer_builder: Node renderer registry builder to extend

    """
    for extension in extensions:
        extension.extend_parser(inline_builder)
        extension.extend_renderer(renderer_builder)


register_plugin("wikilink")(WikiLinkExtension)

__all__ += ["WikiLinkExtension", "resolve_plugins"]
