"""
wikilink — ``[[destination:alias]]`` links for a small Markdown pipeline.

Recognizes ``[[destination]]`` and ``[[destination:alias]]`` inside
paragraph text, resolves the destination with a pluggable resolver and
renders each link with a pluggable render function.

Quick Start:
    >>> from wikilink import parse, render
    >>> doc = parse("[[Wiki Link:With Some Alias]]")
    >>> render(doc)
    '<p><a href="wiki-link">With Some Alias</a></p>\\n'

    >>> # Custom delimiter, resolver and renderer
    >>> from wikilink import Markdown, new, with_alias_delimiter, with_resolve_destination
    >>> ext = new(
    ...     with_alias_delimiter("|"),
    ...     with_resolve_destination(lambda raw: (f"/notes/{raw}", raw in known)),
    ... )
    >>> md = Markdown(extensions=[ext])
    >>> html = md("[[Home|Start here]]")

"""

from collections.abc import Iterable, Sequence

from wikilink.config import (
    DEFAULT_CONFIG,
    Option,
    ParseConfig,
    WikiLinkConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
    with_alias_delimiter,
    with_render,
    with_resolve_destination,
)
from wikilink.errors import ConfigError, PluginError, RenderError, WikiLinkError
from wikilink.extension import (
    INLINE_PRIORITY,
    RENDER_PRIORITY,
    WIKILINK,
    WikiLinkExtension,
    new,
)
from wikilink.location import SourceLocation
from wikilink.nodes import Block, Document, Inline, Node, Paragraph, SoftBreak, Text, WikiLink
from wikilink.parser import Parser
from wikilink.plugins import Extension, apply_plugins, resolve_plugins
from wikilink.registry import InlineParserRegistryBuilder
from wikilink.renderers.html import HtmlRenderer, create_default_builder
from wikilink.renderers.wikilink import RenderFunc, default_render
from wikilink.resolver import ResolveDestinationFunc, default_resolve_destination
from wikilink.scanner import WikiLinkParser, WikiLinkSpan, scan_wikilink
from wikilink.serialization import to_dict, to_json
from wikilink.visitor import BaseVisitor, collect_wikilinks

__version__ = "0.1.0"


def parse(
    source: str,
    *,
    source_file: str | None = None,
    extensions: Sequence[Extension] | None = None,
) -> Document:
    """Parse Markdown source into a typed AST.

    Args:
        source: Markdown source text
        source_file: Optional source file path for node locations
        extensions: Extensions to enable (the default wikilink extension if None)

    Returns:
        Document AST root node

    """
    return Markdown(extensions=_default_extensions(extensions)).parse(
        source, source_file=source_file
    )


def render(doc: Document, *, extensions: Sequence[Extension] | None = None) -> str:
    """Render a Document AST to HTML.

    Args:
        doc: Document AST to render
        extensions: Extensions whose renderers to use (the default wikilink
            extension if None)

    Returns:
        HTML string

    """
    return Markdown(extensions=_default_extensions(extensions)).render(doc)


def _default_extensions(extensions: Sequence[Extension] | None) -> Sequence[Extension]:
    return (WIKILINK,) if extensions is None else extensions


class Markdown:
    """High-level Markdown processor.

    Registries are built once from the enabled plugins and extensions and
    reused for every call.

    Usage:
        >>> md = Markdown(plugins=["wikilink"])
        >>> md("[[Regular Wiki Link]]")
        '<p><a href="regular-wiki-link">Regular Wiki Link</a></p>\\n'

    Thread Safety:
        Uses ContextVar for thread-local parse configuration. Safe to use
        multiple Markdown instances concurrently from different threads.

    """

    __slots__ = ("_config", "_extensions", "_renderer")

    def __init__(
        self,
        *,
        plugins: Iterable[str] | None = None,
        extensions: Iterable[Extension] | None = None,
    ) -> None:
        """Initialize Markdown processor.

        Args:
            plugins: Built-in plugin names to enable (e.g., ["wikilink"]).
                Use ["all"] to enable all built-in plugins.
            extensions: Configured extension instances, applied after plugins
        """
        self._extensions: tuple[Extension, ...] = (
            *resolve_plugins(plugins or ()),
            *(extensions or ()),
        )

        inline_builder = InlineParserRegistryBuilder()
        renderer_builder = create_default_builder()
        apply_plugins(self._extensions, inline_builder, renderer_builder)

        # Build immutable config once (thread-safe, reused across calls)
        self._config = ParseConfig(inline_registry=inline_builder.build())
        self._renderer = HtmlRenderer(renderer_builder.build())

    @property
    def extensions(self) -> tuple[Extension, ...]:
        return self._extensions

    def __call__(self, source: str) -> str:
        """Parse and render Markdown in one call."""
        return self.render(self.parse(source))

    def parse(self, source: str, *, source_file: str | None = None) -> Document:
        """Parse Markdown source into AST.

        Args:
            source: Markdown source text
            source_file: Optional source file path for node locations

        Returns:
            Document AST root node

        """
        set_parse_config(self._config)
        try:
            blocks = Parser(source, source_file=source_file).parse()
            loc = SourceLocation(
                lineno=1,
                col_offset=1,
                offset=0,
                end_offset=len(source),
                source_file=source_file,
            )
            return Document(location=loc, children=tuple(blocks))
        finally:
            reset_parse_config()

    def render(self, doc: Document) -> str:
        """Render AST to HTML."""
        return self._renderer.render(doc)


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "parse",
    "render",
    "Markdown",
    # Nodes
    "Node",
    "Block",
    "Inline",
    "Document",
    "Paragraph",
    "Text",
    "SoftBreak",
    "WikiLink",
    # Scanner
    "scan_wikilink",
    "WikiLinkSpan",
    "WikiLinkParser",
    # Resolver
    "ResolveDestinationFunc",
    "default_resolve_destination",
    # Renderer
    "RenderFunc",
    "default_render",
    "HtmlRenderer",
    # Extension wiring
    "WIKILINK",
    "WikiLinkExtension",
    "Extension",
    "new",
    "Option",
    "with_alias_delimiter",
    "with_resolve_destination",
    "with_render",
    "INLINE_PRIORITY",
    "RENDER_PRIORITY",
    # Configuration
    "DEFAULT_CONFIG",
    "WikiLinkConfig",
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Parser
    "Parser",
    # Inspection
    "BaseVisitor",
    "collect_wikilinks",
    "to_dict",
    "to_json",
    # Errors
    "WikiLinkError",
    "ConfigError",
    "PluginError",
    "RenderError",
    # Location
    "SourceLocation",
]
