"""Wikilink extension: one scanner rule plus one renderer, configured together.

Usage:
    >>> from wikilink import Markdown, WIKILINK, new, with_alias_delimiter
    >>> Markdown(extensions=[WIKILINK])("[[Wiki Link:With Some Alias]]")
    '<p><a href="wiki-link">With Some Alias</a></p>\\n'
    >>>
    >>> piped = new(with_alias_delimiter("|"))
    >>> Markdown(extensions=[piped])("[[Home|Start here]]")
    '<p><a href="home">Start here</a></p>\\n'

Thread Safety:
Extensions are immutable. WIKILINK is built once at import and never
written afterwards.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from wikilink.config import DEFAULT_CONFIG, Option, WikiLinkConfig, apply_options
from wikilink.renderers.wikilink import WikiLinkRenderer
from wikilink.scanner import WikiLinkParser

if TYPE_CHECKING:
    from wikilink.registry import InlineParserRegistryBuilder, NodeRendererRegistryBuilder

# Runs before generic "[" handling such as standard links (200).
INLINE_PRIORITY = 150
# Takes precedence over the host's built-in node renderers (1000).
RENDER_PRIORITY = 500


class WikiLinkExtension:
    """Extension registering wikilink parsing and rendering with a host.

    Thread Safety:
        Immutable after creation. Safe to share across threads.

    """

    __slots__ = ("_config",)

    def __init__(self, config: WikiLinkConfig = DEFAULT_CONFIG) -> None:
        self._config = config

    @property
    def name(self) -> str:
        return "wikilink"

    @property
    def config(self) -> WikiLinkConfig:
        return self._config

    def extend_parser(self, builder: InlineParserRegistryBuilder) -> None:
        """Register the wikilink inline parser for the ``[`` trigger."""
        builder.register(
            WikiLinkParser(
                alias_delimiter=self._config.alias_delimiter,
                resolve_destination=self._config.resolve_destination,
            ),
            INLINE_PRIORITY,
        )

    def extend_renderer(self, builder: NodeRendererRegistryBuilder) -> None:
        """Register the WikiLink node renderer."""
        builder.register(WikiLinkRenderer(self._config.render), RENDER_PRIORITY)

    def __repr__(self) -> str:
        return f"WikiLinkExtension({self._config!r})"


def new(*options: Option) -> WikiLinkExtension:
    """Create a wikilink extension from the defaults plus ``options``.

    Args:
        *options: Options from with_alias_delimiter(), with_resolve_destination()
            and with_render(), applied in order

    Returns:
        Configured extension
    """
    return WikiLinkExtension(apply_options(DEFAULT_CONFIG, *options))


# Extension configured with default options.
WIKILINK: WikiLinkExtension = WikiLinkExtension(DEFAULT_CONFIG)
