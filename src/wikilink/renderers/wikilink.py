"""Rendering of WikiLink nodes.

A render function turns one WikiLink into markup. It is called once per
node, in document order, and must not depend on mutating the node (nodes
are frozen). It may use any field, including ``exists``:

    >>> def render_missing_as_text(node: WikiLink) -> str:
    ...     if not node.exists:
    ...         return escape_html(node.alias)
    ...     return default_render(node)

Thread Safety:
WikiLinkRenderer is immutable. Render functions shared between threads
must be pure or internally synchronized.

"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from wikilink.nodes import WikiLink
from wikilink.utils.text import escape_html

if TYPE_CHECKING:
    from wikilink.registry import NodeRendererRegistrar
    from wikilink.renderers.html import RenderContext

type RenderFunc = Callable[[WikiLink], str]


def default_render(node: WikiLink) -> str:
    """Render a wikilink as a plain anchor, whether or not the target exists.

    Destination and alias are HTML-escaped, so an alias such as
    ``<em>x</em>`` or ``&copy;`` shows up literally instead of being
    written into the anchor as raw markup.

    Examples:
        >>> loc = SourceLocation.unknown()
        >>> default_render(WikiLink(loc, "Home", "Start", "home", True))
        '<a href="home">Start</a>'
    """
    return f'<a href="{escape_html(node.destination)}">{escape_html(node.alias)}</a>'


class WikiLinkRenderer:
    """Node renderer writing the output of a RenderFunc for each WikiLink."""

    __slots__ = ("_render_func",)

    def __init__(self, render_func: RenderFunc) -> None:
        self._render_func = render_func

    def register_funcs(self, registrar: NodeRendererRegistrar) -> None:
        registrar.register_func(WikiLink, self._render)

    def _render(self, node: WikiLink, ctx: RenderContext) -> None:
        ctx.write(self._render_func(node))
