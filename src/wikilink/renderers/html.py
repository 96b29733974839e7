"""HTML renderer dispatching on node type through a renderer registry.

Built-in handlers cover the host nodes (Document, Paragraph, Text,
SoftBreak) and are registered at HOST_PRIORITY. Extensions register their
own handlers at a lower number to add node types or override built-ins.

A node type without a handler falls back to rendering its children; a leaf
node without a handler is a RenderError.

Thread Safety:
All per-render state is encapsulated in RenderContext, created fresh for each
render() call. Multiple threads can safely share a single HtmlRenderer instance
and call render() concurrently without synchronization.

"""

from __future__ import annotations

from dataclasses import dataclass, field

from wikilink.errors import RenderError
from wikilink.nodes import Document, Node, Paragraph, SoftBreak, Text
from wikilink.registry import (
    HOST_PRIORITY,
    NodeRendererRegistrar,
    NodeRendererRegistry,
    NodeRendererRegistryBuilder,
)
from wikilink.utils.logger import get_logger
from wikilink.utils.text import escape_html

logger = get_logger(__name__)


@dataclass(slots=True)
class RenderContext:
    """Per-render mutable state.

    Created fresh for each render() call. Handlers append output with
    write() and render nested nodes with render_children().
    """

    renderer: HtmlRenderer
    parts: list[str] = field(default_factory=list)

    def write(self, s: str) -> None:
        """Append rendered output (empty strings are skipped)."""
        if s:
            self.parts.append(s)

    def render_children(self, node: Node) -> None:
        for child in getattr(node, "children", ()):
            self.renderer.render_node(child, self)

    def build(self) -> str:
        return "".join(self.parts)


class HostNodeRenderer:
    """Render functions for the host's own node types."""

    __slots__ = ()

    def register_funcs(self, registrar: NodeRendererRegistrar) -> None:
        registrar.register_func(Document, self._render_document)
        registrar.register_func(Paragraph, self._render_paragraph)
        registrar.register_func(Text, self._render_text)
        registrar.register_func(SoftBreak, self._render_soft_break)

    def _render_document(self, node: Document, ctx: RenderContext) -> None:
        ctx.render_children(node)

    def _render_paragraph(self, node: Paragraph, ctx: RenderContext) -> None:
        ctx.write("<p>")
        ctx.render_children(node)
        ctx.write("</p>\n")

    def _render_text(self, node: Text, ctx: RenderContext) -> None:
        ctx.write(escape_html(node.content))

    def _render_soft_break(self, node: SoftBreak, ctx: RenderContext) -> None:
        ctx.write("\n")


def create_default_builder() -> NodeRendererRegistryBuilder:
    """Builder pre-loaded with the host node renderers."""
    return NodeRendererRegistryBuilder().register(HostNodeRenderer(), HOST_PRIORITY)


class HtmlRenderer:
    """Render AST to HTML.

    Usage:
        >>> builder = create_default_builder()
        >>> WIKILINK.extend_renderer(builder)
        >>> renderer = HtmlRenderer(builder.build())
        >>> renderer.render(doc)
        '<p><a href="home">Home</a></p>\\n'

    Thread Safety:
        Multiple threads can safely share a single HtmlRenderer instance.
        Each render() call creates an independent RenderContext.
    """

    __slots__ = ("_registry",)

    def __init__(self, registry: NodeRendererRegistry | None = None) -> None:
        """Initialize renderer.

        Args:
            registry: Node renderer registry (host renderers only if None)
        """
        self._registry = registry if registry is not None else create_default_builder().build()

    def render(self, node: Document) -> str:
        """Render document AST to HTML string."""
        ctx = RenderContext(renderer=self)
        self.render_node(node, ctx)
        return ctx.build()

    def render_node(self, node: Node, ctx: RenderContext) -> None:
        """Render one node with its registered handler, or fall back."""
        func = self._registry.get(type(node))
        if func is not None:
            func(node, ctx)
            return

        if hasattr(node, "children"):
            logger.debug("No renderer for %s, rendering children", node.kind)
            ctx.render_children(node)
            return

        raise RenderError(f"No renderer registered for node kind {node.kind!r} at {node.location}")
