"""wikilink renderers.

- HtmlRenderer: renders the AST to HTML through a node renderer registry
- WikiLinkRenderer: adapts a wikilink render function to that registry

Thread Safety:
Per-render state lives in a RenderContext local to each render() call.
Safe for concurrent use from multiple threads.

"""

from wikilink.renderers.html import HtmlRenderer, RenderContext, create_default_builder
from wikilink.renderers.wikilink import RenderFunc, WikiLinkRenderer, default_render

__all__ = [
    "HtmlRenderer",
    "RenderContext",
    "RenderFunc",
    "WikiLinkRenderer",
    "create_default_builder",
    "default_render",
]
