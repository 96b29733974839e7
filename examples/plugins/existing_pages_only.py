"""Link only to pages that exist; render the rest as plain text.

Uses "|" as the alias delimiter, a resolver backed by a set of known page
names and a renderer that checks the existence flag.
"""

from wikilink import (
    Markdown,
    WikiLink,
    new,
    with_alias_delimiter,
    with_render,
    with_resolve_destination,
)
from wikilink.utils.text import escape_html

PAGES = {"Home": "/index.html", "Changelog": "/changelog.html"}


def resolve(raw: str) -> tuple[str, bool]:
    name = raw.strip()
    return PAGES.get(name, ""), name in PAGES


def render_link(node: WikiLink) -> str:
    if not node.exists:
        return f'<span class="missing">{escape_html(node.alias)}</span>'
    return f'<a href="{escape_html(node.destination)}">{escape_html(node.alias)}</a>'


md = Markdown(
    extensions=[
        new(
            with_alias_delimiter("|"),
            with_resolve_destination(resolve),
            with_render(render_link),
        )
    ]
)

print(md("Back to [[Home|the start]], read the [[Changelog]] or the [[Roadmap]]."))
