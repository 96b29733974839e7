"""End-to-end tests: Markdown source in, HTML out."""

from __future__ import annotations

from wikilink import (
    WIKILINK,
    Markdown,
    WikiLink,
    new,
    parse,
    render,
    with_alias_delimiter,
    with_render,
    with_resolve_destination,
)
from wikilink.nodes import Paragraph, Text


class TestDefaultExtension:
    """The extension with default options."""

    def test_mixed_links_and_non_links(self) -> None:
        source = "[[Wiki Link:With Some Alias]] [[Regular Wiki Link]] [[]] [[:]] [[:a]] [[a:]]"
        expected = (
            '<p><a href="wiki-link">With Some Alias</a> '
            '<a href="regular-wiki-link">Regular Wiki Link</a> '
            "[[]] "
            '<a href=":">:</a> '
            '<a href=":a">:a</a> '
            '<a href="a:">a:</a></p>\n'
        )
        assert Markdown(extensions=[WIKILINK])(source) == expected

    def test_plugin_name(self) -> None:
        assert Markdown(plugins=["wikilink"])("[[Home]]") == '<p><a href="home">Home</a></p>\n'

    def test_all_plugins(self) -> None:
        assert Markdown(plugins=["all"])("[[Home]]") == '<p><a href="home">Home</a></p>\n'

    def test_module_level_parse_and_render(self) -> None:
        doc = parse("[[Home:Start]]")
        assert render(doc) == '<p><a href="home">Start</a></p>\n'

    def test_plain_text_unchanged(self) -> None:
        assert Markdown(plugins=["wikilink"])("no links [here] at all") == (
            "<p>no links [here] at all</p>\n"
        )

    def test_unterminated_link_is_text(self) -> None:
        assert Markdown(plugins=["wikilink"])("[[foo and more") == "<p>[[foo and more</p>\n"

    def test_link_cannot_span_lines(self) -> None:
        assert Markdown(plugins=["wikilink"])("[[foo\nbar]]") == "<p>[[foo\nbar]]</p>\n"

    def test_adjacent_links(self) -> None:
        assert Markdown(plugins=["wikilink"])("[[a]][[b]]") == (
            '<p><a href="a">a</a><a href="b">b</a></p>\n'
        )

    def test_scanning_resumes_after_close(self) -> None:
        assert Markdown(plugins=["wikilink"])("[[a]]]] [[b]]") == (
            '<p><a href="a">a</a>]] <a href="b">b</a></p>\n'
        )

    def test_paragraphs(self) -> None:
        html = Markdown(plugins=["wikilink"])("[[A]] first\n\n  [[B]] second  \n")
        assert html == (
            '<p><a href="a">A</a> first</p>\n<p><a href="b">B</a> second</p>\n'
        )

    def test_text_is_escaped(self) -> None:
        assert Markdown(plugins=["wikilink"])("a < b [[x:<b>]]") == (
            '<p>a &lt; b <a href="x">&lt;b&gt;</a></p>\n'
        )

    def test_lone_surrogate_in_destination(self) -> None:
        html = Markdown(plugins=["wikilink"])("[[a\udc80b]]")
        assert html == '<p><a href="a%80b">a\udc80b</a></p>\n'

    def test_without_extension_links_are_text(self) -> None:
        assert Markdown()("[[Home]]") == "<p>[[Home]]</p>\n"


class TestConfiguredExtension:
    """Custom delimiter, resolver and renderer together."""

    def test_existence_aware_rendering(self) -> None:
        def resolve(raw: str) -> tuple[str, bool]:
            return "path", raw == "Exists"

        def render_link(node: WikiLink) -> str:
            if not node.exists:
                return node.alias
            return f'<a href="{node.destination}">{node.alias}</a>'

        ext = new(
            with_alias_delimiter("|"),
            with_resolve_destination(resolve),
            with_render(render_link),
        )
        html = Markdown(extensions=[ext])("[[Exists|Alias]] [[Does not exist]]")
        assert html == '<p><a href="path">Alias</a> Does not exist</p>\n'

    def test_two_configurations_side_by_side(self) -> None:
        colon = Markdown(extensions=[WIKILINK])
        pipe = Markdown(extensions=[new(with_alias_delimiter("|"))])
        source = "[[a:b]] [[c|d]]"

        assert colon(source) == (
            '<p><a href="a">b</a> <a href="c%7Cd">c|d</a></p>\n'
        )
        assert pipe(source) == '<p><a href="a:b">a:b</a> <a href="c">d</a></p>\n'


class TestParseTree:
    """The nodes attached to the document."""

    def test_wikilink_node_fields(self) -> None:
        doc = parse("See [[Wiki Link:With Some Alias]].")
        (para,) = doc.children
        assert isinstance(para, Paragraph)
        before, link, after = para.children

        assert before == Text(location=before.location, content="See ")
        assert isinstance(link, WikiLink)
        assert link.raw_destination == "Wiki Link"
        assert link.alias == "With Some Alias"
        assert link.destination == "wiki-link"
        assert link.exists is True
        assert isinstance(after, Text)
        assert after.content == "."

    def test_extension_instances_are_reported(self) -> None:
        md = Markdown(plugins=["wikilink"], extensions=[WIKILINK])
        assert len(md.extensions) == 2
        assert all(ext.name == "wikilink" for ext in md.extensions)
