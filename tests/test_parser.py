"""Tests for the host parser: blocks, inline scanning and locations."""

from __future__ import annotations

from wikilink import Markdown
from wikilink.location import SourceLocation
from wikilink.nodes import Document, Paragraph, SoftBreak, Text, WikiLink


def _parse(source: str, source_file: str | None = None) -> Document:
    return Markdown(plugins=["wikilink"]).parse(source, source_file=source_file)


class TestBlocks:
    """Paragraph splitting."""

    def test_empty_source(self) -> None:
        assert _parse("").children == ()

    def test_blank_lines_only(self) -> None:
        assert _parse("\n   \n\n").children == ()

    def test_paragraphs_split_on_blank_lines(self) -> None:
        doc = _parse("one\n\n\ntwo\nthree")
        assert len(doc.children) == 2
        assert all(isinstance(block, Paragraph) for block in doc.children)

    def test_crlf_line_endings(self) -> None:
        doc = _parse("[[A]]\r\n[[B]]\r\n")
        (para,) = doc.children
        kinds = [type(child) for child in para.children]
        assert kinds == [WikiLink, SoftBreak, WikiLink]

    def test_document_location(self) -> None:
        doc = _parse("[[A]]", source_file="notes/a.md")
        assert doc.location == SourceLocation(1, 1, 0, 5, "notes/a.md")


class TestInline:
    """Inline node sequences."""

    def test_text_is_merged(self) -> None:
        (para,) = _parse("a [b] c").children
        assert [child.content for child in para.children] == ["a [b] c"]  # type: ignore[union-attr]

    def test_soft_breaks_between_lines(self) -> None:
        (para,) = _parse("first [[A]]\nsecond [[B:b]]").children
        kinds = [type(child) for child in para.children]
        assert kinds == [Text, WikiLink, SoftBreak, Text, WikiLink]

    def test_non_link_brackets_stay_text(self) -> None:
        (para,) = _parse("[[]] [[foo").children
        assert para.children == (
            Text(location=para.children[0].location, content="[[]] [[foo"),
        )

    def test_no_byte_of_a_link_is_rescanned(self) -> None:
        calls: list[str] = []

        def resolve(raw: str) -> tuple[str, bool]:
            calls.append(raw)
            return raw, True

        from wikilink import new, with_resolve_destination

        md = Markdown(extensions=[new(with_resolve_destination(resolve))])
        md.parse("[[[a]] [[b]]]]")
        assert calls == ["[a", "b"]


class TestLocations:
    """Source locations attached to nodes."""

    def test_inline_locations(self) -> None:
        (para,) = _parse("ab [[X]] cd").children
        text, link, tail = para.children
        assert text.location == SourceLocation(1, 1, offset=0, end_offset=3)
        assert link.location == SourceLocation(1, 4, offset=3, end_offset=8)
        assert tail.location == SourceLocation(1, 9, offset=8, end_offset=11)

    def test_second_line_location(self) -> None:
        (para,) = _parse("first [[A]]\nsecond [[B:b]]", source_file="x.md").children
        link = para.children[-1]
        assert isinstance(link, WikiLink)
        assert link.location == SourceLocation(2, 8, offset=19, end_offset=26, source_file="x.md")
        assert str(link.location) == "x.md:2:8"

    def test_indented_line_location(self) -> None:
        (para,) = _parse("  [[A]]").children
        (link,) = para.children
        assert link.location.col_offset == 3
        assert link.location.offset == 2

    def test_paragraph_location(self) -> None:
        doc = _parse("one\n\ntwo [[B]]")
        second = doc.children[1]
        assert second.location.lineno == 3
        assert second.location.offset == 5
