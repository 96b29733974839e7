"""Tests for the wikilink scanner.

Covers the trigger precondition, the alias split policy and how much of the
line a match consumes.
"""

from __future__ import annotations

import pytest

from wikilink.location import SourceLocation
from wikilink.nodes import WikiLink
from wikilink.scanner import WikiLinkParser, WikiLinkSpan, scan_wikilink


class TestTriggerPrecondition:
    """Lines that can never hold a wikilink."""

    @pytest.mark.parametrize(
        "line",
        [
            "",
            "[",
            "[[",
            "[[]]",
            "[x]]",
            "[a]]]",
            "x[[a]]",
        ],
    )
    def test_no_match(self, line: str) -> None:
        assert scan_wikilink(line) is None

    def test_empty_link_with_trailing_text(self) -> None:
        """[[]] followed by more text is still empty content."""
        assert scan_wikilink("[[]] and more") is None

    def test_unterminated(self) -> None:
        assert scan_wikilink("[[foo") is None
        assert scan_wikilink("[[foo] bar") is None

    def test_single_closing_bracket_at_end(self) -> None:
        """The close marker needs two characters; the last one alone is not enough."""
        assert scan_wikilink("[[foo]") is None

    def test_minimal_link(self) -> None:
        assert scan_wikilink("[[a]]") == WikiLinkSpan("a", "a", 5)


class TestAliasSplit:
    """Alias delimiter handling."""

    def test_destination_and_alias(self) -> None:
        span = scan_wikilink("[[Wiki Link:With Some Alias]]")
        assert span == WikiLinkSpan(
            raw_destination="Wiki Link",
            alias="With Some Alias",
            consumed=29,
        )

    def test_no_delimiter(self) -> None:
        span = scan_wikilink("[[Regular Wiki Link]]")
        assert span is not None
        assert span.raw_destination == "Regular Wiki Link"
        assert span.alias == "Regular Wiki Link"

    @pytest.mark.parametrize(
        ("line", "content"),
        [
            ("[[:]]", ":"),
            ("[[:a]]", ":a"),
            ("[[a:]]", "a:"),
        ],
    )
    def test_split_suppressed_when_a_side_is_empty(self, line: str, content: str) -> None:
        span = scan_wikilink(line)
        assert span is not None
        assert span.raw_destination == content
        assert span.alias == content

    def test_last_delimiter_wins(self) -> None:
        span = scan_wikilink("[[a:b:c]]")
        assert span is not None
        assert span.raw_destination == "a:b"
        assert span.alias == "c"

    def test_last_delimiter_before_close_suppresses_split(self) -> None:
        """Only the last delimiter counts, even when an earlier one would split."""
        span = scan_wikilink("[[a:b:]]")
        assert span is not None
        assert span.raw_destination == "a:b:"
        assert span.alias == "a:b:"

    def test_delimiters_after_close_are_ignored(self) -> None:
        span = scan_wikilink("[[Home]] and: more")
        assert span is not None
        assert span.raw_destination == "Home"
        assert span.alias == "Home"

    def test_custom_delimiter(self) -> None:
        span = scan_wikilink("[[Exists|Alias]]", "|")
        assert span is not None
        assert span.raw_destination == "Exists"
        assert span.alias == "Alias"

    def test_default_delimiter_not_special_with_custom(self) -> None:
        span = scan_wikilink("[[a:b]]", "|")
        assert span is not None
        assert span.raw_destination == "a:b"
        assert span.alias == "a:b"

    def test_whitespace_is_kept(self) -> None:
        span = scan_wikilink("[[ Home : Start ]]")
        assert span is not None
        assert span.raw_destination == " Home "
        assert span.alias == " Start "


class TestConsumption:
    """How far a match reaches."""

    def test_consumes_through_closing_brackets(self) -> None:
        span = scan_wikilink("[[a]] tail")
        assert span is not None
        assert span.consumed == 5

    def test_stops_at_first_close(self) -> None:
        span = scan_wikilink("[[a]] [[b]]")
        assert span is not None
        assert span.raw_destination == "a"
        assert span.consumed == 5

    def test_extra_closing_brackets_left_over(self) -> None:
        span = scan_wikilink("[[a]]]]")
        assert span is not None
        assert span.consumed == 5

    def test_third_opening_bracket_is_content(self) -> None:
        span = scan_wikilink("[[[a]]")
        assert span is not None
        assert span.raw_destination == "[a"
        assert span.consumed == 6


class TestWikiLinkParser:
    """The inline parser rule wrapping the scanner."""

    def test_resolver_called_with_raw_destination(self) -> None:
        calls: list[str] = []

        def resolve(raw: str) -> tuple[str, bool]:
            calls.append(raw)
            return f"/notes/{raw}", False

        parser = WikiLinkParser(":", resolve)
        result = parser.parse("[[Home:Start]] rest", SourceLocation(1, 1))

        assert result is not None
        node, consumed = result
        assert calls == ["Home"]
        assert consumed == 14
        assert node == WikiLink(
            location=SourceLocation(1, 1, offset=0, end_offset=14),
            raw_destination="Home",
            alias="Start",
            destination="/notes/Home",
            exists=False,
        )

    def test_resolver_not_called_without_match(self) -> None:
        def resolve(raw: str) -> tuple[str, bool]:
            pytest.fail("resolver must not run for non-links")

        parser = WikiLinkParser(":", resolve)
        assert parser.parse("[[]]", SourceLocation(1, 1)) is None

    def test_trigger(self) -> None:
        assert WikiLinkParser.trigger == "["

    def test_resolver_errors_propagate(self) -> None:
        def resolve(raw: str) -> tuple[str, bool]:
            raise LookupError(raw)

        parser = WikiLinkParser(":", resolve)
        with pytest.raises(LookupError, match="Home"):
            parser.parse("[[Home]]", SourceLocation(1, 1))
