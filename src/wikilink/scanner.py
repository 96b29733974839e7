"""Inline scanning for ``[[destination]]`` and ``[[destination:alias]]``.

The scanner sees only the rest of the current line, starting at a ``[``.
It makes a single forward pass and either recognizes a span or reports no
match, in which case the host renders the text unchanged.

Edge cases:
- ``[[]]`` is too short to be a link and stays plain text.
- ``[[foo`` (no ``]]`` on the same line) stays plain text.
- ``[[:a]]`` and ``[[a:]]`` would leave one side of the split empty, so the
  whole content is used as both destination and alias.
- ``[[a:b:c]]`` splits at the last delimiter: destination ``a:b``, alias ``c``.

Thread Safety:
scan_wikilink() is a pure function. WikiLinkParser holds only immutable
configuration; any thread safety beyond that depends on the resolver.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from wikilink.nodes import WikiLink

if TYPE_CHECKING:
    from wikilink.location import SourceLocation
    from wikilink.resolver import ResolveDestinationFunc

OPEN_DELIMITER = "["
CLOSE_DELIMITER = "]"
DELIMITER_COUNT = 2
DEFAULT_ALIAS_DELIMITER = ":"


@dataclass(frozen=True, slots=True)
class WikiLinkSpan:
    """Result of a successful scan.

    Attributes:
        raw_destination: Destination text, never empty
        alias: Display text (same as raw_destination when not split)
        consumed: Characters consumed, through the closing ``]]``

    """

    raw_destination: str
    alias: str
    consumed: int


def scan_wikilink(
    line: str, alias_delimiter: str = DEFAULT_ALIAS_DELIMITER
) -> WikiLinkSpan | None:
    """Recognize a wikilink at the start of ``line``.

    Args:
        line: Remainder of the current line, starting at the candidate ``[``
        alias_delimiter: Character separating destination from alias

    Returns:
        WikiLinkSpan on a match, None otherwise

    Examples:
        >>> scan_wikilink("[[Home:Start here]] and more")
        WikiLinkSpan(raw_destination='Home', alias='Start here', consumed=19)
        >>> scan_wikilink("[[]]") is None
        True
    """
    line_len = len(line)

    # Four characters or fewer cannot hold a non-empty link.
    if line_len <= 4 or line[0] != OPEN_DELIMITER or line[1] != OPEN_DELIMITER:
        return None

    open_pos = DELIMITER_COUNT
    close_pos = -1
    alias_pos = -1
    for i in range(open_pos, line_len - 1):
        char = line[i]
        if char == CLOSE_DELIMITER and line[i + 1] == CLOSE_DELIMITER:
            close_pos = i
            break
        if char == alias_delimiter:
            alias_pos = i

    if close_pos == -1 or close_pos == open_pos:
        return None

    if alias_pos == -1 or alias_pos == open_pos or alias_pos + 1 == close_pos:
        raw_destination = line[open_pos:close_pos]
        alias = raw_destination
    else:
        raw_destination = line[open_pos:alias_pos]
        alias = line[alias_pos + 1 : close_pos]

    return WikiLinkSpan(
        raw_destination=raw_destination,
        alias=alias,
        consumed=close_pos + DELIMITER_COUNT,
    )


class WikiLinkParser:
    """Inline parser rule producing WikiLink nodes.

    Registered with the host's inline parser for the ``[`` trigger. On a
    match the configured resolver is called right away, so every WikiLink
    in the tree already carries its destination and existence flag.

    Thread Safety:
        Immutable after creation. Safe to share if the resolver is.

    """

    __slots__ = ("_alias_delimiter", "_resolve_destination")

    trigger = OPEN_DELIMITER

    def __init__(
        self,
        alias_delimiter: str,
        resolve_destination: ResolveDestinationFunc,
    ) -> None:
        self._alias_delimiter = alias_delimiter
        self._resolve_destination = resolve_destination

    @property
    def alias_delimiter(self) -> str:
        return self._alias_delimiter

    def parse(self, line: str, location: SourceLocation) -> tuple[WikiLink, int] | None:
        """Try to parse a wikilink at the start of ``line``.

        Args:
            line: Remainder of the current line, starting at the trigger
            location: Location of the trigger character

        Returns:
            Tuple of (node, characters consumed), or None if no match
        """
        span = scan_wikilink(line, self._alias_delimiter)
        if span is None:
            return None

        destination, exists = self._resolve_destination(span.raw_destination)
        node = WikiLink(
            location=location.with_length(span.consumed),
            raw_destination=span.raw_destination,
            alias=span.alias,
            destination=destination,
            exists=exists,
        )
        return node, span.consumed
