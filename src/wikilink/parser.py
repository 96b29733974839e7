"""Minimal host parser: paragraphs of text with pluggable inline rules.

Block structure is limited to paragraphs separated by blank lines. Inside a
paragraph, each line is scanned left to right exactly once. At a character
listed as a trigger in the active inline registry, the registered parsers
are tried earliest-priority first with the rest of that line; the first
match becomes a node and scanning resumes right after the consumed span.
Everything else is plain text.

Thread Safety:
- Parser produces immutable AST (frozen dataclasses)
- Configuration is read from ContextVar (thread-local)
- Safe to share AST across threads

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from wikilink.config import get_parse_config
from wikilink.errors import PluginError
from wikilink.location import SourceLocation
from wikilink.nodes import Block, Inline, Paragraph, SoftBreak, Text

if TYPE_CHECKING:
    from wikilink.registry import InlineParserRegistry


class Parser:
    """Parser for paragraph-level Markdown with extension inline rules.

    Usage:
            >>> with parse_config_context(config):
            ...     blocks = Parser("[[Home]] page").parse()
            >>> blocks[0].children[0]
            WikiLink(..., raw_destination='Home', alias='Home', ...)

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        parse operation. Configuration is read from ContextVar (thread-local).

    """

    __slots__ = ("_source", "_source_file", "_registry")

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
    ) -> None:
        """Initialize parser with source text.

        Args:
            source: Markdown source text
            source_file: Optional source file path for node locations

        """
        self._source = source
        self._source_file = source_file
        self._registry: InlineParserRegistry = get_parse_config().inline_registry

    def parse(self) -> list[Block]:
        """Parse source into a list of paragraphs."""
        blocks: list[Block] = []
        pending: list[SourceLocation] = []
        pending_lines: list[str] = []

        offset = 0
        for lineno, raw_line in enumerate(self._source.split("\n"), start=1):
            line = raw_line.rstrip("\r")
            if line.strip():
                indent = len(line) - len(line.lstrip())
                pending.append(
                    SourceLocation(
                        lineno=lineno,
                        col_offset=indent + 1,
                        offset=offset + indent,
                        end_offset=offset + len(line),
                        source_file=self._source_file,
                    )
                )
                pending_lines.append(line[indent:])
            elif pending_lines:
                blocks.append(self._parse_paragraph(pending_lines, pending))
                pending, pending_lines = [], []
            offset += len(raw_line) + 1

        if pending_lines:
            blocks.append(self._parse_paragraph(pending_lines, pending))
        return blocks

    def _parse_paragraph(
        self, lines: list[str], locations: list[SourceLocation]
    ) -> Paragraph:
        # CommonMark: trailing whitespace of the final line is not content.
        lines[-1] = lines[-1].rstrip()
        children: list[Inline] = []
        for i, (line, location) in enumerate(zip(lines, locations, strict=True)):
            if i:
                children.append(SoftBreak(location=location))
            children.extend(self._parse_inline(line, location))
        start, end = locations[0], locations[-1]
        return Paragraph(
            location=SourceLocation(
                lineno=start.lineno,
                col_offset=start.col_offset,
                offset=start.offset,
                end_offset=end.end_offset,
                source_file=self._source_file,
            ),
            children=tuple(children),
        )

    def _parse_inline(self, line: str, location: SourceLocation) -> list[Inline]:
        """Tokenize one line into inline nodes.

        Adjacent plain characters are merged into a single Text node.
        """
        nodes: list[Inline] = []
        registry = self._registry
        triggers = registry.triggers
        text_start = 0
        pos = 0
        line_len = len(line)

        while pos < line_len:
            char = line[pos]
            if char not in triggers:
                pos += 1
                continue

            matched = False
            for inline_parser in registry.parsers_for(char):
                result = inline_parser.parse(line[pos:], location.advance(pos))
                if result is None:
                    continue
                node, consumed = result
                if consumed < 1:
                    raise PluginError(
                        type(inline_parser).__name__,
                        f"inline parser consumed {consumed} characters at {location.advance(pos)}",
                    )
                if text_start < pos:
                    nodes.append(self._text(line, text_start, pos, location))
                nodes.append(node)
                pos += consumed
                text_start = pos
                matched = True
                break

            if not matched:
                pos += 1

        if text_start < line_len:
            nodes.append(self._text(line, text_start, line_len, location))
        return nodes

    @staticmethod
    def _text(line: str, start: int, end: int, location: SourceLocation) -> Text:
        return Text(
            location=location.advance(start).with_length(end - start),
            content=line[start:end],
        )
