"""Source location tracking for wikilink nodes and host nodes.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position of a node in the source text.

    Line and column are 1-indexed; offsets are 0-indexed positions in the
    source buffer.

    Attributes:
        lineno: Starting line number
        col_offset: Starting column
        offset: Absolute start offset in source buffer
        end_offset: Absolute end offset in source buffer
        source_file: Source file path (optional)

    Examples:
            >>> loc = SourceLocation(3, 7, source_file="notes/index.md")
            >>> str(loc)
            'notes/index.md:3:7'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    def advance(self, count: int) -> SourceLocation:
        """Location ``count`` characters further along the same line."""
        return SourceLocation(
            lineno=self.lineno,
            col_offset=self.col_offset + count,
            offset=self.offset + count,
            end_offset=self.offset + count,
            source_file=self.source_file,
        )

    def with_length(self, length: int) -> SourceLocation:
        """Copy of this location whose end lies ``length`` characters after the start."""
        return SourceLocation(
            lineno=self.lineno,
            col_offset=self.col_offset,
            offset=self.offset,
            end_offset=self.offset + length,
            source_file=self.source_file,
        )

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Placeholder for nodes built outside of parsing."""
        return cls(lineno=0, col_offset=0)
