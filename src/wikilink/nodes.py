"""Typed AST nodes for wikilink.

All nodes are frozen dataclasses with slots, so a parsed tree can be shared
across threads and never changes after the parser attaches a node.

Node Hierarchy:
Node (base)
├── Block
│   ├── Document
│   └── Paragraph
└── Inline
    ├── Text
    ├── SoftBreak
    └── WikiLink

Each node class carries a ``kind`` name. Renderers dispatch on the node
class; serialization and visitors use ``kind`` as the discriminator.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from wikilink.location import SourceLocation


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all AST nodes."""

    kind: ClassVar[str] = "Node"

    location: SourceLocation


# =============================================================================
# Inline Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Plain text content, rendered escaped and otherwise verbatim."""

    kind: ClassVar[str] = "Text"

    content: str


@dataclass(frozen=True, slots=True)
class SoftBreak(Node):
    """Line ending inside a paragraph."""

    kind: ClassVar[str] = "SoftBreak"


@dataclass(frozen=True, slots=True)
class WikiLink(Node):
    """A recognized ``[[destination]]`` or ``[[destination:alias]]`` span.

    Markdown: [[Wiki Link:With Some Alias]]
    HTML (default renderer): <a href="wiki-link">With Some Alias</a>

    Attributes:
        raw_destination: Text between ``[[`` and the alias delimiter (or
            ``]]``), exactly as written. Never empty.
        alias: Display text; equals ``raw_destination`` when the span has no
            usable alias segment.
        destination: Resolver output for ``raw_destination``.
        exists: Resolver's opinion on whether ``destination`` exists.
            Advisory only.

    """

    kind: ClassVar[str] = "WikiLink"

    raw_destination: str
    alias: str
    destination: str
    exists: bool


type Inline = Text | SoftBreak | WikiLink


# =============================================================================
# Block Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """Paragraph of inline content.

    HTML: <p>...</p>

    """

    kind: ClassVar[str] = "Paragraph"

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root document node."""

    kind: ClassVar[str] = "Document"

    children: tuple[Block, ...]


type Block = Document | Paragraph
