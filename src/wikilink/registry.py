"""Prioritized registries for inline parsers and node renderers.

Extensions register rules through mutable builders; the host builds
immutable registries once and shares them across parses.

Priorities follow one rule everywhere: a lower number runs earlier (inline
parsers) or wins (node renderers). Built-in host handlers use
HOST_PRIORITY, so any extension with a smaller number takes precedence.

Thread Safety:
Registries are immutable after build(). Safe to share.
Builders are not meant to be shared.

Example:
    >>> builder = InlineParserRegistryBuilder()
    >>> builder = builder.register(WikiLinkParser(":", default_resolve_destination), 150)
    >>> registry = builder.build()
    >>> registry.parsers_for("[")

"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

from wikilink.errors import PluginError
from wikilink.utils.logger import get_logger

if TYPE_CHECKING:
    from wikilink.location import SourceLocation
    from wikilink.nodes import Inline, Node
    from wikilink.renderers.html import RenderContext

logger = get_logger(__name__)

# Priority of the host's own node renderers.
HOST_PRIORITY = 1000


class InlineParser(Protocol):
    """Protocol for inline parser rules.

    ``trigger`` lists the characters that make the host call ``parse``.
    ``parse`` receives the rest of the current line, starting at the trigger,
    and returns the node plus the number of characters it consumed, or None
    to let the next rule (and finally plain text) handle the character.
    """

    trigger: str

    def parse(self, line: str, location: SourceLocation) -> tuple[Inline, int] | None: ...


# Writes the rendered form of one node into the render context.
type NodeRenderFunc = Callable[[Any, RenderContext], None]


class NodeRendererRegistrar(Protocol):
    """Target of NodeRenderer.register_funcs()."""

    def register_func(self, node_type: type[Node], func: NodeRenderFunc) -> None: ...


class NodeRenderer(Protocol):
    """Protocol for objects that provide render functions for node types."""

    def register_funcs(self, registrar: NodeRendererRegistrar) -> None: ...


@dataclass(frozen=True, slots=True)
class Prioritized[T]:
    """A value paired with its registration priority."""

    value: T
    priority: int


class InlineParserRegistry:
    """Immutable mapping of trigger characters to inline parsers.

    Thread Safety:
        Immutable after creation. Safe to share across threads.

    """

    __slots__ = ("_by_trigger", "_triggers")

    def __init__(self, by_trigger: dict[str, tuple[InlineParser, ...]]) -> None:
        """Initialize registry with pre-sorted parsers.

        Use InlineParserRegistryBuilder to create instances.
        """
        self._by_trigger = by_trigger
        self._triggers = frozenset(by_trigger)

    def parsers_for(self, char: str) -> tuple[InlineParser, ...]:
        """Parsers triggered by ``char``, earliest first."""
        return self._by_trigger.get(char, ())

    @property
    def triggers(self) -> frozenset[str]:
        """All characters that have at least one parser."""
        return self._triggers

    def __len__(self) -> int:
        return sum(len(parsers) for parsers in self._by_trigger.values())


class InlineParserRegistryBuilder:
    """Mutable builder for InlineParserRegistry."""

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: list[Prioritized[InlineParser]] = []

    def register(self, parser: InlineParser, priority: int) -> InlineParserRegistryBuilder:
        """Register an inline parser.

        Args:
            parser: Parser implementing the InlineParser protocol
            priority: Lower numbers are tried first

        Returns:
            Self for chaining

        Raises:
            PluginError: If the parser has no trigger characters
        """
        if not getattr(parser, "trigger", ""):
            raise PluginError(type(parser).__name__, "inline parser has no trigger characters")
        logger.debug(
            "Registering inline parser %s for %r at priority %d",
            type(parser).__name__,
            parser.trigger,
            priority,
        )
        self._entries.append(Prioritized(parser, priority))
        return self

    def build(self) -> InlineParserRegistry:
        """Build immutable registry from registered parsers.

        Parsers with equal priority keep their registration order.
        """
        ordered = sorted(self._entries, key=lambda entry: entry.priority)
        by_trigger: dict[str, list[InlineParser]] = {}
        for entry in ordered:
            for char in entry.value.trigger:
                by_trigger.setdefault(char, []).append(entry.value)
        return InlineParserRegistry(
            {char: tuple(parsers) for char, parsers in by_trigger.items()}
        )

    def __len__(self) -> int:
        return len(self._entries)


class NodeRendererRegistry:
    """Immutable mapping of node types to render functions.

    Thread Safety:
        Immutable after creation. Safe to share across threads.

    """

    __slots__ = ("_funcs",)

    def __init__(self, funcs: dict[type[Node], NodeRenderFunc]) -> None:
        self._funcs = funcs

    def get(self, node_type: type[Node]) -> NodeRenderFunc | None:
        """Render function for ``node_type``, or None if unregistered."""
        return self._funcs.get(node_type)

    def __contains__(self, node_type: type[Node]) -> bool:
        return node_type in self._funcs

    def __len__(self) -> int:
        return len(self._funcs)


class NodeRendererRegistryBuilder:
    """Mutable builder for NodeRendererRegistry.

    When several renderers handle the same node type, the one registered with
    the lowest priority number wins.
    """

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: list[Prioritized[NodeRenderer]] = []

    def register(self, renderer: NodeRenderer, priority: int) -> NodeRendererRegistryBuilder:
        """Register a node renderer.

        Args:
            renderer: Object implementing the NodeRenderer protocol
            priority: Lower numbers take precedence

        Returns:
            Self for chaining
        """
        logger.debug(
            "Registering node renderer %s at priority %d", type(renderer).__name__, priority
        )
        self._entries.append(Prioritized(renderer, priority))
        return self

    def build(self) -> NodeRendererRegistry:
        """Build immutable registry from registered renderers."""
        funcs: dict[type[Node], NodeRenderFunc] = {}

        class _Registrar:
            def register_func(self, node_type: type[Node], func: NodeRenderFunc) -> None:
                funcs[node_type] = func

        registrar = _Registrar()
        # Highest priority number first, so earlier entries are overwritten.
        for entry in sorted(self._entries, key=lambda entry: entry.priority, reverse=True):
            entry.value.register_funcs(registrar)
        return NodeRendererRegistry(funcs)

    def __len__(self) -> int:
        return len(self._entries)
