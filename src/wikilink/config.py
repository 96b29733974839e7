"""Configuration for the wikilink extension and the host parser.

Two immutable configurations live here:

- WikiLinkConfig: alias delimiter, resolver and render function of one
  wikilink extension. Built from DEFAULT_CONFIG by applying options.
- ParseConfig: what the host parser needs during a parse (the inline parser
  registry). Carried by a ContextVar, set once per Markdown.parse() call.

Usage:
    >>> config = apply_options(
    ...     DEFAULT_CONFIG,
    ...     with_alias_delimiter("|"),
    ...     with_resolve_destination(lambda raw: (raw, raw == "Home")),
    ... )
    >>> config.alias_delimiter
    '|'

    # Host parse config, for direct Parser usage
    >>> with parse_config_context(ParseConfig(inline_registry=registry)):
    ...     blocks = Parser(source).parse()

Thread Safety:
    Both configs are frozen dataclasses. The ContextVar is thread-local, so
    concurrent parses in different threads never see each other's config.

"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any

from wikilink.errors import ConfigError
from wikilink.registry import InlineParserRegistry
from wikilink.renderers.wikilink import RenderFunc, default_render
from wikilink.resolver import ResolveDestinationFunc, default_resolve_destination
from wikilink.scanner import CLOSE_DELIMITER, DEFAULT_ALIAS_DELIMITER, OPEN_DELIMITER

# =============================================================================
# Extension configuration
# =============================================================================


@dataclass(frozen=True, slots=True)
class WikiLinkConfig:
    """Immutable wikilink extension configuration.

    Attributes:
        alias_delimiter: Single character separating destination from alias
        resolve_destination: Maps raw destination to (destination, exists)
        render: Maps a WikiLink node to output markup

    """

    alias_delimiter: str = DEFAULT_ALIAS_DELIMITER
    resolve_destination: ResolveDestinationFunc = default_resolve_destination
    render: RenderFunc = default_render

    def __post_init__(self) -> None:
        _check_alias_delimiter(self.alias_delimiter)
        _check_callable("resolve_destination", self.resolve_destination)
        _check_callable("render", self.render)

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> WikiLinkConfig:
        """Create WikiLinkConfig from a dictionary.

        Useful for framework integration where config comes from external
        sources. Only keys naming WikiLinkConfig fields are used; unknown keys
        are silently ignored.

        Example:
            >>> WikiLinkConfig.from_dict({"alias_delimiter": "|", "theme": "dark"})
            WikiLinkConfig(alias_delimiter='|', ...)

        """
        valid_fields = {f.name for f in dataclasses.fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


def _check_alias_delimiter(value: object) -> None:
    if not isinstance(value, str) or len(value) != 1:
        raise ConfigError("alias_delimiter", f"expected a single character, got {value!r}")
    if value in (OPEN_DELIMITER, CLOSE_DELIMITER):
        raise ConfigError("alias_delimiter", f"{value!r} is a link bracket")


def _check_callable(option: str, value: object) -> None:
    if not callable(value):
        raise ConfigError(option, f"expected a callable, got {type(value).__name__}")


# Module-level default config (reused, never recreated)
DEFAULT_CONFIG: WikiLinkConfig = WikiLinkConfig()

type Option = Callable[[WikiLinkConfig], WikiLinkConfig]


def with_alias_delimiter(alias_delimiter: str) -> Option:
    """Option setting the character between destination and alias."""
    _check_alias_delimiter(alias_delimiter)

    def option(config: WikiLinkConfig) -> WikiLinkConfig:
        return dataclasses.replace(config, alias_delimiter=alias_delimiter)

    return option


def with_resolve_destination(resolve_destination: ResolveDestinationFunc) -> Option:
    """Option setting the function used to resolve destinations."""
    _check_callable("resolve_destination", resolve_destination)

    def option(config: WikiLinkConfig) -> WikiLinkConfig:
        return dataclasses.replace(config, resolve_destination=resolve_destination)

    return option


def with_render(render: RenderFunc) -> Option:
    """Option setting the function used to render wikilinks."""
    _check_callable("render", render)

    def option(config: WikiLinkConfig) -> WikiLinkConfig:
        return dataclasses.replace(config, render=render)

    return option


def apply_options(config: WikiLinkConfig, *options: Option) -> WikiLinkConfig:
    """Apply options left to right; later options override earlier ones."""
    for option in options:
        config = option(config)
    return config


# =============================================================================
# Host parse configuration
# =============================================================================


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Set once per Markdown instance, read by the parser in the context.

    Attributes:
        inline_registry: Inline parsers tried at trigger characters

    """

    inline_registry: InlineParserRegistry = field(
        default_factory=lambda: InlineParserRegistry({})
    )


_DEFAULT_PARSE_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "parse_config",
    default=_DEFAULT_PARSE_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context."""
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to the default (no inline rules) configuration."""
    _parse_config.set(_DEFAULT_PARSE_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(inline_registry=registry)):
        ...     blocks = Parser("[[Home]]").parse()

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "DEFAULT_CONFIG",
    "Option",
    "ParseConfig",
    "WikiLinkConfig",
    "apply_options",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
    "with_alias_delimiter",
    "with_render",
    "with_resolve_destination",
]
