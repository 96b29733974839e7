"""Destination resolution for wikilinks.

A resolver maps the raw text between ``[[`` and the alias delimiter to a
link target plus an existence flag. Resolvers are called once per recognized
span, during parsing, and may be shared by many parses at once: they must be
pure or internally synchronized.

Example:
    >>> default_resolve_destination(" Wiki Link ")
    ('wiki-link', True)

"""

from __future__ import annotations

from collections.abc import Callable
from urllib.parse import quote

# Maps a raw destination to (destination, exists).
type ResolveDestinationFunc = Callable[[str], tuple[str, bool]]

# Characters left as-is when escaping a URL path segment, on top of the
# unreserved set (letters, digits, "-", "_", ".", "~") that quote() never
# touches. "/", ";", ",", "?" are escaped.
_PATH_SEGMENT_SAFE = "$&+:=@"


def escape_path_segment(text: str) -> str:
    """Percent-encode text so it can be used as a single URL path segment.

    Examples:
        >>> escape_path_segment("a/b c")
        'a%2Fb%20c'
        >>> escape_path_segment("page:1")
        'page:1'

    Lone surrogates from surrogateescape-decoded input are encoded as the
    byte they stand for, so ``"\\udc80"`` becomes ``%80``.
    """
    return quote(text, safe=_PATH_SEGMENT_SAFE, errors="surrogateescape")


def default_resolve_destination(raw_destination: str) -> tuple[str, bool]:
    """Turn a raw destination into a lowercase, hyphenated path segment.

    Strips surrounding whitespace, lowercases, replaces spaces with hyphens
    and percent-encodes the result. Always reports the target as existing;
    hosts with a real notion of existing pages supply their own resolver.

    Args:
        raw_destination: Destination text as written inside the brackets

    Returns:
        Tuple of (destination, exists)

    Examples:
        >>> default_resolve_destination("Regular Wiki Link")
        ('regular-wiki-link', True)
        >>> default_resolve_destination("a:")
        ('a:', True)
    """
    dest = raw_destination.strip()
    dest = dest.lower()
    dest = dest.replace(" ", "-")
    return escape_path_segment(dest), True


__all__ = [
    "ResolveDestinationFunc",
    "default_resolve_destination",
    "escape_path_segment",
]
