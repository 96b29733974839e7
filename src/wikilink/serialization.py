"""AST serialization to JSON-compatible dicts, for inspection and debugging.

Every node becomes a dict with a ``_type`` discriminator (the node's kind)
followed by its fields; child tuples become lists. Output is deterministic.

Example:
    >>> doc = Markdown(plugins=["wikilink"]).parse("[[Home:Start]]")
    >>> to_dict(doc.children[0].children[0])["destination"]
    'home'

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

from __future__ import annotations

import json
from dataclasses import fields
from typing import Any

from wikilink.location import SourceLocation
from wikilink.nodes import Node


def to_dict(node: Node, *, include_location: bool = True) -> dict[str, Any]:
    """Convert an AST node to a JSON-compatible dict.

    Args:
        node: Any AST node.
        include_location: Whether to emit ``location`` fields.

    Returns:
        Dict with ``_type`` and all node fields.

    """
    result: dict[str, Any] = {"_type": node.kind}
    for f in fields(node):
        if f.name == "location" and not include_location:
            continue
        result[f.name] = _serialize_value(getattr(node, f.name), include_location)
    return result


def _serialize_value(value: Any, include_location: bool) -> Any:
    if isinstance(value, Node):
        return to_dict(value, include_location=include_location)
    if isinstance(value, SourceLocation):
        return {
            "_type": "SourceLocation",
            **{f.name: getattr(value, f.name) for f in fields(value)},
        }
    if isinstance(value, tuple):
        return [_serialize_value(item, include_location) for item in value]
    # Primitives: str, int, bool, None
    return value


def to_json(node: Node, *, indent: int | None = None, include_location: bool = True) -> str:
    """Serialize an AST node to a JSON string with sorted keys.

    Args:
        node: Node to serialize (usually a Document).
        indent: JSON indentation level (None for compact).
        include_location: Whether to emit ``location`` fields.

    Returns:
        JSON string.

    """
    return json.dumps(
        to_dict(node, include_location=include_location), sort_keys=True, indent=indent
    )
