"""Text processing utilities for wikilink.

Example:
    >>> from wikilink.utils.text import escape_html
    >>> escape_html('Tom & "Jerry"')
    'Tom &amp; &quot;Jerry&quot;'
"""

from __future__ import annotations

import html as html_module


def escape_html(text: str) -> str:
    """Escape HTML special characters for text and attribute values.

    CommonMark-compliant: escapes <, >, &, " but NOT single quotes.
    Python's html.escape() escapes ' to &#x27; which CommonMark doesn't require.

    Args:
        text: Text to escape

    Returns:
        HTML-escaped text

    Examples:
        >>> escape_html("<b>")
        '&lt;b&gt;'
        >>> escape_html("it's")
        "it's"
    """
    if not text:
        return ""
    return html_module.escape(text, quote=False).replace('"', "&quot;")
