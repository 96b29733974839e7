"""Utility modules for wikilink.

Provides:
- logger: get_logger for logging
- text: escape_html for rendered output
"""

from wikilink.utils.logger import get_logger
from wikilink.utils.text import escape_html

__all__ = [
    "escape_html",
    "get_logger",
]
