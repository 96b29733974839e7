"""Exception classes for wikilink.

Malformed ``[[...]]`` syntax is never an error: it is left as plain text.
These exceptions cover misconfiguration and host pipeline failures only.
Exceptions raised by user-supplied resolve or render functions are not
wrapped and reach the caller unchanged.
"""

from __future__ import annotations


class WikiLinkError(Exception):
    """Base exception for all wikilink errors."""

    pass


class ConfigError(WikiLinkError):
    """Invalid extension option.

    Raised when an option receives a value the scanner or renderer could
    not work with (e.g. a multi-character alias delimiter).
    """

    def __init__(self, option: str, message: str) -> None:
        """Initialize config error.

        Args:
            option: Name of the offending option (e.g., "alias_delimiter")
            message: Description of the problem
        """
        self.option = option
        super().__init__(f"Option '{option}': {message}")


class RenderError(WikiLinkError):
    """Error during HTML rendering.

    Raised when the renderer meets a node type that has no registered
    handler and no children to fall back on.
    """

    pass


class PluginError(WikiLinkError):
    """Error in plugin registration.

    Raised when an inline parser or node renderer cannot be registered.
    """

    def __init__(self, plugin_name: str, message: str) -> None:
        """Initialize plugin error.

        Args:
            plugin_name: Name of the failing plugin or rule
            message: Description of the error
        """
        self.plugin_name = plugin_name
        super().__init__(f"Plugin '{plugin_name}': {message}")
