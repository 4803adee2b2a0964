"""Exception classes for mdit-mention.

Mention resolution never raises: unresolvable or rejected handles degrade
to plain text. These exceptions cover misconfiguration only.
"""

from __future__ import annotations


class MentionError(Exception):
    """Base exception for all mdit-mention errors.

    Subclass this for specific error categories.
    """

    pass


class PluginError(MentionError):
    """Error in plugin configuration.

    Raised when the plugin is given options it cannot use, such as a
    resolver that is not callable.
    """

    def __init__(self, plugin_name: str, message: str) -> None:
        """Initialize plugin error.

        Args:
            plugin_name: Name of the failing plugin
            message: Description of the error
        """
        self.plugin_name = plugin_name
        super().__init__(f"Plugin '{plugin_name}': {message}")
