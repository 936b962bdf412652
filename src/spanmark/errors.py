"""Exception classes for Spanmark.

Highlighting itself never raises for bad input; these cover misuse of the
configuration and assembly APIs.
"""

from __future__ import annotations


class SpanmarkError(Exception):
    """Base exception for all Spanmark errors.
    
    Subclass this for specific error categories.
    """

    pass


class ConfigError(SpanmarkError):
    """Invalid highlight configuration value.
    
    Raised when a configuration dictionary names an unknown text kind
    or holds a value of the wrong type.
    """

    def __init__(self, key: str, value: object, message: str) -> None:
        """Initialize config error.
        
        Args:
            key: Configuration key being processed (e.g., "kinds")
            value: The offending value
            message: Description of the problem
        """
        self.key = key
        self.value = value
        super().__init__(f"Config '{key}': {message} (got {value!r})")
