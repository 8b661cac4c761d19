"""Exceptions raised by the tag decorator."""

from __future__ import annotations


class DecorationError(Exception):
    """Base class for errors raised while decorating tags."""


class ConfigurationError(DecorationError):
    """Raised when decorator configuration is missing, malformed or inconsistent.

    This is a deployment defect rather than a runtime condition: it aborts the
    decoration of the tag in progress and is never retried.
    """

    def __init__(self, message: str, source: str = "") -> None:
        """Initialize the error.

        Args:
            message: Description of the configuration problem
            source: Optional origin (file path, namespace letter, ...)
        """
        self.source = source
        if source:
            message = f"{message} ({source})"
        super().__init__(message)
