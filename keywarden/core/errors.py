"""
Keywarden Error Types
======================

Exceptions raised by the analyzer and generators. The toolkit facade turns
them into :class:`~keywarden.core.models.Outcome` failures where a call must
not abort (analysis of user input, batch generation).
"""

from __future__ import annotations


class KeywardenError(Exception):
    """Base class for every error raised by Keywarden components."""

    kind = "KeywardenError"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInputError(KeywardenError):
    """The value handed to the analyzer is not a non-empty string."""

    kind = "InvalidInputError"


class ConfigError(KeywardenError):
    """A generation request cannot be satisfied (length or empty charset)."""

    kind = "ConfigError"


ERROR_TYPES: dict[str, type[KeywardenError]] = {
    cls.kind: cls for cls in (KeywardenError, InvalidInputError, ConfigError)
}
