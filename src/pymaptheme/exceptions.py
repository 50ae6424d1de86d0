"""Custom exception hierarchy for pymaptheme."""

from __future__ import annotations


class ThemeError(Exception):
    """Base exception for all pymaptheme errors."""


class ThemeConfigError(ThemeError):
    """Invalid or missing configuration."""


class ThemeSettingError(ThemeError):
    """A stored theme or navigation value could not be parsed.

    Raised at the configuration boundary only.  Once a value has been
    parsed into an enum member the resolver never fails on it.
    """

    def __init__(self, message: str, *, value: object = None) -> None:
        self.value = value
        super().__init__(message)


class ThemeInvariantError(ThemeError, AssertionError):
    """A value outside its declared domain reached the resolver.

    This is a programming error, not a runtime condition.  It is never
    recovered from by substituting a default style.
    """
