"""Exception and warning types raised by the field engine."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Degenerate grid or timing parameters rejected at configuration time."""


class UnimplementedModeWarning(UserWarning):
    """A reserved wave mode was evaluated; its height is a placeholder zero."""
