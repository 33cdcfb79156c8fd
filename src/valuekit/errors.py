"""Exception types for valuekit."""

from __future__ import annotations


class ValueKitError(Exception):
    """Base class for errors raised by valuekit helpers.

    ``classify`` and ``equals`` are total and never raise; only the
    supplementary helpers signal misuse through this hierarchy.
    """


class PathError(ValueKitError, TypeError):
    """Raised when ``get_path`` is given something other than a dotted string."""


class BoxingError(ValueKitError, TypeError):
    """Raised when ``box`` is given a value that has no wrapper type."""
