"""Error types raised by the CV search domain."""
from __future__ import annotations


class ValidationError(ValueError):
    """Signal that caller supplied data cannot be accepted."""


class StorageError(Exception):
    """Signal that the underlying document store could not be read or written."""
