"""Exception types raised by the masonry montage pipeline."""

from __future__ import annotations


class MontageError(Exception):
    """Base class for all montage specific failures."""


class ConfigError(MontageError, ValueError):
    """Invalid user configuration detected before the layout runs."""


class DecodeError(MontageError, OSError):
    """An input image could not be opened or decoded."""


class OperationCancelledError(MontageError):
    """The user declined a destructive step such as directory removal."""


__all__ = [
    "ConfigError",
    "DecodeError",
    "MontageError",
    "OperationCancelledError",
]
