"""
Error hierarchy for hashpick.

Argument errors are programmer mistakes and are raised before any container
is touched. Lookup misses are not errors unless strict mode is enabled.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "HashPickError",
    "InvalidArgumentError",
    "NotADictionaryError",
    "PathNotEnumerableError",
    "NilPathKeyError",
    "InvalidResolverError",
    "PathNotFoundError",
]


class HashPickError(Exception):
    """Base error for all hashpick errors."""


class InvalidArgumentError(HashPickError, ValueError):
    """A lookup was called with arguments that violate its preconditions."""


class NotADictionaryError(InvalidArgumentError):
    def __init__(self, value: Any) -> None:
        super().__init__(f"hash is not a dictionary: {type(value).__name__}")
        self.value = value


class PathNotEnumerableError(InvalidArgumentError):
    def __init__(self, path: Any) -> None:
        super().__init__(f"path is not enumerable: {type(path).__name__}")
        self.path = path


class NilPathKeyError(InvalidArgumentError):
    """Raised when a key that must be coerced to a string or symbol is None."""

    def __init__(self, path: tuple[Any, ...] = (), position: int | None = None) -> None:
        if position is None:
            super().__init__("nil key in path cannot be coerced to a string or symbol")
        else:
            super().__init__(f"nil key in path at position {position}")
        self.path = path
        self.position = position


class InvalidResolverError(InvalidArgumentError):
    pass


# Marks "which key missed is unknown"; None is a valid object key
_UNKNOWN_KEY = object()


class PathNotFoundError(HashPickError, KeyError):
    """Raised for a lookup miss, only in strict mode."""

    def __init__(self, path: tuple[Any, ...], key: Any = _UNKNOWN_KEY) -> None:
        if key is _UNKNOWN_KEY:
            message = f"path {list(path)!r} not found"
        else:
            message = f"key {key!r} of path {list(path)!r} not found"
        super().__init__(message)
        self.path = path
        self.key = key

    @property
    def key_known(self) -> bool:
        return self.key is not _UNKNOWN_KEY

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])
