"""
Type definitions for hashpick.

Provides the container protocol, the resolver result types (Found/Absent)
and type aliases.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class KeyedContainer(Protocol):
    """Anything that supports `key in c` and `c[key]`."""

    def __contains__(self, key: Any) -> bool: ...

    def __getitem__(self, key: Any) -> Any: ...


@dataclass(frozen=True, slots=True)
class Found(Generic[T]):
    """Resolver result carrying the value found for a key."""

    value: T

    def is_found(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Absent:
    """Resolver result that aborts the walk."""

    key: Any = None

    def is_found(self) -> bool:
        return False


# Type aliases
Path = Iterable[Any]
Resolution = Found[Any] | Absent
Resolver = Callable[[KeyedContainer, Any], Resolution]
