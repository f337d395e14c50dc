"""
Helper functions for core pick operations.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Callable

from ..errors import (
    InvalidResolverError,
    NilPathKeyError,
    NotADictionaryError,
    PathNotEnumerableError,
)
from ..symbol import Symbol
from ..types import KeyedContainer

# Membership on these tests values (or nothing), not keys
_NON_DICTIONARY_TYPES = (str, bytes, bytearray, Sequence, type)


def is_dictionary(value: Any) -> bool:
    """Check if value satisfies the keyed container contract."""
    if isinstance(value, Mapping):
        return True
    if isinstance(value, _NON_DICTIONARY_TYPES):
        return False
    return isinstance(value, KeyedContainer)


def contains_key(container: KeyedContainer, key: Any) -> bool:
    """Membership test that treats unhashable keys as absent."""
    try:
        return key in container
    except TypeError:
        return False


def assert_dictionary(value: Any) -> None:
    if not is_dictionary(value):
        raise NotADictionaryError(value)


def assert_enumerable_path(path: Any) -> tuple[Any, ...]:
    """
    Validate a path and materialize it.

    Generators are consumed exactly once here. Strings and mappings are
    rejected even though they are iterable.
    """
    if isinstance(path, (str, bytes, bytearray, Mapping)):
        raise PathNotEnumerableError(path)
    try:
        return tuple(path)
    except TypeError as e:
        raise PathNotEnumerableError(path) from e


def assert_non_nil_path_keys(path: tuple[Any, ...]) -> None:
    for position, key in enumerate(path):
        if key is None:
            raise NilPathKeyError(path, position)


def assert_resolver(resolver: Any) -> None:
    if not callable(resolver):
        raise InvalidResolverError(
            f"resolver is not callable: {type(resolver).__name__}"
        )


def to_string_key(key: Any) -> str:
    """Canonical string form of a key. Symbol("a") -> "a"."""
    if key is None:
        raise NilPathKeyError()
    return str(key)


def to_interned_key(key: Any) -> Symbol:
    """Canonical symbol form of a key. "a" -> Symbol("a")."""
    if key is None:
        raise NilPathKeyError()
    if isinstance(key, Symbol):
        return key
    return Symbol(str(key))


def map_path(path: tuple[Any, ...], transform: Callable[[Any], Any]) -> tuple[Any, ...]:
    """Apply a key transform to every key of a path."""
    return tuple(transform(key) for key in path)
