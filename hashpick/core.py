"""
Core pick function and lookup strategies for hashpick.

Note: this module defines a function named `object`, shadowing the builtin
inside the module.
"""

import logging
from typing import Any

from .context import is_strict
from .errors import InvalidArgumentError, InvalidResolverError, PathNotFoundError
from .lib.core_helpers import (
    assert_dictionary,
    assert_enumerable_path,
    assert_non_nil_path_keys,
    assert_resolver,
    is_dictionary,
    map_path,
    to_interned_key,
    to_string_key,
)
from .missing import NOT_FOUND
from .resolvers import resolve_indifferent, resolve_object, resolve_string, resolve_symbol
from .types import Absent, Found, KeyedContainer, Path, Resolver

logger = logging.getLogger(__name__)

# Resolvers that coerce keys, so None may not appear anywhere in the path
COERCING_RESOLVERS = (resolve_string, resolve_symbol, resolve_indifferent)


def pick(
    container: KeyedContainer,
    path: Path,
    resolver: Resolver,
    *,
    default: Any = NOT_FOUND,
) -> Any:
    """
    General form of key path iteration.

    Calls `resolver(accumulator, key)` for each key of the path, starting
    with the container as accumulator. Found(value) makes value the
    accumulator for the next key (or the result, after the last key).
    Absent aborts the walk, as does an accumulator that is not a dictionary
    while keys remain.

    Args:
        container: Dictionary to apply the path to
        path: Ordered iterable of keys
        resolver: Function(container, key) -> Found | Absent
        default: Value returned when the walk is aborted

    Returns:
        Value at the end of the path, the container itself for an empty
        path, or `default` (NOT_FOUND unless given) if the walk aborted

    Raises:
        NotADictionaryError: If container is not a dictionary
        PathNotEnumerableError: If path is not an ordered iterable of keys
        NilPathKeyError: If resolver is one of the built-in coercing
            resolvers and any key in path is None
        InvalidResolverError: If resolver is not callable or returns
            something other than Found / Absent
        PathNotFoundError: In strict mode, if the walk aborted

    Example:
        def live_only(d, key):
            if d.get("live") and key in d:
                return Found(d[key])
            return Absent(key)

        dictionary = {
            "live": True,
            "sheldon": {"live": True, "first_name": "Sheldon"},
            "charles": {"first_name": "Charles"},
        }
        pick(dictionary, ["sheldon", "first_name"], live_only)  # "Sheldon"
        pick(dictionary, ["charles", "first_name"], live_only)  # NOT_FOUND
    """
    assert_dictionary(container)
    keys = assert_enumerable_path(path)
    assert_resolver(resolver)
    if resolver in COERCING_RESOLVERS:
        assert_non_nil_path_keys(keys)
    return _walk(container, keys, resolver, default)


def _walk(container: KeyedContainer, keys: tuple[Any, ...], resolver: Resolver, default: Any) -> Any:
    """Walk validated keys. Preconditions are checked by the caller."""
    accumulator: Any = container

    for key in keys:
        if not is_dictionary(accumulator):
            logger.debug(
                "Lookup aborted at key %r: %s is not a dictionary",
                key,
                type(accumulator).__name__,
            )
            return _miss(keys, key, default)

        result = resolver(accumulator, key)
        if isinstance(result, Absent):
            logger.debug("Lookup aborted at key %r: key not found", key)
            return _miss(keys, key, default)
        if not isinstance(result, Found):
            raise InvalidResolverError(
                f"resolver must return Found or Absent, got {type(result).__name__}"
            )
        accumulator = result.value

    return accumulator


def _miss(keys: tuple[Any, ...], key: Any, default: Any) -> Any:
    if is_strict():
        raise PathNotFoundError(keys, key)
    return default


def object(container: KeyedContainer, path: Path, *, default: Any = NOT_FOUND) -> Any:
    """
    Fetch a value using the path keys as-is.

    Any hashable value is a valid key, including None.

    Examples:
        object({1: {None: "x"}}, [1, None])   # "x"
        object({"a": 1}, ["b"])               # NOT_FOUND
    """
    return pick(container, path, resolve_object, default=default)


def string(container: KeyedContainer, path: Path, *, default: Any = NOT_FOUND) -> Any:
    """
    Fetch a value using the string form of each path key.

    Raises:
        NilPathKeyError: If any key in path is None
    """
    assert_dictionary(container)
    keys = assert_enumerable_path(path)
    assert_non_nil_path_keys(keys)
    return object(container, map_path(keys, to_string_key), default=default)


def symbol(container: KeyedContainer, path: Path, *, default: Any = NOT_FOUND) -> Any:
    """
    Fetch a value using the Symbol form of each path key.

    Raises:
        NilPathKeyError: If any key in path is None
    """
    assert_dictionary(container)
    keys = assert_enumerable_path(path)
    assert_non_nil_path_keys(keys)
    return object(container, map_path(keys, to_interned_key), default=default)


def indifferent(container: KeyedContainer, path: Path, *, default: Any = NOT_FOUND) -> Any:
    """
    Fetch a value trying each key as a Symbol, then as a string.

    This is the lookup most callers want for deserialized data where some
    levels are keyed by Symbol and others by str.

    Args:
        container: Dictionary to apply the path to
        path: Ordered iterable of keys (e.g., ["people", "sheldon", "email"])
        default: Value returned if any key lookup fails

    Returns:
        Value at path, or `default` (NOT_FOUND unless given) if not found

    Raises:
        NotADictionaryError: If container is not a dictionary
        PathNotEnumerableError: If path is not an ordered iterable of keys
        NilPathKeyError: If any key in path is None, checked before any
            lookup happens
        PathNotFoundError: In strict mode, if the path does not resolve

    Examples:
        people = {
            Symbol("people"): {
                "sheldon": {Symbol("email"): "sheldonh@starjuice"},
                "charles": {Symbol("first_name"): "Charles"},
            }
        }
        indifferent(people, ["people", "sheldon", "email"])  # "sheldonh@starjuice"
        indifferent(people, ["people", "charles", "email"])  # NOT_FOUND
    """
    assert_dictionary(container)
    keys = assert_enumerable_path(path)
    assert_non_nil_path_keys(keys)
    return pick(container, keys, resolve_indifferent, default=default)


class _IndifferentShorthand:
    """
    Index-style shorthand for indifferent().

        at[data, ["a", "b"]]   # same as indifferent(data, ["a", "b"])
        at(data, ["a", "b"], default=0)
    """

    def __getitem__(self, args: Any) -> Any:
        if not isinstance(args, tuple) or len(args) != 2:
            raise InvalidArgumentError("at[...] takes a container and a path")
        container, path = args
        return indifferent(container, path)

    def __call__(self, container: KeyedContainer, path: Path, *, default: Any = NOT_FOUND) -> Any:
        return indifferent(container, path, default=default)

    def __repr__(self) -> str:
        return "hashpick.at"


at = _IndifferentShorthand()
