"""
The `partials` module builds one-argument lookup functions from a path.

Useful where a callable is expected, e.g. as a `key=` function or inside
a mapping of output fields:

    import hashpick.partials as p

    get_email = p.indifferent(["contact", "email"])
    emails = [get_email(record) for record in records]
"""

from typing import Any, Callable

from . import core
from .lib.core_helpers import assert_enumerable_path, assert_non_nil_path_keys, assert_resolver
from .missing import NOT_FOUND
from .resolvers import resolve_indifferent
from .types import Path, Resolver


def picker(
    path: Path, resolver: Resolver = resolve_indifferent, default: Any = NOT_FOUND
) -> Callable[[Any], Any]:
    """Create a partial function for pick operations with a custom resolver."""
    keys = assert_enumerable_path(path)
    assert_resolver(resolver)
    if resolver in core.COERCING_RESOLVERS:
        assert_non_nil_path_keys(keys)

    def pick_partial(container):
        return core.pick(container, keys, resolver, default=default)

    return pick_partial


def object(path: Path, default: Any = NOT_FOUND) -> Callable[[Any], Any]:
    """Create a partial function for object key lookups."""
    keys = assert_enumerable_path(path)
    return lambda container: core.object(container, keys, default=default)


def string(path: Path, default: Any = NOT_FOUND) -> Callable[[Any], Any]:
    """Create a partial function for string key lookups."""
    keys = assert_enumerable_path(path)
    assert_non_nil_path_keys(keys)
    return lambda container: core.string(container, keys, default=default)


def symbol(path: Path, default: Any = NOT_FOUND) -> Callable[[Any], Any]:
    """Create a partial function for Symbol key lookups."""
    keys = assert_enumerable_path(path)
    assert_non_nil_path_keys(keys)
    return lambda container: core.symbol(container, keys, default=default)


def indifferent(path: Path, default: Any = NOT_FOUND) -> Callable[[Any], Any]:
    """Create a partial function for indifferent lookups."""
    keys = assert_enumerable_path(path)
    assert_non_nil_path_keys(keys)
    return lambda container: core.indifferent(container, keys, default=default)
