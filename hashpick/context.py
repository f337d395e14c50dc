"""
Lookup configuration scoped to the current thread or asyncio task.

Strict mode is the only setting: when on, a lookup that misses raises
PathNotFoundError instead of returning its default.
"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

_strict_lookups: ContextVar[bool] = ContextVar("hashpick_strict_lookups", default=False)


def is_strict() -> bool:
    """Whether misses raise PathNotFoundError in the current context."""
    return _strict_lookups.get()


@contextmanager
def lookup_context(*, strict: bool | None = None) -> Iterator[bool]:
    """
    Scope lookup configuration to a block.

    Args:
        strict: True makes every miss raise PathNotFoundError, False restores
               NOT_FOUND / default returns, None keeps the enclosing setting.

    Yields:
        The strict setting in effect inside the block.

    Misses and defaults:
        default= only replaces NOT_FOUND. In strict mode a miss raises even
        when a default is given, and a path ending on a stored None still
        returns None. Argument errors (NotADictionaryError, NilPathKeyError,
        ...) are raised in both modes.

    Example:
        from hashpick import indifferent, lookup_context

        config = {"db": {"host": "localhost"}}

        indifferent(config, ["db", "port"])              # NOT_FOUND
        indifferent(config, ["db", "port"], default=5432)  # 5432

        with lookup_context(strict=True):
            indifferent(config, ["db", "host"])          # "localhost"
            indifferent(config, ["db", "port"], default=5432)  # PathNotFoundError
    """
    if strict is None:
        strict = is_strict()
    token = _strict_lookups.set(strict)
    try:
        yield strict
    finally:
        _strict_lookups.reset(token)
