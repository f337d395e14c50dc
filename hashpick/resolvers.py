"""
Per-step key resolution policies.

Each resolver takes the current container and one path key and returns
Found(value) or Absent(key). They hold no state and can be called on their
own, outside of pick().
"""

from typing import Any

from .lib.core_helpers import contains_key, to_interned_key, to_string_key
from .types import Absent, Found, KeyedContainer, Resolution


def resolve_object(container: KeyedContainer, key: Any) -> Resolution:
    """Look the key up as-is. None is an ordinary key here."""
    if contains_key(container, key):
        return Found(container[key])
    return Absent(key)


def resolve_string(container: KeyedContainer, key: Any) -> Resolution:
    return resolve_object(container, to_string_key(key))


def resolve_symbol(container: KeyedContainer, key: Any) -> Resolution:
    return resolve_object(container, to_interned_key(key))


def resolve_indifferent(container: KeyedContainer, key: Any) -> Resolution:
    """
    Look the key up as a Symbol, falling back to its string form.

    When both forms are present the Symbol entry wins.
    """
    interned = to_interned_key(key)
    if contains_key(container, interned):
        return Found(container[interned])
    string_key = to_string_key(key)
    if contains_key(container, string_key):
        return Found(container[string_key])
    return Absent(key)
