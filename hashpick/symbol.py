"""
Symbol key type, the interned counterpart of a plain string key.
"""

import sys
from typing import Any


class Symbol:
    """
    Interned name usable as a dictionary key, distinct from str.

    Symbol("a") and "a" are different keys, so a single dict can hold both.
    This mirrors data deserialized by tools that keep symbol-labelled and
    string-labelled levels apart.

    Examples:
        Symbol("a") == Symbol("a")        # True
        Symbol("a") == "a"                # False
        str(Symbol("a"))                  # "a"
        {Symbol("a"): 1, "a": 2}          # two entries
    """

    __slots__ = ("name",)

    def __init__(self, name: str):
        if not isinstance(name, str):
            raise TypeError(f"Symbol name must be str, got {type(name).__name__}")
        self.name = sys.intern(name)

    def __repr__(self) -> str:
        return f"Symbol({self.name!r})"

    def __str__(self) -> str:
        return self.name

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Symbol):
            return self.name == other.name
        return NotImplemented

    def __hash__(self) -> int:
        return hash((Symbol, self.name))

    def __reduce__(self):
        # Rebuild through __init__ so the name is interned again on load
        return (Symbol, (self.name,))
