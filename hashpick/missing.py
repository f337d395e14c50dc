"""
NOT_FOUND sentinel returned by lookups that miss.
"""

from enum import Enum


class Missing(Enum):
    """
    Sentinel indicating a lookup did not resolve.

    Distinct from None, so a path that leads to a stored None can be told
    apart from a path that leads nowhere:

        indifferent({"a": None}, ["a"])   # None
        indifferent({}, ["a"])            # NOT_FOUND

    NOT_FOUND is falsy, which keeps `value or fallback` idioms working.
    """

    NOT_FOUND = "NOT_FOUND"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND = Missing.NOT_FOUND
