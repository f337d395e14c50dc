from .adapters import MappingView, ModelView, as_container
from .context import is_strict, lookup_context
from .core import at, indifferent, object, pick, string, symbol
from .errors import (
    HashPickError,
    InvalidArgumentError,
    InvalidResolverError,
    NilPathKeyError,
    NotADictionaryError,
    PathNotEnumerableError,
    PathNotFoundError,
)
from .lib.core_helpers import is_dictionary, to_interned_key, to_string_key
from .missing import NOT_FOUND, Missing
from .resolvers import (
    resolve_indifferent,
    resolve_object,
    resolve_string,
    resolve_symbol,
)
from .symbol import Symbol
from .types import Absent, Found, KeyedContainer

__all__ = [
    # Lookups
    "pick",
    "object",
    "string",
    "symbol",
    "indifferent",
    "at",
    # Resolvers
    "resolve_object",
    "resolve_string",
    "resolve_symbol",
    "resolve_indifferent",
    "Found",
    "Absent",
    # Keys and containers
    "Symbol",
    "KeyedContainer",
    "is_dictionary",
    "to_string_key",
    "to_interned_key",
    "ModelView",
    "MappingView",
    "as_container",
    # Results
    "NOT_FOUND",
    "Missing",
    # Configuration
    "lookup_context",
    "is_strict",
    # Errors
    "HashPickError",
    "InvalidArgumentError",
    "NotADictionaryError",
    "PathNotEnumerableError",
    "NilPathKeyError",
    "InvalidResolverError",
    "PathNotFoundError",
]
