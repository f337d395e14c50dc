"""
Adapters exposing non-dictionary values through the keyed container contract.
"""

from collections.abc import Iterator, Mapping
from typing import Any

from pydantic import BaseModel

from .errors import NotADictionaryError


class ModelView(Mapping):
    """
    Read-only mapping view of a pydantic model, keyed by field name.

    Fields holding nested models are returned as ModelViews too, and
    mapping fields are returned as MappingViews that do the same for their
    values, so a whole model tree (including `dict[str, Model]` fields) can
    be walked with any lookup strategy. Extra fields are
    included when the model allows them.

    Example:
        class Contact(BaseModel):
            email: str

        class Person(BaseModel):
            name: str
            contact: Contact

        person = Person(name="Sheldon", contact=Contact(email="sheldonh@starjuice"))
        indifferent(ModelView(person), ["contact", "email"])  # "sheldonh@starjuice"
    """

    __slots__ = ("_model",)

    def __init__(self, model: BaseModel):
        if not isinstance(model, BaseModel):
            raise NotADictionaryError(model)
        self._model = model

    def _keys(self) -> list[str]:
        keys = list(type(self._model).model_fields)
        if self._model.model_extra:
            keys.extend(self._model.model_extra)
        return keys

    def __contains__(self, key: Any) -> bool:
        return isinstance(key, str) and key in self._keys()

    def __getitem__(self, key: Any) -> Any:
        if key not in self:
            raise KeyError(key)
        return _wrap_field(getattr(self._model, key))

    def __iter__(self) -> Iterator[str]:
        return iter(self._keys())

    def __len__(self) -> int:
        return len(self._keys())

    def __repr__(self) -> str:
        return f"ModelView({self._model!r})"


def as_container(value: Any) -> Any:
    """Wrap pydantic models in a ModelView; return anything else unchanged."""
    if isinstance(value, BaseModel):
        return ModelView(value)
    return value


class MappingView(Mapping):
    """
    Read-only view of a mapping held in a model field.

    Keys are looked up in the underlying mapping unchanged; values that are
    models or mappings are wrapped on access.
    """

    __slots__ = ("_mapping",)

    def __init__(self, mapping: Mapping):
        self._mapping = mapping

    def __contains__(self, key: Any) -> bool:
        return key in self._mapping

    def __getitem__(self, key: Any) -> Any:
        return _wrap_field(self._mapping[key])

    def __iter__(self) -> Iterator[Any]:
        return iter(self._mapping)

    def __len__(self) -> int:
        return len(self._mapping)

    def __repr__(self) -> str:
        return f"MappingView({self._mapping!r})"


def _wrap_field(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return ModelView(value)
    if isinstance(value, Mapping) and not isinstance(value, (ModelView, MappingView)):
        return MappingView(value)
    return value
