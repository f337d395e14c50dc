"""
Tests for walking pydantic models through ModelView.
"""

from typing import Optional

import pytest
from pydantic import BaseModel, ConfigDict

from hashpick import (
    NOT_FOUND,
    MappingView,
    ModelView,
    NotADictionaryError,
    Symbol,
    as_container,
    indifferent,
    is_dictionary,
    object,
    string,
    symbol,
)


class Contacts(BaseModel):
    email: str
    phone: Optional[str] = None


class Person(BaseModel):
    first_name: str
    contacts: Contacts
    tags: dict[str, str] = {}


class Team(BaseModel):
    members: dict[str, Contacts]
    leads: dict[str, dict[str, Contacts]] = {}


class Loose(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str


@pytest.fixture
def person() -> Person:
    return Person(
        first_name="Sheldon",
        contacts=Contacts(email="sheldonh@starjuice"),
        tags={"team": "core"},
    )


class TestModelView:
    def test_is_dictionary(self, person):
        assert not is_dictionary(person)
        assert is_dictionary(ModelView(person))

    def test_field_lookup(self, person):
        view = ModelView(person)
        assert object(view, ["first_name"]) == "Sheldon"
        assert string(view, ["first_name"]) == "Sheldon"

    def test_nested_models(self, person):
        assert indifferent(ModelView(person), ["contacts", "email"]) == "sheldonh@starjuice"

    def test_nested_dict_field(self, person):
        assert indifferent(ModelView(person), ["tags", "team"]) == "core"

    def test_none_field_is_found(self, person):
        assert indifferent(ModelView(person), ["contacts", "phone"]) is None

    def test_unknown_field(self, person):
        assert indifferent(ModelView(person), ["contacts", "fax"]) is NOT_FOUND

    def test_symbol_keys_miss(self, person):
        assert symbol(ModelView(person), ["first_name"]) is NOT_FOUND
        assert object(ModelView(person), [Symbol("first_name")]) is NOT_FOUND

    def test_mapping_protocol(self, person):
        view = ModelView(person)
        assert list(view) == ["first_name", "contacts", "tags"]
        assert len(view) == 3
        assert isinstance(view["contacts"], ModelView)
        with pytest.raises(KeyError):
            view["missing"]

    def test_models_inside_dict_fields(self):
        team = Team(
            members={"sheldon": Contacts(email="sheldonh@starjuice")},
            leads={"core": {"charles": Contacts(email="charles@starjuice")}},
        )
        view = ModelView(team)
        assert indifferent(view, ["members", "sheldon", "email"]) == "sheldonh@starjuice"
        assert string(view, ["leads", "core", "charles", "email"]) == "charles@starjuice"
        assert indifferent(view, ["members", "charles", "email"]) is NOT_FOUND
        assert isinstance(view["members"], MappingView)
        assert dict(view["members"]).keys() == {"sheldon"}

    def test_extra_fields(self):
        view = ModelView(Loose(name="x", nickname="y"))
        assert "nickname" in view
        assert indifferent(view, ["nickname"]) == "y"

    def test_rejects_non_models(self):
        with pytest.raises(NotADictionaryError):
            ModelView({"a": 1})


class TestAsContainer:
    def test_wraps_models(self, person):
        assert isinstance(as_container(person), ModelView)

    def test_passes_through(self):
        value = {"a": 1}
        assert as_container(value) is value
        assert as_container(5) == 5
