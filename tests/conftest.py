from collections.abc import Mapping
from typing import Any

import pytest

from hashpick import Symbol


class ExplodingDict(Mapping):
    """Mapping that fails the test if it is ever read."""

    def __getitem__(self, key: Any) -> Any:
        raise AssertionError(f"container read with key {key!r}")

    def __contains__(self, key: Any) -> bool:
        raise AssertionError(f"container membership tested with key {key!r}")

    def __iter__(self):
        raise AssertionError("container iterated")

    def __len__(self) -> int:
        raise AssertionError("container measured")


@pytest.fixture
def exploding_dict() -> ExplodingDict:
    return ExplodingDict()


@pytest.fixture
def symbol_dict() -> dict[Any, Any]:
    return {
        Symbol("parent_x"): {
            Symbol("child_x"): "parent_x-child_x",
            Symbol("child_y"): "parent_x-child_y",
        },
        Symbol("parent_y"): {
            Symbol("child_x"): "parent_y-child_x",
            Symbol("child_y"): "parent_y-child_y",
        },
    }


@pytest.fixture
def string_dict() -> dict[str, Any]:
    return {
        "parent_x": {
            "child_x": "parent_x-child_x",
            "child_y": "parent_x-child_y",
        },
        "parent_y": {
            "child_x": "parent_y-child_x",
            "child_y": "parent_y-child_y",
        },
    }


@pytest.fixture
def mixed_dict() -> dict[Any, Any]:
    return {
        Symbol("parent_x"): {
            "child_x": "parent_x-child_x",
            "child_y": "parent_x-child_y",
        },
        Symbol("parent_y"): {
            "child_x": "parent_y-child_x",
            "child_y": "parent_y-child_y",
        },
    }
