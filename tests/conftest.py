"""Pytest fixtures for focal tests."""

from __future__ import annotations

import typing

import pytest


def person(name: str, age: int, children: list[dict[str, typing.Any]] | None = None) -> dict[str, typing.Any]:
    return {"name": name, "age": age, "children": children}


@pytest.fixture
def jackie() -> dict[str, typing.Any]:
    """Jackie -> Brandon -> (Rufus, Clementine)."""
    rufus = person("Rufus", 1)
    clementine = person("Clementine", 1)
    brandon = person("Brandon", 37, [rufus, clementine])
    return person("Jackie", 57, [brandon])


@pytest.fixture
def todos() -> list[dict[str, typing.Any]]:
    """Two open todos."""
    return [
        {"text": "Write some good examples for Optics", "completed": False},
        {"text": "Make some coffee", "completed": False},
    ]


@pytest.fixture
def scores() -> dict[str, int]:
    return {"a": 1, "b": 2}
