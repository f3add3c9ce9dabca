"""Shared fixtures for specifications tests."""

from __future__ import annotations

import pytest

from domain_kit_core.domain.entity import Entity
from domain_kit_specifications import Specification


class Person(Entity[int]):
    age: int
    country: str


@pytest.fixture
def adult_us() -> Person:
    return Person(id=1, age=20, country="US")


@pytest.fixture
def minor_us() -> Person:
    return Person(id=2, age=16, country="US")


@pytest.fixture
def adult_ca() -> Person:
    return Person(id=3, age=40, country="CA")


@pytest.fixture
def is_adult() -> Specification[Person]:
    return Specification(lambda p: p.age >= 18)


@pytest.fixture
def in_us() -> Specification[Person]:
    return Specification(lambda p: p.country == "US")
