"""Pytest configuration and fixtures for bed planner tests."""

import pytest

from garden import BedPlanner, Plant, PlantCatalog, default_catalog


@pytest.fixture
def catalog():
    """The bundled plant library."""
    return default_catalog()


@pytest.fixture
def planner(catalog):
    return BedPlanner(catalog)


@pytest.fixture
def toy_catalog():
    """Small synthetic catalog with one-sided relationships.

    ``a`` lists ``b`` as a companion and ``c`` as an enemy; neither
    ``b`` nor ``c`` list anything back.
    """
    return PlantCatalog([
        Plant("a", "Alpha", frozenset({"b"}), frozenset({"c"})),
        Plant("b", "Bravo"),
        Plant("c", "Charlie"),
    ])


@pytest.fixture
def toy_planner(toy_catalog):
    return BedPlanner(toy_catalog)
