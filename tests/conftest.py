"""Shared test fixtures for cyclicpoly."""

import matplotlib

matplotlib.use("Agg")

import pytest


@pytest.fixture
def pentagon_sides():
    """Irregular pentagon with the circumcentre inside."""
    return [10, 12, 15, 7, 9]


@pytest.fixture
def obtuse_sides():
    """Isosceles triangle whose circumcentre lies outside it."""
    return [10, 6, 6]
