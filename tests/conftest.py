"""Shared test fixtures for vectometry."""

import pytest

from vectometry import Polygon


@pytest.fixture
def unit_square():
    """Counter-clockwise unit square at the origin."""
    return Polygon([(0, 0), (1, 0), (1, 1), (0, 1)])


@pytest.fixture
def right_triangle():
    """Triangle with legs 3 and 3 along the axes."""
    return Polygon([(0, 0), (3, 0), (0, 3)])


@pytest.fixture
def l_shape():
    """Concave polygon with a reflex vertex at (1, 1)."""
    return Polygon([(0, 0), (2, 0), (2, 1), (1, 1), (1, 2), (0, 2)])
