"""Shared test fixtures for trisolve."""

import pytest

from trisolve import VertexSet
from trisolve.solver.config import get_solver_config, set_solver_config


@pytest.fixture
def default_coords():
    """Coordinates of the default ABC placement."""
    return {"A": (70.0, 20.0), "B": (20.0, 120.0), "C": (120.0, 120.0)}


@pytest.fixture
def right_vertices():
    """Right isosceles triangle with legs of 3 along the axes."""
    return VertexSet.from_coords("ABC", [(0.0, 0.0), (3.0, 0.0), (0.0, 3.0)])


@pytest.fixture
def restore_solver_config():
    saved = get_solver_config()
    yield
    set_solver_config(saved)
