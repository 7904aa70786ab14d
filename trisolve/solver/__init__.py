"""Geometric solver: side-length resolution and two-circle intersection."""

from __future__ import annotations

from .config import SolverConfig, get_solver_config, set_solver_config
from .intersect import circle_intersections, locate_vertex
from .resolver import merge_side_constraints, set_side_lengths, side_length

__all__ = [
    "SolverConfig",
    "get_solver_config",
    "set_solver_config",
    "circle_intersections",
    "locate_vertex",
    "merge_side_constraints",
    "set_side_lengths",
    "side_length",
]
