"""Configuration helpers for solver components."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Tuple

Coord = Tuple[float, float]


@dataclass
class SolverConfig:
    """Placement constants shared by constructors and transforms."""

    default_placement: Tuple[Coord, Coord, Coord] = ((70.0, 20.0), (20.0, 120.0), (120.0, 120.0))
    margin: float = 20.0
    copy_offset: Coord = (10.0, 10.0)
    tolerance: float = 1e-9


_SOLVER_CONFIG = SolverConfig()


def get_solver_config() -> SolverConfig:
    return copy.deepcopy(_SOLVER_CONFIG)


def set_solver_config(config: SolverConfig) -> None:
    global _SOLVER_CONFIG
    _SOLVER_CONFIG = copy.deepcopy(config)
