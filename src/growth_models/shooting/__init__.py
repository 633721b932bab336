"""Shooting solver for the saddle path.

Modules
-------
trajectory
    Immutable ``Trajectory`` result and the ``TrajectoryBuffer`` used
    while simulating.
monotonicity
    Path classification and the bracket decision table.
solver
    ``ShootingSolver`` bisection over initial consumption.
"""

from growth_models.shooting.monotonicity import (
    BracketUpdate,
    PathMonotonicity,
    adjudicate,
    classify_path,
    is_non_decreasing,
    is_non_increasing,
)
from growth_models.shooting.solver import ShootingSolver, find_optimal_path
from growth_models.shooting.trajectory import Trajectory, TrajectoryBuffer

__all__ = [
    "BracketUpdate",
    "PathMonotonicity",
    "ShootingSolver",
    "Trajectory",
    "TrajectoryBuffer",
    "adjudicate",
    "classify_path",
    "find_optimal_path",
    "is_non_decreasing",
    "is_non_increasing",
]
