# growth_models/config/solver_config.py
"""
Configuration for the shooting and value-iteration solvers.

This module provides configuration classes and utilities for the numerical
settings of both solvers: simulation step sizes, iteration limits, grid
specifications and convergence tolerances.

Example:
    >>> from growth_models.config.solver_config import load_solver_config
    >>> config = load_solver_config("config/solver.json", "vfi")
    >>> print(f"Capital grid points: {config.n_capital}")
"""

from dataclasses import dataclass, fields
from typing import Type, Union
import os
import sys
import logging

from growth_models.io.file_utils import load_json_file

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShootingConfig:
    """
    Numerical settings for the bisection shooting solver.

    Attributes:
        step_size: Time increment dt of the forward Euler simulation.
        max_iterations: Maximum number of bisection iterations.
        horizon_steps: Number of simulated samples used to judge
            monotonicity of a trial path.
    """

    step_size: float = 0.01
    max_iterations: int = 10000
    horizon_steps: int = 5000


@dataclass(frozen=True)
class ValueIterationConfig:
    """
    Grid and convergence settings for the explicit HJB value iteration.

    Attributes:
        n_capital: Number of points in the capital grid.
        k_min: Lower bound of the capital grid.
        k_max: Upper bound of the capital grid.
        max_iterations: Maximum number of explicit update steps.
        tolerance: Sup-norm change below which iteration stops.
        step_fraction: CFL factor; the pseudo-time step is
            ``step_fraction * dk / max_drift``.
        strict: Raise ``NonConvergence`` when the iteration bound is hit.
    """

    n_capital: int = 250
    k_min: float = 0.01
    k_max: float = 10.0

    max_iterations: int = 200000
    tolerance: float = 1e-6
    step_fraction: float = 0.25

    strict: bool = True


SolverConfig = Union[ShootingConfig, ValueIterationConfig]

_SECTIONS = {
    "shooting": ShootingConfig,
    "vfi": ValueIterationConfig,
}


def load_solver_config(filename: str, section: str) -> SolverConfig:
    """
    Load solver configuration from a JSON file for one solver.

    Args:
        filename: Path to the JSON configuration file.
        section: Key in the JSON file ('shooting' or 'vfi').

    Returns:
        Populated ShootingConfig or ValueIterationConfig instance.

    Raises:
        ValueError: If *section* is not a known solver.
    """
    if section not in _SECTIONS:
        raise ValueError(
            f"Unknown solver section '{section}'. "
            f"Expected one of {sorted(_SECTIONS)}."
        )
    config_cls: Type = _SECTIONS[section]

    if not os.path.exists(filename):
        logger.warning(
            f"Solver config file '{filename}' not found. Using defaults."
        )
        return config_cls()

    try:
        full_data = load_json_file(filename)

        if section not in full_data:
            logger.warning(
                f"Key '{section}' not in {filename}. Using defaults."
            )
            return config_cls()

        section_data = full_data[section]
        valid_keys = {f.name for f in fields(config_cls)}
        filtered_data = {k: v for k, v in section_data.items() if k in valid_keys}

        return config_cls(**filtered_data)

    except Exception as e:
        logger.error(f"Error reading solver config {filename}: {e}")
        sys.exit(1)
