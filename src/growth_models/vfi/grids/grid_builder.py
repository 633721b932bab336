# growth_models/vfi/grids/grid_builder.py
"""
Grid construction utilities for the HJB state space.

This module provides functions for building and validating the uniform
capital grid the explicit finite-difference scheme runs on.
"""

from typing import Tuple

import numpy as np
import tensorflow as tf

from growth_models.config.economic_params import ModelParameters
from growth_models.config.solver_config import ValueIterationConfig
from growth_models.core.types import TENSORFLOW_DTYPE, Tensor
from growth_models.econ import SteadyStateCalculator


class GridBuilder:
    """
    Utility class for constructing capital grids.

    This class provides static methods for building and checking the
    discretised capital domain.
    """

    @staticmethod
    def build_capital_grid(
        config: ValueIterationConfig,
        params: ModelParameters,
    ) -> Tuple[Tensor, float]:
        """
        Build a uniformly spaced capital grid.

        Args:
            config: Value-iteration configuration (bounds and size).
            params: Model parameters.

        Returns:
            Tuple containing:
                - k_grid: Capital grid tensor.
                - k_ss: Steady state capital value.

        Raises:
            ValueError: If the bounds or size are invalid.
        """
        if config.n_capital < 3:
            raise ValueError(
                f"n_capital must be >= 3, got {config.n_capital}."
            )
        if not 0.0 < config.k_min < config.k_max:
            raise ValueError(
                f"Capital bounds must satisfy 0 < k_min < k_max, "
                f"got ({config.k_min}, {config.k_max})."
            )

        k_ss = SteadyStateCalculator.calculate_capital(params)
        k_grid = GridBuilder._build_linear_grid(
            config.k_min, config.k_max, config.n_capital
        )
        return k_grid, k_ss

    @staticmethod
    def grid_spacing(k_grid: Tensor, rtol: float = 1e-6) -> float:
        """
        Return the spacing of a uniform, strictly increasing grid.

        Args:
            k_grid: Candidate grid.
            rtol: Allowed relative deviation between consecutive steps.

        Returns:
            The common step ``dk``.

        Raises:
            ValueError: If the grid is too short, not strictly increasing
                or not uniformly spaced.
        """
        k = np.asarray(k_grid, dtype=np.float64)
        if k.ndim != 1 or k.shape[0] < 3:
            raise ValueError(
                f"Capital grid must be 1-D with at least 3 points, got shape {k.shape}."
            )
        steps = np.diff(k)
        if not np.all(steps > 0):
            raise ValueError("Capital grid must be strictly increasing.")
        dk = float(np.mean(steps))
        if not np.allclose(steps, dk, rtol=rtol, atol=0.0):
            raise ValueError(
                f"Capital grid must be uniformly spaced (dk={dk:.6g}, "
                f"min step={steps.min():.6g}, max step={steps.max():.6g})."
            )
        return dk

    @staticmethod
    def _build_linear_grid(
        min_val: float,
        max_val: float,
        n_points: int
    ) -> Tensor:
        """Build a linearly-spaced grid."""
        return tf.cast(
            tf.linspace(
                tf.constant(min_val, TENSORFLOW_DTYPE),
                tf.constant(max_val, TENSORFLOW_DTYPE),
                n_points,
            ),
            TENSORFLOW_DTYPE
        )
