"""Result containers for the HJB value-iteration solver.

All arrays are NumPy and read-only, so a result can be saved or plotted
without TensorFlow and cannot be modified after the solve returns.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

import numpy as np
import tensorflow as tf

from growth_models.core.types import NUMPY_DTYPE, Array
from growth_models.vfi.grids.grid_utils import linear_interp


def frozen_array(values) -> Array:
    array = np.array(values, dtype=NUMPY_DTYPE)
    array.setflags(write=False)
    return array


@dataclass(frozen=True)
class ValueGrid:
    """Capital grid with value and derivative samples at each point."""

    capital: Array
    value: Array
    derivative: Array

    @classmethod
    def from_tensors(cls, capital, value, derivative) -> "ValueGrid":
        return cls(
            capital=frozen_array(capital),
            value=frozen_array(value),
            derivative=frozen_array(derivative),
        )

    @property
    def spacing(self) -> float:
        return float(self.capital[1] - self.capital[0])

    def __len__(self) -> int:
        return int(self.capital.shape[0])


@dataclass(frozen=True)
class ValueIterationResult:
    """Outcome of :meth:`RamseyModelVFI.solve_value_function`.

    Attributes
    ----------
    value_grid : ValueGrid
        Final value samples and their upwind derivative.
    consumption : np.ndarray
        Policy ``c(k) = u'^{-1}(V'(k))`` at every grid point.
    converged : bool
        False when the iteration bound was reached first.
    iterations : int
        Number of explicit steps performed.
    final_diff : float
        Sup-norm change of the last step.
    time_step : float
        Pseudo-time step Δ used by the explicit scheme.
    """

    value_grid: ValueGrid
    consumption: Array
    converged: bool
    iterations: int
    final_diff: float
    time_step: float

    @property
    def capital(self) -> Array:
        return self.value_grid.capital

    def policy(self, capital) -> Array:
        """Consumption policy at arbitrary capital levels (linear interpolation)."""
        query = np.atleast_1d(np.asarray(capital, dtype=NUMPY_DTYPE))
        values = linear_interp(
            tf.constant(self.value_grid.capital),
            tf.constant(self.consumption),
            tf.constant(query),
        )
        return values.numpy()

    def to_dict(self) -> Dict[str, Array]:
        """Plain-array view for persistence and plotting."""
        return {
            "K": self.value_grid.capital,
            "V": self.value_grid.value,
            "dV": self.value_grid.derivative,
            "C": self.consumption,
            "converged": np.asarray(self.converged),
            "iterations": np.asarray(self.iterations),
            "final_diff": np.asarray(self.final_diff),
            "time_step": np.asarray(self.time_step),
        }
