"""Trajectory containers for forward-simulated (k, c) paths.

``TrajectoryBuffer`` is the working storage used while simulating: a
growable array indexed by step number with a ``valid_length`` cursor that
stops at the first non-finite sample.  ``Trajectory`` is the immutable
result handed back to callers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

import numpy as np

from growth_models.core.types import NUMPY_DTYPE, Array


@dataclass(frozen=True)
class Trajectory:
    """Immutable simulated path of capital and consumption.

    Attributes
    ----------
    capital : np.ndarray
        Capital at each step, shape ``(n,)``, read-only.
    consumption : np.ndarray
        Consumption at each step, shape ``(n,)``, read-only.
    step_size : float
        Time increment between consecutive samples.
    initial_consumption : float
        The c(0) that generated the path.
    iterations : int
        Bisection iterations spent finding the path (0 for a plain
        simulation).
    """

    capital: Array
    consumption: Array
    step_size: float
    initial_consumption: float
    iterations: int = 0

    def __len__(self) -> int:
        return int(self.capital.shape[0])

    @property
    def time(self) -> Array:
        """Time stamp of every sample."""
        return np.arange(len(self), dtype=NUMPY_DTYPE) * self.step_size

    @property
    def initial_state(self) -> Tuple[float, float]:
        return float(self.capital[0]), float(self.consumption[0])

    @property
    def final_state(self) -> Tuple[float, float]:
        return float(self.capital[-1]), float(self.consumption[-1])

    def to_dict(self) -> Dict[str, Array]:
        """Plain-array view for persistence and plotting."""
        return {
            "k": self.capital,
            "c": self.consumption,
            "t": self.time,
            "step_size": np.asarray(self.step_size),
            "initial_consumption": np.asarray(self.initial_consumption),
            "iterations": np.asarray(self.iterations),
        }


class TrajectoryBuffer:
    """Growable (k, c) storage with a valid-length cursor.

    Samples are appended in step order.  The first non-finite sample is
    still written (so callers can inspect what overflowed) but the
    ``valid_length`` cursor stays in front of it and every later append is
    rejected, so only the finite prefix is ever read back.

    Parameters
    ----------
    capacity : int
        Initial number of rows; the buffer doubles when full.
    """

    def __init__(self, capacity: int = 1024) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}.")
        self._data = np.empty((capacity, 2), dtype=NUMPY_DTYPE)
        self._written = 0
        self._valid_length = 0
        self._truncated = False

    def reset(self) -> None:
        """Discard all samples while keeping the allocation."""
        self._written = 0
        self._valid_length = 0
        self._truncated = False

    def append(self, capital: float, consumption: float) -> bool:
        """Write the next sample.

        Returns
        -------
        bool
            False once a non-finite sample has been seen; the caller
            should stop simulating.
        """
        if self._truncated:
            return False
        if self._written == self._data.shape[0]:
            self._grow()

        self._data[self._written, 0] = capital
        self._data[self._written, 1] = consumption
        self._written += 1

        if np.isfinite(capital) and np.isfinite(consumption):
            self._valid_length = self._written
            return True
        self._truncated = True
        return False

    def _grow(self) -> None:
        grown = np.empty((2 * self._data.shape[0], 2), dtype=NUMPY_DTYPE)
        grown[: self._written] = self._data[: self._written]
        self._data = grown

    @property
    def valid_length(self) -> int:
        """Number of leading samples that are all finite."""
        return self._valid_length

    @property
    def truncated(self) -> bool:
        """True when simulation stopped on a non-finite sample."""
        return self._truncated

    @property
    def capital(self) -> Array:
        """View of the valid capital prefix."""
        return self._data[: self._valid_length, 0]

    @property
    def consumption(self) -> Array:
        """View of the valid consumption prefix."""
        return self._data[: self._valid_length, 1]

    def freeze(
        self,
        step_size: float,
        initial_consumption: float,
        iterations: int = 0,
    ) -> Trajectory:
        """Copy the valid prefix into an immutable ``Trajectory``."""
        capital = self.capital.copy()
        consumption = self.consumption.copy()
        capital.setflags(write=False)
        consumption.setflags(write=False)
        return Trajectory(
            capital=capital,
            consumption=consumption,
            step_size=float(step_size),
            initial_consumption=float(initial_consumption),
            iterations=int(iterations),
        )
