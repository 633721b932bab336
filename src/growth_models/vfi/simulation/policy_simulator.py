"""Deterministic capital simulator under a solved consumption policy.

Integrates k̇ = f(k) − δk − c(k) forward with the policy interpolated
from the HJB grid solution, and compares a shooting trajectory against
that policy so the two solvers can be validated against each other.
"""

from __future__ import annotations

from typing import Any, Dict, Tuple

import numpy as np
import tensorflow as tf

from growth_models.core.types import NUMPY_DTYPE, TENSORFLOW_DTYPE
from growth_models.econ.primitives import Primitives
from growth_models.shooting.trajectory import Trajectory
from growth_models.vfi.grids.grid_utils import linear_interp


def _policy_at(k_grid: np.ndarray, c_grid: np.ndarray, k: np.ndarray) -> np.ndarray:
    return linear_interp(
        tf.constant(k_grid, dtype=TENSORFLOW_DTYPE),
        tf.constant(c_grid, dtype=TENSORFLOW_DTYPE),
        tf.constant(k, dtype=TENSORFLOW_DTYPE),
    ).numpy()


class PolicySimulator:
    """Simulate capital paths from a batch of initial stocks.

    Parameters
    ----------
    primitives : Primitives
        Model primitives used for output and depreciation.
    n_steps : int
        Number of simulation periods.
    step_size : float
        Time increment dt.
    """

    def __init__(
        self,
        primitives: Primitives,
        n_steps: int = 5000,
        step_size: float = 0.01,
    ) -> None:
        if n_steps < 1:
            raise ValueError(f"n_steps must be >= 1, got {n_steps}.")
        if step_size <= 0.0:
            raise ValueError(f"step_size must be positive, got {step_size}.")
        self.primitives = primitives
        self.n_steps = n_steps
        self.step_size = step_size

    def run(
        self, solution: Dict[str, Any], initial_capital
    ) -> Tuple[Dict[str, np.ndarray], Dict[str, float]]:
        """Simulate under the solved policy and return history + stats.

        Parameters
        ----------
        solution : dict
            Output of ``ValueIterationResult.to_dict()`` (keys ``K``, ``C``).
        initial_capital : float or array
            Starting capital for each simulated path.

        Returns
        -------
        history : dict
            ``K`` and ``C`` → arrays of shape ``(n_paths, n_steps)``.
        stats : dict
            ``min_hit_pct``, ``max_hit_pct`` — grid boundary-hit rates (%);
            ``final_k_mean`` — mean terminal capital.
        """
        k_grid = np.asarray(solution["K"], dtype=NUMPY_DTYPE)
        c_grid = np.asarray(solution["C"], dtype=NUMPY_DTYPE)
        k_min, k_max = float(k_grid[0]), float(k_grid[-1])

        k_sim = np.atleast_1d(np.asarray(initial_capital, dtype=NUMPY_DTYPE)).copy()
        k_sim = np.clip(k_sim, k_min, k_max)
        n_paths = k_sim.shape[0]
        k_history = np.zeros((n_paths, self.n_steps), dtype=NUMPY_DTYPE)
        c_history = np.zeros((n_paths, self.n_steps), dtype=NUMPY_DTYPE)

        for t in range(self.n_steps):
            c_sim = _policy_at(k_grid, c_grid, k_sim)
            k_history[:, t] = k_sim
            c_history[:, t] = c_sim

            k_next = k_sim + self.step_size * self.primitives.capital_drift(k_sim, c_sim)
            k_sim = np.clip(k_next, k_min, k_max)

        stats = {
            "min_hit_pct": float(np.mean(k_history <= k_min) * 100),
            "max_hit_pct": float(np.mean(k_history >= k_max) * 100),
            "final_k_mean": float(np.mean(k_history[:, -1])),
        }
        return {"K": k_history, "C": c_history}, stats


def compare_with_trajectory(
    solution: Dict[str, Any], trajectory: Trajectory
) -> Dict[str, float]:
    """Gap between a shooting path and the HJB consumption policy.

    Only the part of the trajectory inside the grid is compared.

    Returns
    -------
    dict
        ``max_abs_gap`` and ``max_rel_gap`` of c along the path, and
        ``n_compared`` — the number of samples used.
    """
    k_grid = np.asarray(solution["K"], dtype=NUMPY_DTYPE)
    c_grid = np.asarray(solution["C"], dtype=NUMPY_DTYPE)

    inside = (trajectory.capital >= k_grid[0]) & (trajectory.capital <= k_grid[-1])
    if not np.any(inside):
        raise ValueError("Trajectory lies entirely outside the capital grid.")

    k_path = trajectory.capital[inside]
    c_path = trajectory.consumption[inside]
    c_policy = _policy_at(k_grid, c_grid, k_path)
    gap = np.abs(c_policy - c_path)
    return {
        "max_abs_gap": float(np.max(gap)),
        "max_rel_gap": float(np.max(gap / np.abs(c_path))),
        "n_compared": int(k_path.shape[0]),
    }
