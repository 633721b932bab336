"""Numerical engine for explicit finite-difference HJB value iteration.

This module iterates the stationary Hamilton-Jacobi-Bellman equation

    ρ V(k) = max_c { u(c) + V'(k) (f(k) − δk − c) }

forward in pseudo-time with an upwind choice of V'(k), until successive
iterates stop changing.  It is agnostic to how the grid and initial guess
were produced.

Example::

    >>> engine = HJBEngine(primitives, k_grid, tol=1e-6, max_iter=200000)
    >>> v, dv, c, iterations, diff, converged, dt = engine.run(v_init)
"""

from __future__ import annotations

import logging
from typing import Tuple

import numpy as np
import tensorflow as tf

from growth_models.core.errors import NumericOverflow
from growth_models.core.math import is_finite
from growth_models.core.types import TENSORFLOW_DTYPE, Tensor
from growth_models.econ.primitives import Primitives
from growth_models.vfi.kernels.hjb_kernels import (
    explicit_update_core,
    one_sided_differences_core,
    upwind_select_core,
)
from growth_models.vfi.policies import extract_consumption_policy

logger = logging.getLogger(__name__)

# Tolerances under which two iterates are treated as identical (np.allclose style).
STALL_RTOL = 1e-13
STALL_ATOL = 1e-15


class HJBEngine:
    """Explicit upwind iterator for the stationary HJB equation.

    Parameters
    ----------
    primitives : Primitives
        Production and utility functions of the model.
    k_grid : Tensor
        Uniform, strictly increasing capital grid, shape ``(n,)``.
    tol : float
        Convergence tolerance on ``‖V_{t+1} − V_t‖∞``.
    max_iter : int
        Maximum number of explicit steps.
    step_fraction : float
        CFL factor used to pick the pseudo-time step.

    Raises
    ------
    ValueError
        If *tol*, *max_iter* or *step_fraction* is non-positive.
    """

    def __init__(
        self,
        primitives: Primitives,
        k_grid: Tensor,
        tol: float,
        max_iter: int,
        step_fraction: float = 0.25,
    ) -> None:
        if tol <= 0.0:
            raise ValueError(f"Tolerance must be positive, got {tol}.")
        if max_iter <= 0:
            raise ValueError(
                f"max_iter must be positive, got {max_iter}."
            )
        if step_fraction <= 0.0:
            raise ValueError(
                f"step_fraction must be positive, got {step_fraction}."
            )

        self.primitives: Primitives = primitives
        self.k_grid: tf.Tensor = tf.cast(k_grid, TENSORFLOW_DTYPE)
        self.dk: tf.Tensor = self.k_grid[1] - self.k_grid[0]
        self.tol: float = float(tol)
        self.max_iter: int = int(max_iter)
        self.step_fraction: float = float(step_fraction)

        # Invariant across iterations.
        self.net_output: tf.Tensor = primitives.steady_consumption(self.k_grid)
        self.dv_zero_drift: tf.Tensor = primitives.utility_derivative(
            self.net_output
        )
        self.discount_rate: tf.Tensor = tf.constant(
            primitives.params.discount_rate, dtype=TENSORFLOW_DTYPE
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def time_step(self, v_init: Tensor) -> float:
        """Pseudo-time step ``Δ = step_fraction · dk / max_drift``.

        ``max_drift`` is the larger of ``max |f(k) − δk|`` and the largest
        finite drift magnitude implied by *v_init*.
        """
        v_init = tf.cast(v_init, TENSORFLOW_DTYPE)
        _, consumption = self._upwind_core(v_init)
        drift = self.net_output - consumption
        finite_drift = tf.where(
            tf.math.is_finite(drift), tf.abs(drift), tf.zeros_like(drift)
        )
        max_drift = max(
            float(tf.reduce_max(tf.abs(self.net_output))),
            float(tf.reduce_max(finite_drift)),
        )
        return self.step_fraction * float(self.dk) / max_drift

    def derivative_and_policy(self, v: Tensor) -> Tuple[tf.Tensor, tf.Tensor]:
        """Upwind derivative V'(k) and consumption u'^{-1}(V'(k)) of *v*."""
        return self._upwind_core(tf.cast(v, TENSORFLOW_DTYPE))

    def run(
        self, v_init: Tensor
    ) -> Tuple[tf.Tensor, tf.Tensor, tf.Tensor, int, float, bool, float]:
        """Execute explicit value iteration until convergence.

        Parameters
        ----------
        v_init : Tensor
            Initial value samples, shape ``(n,)``.

        Returns
        -------
        v : tf.Tensor
            Final value samples.
        dv : tf.Tensor
            Upwind derivative of the final iterate.
        consumption : tf.Tensor
            Consumption policy implied by *dv*.
        iterations : int
            Number of explicit steps performed.
        diff : float
            Sup-norm change of the last step.
        converged : bool
            Whether the tolerance (or the stall test) was met.
        time_step : float
            Pseudo-time step used.

        Raises
        ------
        NumericOverflow
            If an iterate becomes non-finite.
        """
        v_curr = tf.cast(v_init, TENSORFLOW_DTYPE)
        time_step = self.time_step(v_curr)
        logger.info(
            "HJBEngine starting: n=%d, dk=%.4e, Δ=%.4e, tol=%.1e, max_iter=%d",
            int(self.k_grid.shape[0]), float(self.dk), time_step,
            self.tol, self.max_iter,
        )

        iterations, v_curr, diff, done = self._iterate(
            v_curr, tf.constant(time_step, dtype=TENSORFLOW_DTYPE)
        )
        iterations = int(iterations)
        diff = float(diff)

        if not (is_finite(diff) and is_finite(v_curr)):
            raise NumericOverflow(
                f"Value iterate became non-finite after {iterations} steps "
                f"(Δ={time_step:.3e}); reduce step_fraction."
            )

        converged = bool(done)
        if converged:
            logger.info(
                "HJBEngine converged in %d iterations (diff=%.2e).",
                iterations,
                diff,
            )
        else:
            logger.warning(
                "HJBEngine did not converge after %d iterations "
                "(final diff=%.2e).",
                self.max_iter,
                diff,
            )

        dv, consumption = self._upwind_core(v_curr)
        return v_curr, dv, consumption, iterations, diff, converged, time_step

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _upwind_core(self, v: Tensor) -> Tuple[tf.Tensor, tf.Tensor]:
        """Upwind derivative and consumption for value samples *v*."""
        primitives = self.primitives
        dvf, dvb = one_sided_differences_core(
            v, self.dk, self.dv_zero_drift[0], self.dv_zero_drift[-1]
        )
        drift_forward = self.net_output - primitives.inverse_utility_derivative(dvf)
        drift_backward = self.net_output - primitives.inverse_utility_derivative(dvb)
        dv = upwind_select_core(
            dvf, dvb, drift_forward, drift_backward, self.dv_zero_drift
        )
        return dv, extract_consumption_policy(dv, primitives)

    def _step_core(
        self, v: Tensor, time_step: Tensor
    ) -> Tuple[tf.Tensor, tf.Tensor]:
        """Single explicit update; returns the new iterate and sup-norm diff."""
        dv, consumption = self._upwind_core(v)
        flow = self.primitives.utility(consumption)
        drift = self.net_output - consumption
        return explicit_update_core(
            v, dv, flow, drift, self.discount_rate, time_step
        )

    @tf.function
    def _iterate(
        self, v_init: Tensor, time_step: Tensor
    ) -> Tuple[tf.Tensor, tf.Tensor, tf.Tensor, tf.Tensor]:
        """Run the update loop in-graph until convergence or the bound."""

        def cond(i, v, diff, done):
            return tf.logical_and(i < self.max_iter, tf.logical_not(done))

        def body(i, v, diff, done):
            v_next, diff = self._step_core(v, time_step)
            stalled = tf.reduce_all(
                tf.abs(v_next - v) <= STALL_ATOL + STALL_RTOL * tf.abs(v)
            )
            finished = tf.logical_or(diff < self.tol, stalled)
            blown_up = tf.logical_not(tf.math.is_finite(diff))
            return i + 1, v_next, diff, tf.logical_or(finished, blown_up)

        i0 = tf.constant(0, dtype=tf.int32)
        diff0 = tf.constant(np.inf, dtype=TENSORFLOW_DTYPE)
        done0 = tf.constant(False)
        return tf.while_loop(cond, body, [i0, v_init, diff0, done0])
