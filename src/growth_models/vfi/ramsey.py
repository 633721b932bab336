"""Value Function Iteration for the Ramsey-Cass-Koopmans model.

Solves the household's continuous-time problem on a uniform capital grid:

* State   — capital per worker k.
* Control — consumption c, with k̇ = f(k) − δk − c.

The stationary HJB equation is iterated explicitly in pseudo-time with an
upwind derivative (see :mod:`growth_models.vfi.engine`), and the policy
is read off the envelope condition u'(c) = V'(k).

Architecture note
-----------------
This module is a thin orchestrator.  Finite-difference primitives are
delegated to ``vfi.kernels.hjb_kernels``, iteration to ``vfi.engine`` and
policy extraction to ``vfi.policies``.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np
import tensorflow as tf

from growth_models.config.economic_params import ModelParameters
from growth_models.config.solver_config import ValueIterationConfig
from growth_models.core.errors import NonConvergence
from growth_models.core.types import NUMPY_DTYPE, Tensor
from growth_models.econ.primitives import Primitives
from growth_models.vfi.engine import HJBEngine
from growth_models.vfi.grids.grid_builder import GridBuilder
from growth_models.vfi.policies import implied_drift
from growth_models.vfi.results import (
    ValueGrid,
    ValueIterationResult,
    frozen_array,
)

logger = logging.getLogger(__name__)


class RamseyModelVFI:
    """HJB value-iteration solver for the one-sector growth model.

    Parameters
    ----------
    params : ModelParameters
        Structural parameters (frozen dataclass).
    config : ValueIterationConfig, optional
        Grid size and bounds, tolerance, iteration limit and CFL factor.
    """

    def __init__(
        self,
        params: ModelParameters,
        config: Optional[ValueIterationConfig] = None,
    ) -> None:
        self.params: ModelParameters = params
        self.config: ValueIterationConfig = config or ValueIterationConfig()
        self.primitives: Primitives = Primitives.from_params(params)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def _validate_inputs(self, k_grid: Tensor, v_init: Tensor) -> None:
        """Check the grid and initial guess before iterating.

        Raises
        ------
        ValueError
            If the grid is not uniform and increasing, if net output is not
            positive on it, or if the initial guess is malformed.
        """
        GridBuilder.grid_spacing(k_grid)

        if v_init.shape != k_grid.shape:
            raise ValueError(
                f"initial_guess shape {tuple(v_init.shape)} does not match "
                f"grid shape {tuple(k_grid.shape)}."
            )
        if not bool(tf.reduce_all(tf.math.is_finite(v_init))):
            raise ValueError("initial_guess must be finite at every grid point.")

        net_output = self.primitives.steady_consumption(k_grid)
        if not bool(tf.reduce_all(net_output > 0.0)):
            raise ValueError(
                "f(k) - delta*k must be positive on the whole grid; "
                f"lower k_max (got {float(k_grid[-1]):.4g})."
            )

    # ------------------------------------------------------------------
    # Public entry points
    # ------------------------------------------------------------------

    def solve_value_function(
        self,
        grid: Tensor,
        initial_guess: Tensor,
        max_iterations: Optional[int] = None,
        convergence_tolerance: Optional[float] = None,
        strict: Optional[bool] = None,
    ) -> ValueIterationResult:
        """Iterate the explicit upwind HJB update until convergence.

        Parameters
        ----------
        grid : Tensor or array
            Strictly increasing, uniformly spaced capital points.
        initial_guess : Tensor or array
            Initial value sample at each grid point.
        max_iterations : int, optional
            Iteration bound; defaults to ``config.max_iterations``.
        convergence_tolerance : float, optional
            Sup-norm tolerance; defaults to ``config.tolerance``.
        strict : bool, optional
            Raise on non-convergence; defaults to ``config.strict``.

        Returns
        -------
        ValueIterationResult
            Value samples, derivative, consumption policy and
            convergence diagnostics.

        Raises
        ------
        ValueError
            On an invalid grid or initial guess.
        NonConvergence
            If *strict* and the bound is reached; the exception carries
            the best-effort result.
        NumericOverflow
            If an iterate becomes non-finite.
        """
        max_iterations = (
            self.config.max_iterations if max_iterations is None else max_iterations
        )
        tolerance = (
            self.config.tolerance
            if convergence_tolerance is None
            else convergence_tolerance
        )
        strict = self.config.strict if strict is None else strict

        k_grid = tf.constant(np.asarray(grid, dtype=NUMPY_DTYPE))
        v_init = tf.constant(np.asarray(initial_guess, dtype=NUMPY_DTYPE))
        self._validate_inputs(k_grid, v_init)

        logger.info(
            "Starting RamseyModelVFI.solve_value_function() — "
            "α=%.3f, θ=%.3f, δ=%.3f, ρ=%.3f, n_k=%d",
            self.params.capital_share,
            self.params.risk_aversion,
            self.params.depreciation_rate,
            self.params.discount_rate,
            int(k_grid.shape[0]),
        )

        engine = HJBEngine(
            self.primitives,
            k_grid,
            tol=tolerance,
            max_iter=max_iterations,
            step_fraction=self.config.step_fraction,
        )
        v_curr, dv, consumption, iterations, diff, converged, time_step = (
            engine.run(v_init)
        )

        self._log_drift_diagnostics(k_grid, consumption)

        result = ValueIterationResult(
            value_grid=ValueGrid.from_tensors(k_grid, v_curr, dv),
            consumption=frozen_array(consumption),
            converged=converged,
            iterations=iterations,
            final_diff=diff,
            time_step=time_step,
        )

        if not converged and strict:
            raise NonConvergence(result)
        return result

    def solve(self) -> ValueIterationResult:
        """Solve on the configured grid starting from ``v0(k) = u(k)``."""
        k_grid, _ = GridBuilder.build_capital_grid(self.config, self.params)
        v_init = self.primitives.utility(k_grid)
        return self.solve_value_function(k_grid, v_init)

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def _log_drift_diagnostics(self, k_grid: tf.Tensor, consumption: tf.Tensor) -> None:
        """Log where the policy-implied drift changes sign (≈ k*)."""
        drift = implied_drift(k_grid, consumption, self.primitives).numpy()
        k = k_grid.numpy()
        crossings = np.where(np.diff(np.sign(drift)) < 0)[0]
        k_star = self.primitives.steady_state.capital
        if crossings.size:
            logger.info(
                "Policy drift changes sign near k=%.4f (analytic k*=%.4f).",
                float(k[crossings[0]]),
                k_star,
            )
        else:
            logger.info(
                "Policy drift has no sign change on the grid (analytic k*=%.4f).",
                k_star,
            )
