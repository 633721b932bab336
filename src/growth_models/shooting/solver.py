"""Bisection shooting solver for the Ramsey-Cass-Koopmans saddle path.

Given k(0), the solver searches for the initial consumption c(0) whose
forward-simulated path stays monotone in both capital and consumption.
Each trial path is integrated with forward Euler steps of the ODE pair

    dk/dt = f(k) - delta k - c
    dc/dt = c (f'(k) - delta - rho) / theta

and classified by :mod:`growth_models.shooting.monotonicity`; the verdict
moves one end of the bracket to the trial value.

Example::

    >>> solver = ShootingSolver(ModelParameters())
    >>> path = solver.find_optimal_path(1.0, 0.860, 0.865, horizon_steps=5000)
    >>> path.final_state
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from growth_models.config.economic_params import ModelParameters
from growth_models.config.solver_config import ShootingConfig
from growth_models.core.errors import (
    ConvergenceFailure,
    InvalidBracket,
    NumericOverflow,
)
from growth_models.econ.primitives import Primitives
from growth_models.shooting.monotonicity import (
    BracketUpdate,
    adjudicate,
    classify_path,
)
from growth_models.shooting.trajectory import Trajectory, TrajectoryBuffer

logger = logging.getLogger(__name__)


class ShootingSolver:
    """Saddle-path solver by bisection over initial consumption.

    Parameters
    ----------
    params : ModelParameters
        Structural parameters (frozen dataclass).
    config : ShootingConfig, optional
        Defaults for step size, iteration bound and horizon.
    """

    def __init__(
        self,
        params: ModelParameters,
        config: Optional[ShootingConfig] = None,
    ) -> None:
        self.params: ModelParameters = params
        self.config: ShootingConfig = config or ShootingConfig()
        self.primitives: Primitives = Primitives.from_params(params)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    @staticmethod
    def _validate_bracket(min_guess: float, max_guess: float) -> None:
        if not (min_guess > 0.0 and max_guess > 0.0 and min_guess < max_guess):
            raise InvalidBracket(min_guess, max_guess)

    @staticmethod
    def _validate_simulation_inputs(
        initial_capital: float,
        horizon_steps: int,
        step_size: float,
    ) -> None:
        if not (np.isfinite(initial_capital) and initial_capital > 0.0):
            raise ValueError(
                f"initial_capital must be positive, got {initial_capital}."
            )
        if horizon_steps < 2:
            raise ValueError(
                f"horizon_steps must be >= 2, got {horizon_steps}."
            )
        if not step_size > 0.0:
            raise ValueError(f"step_size must be positive, got {step_size}.")

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def _simulate_into(
        self,
        buffer: TrajectoryBuffer,
        initial_capital: float,
        initial_consumption: float,
        horizon_steps: int,
        step_size: float,
    ) -> TrajectoryBuffer:
        """Fill *buffer* with up to *horizon_steps* samples of the ODE pair."""
        primitives = self.primitives
        k = np.float64(initial_capital)
        c = np.float64(initial_consumption)

        buffer.reset()
        buffer.append(k, c)

        # Runaway paths are expected: k may go negative (NaN output) or
        # c may overflow.  The buffer cursor handles both.
        with np.errstate(over="ignore", invalid="ignore", divide="ignore"):
            for _ in range(horizon_steps - 1):
                k, c = (
                    k + step_size * primitives.capital_drift(k, c),
                    c * (1.0 + step_size * primitives.consumption_growth(k)),
                )
                if not buffer.append(k, c):
                    break

        return buffer

    def simulate(
        self,
        initial_capital: float,
        initial_consumption: float,
        horizon_steps: Optional[int] = None,
        step_size: Optional[float] = None,
    ) -> Trajectory:
        """Simulate one trial path and return its finite prefix.

        Parameters
        ----------
        initial_capital : float
            k(0), positive.
        initial_consumption : float
            Trial c(0), positive.
        horizon_steps : int, optional
            Number of samples including the initial point.
        step_size : float, optional
            Time increment dt.

        Returns
        -------
        Trajectory
            The path up to (excluding) the first non-finite sample.
        """
        if horizon_steps is None:
            horizon_steps = self.config.horizon_steps
        if step_size is None:
            step_size = self.config.step_size
        self._validate_simulation_inputs(initial_capital, horizon_steps, step_size)
        if not initial_consumption > 0.0:
            raise ValueError(
                f"initial_consumption must be positive, got {initial_consumption}."
            )

        buffer = TrajectoryBuffer(capacity=horizon_steps)
        self._simulate_into(
            buffer, initial_capital, initial_consumption, horizon_steps, step_size
        )
        return buffer.freeze(step_size, initial_consumption)

    # ------------------------------------------------------------------
    # Public entry point
    # ------------------------------------------------------------------

    def find_optimal_path(
        self,
        initial_capital: float,
        min_guess: float,
        max_guess: float,
        horizon_steps: int,
        step_size: Optional[float] = None,
        max_iterations: Optional[int] = None,
    ) -> Trajectory:
        """Bisect on c(0) until a trial path is monotone over the horizon.

        Parameters
        ----------
        initial_capital : float
            k(0), positive.
        min_guess, max_guess : float
            Positive bracket believed to contain the saddle-path c(0).
        horizon_steps : int
            Samples per trial path used to judge monotonicity (>= 2).
            A path that stays monotone for long enough is taken to be
            the saddle path.
        step_size : float, optional
            Simulation time increment; defaults to ``config.step_size``.
        max_iterations : int, optional
            Bisection bound; defaults to ``config.max_iterations``.

        Returns
        -------
        Trajectory
            The accepted path, truncated at its first non-finite sample.

        Raises
        ------
        InvalidBracket
            If the bracket is inverted or not positive.
        ValueError
            If another argument is out of range.
        NumericOverflow
            If a trial path is non-finite right after its initial point.
        ConvergenceFailure
            If *max_iterations* is exhausted without an accepted path.
        """
        step_size = self.config.step_size if step_size is None else step_size
        max_iterations = (
            self.config.max_iterations if max_iterations is None else max_iterations
        )

        self._validate_bracket(min_guess, max_guess)
        self._validate_simulation_inputs(initial_capital, horizon_steps, step_size)
        if max_iterations <= 0:
            raise ValueError(
                f"max_iterations must be positive, got {max_iterations}."
            )

        lower, upper = float(min_guess), float(max_guess)
        buffer = TrajectoryBuffer(capacity=horizon_steps)
        trial = 0.5 * (lower + upper)

        logger.info(
            "Starting shooting search: k0=%.4f, bracket=[%.6f, %.6f], "
            "horizon=%d, dt=%.3g",
            initial_capital, lower, upper, horizon_steps, step_size,
        )

        for iteration in range(1, max_iterations + 1):
            trial = 0.5 * (lower + upper)
            self._simulate_into(
                buffer, initial_capital, trial, horizon_steps, step_size
            )
            if buffer.valid_length < 2:
                raise NumericOverflow(
                    f"Trial path from (k0={initial_capital}, c0={trial}) "
                    "became non-finite on its first step."
                )

            verdict = adjudicate(classify_path(buffer.capital, buffer.consumption))
            logger.debug(
                "Iteration %d: c0=%.12f valid=%d verdict=%s",
                iteration, trial, buffer.valid_length, verdict.value,
            )

            if verdict is BracketUpdate.ACCEPT:
                logger.info(
                    "Saddle path found in %d iterations (c0=%.10f, %d steps).",
                    iteration, trial, buffer.valid_length,
                )
                return buffer.freeze(step_size, trial, iteration)
            if verdict is BracketUpdate.TOO_LOW:
                lower = trial
            elif verdict is BracketUpdate.TOO_HIGH:
                upper = trial

        logger.warning(
            "Shooting search did not converge after %d iterations "
            "(bracket=[%.12f, %.12f]).",
            max_iterations, lower, upper,
        )
        raise ConvergenceFailure(
            max_iterations,
            (lower, upper),
            buffer.freeze(step_size, trial, max_iterations),
        )


def find_optimal_path(
    params: ModelParameters,
    initial_capital: float,
    min_guess: float,
    max_guess: float,
    horizon_steps: int,
    step_size: float = 0.01,
    max_iterations: int = 10000,
) -> Trajectory:
    """Functional form of :meth:`ShootingSolver.find_optimal_path`."""
    return ShootingSolver(params).find_optimal_path(
        initial_capital,
        min_guess,
        max_guess,
        horizon_steps,
        step_size=step_size,
        max_iterations=max_iterations,
    )
