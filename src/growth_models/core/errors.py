"""
Exception hierarchy for the growth-model solvers.

Parameter and bracket validation errors are raised before any computation
starts.  Iteration-bound failures carry the best-effort output so callers
can decide whether to use it.
"""

from __future__ import annotations

from typing import Any, Optional, Tuple


class GrowthModelError(Exception):
    """Base class for all solver errors."""


class InvalidBracket(GrowthModelError, ValueError):
    """The initial-consumption search interval is malformed."""

    def __init__(self, min_guess: float, max_guess: float) -> None:
        self.min_guess = min_guess
        self.max_guess = max_guess
        super().__init__(
            f"Invalid consumption bracket [{min_guess}, {max_guess}]: "
            "bounds must be positive with min_guess < max_guess."
        )


class ConvergenceFailure(GrowthModelError):
    """The shooting search ran out of iterations without an accepted path.

    Attributes:
        trajectory: Last simulated trial path (not a saddle path).
        bracket: Final ``(min_guess, max_guess)`` interval.
        iterations: Number of bisection iterations performed.
    """

    def __init__(
        self,
        iterations: int,
        bracket: Tuple[float, float],
        trajectory: Optional[Any] = None,
    ) -> None:
        self.iterations = iterations
        self.bracket = bracket
        self.trajectory = trajectory
        super().__init__(
            f"No monotone path found after {iterations} iterations; "
            f"final bracket [{bracket[0]:.12g}, {bracket[1]:.12g}]."
        )


class NonConvergence(GrowthModelError):
    """Value iteration hit its iteration bound before meeting tolerance.

    Attributes:
        result: The last iterate, packaged as a ``ValueIterationResult``
            with ``converged=False``.
    """

    def __init__(self, result: Any) -> None:
        self.result = result
        super().__init__(
            f"Value iteration did not converge after {result.iterations} "
            f"iterations (final diff={result.final_diff:.3e})."
        )


class NumericOverflow(GrowthModelError, ArithmeticError):
    """A computation produced non-finite values that cannot be recovered."""
