# growth_models/config/economic_params.py
"""
Economic parameter definitions and loading utilities.

This module defines the structural parameters of the continuous-time
Ramsey-Cass-Koopmans model shared by the shooting and value-iteration
solvers.  Parameters are immutable after initialization so that a solve
never observes a change mid-computation.

Example:
    >>> from growth_models.config.economic_params import load_model_params
    >>> params = load_model_params("hyperparam/prefixed/ramsey_params.json")
    >>> print(f"Discount rate: {params.discount_rate}")
"""

from dataclasses import dataclass
import sys
import logging

from growth_models.io.file_utils import load_json_file

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModelParameters:
    """
    Immutable container for the structural parameters of the growth model.

    The frozen=True ensures immutability, preventing accidental modification
    during model execution.

    Attributes:
        capital_share: Output elasticity of capital (alpha), in (0, 1).
        risk_aversion: CRRA coefficient (theta), positive. A value of
            exactly 1 selects logarithmic utility.
        depreciation_rate: Capital depreciation rate (delta), positive.
        discount_rate: Rate of time preference (rho), positive.
        productivity: Total factor productivity (A) in ``f(k) = A k^alpha``.

    Raises:
        ValueError: If any parameter lies outside its valid range.
    """

    capital_share: float = 0.3
    risk_aversion: float = 5.0
    depreciation_rate: float = 0.05
    discount_rate: float = 0.1
    productivity: float = 1.0

    def __post_init__(self) -> None:
        """Validate parameters after initialization."""
        self._validate_capital_share()
        self._validate_positive("risk_aversion", self.risk_aversion)
        self._validate_positive("depreciation_rate", self.depreciation_rate)
        self._validate_positive("discount_rate", self.discount_rate)
        self._validate_positive("productivity", self.productivity)

    def _validate_capital_share(self) -> None:
        """Ensure the capital share gives a concave production function."""
        if not (0 < self.capital_share < 1):
            raise ValueError(
                f"Capital share must be in (0, 1), got {self.capital_share}"
            )

    @staticmethod
    def _validate_positive(name: str, value: float) -> None:
        if not value > 0:
            raise ValueError(f"{name} must be positive, got {value}")

    @property
    def log_utility(self) -> bool:
        """True when theta == 1 and utility is ln(c)."""
        return self.risk_aversion == 1.0


def load_model_params(filename: str) -> ModelParameters:
    """
    Load model parameters from a JSON file.

    Args:
        filename: Path to the JSON configuration file.

    Returns:
        Populated ModelParameters instance.

    Raises:
        SystemExit: If the file cannot be read or holds unknown keys.
        ValueError: If a parameter is outside its valid range.
    """
    data = load_json_file(filename)
    try:
        return ModelParameters(**data)
    except TypeError as e:
        logger.error(f"Parameter mismatch in {filename}: {e}")
        sys.exit(1)
