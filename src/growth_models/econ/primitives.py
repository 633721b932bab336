"""
Model primitives bound to one parameter set.

``Primitives`` is the evaluator handed to both solvers: every function is
pure, reads only the frozen ``ModelParameters`` it was built from, and
accepts floats, arrays or tensors.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from growth_models.config.economic_params import ModelParameters
from growth_models.core.types import Numeric
from growth_models.econ.production import ProductionFunctions
from growth_models.econ.steady_state import SteadyState, SteadyStateCalculator
from growth_models.econ.utility import UtilityFunctions


@dataclass(frozen=True)
class Primitives:
    """Production, utility and steady-state functions for one model."""

    params: ModelParameters
    steady_state: SteadyState = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "steady_state", SteadyStateCalculator.calculate(self.params)
        )

    @classmethod
    def from_params(cls, params: ModelParameters) -> "Primitives":
        return cls(params=params)

    # Production

    def production(self, k: Numeric) -> Numeric:
        return ProductionFunctions.cobb_douglas(k, self.params)

    def production_derivative(self, k: Numeric) -> Numeric:
        return ProductionFunctions.marginal_product(k, self.params)

    def inverse_production_derivative(self, r: Numeric) -> Numeric:
        return ProductionFunctions.inverse_marginal_product(r, self.params)

    def steady_consumption(self, k: Numeric) -> Numeric:
        """The dk/dt = 0 locus, c = f(k) - delta * k."""
        return ProductionFunctions.net_output(k, self.params)

    # Utility

    def utility(self, c: Numeric) -> Numeric:
        return UtilityFunctions.crra(c, self.params)

    def utility_derivative(self, c: Numeric) -> Numeric:
        return UtilityFunctions.marginal_utility(c, self.params)

    def inverse_utility_derivative(self, y: Numeric) -> Numeric:
        return UtilityFunctions.inverse_marginal_utility(y, self.params)

    # Dynamics

    def capital_drift(self, k: Numeric, c: Numeric) -> Numeric:
        """dk/dt = f(k) - delta * k - c."""
        return self.steady_consumption(k) - c

    def consumption_growth(self, k: Numeric) -> Numeric:
        """Euler equation growth rate (dc/dt) / c = (f'(k) - delta - rho) / theta."""
        p = self.params
        return (
            self.production_derivative(k) - p.depreciation_rate - p.discount_rate
        ) / p.risk_aversion
