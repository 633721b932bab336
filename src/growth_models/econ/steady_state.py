# growth_models/econ/steady_state.py
"""
Steady state calculations for the growth model.

This module computes the analytical stationary point used to seed shooting
brackets, centre grids and validate solver output.
"""

from dataclasses import dataclass

from growth_models.config.economic_params import ModelParameters
from growth_models.econ.production import ProductionFunctions


@dataclass(frozen=True)
class SteadyState:
    """Stationary capital and consumption (k*, c*)."""

    capital: float
    consumption: float


class SteadyStateCalculator:
    """Static methods for steady state calculations."""

    @staticmethod
    def calculate_capital(params: ModelParameters) -> float:
        """
        Calculate the modified golden rule capital stock.

        Derived from the consumption Euler equation dc/dt = 0:
            f'(k*) = delta + rho

        Args:
            params: Model parameters.

        Returns:
            The steady-state capital stock.
        """
        target = params.depreciation_rate + params.discount_rate
        return float(ProductionFunctions.inverse_marginal_product(target, params))

    @staticmethod
    def calculate(params: ModelParameters) -> SteadyState:
        """
        Calculate the steady state pair (k*, c*).

        Consumption is read off the dk/dt = 0 locus:
            c* = f(k*) - delta * k*
        """
        k_star = SteadyStateCalculator.calculate_capital(params)
        c_star = float(ProductionFunctions.net_output(k_star, params))
        return SteadyState(capital=k_star, consumption=c_star)

    @staticmethod
    def golden_rule_capital(params: ModelParameters) -> float:
        """
        Capital stock maximising steady consumption, f'(k) = delta.

        This is the undiscounted benchmark; with rho > 0 the steady state
        always lies below it.
        """
        return float(
            ProductionFunctions.inverse_marginal_product(
                params.depreciation_rate, params
            )
        )
