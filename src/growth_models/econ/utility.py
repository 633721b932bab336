# growth_models/econ/utility.py
"""
CRRA utility calculations.

Implements the constant-relative-risk-aversion family

    u(c) = (c^(1 - theta) - 1) / (1 - theta),   theta != 1
    u(c) = ln(c),                               theta == 1

together with marginal utility and its inverse.
"""

from growth_models.config.economic_params import ModelParameters
from growth_models.core.math import log, power
from growth_models.core.types import Numeric


class UtilityFunctions:
    """Static methods for utility-related calculations."""

    @staticmethod
    def crra(consumption: Numeric, params: ModelParameters) -> Numeric:
        """
        Compute flow utility of consumption.

        Args:
            consumption: Consumption level (c), positive.
            params: Model parameters containing risk aversion (theta).

        Returns:
            u(c); logarithmic when theta == 1.
        """
        if params.log_utility:
            return log(consumption)
        exponent = 1.0 - params.risk_aversion
        return (power(consumption, exponent) - 1.0) / exponent

    @staticmethod
    def marginal_utility(consumption: Numeric, params: ModelParameters) -> Numeric:
        """Marginal utility u'(c) = c^(-theta)."""
        return power(consumption, -params.risk_aversion)

    @staticmethod
    def inverse_marginal_utility(
        marginal_value: Numeric, params: ModelParameters
    ) -> Numeric:
        """
        Consumption implied by a marginal value, c = y^(-1/theta).

        In value iteration *marginal_value* is the derivative of the value
        function, so this is the first-order condition u'(c) = V'(k).
        """
        return power(marginal_value, -1.0 / params.risk_aversion)
