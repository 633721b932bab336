# growth_models/econ/production.py
"""
Production function calculations.

This module implements the intensive-form Cobb-Douglas technology, its
marginal product and the closed-form inverse of the marginal product.
All functions accept floats, NumPy arrays or TensorFlow tensors.
"""

from growth_models.config.economic_params import ModelParameters
from growth_models.core.math import power
from growth_models.core.types import Numeric


class ProductionFunctions:
    """Static methods for production-related calculations."""

    @staticmethod
    def cobb_douglas(capital: Numeric, params: ModelParameters) -> Numeric:
        """
        Compute output per worker.

        Formula: f(k) = A * k^alpha

        Args:
            capital: Capital per worker (k).
            params: Model parameters containing capital share and TFP.

        Returns:
            Output per worker.
        """
        return params.productivity * power(capital, params.capital_share)

    @staticmethod
    def marginal_product(capital: Numeric, params: ModelParameters) -> Numeric:
        """
        Compute the marginal product of capital.

        Formula: f'(k) = alpha * A * k^(alpha - 1)

        Args:
            capital: Capital per worker (k).
            params: Model parameters.

        Returns:
            Marginal product f'(k).
        """
        return (
            params.capital_share
            * params.productivity
            * power(capital, params.capital_share - 1.0)
        )

    @staticmethod
    def inverse_marginal_product(rate: Numeric, params: ModelParameters) -> Numeric:
        """
        Invert the marginal product: the capital stock at which f'(k) = r.

        Formula: k = (r / (alpha * A))^(1 / (alpha - 1))

        Args:
            rate: Target marginal product (r), positive.
            params: Model parameters.

        Returns:
            Capital per worker solving f'(k) = r.
        """
        scale = params.capital_share * params.productivity
        return power(rate / scale, 1.0 / (params.capital_share - 1.0))

    @staticmethod
    def net_output(capital: Numeric, params: ModelParameters) -> Numeric:
        """
        Output net of depreciation, f(k) - delta * k.

        This is the consumption level that keeps capital constant, i.e.
        the dk/dt = 0 locus of the phase diagram.
        """
        return (
            ProductionFunctions.cobb_douglas(capital, params)
            - params.depreciation_rate * capital
        )
