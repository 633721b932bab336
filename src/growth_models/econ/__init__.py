# growth_models/econ/__init__.py
"""
Core economic logic module.

This package provides the economic formulas used by both the shooting and
the value-iteration solvers.
"""

from growth_models.econ.production import ProductionFunctions
from growth_models.econ.utility import UtilityFunctions
from growth_models.econ.steady_state import SteadyState, SteadyStateCalculator
from growth_models.econ.primitives import Primitives


__all__ = [
    'ProductionFunctions',
    'UtilityFunctions',
    'SteadyState',
    'SteadyStateCalculator',
    'Primitives',
]
