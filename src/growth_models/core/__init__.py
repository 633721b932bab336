"""Core utilities shared by the shooting and value-iteration solvers.

Provide precision settings, backend-dispatching math helpers and the
solver exception hierarchy.
"""

from growth_models.core.types import TENSORFLOW_DTYPE, NUMPY_DTYPE, Tensor, Array
from growth_models.core.errors import (
    ConvergenceFailure,
    GrowthModelError,
    InvalidBracket,
    NonConvergence,
    NumericOverflow,
)
