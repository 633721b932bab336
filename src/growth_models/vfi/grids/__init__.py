# growth_models/vfi/grids/__init__.py
"""
Grid management for the HJB solver.

This package provides utilities for constructing and validating the
capital grid, and the interpolation helper used to evaluate grid
solutions off-grid.
"""

from growth_models.vfi.grids.grid_builder import GridBuilder
from growth_models.vfi.grids.grid_utils import (
    linear_interp_core,
    linear_interp,
)

__all__ = [
    'GridBuilder',
    'linear_interp_core',
    'linear_interp',
]
