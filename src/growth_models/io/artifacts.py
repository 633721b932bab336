# growth_models/io/artifacts.py
"""
Utilities for saving and loading numerical artifacts.

This module handles persistence of shooting trajectories and HJB results
using NumPy's compressed format.  Solvers never call it themselves; the
CLI and scripts do.

Example:
    >>> from growth_models.io.artifacts import save_vfi_results, load_npz_results
    >>> save_vfi_results(result.to_dict(), "out/vfi.npz")
    >>> data = load_npz_results("out/vfi.npz")
"""

import logging
import os
from typing import Dict, Any

import numpy as np

logger = logging.getLogger(__name__)


def _ensure_parent(filename: str) -> None:
    directory = os.path.dirname(filename)
    if directory:
        os.makedirs(directory, exist_ok=True)


def save_vfi_results(results: Dict[str, Any], filename: str) -> None:
    """
    Save HJB results to a compressed NumPy file.

    Args:
        results: Dictionary containing arrays (K, V, dV, C, ...).
        filename: Target file path (should end with .npz).
    """
    _ensure_parent(filename)
    with open(filename, "wb") as f:
        np.savez_compressed(f, **results)
    logger.info(f"Saved VFI results to {filename}")


def save_trajectory(trajectory: Dict[str, Any], filename: str) -> None:
    """
    Save a shooting trajectory to a compressed NumPy file.

    Args:
        trajectory: Dictionary with ``k``, ``c`` and ``t`` arrays.
        filename: Target file path (should end with .npz).
    """
    _ensure_parent(filename)
    with open(filename, "wb") as f:
        np.savez_compressed(f, **trajectory)
    logger.info(f"Saved trajectory to {filename}")


def load_npz_results(filename: str) -> Dict[str, np.ndarray]:
    """
    Load results from a compressed NumPy file.

    Args:
        filename: Path to the .npz file.

    Returns:
        Dictionary containing loaded arrays.
    """
    with np.load(filename) as data:
        return {key: data[key] for key in data.files}
