"""Monotonicity classification and bracket adjudication for shooting.

The saddle path is the only trial path that stays monotone in both capital
and consumption.  Every other path eventually turns, and the direction in
which it fails tells whether the trial c(0) was too low or too high.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

import numpy as np

from growth_models.core.types import Array


def is_non_decreasing(values: Array) -> bool:
    """True when every first difference is >= 0 (constant counts)."""
    return bool(np.all(np.diff(values) >= 0))


def is_non_increasing(values: Array) -> bool:
    """True when every first difference is <= 0 (constant counts)."""
    return bool(np.all(np.diff(values) <= 0))


@dataclass(frozen=True)
class PathMonotonicity:
    """Monotonicity flags of a (k, c) path."""

    k_increasing: bool
    k_decreasing: bool
    c_increasing: bool
    c_decreasing: bool


def classify_path(capital: Array, consumption: Array) -> PathMonotonicity:
    """Classify both components of a path by their first differences."""
    return PathMonotonicity(
        k_increasing=is_non_decreasing(capital),
        k_decreasing=is_non_increasing(capital),
        c_increasing=is_non_decreasing(consumption),
        c_decreasing=is_non_increasing(consumption),
    )


class BracketUpdate(enum.Enum):
    """What a trial path implies for the consumption bracket."""

    ACCEPT = "accept"
    TOO_LOW = "too_low"
    TOO_HIGH = "too_high"
    UNCHANGED = "unchanged"


def adjudicate(m: PathMonotonicity) -> BracketUpdate:
    """Apply the shooting decision table, first matching rule wins.

    ``UNCHANGED`` is returned when no rule matches (neither component
    carries a usable direction); the caller then retries the same bracket.
    """
    if (m.k_increasing and m.c_increasing) or (m.k_decreasing and m.c_decreasing):
        return BracketUpdate.ACCEPT
    if m.k_increasing and not m.c_increasing:
        return BracketUpdate.TOO_LOW
    if m.k_decreasing and not m.c_decreasing:
        return BracketUpdate.TOO_HIGH
    if m.k_increasing and m.c_decreasing:
        return BracketUpdate.TOO_LOW
    if m.k_decreasing and m.c_increasing:
        return BracketUpdate.TOO_HIGH
    if m.c_increasing and not m.k_increasing:
        return BracketUpdate.TOO_HIGH
    if m.c_decreasing and not m.k_decreasing:
        return BracketUpdate.TOO_LOW
    return BracketUpdate.UNCHANGED
