"""Shared helpers for argument validation and function sampling."""

from __future__ import annotations

import warnings
from typing import Callable, Iterable

import numpy as np


def _validate_count(value, name: str) -> int:
    """Validate a structural count parameter (``degree`` or ``p``).

    Returns the value as a Python int.

    Raises
    ------
    ValueError
        If *value* is zero, negative, or not an integer.
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise ValueError(f"{name} must be int >= 1, got {value!r}")
    if value == 0:
        raise ValueError(f"{name} can not be zero")
    if value < 0:
        raise ValueError(f"{name} must be int >= 1, got {value}")
    return int(value)


def _sample(func: Callable, points: Iterable, dtype=float) -> np.ndarray:
    """Call *func* exactly once per point, in order, and collect the results.

    Non-finite results are kept as-is and reported with a RuntimeWarning.
    """
    values = np.array([func(x) for x in points], dtype=dtype)
    if not np.isfinite(values).all():
        bad = int(np.count_nonzero(~np.isfinite(values)))
        warnings.warn(
            f"{bad} of {len(values)} function samples are NaN or Inf; "
            f"the resulting coefficients will not be finite.",
            RuntimeWarning,
            stacklevel=3,
        )
    return values
