"""Descriptive statistics over raw samples."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from tcalc.errors import ValidationError


def _as_sample(data: Sequence[float], label: str = "Sample") -> np.ndarray:
    try:
        arr = np.asarray(data, dtype=float)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{label} must contain only numbers.") from exc
    if arr.ndim != 1:
        raise ValidationError(f"{label} must be a one-dimensional sequence of numbers.")
    return arr


def mean(data: Sequence[float]) -> float:
    """Return the arithmetic mean of ``data``.

    Raises:
        ValidationError: If ``data`` is empty.
    """
    arr = _as_sample(data)
    if arr.size == 0:
        raise ValidationError("Cannot compute the mean of an empty sample.")
    return float(np.mean(arr))


def standard_deviation(data: Sequence[float]) -> float:
    """Return the sample standard deviation (divisor ``n - 1``).

    Raises:
        ValidationError: If fewer than two values are supplied.
    """
    arr = _as_sample(data)
    if arr.size < 2:
        raise ValidationError(
            f"Standard deviation requires at least 2 values, got {arr.size}."
        )
    return float(np.std(arr, ddof=1))


def paired_differences(
    first: Sequence[float], second: Sequence[float]
) -> np.ndarray:
    """Return element-wise differences ``first[i] - second[i]``.

    Raises:
        ValidationError: If the samples differ in length.
    """
    x = _as_sample(first, "Sample 1")
    y = _as_sample(second, "Sample 2")
    if x.size != y.size:
        raise ValidationError(
            "Paired samples must have equal length "
            f"(got {x.size} and {y.size} values)."
        )
    return x - y
