"""Precondition checks shared by the designs and estimators.

Each checker raises the matching ``SamplingError`` subclass on the first
violation and returns nothing otherwise, so entry points chain them in order
before any random number is drawn.
"""

import math
from typing import Sequence

import numpy as np

from ppsample.errors import (
    InputShapeError,
    ProbabilityError,
    ProbabilitySumError,
    RangeError,
    ToleranceError,
)
from ppsample.parameter import EPS_UPPER_BOUND


def check_probabilities(probabilities) -> None:
    """Check that every entry is a finite probability in [0, 1].

    Works on vectors as well as on second-order probability matrices.
    """
    values = np.asarray(probabilities, dtype=float)
    if values.size == 0:
        return

    invalid = ~np.isfinite(values) | (values < 0.0) | (values > 1.0)
    if invalid.any():
        position = tuple(int(i) for i in np.argwhere(invalid)[0])
        index = position[0] if len(position) == 1 else position
        raise ProbabilityError(
            f"Probability at {index} must be in [0, 1], got {values[position]}"
        )


def check_eps(eps: float) -> None:
    if not (0.0 <= eps <= EPS_UPPER_BOUND):
        raise ToleranceError(f"eps must be in [0, {EPS_UPPER_BOUND}], got {eps}")


def _is_int(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def check_max_iterations(max_iterations: int) -> None:
    if not _is_int(max_iterations) or max_iterations < 1:
        raise RangeError(
            f"max_iterations must be a positive integer, got {max_iterations}"
        )


def check_non_negative_int(value: int, name: str) -> None:
    if not _is_int(value) or value < 0:
        raise RangeError(f"{name} must be a non-negative integer, got {value}")


def check_range(value: float, low: float, high: float, name: str = "value") -> None:
    """Check that ``low <= value <= high``; NaN is always rejected."""
    if math.isnan(value) or not (low <= value <= high):
        raise RangeError(f"{name} must be in [{low}, {high}], got {value}")


def check_vector(values: np.ndarray, name: str = "probabilities") -> None:
    if values.ndim != 1:
        raise InputShapeError(
            f"{name} must be a 1-D vector, got {values.ndim} dimensions"
        )


def check_lengths(a: Sequence, b: Sequence) -> None:
    if len(a) != len(b):
        raise InputShapeError(f"Lengths differ: {len(a)} != {len(b)}")


def check_sizes(expected: int, actual: int, name: str = "size") -> None:
    if expected != actual:
        raise InputShapeError(f"{name} must be {expected}, got {actual}")


def check_square(matrix: np.ndarray, size: int) -> None:
    """Check that ``matrix`` is a 2-D ``size`` x ``size`` array."""
    if matrix.ndim != 2:
        raise InputShapeError(f"Expected a 2-D matrix, got {matrix.ndim} dimensions")
    check_sizes(size, matrix.shape[0], "number of rows")
    check_sizes(size, matrix.shape[1], "number of columns")


def check_sum_approx(value: float, target: float, eps: float) -> None:
    if not abs(value - target) <= eps:
        raise ProbabilitySumError(
            f"Probabilities must sum to {target} (eps={eps}), got {value}"
        )


def check_integer_approx(value: float, eps: float) -> None:
    if not math.isfinite(value) or not abs(value - round(value)) <= eps:
        raise ProbabilitySumError(
            f"Probabilities must sum to an integer (eps={eps}), got {value}"
        )
