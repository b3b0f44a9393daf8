"""Horvitz-Thompson estimators of a population total and its variance.

All functions take observed values and inclusion probabilities of the
*sampled* units only. Joint inclusion probabilities are given as a square
matrix over the sampled units; its diagonal is not used.

Zero joint inclusion probabilities are not guarded against: the variance
estimators then return a non-finite value, and choosing a design with
positive joint probabilities is the caller's responsibility.

References:
- Horvitz, D. G. & Thompson, D. J. (1952). A generalization of sampling
  without replacement from a finite universe. JASA, 47(260), 663-685.
- Deville, J.-C. (1999). Variance estimation for complex statistics and
  estimators. Survey Methodology, 25(2), 193-203.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional

import numpy as np

from ppsample.errors import AuxiliaryTotalError, RangeError, SamplingError
from ppsample.parameter import DEFAULT_CONFIDENCE_LEVEL
from ppsample.scripts.calc_utils import calculate_confidence_interval
from ppsample.scripts.spatial import KDTreeBuilder, SpatialIndexBuilder, as_coordinates
from ppsample.scripts.validation import (
    check_lengths,
    check_probabilities,
    check_sizes,
    check_square,
)

logger = logging.getLogger("ppsample.scripts.horvitz_thompson")


def _expanded(y_values, probabilities) -> np.ndarray:
    """Validate and return the expanded values ``y / p``."""
    y_values = np.asarray(y_values, dtype=float)
    probabilities = np.asarray(probabilities, dtype=float)
    check_lengths(y_values, probabilities)
    check_probabilities(probabilities)

    with np.errstate(divide="ignore", invalid="ignore"):
        return y_values / probabilities


def _second_order(y_values, probabilities, probabilities_second_order):
    y_values = np.asarray(y_values, dtype=float)
    probabilities = np.asarray(probabilities, dtype=float)
    second_order = np.asarray(probabilities_second_order, dtype=float)

    check_lengths(y_values, probabilities)
    check_square(second_order, len(y_values))
    check_probabilities(probabilities)
    check_probabilities(second_order)

    with np.errstate(divide="ignore", invalid="ignore"):
        y_pi = y_values / probabilities
        i, j = np.triu_indices(len(y_values), k=1)
        weights = 1.0 - probabilities[i] * probabilities[j] / second_order[i, j]

    return y_pi, probabilities, i, j, weights


def estimate(y_values, probabilities) -> float:
    """Horvitz-Thompson estimator of a total.

    Example:
        >>> estimate([0.0, 0.1, 0.2, 0.3, 0.4], [0.2] * 5)  # about 5.0
    """
    return float(np.sum(_expanded(y_values, probabilities)))


def ratio(y_values, x_values, probabilities, x_total: float) -> float:
    """Ratio estimator of a total using an auxiliary variable.

    Args:
        y_values: Observed values of the study variable
        x_values: Observed values of the auxiliary variable
        probabilities: First-order inclusion probabilities
        x_total: Known population total of the auxiliary variable

    Returns:
        ``estimate(y) / estimate(x) * x_total``
    """
    if math.isnan(x_total) or x_total < 0.0:
        raise AuxiliaryTotalError(f"x_total must be non-negative, got {x_total}")

    return estimate(y_values, probabilities) / estimate(x_values, probabilities) * x_total


def variance(y_values, probabilities, probabilities_second_order) -> float:
    """Horvitz-Thompson estimator of the variance of the total estimate."""
    y_pi, probabilities, i, j, weights = _second_order(
        y_values, probabilities, probabilities_second_order
    )

    with np.errstate(invalid="ignore"):
        single = np.sum(y_pi**2 * (1.0 - probabilities))
        pairs = np.sum(y_pi[i] * y_pi[j] * weights)

    return float(single + 2.0 * pairs)


def syg_variance(y_values, probabilities, probabilities_second_order) -> float:
    """Sen-Yates-Grundy estimator of the variance of the total estimate.

    Only meaningful for fixed size designs; it can be negative otherwise.
    """
    y_pi, _, i, j, weights = _second_order(
        y_values, probabilities, probabilities_second_order
    )

    with np.errstate(invalid="ignore"):
        return float(-np.sum((y_pi[i] - y_pi[j]) ** 2 * weights))


def deville_variance(y_values, probabilities) -> float:
    """Deville's approximate variance estimator.

    Needs first-order probabilities only. The result is not finite when
    every inclusion probability equals 1.
    """
    y_pi = _expanded(y_values, probabilities)
    q = 1.0 - np.asarray(probabilities, dtype=float)

    with np.errstate(divide="ignore", invalid="ignore"):
        s1mp = np.sum(q)
        weighted_mean = np.sum(y_pi * q) / s1mp
        sak2 = np.sum(q**2) / s1mp**2
        dsum = np.sum((y_pi - weighted_mean) ** 2 * q)

        return float(1.0 / (1.0 - sak2) * dsum)


def local_mean_variance(
    y_values,
    probabilities,
    coordinates,
    n_neighbours: int,
    builder: Optional[SpatialIndexBuilder] = None,
) -> float:
    """Local mean estimator of the variance of the total estimate.

    For every sampled unit, the mean expanded value ``y / p`` over its
    ``n_neighbours`` nearest sampled units (the unit itself included) in the
    auxiliary space is squared and scaled by ``len / (len - 1)``, where
    ``len`` is the size of the neighbour set. The terms are summed.

    Args:
        y_values: Observed values
        probabilities: First-order inclusion probabilities
        coordinates: Auxiliary coordinates, one row per sampled unit
        n_neighbours: Number of nearest neighbours, at least 2 for a finite
            result
        builder: Spatial index builder, a k-d tree by default

    Returns:
        Variance estimate
    """
    y_pi = _expanded(y_values, probabilities)
    sample_size = len(y_pi)
    coordinates = as_coordinates(coordinates)
    check_sizes(sample_size, coordinates.shape[0], "number of coordinate rows")
    if n_neighbours < 1:
        raise RangeError(f"n_neighbours must be positive, got {n_neighbours}")

    if builder is None:
        builder = KDTreeBuilder()
    index = builder.build(coordinates)

    total = 0.0
    with np.errstate(divide="ignore", invalid="ignore"):
        for i in range(sample_size):
            neighbours = index.query(index.data[i], n_neighbours)
            size = len(neighbours)
            local_mean = np.mean(y_pi[neighbours])
            total += size / (size - 1.0) * local_mean ** 2

    return float(total)


@dataclass
class EstimateSummary:
    """Point estimate of a total with its variance and confidence interval."""

    total: float
    variance: float
    standard_error: float
    lower: float
    upper: float
    confidence_level: float
    method: str


VARIANCE_METHODS = ("ht", "syg", "deville")


def summarize(
    y_values,
    probabilities,
    probabilities_second_order=None,
    method: str = "ht",
    confidence_level: float = DEFAULT_CONFIDENCE_LEVEL,
) -> EstimateSummary:
    """Estimate a total together with a variance and confidence interval.

    Args:
        y_values: Observed values
        probabilities: First-order inclusion probabilities
        probabilities_second_order: Joint inclusion probabilities, required
            for the "ht" and "syg" methods
        method: One of "ht", "syg" or "deville"
        confidence_level: Confidence level (0-1)

    Returns:
        EstimateSummary with total, variance and interval bounds
    """
    if method not in VARIANCE_METHODS:
        raise SamplingError(
            f"Unknown variance method: {method}. Expected one of {VARIANCE_METHODS}"
        )

    if method in ("ht", "syg") and probabilities_second_order is None:
        raise SamplingError(
            f"Variance method '{method}' requires second-order probabilities"
        )

    total = estimate(y_values, probabilities)

    if method == "ht":
        var = variance(y_values, probabilities, probabilities_second_order)
    elif method == "syg":
        var = syg_variance(y_values, probabilities, probabilities_second_order)
    else:
        var = deville_variance(y_values, probabilities)

    lower, upper, _ = calculate_confidence_interval(total, var, confidence_level)

    if not var >= 0:
        logger.warning(f"Variance estimate is not a non-negative number: {var}")

    return EstimateSummary(
        total=total,
        variance=var,
        standard_error=math.sqrt(var) if var >= 0 else math.nan,
        lower=lower,
        upper=upper,
        confidence_level=confidence_level,
        method=method,
    )
