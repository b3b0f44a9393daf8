"""Unequal probability sampling designs.

All designs take a random source and a ``SampleOptions`` bundle and return a
list of 0-based unit indices. The without-replacement designs (Sampford,
Pareto, Brewer) require the inclusion probabilities to sum to an integer,
which is the realized sample size, and return the indices in ascending order.

Inputs are validated before any random number is drawn.

References:
- Sampford, M. R. (1967). On sampling without replacement with unequal
  probabilities of selection. Biometrika, 54(3-4), 499-513.
- Rosén, B. (2000). A user's guide to Pareto pi-ps sampling.
  R & D Report 2000:6. Stockholm: Statistiska Centralbyrån.
- Brewer, K. R. W. (1975). A simple procedure for sampling pi-ps wor.
  Australian Journal of Statistics, 17(3), 166-172.
"""

import bisect
import logging
from typing import List

import numpy as np

from ppsample.errors import MaxIterationsError, ProbabilitySumError
from ppsample.scripts.indices import Indices
from ppsample.scripts.options import SampleOptions
from ppsample.scripts.poisson import poisson_internal
from ppsample.scripts.validation import (
    check_eps,
    check_integer_approx,
    check_max_iterations,
    check_non_negative_int,
    check_probabilities,
    check_sum_approx,
)

logger = logging.getLogger("ppsample.scripts.unequal")


def draw(rng, probabilities) -> int:
    """Draw a single unit with the given draw probabilities.

    Assumes the probabilities are valid and sum to 1.0. The drawn unit is the
    first index whose cumulative probability reaches the uniform variate. If
    rounding leaves the variate above the total mass, the last unit is returned.

    Args:
        rng: Random source
        probabilities: Draw probabilities summing to 1.0

    Returns:
        Index of the drawn unit
    """
    cumulative = np.cumsum(probabilities)
    rv = rng.random()
    index = int(np.searchsorted(cumulative, rv, side="left"))

    if index >= len(cumulative):
        return len(cumulative) - 1

    return index


def _check_fixed_size(options: SampleOptions) -> int:
    """Validate a without-replacement design and return its sample size."""
    psum = options.probability_sum
    check_probabilities(options.probabilities)
    check_eps(options.eps)
    check_integer_approx(psum, options.eps)
    return int(round(psum))


def with_replacement(rng, options: SampleOptions, n: int) -> List[int]:
    """Draw ``n`` units with replacement according to draw probabilities.

    The ``n`` uniforms are sorted and matched against the cumulative
    probability mass in a single merged pass, which gives the same
    distribution as ``n`` independent calls to ``draw``.

    Args:
        rng: Random source
        options: Sample options; probabilities must sum to 1.0
        n: Number of draws

    Returns:
        List of ``n`` unit indices, possibly repeated
    """
    check_probabilities(options.probabilities)
    check_eps(options.eps)
    check_sum_approx(options.probability_sum, 1.0, options.eps)
    check_non_negative_int(n, "n")

    if n == 0:
        return []

    rvs = np.sort(rng.random(n))
    probabilities = options.probabilities

    sample: List[int] = []
    psum = 0.0
    j = 0

    for unit, p in enumerate(probabilities):
        upper = psum + p
        while j < n and rvs[j] < upper:
            sample.append(unit)
            j += 1

        if j == n:
            break
        psum = upper

    # Variates above the rounded total mass
    sample.extend([len(probabilities) - 1] * (n - j))

    return sample


def sampford(rng, options: SampleOptions) -> List[int]:
    """Draw a sample using Sampford's rejection design.

    Each attempt draws a Poisson sample of the unnormalized probabilities and
    one extra unit with the normalized probabilities. The attempt is accepted
    when the Poisson sample has exactly ``m - 1`` units and does not contain
    the extra unit.

    Raises:
        MaxIterationsError: If no attempt is accepted within
            ``options.max_iterations``
    """
    sample_size = _check_fixed_size(options)
    check_max_iterations(options.max_iterations)

    if sample_size == 0:
        return []

    probabilities = options.probabilities
    normalized = probabilities / options.probability_sum

    if sample_size == 1:
        return [draw(rng, normalized)]

    for attempt in range(1, options.max_iterations + 1):
        sample = poisson_internal(rng, probabilities)

        if len(sample) != sample_size - 1:
            continue

        a_unit = draw(rng, normalized)

        # sample is ascending, only the first id >= a_unit can match it
        position = bisect.bisect_left(sample, a_unit)
        if position < len(sample) and sample[position] == a_unit:
            continue

        sample.insert(position, a_unit)
        logger.debug(f"Sampford sample accepted after {attempt} attempt(s)")
        return sample

    logger.warning(
        f"Sampford design exhausted {options.max_iterations} attempts "
        f"for sample size {sample_size}"
    )
    raise MaxIterationsError(options.max_iterations)


def pareto(rng, options: SampleOptions) -> List[int]:
    """Draw a sample using a Pareto order sampling design.

    Each unit receives the ranking key ``u(1-p) / (p(1-u))`` from its own
    uniform ``u``; the ``m`` units with the smallest keys form the sample.
    Units with ``p < eps`` or ``u > 1 - eps`` are ranked last.
    """
    sample_size = _check_fixed_size(options)

    probabilities = options.probabilities
    eps = options.eps
    rvs = rng.random(len(probabilities))

    with np.errstate(divide="ignore", invalid="ignore"):
        keys = (rvs * (1.0 - probabilities)) / (probabilities * (1.0 - rvs))

    keys[(rvs > 1.0 - eps) | (probabilities < eps) | np.isnan(keys)] = np.inf

    order = np.argsort(keys, kind="stable")[:sample_size]
    return sorted(order.tolist())


def brewer(rng, options: SampleOptions) -> List[int]:
    """Draw a sample using Brewer's sequential design.

    Units with ``p <= eps`` are never selected and units with ``p >= 1 - eps``
    are always selected. The remaining units are drawn one at a time with
    probabilities proportional to ``p (D - p) / (D - p r)``, where ``D`` is the
    remaining probability mass and ``r`` the number of draws left.
    """
    sample_size = _check_fixed_size(options)

    probabilities = options.probabilities
    eps = options.eps
    remaining_mass = options.probability_sum
    indices = Indices(len(probabilities))
    sample: List[int] = []

    for unit, p in enumerate(probabilities):
        if p <= eps:
            indices.remove(unit)
        elif 1.0 - eps <= p:
            indices.remove(unit)
            sample.append(unit)
            remaining_mass -= 1.0
            sample_size -= 1

    if sample_size < 0:
        raise ProbabilitySumError(
            f"{len(sample)} units have probability >= 1 - eps (eps={eps}), "
            f"more than the sample size {len(sample) + sample_size}"
        )
    draws = sample_size

    for step in range(draws):
        draws_left = draws - step
        eligible = np.array(indices.list(), dtype=int)
        p_eligible = probabilities[eligible]

        q_probs = (
            p_eligible
            * (remaining_mass - p_eligible)
            / (remaining_mass - p_eligible * draws_left)
        )
        q_probs /= q_probs.sum()

        a_unit = int(eligible[draw(rng, q_probs)])
        indices.remove(a_unit)
        sample.append(a_unit)
        remaining_mass -= probabilities[a_unit]

    sample.sort()
    return sample
