"""Poisson sampling.

Each unit is included independently with its own inclusion probability, so
the realized sample size is random with expectation ``sum(probabilities)``.
"""

import logging
from typing import List

import numpy as np

from ppsample.scripts.options import SampleOptions
from ppsample.scripts.validation import check_eps, check_probabilities

logger = logging.getLogger("ppsample.scripts.poisson")


def poisson_internal(rng, probabilities) -> List[int]:
    """Draw an ascending Poisson sample without validating the inputs.

    Args:
        rng: Random source
        probabilities: Unnormalized inclusion probabilities

    Returns:
        Ascending list of included unit indices
    """
    probabilities = np.asarray(probabilities, dtype=float)
    if probabilities.size == 0:
        return []

    rvs = rng.random(probabilities.size)
    return np.flatnonzero(rvs < probabilities).tolist()


def poisson(rng, options: SampleOptions) -> List[int]:
    """Draw a Poisson sample.

    The probabilities need not sum to an integer.
    """
    check_probabilities(options.probabilities)
    check_eps(options.eps)

    sample = poisson_internal(rng, options.probabilities)
    logger.debug(
        f"Poisson sample of size {len(sample)} "
        f"(expected {options.probability_sum:.3f})"
    )
    return sample
