import logging

import numpy as np

from ppsample.errors import RangeError
from ppsample.scripts.validation import check_non_negative_int

logger = logging.getLogger("ppsample.scripts.inclusion")


def pips(sizes, n: int) -> np.ndarray:
    """Calculate inclusion probabilities proportional to size.

    Formula: pi_k = n x (x_k / Σ x_j)

    Units whose proportional probability reaches 1 are set to 1 (take-all
    units) and the remaining sample size is redistributed proportionally
    among the other units, repeated until no probability exceeds 1.

    Args:
        sizes: Non-negative size measure, one per population unit
        n: Desired (expected) sample size

    Returns:
        Array of inclusion probabilities summing to ``n``

    Raises:
        RangeError: If sizes are negative or ``n`` exceeds the number of
            units with a positive size
    """
    sizes = np.asarray(sizes, dtype=float)
    check_non_negative_int(n, "n")

    if sizes.size > 0 and (~np.isfinite(sizes) | (sizes < 0.0)).any():
        raise RangeError("Size measures must be finite and non-negative")

    positive = sizes > 0.0
    if n > positive.sum():
        raise RangeError(
            f"n={n} exceeds the number of units with positive size ({positive.sum()})"
        )

    probabilities = np.zeros(sizes.size)
    if n == 0:
        return probabilities

    take_all = np.zeros(sizes.size, dtype=bool)

    while True:
        free = positive & ~take_all
        remaining = n - take_all.sum()
        probabilities[free] = remaining * sizes[free] / sizes[free].sum()

        over = free & (probabilities >= 1.0)
        if not over.any():
            break

        take_all |= over
        probabilities[over] = 1.0

    if take_all.any():
        logger.debug(f"{take_all.sum()} take-all unit(s) capped at probability 1")

    return probabilities
