"""Monte Carlo checks of sampling designs."""

import logging
from typing import Callable, List

import numpy as np
import pandas as pd

from ppsample.errors import RangeError
from ppsample.scripts.options import SampleOptions

logger = logging.getLogger("ppsample.scripts.simulation")


def empirical_inclusion_probabilities(
    rng,
    design: Callable[..., List[int]],
    options: SampleOptions,
    repetitions: int,
) -> pd.DataFrame:
    """Estimate inclusion probabilities by repeating a design.

    Args:
        rng: Random source shared by all repetitions
        design: A without-replacement design function, e.g. ``brewer``
        options: Sample options passed to every repetition
        repetitions: Number of samples to draw

    Returns:
        DataFrame with columns: unit, target, empirical, deviation
    """
    if repetitions < 1:
        raise RangeError(f"repetitions must be at least 1, got {repetitions}")

    counts = np.zeros(options.population_size)
    for _ in range(repetitions):
        counts[design(rng, options)] += 1

    empirical = counts / repetitions
    target = np.asarray(options.probabilities)

    simulation_df = pd.DataFrame(
        {
            "unit": np.arange(options.population_size),
            "target": target,
            "empirical": empirical,
            "deviation": empirical - target,
        }
    )

    logger.debug(
        f"{repetitions} repetitions of {getattr(design, '__name__', design)}, "
        f"max deviation {simulation_df['deviation'].abs().max():.4f}"
    )

    return simulation_df
