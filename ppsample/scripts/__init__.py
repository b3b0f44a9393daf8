"""ppsample Scripts Package.

Contains the sampling design algorithms and estimators.
"""

from .calc_utils import (
    calculate_confidence_interval,
    get_z_score,
)
from .horvitz_thompson import (
    EstimateSummary,
    deville_variance,
    estimate,
    local_mean_variance,
    ratio,
    summarize,
    syg_variance,
    variance,
)
from .inclusion import pips
from .options import SampleOptions
from .poisson import poisson
from .simulation import empirical_inclusion_probabilities
from .spatial import KDTreeBuilder, KDTreeIndex
from .unequal import (
    brewer,
    draw,
    pareto,
    sampford,
    with_replacement,
)

__all__ = [
    # Designs
    "SampleOptions",
    "draw",
    "with_replacement",
    "sampford",
    "pareto",
    "brewer",
    "poisson",
    "pips",
    "empirical_inclusion_probabilities",
    # Estimators
    "estimate",
    "ratio",
    "variance",
    "syg_variance",
    "deville_variance",
    "local_mean_variance",
    "summarize",
    "EstimateSummary",
    "get_z_score",
    "calculate_confidence_interval",
    # Spatial index
    "KDTreeBuilder",
    "KDTreeIndex",
]
