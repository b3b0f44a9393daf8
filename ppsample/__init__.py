# ppsample/__init__.py

# Unequal probability sampling designs and Horvitz-Thompson estimators.

from .errors import (
    AuxiliaryTotalError,
    InputShapeError,
    MaxIterationsError,
    ProbabilityError,
    ProbabilitySumError,
    RangeError,
    SamplingError,
    ToleranceError,
)
from .scripts import (
    SampleOptions,
    brewer,
    deville_variance,
    draw,
    estimate,
    local_mean_variance,
    pareto,
    pips,
    poisson,
    ratio,
    sampford,
    summarize,
    syg_variance,
    variance,
    with_replacement,
)

__version__ = "0.1.0"
