"""Sampling designs module.

This module wraps every sampling design in a Strategy class that handles:
- Input validation
- Drawing the sample
- Results formatting

Usage:
    from ppsample.sampling import get_sampling_design, DesignMethod, SampleInputs

    design = get_sampling_design(DesignMethod.PARETO)
    inputs = SampleInputs(probabilities=[0.5, 0.5, 0.4, 0.6])
    if design.is_ready(inputs):
        results = design.calculate(numpy.random.default_rng(), inputs)
"""

from ppsample.sampling.base import SamplingDesign
from ppsample.sampling.service import (
    SamplingService,
    get_design_from_string,
    get_sampling_design,
)
from ppsample.sampling.types import DesignMethod, SampleInputs, SampleResults

__all__ = [
    "SamplingDesign",
    "DesignMethod",
    "SampleInputs",
    "SampleResults",
    "SamplingService",
    "get_sampling_design",
    "get_design_from_string",
]
