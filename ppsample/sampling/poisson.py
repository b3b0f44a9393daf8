"""Poisson sampling design.

Every unit is included independently with its inclusion probability. The
sample size is random, so the probabilities need not sum to an integer.
"""

from typing import List

from ppsample.sampling.base import SamplingDesign
from ppsample.sampling.types import DesignMethod, SampleInputs
from ppsample.scripts.poisson import poisson


class PoissonDesign(SamplingDesign):
    """Strategy for Poisson sampling.

    Poisson sampling is ideal when:
    - A random sample size is acceptable
    - Units must be selected independently of each other
    """

    @property
    def method(self) -> DesignMethod:
        return DesignMethod.POISSON

    @property
    def display_name(self) -> str:
        return "Poisson Sampling"

    @property
    def description(self) -> str:
        return (
            "Include every unit independently with its own probability. "
            "The sample size varies from sample to sample."
        )

    def validate_inputs(self, inputs: SampleInputs) -> List[str]:
        """Validate inputs for Poisson sampling."""
        return self._validate_common_inputs(inputs)

    def select(self, rng, inputs: SampleInputs) -> List[int]:
        return poisson(rng, inputs.to_options())
