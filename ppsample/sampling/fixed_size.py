"""Fixed size without-replacement sampling designs.

Sampford, Pareto and Brewer designs all select round(sum(probabilities))
distinct units. They differ in how closely they reproduce the target
inclusion probabilities and in their cost.
"""

from typing import List

from ppsample.sampling.base import SamplingDesign
from ppsample.sampling.types import DesignMethod, SampleInputs
from ppsample.scripts.unequal import brewer, pareto, sampford
from ppsample.scripts.validation import check_max_iterations


class FixedSizeDesign(SamplingDesign):
    """Shared validation for designs whose probabilities sum to an integer."""

    @property
    def fixed_size(self) -> bool:
        return True

    def expected_size(self, inputs: SampleInputs) -> float:
        return float(round(inputs.probability_sum))

    def validate_inputs(self, inputs: SampleInputs) -> List[str]:
        errors = self._validate_common_inputs(inputs)
        errors.extend(self._validate_integer_sum(inputs))
        return errors


class SampfordDesign(FixedSizeDesign):
    """Strategy for Sampford's rejection design.

    Sampford sampling is ideal when:
    - Inclusion probabilities must be reproduced exactly
    - Joint inclusion probabilities should be strictly positive
    """

    @property
    def method(self) -> DesignMethod:
        return DesignMethod.SAMPFORD

    @property
    def display_name(self) -> str:
        return "Sampford Sampling"

    @property
    def description(self) -> str:
        return (
            "Rejection sampling that reproduces the inclusion probabilities "
            "exactly. Can need many attempts when some probabilities are close to 1."
        )

    def validate_inputs(self, inputs: SampleInputs) -> List[str]:
        """Validate inputs for Sampford sampling."""
        errors = super().validate_inputs(inputs)

        self._collect(errors, check_max_iterations, inputs.max_iterations)

        return errors

    def select(self, rng, inputs: SampleInputs) -> List[int]:
        return sampford(rng, inputs.to_options())


class ParetoDesign(FixedSizeDesign):
    """Strategy for Pareto order sampling.

    Pareto sampling is ideal when:
    - A fast, non-iterative design is needed for large populations
    - Approximate reproduction of the inclusion probabilities is acceptable
    """

    @property
    def method(self) -> DesignMethod:
        return DesignMethod.PARETO

    @property
    def display_name(self) -> str:
        return "Pareto Sampling"

    @property
    def description(self) -> str:
        return (
            "Order sampling that ranks units by a random key and keeps the "
            "smallest keys. Fast, with approximately correct inclusion probabilities."
        )

    def select(self, rng, inputs: SampleInputs) -> List[int]:
        return pareto(rng, inputs.to_options())


class BrewerDesign(FixedSizeDesign):
    """Strategy for Brewer's sequential draw-by-draw design.

    Brewer sampling is ideal when:
    - Inclusion probabilities must be reproduced exactly
    - A bounded running time is required (no rejection loop)
    """

    @property
    def method(self) -> DesignMethod:
        return DesignMethod.BREWER

    @property
    def display_name(self) -> str:
        return "Brewer Sampling"

    @property
    def description(self) -> str:
        return (
            "Select units one at a time with adjusted draw probabilities. "
            "Reproduces the inclusion probabilities without rejection."
        )

    def select(self, rng, inputs: SampleInputs) -> List[int]:
        return brewer(rng, inputs.to_options())
