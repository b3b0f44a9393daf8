"""With-replacement sampling design.

Each of the ``n_draws`` draws selects a unit with its draw probability, so
units may be selected repeatedly. The draw probabilities must sum to 1.
"""

from typing import List

from ppsample.sampling.base import SamplingDesign
from ppsample.sampling.types import DesignMethod, SampleInputs
from ppsample.scripts.unequal import with_replacement
from ppsample.scripts.validation import check_non_negative_int, check_sum_approx


class WithReplacementDesign(SamplingDesign):
    """Design for multinomial (with replacement) sampling.

    With-replacement sampling is ideal when:
    - Repeated selection of a unit is acceptable
    - The estimator is Hansen-Hurwitz style, based on draw probabilities
    """

    @property
    def method(self) -> DesignMethod:
        return DesignMethod.WITH_REPLACEMENT

    @property
    def display_name(self) -> str:
        return "With Replacement Sampling"

    @property
    def description(self) -> str:
        return (
            "Draw a fixed number of units independently with the given draw "
            "probabilities. A unit can appear more than once in the sample."
        )

    @property
    def fixed_size(self) -> bool:
        return True

    @property
    def with_replacement(self) -> bool:
        return True

    def expected_size(self, inputs: SampleInputs) -> float:
        return float(inputs.n_draws)

    def validate_inputs(self, inputs: SampleInputs) -> List[str]:
        """Validate inputs for with-replacement sampling."""
        errors = self._validate_common_inputs(inputs)

        psum = self._probability_sum(inputs)
        if psum is not None:
            self._collect(errors, check_sum_approx, psum, 1.0, inputs.eps)

        self._collect(errors, check_non_negative_int, inputs.n_draws, "n_draws")

        return errors

    def select(self, rng, inputs: SampleInputs) -> List[int]:
        return with_replacement(rng, inputs.to_options(), inputs.n_draws)
