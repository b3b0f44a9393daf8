"""Base class for sampling designs.

Defines the interface that all sampling designs must implement.
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, List, Optional

import numpy as np

from ppsample.errors import SamplingError
from ppsample.sampling.types import DesignMethod, SampleInputs, SampleResults
from ppsample.scripts.validation import (
    check_eps,
    check_integer_approx,
    check_probabilities,
    check_vector,
)

logger = logging.getLogger("ppsample.sampling")


class SamplingDesign(ABC):
    """Abstract base class for sampling designs.

    Each design (Sampford, Pareto, Brewer, ...) implements this interface,
    so callers can pass designs around as interchangeable strategies.
    """

    @property
    @abstractmethod
    def method(self) -> DesignMethod:
        """Return the design method this strategy handles."""
        pass

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Human-readable name for this design."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Description of when to use this design."""
        pass

    @property
    def fixed_size(self) -> bool:
        """Whether the design always returns round(sum(probabilities)) units."""
        return False

    @property
    def with_replacement(self) -> bool:
        """Whether a unit can be selected more than once."""
        return False

    @abstractmethod
    def validate_inputs(self, inputs: SampleInputs) -> List[str]:
        """Validate inputs for this design.

        Args:
            inputs: Sample inputs to validate

        Returns:
            List of validation error messages (empty if valid)
        """
        pass

    @abstractmethod
    def select(self, rng, inputs: SampleInputs) -> List[int]:
        """Draw the sample, raising ``SamplingError`` on invalid inputs."""
        pass

    def expected_size(self, inputs: SampleInputs) -> float:
        return inputs.probability_sum

    def calculate(self, rng, inputs: SampleInputs) -> SampleResults:
        """Draw a sample and wrap it in a results record.

        Args:
            rng: Random source
            inputs: Sample inputs

        Returns:
            SampleResults with the sample, or an error result
        """
        errors = self.validate_inputs(inputs)
        if errors:
            return SampleResults.error(self.method, "; ".join(errors))

        try:
            sample = self.select(rng, inputs)
        except SamplingError as e:
            logger.error(f"Error drawing {self.method.value} sample: {e}")
            return SampleResults.error(self.method, str(e))

        return SampleResults(
            method=self.method,
            success=True,
            sample=sample,
            sample_size=len(sample),
            expected_size=self.expected_size(inputs),
            population_size=len(inputs.probabilities),
        )

    def is_ready(self, inputs: SampleInputs) -> bool:
        """Check if inputs are ready for sampling.

        Args:
            inputs: Sample inputs to check

        Returns:
            True if ready for sampling
        """
        errors = self.validate_inputs(inputs)
        return len(errors) == 0

    @staticmethod
    def _collect(errors: List[str], check: Callable, *args) -> bool:
        """Run ``check`` and record its message instead of raising."""
        try:
            check(*args)
        except SamplingError as e:
            errors.append(str(e))
            return False
        return True

    def _validate_common_inputs(self, inputs: SampleInputs) -> List[str]:
        """Validate inputs common to all designs.

        Args:
            inputs: Sample inputs to validate

        Returns:
            List of validation error messages
        """
        errors: List[str] = []

        try:
            values = np.asarray(inputs.probabilities, dtype=float)
        except (TypeError, ValueError) as e:
            errors.append(f"probabilities must be a numeric 1-D vector: {e}")
        else:
            if self._collect(errors, check_vector, values):
                self._collect(errors, check_probabilities, values)

        self._collect(errors, check_eps, inputs.eps)
        return errors

    @staticmethod
    def _probability_sum(inputs: SampleInputs) -> Optional[float]:
        """Sum of the probabilities, or None when they are not numeric."""
        try:
            return inputs.probability_sum
        except (TypeError, ValueError):
            return None

    def _validate_integer_sum(self, inputs: SampleInputs) -> List[str]:
        errors: List[str] = []
        psum = self._probability_sum(inputs)
        if psum is not None:
            self._collect(errors, check_integer_approx, psum, inputs.eps)
        return errors
