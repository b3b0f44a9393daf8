"""Type definitions for sampling designs.

Contains data classes that define the inputs and outputs for all sampling designs.
This provides a clear contract between callers and the design algorithms.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

import numpy as np

from ppsample.parameter import DEFAULT_EPS, DEFAULT_MAX_ITERATIONS
from ppsample.scripts.options import SampleOptions


class DesignMethod(Enum):
    """Available sampling designs."""

    WITH_REPLACEMENT = "with_replacement"
    SAMPFORD = "sampford"
    PARETO = "pareto"
    BREWER = "brewer"
    POISSON = "poisson"

    @classmethod
    def from_string(cls, value: str) -> "DesignMethod":
        """Convert string to DesignMethod enum."""
        for method in cls:
            if method.value == value.lower():
                return method
        raise ValueError(f"Unknown sampling design: {value}")


@dataclass
class SampleInputs:
    """Input parameters for a sampling design.

    Each design uses only the parameters relevant to it.
    """

    probabilities: List[float]
    eps: float = DEFAULT_EPS
    max_iterations: int = DEFAULT_MAX_ITERATIONS

    # With-replacement only
    n_draws: int = 0

    @property
    def probability_sum(self) -> float:
        return float(np.sum(np.asarray(self.probabilities, dtype=float)))

    def to_options(self) -> SampleOptions:
        """Build unvalidated options; the design validates them on use."""
        return SampleOptions(
            self.probabilities,
            eps=self.eps,
            max_iterations=self.max_iterations,
            validate=False,
        )


@dataclass
class SampleResults:
    """Results from drawing a sample.

    Some fields may be None depending on the design used.
    """

    # Metadata
    method: DesignMethod
    success: bool = True
    error_message: Optional[str] = None

    # Core results
    sample: List[int] = field(default_factory=list)
    sample_size: int = 0
    expected_size: Optional[float] = None
    population_size: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert results to a plain dictionary."""
        return {
            "method": self.method.value,
            "success": self.success,
            "error_message": self.error_message,
            "sample": list(self.sample),
            "sample_size": self.sample_size,
            "expected_size": self.expected_size,
            "population_size": self.population_size,
        }

    @classmethod
    def error(cls, method: DesignMethod, message: str) -> "SampleResults":
        """Create an error result."""
        return cls(
            method=method,
            success=False,
            error_message=message,
        )
