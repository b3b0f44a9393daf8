from dataclasses import dataclass, field
from typing import Callable, List

import numpy as np

from ppsample.parameter import DEFAULT_EPS, DEFAULT_MAX_ITERATIONS
from ppsample.scripts.validation import (
    check_eps,
    check_max_iterations,
    check_probabilities,
    check_vector,
)


@dataclass(frozen=True, eq=False)
class SampleOptions:
    """Inputs shared by every sampling design.

    Attributes:
        probabilities: Inclusion (or draw) probabilities, one per population unit
        eps: Tolerance used for probability-sum checks and boundary handling
        max_iterations: Attempts allowed in rejection loops
    """

    probabilities: np.ndarray
    eps: float = DEFAULT_EPS
    max_iterations: int = DEFAULT_MAX_ITERATIONS
    validate: bool = field(default=True, repr=False)

    def __post_init__(self):
        values = np.array(self.probabilities, dtype=float)
        check_vector(values)
        values.setflags(write=False)
        object.__setattr__(self, "probabilities", values)

        if self.validate:
            check_probabilities(values)
            check_eps(self.eps)
            check_max_iterations(self.max_iterations)

    @property
    def population_size(self) -> int:
        return len(self.probabilities)

    @property
    def probability_sum(self) -> float:
        return float(np.sum(self.probabilities))

    def sample(self, rng, design: Callable[..., List[int]], *args) -> List[int]:
        """Draw a sample with ``design`` using these options.

        Args:
            rng: Random source (e.g. ``numpy.random.default_rng()``)
            design: A design function such as ``pareto`` or ``with_replacement``
            *args: Extra design arguments (the draw count for ``with_replacement``)

        Returns:
            List of sampled unit indices
        """
        return design(rng, self, *args)
