"""Exception types raised by the sampling designs and estimators.

Every precondition failure is reported as a subclass of ``SamplingError`` so
callers can either catch the whole family or react to one specific violation.
"""


class SamplingError(ValueError):
    """Base class for all sampling and estimation errors."""


class InputShapeError(SamplingError):
    """Mismatched vector lengths or matrix dimensions."""


class ProbabilityError(SamplingError):
    """A probability lies outside [0, 1] or is not finite."""


class ProbabilitySumError(SamplingError):
    """Probabilities do not sum to the required target within tolerance."""


class ToleranceError(SamplingError):
    """The tolerance ``eps`` itself is out of its accepted range."""


class RangeError(SamplingError):
    """A scalar parameter lies outside its accepted range."""


class AuxiliaryTotalError(RangeError):
    """The known auxiliary population total is negative."""


class MaxIterationsError(SamplingError):
    """A rejection loop ran out of attempts without accepting a sample."""

    def __init__(self, max_iterations: int):
        self.max_iterations = max_iterations
        super().__init__(
            f"No sample accepted within max_iterations={max_iterations} attempts"
        )
