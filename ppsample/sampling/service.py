"""Sampling service for orchestrating sampling designs.

This module provides the main entry points for callers that select a design
by name or enum instead of calling the design functions directly.
"""

import logging
from typing import Dict, List, Tuple, Type

from ppsample.sampling.base import SamplingDesign
from ppsample.sampling.fixed_size import BrewerDesign, ParetoDesign, SampfordDesign
from ppsample.sampling.poisson import PoissonDesign
from ppsample.sampling.replacement import WithReplacementDesign
from ppsample.sampling.types import DesignMethod, SampleInputs, SampleResults

logger = logging.getLogger("ppsample.sampling.service")

# Registry of available designs
_DESIGN_REGISTRY: Dict[DesignMethod, Type[SamplingDesign]] = {
    DesignMethod.WITH_REPLACEMENT: WithReplacementDesign,
    DesignMethod.SAMPFORD: SampfordDesign,
    DesignMethod.PARETO: ParetoDesign,
    DesignMethod.BREWER: BrewerDesign,
    DesignMethod.POISSON: PoissonDesign,
}

# Cached design instances
_design_instances: Dict[DesignMethod, SamplingDesign] = {}


def get_sampling_design(method: DesignMethod) -> SamplingDesign:
    """Get the sampling design for a given method.

    Args:
        method: The design method

    Returns:
        The corresponding SamplingDesign instance

    Raises:
        ValueError: If the method is not supported
    """
    if method not in _DESIGN_REGISTRY:
        raise ValueError(f"Unsupported sampling design: {method}")

    # Use cached instance if available
    if method not in _design_instances:
        _design_instances[method] = _DESIGN_REGISTRY[method]()

    return _design_instances[method]


def get_design_from_string(method_str: str) -> SamplingDesign:
    """Get sampling design from string method name.

    Args:
        method_str: String name of the design (e.g., "pareto")

    Returns:
        The corresponding SamplingDesign instance
    """
    method = DesignMethod.from_string(method_str)
    return get_sampling_design(method)


class SamplingService:
    """High-level service for drawing samples with a named design."""

    @staticmethod
    def calculate(rng, method: DesignMethod, inputs: SampleInputs) -> SampleResults:
        """Draw a sample using the requested design.

        Args:
            rng: Random source
            method: Design to use
            inputs: Sample inputs

        Returns:
            SampleResults from the design
        """
        design = get_sampling_design(method)
        results = design.calculate(rng, inputs)

        if results.success:
            logger.info(
                f"{design.display_name}: drew {results.sample_size} of "
                f"{results.population_size} units"
            )
        return results

    @staticmethod
    def get_validation_errors(method: DesignMethod, inputs: SampleInputs) -> list:
        """Get validation errors for the inputs under a design.

        Args:
            method: Design to validate against
            inputs: Sample inputs

        Returns:
            List of validation error messages
        """
        return get_sampling_design(method).validate_inputs(inputs)

    @staticmethod
    def get_available_methods() -> List[Tuple[str, str, str]]:
        """Get list of available sampling designs.

        Returns:
            List of (method_value, display_name, description) tuples
        """
        methods = []
        for method in DesignMethod:
            design = get_sampling_design(method)
            methods.append((method.value, design.display_name, design.description))
        return methods
