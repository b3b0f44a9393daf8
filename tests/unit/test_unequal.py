"""Tests for the unequal probability sampling designs.

Covers the core functions of ppsample.scripts.unequal:
- draw (single weighted draw)
- with_replacement (order statistic sampling)
- sampford, pareto, brewer (fixed size without-replacement designs)
"""

from __future__ import annotations

import numpy as np
import pytest

from ppsample.errors import (
    MaxIterationsError,
    ProbabilityError,
    ProbabilitySumError,
    RangeError,
    ToleranceError,
)
from ppsample.scripts.options import SampleOptions
from ppsample.scripts.simulation import empirical_inclusion_probabilities
from ppsample.scripts.unequal import (
    brewer,
    draw,
    pareto,
    sampford,
    with_replacement,
)

FIXED_SIZE_DESIGNS = [sampford, pareto, brewer]


def _unchecked(probabilities, **kwargs) -> SampleOptions:
    return SampleOptions(probabilities, validate=False, **kwargs)


# ---------------------------------------------------------------------------
# Tests: draw
# ---------------------------------------------------------------------------


class TestDraw:
    """Tests for the single weighted draw."""

    @pytest.mark.parametrize("rv", [0.1, 0.5, 0.999999])
    def test_one_hot_always_returns_hot_index(self, scripted_rng, rv) -> None:
        assert draw(scripted_rng([rv]), [0.0, 0.0, 1.0, 0.0, 0.0]) == 2

    def test_one_hot_with_generator(self, rng) -> None:
        p = [0.0, 1.0, 0.0]
        assert {draw(rng, p) for _ in range(200)} == {1}

    def test_lands_in_bucket(self, scripted_rng) -> None:
        p = [0.2, 0.3, 0.5]
        assert draw(scripted_rng([0.1]), p) == 0
        assert draw(scripted_rng([0.25]), p) == 1
        assert draw(scripted_rng([0.75]), p) == 2

    def test_boundary_belongs_to_lower_bucket(self, scripted_rng) -> None:
        assert draw(scripted_rng([0.2]), [0.2, 0.3, 0.5]) == 0
        assert draw(scripted_rng([0.5]), [0.2, 0.3, 0.5]) == 1

    def test_falls_back_to_last_index(self, scripted_rng) -> None:
        # Cumulative mass never reaches the variate
        assert draw(scripted_rng([0.95]), [0.3, 0.3, 0.3]) == 2

    def test_consumes_one_variate(self, counting_rng) -> None:
        draw(counting_rng, [0.5, 0.5])
        assert counting_rng.drawn == 1


# ---------------------------------------------------------------------------
# Tests: with_replacement
# ---------------------------------------------------------------------------


class TestWithReplacement:
    """Tests for with-replacement order statistic sampling."""

    def test_draws_requested_count(self, rng) -> None:
        options = SampleOptions([0.1] * 10)
        sample = with_replacement(rng, options, 5)
        assert len(sample) == 5
        assert all(0 <= unit <= 9 for unit in sample)

    def test_zero_draws_is_empty(self, counting_rng) -> None:
        for p in ([1.0], [0.5, 0.5], [0.1] * 10):
            assert with_replacement(counting_rng, SampleOptions(p), 0) == []
        assert counting_rng.drawn == 0

    def test_merged_pass_matches_buckets(self, scripted_rng) -> None:
        options = SampleOptions([0.2, 0.3, 0.5])
        sample = with_replacement(scripted_rng([0.9, 0.1, 0.25, 0.2]), options, 4)
        assert sample == [0, 1, 1, 2]

    def test_units_can_repeat(self, scripted_rng) -> None:
        options = SampleOptions([0.5, 0.5])
        assert with_replacement(scripted_rng([0.1, 0.2, 0.3]), options, 3) == [0, 0, 0]

    def test_output_is_non_decreasing(self, rng) -> None:
        sample = with_replacement(rng, SampleOptions([0.1] * 10), 50)
        assert sample == sorted(sample)

    def test_matches_independent_draws_in_distribution(self, rng) -> None:
        p = [0.1, 0.2, 0.3, 0.4]
        sample = with_replacement(rng, SampleOptions(p), 20_000)
        frequencies = np.bincount(sample, minlength=4) / 20_000
        assert frequencies == pytest.approx(p, abs=0.02)

    def test_rounding_overflow_lands_on_last_unit(self, scripted_rng) -> None:
        options = SampleOptions([0.5, 0.5 - 1e-13])
        sample = with_replacement(scripted_rng([0.9999999999999999]), options, 1)
        assert sample == [1]

    def test_sum_not_one_rejected_before_drawing(self, counting_rng) -> None:
        with pytest.raises(ProbabilitySumError):
            with_replacement(counting_rng, SampleOptions([0.5, 0.4]), 3)
        assert counting_rng.drawn == 0

    def test_negative_count_rejected(self, counting_rng) -> None:
        with pytest.raises(RangeError):
            with_replacement(counting_rng, SampleOptions([0.5, 0.5]), -1)
        assert counting_rng.drawn == 0

    def test_non_integer_count_rejected(self, counting_rng) -> None:
        with pytest.raises(RangeError):
            with_replacement(counting_rng, SampleOptions([0.5, 0.5]), 5.0)
        assert counting_rng.drawn == 0


# ---------------------------------------------------------------------------
# Tests: fixed size designs
# ---------------------------------------------------------------------------


class TestFixedSizeDesigns:
    """Properties shared by Sampford, Pareto and Brewer."""

    @pytest.mark.parametrize("design", FIXED_SIZE_DESIGNS)
    def test_example_gives_five_ascending_units(
        self, rng, example_probabilities, design
    ) -> None:
        options = SampleOptions(example_probabilities)
        for _ in range(50):
            sample = design(rng, options)
            assert len(sample) == 5
            assert all(a < b for a, b in zip(sample, sample[1:]))
            assert all(0 <= unit < 10 for unit in sample)

    @pytest.mark.parametrize("design", FIXED_SIZE_DESIGNS)
    def test_sample_size_is_rounded_sum(self, rng, design) -> None:
        p = [0.5] * 6 + [0.25] * 4
        sample = design(rng, SampleOptions(p))
        assert len(sample) == 4
        assert len(set(sample)) == 4

    @pytest.mark.parametrize("design", FIXED_SIZE_DESIGNS)
    def test_zero_sum_gives_empty_sample(self, rng, design) -> None:
        assert design(rng, SampleOptions([0.0, 0.0, 0.0])) == []

    @pytest.mark.parametrize("design", FIXED_SIZE_DESIGNS)
    def test_certainty_units_always_selected(self, rng, design) -> None:
        options = SampleOptions([1.0, 0.5, 0.5, 0.0, 1.0])
        for _ in range(30):
            sample = design(rng, options)
            assert 0 in sample
            assert 4 in sample
            assert 3 not in sample
            assert len(sample) == 3

    @pytest.mark.parametrize("design", FIXED_SIZE_DESIGNS)
    def test_non_integer_sum_rejected_before_drawing(self, counting_rng, design) -> None:
        with pytest.raises(ProbabilitySumError, match="integer"):
            design(counting_rng, SampleOptions([0.5, 0.6, 0.7]))
        assert counting_rng.drawn == 0

    @pytest.mark.parametrize("design", FIXED_SIZE_DESIGNS)
    def test_probability_above_one_rejected_before_drawing(
        self, counting_rng, design
    ) -> None:
        with pytest.raises(ProbabilityError):
            design(counting_rng, _unchecked([1.5, 0.5]))
        assert counting_rng.drawn == 0

    @pytest.mark.parametrize("design", FIXED_SIZE_DESIGNS)
    def test_invalid_eps_rejected(self, counting_rng, design) -> None:
        with pytest.raises(ToleranceError):
            design(counting_rng, _unchecked([0.5, 0.5], eps=-1.0))
        assert counting_rng.drawn == 0


class TestSampford:
    """Tests for Sampford's rejection design."""

    def test_single_unit_sample(self, rng) -> None:
        sample = sampford(rng, SampleOptions([0.25] * 4))
        assert len(sample) == 1

    def test_single_unit_never_picks_zero_probability(self, rng) -> None:
        options = SampleOptions([0.0, 0.6, 0.0, 0.4])
        for _ in range(100):
            assert sampford(rng, options)[0] in (1, 3)

    def test_exhausted_iterations_reported(self, rng, example_probabilities) -> None:
        options = SampleOptions(example_probabilities, max_iterations=1)
        failures = []
        for _ in range(200):
            try:
                sampford(rng, options)
            except MaxIterationsError as e:
                failures.append(e)

        assert failures
        assert all(e.max_iterations == 1 for e in failures)
        assert "max_iterations=1" in str(failures[0])

    def test_reproduces_inclusion_probabilities(self, rng, example_probabilities) -> None:
        result = empirical_inclusion_probabilities(
            rng, sampford, SampleOptions(example_probabilities), 4000
        )
        assert result["deviation"].abs().max() < 0.04

    def test_invalid_max_iterations_rejected(self, counting_rng) -> None:
        with pytest.raises(RangeError):
            sampford(counting_rng, _unchecked([0.5, 0.5], max_iterations=0))
        assert counting_rng.drawn == 0

    def test_extra_unit_above_poisson_sample_accepted(self, scripted_rng) -> None:
        # Poisson sample is [0]; the extra draw of 0.9 lands on unit 3
        rng = scripted_rng([0.1, 0.9, 0.9, 0.9, 0.9])
        options = SampleOptions([0.5] * 4, max_iterations=1)
        assert sampford(rng, options) == [0, 3]


class TestPareto:
    """Tests for Pareto order sampling."""

    def test_smallest_keys_selected(self, scripted_rng) -> None:
        # keys: 1/9, 1, 9, 1
        options = SampleOptions([0.5, 0.5, 0.5, 0.5])
        sample = pareto(scripted_rng([0.1, 0.5, 0.9, 0.5]), options)
        assert sample == [0, 1]

    def test_zero_probability_units_ranked_last(self, rng) -> None:
        options = SampleOptions([0.0, 1.0, 0.0, 0.5, 0.5])
        for _ in range(50):
            sample = pareto(rng, options)
            assert 0 not in sample
            assert 2 not in sample

    def test_uniform_near_one_ranked_last(self, scripted_rng) -> None:
        options = SampleOptions([0.5, 0.5], eps=1e-6)
        assert pareto(scripted_rng([0.9999999, 0.99]), options) == [1]

    def test_one_variate_per_unit(self, counting_rng, example_probabilities) -> None:
        pareto(counting_rng, SampleOptions(example_probabilities))
        assert counting_rng.drawn == len(example_probabilities)

    def test_approximates_inclusion_probabilities(
        self, rng, example_probabilities
    ) -> None:
        result = empirical_inclusion_probabilities(
            rng, pareto, SampleOptions(example_probabilities), 4000
        )
        assert result["deviation"].abs().max() < 0.05


class TestBrewer:
    """Tests for Brewer's sequential design."""

    def test_reproduces_inclusion_probabilities(self, rng, example_probabilities) -> None:
        result = empirical_inclusion_probabilities(
            rng, brewer, SampleOptions(example_probabilities), 4000
        )
        assert result["deviation"].abs().max() < 0.04

    def test_one_variate_per_draw(self, counting_rng) -> None:
        brewer(counting_rng, SampleOptions([1.0, 0.5, 0.5, 0.5, 0.5]))
        # one certainty unit, two sequential draws
        assert counting_rng.drawn == 2

    def test_all_certainty_units(self, counting_rng) -> None:
        assert brewer(counting_rng, SampleOptions([1.0, 1.0, 0.0])) == [0, 1]
        assert counting_rng.drawn == 0

    def test_too_many_certainty_units_rejected(self, counting_rng) -> None:
        # sum 10.01 rounds to 10, but all 11 units are within eps of 1
        options = SampleOptions([0.91] * 11, eps=0.1)
        with pytest.raises(ProbabilitySumError):
            brewer(counting_rng, options)
        assert counting_rng.drawn == 0
