"""
Tests for ratio, pitch, and error calculations.
"""

import pytest

from changegears.solver.combinatorics import InvariantViolation
from changegears.solver.ratio import (
    compute_actual_pitch,
    compute_actual_ratio,
    compute_desired_ratio,
    compute_error,
    error_score,
    evaluate,
)


class TestComputeActualRatio:
    """Tests for compute_actual_ratio."""

    def test_single_stage(self):
        assert compute_actual_ratio([20], [50]) == pytest.approx(2.5)

    def test_product_of_driven_over_driving(self):
        ratio = compute_actual_ratio([20, 30, 45], [40, 60, 35])
        assert ratio == pytest.approx((40 * 60 * 35) / (20 * 30 * 45))

    def test_empty_train_is_unity(self):
        assert compute_actual_ratio([], []) == 1.0

    def test_swapping_equal_teeth_unchanged(self):
        driving = [30, 20]
        driven = [50, 30]
        before = compute_actual_ratio(driving, driven)

        driving[0], driven[1] = driven[1], driving[0]
        assert compute_actual_ratio(driving, driven) == before

    def test_stage_order_does_not_matter(self):
        assert compute_actual_ratio([20, 45], [35, 80]) == pytest.approx(
            compute_actual_ratio([45, 20], [80, 35])
        )

    def test_length_mismatch_is_invariant_violation(self):
        with pytest.raises(InvariantViolation):
            compute_actual_ratio([20], [30, 40])


class TestPitchConversion:
    """Tests for desired ratio and achieved pitch."""

    def test_desired_ratio(self):
        # 8 TPI leadscrew = 3.175 mm/rev
        assert compute_desired_ratio(1.27, 8.0) == pytest.approx(2.5)

    def test_actual_pitch(self):
        assert compute_actual_pitch(2.5, 8.0) == pytest.approx(1.27)

    def test_round_trip(self):
        ratio = compute_desired_ratio(1.75, 6.0)
        assert compute_actual_pitch(ratio, 6.0) == pytest.approx(1.75)


class TestComputeError:
    """Tests for compute_error."""

    def test_zero_error(self):
        errors = compute_error(1.5, 1.5)
        assert errors.error_mm_per_thread == 0.0
        assert errors.error_percent == 0.0
        assert errors.error_inch_per_thread == 0.0
        assert errors.error_inch_per_foot == 0.0
        assert errors.score == 0.0

    def test_metrics_derived_from_mm_error(self):
        errors = compute_error(desired_pitch_mm=1.5, actual_pitch_mm=1.524)

        assert errors.error_mm_per_thread == pytest.approx(0.024)
        assert errors.error_percent == pytest.approx(1.6)
        assert errors.error_inch_per_thread == pytest.approx(0.024 / 25.4)
        # Error per thread times threads per foot
        assert errors.error_inch_per_foot == pytest.approx(0.024 / 25.4 / (1.5 / 25.4) * 12.0)

    def test_fine_pitch_is_negative_error(self):
        errors = compute_error(1.5, 1.4)
        assert errors.error_percent < 0
        assert errors.score == pytest.approx(abs(errors.error_percent))


class TestScoreAndEvaluate:
    """Tests for error_score and evaluate."""

    def test_error_score_matches_result_error(self):
        result = evaluate([20, 45], [35, 80], desired_pitch_mm=1.25, lead=8.0)
        assert error_score(result.ratio, 1.25, 8.0) == abs(result.error_percent)

    def test_evaluate_populates_result(self):
        result = evaluate([20], [50], desired_pitch_mm=1.27, lead=8.0)

        assert result.driving_gears == (20,)
        assert result.driven_gears == (50,)
        assert result.ratio == pytest.approx(2.5)
        assert result.actual_pitch_mm == pytest.approx(25.4 / 8.0 / 2.5)
        assert result.error_percent == pytest.approx(0.0, abs=1e-9)
        assert result.extra_gear_teeth is None
        assert result.num_reductions == 1

    def test_evaluate_records_extra_gear(self):
        result = evaluate([16], [100], desired_pitch_mm=1.5, lead=8.0, extra_gear_teeth=16)
        assert result.extra_gear_teeth == 16
