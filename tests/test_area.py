"""Tests for roof area conversion and cost estimates."""

import pytest
from pydantic import ValidationError

from roof_estimate import InvalidInputError, RoofSegmentStat, estimate_cost, total_roof_area_sqft
from roof_estimate.models import MAX_AREA_SQ_METERS


def _segment(area, pitch):
    return RoofSegmentStat(area_sq_meters=area, pitch_degrees=pitch)


class TestTotalRoofArea:
    def test_single_segment(self):
        assert total_roof_area_sqft([_segment(100, 30)]) == pytest.approx(1076.39)

    def test_sums_segments(self):
        segments = [_segment(100, 30), _segment(50, 10)]
        assert total_roof_area_sqft(segments) == pytest.approx(150 * 10.7639)

    def test_zero_pitch_excluded(self):
        assert total_roof_area_sqft([_segment(100, 0), _segment(10, 20)]) == pytest.approx(107.639)

    def test_zero_area_excluded(self):
        assert total_roof_area_sqft([_segment(0, 30)]) == 0

    def test_negative_values_excluded(self):
        assert total_roof_area_sqft([_segment(-5, 30), _segment(5, -30)]) == 0

    def test_whole_roof_area_wins(self):
        segments = [_segment(100, 30)]
        assert total_roof_area_sqft(segments, 200) == pytest.approx(2152.78)

    def test_zero_whole_roof_area_falls_back_to_segments(self):
        assert total_roof_area_sqft([_segment(100, 30)], 0) == pytest.approx(1076.39)

    def test_no_data(self):
        assert total_roof_area_sqft([]) == 0
        assert total_roof_area_sqft([], None) == 0


class TestEstimateCost:
    def test_reference_case(self):
        # 10.7639 squares * 350 = 3767.365
        assert estimate_cost(1076.39, 350) == 3767

    def test_returns_int(self):
        assert isinstance(estimate_cost(1000, 350), int)
        assert estimate_cost(1000, 350) == 3500

    def test_half_rounds_up(self):
        # round() would give 2 here
        assert estimate_cost(100, 2.5) == 3
        assert estimate_cost(300, 0.5) == 2

    def test_negative_half_rounds_toward_positive(self):
        assert estimate_cost(-100, 2.5) == -2

    def test_zero_area(self):
        assert estimate_cost(0, 350) == 0

    def test_overflowing_cost_rejected(self):
        with pytest.raises(InvalidInputError, match="non-finite"):
            estimate_cost(1e308, 350)

    def test_largest_allowed_area_is_finite(self):
        area = total_roof_area_sqft([_segment(MAX_AREA_SQ_METERS, 30)])
        assert estimate_cost(area, 350) == pytest.approx(MAX_AREA_SQ_METERS * 10.7639 * 3.5)


class TestAreaLimits:
    def test_area_beyond_cap_rejected(self):
        with pytest.raises(ValidationError):
            _segment(1e308, 30)

    def test_string_area_rejected(self):
        with pytest.raises(ValidationError):
            RoofSegmentStat(pitch_degrees=30, area_sq_meters="100")

    def test_bool_area_rejected(self):
        with pytest.raises(ValidationError):
            RoofSegmentStat(pitch_degrees=30, area_sq_meters=True)
