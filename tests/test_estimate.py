"""End-to-end tests for roof estimate assembly."""

import pytest

from roof_estimate import (
    GeoPoint,
    InvalidInputError,
    PitchType,
    estimate_from_insights,
    estimate_roof,
    read_building_insights,
)


class TestEstimateRoof:
    def test_single_segment(self, single_segment):
        result = estimate_roof([single_segment], 350)
        assert result.total_area_sq_ft == pytest.approx(538.195)
        assert result.roof_squares == pytest.approx(5.38195)
        assert result.estimate == 1884  # 5.38195 * 350 = 1883.68
        assert result.price_per_square == 350
        assert result.predominant_pitch_type == PitchType.NORMAL
        assert len(result.outline) == 4
        assert result.outline[0] == GeoPoint(lat=0, lng=0)
        assert len(result.segments) == 1
        assert result.segments[0].direction == "S"

    def test_no_segments(self):
        result = estimate_roof([], 350)
        assert result.total_area_sq_ft == 0
        assert result.roof_squares == 0
        assert result.estimate == 0
        assert result.predominant_pitch_type == PitchType.UNKNOWN
        assert result.outline == []
        assert result.outline_perimeter_m == 0
        assert result.segments == []

    def test_whole_roof_area_overrides_segments(self, single_segment):
        result = estimate_roof([single_segment], 100, whole_roof_ground_area_sq_meters=10)
        assert result.total_area_sq_ft == pytest.approx(107.639)
        assert result.estimate == 108
        assert result.segments[0].area_sq_ft == 538

    def test_repeatable(self, single_segment):
        assert estimate_roof([single_segment], 350) == estimate_roof([single_segment], 350)


class TestEstimateFromInsights:
    def test_sample_response(self, insights_data):
        result = estimate_from_insights(insights_data, 350)
        # whole-roof ground area 120.5 m² wins over the segment sum
        assert result.total_area_sq_ft == pytest.approx(1297.04995)
        assert result.estimate == 4540
        assert result.predominant_pitch_type == PitchType.NORMAL
        assert [s.pitch_type for s in result.segments] == [
            PitchType.NORMAL,
            PitchType.NORMAL,
            PitchType.FLAT,
        ]
        assert [s.direction for s in result.segments] == ["S", "N", "E"]
        assert len(result.outline) == 6
        assert 100 < result.outline_perimeter_m < 115

    def test_accepts_parsed_insights(self, insights_path, insights_data):
        insights = read_building_insights(insights_path)
        assert estimate_from_insights(insights, 350) == estimate_from_insights(insights_data, 350)

    def test_segment_sum_without_whole_roof(self, insights_data):
        del insights_data["solarPotential"]["wholeRoofStats"]
        result = estimate_from_insights(insights_data, 350)
        assert result.total_area_sq_ft == pytest.approx(135 * 10.7639)

    def test_bad_response_raises(self):
        with pytest.raises(InvalidInputError):
            estimate_from_insights({"solarPotential": {"roofSegmentStats": [{}]}}, 350)
