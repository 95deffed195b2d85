"""Assemble a complete roof estimate from roof segments."""

from __future__ import annotations

import logging
from typing import Any, Sequence

from .area import SQ_FT_PER_SQUARE, estimate_cost, total_roof_area_sqft
from .insights_reader import read_building_insights
from .models import BuildingInsights, RoofEstimate, RoofSegmentStat
from .outline import extract_roof_outline, outline_perimeter_m
from .pitch import classify_pitch

logger = logging.getLogger(__name__)


def estimate_roof(
    segments: Sequence[RoofSegmentStat],
    price_per_square: float,
    whole_roof_ground_area_sq_meters: float | None = None,
) -> RoofEstimate:
    """Compute area, cost, outline and pitch breakdown for one roof.

    The three parts are independent of each other and all read the same
    segment list.
    """
    total_area = total_roof_area_sqft(segments, whole_roof_ground_area_sq_meters)
    outline = extract_roof_outline(segments)
    pitch = classify_pitch(segments)

    estimate = RoofEstimate(
        total_area_sq_ft=total_area,
        roof_squares=total_area / SQ_FT_PER_SQUARE,
        price_per_square=price_per_square,
        estimate=estimate_cost(total_area, price_per_square),
        predominant_pitch_type=pitch.predominant_pitch_type,
        outline=outline,
        outline_perimeter_m=outline_perimeter_m(outline),
        segments=pitch.segments,
    )
    logger.debug(
        "Estimated %.1f sq ft at %s per square: %d",
        estimate.total_area_sq_ft,
        price_per_square,
        estimate.estimate,
    )
    return estimate


def estimate_from_insights(data: BuildingInsights | dict[str, Any], price_per_square: float) -> RoofEstimate:
    """Estimate a roof straight from a building-insights response."""
    insights = data if isinstance(data, BuildingInsights) else read_building_insights(data)
    return estimate_roof(
        insights.segments,
        price_per_square,
        insights.whole_roof_ground_area_sq_meters,
    )
