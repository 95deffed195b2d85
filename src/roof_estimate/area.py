"""Roof area and replacement cost."""

import logging
from typing import Sequence

from .models import RoofSegmentStat
from .rounding import round_half_up

logger = logging.getLogger(__name__)

SQ_FT_PER_SQ_M = 10.7639
SQ_FT_PER_SQUARE = 100


def total_roof_area_sqft(
    segments: Sequence[RoofSegmentStat],
    whole_roof_ground_area_sq_meters: float | None = None,
) -> float:
    """Total roof area in square feet.

    A whole-roof ground area reported by the provider wins over the segment
    sum. Segments with a non-positive pitch or area are not roof facets and
    are left out of the sum.
    """
    if whole_roof_ground_area_sq_meters:
        return whole_roof_ground_area_sq_meters * SQ_FT_PER_SQ_M

    total = 0.0
    skipped = 0
    for segment in segments:
        if segment.pitch_degrees > 0 and segment.area_sq_meters > 0:
            total += segment.area_sq_meters * SQ_FT_PER_SQ_M
        else:
            skipped += 1

    if skipped:
        logger.debug("Skipped %d of %d segments with no pitch or area", skipped, len(segments))
    return total


def estimate_cost(roof_area_sqft: float, price_per_square: float) -> int:
    """Replacement cost in whole currency units for ``price_per_square`` per 100 sq ft.

    Raises:
        InvalidInputError: if the cost overflows to infinity.
    """
    roof_squares = roof_area_sqft / SQ_FT_PER_SQUARE
    return int(round_half_up(roof_squares * price_per_square))
