"""Roof pitch classification.

Pitches are reported by the provider in degrees; roofers talk in inches of
rise per 12 inches of run. Category bounds are the angles of those rise
ratios and are inclusive at the top: a 4:12 roof is LOW, anything steeper
is NORMAL.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

from .area import SQ_FT_PER_SQ_M
from .geo import direction_from_azimuth
from .models import PitchBreakdown, PitchCategory, PitchType, RoofSegmentStat, SegmentPitch
from .rounding import round_half_up

logger = logging.getLogger(__name__)


def _rise_angle(rise: float) -> float:
    return math.atan(rise / 12) * 180 / math.pi


PITCH_CATEGORIES: tuple[PitchCategory, ...] = (
    PitchCategory(
        type=PitchType.FLAT,
        min_degrees=0,
        max_degrees=_rise_angle(2),
        ratio="0:12-2:12",
        description="Very low slope or flat",
    ),
    PitchCategory(
        type=PitchType.LOW,
        min_degrees=_rise_angle(2),
        max_degrees=_rise_angle(4),
        ratio=">2:12-4:12",
        description="Low pitch",
    ),
    PitchCategory(
        type=PitchType.NORMAL,
        min_degrees=_rise_angle(4),
        max_degrees=_rise_angle(6),
        ratio=">4:12-6:12",
        description="Standard/typical pitch",
    ),
    PitchCategory(
        type=PitchType.STEEP,
        min_degrees=_rise_angle(6),
        max_degrees=_rise_angle(9),
        ratio=">6:12-9:12",
        description="Steep pitch",
    ),
    PitchCategory(
        type=PitchType.VERY_STEEP,
        min_degrees=_rise_angle(9),
        max_degrees=90,
        ratio=">9:12",
        description="Very steep, dramatic slope",
    ),
)

UNKNOWN_CATEGORY = PitchCategory(
    type=PitchType.UNKNOWN,
    ratio="Unknown",
    description="Unknown pitch",
)

# Tie-break order for the predominant pitch type.
_PITCH_TYPE_ORDER = tuple(c.type for c in PITCH_CATEGORIES) + (PitchType.UNKNOWN,)


def pitch_ratio(pitch_degrees: float) -> str:
    """Format a pitch as rise over 12, e.g. ``"5.6:12"`` or ``"6:12"``."""
    rise = round_half_up(math.tan(pitch_degrees * math.pi / 180) * 12, 1)
    text = str(int(rise)) if rise.is_integer() else str(rise)
    return f"{text}:12"


def categorize_pitch(pitch_degrees: float) -> PitchCategory:
    """Return the first category whose range holds the pitch.

    0 degrees lies outside the FLAT range, whose lower bound is exclusive,
    and is UNKNOWN.
    """
    for category in PITCH_CATEGORIES:
        if category.contains(pitch_degrees):
            return category
    return UNKNOWN_CATEGORY


def classify_segment(segment: RoofSegmentStat) -> SegmentPitch:
    category = categorize_pitch(segment.pitch_degrees)
    return SegmentPitch(
        pitch_degrees=segment.pitch_degrees,
        pitch_ratio=pitch_ratio(segment.pitch_degrees),
        pitch_type=category.type,
        standard_ratio=category.ratio,
        description=category.description,
        azimuth_degrees=segment.azimuth_degrees,
        direction=direction_from_azimuth(segment.azimuth_degrees or 0),
        area_sq_ft=int(round_half_up(segment.area_sq_meters * SQ_FT_PER_SQ_M)),
    )


def predominant_pitch_type(rows: Sequence[SegmentPitch]) -> PitchType:
    """Pitch type covering the most area; ties go to the flatter type.

    A roof whose rows carry no area at all is UNKNOWN.
    """
    areas = {pitch_type: 0 for pitch_type in _PITCH_TYPE_ORDER}
    for row in rows:
        areas[row.pitch_type] += row.area_sq_ft

    best, best_area = PitchType.UNKNOWN, 0
    for pitch_type in _PITCH_TYPE_ORDER:
        if areas[pitch_type] > best_area:
            best, best_area = pitch_type, areas[pitch_type]
    return best


def classify_pitch(segments: Sequence[RoofSegmentStat]) -> PitchBreakdown:
    """Classify every segment and find the roof's predominant pitch type."""
    rows = [classify_segment(segment) for segment in segments]
    predominant = predominant_pitch_type(rows)
    logger.debug("Classified %d segments, predominant pitch %s", len(rows), predominant.value)
    return PitchBreakdown(
        segments=rows,
        predominant_pitch_type=predominant,
        pitch_categories=list(PITCH_CATEGORIES),
    )
