"""Roof geometry and replacement-cost estimate engine."""

from .area import estimate_cost, total_roof_area_sqft
from .errors import InvalidInputError
from .estimate import estimate_from_insights, estimate_roof
from .geo import direction_from_azimuth, haversine_distance_m
from .hull import compute_convex_hull, dedupe_points
from .insights_reader import read_building_insights
from .models import (
    BoundingBox,
    BuildingInsights,
    GeoPoint,
    PitchBreakdown,
    PitchCategory,
    PitchType,
    RoofEstimate,
    RoofSegmentStat,
    SegmentPitch,
)
from .outline import extract_roof_outline, outline_perimeter_m
from .pitch import PITCH_CATEGORIES, categorize_pitch, classify_pitch, pitch_ratio

__all__ = [
    "BoundingBox",
    "BuildingInsights",
    "GeoPoint",
    "InvalidInputError",
    "PITCH_CATEGORIES",
    "PitchBreakdown",
    "PitchCategory",
    "PitchType",
    "RoofEstimate",
    "RoofSegmentStat",
    "SegmentPitch",
    "categorize_pitch",
    "classify_pitch",
    "compute_convex_hull",
    "dedupe_points",
    "direction_from_azimuth",
    "estimate_cost",
    "estimate_from_insights",
    "estimate_roof",
    "extract_roof_outline",
    "haversine_distance_m",
    "outline_perimeter_m",
    "pitch_ratio",
    "read_building_insights",
    "total_roof_area_sqft",
]
