"""Pydantic data models for the roof estimate engine."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# Larger than any single building; keeps square-foot figures finite.
MAX_AREA_SQ_METERS = 1e9


class GeoPoint(BaseModel):
    """A latitude/longitude pair, treated as planar for roof-scale geometry."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    lat: float = Field(strict=True, ge=-90, le=90)
    lng: float = Field(strict=True, ge=-180, le=180)


class BoundingBox(BaseModel):
    """Axis-aligned box given by its southwest and northeast corners."""

    model_config = ConfigDict(frozen=True)

    sw: GeoPoint | None = None
    ne: GeoPoint | None = None


class RoofSegmentStat(BaseModel):
    """One planar roof facet as reported by the imagery provider."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    pitch_degrees: float = Field(strict=True)
    area_sq_meters: float = Field(
        default=0.0, strict=True, ge=-MAX_AREA_SQ_METERS, le=MAX_AREA_SQ_METERS
    )
    azimuth_degrees: float | None = Field(default=None, strict=True)
    bounding_box: BoundingBox | None = None


class BuildingInsights(BaseModel):
    """The parts of a building-insights response the engine consumes."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    segments: list[RoofSegmentStat] = []
    whole_roof_ground_area_sq_meters: float | None = Field(
        default=None, strict=True, ge=-MAX_AREA_SQ_METERS, le=MAX_AREA_SQ_METERS
    )
    center: GeoPoint | None = None


class PitchType(str, Enum):
    """Slope class of a roof segment."""

    FLAT = "FLAT"
    LOW = "LOW"
    NORMAL = "NORMAL"
    STEEP = "STEEP"
    VERY_STEEP = "VERY_STEEP"
    UNKNOWN = "UNKNOWN"


class PitchCategory(BaseModel):
    """A slope class covering pitches in ``(min_degrees, max_degrees]``."""

    model_config = ConfigDict(frozen=True)

    type: PitchType
    min_degrees: float | None = None
    max_degrees: float | None = None
    ratio: str
    description: str

    def contains(self, pitch_degrees: float) -> bool:
        if self.min_degrees is None or self.max_degrees is None:
            return False
        return self.min_degrees < pitch_degrees <= self.max_degrees


class SegmentPitch(BaseModel):
    """Pitch classification of a single roof segment."""

    model_config = ConfigDict(frozen=True)

    pitch_degrees: float
    pitch_ratio: str
    pitch_type: PitchType
    standard_ratio: str
    description: str
    azimuth_degrees: float | None = None
    direction: str
    area_sq_ft: int


class PitchBreakdown(BaseModel):
    """Per-segment pitch rows and the roof's dominant slope class."""

    model_config = ConfigDict(frozen=True)

    segments: list[SegmentPitch]
    predominant_pitch_type: PitchType
    pitch_categories: list[PitchCategory]


class RoofEstimate(BaseModel):
    """Complete result of estimating a roof."""

    model_config = ConfigDict(frozen=True)

    total_area_sq_ft: float
    roof_squares: float
    price_per_square: float
    estimate: int
    predominant_pitch_type: PitchType
    outline: list[GeoPoint]
    outline_perimeter_m: float
    segments: list[SegmentPitch]
