"""Building-insights reader: extracts roof segments from a provider response.

The response is the JSON document returned by the Google Solar API
``buildingInsights:findClosest`` endpoint. Only the roof geometry is read::

    {
      "center": {"latitude": ..., "longitude": ...},
      "solarPotential": {
        "wholeRoofStats": {"groundAreaMeters2": ...},
        "roofSegmentStats": [
          {
            "pitchDegrees": ..., "azimuthDegrees": ...,
            "stats": {"areaMeters2": ...},
            "boundingBox": {"sw": {...}, "ne": {...}}
          }
        ]
      }
    }
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, BinaryIO

from pydantic import ValidationError

from .errors import InvalidInputError
from .models import BuildingInsights, GeoPoint, RoofSegmentStat

logger = logging.getLogger(__name__)


def read_building_insights(source: dict | str | Path | bytes | BinaryIO) -> BuildingInsights:
    """Read a building-insights response and return the roof data it holds.

    Args:
        source: An already-decoded response dict, a path to a JSON file, raw
            JSON bytes, or a file-like object containing JSON bytes.

    Raises:
        InvalidInputError: if the document is not JSON, has no
            ``solarPotential``, or carries fields of the wrong type or range.
    """
    data = source if isinstance(source, dict) else _load_json(source)
    if not isinstance(data, dict):
        raise InvalidInputError("Building insights response must be a JSON object")

    potential = data.get("solarPotential")
    if not isinstance(potential, dict):
        raise InvalidInputError("Building insights response has no roof data", field="solarPotential")

    raw_segments = potential.get("roofSegmentStats")
    if raw_segments is None:
        raw_segments = []
    if not isinstance(raw_segments, list):
        raise InvalidInputError("roofSegmentStats must be a list", field="solarPotential.roofSegmentStats")

    segments = [_parse_segment(raw, i) for i, raw in enumerate(raw_segments)]

    whole_roof = potential.get("wholeRoofStats")
    if whole_roof is None:
        whole_roof = {}
    if not isinstance(whole_roof, dict):
        raise InvalidInputError("wholeRoofStats must be an object", field="solarPotential.wholeRoofStats")
    whole_roof_area = whole_roof.get("groundAreaMeters2")

    center = data.get("center")
    try:
        insights = BuildingInsights(
            segments=segments,
            whole_roof_ground_area_sq_meters=whole_roof_area,
            center=_parse_point(center, "center") if center is not None else None,
        )
    except ValidationError as e:
        raise InvalidInputError.from_validation_error(e) from e

    logger.debug("Read %d roof segments", len(segments))
    return insights


def _load_json(source: str | Path | bytes | BinaryIO) -> Any:
    raw = _read_bytes(source)
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidInputError(f"Building insights response is not valid JSON: {e}") from e


def _read_bytes(source: str | Path | bytes | BinaryIO) -> bytes:
    if isinstance(source, (str, Path)):
        return Path(source).read_bytes()
    if isinstance(source, bytes):
        return source
    return source.read()


def _parse_segment(raw: Any, index: int) -> RoofSegmentStat:
    prefix = f"roofSegmentStats[{index}]"
    if not isinstance(raw, dict):
        raise InvalidInputError(f"{prefix} must be an object", field=prefix)
    if raw.get("pitchDegrees") is None:
        raise InvalidInputError(f"{prefix} is missing pitchDegrees", field=f"{prefix}.pitchDegrees")

    stats = raw.get("stats")
    if stats is None:
        stats = {}
    if not isinstance(stats, dict):
        raise InvalidInputError(f"{prefix}.stats must be an object", field=f"{prefix}.stats")
    area = stats.get("areaMeters2")
    box = raw.get("boundingBox")

    try:
        return RoofSegmentStat(
            pitch_degrees=raw["pitchDegrees"],
            area_sq_meters=0.0 if area is None else area,
            azimuth_degrees=raw.get("azimuthDegrees"),
            bounding_box=_parse_box(box, f"{prefix}.boundingBox") if box is not None else None,
        )
    except ValidationError as e:
        raise InvalidInputError.from_validation_error(e, prefix) from e


def _parse_box(raw: Any, prefix: str) -> dict:
    if not isinstance(raw, dict):
        raise InvalidInputError(f"{prefix} must be an object", field=prefix)
    return {
        corner: _parse_point(raw[corner], f"{prefix}.{corner}")
        for corner in ("sw", "ne")
        if raw.get(corner) is not None
    }


def _parse_point(raw: Any, prefix: str) -> GeoPoint:
    """Convert a provider ``{latitude, longitude}`` object to a GeoPoint."""
    if not isinstance(raw, dict):
        raise InvalidInputError(f"{prefix} must be an object", field=prefix)
    try:
        return GeoPoint(lat=raw.get("latitude"), lng=raw.get("longitude"))
    except ValidationError as e:
        raise InvalidInputError.from_validation_error(e, prefix) from e
