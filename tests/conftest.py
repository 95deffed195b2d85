import json
from pathlib import Path

import pytest

from roof_estimate import BoundingBox, GeoPoint, RoofSegmentStat

SAMPLEDATA = Path(__file__).parent.parent / "sampledata"


@pytest.fixture
def insights_path():
    return SAMPLEDATA / "building_insights.json"


@pytest.fixture
def insights_data(insights_path):
    return json.loads(insights_path.read_text())


@pytest.fixture
def single_segment():
    """A 50 m² south-facing facet on a 0.0001° square footprint."""
    return RoofSegmentStat(
        area_sq_meters=50,
        pitch_degrees=25,
        azimuth_degrees=180,
        bounding_box=BoundingBox(
            sw=GeoPoint(lat=0, lng=0),
            ne=GeoPoint(lat=0.0001, lng=0.0001),
        ),
    )
