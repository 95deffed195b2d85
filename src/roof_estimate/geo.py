"""Great-circle distance and compass direction helpers."""

import math

from .models import GeoPoint
from .rounding import round_half_up

EARTH_RADIUS_M = 6_371_000.0

# The trailing "N" aliases index 8 back to north.
COMPASS_DIRECTIONS = ("N", "NE", "E", "SE", "S", "SW", "W", "NW", "N")


def _to_radians(degrees: float) -> float:
    return degrees * math.pi / 180


def haversine_distance_m(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance between two points in meters."""
    lat1 = _to_radians(a.lat)
    lat2 = _to_radians(b.lat)
    d_lat = _to_radians(b.lat - a.lat)
    d_lng = _to_radians(b.lng - a.lng)

    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(d_lng / 2) ** 2
    )
    h = min(h, 1.0)
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return EARTH_RADIUS_M * c


def direction_from_azimuth(azimuth_degrees: float) -> str:
    """Map an azimuth (0 = north, clockwise) to the nearest 8-point compass label.

    Azimuths outside ``[0, 360)`` are normalized first, so ``-90`` is ``W``
    and ``405`` is ``NE``.
    """
    normalized = azimuth_degrees % 360
    index = int(round_half_up(normalized / 45)) % 8
    return COMPASS_DIRECTIONS[index]
