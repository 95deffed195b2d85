"""Convex hull of lat/lng points using a Graham scan.

Coordinates are treated as planar, with lng as x and lat as y. The sort
comparator and its collinear tie-break fix the output order, so the same
corners always produce the same polygon.
"""

from __future__ import annotations

import logging
from functools import cmp_to_key
from typing import Sequence

from .models import GeoPoint

logger = logging.getLogger(__name__)

DUPLICATE_EPSILON = 1e-7


def cross(o: GeoPoint, a: GeoPoint, b: GeoPoint) -> float:
    """Z component of ``(a - o) x (b - o)`` with lng as x and lat as y.

    Positive when ``o -> a -> b`` turns counter-clockwise.
    """
    return (a.lng - o.lng) * (b.lat - o.lat) - (a.lat - o.lat) * (b.lng - o.lng)


def dedupe_points(points: Sequence[GeoPoint], epsilon: float = DUPLICATE_EPSILON) -> list[GeoPoint]:
    """Drop points within ``epsilon`` of an earlier point on both axes."""
    unique: list[GeoPoint] = []
    for p in points:
        if not any(abs(u.lat - p.lat) < epsilon and abs(u.lng - p.lng) < epsilon for u in unique):
            unique.append(p)
    return unique


def compute_convex_hull(points: Sequence[GeoPoint]) -> list[GeoPoint]:
    """Return the hull vertices in counter-clockwise order starting at the lowest point.

    Three or fewer points are returned unchanged; so is a set that
    deduplicates down to three or fewer. Collinear points on the boundary
    are dropped.
    """
    if len(points) <= 3:
        return list(points)

    unique = dedupe_points(points)
    if len(unique) <= 3:
        return unique

    pivot = unique[0]
    for p in unique:
        if p.lat < pivot.lat or (p.lat == pivot.lat and p.lng < pivot.lng):
            pivot = p

    def _squared_distance(p: GeoPoint) -> float:
        return (p.lat - pivot.lat) ** 2 + (p.lng - pivot.lng) ** 2

    def _compare(a: GeoPoint, b: GeoPoint) -> float:
        order = cross(pivot, a, b)
        if order == 0:
            return _squared_distance(a) - _squared_distance(b)
        return -order

    hull: list[GeoPoint] = []
    for p in sorted(unique, key=cmp_to_key(_compare)):
        while len(hull) >= 2 and cross(hull[-2], hull[-1], p) <= 0:
            hull.pop()
        hull.append(p)

    logger.debug("Convex hull: %d points, %d unique, %d vertices", len(points), len(unique), len(hull))
    return hull
