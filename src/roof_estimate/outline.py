"""Roof outline extraction from segment bounding boxes."""

from typing import Sequence

from .geo import haversine_distance_m
from .hull import compute_convex_hull
from .models import GeoPoint, RoofSegmentStat


def extract_roof_outline(segments: Sequence[RoofSegmentStat]) -> list[GeoPoint]:
    """Collect bounding-box corners of every segment and return their convex hull."""
    if not segments:
        return []

    corners: list[GeoPoint] = []
    for segment in segments:
        box = segment.bounding_box
        if box is None:
            continue

        sw, ne = box.sw, box.ne
        if sw is not None:
            corners.append(sw)
        if sw is not None and ne is not None:
            corners.append(GeoPoint(lat=sw.lat, lng=ne.lng))
        if ne is not None:
            corners.append(ne)
        if ne is not None and sw is not None:
            corners.append(GeoPoint(lat=ne.lat, lng=sw.lng))

    return compute_convex_hull(corners)


def outline_perimeter_m(outline: Sequence[GeoPoint]) -> float:
    """Length of the closed outline ring in meters."""
    if len(outline) < 2:
        return 0.0

    perimeter = 0.0
    for i in range(len(outline)):
        p1, p2 = outline[i - 1], outline[i]
        perimeter += haversine_distance_m(p1, p2)
    return perimeter
