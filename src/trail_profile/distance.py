"""Distance and geometry calculations.

Haversine on a spherical Earth is accurate enough for trail lengths
(< 0.5% error at typical distances).
"""

from __future__ import annotations
import math
from typing import Sequence

from trail_profile.errors import EmptyOrTooShortTrack, MissingElevationData
from trail_profile.models import AnnotatedTrack, TrackPoint

# Earth's mean radius in meters
EARTH_RADIUS_M = 6_371_000


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Calculate distance between two points using Haversine formula.

    Args:
        lat1, lon1: First point coordinates in degrees
        lat2, lon2: Second point coordinates in degrees

    Returns:
        Distance in meters
    """
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)

    a = math.sin(dlat / 2) ** 2 + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(dlon / 2) ** 2
    c = 2 * math.asin(math.sqrt(a))

    return EARTH_RADIUS_M * c


def point_distance(a: TrackPoint, b: TrackPoint) -> float:
    """Haversine distance between two track points in meters."""
    return haversine_distance(a.lat, a.lon, b.lat, b.lon)


def projection_distance(
    x: float, y: float,
    from_x: float, from_y: float,
    to_x: float, to_y: float,
) -> float:
    """Distance from (x, y) to the segment between (from_x, from_y) and (to_x, to_y).

    The projection onto the segment is clamped to its endpoints, so points
    beyond either end are measured to the nearer endpoint. A zero-length
    segment measures to its end point.
    """
    seg_sq = (to_x - from_x) ** 2 + (to_y - from_y) ** 2
    projection = (to_x - from_x) * (x - from_x) + (to_y - from_y) * (y - from_y)

    if projection < 0:
        px, py = from_x, from_y
    elif projection >= seg_sq:
        px, py = to_x, to_y
    else:
        t = projection / seg_sq
        px = from_x + (to_x - from_x) * t
        py = from_y + (to_y - from_y) * t

    return math.hypot(px - x, py - y)


def annotate_track(segments: Sequence[Sequence[TrackPoint]]) -> AnnotatedTrack:
    """Flatten track segments and annotate cumulative distance.

    Segments are concatenated in order; a segment boundary does not reset or
    interrupt the distance. Min, max and mean elevation are taken over every
    raw point. Returns new TrackPoint instances; the input is left untouched.

    Raises:
        EmptyOrTooShortTrack: No segments, no points, or fewer than 2 points.
        MissingElevationData: A waypoint has no elevation.
    """
    if not segments:
        raise EmptyOrTooShortTrack(0, "Track has no segments")

    point_count = sum(len(segment) for segment in segments)
    if point_count == 0:
        raise EmptyOrTooShortTrack(0, "Track segments contain no points")
    if point_count < 2:
        raise EmptyOrTooShortTrack(point_count)

    points: list[TrackPoint] = []
    total = 0.0
    elevation_sum = 0.0
    min_elevation = math.inf
    max_elevation = -math.inf
    prev = None

    for seg_idx, segment in enumerate(segments):
        for pt_idx, pt in enumerate(segment):
            if pt.elevation is None:
                raise MissingElevationData(seg_idx, pt_idx)
            if prev is not None:
                total += point_distance(prev, pt)
            points.append(TrackPoint(lat=pt.lat, lon=pt.lon, elevation=pt.elevation, distance=total))

            elevation_sum += pt.elevation
            min_elevation = min(min_elevation, pt.elevation)
            max_elevation = max(max_elevation, pt.elevation)
            prev = pt

    return AnnotatedTrack(
        points=points,
        length_m=total,
        min_elevation=min_elevation,
        max_elevation=max_elevation,
        avg_elevation=elevation_sum / len(points),
    )
