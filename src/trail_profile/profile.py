"""Rebuilding the surviving points into a compact elevation profile."""

from trail_profile.distance import point_distance
from trail_profile.models import ProfilePoint, TrackPoint


def rebuild_profile(points: list[TrackPoint]) -> list[TrackPoint]:
    """Compact the surviving points into a new sequence.

    The first and last points are always kept. Each rebuilt point's distance
    is the haversine length from the preceding surviving point, so the first
    rebuilt point has distance 0.
    """
    last_idx = len(points) - 1
    rebuilt: list[TrackPoint] = []
    prev = None
    for i, pt in enumerate(points):
        if not (pt.survived or i == 0 or i == last_idx):
            continue
        rebuilt.append(
            TrackPoint(
                lat=pt.lat,
                lon=pt.lon,
                elevation=pt.elevation,
                distance=0.0 if prev is None else point_distance(prev, pt),
                survived=True,
            )
        )
        prev = pt
    return rebuilt


def extract_profile(points: list[TrackPoint]) -> tuple[ProfilePoint, ...]:
    """Return the extrema of a rebuilt profile as display points.

    Each profile point's distance is measured along the rebuilt profile from
    the previous extremum.
    """
    profile = []
    pending = 0.0
    for pt in points:
        pending += pt.distance
        if not pt.is_extremum:
            continue
        distance = 0.0 if not profile else pending
        profile.append(ProfilePoint(distance=distance, elevation=pt.elevation, lat=pt.lat, lon=pt.lon))
        pending = 0.0
    return tuple(profile)


def cumulative_distances(profile: tuple[ProfilePoint, ...] | list[ProfilePoint]) -> list[float]:
    """Running distance from the start of the profile for each point."""
    total = 0.0
    result = []
    for pt in profile:
        total += pt.distance
        result.append(total)
    return result
