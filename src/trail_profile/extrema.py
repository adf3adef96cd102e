"""Extremum selection over the (distance, elevation) profile curve.

This is the Douglas-Peucker split rule applied to the elevation profile
rather than the map path: a span is split at the interior point farthest
from its chord, as long as that point deviates by more than the threshold.
Spans are kept on an explicit stack, so long tracks never hit the recursion
limit. Both halves of every split are always processed, so the visiting
order does not affect which points are marked.
"""

import logging
from dataclasses import replace

from trail_profile.distance import projection_distance
from trail_profile.models import TrackPoint

logger = logging.getLogger(__name__)

DEFAULT_ELEVATION_THRESHOLD = 7.0  # meters


def _horizontal_axis(points: list[TrackPoint], cumulative: bool) -> list[float]:
    if not cumulative:
        return [pt.distance for pt in points]
    axis = []
    total = 0.0
    for pt in points:
        total += pt.distance
        axis.append(total)
    return axis


def select_extrema(
    points: list[TrackPoint],
    elevation_threshold: float = DEFAULT_ELEVATION_THRESHOLD,
    cumulative_axis: bool = True,
) -> list[TrackPoint]:
    """Mark the points that shape the elevation profile.

    Args:
        points: Rebuilt profile; each distance is measured from the previous point.
        elevation_threshold: Deviation from a chord (in the elevation's units)
            a point must exceed to be marked.
        cumulative_axis: Use the running sum of distances as the horizontal
            axis. When False the per-point distances are used as-is.

    Returns:
        New TrackPoint instances with is_extremum set. The first and last
        points are always extrema.
    """
    n = len(points)
    if n == 0:
        return []

    xs = _horizontal_axis(points, cumulative_axis)
    ys = [pt.elevation for pt in points]
    marked = [False] * n
    marked[0] = marked[-1] = True

    spans = [(0, n - 1)]
    while spans:
        start, end = spans.pop()
        best = start
        best_deviation = elevation_threshold
        for i in range(start + 1, end):
            deviation = projection_distance(xs[i], ys[i], xs[start], ys[start], xs[end], ys[end])
            if deviation > best_deviation:
                best = i
                best_deviation = deviation
        if best != start:
            marked[best] = True
            spans.append((best, end))
            spans.append((start, best))

    logger.debug("Selected %d extrema from %d profile points", sum(marked), n)
    return [replace(pt, is_extremum=flag) for pt, flag in zip(points, marked)]
