"""Noise filters that decide which track points survive into the profile.

Both filters walk the track strictly left to right, carrying a single cursor
at the most recent survivor. The cursor choice determines which later points
survive, so the traversal order must not change.
"""

import logging
import math
from dataclasses import replace

from trail_profile.distance import point_distance
from trail_profile.errors import InsufficientRelief
from trail_profile.models import TrackPoint

logger = logging.getLogger(__name__)

DEFAULT_GRADE_THRESHOLD = 70.0  # percent


def filter_direction_changes(points: list[TrackPoint]) -> list[TrackPoint]:
    """Stage 1: keep interior points that lie on a consistent slope.

    Point i survives when the elevation change from the last survivor to i
    and the change from i to i+1 have the same sign. Single-sample zigzags
    and turning points are dropped. The first and last points always
    survive; the survivor count covers interior survivors plus the last
    point.

    Returns new TrackPoint instances with the survived flag set.

    Raises:
        InsufficientRelief: Fewer than 2 survivors were counted.
    """
    last = 0
    survivors = 0
    result = [replace(pt, survived=False) for pt in points]

    for i in range(1, len(points) - 1):
        rise_in = points[i].elevation - points[last].elevation
        rise_out = points[i + 1].elevation - points[i].elevation
        if rise_in * rise_out > 0:
            result[i].survived = True
            last = i
            survivors += 1

    result[0].survived = True
    result[-1].survived = True
    survivors += 1

    logger.debug("Direction filter kept %d of %d points", survivors, len(points))
    if survivors < 2:
        raise InsufficientRelief("direction", survivors)
    return result


def calculate_grade(a: TrackPoint, b: TrackPoint) -> float:
    """Grade in percent from a to b over their haversine distance.

    Coincident points give an infinite grade when the elevations differ
    and 0 when they match.
    """
    rise = b.elevation - a.elevation
    run = point_distance(a, b)
    if run == 0:
        if rise == 0:
            return 0.0
        return math.copysign(math.inf, rise)
    return rise * 100 / run


def filter_steep_grades(
    points: list[TrackPoint], grade_threshold: float = DEFAULT_GRADE_THRESHOLD
) -> list[TrackPoint]:
    """Stage 2: demote survivors reached by an implausibly steep grade.

    Re-walks the interior survivors of stage 1. A survivor whose grade from
    the last kept point exceeds grade_threshold (in either direction) is
    GPS or barometric jitter: a tiny horizontal step amplifies the grade.
    Only interior points that are kept count as survivors.

    Returns new TrackPoint instances with the survived flag updated.

    Raises:
        InsufficientRelief: Fewer than 2 interior survivors remain.
    """
    last = 0
    survivors = 0
    result = [replace(pt) for pt in points]

    for i in range(1, len(points) - 1):
        if not points[i].survived:
            continue
        grade = calculate_grade(points[last], points[i])
        if abs(grade) > grade_threshold:
            result[i].survived = False
            continue
        last = i
        survivors += 1

    logger.debug("Slope filter kept %d interior points (threshold %.1f%%)", survivors, grade_threshold)
    if survivors < 2:
        raise InsufficientRelief("slope", survivors)
    return result
