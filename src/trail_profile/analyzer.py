import logging
from dataclasses import replace
from datetime import timedelta
from typing import Sequence

from trail_profile.distance import annotate_track
from trail_profile.errors import InsufficientRelief
from trail_profile.extrema import select_extrema
from trail_profile.filtering import filter_direction_changes, filter_steep_grades
from trail_profile.models import ElevationSummary, ProfileParams, ReliefPolicy, TrackPoint
from trail_profile.profile import extract_profile, rebuild_profile

logger = logging.getLogger(__name__)


def aggregate_gain_loss(points: list[TrackPoint]) -> tuple[float, float]:
    """Sum ascent and descent between consecutive extrema.

    Returns (gain, loss), both non-negative.
    """
    gain = 0.0
    loss = 0.0
    prev = None
    for pt in points:
        if not pt.is_extremum:
            continue
        if prev is not None:
            delta = pt.elevation - prev.elevation
            if delta > 0:
                gain += delta
            else:
                loss += abs(delta)
        prev = pt
    return gain, loss


def _filter_noise(points: list[TrackPoint], params: ProfileParams) -> tuple[list[TrackPoint], str | None]:
    """Run both noise filters, applying the relief policy if either runs dry.

    Returns the filtered points and the name of the stage that triggered the
    fallback (None when both filters succeeded).
    """
    try:
        filtered = filter_direction_changes(points)
        filtered = filter_steep_grades(filtered, params.grade_threshold)
    except InsufficientRelief as e:
        if params.relief_policy is ReliefPolicy.RAISE:
            raise
        logger.warning(
            "Insufficient relief after the %s filter (%d survivors); profiling the unfiltered track",
            e.stage, e.survivors,
        )
        return [replace(pt, survived=True) for pt in points], e.stage
    return filtered, None


def analyze_elevation(
    segments: Sequence[Sequence[TrackPoint]], params: ProfileParams | None = None
) -> ElevationSummary:
    """Summarize the length, ascent, descent and profile of a track.

    Pipeline:
    1. Annotate cumulative distance and raw elevation statistics
    2. Drop points that break the local slope direction
    3. Drop survivors reached by an implausibly steep grade
    4. Rebuild the survivors with distances from the previous survivor
    5. Mark the extrema that shape the profile
    6. Sum gain and loss between consecutive extrema

    Length and min/max/avg elevation always come from the raw track.

    Args:
        segments: Track segments in order; each is a list of waypoints.
        params: Filter thresholds and relief policy (defaults if None).

    Raises:
        EmptyOrTooShortTrack: No segments, no points, or fewer than 2 points.
        MissingElevationData: A waypoint has no elevation.
        InsufficientRelief: A filter ran dry and the policy is RAISE. The
            exception's ``track`` carries the raw statistics.
    """
    if params is None:
        params = ProfileParams()

    track = annotate_track(segments)
    try:
        filtered, fallback_stage = _filter_noise(track.points, params)
    except InsufficientRelief as e:
        raise InsufficientRelief(e.stage, e.survivors, track=track) from None

    rebuilt = rebuild_profile(filtered)
    marked = select_extrema(rebuilt, params.elevation_threshold, params.cumulative_axis)
    gain, loss = aggregate_gain_loss(marked)

    return ElevationSummary(
        length_m=track.length_m,
        gain_m=gain,
        loss_m=loss,
        min_elevation=track.min_elevation,
        max_elevation=track.max_elevation,
        avg_elevation=track.avg_elevation,
        profile=extract_profile(marked),
        relief_fallback_stage=fallback_stage,
    )


def analyze_points(points: Sequence[TrackPoint], params: ProfileParams | None = None) -> ElevationSummary:
    """Summarize a single-segment track."""
    return analyze_elevation([points], params)


def estimate_travel_time(length_m: float, avg_speed_kmh: float) -> timedelta:
    """Approximate time to cover length_m at a steady average speed.

    Raises:
        ValueError: If avg_speed_kmh is not positive.
    """
    if avg_speed_kmh <= 0:
        raise ValueError(f"Average speed must be positive, got {avg_speed_kmh}")
    return timedelta(seconds=length_m / (avg_speed_kmh / 3.6))
