"""Error types raised while summarizing an elevation track."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from trail_profile.models import AnnotatedTrack


class TrailProfileError(ValueError):
    """Base error for tracks that cannot be summarized."""


class MissingElevationData(TrailProfileError):
    """Raised when a waypoint has no elevation value."""

    def __init__(self, segment_index: int, point_index: int):
        self.segment_index = segment_index
        self.point_index = point_index
        super().__init__(
            f"Waypoint {point_index} of segment {segment_index} does not contain elevation data"
        )


class EmptyOrTooShortTrack(TrailProfileError):
    """Raised when a track has no segments, no points, or fewer than two points."""

    def __init__(self, point_count: int, reason: str | None = None):
        self.point_count = point_count
        if reason is None:
            reason = f"Track contains {point_count} point(s); at least 2 are required"
        super().__init__(reason)


class InsufficientRelief(TrailProfileError):
    """Raised when a noise filter leaves fewer than two survivors.

    ``stage`` is ``"direction"`` or ``"slope"``. When raised from the full
    pipeline, ``track`` holds the raw length and elevation statistics, which
    stay valid even though no profile could be built.
    """

    def __init__(self, stage: str, survivors: int, track: AnnotatedTrack | None = None):
        self.stage = stage
        self.survivors = survivors
        self.track = track
        super().__init__(
            f"The {stage} filter kept {survivors} point(s); at least 2 are required"
        )


__all__ = [
    "TrailProfileError",
    "MissingElevationData",
    "EmptyOrTooShortTrack",
    "InsufficientRelief",
]
