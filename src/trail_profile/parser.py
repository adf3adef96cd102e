import gpxpy

from trail_profile.errors import EmptyOrTooShortTrack
from trail_profile.models import TrackPoint


def parse_gpx_segments(filepath: str) -> list[list[TrackPoint]]:
    """Parse the first track of a GPX file into one list of TrackPoints per segment.

    Missing elevations are kept as None; the analyzer reports them.

    Raises:
        EmptyOrTooShortTrack: If the file contains no tracks.
    """
    with open(filepath, "r") as f:
        gpx = gpxpy.parse(f)

    if not gpx.tracks:
        raise EmptyOrTooShortTrack(0, "GPX file contains no tracks")

    segments: list[list[TrackPoint]] = []
    for segment in gpx.tracks[0].segments:
        segments.append(
            [TrackPoint(lat=pt.latitude, lon=pt.longitude, elevation=pt.elevation) for pt in segment.points]
        )
    return segments


def parse_gpx(filepath: str) -> list[TrackPoint]:
    """Parse a GPX file and return the first track's points as one list."""
    return [pt for segment in parse_gpx_segments(filepath) for pt in segment]
