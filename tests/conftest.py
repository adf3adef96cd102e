import math
import os

import pytest

from trail_profile.models import TrackPoint

# Roughly meters per degree of latitude
METERS_PER_DEG = 111_000


def make_track_points(elevations: list[float], spacing_m: float = 100.0) -> list[TrackPoint]:
    """Create track points with given elevations along a straight north-south line."""
    base_lat, base_lon = 40.0, -111.7
    lat_delta = spacing_m / METERS_PER_DEG
    return [
        TrackPoint(lat=base_lat + i * lat_delta, lon=base_lon, elevation=elev)
        for i, elev in enumerate(elevations)
    ]


def write_gpx(path, segments: list[list[tuple[float, float, float | None]]]) -> str:
    """Write a single-track GPX file with the given (lat, lon, ele) segments."""
    parts = [
        '<?xml version="1.0"?>',
        '<gpx version="1.1" creator="tests" xmlns="http://www.topografix.com/GPX/1/1">',
        "<trk><name>Test trail</name>",
    ]
    for segment in segments:
        parts.append("<trkseg>")
        for lat, lon, ele in segment:
            if ele is None:
                parts.append(f'<trkpt lat="{lat}" lon="{lon}"></trkpt>')
            else:
                parts.append(f'<trkpt lat="{lat}" lon="{lon}"><ele>{ele}</ele></trkpt>')
        parts.append("</trkseg>")
    parts.append("</trk></gpx>")
    with open(path, "w") as f:
        f.write("\n".join(parts))
    return os.fspath(path)


@pytest.fixture
def valley_points():
    """Coarse V-shaped valley: 100 m deep, 1 km between samples."""
    return make_track_points([100.0, 50.0, 0.0, 50.0, 100.0], spacing_m=1000.0)


@pytest.fixture
def hilly_points():
    """Two rolling hills with small deterministic sensor noise, 25 m spacing."""
    elevations = [
        500.0 + 80.0 * math.sin(i / 12.0) + 1.5 * ((i * 7) % 3 - 1)
        for i in range(150)
    ]
    return make_track_points(elevations, spacing_m=25.0)


@pytest.fixture
def track_points():
    """Factory for track points along a straight north-south line."""
    return make_track_points


@pytest.fixture
def gpx_file(tmp_path):
    """Factory writing a single-track GPX file into tmp_path."""
    def _write(name: str, segments: list[list[tuple[float, float, float | None]]]) -> str:
        return write_gpx(tmp_path / name, segments)
    return _write


@pytest.fixture
def trail_gpx(tmp_path):
    """GPX file for a climb-and-descent trail split over two segments."""
    lat_delta = 200.0 / METERS_PER_DEG
    elevations = [1500.0 + 20.0 * i for i in range(11)] + [1700.0 - 25.0 * i for i in range(1, 9)]
    coords = [(40.0 + i * lat_delta, -111.7, e) for i, e in enumerate(elevations)]
    return write_gpx(tmp_path / "trail.gpx", [coords[:10], coords[10:]])
