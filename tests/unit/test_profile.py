import pytest

from trail_profile.distance import point_distance
from trail_profile.models import ProfilePoint, TrackPoint
from trail_profile.profile import cumulative_distances, extract_profile, rebuild_profile


def _make_points(elevations, survived, spacing_deg=0.001):
    return [
        TrackPoint(lat=40.0 + i * spacing_deg, lon=-111.7, elevation=e, distance=i * 111.0, survived=s)
        for i, (e, s) in enumerate(zip(elevations, survived))
    ]


class TestRebuildProfile:
    def test_keeps_only_survivors_and_endpoints(self):
        points = _make_points([100.0, 110.0, 105.0, 120.0, 130.0], [False, True, False, True, False])
        rebuilt = rebuild_profile(points)
        assert [p.elevation for p in rebuilt] == [100.0, 110.0, 120.0, 130.0]
        assert all(p.survived for p in rebuilt)

    def test_distances_are_segment_relative(self):
        points = _make_points([100.0, 110.0, 105.0, 120.0], [True, True, False, True])
        rebuilt = rebuild_profile(points)

        assert rebuilt[0].distance == 0.0
        assert rebuilt[1].distance == pytest.approx(point_distance(points[0], points[1]))
        # Skipped point 2: distance is measured straight from point 1 to point 3
        assert rebuilt[2].distance == pytest.approx(point_distance(points[1], points[3]))

    def test_two_point_track(self):
        points = _make_points([100.0, 200.0], [False, False])
        rebuilt = rebuild_profile(points)
        assert len(rebuilt) == 2
        assert rebuilt[1].distance == pytest.approx(point_distance(points[0], points[1]))

    def test_extremum_flags_reset(self):
        points = _make_points([100.0, 110.0, 120.0], [True, True, True])
        points[1].is_extremum = True
        assert not any(p.is_extremum for p in rebuild_profile(points))


class TestExtractProfile:
    def test_distances_accumulate_between_extrema(self):
        points = [
            TrackPoint(lat=40.0, lon=-111.7, elevation=100.0, distance=0.0, is_extremum=True),
            TrackPoint(lat=40.1, lon=-111.7, elevation=150.0, distance=300.0),
            TrackPoint(lat=40.2, lon=-111.7, elevation=200.0, distance=200.0, is_extremum=True),
            TrackPoint(lat=40.3, lon=-111.7, elevation=120.0, distance=400.0, is_extremum=True),
        ]
        profile = extract_profile(points)

        assert profile == (
            ProfilePoint(distance=0.0, elevation=100.0, lat=40.0, lon=-111.7),
            ProfilePoint(distance=500.0, elevation=200.0, lat=40.2, lon=-111.7),
            ProfilePoint(distance=400.0, elevation=120.0, lat=40.3, lon=-111.7),
        )

    def test_cumulative_distances(self):
        profile = [
            ProfilePoint(distance=0.0, elevation=100.0, lat=40.0, lon=-111.7),
            ProfilePoint(distance=500.0, elevation=200.0, lat=40.2, lon=-111.7),
            ProfilePoint(distance=400.0, elevation=120.0, lat=40.3, lon=-111.7),
        ]
        assert cumulative_distances(profile) == [0.0, 500.0, 900.0]
