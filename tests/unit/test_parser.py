import pytest

from trail_profile.errors import EmptyOrTooShortTrack
from trail_profile.parser import parse_gpx, parse_gpx_segments


def _write(tmp_path, content: str) -> str:
    path = tmp_path / "track.gpx"
    path.write_text(content)
    return str(path)


TWO_SEGMENTS = """<?xml version="1.0"?>
<gpx version="1.1" xmlns="http://www.topografix.com/GPX/1/1">
  <trk>
    <trkseg>
      <trkpt lat="40.0" lon="-111.7"><ele>1500</ele></trkpt>
      <trkpt lat="40.001" lon="-111.7"><ele>1510.5</ele></trkpt>
    </trkseg>
    <trkseg>
      <trkpt lat="40.002" lon="-111.7"><ele>1520</ele></trkpt>
    </trkseg>
  </trk>
  <trk>
    <trkseg>
      <trkpt lat="41.0" lon="-112.0"><ele>10</ele></trkpt>
    </trkseg>
  </trk>
</gpx>"""


class TestParseGpx:
    def test_segments_of_first_track(self, tmp_path):
        segments = parse_gpx_segments(_write(tmp_path, TWO_SEGMENTS))
        assert [len(s) for s in segments] == [2, 1]
        assert segments[0][1].lat == pytest.approx(40.001)
        assert segments[0][1].elevation == pytest.approx(1510.5)

    def test_flattened(self, tmp_path):
        points = parse_gpx(_write(tmp_path, TWO_SEGMENTS))
        assert [p.elevation for p in points] == pytest.approx([1500.0, 1510.5, 1520.0])

    def test_missing_elevation_kept_as_none(self, tmp_path):
        content = """<?xml version="1.0"?>
        <gpx version="1.1" xmlns="http://www.topografix.com/GPX/1/1">
          <trk><trkseg>
            <trkpt lat="37.0" lon="-122.0"></trkpt>
          </trkseg></trk>
        </gpx>"""
        points = parse_gpx(_write(tmp_path, content))
        assert len(points) == 1
        assert points[0].elevation is None

    def test_no_tracks(self, tmp_path):
        content = """<?xml version="1.0"?>
        <gpx version="1.1" xmlns="http://www.topografix.com/GPX/1/1">
          <wpt lat="37.0" lon="-122.0"><ele>10</ele></wpt>
        </gpx>"""
        with pytest.raises(EmptyOrTooShortTrack):
            parse_gpx_segments(_write(tmp_path, content))

    def test_nonexistent_file(self):
        with pytest.raises(FileNotFoundError):
            parse_gpx("/nonexistent/file.gpx")
