"""Tests for encoded polylines and path simplification."""

import pytest

from meridian_geojson import GeoJsonError, Point, Position
from meridian_geojson.polyline import OSRM_PRECISION, decode, encode, simplify

GOOGLE_PATH = [(-120.2, 38.5), (-120.95, 40.7), (-126.453, 43.252)]
GOOGLE_ENCODED = '_p~iF~ps|U_ulLnnqC_mqNvxq`@'


class TestEncode:
    """Tests for polyline encoding."""

    def test_reference_path(self):
        assert encode(GOOGLE_PATH) == GOOGLE_ENCODED

    def test_accepts_points(self):
        points = [Point.from_lng_lat(lng, lat) for lng, lat in GOOGLE_PATH]
        assert encode(points) == GOOGLE_ENCODED

    def test_empty_path(self):
        assert encode([]) == ''

    def test_precision_changes_output(self):
        assert encode(GOOGLE_PATH, OSRM_PRECISION) != GOOGLE_ENCODED


class TestDecode:
    """Tests for polyline decoding."""

    def test_reference_path(self):
        assert decode(GOOGLE_ENCODED) == [Position(lng, lat) for lng, lat in GOOGLE_PATH]

    def test_precision_round_trip(self):
        path = [(13.388860, 52.517037), (13.397634, 52.529407)]
        decoded = decode(encode(path, OSRM_PRECISION), OSRM_PRECISION)
        for position, (lng, lat) in zip(decoded, path):
            assert position.longitude == pytest.approx(lng, abs=1e-6)
            assert position.latitude == pytest.approx(lat, abs=1e-6)

    def test_empty_string(self):
        assert decode('') == []

    def test_truncated_input(self):
        with pytest.raises(GeoJsonError, match="Truncated polyline"):
            decode('_p~iF~ps|U_')


class TestSimplify:
    """Tests for radial-distance plus Douglas-Peucker simplification."""

    def test_short_paths_returned_unchanged(self):
        assert simplify([(0, 0), (1, 1)]) == [Position(0, 0), Position(1, 1)]

    def test_collinear_noise_removed(self):
        path = [(0, 0), (1, 0.1), (2, -0.1), (3, 0)]
        assert simplify(path, 0.5, highest_quality=True) == [Position(0, 0), Position(3, 0)]

    def test_significant_vertex_kept(self):
        path = [(0, 0), (1, 5), (2, 0)]
        assert simplify(path, 1.0, highest_quality=True) == [
            Position(0, 0), Position(1, 5), Position(2, 0),
        ]

    def test_radial_pass_drops_close_vertices(self):
        path = [(0, 0), (1, 0), (2, 0), (50, 0)]
        assert simplify(path, 10.0) == [Position(0, 0), Position(50, 0)]
