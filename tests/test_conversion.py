"""Tests for geometry conversion."""

import pytest

from meridian_geojson import (
    Feature,
    FeatureCollection,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
)
from meridian_turf import TurfError, combine, explode, multi_polygon_to_line, polygon_to_line


class TestExplode:
    """Tests for explode."""

    def test_polygon_without_closing_vertex(self, unit_square):
        result = explode(Feature(unit_square))
        assert len(result) == 4
        assert all(isinstance(f.geometry, Point) for f in result)

    def test_feature_collection(self, mixed_collection):
        assert len(explode(mixed_collection)) == 1 + 2 + 4

    def test_rejects_bare_geometry(self, unit_square):
        with pytest.raises(TurfError, match="Feature or FeatureCollection"):
            explode(unit_square)


class TestPolygonToLine:
    """Tests for polygon_to_line and multi_polygon_to_line."""

    def test_single_ring_becomes_line_string(self, unit_square):
        result = polygon_to_line(Feature(unit_square, {'name': 'square'}))
        assert isinstance(result.geometry, LineString)
        assert result.geometry.coordinates == unit_square.coordinates[0]
        assert result.get_string_property('name') == 'square'

    def test_holes_become_line_parts(self, square_with_hole):
        result = polygon_to_line(square_with_hole)
        assert isinstance(result.geometry, MultiLineString)
        assert result.geometry.coordinates == square_with_hole.coordinates

    def test_explicit_properties_win(self, unit_square):
        result = polygon_to_line(Feature(unit_square, {'name': 'square'}), {'kind': 'outline'})
        assert dict(result.properties) == {'kind': 'outline'}

    def test_multi_polygon_geometry(self, two_squares):
        result = polygon_to_line(two_squares)
        assert isinstance(result, FeatureCollection)
        assert isinstance(result.features[0].geometry, LineString)
        assert isinstance(result.features[1].geometry, MultiLineString)

    def test_rejects_non_polygon_feature(self):
        with pytest.raises(TurfError, match="must be Polygon"):
            polygon_to_line(Feature(Point.from_lng_lat(0, 0)))

    def test_multi_polygon_feature(self, two_squares):
        result = multi_polygon_to_line(Feature(two_squares, {'layer': 'parcels'}))
        assert len(result) == 2
        assert all(f.get_string_property('layer') == 'parcels' for f in result)

    def test_multi_polygon_feature_required(self, unit_square):
        with pytest.raises(TurfError, match="must be MultiPolygon"):
            multi_polygon_to_line(Feature(unit_square))


class TestCombine:
    """Tests for combine."""

    def test_buckets_in_fixed_order(self, mixed_collection):
        result = combine(mixed_collection)
        kinds = [type(f.geometry) for f in result]
        assert kinds == [MultiPoint, MultiLineString, MultiPolygon]

    def test_multi_geometries_are_flattened(self, two_squares):
        collection = FeatureCollection.from_features([
            Feature(MultiPoint.from_lng_lats([(0, 0), (1, 1)])),
            Feature(Point.from_lng_lat(2, 2)),
            Feature(two_squares),
        ])
        result = combine(collection)
        assert len(result.features[0].geometry.coordinates) == 3
        assert len(result.features[1].geometry.coordinates) == 2

    def test_nothing_to_merge_returns_input(self):
        collection = FeatureCollection.from_features([
            Feature(),
            Feature(GeometryCollection(())),
        ])
        assert combine(collection) is collection

    def test_empty_collection_rejected(self):
        with pytest.raises(TurfError, match="doesn't have any Feature"):
            combine(FeatureCollection())

    def test_null_collection_rejected(self):
        with pytest.raises(TurfError, match="is null"):
            combine(None)
