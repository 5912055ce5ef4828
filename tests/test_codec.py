"""Tests for the GeoJSON dict/JSON codec."""

import json

import pytest

from meridian_geojson import (
    BoundingBox,
    Feature,
    FeatureCollection,
    GeoJsonError,
    GeometryCollection,
    MultiPolygon,
    Point,
    Polygon,
    from_json,
    geojson_from_dict,
    to_json,
    trim,
)


class TestDecode:
    """Tests for geojson_from_dict / from_json."""

    @pytest.mark.parametrize("data,expected_type", [
        ({'type': 'Point', 'coordinates': [1, 2]}, 'Point'),
        ({'type': 'MultiPoint', 'coordinates': [[1, 2], [3, 4]]}, 'MultiPoint'),
        ({'type': 'LineString', 'coordinates': [[1, 2], [3, 4]]}, 'LineString'),
        ({'type': 'MultiLineString', 'coordinates': [[[1, 2], [3, 4]]]}, 'MultiLineString'),
        ({'type': 'Polygon', 'coordinates': [[[0, 0], [1, 0], [1, 1], [0, 0]]]}, 'Polygon'),
        ({'type': 'MultiPolygon', 'coordinates': [[[[0, 0], [1, 0], [1, 1], [0, 0]]]]}, 'MultiPolygon'),
        ({'type': 'GeometryCollection', 'geometries': []}, 'GeometryCollection'),
        ({'type': 'Feature', 'geometry': None, 'properties': {}}, 'Feature'),
        ({'type': 'FeatureCollection', 'features': []}, 'FeatureCollection'),
    ])
    def test_dispatch_on_type(self, data, expected_type):
        assert geojson_from_dict(data).type == expected_type

    def test_unknown_type(self):
        with pytest.raises(GeoJsonError, match="Unknown GeoJSON type"):
            geojson_from_dict({'type': 'Circle', 'coordinates': [0, 0]})

    def test_invalid_json_text(self):
        with pytest.raises(GeoJsonError, match="Invalid JSON"):
            from_json('{"type": "Point",')

    def test_malformed_coordinates(self):
        with pytest.raises(GeoJsonError):
            geojson_from_dict({'type': 'LineString', 'coordinates': [1, 2]})

    def test_ring_error_surfaces_through_codec(self):
        with pytest.raises(GeoJsonError, match="LinearRings require first and last"):
            from_json('{"type": "Polygon", "coordinates": [[[0,0],[1,0],[1,1],[0,1]]]}')

    def test_bbox_member_decoded(self):
        point = from_json('{"type": "Point", "bbox": [1, 2, 1, 2], "coordinates": [1, 2]}')
        assert point.bbox == BoundingBox.from_lng_lats(1, 2, 1, 2)

    def test_nested_geometry_collection(self):
        text = json.dumps({
            'type': 'GeometryCollection',
            'geometries': [
                {'type': 'Point', 'coordinates': [0, 0]},
                {'type': 'GeometryCollection', 'geometries': [
                    {'type': 'LineString', 'coordinates': [[0, 0], [1, 1]]},
                ]},
            ],
        })
        collection = from_json(text)
        assert isinstance(collection.geometries[1], GeometryCollection)


class TestEncode:
    """Tests for to_json and coordinate trimming."""

    def test_trim(self):
        assert trim(1.123456789) == 1.1234568
        assert trim(-1.123456749) == -1.1234567
        assert trim(1e300) == 1e300

    def test_altitude_written_only_when_present(self):
        assert json.loads(to_json(Point.from_lng_lat(1, 2)))['coordinates'] == [1.0, 2.0]
        assert json.loads(to_json(Point.from_lng_lat(1, 2, 3)))['coordinates'] == [1.0, 2.0, 3.0]

    def test_feature_collection_round_trip(self, mixed_collection):
        assert from_json(to_json(mixed_collection)) == mixed_collection

    def test_multipolygon_round_trip(self, two_squares):
        assert from_json(to_json(two_squares)) == two_squares

    def test_rejects_non_geojson(self):
        with pytest.raises(GeoJsonError, match="Cannot serialize"):
            to_json({'type': 'Point'})

    def test_feature_json_shape(self, unit_square):
        data = json.loads(to_json(Feature(unit_square, {'k': 'v'}, id='a')))
        assert data['type'] == 'Feature'
        assert data['id'] == 'a'
        assert data['properties'] == {'k': 'v'}
        assert data['geometry']['type'] == 'Polygon'

    def test_decoded_values_are_model_types(self, unit_square):
        decoded = from_json(to_json(FeatureCollection.from_feature(Feature(unit_square))))
        assert isinstance(decoded.features[0].geometry, Polygon)
        assert not isinstance(decoded.features[0].geometry, MultiPolygon)
