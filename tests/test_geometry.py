"""Tests for the immutable geometry value model."""

import dataclasses
import math

import pytest

from meridian_geojson import (
    BoundingBox,
    GeoJsonError,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    Position,
    as_position,
)


class TestPosition:
    """Tests for Position."""

    def test_altitude_absent_by_default(self):
        position = Position(102.0, 0.5)
        assert math.isnan(position.altitude)
        assert position.has_altitude is False
        assert position.to_list() == [102.0, 0.5]

    def test_altitude_serialized_when_present(self):
        assert Position(1.0, 2.0, 3.0).to_list() == [1.0, 2.0, 3.0]

    def test_absent_altitudes_compare_equal(self):
        assert Position(1.0, 2.0) == Position(1.0, 2.0)
        assert hash(Position(1.0, 2.0)) == hash(Position(1.0, 2.0))

    def test_altitude_participates_in_equality(self):
        assert Position(1.0, 2.0) != Position(1.0, 2.0, 0.0)

    def test_no_range_clamping(self):
        position = Position(200.0, -95.0)
        assert position.longitude == 200.0
        assert position.latitude == -95.0

    def test_from_list_requires_two_values(self):
        with pytest.raises(GeoJsonError, match="at least longitude and latitude"):
            Position.from_list([1.0])

    def test_non_numeric_rejected(self):
        with pytest.raises(GeoJsonError, match="must be numbers"):
            Position("east", 1.0)

    def test_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Position(1.0, 2.0).longitude = 5.0

    def test_as_position_accepts_points_and_pairs(self):
        expected = Position(3.0, 4.0)
        assert as_position(Point.from_lng_lat(3.0, 4.0)) == expected
        assert as_position((3.0, 4.0)) == expected
        assert as_position([3.0, 4.0]) == expected
        assert as_position(expected) is expected

    def test_as_position_rejects_other_values(self):
        with pytest.raises(GeoJsonError):
            as_position("3,4")


class TestPoint:
    """Tests for Point."""

    def test_accessors(self):
        point = Point.from_lng_lat(1.5, -2.5, 10.0)
        assert point.longitude == 1.5
        assert point.latitude == -2.5
        assert point.altitude == 10.0
        assert point.has_altitude is True
        assert point.type == 'Point'

    def test_to_dict(self):
        assert Point.from_lng_lat(102.0, 0.5).to_dict() == {
            'type': 'Point', 'coordinates': [102.0, 0.5],
        }

    def test_to_dict_trims_to_seven_digits(self):
        data = Point.from_lng_lat(1.123456789, 2.0).to_dict()
        assert data['coordinates'] == [1.1234568, 2.0]

    def test_equality_by_value(self):
        assert Point.from_lng_lat(1, 2) == Point(Position(1, 2))


class TestLineString:
    """Tests for LineString."""

    def test_requires_two_positions(self):
        with pytest.raises(GeoJsonError, match="at least 2 positions"):
            LineString.from_lng_lats([(0, 0)])

    def test_coordinates_are_tuple(self):
        line = LineString.from_lng_lats([[0, 0], [1, 1]])
        assert isinstance(line.coordinates, tuple)
        assert line.coordinates[1] == Position(1, 1)

    def test_polyline_round_trip(self):
        line = LineString.from_lng_lats([(-120.2, 38.5), (-120.95, 40.7), (-126.453, 43.252)])
        encoded = line.to_polyline()
        assert encoded == "_p~iF~ps|U_ulLnnqC_mqNvxq`@"
        assert LineString.from_polyline(encoded) == line

    def test_from_dict(self):
        line = LineString.from_dict({'type': 'LineString', 'coordinates': [[0, 0], [1, 2]]})
        assert line.points() == [Point.from_lng_lat(0, 0), Point.from_lng_lat(1, 2)]

    def test_from_dict_missing_coordinates(self):
        with pytest.raises(GeoJsonError, match="Missing required LineString field"):
            LineString.from_dict({'type': 'LineString'})


class TestPolygon:
    """Tests for Polygon ring invariants."""

    def test_four_point_closed_ring_accepted(self):
        polygon = Polygon.from_lng_lats([[(0, 0), (1, 1), (0, 1), (0, 0)]])
        assert len(polygon.outer().coordinates) == 4

    def test_three_point_ring_rejected(self):
        with pytest.raises(GeoJsonError, match="LinearRings need to be made up of 4 or more coordinates."):
            Polygon.from_lng_lats([[(0, 0), (1, 1), (0, 0)]])

    def test_open_ring_rejected(self):
        with pytest.raises(GeoJsonError, match="LinearRings require first and last coordinate to be identical."):
            Polygon.from_lng_lats([[(0, 0), (1, 0), (1, 1), (0, 1)]])

    def test_hole_is_validated(self):
        with pytest.raises(GeoJsonError, match="4 or more"):
            Polygon.from_lng_lats([
                [(0, 0), (10, 0), (10, 10), (0, 0)],
                [(1, 1), (2, 2), (1, 1)],
            ])

    def test_zero_rings_rejected(self):
        with pytest.raises(GeoJsonError, match="at least one linear ring"):
            Polygon(())

    def test_outer_and_inner(self, square_with_hole):
        assert square_with_hole.outer().coordinates[1] == Position(10, 0)
        assert len(square_with_hole.inner()) == 1
        assert square_with_hole.inner()[0].coordinates[0] == Position(3, 3)

    def test_from_outer_inner(self, square_with_hole):
        rebuilt = Polygon.from_outer_inner(square_with_hole.outer(), *square_with_hole.inner())
        assert rebuilt == square_with_hole


class TestMultiGeometries:
    """Tests for the multi-part geometry kinds."""

    def test_multipoint_may_be_empty(self):
        assert MultiPoint().coordinates == ()

    def test_multilinestring_parts_need_two_positions(self):
        with pytest.raises(GeoJsonError):
            MultiLineString.from_lng_lats([[(0, 0), (1, 1)], [(2, 2)]])

    def test_multilinestring_from_line_strings(self):
        lines = [
            LineString.from_lng_lats([(0, 0), (1, 1)]),
            LineString.from_lng_lats([(2, 2), (3, 3)]),
        ]
        multi = MultiLineString.from_line_strings(lines)
        assert multi.line_strings() == lines

    def test_multipolygon_validates_each_ring(self):
        with pytest.raises(GeoJsonError, match="first and last"):
            MultiPolygon.from_lng_lats([[[(0, 0), (1, 0), (1, 1), (0, 2)]]])

    def test_multipolygon_polygons(self, two_squares):
        polygons = two_squares.polygons()
        assert len(polygons) == 2
        assert len(polygons[1].inner()) == 1
        assert MultiPolygon.from_polygons(polygons) == two_squares

    def test_geometry_collection_members_must_be_geometries(self):
        with pytest.raises(GeoJsonError, match="must be geometries"):
            GeometryCollection((Point.from_lng_lat(0, 0), (1, 2)))

    def test_geometry_collection_to_dict(self):
        collection = GeometryCollection((
            Point.from_lng_lat(0, 0),
            LineString.from_lng_lats([(0, 0), (1, 1)]),
        ))
        data = collection.to_dict()
        assert data['type'] == 'GeometryCollection'
        assert [g['type'] for g in data['geometries']] == ['Point', 'LineString']
        assert GeometryCollection.from_dict(data) == collection


class TestBoundingBox:
    """Tests for BoundingBox."""

    def test_edge_accessors(self):
        box = BoundingBox.from_lng_lats(-10.0, -5.0, 10.0, 5.0)
        assert (box.west, box.south, box.east, box.north) == (-10.0, -5.0, 10.0, 5.0)

    def test_antimeridian_box_representable(self):
        box = BoundingBox.from_lng_lats(170.0, -5.0, -170.0, 5.0)
        assert box.west > box.east

    def test_six_element_form_with_altitude(self):
        box = BoundingBox.from_list([0, 0, 1, 10, 10, 2])
        assert box.southwest.altitude == 1
        assert box.to_list() == [0.0, 0.0, 1.0, 10.0, 10.0, 2.0]

    def test_invalid_length(self):
        with pytest.raises(GeoJsonError, match="4 or 6 elements"):
            BoundingBox.from_list([0, 0, 1])

    def test_attached_bbox_serialized(self):
        box = BoundingBox.from_lng_lats(0, 0, 1, 1)
        data = Point.from_lng_lat(0.5, 0.5, bbox=box).to_dict()
        assert data['bbox'] == [0.0, 0.0, 1.0, 1.0]
