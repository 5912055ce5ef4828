"""Pytest fixtures for meridian tests."""

import pytest

from meridian_geojson import (
    Feature,
    FeatureCollection,
    LineString,
    MultiPolygon,
    Point,
    Polygon,
)


# ============================================================================
# Point Fixtures
# ============================================================================

@pytest.fixture
def philadelphia_pair():
    """Two points roughly 97km apart, used for unit conversions of distance."""
    return Point.from_lng_lat(-75.343, 39.984), Point.from_lng_lat(-75.534, 39.123)


# ============================================================================
# Line Fixtures
# ============================================================================

@pytest.fixture
def meridian_line():
    """Three vertices one degree apart along the prime meridian."""
    return LineString.from_lng_lats([(0.0, 0.0), (0.0, 1.0), (0.0, 2.0)])


@pytest.fixture
def short_line():
    """Two-vertex line in southern China, about 190 miles long."""
    return LineString.from_lng_lats([
        (113.99414062499999, 22.350075806124867),
        (116.76269531249999, 23.241346102386135),
    ])


@pytest.fixture
def route_line():
    """Five-vertex line through Washington DC."""
    return LineString.from_lng_lats([
        (-77.0316696166992, 38.878605901789236),
        (-77.02960968017578, 38.88194668656296),
        (-77.02033996582031, 38.88408470638821),
        (-77.02566146850586, 38.885821800123196),
        (-77.02188491821289, 38.88956308852534),
    ])


# ============================================================================
# Polygon Fixtures
# ============================================================================

@pytest.fixture
def unit_square():
    """One-degree square at the origin, counter-clockwise."""
    return Polygon.from_lng_lats([[(0, 0), (1, 0), (1, 1), (0, 1), (0, 0)]])


@pytest.fixture
def square_with_hole():
    """10x10 square with a 4x4 hole in the middle."""
    return Polygon.from_lng_lats([
        [(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)],
        [(3, 3), (7, 3), (7, 7), (3, 7), (3, 3)],
    ])


@pytest.fixture
def concave_polygon():
    """Polygon with a notch cut into its left side."""
    return Polygon.from_lng_lats([
        [(0, 0), (50, 50), (0, 100), (100, 100), (100, 0), (0, 0)],
    ])


@pytest.fixture
def two_squares():
    """MultiPolygon of two disjoint squares, the second with a hole."""
    return MultiPolygon.from_lng_lats([
        [[(0, 0), (1, 0), (1, 1), (0, 1), (0, 0)]],
        [
            [(10, 10), (20, 10), (20, 20), (10, 20), (10, 10)],
            [(14, 14), (16, 14), (16, 16), (14, 16), (14, 14)],
        ],
    ])


# ============================================================================
# Feature Fixtures
# ============================================================================

@pytest.fixture
def mixed_collection(unit_square):
    """FeatureCollection with one feature of each simple geometry kind."""
    return FeatureCollection.from_features([
        Feature(Point.from_lng_lat(1.0, 2.0), {'name': 'pin'}),
        Feature(LineString.from_lng_lats([(0, 0), (5, 5)])),
        Feature(unit_square, id='square'),
    ])
