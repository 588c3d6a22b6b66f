import pytest

from archimedes.errors import DegenerateConfigurationError
from archimedes.physics.point import Point2D
from archimedes.physics.polygon import (
    centroid,
    polygon_area,
    polygon_centroid,
    triangle_area,
    triangulate,
)
from archimedes.units import Q_, square_meters


def test_triangle_area():
    triag = [Point2D(0.0, 0.0), Point2D(1.0, 0.0), Point2D(0.0, 2.0)]
    assert triangle_area(triag) == Q_(1.0, "m**2")


def test_triangle_area_is_unsigned():
    clockwise = [Point2D(0.0, 0.0), Point2D(0.0, 2.0), Point2D(1.0, 0.0)]
    assert square_meters(triangle_area(clockwise)) == 1.0


def test_triangulate_fans_from_centroid():
    square = [Point2D(0.0, 0.0), Point2D(2.0, 0.0), Point2D(2.0, 2.0), Point2D(0.0, 2.0)]
    triags = triangulate(square)
    assert len(triags) == 4
    assert all(t[0] == Point2D(1.0, 1.0) for t in triags)
    assert triags[-1][1:] == (square[3], square[0])


def test_centroid_is_vertex_mean():
    pts = [Point2D(0.0, 0.0), Point2D(4.0, 0.0), Point2D(4.0, 1.0)]
    x, y = centroid(pts).as_tuple()
    assert x == pytest.approx(8 / 3)
    assert y == pytest.approx(1 / 3)


def test_polygon_area_and_centroid_of_trapezoid():
    # Right trapezoid: bottom 4 m, top 2 m, height 2 m
    trap = [Point2D(0.0, 0.0), Point2D(4.0, 0.0), Point2D(2.0, 2.0), Point2D(0.0, 2.0)]
    assert square_meters(polygon_area(trap)) == pytest.approx(6.0)

    # Rectangle 2x2 at (1, 1) plus triangle area 2 at (8/3, 2/3)
    x, y = polygon_centroid(trap).as_tuple()
    assert x == pytest.approx((4 * 1 + 2 * 8 / 3) / 6)
    assert y == pytest.approx((4 * 1 + 2 * 2 / 3) / 6)


def test_vertex_centroid_differs_from_area_centroid():
    trap = [Point2D(0.0, 0.0), Point2D(4.0, 0.0), Point2D(2.0, 2.0), Point2D(0.0, 2.0)]
    assert centroid(trap) != polygon_centroid(trap)


def test_degenerate_polygon_has_no_centroid():
    flat = [Point2D(0.0, 0.0), Point2D(1.0, 0.0), Point2D(2.0, 0.0)]
    assert square_meters(polygon_area(flat)) == 0.0
    with pytest.raises(DegenerateConfigurationError):
        polygon_centroid(flat)


def test_empty_centroid():
    with pytest.raises(ValueError):
        centroid([])
