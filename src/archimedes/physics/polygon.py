"""
Area and centroid of ordered polygons by fan triangulation.

The polygon is split into triangles that share the plain vertex centroid.
Total area is the sum of the unsigned triangle areas, and the centroid is the
area-weighted mean of the triangle centroids. This is exact for any simple
polygon whose fan from the vertex centroid does not self-intersect, which
holds for the convex carenes of a box hull.
"""

import numpy as np

from archimedes.errors import DegenerateConfigurationError
from archimedes.units import Q_, ZERO_AREA, ZERO_LENGTH, meters

from .point import Point2D

# Below this submerged area (m²) a centroid is not meaningful.
AREA_EPSILON = 1e-12


def centroid(points) -> Point2D:
    """
    Plain (unweighted) mean of a sequence of points.

    Accepts Point2D or anything with x/y length attributes (e.g. PointMass).
    """
    points = list(points)
    if not points:
        raise ValueError("centroid of an empty point sequence")
    n = len(points)
    x = sum((p.x for p in points), ZERO_LENGTH) / n
    y = sum((p.y for p in points), ZERO_LENGTH) / n
    return Point2D(x, y)


def triangulate(polygon) -> list:
    """Fan-triangulate an ordered polygon from its vertex centroid."""
    polygon = list(polygon)
    c = centroid(polygon)
    n = len(polygon)
    return [(c, polygon[i], polygon[(i + 1) % n]) for i in range(n)]


def _vec3(p: Point2D) -> np.ndarray:
    x, y = p.as_tuple()
    return np.array([x, y, 0.0])


def triangle_area(triangle):
    """Unsigned area of a triangle, as an m² quantity."""
    v1, v2, v3 = (_vec3(p) for p in triangle)
    cross_z = np.cross(v3 - v1, v2 - v1)[2]
    return Q_(abs(float(cross_z)) / 2, "m**2")


def polygon_area(polygon):
    return sum((triangle_area(t) for t in triangulate(polygon)), ZERO_AREA)


def polygon_centroid(polygon) -> Point2D:
    """Area-weighted centroid of an ordered polygon."""
    triangles = triangulate(polygon)
    areas = [triangle_area(t) for t in triangles]
    centroids = [centroid(t) for t in triangles]

    total_area = sum(areas, ZERO_AREA)
    if total_area.m_as("m**2") < AREA_EPSILON:
        raise DegenerateConfigurationError(
            f"Polygon area {total_area.m_as('m**2'):.3e} m² is too small "
            f"for a centroid"
        )

    # Weight in plain floats; the result is re-attached to metres below.
    total = total_area.m_as("m**2")
    x = sum(meters(c.x) * a.m_as("m**2") for c, a in zip(centroids, areas)) / total
    y = sum(meters(c.y) * a.m_as("m**2") for c, a in zip(centroids, areas)) / total
    return Point2D(x, y)
