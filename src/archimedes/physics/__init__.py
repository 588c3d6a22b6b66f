# Hydrostatics engine for a rectangular hull cross-section (box ship)
#
# This library provides reusable functions for computing:
# - Center of Gravity (G) of the hull and of discrete point masses
# - Center of Buoyancy (B) - centroid of the submerged cross-section
# - Metacenter (M) and metacentric radius (BM)
#
# These functions are pure and are called repeatedly by the iso-carene
# bisection solver.

from .point import Point2D, PointMass

from .box_ship import (
    BoxShip,
    to_global,
    to_local,
    to_ship_coordinates,
    corners,
    waterline,
    bbox,
    BBOX_INFLATION,
    WATERLINE_EXTENT,
)

from .polygon import (
    centroid,
    triangulate,
    triangle_area,
    polygon_area,
    polygon_centroid,
    AREA_EPSILON,
)

from .carene import waterline_intersect, waterline_split, carene

from .hydrostatics import (
    gravity_center,
    buoyancy_center,
    carene_area,
    metacentric_radius,
    metacenter,
    compute_hydrostatics,
)

from .point_mass import bounding_box, center_of_gravity

__all__ = [
    # Primitives
    'Point2D',
    'PointMass',
    # Hull and frames
    'BoxShip',
    'to_global',
    'to_local',
    'to_ship_coordinates',
    'corners',
    'waterline',
    'bbox',
    'BBOX_INFLATION',
    'WATERLINE_EXTENT',
    # Polygon measure
    'centroid',
    'triangulate',
    'triangle_area',
    'polygon_area',
    'polygon_centroid',
    'AREA_EPSILON',
    # Carene
    'waterline_intersect',
    'carene',
    'waterline_split',
    # Hydrostatics
    'gravity_center',
    'buoyancy_center',
    'carene_area',
    'metacentric_radius',
    'metacenter',
    'compute_hydrostatics',
    # Point masses
    'bounding_box',
    'center_of_gravity',
]
