"""
archimedes - 2-D hydrostatics of a heeled box ship.

Submerged cross-section (carene), center of buoyancy, metacenter and
iso-carene (constant displacement) configurations of a rectangular hull.
"""

from .errors import InvalidGeometryError, DegenerateConfigurationError, ConvergenceError
from .units import ureg, Q_
from .physics import (
    Point2D,
    PointMass,
    BoxShip,
    to_global,
    to_local,
    to_ship_coordinates,
    corners,
    waterline,
    bbox,
    carene,
    polygon_area,
    polygon_centroid,
    gravity_center,
    buoyancy_center,
    metacenter,
    compute_hydrostatics,
)
from .isocarene import isocarene

__all__ = [
    "InvalidGeometryError",
    "DegenerateConfigurationError",
    "ConvergenceError",
    "ureg",
    "Q_",
    "Point2D",
    "PointMass",
    "BoxShip",
    "to_global",
    "to_local",
    "to_ship_coordinates",
    "corners",
    "waterline",
    "bbox",
    "carene",
    "polygon_area",
    "polygon_centroid",
    "gravity_center",
    "buoyancy_center",
    "metacenter",
    "compute_hydrostatics",
    "isocarene",
]
