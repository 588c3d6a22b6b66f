#!/usr/bin/env python3
"""
Box ship description and rigid hull frame transforms.

A BoxShip is a rectangular hull cross-section with a fixed geometry (width,
height, draft, KG) and one floating configuration (heel, vshift).

Coordinate systems:
    Ship-local frame: rectangle axis-aligned, origin at mid-width on the
        design waterline (i.e. `draft` above the keel).
    Global frame: water surface at y=0, y up.
    Ship coordinates: ship-local frame re-origined to the middle of the hull
        height (see to_ship_coordinates).

    Heel: rotation about the longitudinal axis in radians, counter-clockwise
        positive (starboard side, +x, rises).
    Vshift: vertical shift applied in the global frame after the rotation
        (positive = hull rises).

Usage:
    from archimedes.physics.box_ship import BoxShip, corners

    ship = BoxShip(width=5.0, height=3.0, draft=2.0, KG=1.5, heel=0.1)
    for p in corners(ship):
        print(p.as_tuple())
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

import pint

from archimedes.units import ZERO_LENGTH, as_length

from .point import Point2D

# The waterline segment and the display box are wider than the hull by this
# factor so they stay visible at any supported heel.
WATERLINE_EXTENT = 1.4
BBOX_INFLATION = 1.4


@dataclass(frozen=True)
class BoxShip:
    width: pint.Quantity
    height: pint.Quantity
    draft: pint.Quantity
    KG: pint.Quantity
    heel: float = 0.0
    vshift: pint.Quantity = ZERO_LENGTH

    def __post_init__(self):
        for name in ("width", "height", "draft", "KG"):
            value = as_length(getattr(self, name), name)
            if value.magnitude < 0:
                raise ValueError(f"BoxShip {name} must be non-negative, got {value}")
            object.__setattr__(self, name, value)
        object.__setattr__(self, "heel", float(self.heel))
        object.__setattr__(self, "vshift", as_length(self.vshift, "vshift"))

    def with_pose(self, heel: float, vshift: pint.Quantity | float = ZERO_LENGTH) -> BoxShip:
        """Same hull in a different floating configuration."""
        return replace(self, heel=heel, vshift=vshift)

    def pose_dict(self) -> dict:
        return {
            "heel_rad": self.heel,
            "heel_deg": round(math.degrees(self.heel), 6),
            "vshift_m": round(self.vshift.m_as("m"), 9),
        }


def to_global(p: Point2D, ship: BoxShip) -> Point2D:
    """Map a ship-local point to the global frame (rotate, then shift)."""
    cos_h = math.cos(ship.heel)
    sin_h = math.sin(ship.heel)
    return Point2D(
        cos_h * p.x - sin_h * p.y,
        sin_h * p.x + cos_h * p.y + ship.vshift,
    )


def to_local(p: Point2D, ship: BoxShip) -> Point2D:
    """Map a global point to the ship-local frame. Inverse of to_global."""
    cos_h = math.cos(ship.heel)
    sin_h = math.sin(ship.heel)
    y = p.y - ship.vshift
    return Point2D(
        cos_h * p.x + sin_h * y,
        -sin_h * p.x + cos_h * y,
    )


def to_ship_coordinates(p: Point2D, ship: BoxShip) -> Point2D:
    """Map a global point to ship coordinates (origin at mid hull height)."""
    return to_local(p, ship) - Point2D(ZERO_LENGTH, ship.height / 2 - ship.draft)


def corners(ship: BoxShip) -> tuple:
    """
    Hull corners in the global frame.

    Order is fixed: keel port, keel starboard, deck starboard, deck port
    (local (-w/2, -T), (w/2, -T), (w/2, H-T), (-w/2, H-T)). Consecutive
    entries are adjacent hull edges.
    """
    x = ship.width / 2
    ymin = -ship.draft
    ymax = ship.height - ship.draft
    local = (
        Point2D(-x, ymin),
        Point2D(x, ymin),
        Point2D(x, ymax),
        Point2D(-x, ymax),
    )
    return tuple(to_global(p, ship) for p in local)


def waterline(ship: BoxShip) -> tuple:
    """Horizontal reference segment on y=0, wide enough to cross the hull."""
    x = WATERLINE_EXTENT * ship.width / 2
    return (Point2D(-x, ZERO_LENGTH), Point2D(x, ZERO_LENGTH))


def bbox(ship: BoxShip) -> tuple:
    """Inflated (xmin, xmax, ymin, ymax) around the upright hull, for display."""
    return tuple(
        BBOX_INFLATION * v
        for v in (-ship.width / 2, ship.width / 2, -ship.draft, ship.height - ship.draft)
    )
