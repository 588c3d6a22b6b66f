"""
Point primitives with length-dimensioned coordinates.

Point2D is a plain 2-D vector whose components are pint length quantities.
Coordinates are in the global (water) frame unless a function says otherwise.
PointMass attaches a mass and a drawing radius to a Point2D.
"""

from __future__ import annotations

from dataclasses import dataclass

import pint

from archimedes.units import as_length, as_mass, meters


@dataclass(frozen=True)
class Point2D:
    x: pint.Quantity
    y: pint.Quantity

    def __post_init__(self):
        object.__setattr__(self, "x", as_length(self.x, "x"))
        object.__setattr__(self, "y", as_length(self.y, "y"))

    @classmethod
    def from_meters(cls, x: float, y: float) -> Point2D:
        return cls(x, y)

    def __add__(self, other: Point2D) -> Point2D:
        return Point2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point2D) -> Point2D:
        return Point2D(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Point2D:
        return Point2D(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Point2D:
        return Point2D(self.x / divisor, self.y / divisor)

    def norm(self) -> pint.Quantity:
        """Euclidean length of the vector (a length quantity)."""
        return (self.x ** 2 + self.y ** 2) ** 0.5

    def as_tuple(self) -> tuple[float, float]:
        """(x, y) as plain floats in metres."""
        return meters(self.x), meters(self.y)

    def to_dict(self, ndigits: int = 6) -> dict:
        x, y = self.as_tuple()
        return {"x": round(x, ndigits), "y": round(y, ndigits)}


@dataclass(frozen=True)
class PointMass:
    """A point mass; radius is only used when drawing."""

    coordinates: Point2D
    mass: pint.Quantity
    radius: pint.Quantity

    def __post_init__(self):
        object.__setattr__(self, "mass", as_mass(self.mass, "mass"))
        object.__setattr__(self, "radius", as_length(self.radius, "radius"))

    @classmethod
    def create(cls, x: pint.Quantity | float, y: pint.Quantity | float,
               mass: pint.Quantity | float, radius: pint.Quantity | float) -> PointMass:
        return cls(Point2D(x, y), mass, radius)

    @property
    def x(self) -> pint.Quantity:
        return self.coordinates.x

    @property
    def y(self) -> pint.Quantity:
        return self.coordinates.y
