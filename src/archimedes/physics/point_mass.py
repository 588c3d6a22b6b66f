#!/usr/bin/env python3
"""
Aggregation of discrete point masses.

Bounding box, plain centroid and mass-weighted center of gravity of an
arbitrary collection of PointMass values, e.g. cargo or ballast items placed
on a hull section.

Usage:
    from archimedes.physics.point import PointMass
    from archimedes.physics.point_mass import center_of_gravity

    masses = [PointMass.create(x, 0.0, 1.0, 0.5) for x in (1.0, 2.0, 3.0)]
    cog = center_of_gravity(masses)
    # cog.coordinates == Point2D(2.0 m, 0.0 m), cog.mass == 3.0 kg
"""

from archimedes.errors import DegenerateConfigurationError
from archimedes.units import Q_, ZERO_LENGTH

from .point import Point2D, PointMass
from .polygon import centroid

__all__ = ["bounding_box", "centroid", "center_of_gravity"]


def bounding_box(masses) -> tuple:
    """(xmin, xmax, ymin, ymax) of the mass positions."""
    masses = list(masses)
    if not masses:
        raise ValueError("bounding box of an empty collection")
    xs = [m.x for m in masses]
    ys = [m.y for m in masses]
    return (min(xs), max(xs), min(ys), max(ys))


def center_of_gravity(masses) -> PointMass:
    """
    Combine point masses into one.

    The result sits at the mass-weighted position, carries the total mass,
    and gets the root-sum-square of the radii so it draws with comparable
    area.
    """
    masses = list(masses)
    if not masses:
        raise ValueError("center of gravity of an empty collection")

    total_mass = sum((m.mass for m in masses), Q_(0.0, "kg"))
    if total_mass.m_as("kg") <= 0:
        raise DegenerateConfigurationError(
            f"Total mass {total_mass:~P} must be positive"
        )

    x = sum((m.x * m.mass for m in masses), ZERO_LENGTH * Q_(0.0, "kg")) / total_mass
    y = sum((m.y * m.mass for m in masses), ZERO_LENGTH * Q_(0.0, "kg")) / total_mass
    radius = sum((m.radius ** 2 for m in masses), ZERO_LENGTH ** 2) ** 0.5

    return PointMass(Point2D(x, y), total_mass, radius)
