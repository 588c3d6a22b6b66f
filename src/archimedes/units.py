"""
Unit handling for archimedes.

All dimensioned values are pint quantities created from a single module-level
registry, so that lengths, masses and areas from different modules can be
combined freely. Heel angles stay plain floats in radians.

Usage:
    from archimedes.units import Q_, as_length

    width = as_length(5.0, "width")          # bare numbers are metres
    draft = as_length(Q_(2000, "mm"), "draft")  # converted to metres
"""

import pint

# Create unit registry once at module level
ureg = pint.UnitRegistry()
Q_ = ureg.Quantity

DEFAULT_LENGTH_UNIT = "m"
DEFAULT_MASS_UNIT = "kg"
DEFAULT_AREA_UNIT = "m**2"


def _as_dimensioned(value, dimension: str, unit: str, name: str):
    if isinstance(value, pint.Quantity):
        if not value.check(dimension):
            raise pint.DimensionalityError(
                value.units, ureg(unit).units,
                extra_msg=f" (while setting {name})"
            )
        return value.to(unit)
    return Q_(float(value), unit)


def as_length(value, name: str = "length"):
    """
    Coerce a value to a length quantity in metres.

    Bare numbers are interpreted in DEFAULT_LENGTH_UNIT. A quantity of any
    other dimensionality raises pint.DimensionalityError.
    """
    return _as_dimensioned(value, "[length]", DEFAULT_LENGTH_UNIT, name)


def as_mass(value, name: str = "mass"):
    """Coerce a value to a mass quantity in kilograms."""
    return _as_dimensioned(value, "[mass]", DEFAULT_MASS_UNIT, name)


def meters(q) -> float:
    """Magnitude of a length quantity in metres."""
    return float(q.m_as(DEFAULT_LENGTH_UNIT))


def square_meters(q) -> float:
    """Magnitude of an area quantity in square metres."""
    return float(q.m_as(DEFAULT_AREA_UNIT))


ZERO_LENGTH = Q_(0.0, DEFAULT_LENGTH_UNIT)
ZERO_AREA = Q_(0.0, DEFAULT_AREA_UNIT)
