#!/usr/bin/env python3
"""
Iso-carene solver - finds the vertical shift that keeps displacement constant.

Given a reference configuration and a heel increment, bisects over vshift in
[-draft, +draft] until the heeled hull has the same submerged area as the
reference. Submerged area decreases as vshift grows (the hull rises), which
fixes the bracket update polarity.

Trials that wet one or three corners have no supported carene. They still
tell which way to move: more corners below means the hull sits too deep.
"""

from archimedes.errors import ConvergenceError, DegenerateConfigurationError, InvalidGeometryError
from archimedes.physics.box_ship import BoxShip
from archimedes.physics.carene import waterline_split
from archimedes.physics.hydrostatics import carene_area
from archimedes.physics.polygon import AREA_EPSILON
from archimedes.units import Q_, square_meters

# Solver parameters
DEFAULT_MAX_ITERATIONS = 50
DEFAULT_TOLERANCE = 1e-8  # Relative area tolerance


def isocarene(ship0: BoxShip, delta_heel: float,
              max_iterations: int = DEFAULT_MAX_ITERATIONS,
              tolerance: float = DEFAULT_TOLERANCE,
              verbose: bool = False) -> BoxShip:
    """
    Find the configuration at heel ship0.heel + delta_heel with ship0's area.

    Args:
        ship0: Reference configuration
        delta_heel: Heel increment in radians
        max_iterations: Maximum bisection steps
        tolerance: Relative area tolerance |A1 - A0| / A0
        verbose: Print progress information

    Returns:
        The converged trial BoxShip (same hull, new heel and vshift)

    Raises:
        ConvergenceError: no trial met the tolerance within max_iterations
        DegenerateConfigurationError: the reference area is numerically zero
        InvalidGeometryError: the reference is not a two-by-two split, or a
            trial has as many corners above as below without being one
    """
    heel = ship0.heel + delta_heel
    draft = ship0.draft
    dt_lower = -draft
    dt_upper = draft

    a0 = square_meters(carene_area(ship0))
    if a0 < AREA_EPSILON:
        raise DegenerateConfigurationError(
            f"Reference carene area {a0:.3e} m² is too small"
        )

    if verbose:
        print(f"  Iso-carene: heel {ship0.heel:.4f} -> {heel:.4f} rad, "
              f"target area {a0:.6f} m²")

    rel_error = float("nan")
    for iteration in range(max_iterations):
        dt = (dt_upper + dt_lower) / 2
        trial = ship0.with_pose(heel, dt)
        try:
            a1 = square_meters(carene_area(trial))
        except InvalidGeometryError:
            above, below = waterline_split(trial)
            if len(above) == len(below):
                raise
            if verbose:
                print(f"  Iteration {iteration}: vshift={dt.m_as('m'):+.9f} m, "
                      f"{len(above)} corners above, {len(below)} below")
            if len(below) > len(above):
                dt_lower = dt
            else:
                dt_upper = dt
            continue
        rel_error = abs(a1 - a0) / a0

        if verbose:
            print(f"  Iteration {iteration}: vshift={dt.m_as('m'):+.9f} m, "
                  f"area={a1:.9f} m², rel.err={rel_error:.3e}")

        if rel_error < tolerance:
            if verbose:
                print(f"  Converged after {iteration + 1} iterations")
            return trial

        if a1 < a0:
            dt_upper = dt  # too little displacement, sink more
        else:
            dt_lower = dt  # too much displacement, rise

    raise ConvergenceError(
        f"isocarene did not converge after {max_iterations} iterations "
        f"(heel={heel:.4f} rad, relative area error {rel_error:.3e})",
        iterations=max_iterations,
        last_relative_error=rel_error,
    )


def area_is_monotonic(ship: BoxShip, vshifts) -> bool:
    """
    Check that carene area does not increase with vshift at ship's heel.

    The bisection in isocarene() relies on this; vshifts must keep the hull
    in a two-above / two-below configuration.
    """
    areas = [square_meters(carene_area(ship.with_pose(ship.heel, Q_(float(v), "m"))))
             for v in sorted(vshifts)]
    return all(a2 <= a1 * (1 + 1e-12) for a1, a2 in zip(areas, areas[1:]))
