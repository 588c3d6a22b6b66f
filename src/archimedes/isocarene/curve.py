#!/usr/bin/env python3
"""
Iso-carene curve - sweeps heel angles at constant displacement.

For each heel angle:
1. Find the iso-carene vshift (same submerged area as the upright reference)
2. Compute G, B and M of the heeled configuration
3. Compute the righting arm GZ = horizontal distance between G and B

For a box ship both sides are symmetric, so the curve is odd in heel. The
supported range ends where the deck edge immerses or the bilge emerges.
"""

import math

import numpy as np

from archimedes.errors import ConvergenceError, InvalidGeometryError, DegenerateConfigurationError
from archimedes.physics.box_ship import BoxShip
from archimedes.physics.hydrostatics import (
    buoyancy_center,
    carene_area,
    gravity_center,
    metacenter,
)
from archimedes.units import meters, square_meters

from .solve import isocarene, DEFAULT_MAX_ITERATIONS, DEFAULT_TOLERANCE

DEFAULT_HEEL_ANGLES_DEG = (
    list(range(-20, -5, 5)) +
    list(range(-5, 6, 1)) +
    list(range(10, 25, 5))
)

# Points within this heel (degrees) are used for the GM slope
SMALL_ANGLE_DEG = 5.0


def righting_arm(ship: BoxShip) -> float:
    """GZ in metres; positive when the buoyancy couple rights the hull."""
    raw_gz = meters(gravity_center(ship).x - buoyancy_center(ship).x)
    if abs(ship.heel) < 1e-12:
        return raw_gz
    return math.copysign(1.0, ship.heel) * raw_gz


def compute_gm_from_curve(curve: list, small_angle_deg: float = SMALL_ANGLE_DEG):
    """
    Initial metacentric height from the small-angle slope of the GZ curve.

    GM = dGZ/dθ at θ=0, fitted by least squares through the origin over the
    converged points with |heel| <= small_angle_deg (and heel != 0).

    Returns:
        GM in metres, or None if fewer than two usable points
    """
    points = [p for p in curve
              if p.get('converged') and 0 < abs(p['heel_deg']) <= small_angle_deg]
    if len(points) < 2:
        return None

    theta = np.radians([p['heel_deg'] for p in points])
    # Signed GZ so that the fit is of an odd function through the origin
    gz = np.array([p['gz_m'] * math.copysign(1.0, p['heel_deg']) for p in points])
    return float(np.dot(theta, gz) / np.dot(theta, theta))


def compute_isocarene_curve(ship0: BoxShip, heel_angles_deg: list = None,
                            max_iterations: int = DEFAULT_MAX_ITERATIONS,
                            tolerance: float = DEFAULT_TOLERANCE,
                            verbose: bool = False) -> dict:
    """
    Compute the iso-carene curve by sweeping through heel angles.

    Args:
        ship0: Reference configuration (usually upright, vshift=0)
        heel_angles_deg: Absolute heel angles in degrees (default: -20 to 20)
        max_iterations: Bisection budget per angle
        tolerance: Relative area tolerance per angle
        verbose: Print progress

    Returns:
        Dictionary with summary statistics and per-angle curve points.
        Angles where the solver fails are kept with converged=False and the
        error message.
    """
    if heel_angles_deg is None:
        heel_angles_deg = DEFAULT_HEEL_ANGLES_DEG

    reference_area = square_meters(carene_area(ship0))
    curve = []

    for heel_deg in heel_angles_deg:
        if verbose:
            print(f"  Computing iso-carene at heel = {heel_deg:+.1f}°...", end='', flush=True)

        delta = math.radians(heel_deg) - ship0.heel
        try:
            ship = isocarene(ship0, delta, max_iterations=max_iterations,
                             tolerance=tolerance)
        except (InvalidGeometryError, ConvergenceError, DegenerateConfigurationError) as e:
            if verbose:
                print(f" FAILED: {e}")
            curve.append({
                'heel_deg': heel_deg,
                'converged': False,
                'error': str(e),
            })
            continue

        G = gravity_center(ship)
        B = buoyancy_center(ship)
        M = metacenter(ship)
        gz_m = righting_arm(ship)

        if verbose:
            print(f" vshift = {meters(ship.vshift)*1000:.2f} mm, GZ = {gz_m*100:.2f} cm")

        curve.append({
            'heel_deg': heel_deg,
            'converged': True,
            'vshift_m': round(meters(ship.vshift), 9),
            'carene_area_m2': round(square_meters(carene_area(ship)), 9),
            'G': G.to_dict(),
            'B': B.to_dict(),
            'M': M.to_dict(),
            'gz_m': round(gz_m, 6),
        })

    converged_points = [p for p in curve if p['converged']]

    if converged_points:
        gz_values = [p['gz_m'] for p in converged_points]
        max_gz = max(gz_values)
        max_gz_angle = converged_points[gz_values.index(max_gz)]['heel_deg']
    else:
        max_gz = 0.0
        max_gz_angle = None

    gm_m = compute_gm_from_curve(curve)

    summary = {
        'reference_area_m2': round(reference_area, 9),
        'max_gz_m': round(max_gz, 6),
        'max_gz_angle_deg': max_gz_angle,
        'gm_m': round(gm_m, 6) if gm_m is not None else None,
        'total_points': len(curve),
        'converged_points': len(converged_points),
    }

    return {
        'validator': 'isocarene',
        'reference_pose': ship0.pose_dict(),
        'summary': summary,
        'curve': curve,
    }


def plot_isocarene_curve(result: dict, output_path: str):
    """
    Generate a PNG plot of GZ and iso-carene vshift against heel.

    Args:
        result: Result from compute_isocarene_curve
        output_path: Path for output PNG file
    """
    import matplotlib
    matplotlib.use('Agg')  # Non-interactive backend
    import matplotlib.pyplot as plt

    converged = [p for p in result['curve'] if p.get('converged', False)]

    if not converged:
        print("Warning: No converged points to plot")
        return

    angles = [p['heel_deg'] for p in converged]
    gz_values = [p['gz_m'] * 100 for p in converged]  # cm
    vshift_values = [p['vshift_m'] * 1000 for p in converged]  # mm

    fig, ax1 = plt.subplots(figsize=(10, 6))

    color1 = '#2563eb'
    ax1.set_xlabel('Heel Angle (degrees)', fontsize=12)
    ax1.set_ylabel('GZ Righting Arm (cm)', color=color1, fontsize=12)
    line1, = ax1.plot(angles, gz_values, 'o-', color=color1, linewidth=2,
                      markersize=4, label='GZ (cm)')
    ax1.tick_params(axis='y', labelcolor=color1)
    ax1.axhline(y=0, color='gray', linestyle='--', alpha=0.5)
    ax1.axvline(x=0, color='gray', linestyle='--', alpha=0.5)
    ax1.grid(True, alpha=0.3)

    ax2 = ax1.twinx()
    color2 = '#dc2626'
    ax2.set_ylabel('Iso-carene vshift (mm)', color=color2, fontsize=12)
    line2, = ax2.plot(angles, vshift_values, 's--', color=color2, linewidth=1.5,
                      markersize=3, alpha=0.7, label='vshift (mm)')
    ax2.tick_params(axis='y', labelcolor=color2)

    summary = result['summary']
    stats_text = f"Max GZ: {summary['max_gz_m']*100:.1f} cm at {summary['max_gz_angle_deg']}°"
    if summary.get('gm_m') is not None:
        stats_text += f"\nGM: {summary['gm_m']*100:.1f} cm"
    stats_text += f"\nArea: {summary['reference_area_m2']:.3f} m²"

    ax1.text(0.02, 0.98, stats_text, transform=ax1.transAxes, fontsize=10,
             verticalalignment='top', bbox=dict(boxstyle='round', facecolor='white', alpha=0.8))

    plt.title('Iso-carene Curve (constant displacement)', fontsize=14)

    lines = [line1, line2]
    labels = [l.get_label() for l in lines]
    ax1.legend(lines, labels, loc='upper right')

    plt.tight_layout()
    plt.savefig(output_path, dpi=150, bbox_inches='tight')
    plt.close(fig)

    print(f"✓ Iso-carene curve plot saved to {output_path}")
