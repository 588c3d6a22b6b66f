#!/usr/bin/env python3
"""
Iso-carene curve computation - sweeps heel at constant displacement.

For each heel angle:
1. Find the vshift that keeps the submerged area of the upright hull
2. Compute G, B, M and the righting arm GZ

Usage:
    python -m archimedes.isocarene \
        --width 5 --height 3 --draft 2 --kg 1.5 \
        --output artifact/boxship.isocarene.json \
        --output-png artifact/boxship.isocarene.png
"""

import sys
import os
import json
import argparse

from archimedes.errors import InvalidGeometryError, DegenerateConfigurationError
from archimedes.physics.box_ship import BoxShip
from archimedes.physics.hydrostatics import carene_area

from .curve import compute_isocarene_curve, plot_isocarene_curve
from .solve import DEFAULT_MAX_ITERATIONS, DEFAULT_TOLERANCE


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Compute the iso-carene (constant displacement) curve of a box ship',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('--width', type=float, required=True, help='Hull width in m')
    parser.add_argument('--height', type=float, required=True, help='Hull height in m')
    parser.add_argument('--draft', type=float, required=True, help='Upright draft in m')
    parser.add_argument('--kg', type=float, required=True,
                        help='Center of gravity height above keel in m')
    parser.add_argument('--output', required=True,
                        help='Path to output JSON file')
    parser.add_argument('--output-png',
                        help='Path to output PNG plot (optional, defaults to same name as output with .png)')
    parser.add_argument('--min-heel', type=float, default=-20.0,
                        help='Minimum heel angle in degrees (default: -20)')
    parser.add_argument('--max-heel', type=float, default=20.0,
                        help='Maximum heel angle in degrees (default: 20)')
    parser.add_argument('--heel-step', type=float, default=5.0,
                        help='Heel angle step in degrees (default: 5)')
    parser.add_argument('--max-iterations', type=int, default=DEFAULT_MAX_ITERATIONS,
                        help=f'Maximum bisection iterations (default: {DEFAULT_MAX_ITERATIONS})')
    parser.add_argument('--tolerance', type=float, default=DEFAULT_TOLERANCE,
                        help=f'Relative area tolerance (default: {DEFAULT_TOLERANCE})')
    parser.add_argument('--quiet', action='store_true',
                        help='Suppress progress output')

    args = parser.parse_args(argv)
    verbose = not args.quiet

    ship0 = BoxShip(args.width, args.height, args.draft, args.kg)

    try:
        area = carene_area(ship0)
    except (InvalidGeometryError, DegenerateConfigurationError) as e:
        print(f"ERROR: upright configuration is not supported: {e}", file=sys.stderr)
        sys.exit(1)

    if verbose:
        print(f"Computing iso-carene curve: width={args.width} m, height={args.height} m, "
              f"draft={args.draft} m, KG={args.kg} m")
        print(f"  Reference area: {area.m_as('m**2'):.4f} m²")

    # Generate heel angles with fine steps near 0°
    heel_angles = []
    angle = args.min_heel
    while angle <= args.max_heel + 0.01:
        heel_angles.append(round(angle, 6))
        if -6 < angle < 5:
            angle += 1.0
        else:
            angle += args.heel_step

    if verbose:
        print(f"  Computing {len(heel_angles)} points from {args.min_heel}° to {args.max_heel}°")

    result = compute_isocarene_curve(
        ship0,
        heel_angles_deg=heel_angles,
        max_iterations=args.max_iterations,
        tolerance=args.tolerance,
        verbose=verbose
    )

    # Write JSON output
    os.makedirs(os.path.dirname(args.output) or '.', exist_ok=True)
    with open(args.output, 'w') as f:
        json.dump(result, f, indent=2)

    if verbose:
        summary = result['summary']
        print(f"✓ Iso-carene curve saved to {args.output}")
        print(f"  Converged: {summary['converged_points']}/{summary['total_points']} angles")
        print(f"  Max GZ: {summary['max_gz_m']*100:.1f} cm at {summary['max_gz_angle_deg']}°")
        if summary.get('gm_m') is not None:
            print(f"  GM (transverse): {summary['gm_m']*100:.1f} cm")

    png_path = args.output_png
    if not png_path:
        png_path = args.output.replace('.json', '.png')

    plot_isocarene_curve(result, png_path)


if __name__ == "__main__":
    main()
