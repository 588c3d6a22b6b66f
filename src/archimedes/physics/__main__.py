#!/usr/bin/env python3
"""
Physics computation CLI - hydrostatics of a box ship and point-mass aggregation.

Usage:
    # Hydrostatics of one floating configuration
    python -m archimedes.physics hydrostatics --width 5 --height 3 --draft 2 \
                              --kg 1.5 --heel-deg 5 --vshift 0.0 \
                              --output artifact/boxship.hydrostatics.json \
                              --output-png artifact/boxship.png

    # Center of gravity of point masses
    python -m archimedes.physics cog --masses constant/masses.json \
                              --output artifact/masses.cog.json
"""

import sys
import os
import json
import math
import argparse

from archimedes.errors import InvalidGeometryError, DegenerateConfigurationError
from archimedes.physics.box_ship import BoxShip, bbox
from archimedes.physics.hydrostatics import compute_hydrostatics
from archimedes.physics.point import PointMass
from archimedes.physics.point_mass import bounding_box, center_of_gravity
from archimedes.units import meters


def add_ship_arguments(parser):
    """Hull dimension flags shared by the archimedes CLIs."""
    parser.add_argument('--width', type=float, required=True, help='Hull width in m')
    parser.add_argument('--height', type=float, required=True, help='Hull height in m')
    parser.add_argument('--draft', type=float, required=True, help='Upright draft in m')
    parser.add_argument('--kg', type=float, required=True,
                        help='Center of gravity height above keel in m')


def write_json(result: dict, output: str):
    os.makedirs(os.path.dirname(output) or '.', exist_ok=True)
    with open(output, 'w') as f:
        json.dump(result, f, indent=2)


def cmd_hydrostatics(args):
    """Compute G, B, M of one configuration."""
    ship = BoxShip(args.width, args.height, args.draft, args.kg,
                   heel=math.radians(args.heel_deg), vshift=args.vshift)
    print(f"Computing hydrostatics: width={args.width} m, height={args.height} m, "
          f"draft={args.draft} m, KG={args.kg} m")
    print(f"  Pose: heel={args.heel_deg}°, vshift={args.vshift} m")

    try:
        result = compute_hydrostatics(ship)
    except (InvalidGeometryError, DegenerateConfigurationError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    result['validator'] = 'hydrostatics'
    write_json(result, args.output)

    print(f"✓ Hydrostatics computed")
    print(f"  Carene area: {result['carene_area_m2']:.4f} m²")
    print(f"  B: ({result['B']['x']:.4f}, {result['B']['y']:.4f}) m")
    print(f"  M: ({result['M']['x']:.4f}, {result['M']['y']:.4f}) m")
    print(f"  BM: {result['BM_m']:.4f} m, GM: {result['GM_m']:.4f} m")
    print(f"  Output: {args.output}")

    if args.output_png:
        from archimedes.drawing import setup_diagram, draw_ship, save_diagram
        fig, ax, mapping = setup_diagram(bbox(ship), args.figwidth)
        draw_ship(ax, mapping, ship)
        save_diagram(fig, args.output_png)
        print(f"  Diagram: {args.output_png}")


def cmd_cog(args):
    """Combine point masses from a JSON list of {x, y, mass, radius}."""
    print(f"Computing center of gravity: {args.masses}")

    with open(args.masses, 'r') as f:
        items = json.load(f)

    masses = [PointMass.create(item['x'], item['y'], item['mass'], item.get('radius', 0.0))
              for item in items]

    try:
        cog = center_of_gravity(masses)
    except DegenerateConfigurationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    xmin, xmax, ymin, ymax = bounding_box(masses)
    result = {
        'validator': 'cog',
        'CoG': cog.coordinates.to_dict(),
        'total_mass_kg': round(cog.mass.m_as('kg'), 6),
        'radius_m': round(meters(cog.radius), 6),
        'bbox': {
            'xmin': meters(xmin), 'xmax': meters(xmax),
            'ymin': meters(ymin), 'ymax': meters(ymax),
        },
        'component_count': len(masses),
    }
    write_json(result, args.output)

    print(f"✓ Center of gravity computed")
    print(f"  CoG: ({result['CoG']['x']:.3f}, {result['CoG']['y']:.3f}) m")
    print(f"  Total mass: {result['total_mass_kg']:.2f} kg")
    print(f"  Components: {result['component_count']}")
    print(f"  Output: {args.output}")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Physics computations for box ship hydrostatics',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    hydro_parser = subparsers.add_parser('hydrostatics', help='Compute G, B, M of a box ship')
    add_ship_arguments(hydro_parser)
    hydro_parser.add_argument('--heel-deg', type=float, default=0.0, help='Heel angle in degrees')
    hydro_parser.add_argument('--vshift', type=float, default=0.0,
                              help='Vertical shift in m (positive = rise)')
    hydro_parser.add_argument('--output', required=True, help='Path to output JSON file')
    hydro_parser.add_argument('--output-png', help='Path to output section diagram (optional)')
    hydro_parser.add_argument('--figwidth', type=float, default=300,
                              help='Diagram width in pixels (default: 300)')

    cog_parser = subparsers.add_parser('cog', help='Compute center of gravity of point masses')
    cog_parser.add_argument('--masses', required=True,
                            help='Path to JSON list of {"x", "y", "mass", "radius"} (m, kg)')
    cog_parser.add_argument('--output', required=True, help='Path to output JSON file')

    args = parser.parse_args(argv)

    if args.command == 'hydrostatics':
        cmd_hydrostatics(args)
    elif args.command == 'cog':
        cmd_cog(args)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
