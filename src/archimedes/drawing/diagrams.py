"""
Ship section diagrams.

Uses Matplotlib to draw a box ship cross-section with its waterline and the
G, B and M points. Geometry is mapped to pixel coordinates with a
CoordMapping (origin at the bounding-box center, uniform scale, y pointing
down), and the axes are set up in those pixel units.
"""

from __future__ import annotations

from dataclasses import dataclass

import matplotlib.pyplot as plt
import pint

from archimedes.physics.box_ship import BoxShip, corners, waterline
from archimedes.physics.hydrostatics import buoyancy_center, gravity_center, metacenter
from archimedes.physics.point import Point2D


# Style constants
HULL_COLOR = 'black'
DECK_COLOR = 'darkgrey'
WATERLINE_COLOR = 'blue'
BUOYANCY_COLOR = 'red'
POINT_RADIUS = 5.0
LABEL_SIZE = 9
MARGIN = 30
BOTTOM_PADDING = 40
DPI = 100


@dataclass(frozen=True)
class CoordMapping:
    """Affine map from length coordinates to pixels."""

    origin: Point2D
    scaling: pint.Quantity  # pixels per length

    @classmethod
    def from_bbox(cls, width: float, bbox: tuple) -> CoordMapping:
        xmin, xmax, ymin, ymax = bbox
        center = Point2D((xmin + xmax) / 2, (ymin + ymax) / 2)
        return cls(center, width / (xmax - xmin))

    def scale(self, length) -> float:
        return float((length * self.scaling).m_as("dimensionless"))

    def remap(self, p) -> tuple[float, float]:
        """Pixel position of p (anything with x/y lengths); y grows downward."""
        px = (p.x - self.origin.x) * self.scaling
        py = -(p.y - self.origin.y) * self.scaling
        return float(px.m_as("dimensionless")), float(py.m_as("dimensionless"))


def setup_diagram(bbox: tuple, figwidth: float = 300):
    """Create a figure in pixel units for a drawing of the given bbox."""
    xmin, xmax, ymin, ymax = bbox
    ar = float(((xmax - xmin) / (ymax - ymin)).m_as("dimensionless"))
    figheight = figwidth / ar

    total_w = figwidth + 2 * MARGIN
    total_h = figheight + 2 * MARGIN + BOTTOM_PADDING
    fig, ax = plt.subplots(figsize=(total_w / DPI, total_h / DPI), dpi=DPI)
    fig.subplots_adjust(left=0, right=1, bottom=0, top=1)
    ax.set_xlim(-total_w / 2, total_w / 2)
    ax.set_ylim(figheight / 2 + MARGIN + BOTTOM_PADDING, -(figheight / 2 + MARGIN))
    ax.set_aspect('equal')
    ax.axis('off')
    return fig, ax, CoordMapping.from_bbox(figwidth, bbox)


def draw_point(ax, p, mapping: CoordMapping, r: float = POINT_RADIUS,
               hue: str = 'black', label: str = ''):
    """Draw a labelled dot at a point."""
    cx, cy = mapping.remap(p)
    ax.add_patch(plt.Circle((cx, cy), r, color=hue))
    if label:
        ax.text(cx + 1.2 * r, cy + 1.2 * r, label, ha='center', va='top',
                fontsize=LABEL_SIZE)


def draw_point_mass(ax, pm, mapping: CoordMapping, hue: str = 'black'):
    """Draw a point mass scaled to its radius, annotated with x, y and m."""
    cx, cy = mapping.remap(pm)
    r = mapping.scale(pm.radius)
    ax.add_patch(plt.Circle((cx, cy), r, color=hue))
    spacing = 5.0
    step = 10.0
    for i, text in enumerate((f"x = {pm.x:~P}", f"y = {pm.y:~P}", f"m = {pm.mass:~P}")):
        ax.text(cx, cy + r + spacing + i * step, text, ha='center', va='top',
                fontsize=LABEL_SIZE)


def _identity(p: Point2D, ship: BoxShip) -> Point2D:
    return p


def draw_ship(ax, mapping: CoordMapping, ship: BoxShip, transformation=_identity,
              show_metacenter: bool = True, show_buoyancy: bool = True):
    """
    Draw the hull section, its waterline and G (and optionally B, M).

    transformation(p, ship) is applied to every point before mapping, e.g.
    to_ship_coordinates to draw the hull upright with the water heeling.
    """
    pts = [mapping.remap(transformation(p, ship)) for p in corners(ship)]

    def segment(a, b, color, style='-'):
        ax.plot([a[0], b[0]], [a[1], b[1]], linestyle=style, color=color, linewidth=1.5)

    segment(pts[0], pts[1], HULL_COLOR)
    segment(pts[1], pts[2], HULL_COLOR)
    segment(pts[3], pts[0], HULL_COLOR)
    segment(pts[2], pts[3], DECK_COLOR)

    draw_point(ax, transformation(gravity_center(ship), ship), mapping, label="G")

    if show_metacenter or show_buoyancy:
        M = transformation(metacenter(ship), ship)
        B = transformation(buoyancy_center(ship), ship)
        if show_metacenter:
            draw_point(ax, M, mapping, label="M")
        if show_buoyancy:
            draw_point(ax, B, mapping, hue=BUOYANCY_COLOR, label="B")
        if show_metacenter and show_buoyancy:
            segment(mapping.remap(M), mapping.remap(B), HULL_COLOR, style=':')

    wl = [mapping.remap(transformation(p, ship)) for p in waterline(ship)]
    segment(wl[0], wl[1], WATERLINE_COLOR)
    return ax


def save_diagram(fig, output_path):
    """Write a figure to disk and release it."""
    fig.savefig(output_path, dpi=DPI)
    plt.close(fig)
