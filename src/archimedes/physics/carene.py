"""
Carene extraction: clip the heeled rectangle against the water half-plane.

The submerged polygon is built from the two hull corners below the waterline
and the two points where the hull sides cross y=0. Its vertex order is
[below corners by ascending x..., right crossing, left crossing], which keeps
the fan triangulation from the vertex centroid free of overlaps.
"""

from archimedes.errors import InvalidGeometryError
from archimedes.units import ZERO_LENGTH

from .box_ship import BoxShip, corners
from .point import Point2D


def waterline_intersect(p1: Point2D, p2: Point2D) -> Point2D:
    """Point where the line through p1 and p2 crosses y=0."""
    if p1.y == p2.y:
        raise InvalidGeometryError(
            f"Segment {p1.as_tuple()} -> {p2.as_tuple()} does not cross the waterline"
        )
    r = (p2.x - p1.x) / (p2.y - p1.y)
    return Point2D(-p1.y * r + p1.x, ZERO_LENGTH)


def _crossing(ship_pts, index, below, preferred_step):
    n = len(ship_pts)
    for step in (preferred_step, -preferred_step):
        neighbour = (index + step) % n
        if neighbour in below:
            return waterline_intersect(ship_pts[index], ship_pts[neighbour])
    raise InvalidGeometryError(
        f"Corner {index} is above the waterline but has no submerged neighbour"
    )


def waterline_split(ship: BoxShip) -> tuple[list, list]:
    """Indices of the hull corners strictly above and strictly below y=0."""
    ship_pts = corners(ship)
    above = [i for i, p in enumerate(ship_pts) if p.y > ZERO_LENGTH]
    below = [i for i, p in enumerate(ship_pts) if p.y < ZERO_LENGTH]
    return above, below


def carene(ship: BoxShip) -> tuple:
    """
    Ordered submerged cross-section of the hull.

    Only configurations with exactly two corners on each side of the
    waterline are supported; anything else raises InvalidGeometryError.
    """
    ship_pts = corners(ship)
    above, below = waterline_split(ship)
    if len(above) != 2 or len(below) != 2:
        raise InvalidGeometryError(
            f"Expected two corners above and two below the waterline, got "
            f"{len(above)} above and {len(below)} below "
            f"(heel={ship.heel:.4f} rad, vshift={ship.vshift:~P})"
        )

    # sorted() is stable, so equal x keeps corner order
    above.sort(key=lambda i: ship_pts[i].x)
    below.sort(key=lambda i: ship_pts[i].x)

    wl_left = _crossing(ship_pts, above[0], below, +1)
    wl_right = _crossing(ship_pts, above[-1], below, -1)

    return tuple(ship_pts[i] for i in below) + (wl_right, wl_left)
