"""Matplotlib diagrams of box ship sections."""

from .diagrams import (
    CoordMapping,
    setup_diagram,
    draw_point,
    draw_point_mass,
    draw_ship,
    save_diagram,
)

__all__ = [
    "CoordMapping",
    "setup_diagram",
    "draw_point",
    "draw_point_mass",
    "draw_ship",
    "save_diagram",
]
