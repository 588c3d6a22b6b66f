"""Iso-carene (constant displacement) configurations of a heeled box ship."""

from .solve import isocarene, area_is_monotonic, DEFAULT_MAX_ITERATIONS, DEFAULT_TOLERANCE
from .curve import compute_isocarene_curve, compute_gm_from_curve

__all__ = [
    "isocarene",
    "area_is_monotonic",
    "compute_isocarene_curve",
    "compute_gm_from_curve",
    "DEFAULT_MAX_ITERATIONS",
    "DEFAULT_TOLERANCE",
]
