#!/usr/bin/env python3
"""
Hydrostatic quantities of a box ship: G, B, M and BM.

The water plane is y=0 in the global frame. The carene (submerged polygon)
is recomputed from the ship on every call; nothing is cached.

Usage:
    from archimedes.physics.box_ship import BoxShip
    from archimedes.physics.hydrostatics import compute_hydrostatics

    ship = BoxShip(width=5.0, height=3.0, draft=2.0, KG=1.5)
    result = compute_hydrostatics(ship)
    # result = {
    #     "pose": {...},
    #     "carene_area_m2": 10.0,
    #     "B": {"x": ..., "y": ...},   # global frame, metres
    #     "BM_m": ..., "GM_m": ...,
    #     ...
    # }
"""

import math

from archimedes.errors import DegenerateConfigurationError
from archimedes.units import ZERO_LENGTH, meters, square_meters

from .box_ship import BoxShip, corners, to_global, to_local, to_ship_coordinates
from .carene import carene
from .point import Point2D
from .polygon import AREA_EPSILON, polygon_area, polygon_centroid


def gravity_center(ship: BoxShip) -> Point2D:
    """Center of gravity in the global frame."""
    return to_global(Point2D(ZERO_LENGTH, ship.KG - ship.draft), ship)


def buoyancy_center(ship: BoxShip) -> Point2D:
    """Center of buoyancy (centroid of the carene) in the global frame."""
    return polygon_centroid(carene(ship))


def carene_area(ship: BoxShip):
    """Submerged cross-section area (m² quantity)."""
    return polygon_area(carene(ship))


def metacentric_radius(ship: BoxShip):
    """
    Transverse metacentric radius BM = I / A.

    I = w³/12 is the second moment of the waterline, with w the horizontal
    distance between the two waterline crossings, and A the carene area
    standing in for displaced volume per unit length.
    """
    trap = carene(ship)
    w_wl = trap[-2].x - trap[-1].x
    area = polygon_area(trap)
    if square_meters(area) < AREA_EPSILON:
        raise DegenerateConfigurationError(
            f"Carene area {square_meters(area):.3e} m² is too small for BM"
        )
    return (w_wl ** 3 / 12) / area


def metacenter(ship: BoxShip) -> Point2D:
    """
    Transverse metacenter in the global frame.

    BM is applied from B along the ship's own vertical axis: the offset
    (BM sin(heel), BM cos(heel)) is added in the local frame before
    transforming back.
    """
    bm = metacentric_radius(ship)
    b_local = to_local(buoyancy_center(ship), ship)
    m_local = b_local + Point2D(bm * math.sin(ship.heel), bm * math.cos(ship.heel))
    return to_global(m_local, ship)


def compute_hydrostatics(ship: BoxShip) -> dict:
    """
    Evaluate all hydrostatic quantities for one floating configuration.

    Returns:
        Dictionary with (lengths in metres, areas in m²):
        - pose: heel and vshift
        - hull: width, height, draft, KG
        - corners / carene: lists of {"x", "y"} in the global frame
        - carene_area_m2
        - G, B, M: global frame points
        - G_ship, B_ship, M_ship: the same points in ship coordinates
        - KB_m, BM_m, KM_m, GM_m: heights above the keel along the ship axis
    """
    trap = carene(ship)
    area = polygon_area(trap)

    G = gravity_center(ship)
    B = buoyancy_center(ship)
    M = metacenter(ship)
    bm = meters(metacentric_radius(ship))

    # Heights above the keel, measured in the ship-local frame
    kb = meters(to_local(B, ship).y + ship.draft)
    km = meters(to_local(M, ship).y + ship.draft)
    kg = meters(ship.KG)

    return {
        "pose": ship.pose_dict(),
        "hull": {
            "width_m": meters(ship.width),
            "height_m": meters(ship.height),
            "draft_m": meters(ship.draft),
            "KG_m": kg,
        },
        "corners": [p.to_dict() for p in corners(ship)],
        "carene": [p.to_dict() for p in trap],
        "carene_area_m2": round(square_meters(area), 9),
        "G": G.to_dict(),
        "B": B.to_dict(),
        "M": M.to_dict(),
        "G_ship": to_ship_coordinates(G, ship).to_dict(),
        "B_ship": to_ship_coordinates(B, ship).to_dict(),
        "M_ship": to_ship_coordinates(M, ship).to_dict(),
        "KB_m": round(kb, 6),
        "BM_m": round(bm, 6),
        "KM_m": round(km, 6),
        "GM_m": round(km - kg, 6),
    }
