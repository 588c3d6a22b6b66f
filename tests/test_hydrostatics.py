import math

import pytest

from archimedes.errors import DegenerateConfigurationError
from archimedes.physics.box_ship import BoxShip, to_local
from archimedes.physics.hydrostatics import (
    buoyancy_center,
    carene_area,
    compute_hydrostatics,
    gravity_center,
    metacenter,
    metacentric_radius,
)
from archimedes.units import meters, square_meters

BM_UPRIGHT = 5.0 ** 3 / 12 / (5.0 * 2.0)


def test_gravity_center_upright(upright_ship):
    assert gravity_center(upright_ship).as_tuple() == pytest.approx((0.0, -0.5))


def test_gravity_center_heeled():
    ship = BoxShip(5.0, 3.0, 2.0, 1.5, heel=0.2, vshift=0.1)
    x, y = gravity_center(ship).as_tuple()
    assert x == pytest.approx(0.5 * math.sin(0.2))
    assert y == pytest.approx(-0.5 * math.cos(0.2) + 0.1)


def test_buoyancy_center_upright(upright_ship):
    x, y = buoyancy_center(upright_ship).as_tuple()
    assert x == pytest.approx(0.0, abs=1e-12)
    assert y == pytest.approx(-1.0)


def test_buoyancy_moves_to_low_side():
    # Positive heel lifts the starboard (+x) side
    ship = BoxShip(5.0, 3.0, 2.0, 1.5, heel=0.1)
    assert meters(buoyancy_center(ship).x) < 0


def test_metacentric_radius_upright(upright_ship):
    assert meters(metacentric_radius(upright_ship)) == pytest.approx(BM_UPRIGHT)


def test_metacenter_upright(upright_ship):
    x, y = metacenter(upright_ship).as_tuple()
    assert x == pytest.approx(0.0, abs=1e-12)
    assert y == pytest.approx(-1.0 + BM_UPRIGHT)


@pytest.mark.parametrize("heel", [0.0, 0.05, -0.1, 0.25])
def test_metacenter_above_buoyancy(heel):
    ship = BoxShip(5.0, 3.0, 2.0, 1.5, heel=heel)
    m_local = to_local(metacenter(ship), ship)
    b_local = to_local(buoyancy_center(ship), ship)
    assert m_local.y > b_local.y
    bm = meters(metacentric_radius(ship))
    assert meters(m_local.y - b_local.y) == pytest.approx(bm * math.cos(heel))


def test_degenerate_draft():
    ship = BoxShip(5.0, 3.0, 1e-14, 1.5)
    assert square_meters(carene_area(ship)) < 1e-12
    with pytest.raises(DegenerateConfigurationError):
        buoyancy_center(ship)
    with pytest.raises(DegenerateConfigurationError):
        metacentric_radius(ship)
    with pytest.raises(DegenerateConfigurationError):
        metacenter(ship)


def test_compute_hydrostatics(upright_ship):
    result = compute_hydrostatics(upright_ship)

    assert result["carene_area_m2"] == pytest.approx(10.0)
    assert result["KB_m"] == pytest.approx(1.0)
    assert result["BM_m"] == pytest.approx(BM_UPRIGHT, abs=1e-6)
    assert result["KM_m"] == pytest.approx(1.0 + BM_UPRIGHT, abs=1e-6)
    assert result["GM_m"] == pytest.approx(1.0 + BM_UPRIGHT - 1.5, abs=1e-6)
    assert len(result["corners"]) == 4
    assert len(result["carene"]) == 4
    assert result["B"] == {"x": pytest.approx(0.0, abs=1e-9), "y": pytest.approx(-1.0)}
    assert result["G_ship"]["y"] == pytest.approx(0.0)
    assert result["pose"]["heel_deg"] == 0.0
