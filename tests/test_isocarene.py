import math

import numpy as np
import pytest

from archimedes.errors import ConvergenceError, DegenerateConfigurationError, InvalidGeometryError
from archimedes.isocarene import isocarene, area_is_monotonic, DEFAULT_MAX_ITERATIONS
from archimedes.physics.box_ship import BoxShip
from archimedes.physics.hydrostatics import carene_area
from archimedes.units import meters, square_meters


def relative_area_error(ship, ship0):
    a0 = square_meters(carene_area(ship0))
    return abs(square_meters(carene_area(ship)) - a0) / a0


def test_upright_to_heeled_keeps_area(upright_ship):
    ship = isocarene(upright_ship, 0.1)
    assert ship.heel == pytest.approx(0.1)
    assert relative_area_error(ship, upright_ship) < 1e-8
    # A wall-sided box heels about the centerline without sinking
    assert meters(ship.vshift) == pytest.approx(0.0, abs=1e-9)


@pytest.mark.parametrize("delta", [0.05, -0.05, 0.12, -0.2])
def test_isocarene_area_invariance(delta):
    ship0 = BoxShip(5.0, 3.0, 2.0, 1.5, heel=0.1, vshift=0.3)
    ship = isocarene(ship0, delta)

    assert ship.heel == pytest.approx(0.1 + delta)
    assert relative_area_error(ship, ship0) < 1e-8
    assert ship.width == ship0.width
    assert ship.draft == ship0.draft
    assert ship.KG == ship0.KG


@pytest.mark.parametrize("ship0", [
    BoxShip(5.0, 3.0, 2.0, 1.5, heel=0.0, vshift=-0.1),
    BoxShip(5.0, 3.0, 2.0, 1.5, heel=0.0, vshift=-0.3),
    BoxShip(5.0, 3.0, 2.0, 1.5, heel=0.1, vshift=-0.3),
    # Freeboard of 0.8 m is less than half the draft
    BoxShip(5.0, 2.8, 2.0, 1.5, heel=0.0, vshift=-0.2),
])
@pytest.mark.parametrize("delta", [0.05, -0.05])
def test_isocarene_sunk_reference(ship0, delta):
    # The first trial below vshift=0 puts the deck edge under water
    ship = isocarene(ship0, delta)

    assert relative_area_error(ship, ship0) < 1e-8
    expected = meters(ship0.vshift) * math.cos(ship0.heel + delta) / math.cos(ship0.heel)
    assert meters(ship.vshift) == pytest.approx(expected, rel=1e-6)


def test_wet_deck_trial_steers_bracket(capsys):
    ship0 = BoxShip(5.0, 3.0, 2.0, 1.5, heel=0.0, vshift=-0.1)
    isocarene(ship0, 0.05, verbose=True)
    assert "1 corners above, 3 below" in capsys.readouterr().out


def test_isocarene_vshift_for_wall_sided_box():
    # Area of a wall-sided box is width * (draft - vshift / cos(heel))
    ship0 = BoxShip(5.0, 3.0, 2.0, 1.5, heel=0.1, vshift=0.3)
    ship = isocarene(ship0, 0.05)
    expected = 0.3 * math.cos(0.15) / math.cos(0.1)
    assert meters(ship.vshift) == pytest.approx(expected, rel=1e-6)


def test_non_convergence():
    # The reference sits 3 m deeper than the design draft, so the target
    # area is out of reach for vshift in [-draft, +draft].
    ship0 = BoxShip(5.0, 10.0, 1.0, 1.5, heel=0.0, vshift=-3.0)
    with pytest.raises(ConvergenceError) as excinfo:
        isocarene(ship0, 0.05)
    assert excinfo.value.iterations == DEFAULT_MAX_ITERATIONS
    assert excinfo.value.last_relative_error > 1e-8


def test_small_iteration_budget():
    ship0 = BoxShip(5.0, 3.0, 2.0, 1.5, heel=0.1, vshift=0.3)
    with pytest.raises(ConvergenceError):
        isocarene(ship0, 0.05, max_iterations=3)


def test_loose_tolerance_converges_sooner():
    ship0 = BoxShip(5.0, 3.0, 2.0, 1.5, heel=0.1, vshift=0.3)
    ship = isocarene(ship0, 0.05, tolerance=1e-2)
    assert relative_area_error(ship, ship0) < 1e-2


def test_heel_past_two_by_two_range_does_not_converge(upright_ship):
    # At 0.6 rad the upright area is only reachable with three corners wet,
    # so bisection closes on the edge of the two-by-two range
    with pytest.raises(ConvergenceError) as excinfo:
        isocarene(upright_ship, 0.6)
    assert excinfo.value.last_relative_error > 1e-8


def test_invalid_reference_propagates():
    ship0 = BoxShip(5.0, 3.0, 2.0, 1.5, heel=0.6)
    with pytest.raises(InvalidGeometryError):
        isocarene(ship0, 0.05)


def test_degenerate_reference():
    ship0 = BoxShip(5.0, 3.0, 1e-14, 1.5)
    with pytest.raises(DegenerateConfigurationError):
        isocarene(ship0, 0.1)


def test_verbose_progress(upright_ship, capsys):
    isocarene(upright_ship, 0.1, verbose=True)
    out = capsys.readouterr().out
    assert "Iteration 0" in out
    assert "Converged after 1 iterations" in out


@pytest.mark.parametrize("heel", [0.0, 0.1, 0.2, -0.15])
def test_area_monotonic_in_vshift(heel):
    ship = BoxShip(5.0, 3.0, 2.0, 1.5, heel=heel)
    assert area_is_monotonic(ship, np.linspace(-0.3, 0.3, 21))


def test_area_decreases_when_hull_rises():
    ship = BoxShip(5.0, 3.0, 2.0, 1.5, heel=0.1)
    low = square_meters(carene_area(ship.with_pose(0.1, -0.2)))
    high = square_meters(carene_area(ship.with_pose(0.1, 0.2)))
    assert low > high
