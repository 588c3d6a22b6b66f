"""Pytest configuration and shared fixtures."""
import matplotlib

matplotlib.use("Agg")

import pytest

from archimedes.physics.box_ship import BoxShip


@pytest.fixture
def upright_ship():
    """5 m wide, 3 m high box floating upright at 2 m draft, KG 1.5 m."""
    return BoxShip(width=5.0, height=3.0, draft=2.0, KG=1.5, heel=0.0)
