from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from groundoverlay.core import OverlayGeometry


@pytest.fixture
def square() -> OverlayGeometry:
    """Axis-aligned 10x10 degree footprint north of the equator."""
    return OverlayGeometry(north=10, south=0, east=10, west=0)


@pytest.fixture
def square_corners() -> OverlayGeometry:
    """Same footprint as ``square`` expressed through corner points."""
    geometry = OverlayGeometry()
    geometry.set_north_west_corner(0, 10)
    geometry.set_north_east_corner(10, 10)
    geometry.set_south_east_corner(10, 0)
    geometry.set_south_west_corner(0, 0)
    return geometry
