from __future__ import annotations

import logging
import math

import numpy as np
import pytest

from groundoverlay.core import OverlayGeometry
from groundoverlay.utils.geodesy import geodesic_distance


def test_fast_path_contains_excludes_boundary(square: OverlayGeometry) -> None:
    assert square.contains(5, 5)
    assert not square.contains(15, 5)
    for lon, lat in [(0, 5), (10, 5), (5, 0), (5, 10)]:
        assert not square.contains(lon, lat)
    # fast path never builds the transform
    assert not square.is_cached


def test_metric_size_uses_upper_and_left_edges(square: OverlayGeometry) -> None:
    size = square.metric_size()
    assert size.width == pytest.approx(geodesic_distance((0, 10), (10, 10)))
    assert size.height == pytest.approx(geodesic_distance((0, 10), (0, 0)))


def test_distance_straight_right(square: OverlayGeometry) -> None:
    w = square.metric_size().width
    d = square.distance_from(15, 5)

    assert d == pytest.approx(w / 2, rel=1e-5)
    # roughly five degrees of longitude at latitude 5
    assert d == pytest.approx(geodesic_distance((10, 5), (15, 5)), rel=0.02)


def test_distance_regions(square: OverlayGeometry) -> None:
    w, h = square.metric_size().as_tuple()

    assert square.distance_from(5, 5) == 0.0
    assert square.distance_from(-5, 5) == pytest.approx(w / 2, rel=1e-5)
    assert square.distance_from(5, 15) == pytest.approx(h / 2, rel=1e-5)
    assert square.distance_from(5, -5) == pytest.approx(h / 2, rel=1e-5)
    assert square.distance_from(-5, 15) == pytest.approx(math.hypot(w / 2, h / 2), rel=1e-5)
    assert square.distance_from(-5, -5) == pytest.approx(math.hypot(w / 2, h / 2), rel=1e-5)
    assert square.distance_from(20, 15) == pytest.approx(math.hypot(w, h / 2), rel=1e-5)
    assert square.distance_from(20, -10) == pytest.approx(math.hypot(w, h), rel=1e-5)


def test_distance_is_never_negative(square: OverlayGeometry) -> None:
    square.rotation = 20.0
    for lon in np.linspace(-15, 25, 17):
        for lat in np.linspace(-15, 25, 17):
            d = square.distance_from(float(lon), float(lat))
            assert d >= 0.0
            if square.contains(float(lon), float(lat)):
                assert d == 0.0


def test_boundary_point_distance_is_zero(square: OverlayGeometry) -> None:
    assert square.distance_from(0, 5) == pytest.approx(0.0, abs=0.1)
    assert square.distance_from(5, 0) == pytest.approx(0.0, abs=0.1)


def test_geometric_distance() -> None:
    assert OverlayGeometry.geometric_distance(3.0, -4.0) == 5.0


def test_area_km2(square: OverlayGeometry) -> None:
    size = square.metric_size()
    assert square.compute_area_km2() == pytest.approx(size.width * size.height / 1e6)


def test_corner_mode_matches_bounds(square: OverlayGeometry, square_corners: OverlayGeometry) -> None:
    assert square_corners.has_corner_tiepoints()
    assert square_corners.contains(5, 5)
    assert not square_corners.contains(15, 5)

    # bottom edge sits on the equator and is a little longer than the top
    top = geodesic_distance((0, 10), (10, 10))
    bottom = geodesic_distance((0, 0), (10, 0))
    size = square_corners.metric_size()
    assert size.width == pytest.approx((top + bottom) / 2)
    assert size.height == pytest.approx(square.metric_size().height)
    assert square_corners.compute_area_km2() == pytest.approx(square.compute_area_km2(), rel=1e-2)


def test_partial_corners_fall_back_to_bounds(square: OverlayGeometry) -> None:
    square.set_north_west_corner(100, 50)
    square.set_north_east_corner(110, 50)
    assert not square.has_corner_tiepoints()
    assert square.corners()[0] == (0.0, 10.0)
    assert square.contains(5, 5)


def test_skewed_corners(square_corners: OverlayGeometry) -> None:
    square_corners.set_north_east_corner(12, 10)
    square_corners.set_south_east_corner(12, 0)
    square_corners.set_north_west_corner(2, 10)

    # NW moved east: a point near the old NW corner is now outside
    assert not square_corners.contains(0.5, 9.5)
    assert square_corners.contains(11, 5)
    assert square_corners.distance_from(0.5, 9.5) > 0.0


def test_corner_mode_ignores_rotation(square_corners: OverlayGeometry) -> None:
    square_corners.rotation = 45.0
    assert square_corners.contains(0.5, 9.5)


def test_rotated_containment(square: OverlayGeometry) -> None:
    square.rotation = 45.0
    assert square.contains(5, 5)
    assert square.contains(5, 9.6)
    # corners swing out of the rectangle
    assert not square.contains(0.5, 9.5)
    assert not square.contains(9.5, 0.5)


def test_rotation_orientation(square: OverlayGeometry) -> None:
    square.rotation = 90.0
    w, h = square.metric_size().as_tuple()
    x, y = square.to_metric(5, 9.5)
    assert x == pytest.approx(w / 2 + 0.45 * h, rel=1e-4)
    assert y == pytest.approx(h / 2, rel=1e-4)


def test_mutation_invalidates_cache(square: OverlayGeometry) -> None:
    square.rotation = 10.0
    assert not square.contains(15, 5)
    assert square.is_cached
    first = square.transform()
    assert square.transform() is first

    square.east = 20.0
    assert not square.is_cached
    assert square.contains(15, 5)
    assert square.transform() is not first

    square.set_south_west_corner(0, 0)
    assert not square.is_cached


@pytest.mark.parametrize("attr, value, lon, lat", [
    ("north", 20.0, 5, 15),
    ("south", -10.0, 5, -5),
    ("west", -10.0, -5, 5),
    ("rotation", 45.0, 0.5, 9.5),
])
def test_each_mutator_changes_answers(square: OverlayGeometry, attr, value, lon, lat) -> None:
    square.rotation = 1e-9
    before = square.contains(lon, lat)
    setattr(square, attr, value)
    assert square.contains(lon, lat) != before


def test_metric_size_is_memoized() -> None:
    calls = []

    def flat(a, b):
        calls.append((a, b))
        return 1000.0

    geometry = OverlayGeometry(north=1, south=0, east=1, west=0, rotation=5.0, distance=flat)
    assert geometry.compute_area_km2() == pytest.approx(1.0)
    geometry.contains(0.5, 0.5)
    geometry.distance_from(3, 3)
    assert len(calls) == 2

    geometry.north = 2
    geometry.metric_size()
    assert len(calls) == 4


def test_clear_corners(square_corners: OverlayGeometry) -> None:
    square_corners.north, square_corners.east = 1.0, 1.0
    square_corners.clear_corners()
    assert not square_corners.has_corner_tiepoints()
    assert not square_corners.contains(5, 5)


def test_degenerate_footprint_does_not_raise(caplog) -> None:
    geometry = OverlayGeometry(north=5, south=5, east=10, west=0, rotation=30.0)
    with caplog.at_level(logging.WARNING):
        geometry.contains(5, 5)
        geometry.distance_from(5, 7)
    assert "Degenerate overlay footprint" in caplog.text
