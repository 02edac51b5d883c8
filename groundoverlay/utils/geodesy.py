# -*- coding: utf-8 -*-
"""Geodesic edge lengths on the ellipsoid."""

from __future__ import annotations

from typing import Callable, Tuple

from pyproj import Geod

__all__ = [
    "DistanceFn",
    "GeodesicDistance",
    "geodesic_distance",
    "from_config",
]

LonLat = Tuple[float, float]
DistanceFn = Callable[[LonLat, LonLat], float]


class GeodesicDistance:
    """Callable returning the geodesic distance in meters between two (lon, lat) points."""

    def __init__(self, ellipsoid: str = "WGS84"):
        self.ellipsoid = ellipsoid
        self._geod = Geod(ellps=ellipsoid)

    def __call__(self, point_a: LonLat, point_b: LonLat) -> float:
        _, _, dist = self._geod.inv(point_a[0], point_a[1], point_b[0], point_b[1])
        return float(dist)

    def __repr__(self) -> str:
        return f"GeodesicDistance(ellipsoid={self.ellipsoid!r})"


_WGS84 = GeodesicDistance("WGS84")


def geodesic_distance(point_a: LonLat, point_b: LonLat) -> float:
    return _WGS84(point_a, point_b)


def from_config(config) -> DistanceFn:
    """Provider for the ellipsoid named by a GeometryConfig."""
    if config.ellipsoid == _WGS84.ellipsoid:
        return _WGS84
    return GeodesicDistance(config.ellipsoid)
