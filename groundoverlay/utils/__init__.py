# -*- coding: utf-8 -*-
"""Helpers shared by the geometry engine and the command line tools."""

from .geodesy import DistanceFn, GeodesicDistance, geodesic_distance, from_config

__all__ = [
    "DistanceFn",
    "GeodesicDistance",
    "geodesic_distance",
    "from_config",
]
