# groundoverlay/core/types.py
# -*- coding: utf-8 -*-

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

LonLat = Tuple[float, float]

E6 = 1_000_000


@dataclass(frozen=True)
class GeoPoint:
    """Geographic location stored as integer micro-degrees."""

    latitude_e6: int
    longitude_e6: int

    @classmethod
    def from_degrees(cls, latitude: float, longitude: float) -> "GeoPoint":
        # int() truncates toward zero
        return cls(int(latitude * E6), int(longitude * E6))

    @property
    def latitude(self) -> float:
        return self.latitude_e6 / E6

    @property
    def longitude(self) -> float:
        return self.longitude_e6 / E6

    def to_lonlat(self) -> LonLat:
        return (self.longitude, self.latitude)


@dataclass(frozen=True)
class ImagePoint:
    x: int
    y: int


@dataclass(frozen=True)
class MetricSize:
    # ==== meters ====
    width: float
    height: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.width, self.height)
