# -*- coding: utf-8 -*-
"""
Footprint of a ground overlay: bounds + rotation, or four corner points.

The metric size and the geo->metric transform are derived lazily and cached
as a pair; every mutator clears both. Longitudes spanning 180 degrees and
footprints covering a pole are not handled.
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Tuple

from .geometry_config import GeometryConfig, DEFAULT_CONFIG
from .transform import QuadToRectTransform
from .types import LonLat, MetricSize
from ..utils.geodesy import DistanceFn, from_config

__all__ = ["OverlayGeometry"]


class OverlayGeometry:
    def __init__(self, north: float = 0.0, south: float = 0.0,
                 east: float = 0.0, west: float = 0.0, rotation: float = 0.0,
                 distance: Optional[DistanceFn] = None,
                 config: GeometryConfig = DEFAULT_CONFIG):
        self.config = config
        self._distance = distance if distance is not None else from_config(config)
        self._north = float(north)
        self._south = float(south)
        self._east = float(east)
        self._west = float(west)
        self._rotation = float(rotation)

        self._ne: Optional[LonLat] = None
        self._se: Optional[LonLat] = None
        self._sw: Optional[LonLat] = None
        self._nw: Optional[LonLat] = None

        # cache, always set and cleared together
        self._transform: Optional[QuadToRectTransform] = None
        self._metric_size: Optional[MetricSize] = None

    def _invalidate(self) -> None:
        self._transform = None
        self._metric_size = None

    @property
    def is_cached(self) -> bool:
        return self._transform is not None

    # --------------------- bounds ---------------------
    @property
    def north(self) -> float:
        return self._north

    @north.setter
    def north(self, value: float) -> None:
        self._north = float(value)
        self._invalidate()

    @property
    def south(self) -> float:
        return self._south

    @south.setter
    def south(self, value: float) -> None:
        self._south = float(value)
        self._invalidate()

    @property
    def east(self) -> float:
        return self._east

    @east.setter
    def east(self, value: float) -> None:
        self._east = float(value)
        self._invalidate()

    @property
    def west(self) -> float:
        return self._west

    @west.setter
    def west(self, value: float) -> None:
        self._west = float(value)
        self._invalidate()

    @property
    def rotation(self) -> float:
        """Rotation angle in degrees, 0 for none. Ignored in corner mode."""
        return self._rotation

    @rotation.setter
    def rotation(self, value: float) -> None:
        self._rotation = float(value)
        self._invalidate()

    # --------------------- corner points ---------------------
    @property
    def north_east_corner(self) -> Optional[LonLat]:
        return self._ne

    def set_north_east_corner(self, longitude: float, latitude: float) -> None:
        self._ne = (float(longitude), float(latitude))
        self._invalidate()

    @property
    def south_east_corner(self) -> Optional[LonLat]:
        return self._se

    def set_south_east_corner(self, longitude: float, latitude: float) -> None:
        self._se = (float(longitude), float(latitude))
        self._invalidate()

    @property
    def south_west_corner(self) -> Optional[LonLat]:
        return self._sw

    def set_south_west_corner(self, longitude: float, latitude: float) -> None:
        self._sw = (float(longitude), float(latitude))
        self._invalidate()

    @property
    def north_west_corner(self) -> Optional[LonLat]:
        return self._nw

    def set_north_west_corner(self, longitude: float, latitude: float) -> None:
        self._nw = (float(longitude), float(latitude))
        self._invalidate()

    def clear_corners(self) -> None:
        self._ne = self._se = self._sw = self._nw = None
        self._invalidate()

    def has_corner_tiepoints(self) -> bool:
        return (self._ne is not None and self._se is not None and
                self._sw is not None and self._nw is not None)

    def corners(self) -> List[LonLat]:
        """Source quadrilateral NW, NE, SE, SW."""
        if self.has_corner_tiepoints():
            return [self._nw, self._ne, self._se, self._sw]
        return [(self._west, self._north), (self._east, self._north),
                (self._east, self._south), (self._west, self._south)]

    # --------------------- derived ---------------------
    def metric_size(self) -> MetricSize:
        """Footprint (width, height) in meters."""
        if self._metric_size is None:
            self._build()
        return self._metric_size

    def transform(self) -> QuadToRectTransform:
        if self._transform is None:
            self._build()
        return self._transform

    def _compute_metric_size(self) -> MetricSize:
        dist = self._distance
        if not self.has_corner_tiepoints():
            upper_left = (self._west, self._north)
            width = dist(upper_left, (self._east, self._north))
            height = dist(upper_left, (self._west, self._south))
        else:
            # quad may be skewed, average opposite edges
            nw, ne, se, sw = self._nw, self._ne, self._se, self._sw
            width = (dist(nw, ne) + dist(sw, se)) / 2.0
            height = (dist(nw, sw) + dist(ne, se)) / 2.0
        return MetricSize(float(width), float(height))

    def _build(self) -> None:
        size = self._compute_metric_size()
        rotation = 0.0 if self.has_corner_tiepoints() else self._rotation
        transform = QuadToRectTransform.from_quad(self.corners(), size, rotation_deg=rotation)
        if transform.is_singular(self.config.singular_tolerance):
            logging.warning("[WARN] Degenerate overlay footprint %s (size %.3f x %.3f m)",
                            self.corners(), size.width, size.height)
        logging.debug("Rebuilt geo->metric transform, size %.3f x %.3f m", size.width, size.height)
        self._metric_size = size
        self._transform = transform

    def to_metric(self, longitude: float, latitude: float) -> Tuple[float, float]:
        return self.transform().map_point(longitude, latitude)

    # --------------------- queries ---------------------
    def contains(self, longitude: float, latitude: float) -> bool:
        """True if the location is strictly inside the footprint."""
        if not self.has_corner_tiepoints() and self._rotation == 0.0:
            return (self._west < longitude < self._east and
                    self._south < latitude < self._north)
        x, y = self.to_metric(longitude, latitude)
        size = self.metric_size()
        return 0 < x < size.width and 0 < y < size.height

    def distance_from(self, longitude: float, latitude: float) -> float:
        """Meters from the location to the footprint edge, 0 when inside."""
        if self.contains(longitude, latitude):
            return 0.0
        x, y = self.to_metric(longitude, latitude)
        w, h = self.metric_size().as_tuple()
        if x < 0:
            if y < 0:
                return self.geometric_distance(x, y)
            if y > h:
                return self.geometric_distance(x, y - h)
            return -x
        if x > w:
            if y < 0:
                return self.geometric_distance(x - w, y)
            if y > h:
                return self.geometric_distance(x - w, y - h)
            return x - w
        if y < 0:
            return -y
        # Points on the boundary land here with y <= h; clamp so the result stays >= 0.
        return max(0.0, y - h)

    @staticmethod
    def geometric_distance(dx: float, dy: float) -> float:
        return math.hypot(dx, dy)

    def compute_area_km2(self) -> float:
        """Approximate covered area in km^2, treating the footprint as a rectangle."""
        size = self.metric_size()
        return (size.width / 1000.0) * (size.height / 1000.0)

    def __repr__(self) -> str:
        if self.has_corner_tiepoints():
            return f"OverlayGeometry(corners={self.corners()})"
        return (f"OverlayGeometry(north={self._north}, south={self._south}, "
                f"east={self._east}, west={self._west}, rotation={self._rotation})")
