# -*- coding: utf-8 -*-
"""Tiepoints: manual geo <-> pixel correspondences attached to an overlay.

Each tiepoint persists as four big-endian signed 32-bit integers:
latitude E6, longitude E6, image x, image y.
"""

from __future__ import annotations

from typing import BinaryIO, Iterator, List, Optional, Tuple

import numpy as np

from .types import GeoPoint, ImagePoint

__all__ = ["Tiepoint", "TiepointSet", "RECORD_DTYPE", "RECORD_SIZE"]

RECORD_DTYPE = np.dtype(">i4")
RECORD_SIZE = 4 * RECORD_DTYPE.itemsize


def _require(point, what: str):
    if point is None:
        raise ValueError(f"Null {what} is not allowed in Tiepoint")
    return point


class Tiepoint:
    __slots__ = ("_geo_point", "_image_point")

    def __init__(self, geo_point: GeoPoint, image_point: ImagePoint):
        self._geo_point = _require(geo_point, "geo point")
        self._image_point = _require(image_point, "image point")

    @property
    def geo_point(self) -> GeoPoint:
        return self._geo_point

    @geo_point.setter
    def geo_point(self, value: GeoPoint) -> None:
        self._geo_point = _require(value, "geo point")

    @property
    def image_point(self) -> ImagePoint:
        return self._image_point

    @image_point.setter
    def image_point(self, value: ImagePoint) -> None:
        self._image_point = _require(value, "image point")

    def __eq__(self, other) -> bool:
        if not isinstance(other, Tiepoint):
            return NotImplemented
        return self._geo_point == other._geo_point and self._image_point == other._image_point

    def __hash__(self) -> int:
        return hash(self._geo_point) ^ hash(self._image_point)

    def __repr__(self) -> str:
        return f"Tiepoint(geo_point={self._geo_point!r}, image_point={self._image_point!r})"

    # --------------------- fixed-point codec ---------------------
    def to_fields(self) -> Tuple[int, int, int, int]:
        g, p = self._geo_point, self._image_point
        return (g.latitude_e6, g.longitude_e6, p.x, p.y)

    @classmethod
    def from_fields(cls, latitude_e6: int, longitude_e6: int, x: int, y: int) -> "Tiepoint":
        return cls(GeoPoint(int(latitude_e6), int(longitude_e6)), ImagePoint(int(x), int(y)))

    def to_bytes(self) -> bytes:
        return np.array(self.to_fields(), dtype=RECORD_DTYPE).tobytes()

    @classmethod
    def from_bytes(cls, data: bytes) -> "Tiepoint":
        if len(data) != RECORD_SIZE:
            raise ValueError(f"Tiepoint record must be {RECORD_SIZE} bytes, got {len(data)}")
        return cls.from_fields(*np.frombuffer(data, dtype=RECORD_DTYPE, count=4).tolist())

    def write_to(self, stream: BinaryIO) -> None:
        stream.write(self.to_bytes())

    @classmethod
    def read_from(cls, stream: BinaryIO) -> "Tiepoint":
        data = stream.read(RECORD_SIZE)
        if len(data) != RECORD_SIZE:
            raise EOFError(f"Truncated tiepoint record ({len(data)} of {RECORD_SIZE} bytes)")
        return cls.from_bytes(data)


class TiepointSet:
    """Insertion-ordered tiepoints without duplicates (by value)."""

    def __init__(self):
        self._items: Optional[List[Tiepoint]] = None

    def add(self, tiepoint: Tiepoint) -> bool:
        """Add a tiepoint; returns False if an equal one is already present."""
        if tiepoint is None:
            raise ValueError("Null tiepoints are not allowed")
        if self._items is None:
            self._items = []
        elif tiepoint in self._items:
            return False
        self._items.append(tiepoint)
        return True

    def remove(self, tiepoint: Tiepoint) -> bool:
        if self._items is None:
            return False
        try:
            self._items.remove(tiepoint)
        except ValueError:
            return False
        return True

    def clear(self) -> None:
        if self._items is not None:
            self._items.clear()

    def __iter__(self) -> Iterator[Tiepoint]:
        # snapshot, callers cannot reach the backing list
        return iter(tuple(self._items or ()))

    def __len__(self) -> int:
        return len(self._items) if self._items is not None else 0

    def __contains__(self, tiepoint) -> bool:
        return self._items is not None and tiepoint in self._items

    def __repr__(self) -> str:
        return f"TiepointSet({list(self)!r})"

    def to_bytes(self) -> bytes:
        if not self:
            return b""
        fields = np.array([tp.to_fields() for tp in self], dtype=RECORD_DTYPE)
        return fields.tobytes()

    @classmethod
    def from_bytes(cls, data: bytes) -> "TiepointSet":
        if len(data) % RECORD_SIZE:
            raise ValueError(f"Tiepoint payload of {len(data)} bytes is not a multiple of {RECORD_SIZE}")
        out = cls()
        rows = np.frombuffer(data, dtype=RECORD_DTYPE).reshape(-1, 4)
        for lat_e6, lon_e6, x, y in rows.tolist():
            out.add(Tiepoint.from_fields(lat_e6, lon_e6, x, y))
        return out
