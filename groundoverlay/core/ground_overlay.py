# -*- coding: utf-8 -*-
"""Ground overlay: an image draped over a geographic footprint."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Union

from .overlay_geometry import OverlayGeometry
from .tiepoints import Tiepoint, TiepointSet
from .types import LonLat

__all__ = ["SourceRef", "GroundOverlay"]

PathLike = Union[str, Path]


class SourceRef:
    """Identity of the container (e.g. a KML/KMZ file) an overlay was read from.

    Compared by canonical path only; ``label`` is free text for diagnostics.
    """

    __slots__ = ("path", "label")

    def __init__(self, path: PathLike, label: Optional[str] = None):
        self.path = Path(path).expanduser().resolve()
        self.label = label

    def __eq__(self, other) -> bool:
        if not isinstance(other, SourceRef):
            return NotImplemented
        return self.path == other.path

    def __hash__(self) -> int:
        return hash(self.path)

    def __str__(self) -> str:
        if self.label:
            return f"SourceRef[path={self.path}, label={self.label}]"
        return f"SourceRef[path={self.path}]"

    __repr__ = __str__


class GroundOverlay:
    """
    Overlay entity: identity (source + image), name/description, footprint
    geometry and tiepoints.

    Two overlays are equal when they use the same image and come from the
    same source; name, description, footprint and tiepoints are ignored.
    """

    def __init__(self, source: SourceRef, image: str,
                 name: Optional[str] = None, description: Optional[str] = None,
                 geometry: Optional[OverlayGeometry] = None):
        self.source = source
        self.image = image
        self.name = name
        self.description = description
        self.geometry = geometry if geometry is not None else OverlayGeometry()
        self._tiepoints = TiepointSet()

    # --------------------- footprint ---------------------
    @property
    def north(self) -> float:
        return self.geometry.north

    @north.setter
    def north(self, value: float) -> None:
        self.geometry.north = value

    @property
    def south(self) -> float:
        return self.geometry.south

    @south.setter
    def south(self, value: float) -> None:
        self.geometry.south = value

    @property
    def east(self) -> float:
        return self.geometry.east

    @east.setter
    def east(self, value: float) -> None:
        self.geometry.east = value

    @property
    def west(self) -> float:
        return self.geometry.west

    @west.setter
    def west(self, value: float) -> None:
        self.geometry.west = value

    @property
    def rotation(self) -> float:
        return self.geometry.rotation

    @rotation.setter
    def rotation(self, value: float) -> None:
        self.geometry.rotation = value

    def set_bounds(self, north: float, south: float, east: float, west: float,
                   rotation: Optional[float] = None) -> None:
        g = self.geometry
        g.north, g.south, g.east, g.west = north, south, east, west
        if rotation is not None:
            g.rotation = rotation

    @property
    def north_east_corner(self) -> Optional[LonLat]:
        return self.geometry.north_east_corner

    def set_north_east_corner(self, longitude: float, latitude: float) -> None:
        self.geometry.set_north_east_corner(longitude, latitude)

    @property
    def south_east_corner(self) -> Optional[LonLat]:
        return self.geometry.south_east_corner

    def set_south_east_corner(self, longitude: float, latitude: float) -> None:
        self.geometry.set_south_east_corner(longitude, latitude)

    @property
    def south_west_corner(self) -> Optional[LonLat]:
        return self.geometry.south_west_corner

    def set_south_west_corner(self, longitude: float, latitude: float) -> None:
        self.geometry.set_south_west_corner(longitude, latitude)

    @property
    def north_west_corner(self) -> Optional[LonLat]:
        return self.geometry.north_west_corner

    def set_north_west_corner(self, longitude: float, latitude: float) -> None:
        self.geometry.set_north_west_corner(longitude, latitude)

    def has_corner_tiepoints(self) -> bool:
        return self.geometry.has_corner_tiepoints()

    # --------------------- queries ---------------------
    def contains(self, longitude: float, latitude: float) -> bool:
        return self.geometry.contains(longitude, latitude)

    def distance_from(self, longitude: float, latitude: float) -> float:
        return self.geometry.distance_from(longitude, latitude)

    def compute_area_km2(self) -> float:
        return self.geometry.compute_area_km2()

    # --------------------- tiepoints ---------------------
    def tiepoints(self) -> Iterable[Tiepoint]:
        return iter(self._tiepoints)

    def add_tiepoint(self, tiepoint: Tiepoint) -> bool:
        """Add a tiepoint unless an equal one exists; returns True if added."""
        return self._tiepoints.add(tiepoint)

    def remove_tiepoint(self, tiepoint: Tiepoint) -> bool:
        return self._tiepoints.remove(tiepoint)

    def clear_tiepoints(self) -> None:
        self._tiepoints.clear()

    def tiepoint_count(self) -> int:
        return len(self._tiepoints)

    def encode_tiepoints(self) -> bytes:
        return self._tiepoints.to_bytes()

    def decode_tiepoints(self, data: bytes) -> None:
        """Replace the tiepoints with those decoded from ``data``."""
        self._tiepoints = TiepointSet.from_bytes(data)

    # --------------------- identity ---------------------
    def __eq__(self, other) -> bool:
        if not isinstance(other, GroundOverlay):
            return NotImplemented
        return self.image == other.image and self.source == other.source

    def __hash__(self) -> int:
        return hash((self.image, self.source))

    def __str__(self) -> str:
        return ("GroundOverlay[name='%s', description=%s, image=%s, "
                "north=%.6g, south=%.6g, east=%.6g, west=%.6g, rotation=%.6g] (%s)"
                % (self.name, self.description, self.image,
                   self.north, self.south, self.east, self.west, self.rotation, self.source))

    __repr__ = __str__
