# -*- coding: utf-8 -*-
"""Tunables shared by the geometry engine."""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, Union

import yaml

PathLike = Union[str, Path]


@dataclass
class GeometryConfig:
    # Ellipsoid handed to pyproj.Geod for edge lengths
    ellipsoid: str = "WGS84"

    # |det| of the geo->metric matrix below this is reported as degenerate
    singular_tolerance: float = 1e-12

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def create_geometry_config(**overrides) -> GeometryConfig:
    """Create a GeometryConfig with selective overrides."""
    cfg = GeometryConfig()
    for key, value in overrides.items():
        if not hasattr(cfg, key):
            raise AttributeError(f"Unknown geometry config field: {key}")
        setattr(cfg, key, value)
    return cfg


def load_geometry_config(path: PathLike) -> GeometryConfig:
    """Read overrides from a YAML mapping; an empty file yields the defaults."""
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return create_geometry_config()
    if not isinstance(data, dict):
        raise ValueError(f"Geometry config {path} must contain a mapping, got {type(data).__name__}")
    return create_geometry_config(**data)


DEFAULT_CONFIG = GeometryConfig()

__all__ = [
    "GeometryConfig",
    "DEFAULT_CONFIG",
    "create_geometry_config",
    "load_geometry_config",
]
