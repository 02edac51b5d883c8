# -*- coding: utf-8 -*-
"""Geographic quadrilateral -> metric rectangle mapping."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import cv2
import numpy as np

from .types import LonLat, MetricSize

__all__ = ["QuadToRectTransform", "rect_corners", "rotation_about"]


def rect_corners(size: MetricSize) -> np.ndarray:
    """Destination corners (0,0), (w,0), (w,h), (0,h)."""
    w, h = float(size.width), float(size.height)
    return np.array([[0, 0], [w, 0], [w, h], [0, h]], np.float32)


def rotation_about(angle_deg: float, cx: float, cy: float) -> np.ndarray:
    """3x3 rotation about (cx, cy); positive angles turn +x toward +y (y axis pointing down)."""
    # cv2 measures angles the other way round
    R = cv2.getRotationMatrix2D((float(cx), float(cy)), -float(angle_deg), 1.0)
    return np.vstack([R, [0.0, 0.0, 1.0]])


@dataclass(frozen=True, eq=False)
class QuadToRectTransform:
    """Homography taking (lon, lat) to meters with (0,0) at the NW corner.

    ``matrix`` acts on coordinates relative to ``origin``; the offset is
    removed in double precision before the matrix is applied, since the
    OpenCV solver only accepts single precision corners.
    """

    matrix: np.ndarray
    origin: Tuple[float, float]
    size: MetricSize
    rotation_deg: float = 0.0

    @classmethod
    def from_quad(cls, quad: Sequence[LonLat], size: MetricSize,
                  rotation_deg: float = 0.0,
                  origin: Optional[LonLat] = None) -> "QuadToRectTransform":
        """Build the map for corners ordered NW, NE, SE, SW."""
        src = np.asarray(quad, np.float64).reshape(4, 2)
        org = src[0] if origin is None else np.asarray(origin, np.float64).reshape(2)
        rel = (src - org[None, :]).astype(np.float32)
        H = cv2.getPerspectiveTransform(rel, rect_corners(size)).astype(np.float64)
        if rotation_deg != 0:
            H = rotation_about(rotation_deg, size.width / 2.0, size.height / 2.0) @ H
        return cls(matrix=H, origin=(float(org[0]), float(org[1])),
                   size=size, rotation_deg=float(rotation_deg))

    def map_points(self, points) -> np.ndarray:
        pts = np.asarray(points, np.float64).reshape(-1, 1, 2) - np.asarray(self.origin, np.float64)
        out = cv2.perspectiveTransform(pts, self.matrix)
        return out.reshape(-1, 2)

    def map_point(self, longitude: float, latitude: float) -> Tuple[float, float]:
        x, y = self.map_points([[longitude, latitude]])[0]
        return float(x), float(y)

    def is_singular(self, tolerance: float = 1e-12) -> bool:
        det = float(np.linalg.det(self.matrix))
        if not np.isfinite(det) or abs(det) < tolerance:
            logging.debug("geo->metric determinant %s below tolerance %s", det, tolerance)
            return True
        return False
