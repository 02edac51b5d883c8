# -*- coding: utf-8 -*-
"""Query a ground overlay footprint from the command line.

Usage:
    python tools/cli/query_overlay.py --bounds 10 0 10 0 --point 5 5 --point 15 5
    python tools/cli/query_overlay.py \
        --corners 0 10 10 10 10 0 0 0 \
        --points-csv points.csv --config geometry.yaml

Prints a JSON document with the footprint size, its area and, for every
query point, whether it lies inside the overlay and its distance in meters.
"""

from __future__ import annotations

import argparse
import csv
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from tqdm import tqdm


def find_project_root(start_dir: Path,
                      marker_rel: Path = Path("groundoverlay") / "core" / "__init__.py") -> Optional[Path]:
    cur = start_dir
    last = None
    while cur != last:
        if (cur / marker_rel).is_file():
            return cur
        last = cur
        cur = cur.parent
    return None


_THIS_DIR = Path(__file__).resolve().parent
_PROJECT_ROOT = find_project_root(_THIS_DIR)
if _PROJECT_ROOT is None:
    _PROJECT_ROOT = _THIS_DIR.parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


from groundoverlay.core import (
    DEFAULT_CONFIG,
    GeometryConfig,
    OverlayGeometry,
    load_geometry_config,
)


def read_points_csv(path: Path) -> List[Tuple[float, float]]:
    """Read lon,lat rows; a non-numeric first row is treated as a header."""
    points: List[Tuple[float, float]] = []
    with open(path, "r", encoding="utf-8", newline="") as f:
        for i, row in enumerate(csv.reader(f)):
            if not row or not "".join(row).strip():
                continue
            try:
                lon, lat = float(row[0]), float(row[1])
            except (ValueError, IndexError):
                if i == 0:
                    continue
                raise ValueError(f"{path}:{i + 1}: expected 'lon,lat', got {row!r}")
            points.append((lon, lat))
    return points


def build_geometry(args: argparse.Namespace, config: GeometryConfig) -> OverlayGeometry:
    if args.corners is not None:
        nw_lon, nw_lat, ne_lon, ne_lat, se_lon, se_lat, sw_lon, sw_lat = args.corners
        geometry = OverlayGeometry(config=config)
        geometry.set_north_west_corner(nw_lon, nw_lat)
        geometry.set_north_east_corner(ne_lon, ne_lat)
        geometry.set_south_east_corner(se_lon, se_lat)
        geometry.set_south_west_corner(sw_lon, sw_lat)
        return geometry
    north, south, east, west = args.bounds
    return OverlayGeometry(north=north, south=south, east=east, west=west,
                           rotation=args.rotation, config=config)


def query_points(geometry: OverlayGeometry, points: List[Tuple[float, float]],
                 progress: bool = False) -> List[Dict[str, Any]]:
    rows = []
    for lon, lat in tqdm(points, desc="[Query]", disable=not progress):
        rows.append({
            "lon": lon,
            "lat": lat,
            "contains": bool(geometry.contains(lon, lat)),
            "distance_m": float(geometry.distance_from(lon, lat)),
        })
    return rows


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Containment and distance queries against a ground overlay footprint.")
    footprint = ap.add_mutually_exclusive_group(required=True)
    footprint.add_argument("--bounds", nargs=4, type=float, metavar=("NORTH", "SOUTH", "EAST", "WEST"))
    footprint.add_argument("--corners", nargs=8, type=float,
                           metavar=("NW_LON", "NW_LAT", "NE_LON", "NE_LAT",
                                    "SE_LON", "SE_LAT", "SW_LON", "SW_LAT"))
    ap.add_argument("--rotation", type=float, default=0.0, help="Rotation in degrees (bounds only)")
    ap.add_argument("--point", nargs=2, type=float, action="append", default=[],
                    metavar=("LON", "LAT"), help="Query location, may be repeated")
    ap.add_argument("--points-csv", dest="points_csv", type=Path, help="CSV file of lon,lat rows")
    ap.add_argument("--config", type=Path, help="YAML file with geometry config overrides")
    ap.add_argument("--progress", action="store_true", help="Show a progress bar for point batches")
    ap.add_argument("--log", default="WARNING", help="Logging level")
    args = ap.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log.upper(), logging.WARNING),
                        format="%(levelname)s: %(message)s")

    if args.corners is not None and args.rotation != 0.0:
        ap.error("--rotation only applies to --bounds")

    config = load_geometry_config(args.config) if args.config else DEFAULT_CONFIG
    geometry = build_geometry(args, config)

    points = [tuple(p) for p in args.point]
    if args.points_csv is not None:
        try:
            points.extend(read_points_csv(args.points_csv))
        except (OSError, ValueError) as exc:
            ap.error(str(exc))
    logging.info("Querying %d point(s) against %r", len(points), geometry)

    size = geometry.metric_size()
    result = {
        "corner_mode": geometry.has_corner_tiepoints(),
        "corners": [list(c) for c in geometry.corners()],
        "rotation": geometry.rotation,
        "metric_size_m": {"width": size.width, "height": size.height},
        "area_km2": geometry.compute_area_km2(),
        "config": config.to_dict(),
        "points": query_points(geometry, points, progress=args.progress),
    }
    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
