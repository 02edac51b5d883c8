from .geometry_config import (
	GeometryConfig,
	DEFAULT_CONFIG,
	create_geometry_config,
	load_geometry_config,
)
from .ground_overlay import GroundOverlay, SourceRef
from .overlay_geometry import OverlayGeometry
from .tiepoints import Tiepoint, TiepointSet
from .transform import QuadToRectTransform
from .types import GeoPoint, ImagePoint, LonLat, MetricSize

__all__ = [
	"GeometryConfig",
	"DEFAULT_CONFIG",
	"create_geometry_config",
	"load_geometry_config",
	"GroundOverlay",
	"SourceRef",
	"OverlayGeometry",
	"Tiepoint",
	"TiepointSet",
	"QuadToRectTransform",
	"GeoPoint",
	"ImagePoint",
	"LonLat",
	"MetricSize",
]
