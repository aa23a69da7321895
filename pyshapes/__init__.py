__version__ = "0.1.0"

# --- Shapes ---
from .classes.shapes import Polygon, Line, ShapeBase, triangulate, contains_point
from .classes.coordinates import Coordinate, CoordinateProjector

# --- Mission data sources ---
from .sources.mission_data import MissionData, DrawingObject, Zone
from .sources.database import ShapeDatabase

# --- Configuration and helpers ---
from .misc.config import ShapeConfig
from .misc.math_utils import Point2D
from .misc.randomizer import Randomizer
from .misc.validation_framework import (
    PolygonValidator,
    PointValidator,
    ValidationResult,
    ValidationSeverity,
    validate_data
)

from .misc.logger import create_logger
_logger = create_logger(verbose=False, name="pyshapes")
_logger.info(f"pyshapes {__version__} loaded.")

# --- Visualization (Optional) ---
try:
    from .visualization import ShapeMap2DVisualizer, save_shape_map, MATPLOTLIB_AVAILABLE as _viz2d_available
except ImportError:
    _viz2d_available = False
    ShapeMap2DVisualizer = None
    save_shape_map = None

if _viz2d_available:
    _logger.info("  -> 2D Visualization available (matplotlib detected)")
else:
    ShapeMap2DVisualizer = None
    save_shape_map = None
