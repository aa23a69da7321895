# pyshapes/classes/shapes.py
"""
Mission editor shapes: closed polygons and open lines.

Shapes are built once from a list of map points and are read-only
afterwards. Named lookups return None when nothing matches, so callers
can write:

    zone = Polygon.find_on_map("SAM Area", mission_data)
    if zone is None:
        ...
"""
import random
from typing import Any, Iterable, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from pyshapes.classes.coordinates import Coordinate, CoordinateProjector
from pyshapes.misc.config import ShapeConfig
from pyshapes.misc.logger import PyshapesLogger
from pyshapes.misc.math_utils import (
    Point2D,
    Triangle,
    calculate_2d_distance,
    calculate_bounding_box,
    calculate_centroid,
    point_in_triangle,
    polygon_signed_area,
    random_point_in_triangle,
    to_point2d,
    triangle_area,
)
from pyshapes.sources.mission_data import MissionData


def triangulate(points: Sequence[Point2D], logger: Optional[PyshapesLogger] = None) -> List[Triangle]:
    """
    Split a simple polygon into triangles by ear clipping.

    Vertices are scanned in ring order. The candidate ear at vertex i is
    (ring[i], ring[i+1], ring[i+2]); it is accepted when no other vertex of
    the current ring lies strictly inside it. The first accepted ear is
    emitted, its middle vertex is removed and the scan restarts on the
    smaller ring.

    If a full scan finds no ear (self-intersecting or badly wound input) the
    decomposition stops and the triangles found so far are returned.

    Args:
        points: Ordered polygon ring (not closed, first point not repeated)
        logger: Optional logger for the early-stop warning

    Returns:
        List of triangles, len(points) - 2 of them for a simple polygon
    """
    triangles: List[Triangle] = []
    # Work on indices so repeated coordinates stay distinct vertices
    ring = list(range(len(points)))

    while len(ring) > 3:
        count = len(ring)
        for i in range(count):
            a, b, c = ring[i], ring[(i + 1) % count], ring[(i + 2) % count]
            candidate = (points[a], points[b], points[c])
            blocked = any(
                point_in_triangle(points[k], candidate)
                for k in ring
                if k not in (a, b, c)
            )
            if not blocked:
                triangles.append(candidate)
                ring.pop((i + 1) % count)
                break
        else:
            if logger:
                logger.warning(
                    f"Triangulation stopped with {len(ring)} vertices left "
                    f"({len(triangles)} of {len(points) - 2} triangles found)"
                )
            return triangles

    if len(ring) == 3:
        triangles.append((points[ring[0]], points[ring[1]], points[ring[2]]))

    return triangles


def contains_point(point: Any, ring: Sequence[Any]) -> bool:
    """
    Crossing-number point-in-polygon test.

    A horizontal ray is cast from the point towards +x; an edge counts when
    exactly one of its endpoints is strictly above the point and the edge
    crosses the ray strictly to the right of it. Odd count means inside.
    """
    x, y = to_point2d(point)
    pts = [to_point2d(p) for p in ring]
    n = len(pts)

    counter = 0
    for i in range(n):
        cx, cy = pts[i]
        nx, ny = pts[(i + 1) % n]
        if (cy > y) != (ny > y) and x < (nx - cx) * (y - cy) / (ny - cy) + cx:
            counter += 1
    return counter % 2 == 1


def _as_source(source: Any) -> Any:
    """Accept a raw mission table wherever a drawing/zone source is expected."""
    if isinstance(source, dict):
        return MissionData(source)
    return source


def _name_matches(candidate: str, wanted: str, match: str) -> bool:
    if match == "substring":
        return wanted in candidate
    return candidate == wanted


class ShapeBase:
    """
    Point list plus its projected world coordinates.

    Shared by Polygon and Line; holds nothing shape-specific.
    """

    def __init__(self, points: Iterable[Any], name: Optional[str] = None,
                 config: Optional[ShapeConfig] = None,
                 projector: Optional[CoordinateProjector] = None,
                 logger: Optional[PyshapesLogger] = None):
        self.config = config or ShapeConfig()
        self.name = name
        self.logger = logger or self.config.make_logger(type(self).__name__)
        self.projector = projector or self.config.make_projector()

        self.points: Tuple[Point2D, ...] = tuple(to_point2d(p) for p in points)
        if not self.points:
            raise ValueError(f"{type(self).__name__} needs at least one point")
        self.coordinates: Tuple[Coordinate, ...] = tuple(self.projector.project_all(self.points))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point2D]:
        return iter(self.points)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, points={len(self.points)})"

    def get_name(self) -> Optional[str]:
        return self.name

    def get_points(self) -> List[Point2D]:
        return list(self.points)

    def get_coordinates(self) -> List[Coordinate]:
        return list(self.coordinates)

    def get_start_point(self) -> Point2D:
        return self.points[0]

    def get_end_point(self) -> Point2D:
        return self.points[-1]

    def get_start_coordinate(self) -> Coordinate:
        return self.coordinates[0]

    def get_end_coordinate(self) -> Coordinate:
        return self.coordinates[-1]

    def to_array(self) -> np.ndarray:
        """Points as an (N, 2) float array."""
        return np.asarray(self.points, dtype=float)


class Polygon(ShapeBase):
    """
    Closed polygon drawn in the mission editor.

    Construction projects the points, computes the centroid and
    triangulates the ring, in that order. Everything is frozen afterwards.

    Example:
        >>> square = Polygon.new((0, 0), (1, 0), (1, 1), (0, 1))
        >>> square.get_centroid()
        Point2D(x=0.5, y=0.5)
        >>> square.contains_point((0.5, 0.5))
        True
        >>> len(square.get_triangles())
        2
    """

    def __init__(self, points: Iterable[Any], name: Optional[str] = None,
                 config: Optional[ShapeConfig] = None,
                 projector: Optional[CoordinateProjector] = None,
                 logger: Optional[PyshapesLogger] = None,
                 rng=None):
        super().__init__(points, name=name, config=config, projector=projector, logger=logger)
        self.rng = rng or (self.config.make_randomizer() if self.config.seed is not None else None)

        self.centroid: Point2D = calculate_centroid(self.points)
        self.triangles: Tuple[Triangle, ...] = tuple(triangulate(self.points, self.logger))
        self.logger.debug(f"Polygon {self.name!r}: {len(self.points)} points, {len(self.triangles)} triangles")

    # --- Construction paths ---

    @classmethod
    def new(cls, *points: Any, **kwargs) -> Optional["Polygon"]:
        """
        Build a polygon from explicit points.

        Only an empty point list is rejected. One or two points still give a
        Polygon, but it has no triangles and get_random_point() raises
        ValueError on it; run PolygonValidator first to catch such input.

        Returns:
            The polygon, or None when no points were given
        """
        if not points:
            return None
        return cls(points, **kwargs)

    @classmethod
    def find_on_map(cls, name: str, drawings: Any, match: Optional[str] = None,
                    config: Optional[ShapeConfig] = None, **kwargs) -> Optional["Polygon"]:
        """
        Build a polygon from a named map drawing.

        Every layer object whose name matches and which is a closed line or
        a free-form polygon contributes its points, shifted by the object's
        map origin. The polygon is named after the last drawing that matched.

        Args:
            name: Drawing name to look for
            drawings: Drawing source (MissionData, raw mission dict or any
                object with a drawing_objects() method)
            match: "exact" or "substring"; defaults to the config's setting

        Returns:
            The polygon, or None when no matching drawing has points
        """
        config = config or ShapeConfig()
        match = match or config.match
        logger = kwargs.get("logger") or config.make_logger(cls.__name__)

        points: List[Point2D] = []
        matched_name = name
        for obj in _as_source(drawings).drawing_objects():
            if _name_matches(obj.name, name, match) and obj.is_closed_shape:
                points.extend(obj.absolute_points())
                matched_name = obj.name

        if not points:
            logger.debug(f"No closed drawing named {name!r}")
            return None
        logger.points(f"Resolved {matched_name!r}", points)
        kwargs.setdefault("logger", logger)
        return cls(points, name=matched_name, config=config, **kwargs)

    @classmethod
    def from_zone(cls, zone_name: str, zones: Any, **kwargs) -> Optional["Polygon"]:
        """
        Build a polygon from a named trigger zone's vertices.

        Returns:
            The polygon, or None when the zone is missing or has no vertices
        """
        source = _as_source(zones)
        for zone in source.zones():
            if zone.name == zone_name:
                return cls.new(*zone.vertices, name=zone_name, **kwargs)
        return None

    @staticmethod
    def find(shape_name: str, database) -> Optional["Polygon"]:
        """Look a polygon up in a ShapeDatabase."""
        shape = database.find_shape(shape_name)
        return shape if isinstance(shape, Polygon) else None

    # --- Queries ---

    def get_centroid(self) -> Point2D:
        return self.centroid

    def get_bounding_box(self) -> List[Point2D]:
        """Corners (min_x, min_y), (max_x, min_y), (max_x, max_y), (min_x, max_y)."""
        return calculate_bounding_box(self.points)

    def get_triangles(self) -> List[Triangle]:
        return list(self.triangles)

    @property
    def area(self) -> float:
        return abs(polygon_signed_area(self.points))

    def is_clockwise(self) -> bool:
        return polygon_signed_area(self.points) < 0

    def triangles_area(self) -> float:
        return sum(triangle_area(t) for t in self.triangles)

    def contains_point(self, point: Any, polygon_points: Optional[Sequence[Any]] = None) -> bool:
        """
        Check if a point is inside the polygon.

        Args:
            point: (x, y) point to test
            polygon_points: Alternate ring to test against instead of this polygon's points
        """
        ring = self.points if polygon_points is None else polygon_points
        return contains_point(point, ring)

    def contains_points(self, points: Any) -> np.ndarray:
        """
        Vectorised contains_point for many points.

        Returns:
            Boolean array, one entry per input point
        """
        pts = np.asarray([to_point2d(p) for p in points], dtype=float).reshape(-1, 2)
        ring = self.to_array()
        px, py = pts[:, 0:1], pts[:, 1:2]
        cx, cy = ring[:, 0], ring[:, 1]
        nx, ny = np.roll(cx, -1), np.roll(cy, -1)

        straddles = (cy > py) != (ny > py)
        with np.errstate(divide='ignore', invalid='ignore'):
            x_cross = (nx - cx) * (py - cy) / (ny - cy) + cx
        crossings = np.logical_and(straddles, px < x_cross).sum(axis=1)
        return crossings % 2 == 1

    def get_random_point(self, rng=None) -> Point2D:
        """
        Random point inside the polygon.

        A triangle is picked uniformly by count (not by area), then a point
        is sampled uniformly inside it. Small triangles are therefore
        over-sampled relative to their area.

        Args:
            rng: Random source with random() and choice(); falls back to the
                polygon's own source, then the random module

        Raises:
            ValueError: If the polygon has no triangles
        """
        if not self.triangles:
            raise ValueError(f"Polygon {self.name!r} has no triangles to sample from")
        rng = rng or self.rng or random
        triangle = rng.choice(self.triangles)
        return random_point_in_triangle(triangle, rng)

    def get_random_points(self, count: int, rng=None) -> List[Point2D]:
        return [self.get_random_point(rng) for _ in range(count)]


class Line(ShapeBase):
    """Open (or closed) polyline drawn in the mission editor."""

    @classmethod
    def new(cls, *points: Any, **kwargs) -> Optional["Line"]:
        if not points:
            return None
        return cls(points, **kwargs)

    @classmethod
    def find(cls, line_name: str, drawings: Any, config: Optional[ShapeConfig] = None,
             **kwargs) -> Optional["Line"]:
        """
        Build a line from every "Line" drawing whose name contains line_name.

        Returns:
            The line, or None when no matching drawing has points
        """
        config = config or ShapeConfig()
        logger = kwargs.get("logger") or config.make_logger(cls.__name__)

        points: List[Point2D] = []
        for obj in _as_source(drawings).drawing_objects():
            if line_name in obj.name and obj.is_line:
                points.extend(obj.absolute_points())

        if not points:
            logger.debug(f"No line drawing matching {line_name!r}")
            return None
        logger.points(f"Resolved line {line_name!r}", points)
        kwargs.setdefault("logger", logger)
        return cls(points, name=line_name, config=config, **kwargs)

    @property
    def length(self) -> float:
        return sum(calculate_2d_distance(a, b) for a, b in zip(self.points, self.points[1:]))
