# pyshapes/classes/coordinates.py
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from pyshapes.misc.math_utils import Point2D, to_point2d


@dataclass(frozen=True)
class Coordinate:
    """
    World position built from a map point.

    Map points are (x, y) on the ground plane; world positions are
    (x, y, z) with y as altitude, so the map y becomes the world z.
    """
    x: float
    y: float
    z: float

    def get_vec2(self) -> Point2D:
        """Map point this coordinate was projected from."""
        return Point2D(self.x, self.z)

    def get_vec3(self) -> List[float]:
        return [self.x, self.y, self.z]


class CoordinateProjector:
    """
    Projects map points into world coordinates.

    Args:
        height_fn: Optional callable returning the ground height for a map
            point, e.g. a terrain sampler. Points land at `default_height`
            when not provided.
        default_height: Altitude used when no height function is set.
    """

    def __init__(self, height_fn: Optional[Callable[[Point2D], float]] = None, default_height: float = 0.0):
        self.height_fn = height_fn
        self.default_height = default_height

    def project(self, point) -> Coordinate:
        p = to_point2d(point)
        height = self.height_fn(p) if self.height_fn else self.default_height
        return Coordinate(p.x, float(height), p.y)

    def project_all(self, points: Sequence) -> List[Coordinate]:
        return [self.project(p) for p in points]

    __call__ = project
