"""
Mathematical utility functions for pyshapes library.

Plain 2D helpers shared by the shape classes, the validator and the
visualizer. All positions are map-projection (x, y) pairs.
"""
import math
import random
import numpy as np
from typing import Any, List, NamedTuple, Sequence, Tuple


class Point2D(NamedTuple):
    """Immutable map point. Compares equal to a plain (x, y) tuple."""
    x: float
    y: float


Triangle = Tuple[Point2D, Point2D, Point2D]


def to_point2d(value: Any) -> Point2D:
    """
    Coerce a point-like value into a Point2D.

    Accepts (x, y) sequences, mappings with 'x'/'y' keys (as mission
    tables store them) and objects exposing x/y attributes.

    Raises:
        TypeError: If the value can't be read as a 2D point

    Examples:
        >>> to_point2d({'x': 1, 'y': 2})
        Point2D(x=1.0, y=2.0)
        >>> to_point2d((3, 4))
        Point2D(x=3.0, y=4.0)
    """
    if isinstance(value, Point2D):
        return value
    if isinstance(value, dict):
        if 'x' not in value or 'y' not in value:
            raise TypeError(f"Point mapping needs 'x' and 'y' keys, got {sorted(value)}")
        value = (value['x'], value['y'])
    elif hasattr(value, 'x') and hasattr(value, 'y'):
        value = (value.x, value.y)
    try:
        x, y = value
        return Point2D(float(x), float(y))
    except (TypeError, ValueError):
        raise TypeError(f"Expected a 2D point, got {value!r}") from None


def calculate_2d_distance(pos1: Sequence[float], pos2: Sequence[float]) -> float:
    """
    Calculate 2D Euclidean distance between two points.

    Examples:
        >>> calculate_2d_distance((0, 0), (3, 4))
        5.0
    """
    x1, y1 = pos1
    x2, y2 = pos2
    return math.sqrt((x2 - x1)**2 + (y2 - y1)**2)


def calculate_centroid(points: Sequence[Point2D]) -> Point2D:
    """
    Calculate the centroid of a list of points as the plain vertex average.

    This is not the area centroid: unevenly spaced vertices pull the result
    towards the denser side of the outline.

    Raises:
        ZeroDivisionError: If no points provided

    Examples:
        >>> calculate_centroid([(0, 0), (1, 0), (1, 1), (0, 1)])
        Point2D(x=0.5, y=0.5)
    """
    count = len(points)
    x_sum = sum(p[0] for p in points)
    y_sum = sum(p[1] for p in points)
    return Point2D(x_sum / count, y_sum / count)


def calculate_bounding_box(points: Sequence[Point2D]) -> List[Point2D]:
    """
    Calculate the axis-aligned bounding box of a list of points.

    Returns:
        Four corners: (min_x, min_y), (max_x, min_y), (max_x, max_y), (min_x, max_y)

    Examples:
        >>> calculate_bounding_box([(1, 5), (3, 1), (7, 9)])[0]
        Point2D(x=1, y=1)
    """
    min_x, min_y = points[0][0], points[0][1]
    max_x, max_y = min_x, min_y

    for x, y in points[1:]:
        if x < min_x:
            min_x = x
        if y < min_y:
            min_y = y
        if x > max_x:
            max_x = x
        if y > max_y:
            max_y = y

    return [
        Point2D(min_x, min_y),
        Point2D(max_x, min_y),
        Point2D(max_x, max_y),
        Point2D(min_x, max_y),
    ]


def sign(p1: Sequence[float], p2: Sequence[float], p3: Sequence[float]) -> float:
    """Cross product of (p1 - p3) and (p2 - p3). Positive when p1, p2, p3 turn left."""
    return (p1[0] - p3[0]) * (p2[1] - p3[1]) - (p2[0] - p3[0]) * (p1[1] - p3[1])


def point_in_triangle(point: Sequence[float], triangle: Sequence[Sequence[float]]) -> bool:
    """
    Check if a point lies strictly inside a triangle.

    The point is inside only when all three edge tests share the same
    non-zero sign, so points on an edge or on a vertex are outside.

    Examples:
        >>> point_in_triangle((1, 1), [(0, 0), (4, 0), (0, 4)])
        True
        >>> point_in_triangle((2, 0), [(0, 0), (4, 0), (0, 4)])
        False
    """
    a, b, c = triangle
    d1 = sign(point, a, b)
    d2 = sign(point, b, c)
    d3 = sign(point, c, a)

    all_pos = d1 > 0 and d2 > 0 and d3 > 0
    all_neg = d1 < 0 and d2 < 0 and d3 < 0
    return all_pos or all_neg


def random_point_in_triangle(triangle: Sequence[Sequence[float]], rng=None) -> Point2D:
    """
    Sample a uniformly distributed point inside a triangle.

    Two uniform weights are drawn; when their sum exceeds 1 they are
    reflected back into the unit simplex.

    Args:
        triangle: Three (x, y) vertices
        rng: Random source with a random() method (defaults to the random module)
    """
    rng = rng or random
    a, b, c = triangle
    r1 = rng.random()
    r2 = rng.random()
    if r1 + r2 > 1:
        r1 = 1 - r1
        r2 = 1 - r2

    x = a[0] + r1 * (b[0] - a[0]) + r2 * (c[0] - a[0])
    y = a[1] + r1 * (b[1] - a[1]) + r2 * (c[1] - a[1])
    return Point2D(x, y)


def triangle_area(triangle: Sequence[Sequence[float]]) -> float:
    """Unsigned area of a triangle."""
    a, b, c = triangle
    return abs(sign(a, b, c)) / 2.0


def polygon_signed_area(points: Sequence[Sequence[float]]) -> float:
    """
    Signed shoelace area of a closed ring.

    Positive for counter-clockwise winding, negative for clockwise.

    Examples:
        >>> polygon_signed_area([(0, 0), (1, 0), (1, 1), (0, 1)])
        1.0
    """
    if len(points) < 3:
        return 0.0
    coords = np.asarray(points, dtype=float)
    x = coords[:, 0]
    y = coords[:, 1]
    return float(0.5 * (np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y)))


def segments_intersect(p1: Sequence[float], p2: Sequence[float],
                       q1: Sequence[float], q2: Sequence[float]) -> bool:
    """
    Check if segment p1-p2 properly crosses segment q1-q2.

    Touching endpoints and collinear overlaps are not counted.
    """
    d1 = sign(q1, q2, p1)
    d2 = sign(q1, q2, p2)
    d3 = sign(p1, p2, q1)
    d4 = sign(p1, p2, q2)
    return ((d1 > 0) != (d2 > 0) and d1 != 0 and d2 != 0 and
            (d3 > 0) != (d4 > 0) and d3 != 0 and d4 != 0)
