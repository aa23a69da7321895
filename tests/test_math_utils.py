import pytest

from pyshapes.misc.math_utils import (
    Point2D,
    calculate_2d_distance,
    calculate_bounding_box,
    calculate_centroid,
    point_in_triangle,
    polygon_signed_area,
    random_point_in_triangle,
    segments_intersect,
    to_point2d,
    triangle_area,
)


class FixedRandom:
    """Replays a fixed list of random() values."""

    def __init__(self, values):
        self.values = list(values)

    def random(self):
        return self.values.pop(0)


class HasXY:
    def __init__(self, x, y):
        self.x = x
        self.y = y


def test_to_point2d_accepts_mission_tables_tuples_and_objects():
    assert to_point2d({"x": 1, "y": 2}) == Point2D(1.0, 2.0)
    assert to_point2d((3, 4)) == (3.0, 4.0)
    assert to_point2d([5, 6]) == Point2D(5.0, 6.0)
    assert to_point2d(HasXY(7, 8)) == Point2D(7.0, 8.0)


def test_to_point2d_rejects_non_points():
    with pytest.raises(TypeError):
        to_point2d({"x": 1})
    with pytest.raises(TypeError):
        to_point2d((1, 2, 3))
    with pytest.raises(TypeError):
        to_point2d(5)


def test_distance():
    assert calculate_2d_distance((0, 0), (3, 4)) == 5.0


def test_centroid_is_plain_vertex_average():
    assert calculate_centroid([(0, 0), (1, 0), (1, 1), (0, 1)]) == (0.5, 0.5)
    # Extra vertex on the bottom edge pulls the average down; an area centroid wouldn't move
    centroid = calculate_centroid([(0, 0), (0.5, 0), (1, 0), (1, 1), (0, 1)])
    assert centroid == pytest.approx((0.5, 0.4))


def test_bounding_box_corner_order():
    box = calculate_bounding_box([(1, 5), (3, 1), (7, 9)])
    assert box == [(1, 1), (7, 1), (7, 9), (1, 9)]


def test_point_in_triangle_is_strict():
    triangle = [(0, 0), (4, 0), (0, 4)]
    assert point_in_triangle((1, 1), triangle)
    assert not point_in_triangle((2, 0), triangle)   # on an edge
    assert not point_in_triangle((0, 0), triangle)   # on a vertex
    assert not point_in_triangle((3, 3), triangle)


def test_point_in_triangle_ignores_winding():
    assert point_in_triangle((1, 1), [(0, 0), (0, 4), (4, 0)])


def test_random_point_in_triangle_reflects_into_simplex():
    triangle = [(0, 0), (4, 0), (0, 4)]
    point = random_point_in_triangle(triangle, FixedRandom([0.9, 0.8]))
    assert point == pytest.approx((0.4, 0.8))

    point = random_point_in_triangle(triangle, FixedRandom([0.25, 0.5]))
    assert point == pytest.approx((1.0, 2.0))


def test_areas():
    assert triangle_area([(0, 0), (4, 0), (0, 4)]) == 8.0
    assert polygon_signed_area([(0, 0), (1, 0), (1, 1), (0, 1)]) == pytest.approx(1.0)
    assert polygon_signed_area([(0, 0), (0, 1), (1, 1), (1, 0)]) == pytest.approx(-1.0)
    assert polygon_signed_area([(0, 0), (1, 1)]) == 0.0


def test_segments_intersect():
    assert segments_intersect((0, 0), (2, 2), (0, 2), (2, 0))
    assert not segments_intersect((0, 0), (1, 0), (1, 0), (1, 1))  # shared endpoint
    assert not segments_intersect((0, 0), (1, 0), (0, 1), (1, 1))  # parallel
