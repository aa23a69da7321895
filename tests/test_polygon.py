import random

import numpy as np
import pytest

from pyshapes import (
    Coordinate,
    CoordinateProjector,
    Point2D,
    Polygon,
    Randomizer,
    ShapeConfig,
)


class TestConstruction:
    def test_no_points_means_no_shape(self):
        assert Polygon.new() is None

    def test_direct_constructor_rejects_empty_point_list(self):
        with pytest.raises(ValueError):
            Polygon([])

    def test_points_round_trip_without_reordering_or_dedup(self):
        points = [(3, 1), (0, 0), (0, 0), (5, 5), (1, 4)]
        polygon = Polygon.new(*points)
        assert polygon.get_points() == points
        assert all(isinstance(p, Point2D) for p in polygon.get_points())

    def test_accepts_mission_table_points(self):
        polygon = Polygon.new({"x": 0, "y": 0}, {"x": 2, "y": 0}, {"x": 0, "y": 2})
        assert polygon.get_points() == [(0, 0), (2, 0), (0, 2)]

    def test_repr(self, unit_square):
        assert repr(unit_square) == "Polygon(name='Unit Square', points=4)"
        assert len(unit_square) == 4
        assert list(unit_square) == unit_square.get_points()


class TestCoordinates:
    def test_one_coordinate_per_vertex(self, unit_square):
        coords = unit_square.get_coordinates()
        assert len(coords) == len(unit_square.get_points())
        for point, coord in zip(unit_square.get_points(), coords):
            assert coord.get_vec2() == point
            assert coord.y == 0.0

    def test_map_y_becomes_world_z(self):
        polygon = Polygon.new((10, 20), (30, 20), (10, 40))
        assert polygon.get_start_coordinate() == Coordinate(10.0, 0.0, 20.0)
        assert polygon.get_end_coordinate() == Coordinate(10.0, 0.0, 40.0)

    def test_height_function_sets_altitude(self):
        projector = CoordinateProjector(height_fn=lambda p: p.x + p.y)
        polygon = Polygon.new((1, 2), (3, 2), (1, 5), projector=projector)
        assert [c.y for c in polygon.get_coordinates()] == [3.0, 5.0, 6.0]

    def test_config_default_height(self):
        polygon = Polygon.new((0, 0), (1, 0), (0, 1), config=ShapeConfig(default_height=150.0))
        assert all(c.y == 150.0 for c in polygon.get_coordinates())
        assert polygon.get_start_coordinate().get_vec3() == [0.0, 150.0, 0.0]

    def test_start_and_end_points(self, unit_square):
        assert unit_square.get_start_point() == (0, 0)
        assert unit_square.get_end_point() == (0, 1)


class TestGeometry:
    def test_unit_square(self, unit_square):
        assert unit_square.get_centroid() == (0.5, 0.5)
        assert unit_square.contains_point((0.5, 0.5))
        assert not unit_square.contains_point((2, 2))
        assert len(unit_square.get_triangles()) == 2
        assert unit_square.area == pytest.approx(1.0)

    def test_bounding_box(self):
        polygon = Polygon.new((1, 5), (3, 1), (7, 9))
        assert polygon.get_bounding_box() == [(1, 1), (7, 1), (7, 9), (1, 9)]

    def test_triangle_input_is_its_own_triangulation(self):
        polygon = Polygon.new((0, 0), (4, 0), (0, 4))
        assert polygon.get_triangles() == [((0, 0), (4, 0), (0, 4))]

    def test_concave_polygon(self, l_shape_points):
        polygon = Polygon.new(*l_shape_points)
        assert len(polygon.triangles) == 4
        assert polygon.area == pytest.approx(3.0)
        assert polygon.triangles_area() == pytest.approx(3.0)
        assert not polygon.is_clockwise()
        assert polygon.contains_point((0.5, 1.5))
        assert not polygon.contains_point((1.5, 1.5))

    def test_clockwise_winding(self):
        polygon = Polygon.new((0, 0), (0, 1), (1, 1), (1, 0))
        assert polygon.is_clockwise()
        assert polygon.contains_point((0.5, 0.5))

    def test_contains_point_against_alternate_ring(self, unit_square):
        ring = [(10, 10), (20, 10), (20, 20), (10, 20)]
        assert unit_square.contains_point((15, 15), ring)
        assert not unit_square.contains_point((0.5, 0.5), ring)

    def test_contains_points_matches_scalar_test(self, l_shape_points):
        polygon = Polygon.new(*l_shape_points)
        queries = [(0.5, 0.5), (1.5, 1.5), (1.5, 0.5), (0.5, 1.5), (3, 3), (-1, 0.5), (0.25, 1.75)]

        batch = polygon.contains_points(queries)

        assert isinstance(batch, np.ndarray)
        assert batch.tolist() == [polygon.contains_point(q) for q in queries]
        assert batch.tolist() == [True, False, True, True, False, False, True]

    def test_centroid_is_computed_once(self, unit_square):
        assert unit_square.centroid is unit_square.get_centroid()

    def test_to_array(self, unit_square):
        assert unit_square.to_array().shape == (4, 2)


class TestRandomPoints:
    def test_samples_stay_inside_triangle(self):
        polygon = Polygon.new((0, 0), (4, 0), (0, 4))
        rng = Randomizer(seed=42)
        for _ in range(10000):
            assert polygon.contains_point(polygon.get_random_point(rng))

    def test_samples_stay_inside_concave_polygon(self, l_shape_points):
        polygon = Polygon.new(*l_shape_points)
        samples = polygon.get_random_points(2000, rng=random.Random(1))
        assert len(samples) == 2000
        assert polygon.contains_points(samples).all()

    def test_seeded_sampling_is_repeatable(self, unit_square):
        first = unit_square.get_random_points(20, rng=Randomizer(seed=7))
        second = unit_square.get_random_points(20, rng=Randomizer(seed=7))
        assert first == second

    def test_config_seed_gives_polygon_its_own_source(self):
        config = ShapeConfig(seed=3)
        a = Polygon.new((0, 0), (1, 0), (1, 1), (0, 1), config=config)
        b = Polygon.new((0, 0), (1, 0), (1, 1), (0, 1), config=config)
        assert a.get_random_points(5) == b.get_random_points(5)

    def test_randomizer_reset_restarts_sequence(self, unit_square):
        rng = Randomizer(seed=11)
        first = unit_square.get_random_point(rng)
        rng.reset()
        assert unit_square.get_random_point(rng) == first

    def test_triangles_are_picked_by_count_not_area(self):
        # Thin sliver next to a large triangle: both get roughly half the samples
        polygon = Polygon.new((0, 0), (10, 0), (10, 10), (0, 0.1))
        big, small = polygon.triangles
        assert small[1] == (10, 10) and big[1] == (10, 0)

        samples = polygon.get_random_points(4000, rng=Randomizer(seed=5))
        # The sliver lies above the y = x diagonal, the large triangle below it
        share = sum(1 for p in samples if p.y > p.x) / len(samples)
        assert 0.45 < share < 0.55

    def test_sampling_without_triangles_raises(self):
        polygon = Polygon.new((0, 0), (1, 1))
        assert polygon.get_triangles() == []
        with pytest.raises(ValueError):
            polygon.get_random_point()
