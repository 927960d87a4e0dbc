import random

import pytest

from erosionsim.plane import Plane, build_triangle_mesh
from erosionsim.terrain import PerlinNoiseGenerator, TerrainGenerator


class FlatGenerator(TerrainGenerator):
    def __init__(self, level):
        self.level = level

    def generate_terrain(self, height_grid, width, depth, spacing, max_height):
        for vertex in height_grid:
            vertex[1] = self.level


class SlopeGenerator(TerrainGenerator):
    def generate_terrain(self, height_grid, width, depth, spacing, max_height):
        for vertex in height_grid:
            vertex[1] = 50.0 - vertex[0] * 2.0 - vertex[2]


@pytest.fixture
def plane():
    return Plane(5, 4, 1.0, random.Random(7))


def test_grid_layout_is_row_major(plane):
    assert len(plane.height_grid) == 5 * 4
    xs = [v[0] for v in plane.height_grid[:5]]
    assert xs == [0.0, 1.0, 2.0, 3.0, 4.0]
    assert [v[2] for v in plane.height_grid[::5]] == [0.0, 1.0, 2.0, 3.0]


def test_mesh_vertex_count(plane):
    assert len(plane.vertices) == (5 - 1) * (4 - 1) * 6


def test_heights_within_max(plane):
    for vertex in plane.height_grid:
        assert 0.0 <= vertex[1] <= plane.max_height


def test_generation_is_deterministic():
    a = Plane(6, 6, 2.0, random.Random(1))
    b = Plane(6, 6, 2.0, random.Random(2))
    assert a.height_grid == b.height_grid


def test_build_triangle_mesh_order():
    grid = [[float(i), float(i * 10), 0.0] for i in range(4)]
    mesh = build_triangle_mesh(grid, 2, 2)
    expected_indices = [0, 2, 1, 1, 2, 3]
    assert mesh == [tuple(grid[i]) for i in expected_indices]


def test_build_triangle_mesh_too_small():
    grid = [[0.0, 0.0, float(z)] for z in range(3)]
    assert build_triangle_mesh(grid, 1, 3) == []


def test_narrow_plane_has_empty_mesh():
    p = Plane(1, 3, 1.0)
    assert len(p.height_grid) == 3
    assert p.vertices == []


def test_custom_generator():
    p = Plane(3, 3, 1.0)
    p.set_terrain_generator(FlatGenerator(7.0))
    p.regenerate()
    assert all(v[1] == 7.0 for v in p.height_grid)
    assert all(v[1] == 7.0 for v in p.vertices)


def test_noise_settings_propagate_to_perlin(plane):
    plane.set_noise_frequency(1.5)
    plane.set_noise_octaves(2)
    assert isinstance(plane.terrain_generator, PerlinNoiseGenerator)
    assert plane.terrain_generator.frequency == 1.5
    assert plane.terrain_generator.octaves == 2
    assert plane.noise_frequency == 1.5
    assert plane.noise_octaves == 2


def test_noise_settings_with_other_generator(plane):
    generator = FlatGenerator(1.0)
    plane.set_terrain_generator(generator)
    plane.set_noise_frequency(9.0)
    assert plane.noise_frequency == 9.0
    assert plane.terrain_generator is generator


def test_frequency_change_alters_terrain():
    p = Plane(8, 8, 1.0)
    before = [v[1] for v in p.height_grid]
    p.set_noise_frequency(7.0)
    p.regenerate()
    after = [v[1] for v in p.height_grid]
    assert before != after


def test_max_height_scales_terrain():
    p = Plane(6, 6, 1.0)
    before = [v[1] for v in p.height_grid]
    p.max_height = 45
    p.regenerate()
    after = [v[1] for v in p.height_grid]
    for b, a in zip(before, after):
        assert a == pytest.approx(b / 2)


def test_erosion_records_trails_and_refreshes_mesh():
    p = Plane(10, 10, 1.0, random.Random(3))
    p.set_terrain_generator(SlopeGenerator())
    p.regenerate()
    before = [v[1] for v in p.height_grid]
    p.apply_hydraulic_erosion(20, 30)
    assert len(p.trail_points) > 0
    assert [v[1] for v in p.height_grid] != before
    assert p.vertices == build_triangle_mesh(p.height_grid, p.width, p.depth)


def test_regenerate_clears_trails():
    p = Plane(8, 8, 1.0, random.Random(5))
    p.apply_hydraulic_erosion(5, 10)
    assert len(p.trail_points) > 0
    p.regenerate()
    assert len(p.trail_points) == 0


def test_width_change_then_regenerate(plane):
    plane.width = 7
    plane.regenerate()
    assert len(plane.height_grid) == 7 * 4
    assert len(plane.vertices) == 6 * 3 * 6