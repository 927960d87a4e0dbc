import pytest

from erosionsim.terrain import PerlinNoiseGenerator, TerrainGenerator


def make_grid(width, depth, spacing=1.0):
    return [[x * spacing, 0.0, z * spacing] for z in range(depth) for x in range(width)]


def heights(grid):
    return [v[1] for v in grid]


def test_terrain_generator_is_abstract():
    with pytest.raises(TypeError):
        TerrainGenerator()


def test_defaults():
    gen = PerlinNoiseGenerator()
    assert gen.frequency == 3.0
    assert gen.octaves == 6
    assert gen.max_height == 90


def test_empty_grid_is_left_empty():
    grid = []
    PerlinNoiseGenerator().generate_terrain(grid, 0, 0, 1.0, 90)
    assert grid == []


def test_heights_within_range():
    grid = make_grid(16, 12, 2.0)
    PerlinNoiseGenerator().generate_terrain(grid, 16, 12, 2.0, 90)
    assert all(0.0 <= h <= 90.0 for h in heights(grid))
    assert len(set(heights(grid))) > 1


def test_x_and_z_untouched():
    grid = make_grid(8, 8, 1.5)
    original = [(v[0], v[2]) for v in grid]
    PerlinNoiseGenerator().generate_terrain(grid, 8, 8, 1.5, 50)
    assert [(v[0], v[2]) for v in grid] == original


def test_deterministic():
    a = make_grid(10, 10)
    b = make_grid(10, 10)
    PerlinNoiseGenerator().generate_terrain(a, 10, 10, 1.0, 90)
    PerlinNoiseGenerator().generate_terrain(b, 10, 10, 1.0, 90)
    assert heights(a) == heights(b)


def test_height_scales_with_max_height_argument():
    a = make_grid(10, 10)
    b = make_grid(10, 10)
    gen = PerlinNoiseGenerator(max_height=10)
    gen.generate_terrain(a, 10, 10, 1.0, 90)
    gen.generate_terrain(b, 10, 10, 1.0, 180)
    assert heights(b) == [h * 2 for h in heights(a)]


def test_frequency_changes_output():
    a = make_grid(10, 10)
    b = make_grid(10, 10)
    PerlinNoiseGenerator(frequency=3.0).generate_terrain(a, 10, 10, 1.0, 90)
    PerlinNoiseGenerator(frequency=7.0).generate_terrain(b, 10, 10, 1.0, 90)
    assert heights(a) != heights(b)


def test_single_column_ignores_x():
    grid = [[0.0, 0.0, 0.0], [5.0, 0.0, 0.0], [9.0, 0.0, 0.0]]
    PerlinNoiseGenerator().generate_terrain(grid, 1, 3, 1.0, 90)
    assert grid[0][1] == grid[1][1] == grid[2][1]


def test_spacing_does_not_change_shape():
    a = make_grid(9, 7, 1.0)
    b = make_grid(9, 7, 4.0)
    gen = PerlinNoiseGenerator()
    gen.generate_terrain(a, 9, 7, 1.0, 90)
    gen.generate_terrain(b, 9, 7, 4.0, 90)
    assert heights(a) == pytest.approx(heights(b))