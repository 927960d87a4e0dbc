"""Terrain mesh built from a height grid, with generation and erosion hooks."""

from __future__ import annotations

import logging
import random
from typing import Sequence

from erosionsim.erosion import HydraulicErosion, TrailPoint, Vertex
from erosionsim.terrain import PerlinNoiseGenerator, TerrainGenerator

log = logging.getLogger(__name__)

MeshVertex = tuple[float, float, float]


def build_triangle_mesh(
    height_grid: Sequence[Sequence[float]], width: int, depth: int
) -> list[MeshVertex]:
    """Expand a row-major vertex grid into two triangles per cell.

    Each cell yields (top-left, bottom-left, top-right) followed by
    (top-right, bottom-left, bottom-right).  Grids narrower than two
    vertices in either direction give an empty mesh.
    """
    if width < 2 or depth < 2:
        log.error("cannot build mesh with width or depth < 2; mesh will be empty")
        return []

    mesh: list[MeshVertex] = []
    for z in range(depth - 1):
        for x in range(width - 1):
            top_left = z * width + x
            top_right = top_left + 1
            bottom_left = (z + 1) * width + x
            bottom_right = bottom_left + 1
            for index in (top_left, bottom_left, top_right, top_right, bottom_left, bottom_right):
                vx, vy, vz = height_grid[index]
                mesh.append((vx, vy, vz))
    return mesh


class Plane:
    """A terrain of ``width`` x ``depth`` grid vertices spaced ``spacing`` apart."""

    def __init__(
        self,
        width: int,
        depth: int,
        spacing: float = 10.0,
        rng: random.Random | None = None,
    ) -> None:
        self.width = width
        self.depth = depth
        self.spacing = spacing
        self.noise_frequency = 3.0
        self.noise_octaves = 6
        self.max_height = 90
        self.terrain_generator: TerrainGenerator = PerlinNoiseGenerator(3.0, 6, 90)
        self.erosion = HydraulicErosion(rng)
        self.height_grid: list[Vertex] = []
        self.vertices: list[MeshVertex] = []
        self.generate()

    @property
    def trail_points(self) -> Sequence[TrailPoint]:
        """Droplet trail points recorded by the erosion simulation."""
        return self.erosion.trail_points

    def _create_base_grid(self) -> None:
        self.height_grid = [
            [x * self.spacing, 0.0, z * self.spacing]
            for z in range(self.depth)
            for x in range(self.width)
        ]

    def generate(self) -> None:
        """Rebuild the grid from scratch, apply the terrain generator and mesh it."""
        self.vertices = []
        self._create_base_grid()
        self.erosion.clear_trail_points()
        self.terrain_generator.generate_terrain(
            self.height_grid, self.width, self.depth, self.spacing, self.max_height
        )
        self.refresh_mesh()
        log.info("plane generated with %d mesh vertices", len(self.vertices))

    def regenerate(self) -> None:
        self.generate()

    def refresh_mesh(self) -> None:
        """Rebuild the triangle mesh from the current height grid."""
        self.vertices = build_triangle_mesh(self.height_grid, self.width, self.depth)

    def set_terrain_generator(self, generator: TerrainGenerator) -> None:
        self.terrain_generator = generator

    def set_noise_frequency(self, freq: float) -> None:
        """Store the frequency and pass it on to a Perlin generator; applied on regenerate."""
        self.noise_frequency = freq
        if isinstance(self.terrain_generator, PerlinNoiseGenerator):
            self.terrain_generator.frequency = freq

    def set_noise_octaves(self, octaves: int) -> None:
        """Store the octave count and pass it on to a Perlin generator; applied on regenerate."""
        self.noise_octaves = octaves
        if isinstance(self.terrain_generator, PerlinNoiseGenerator):
            self.terrain_generator.octaves = octaves

    def apply_hydraulic_erosion(self, num_droplets: int, droplet_max_lifetime: int) -> None:
        """Erode the height grid with droplets and refresh the mesh."""
        self.erosion.erode(
            self.height_grid,
            self.width,
            self.depth,
            self.spacing,
            num_droplets,
            droplet_max_lifetime,
        )
        self.refresh_mesh()