"""Terrain height generators that fill a grid of ``[x, y, z]`` vertices."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import MutableSequence

from erosionsim.perlin import PerlinNoise

Vertex = MutableSequence[float]

NOISE_SEED = 123456
PERSISTENCE = 0.5


class TerrainGenerator(ABC):
    """Strategy that assigns heights to an existing vertex grid."""

    @abstractmethod
    def generate_terrain(
        self,
        height_grid: list[Vertex],
        width: int,
        depth: int,
        spacing: float,
        max_height: float,
    ) -> None:
        """Write a height into the y component of every vertex in ``height_grid``."""


class PerlinNoiseGenerator(TerrainGenerator):
    """Heights from fixed-seed octave Perlin noise, scaled to ``max_height``."""

    def __init__(self, frequency: float = 3.0, octaves: int = 6, max_height: int = 90) -> None:
        self.frequency = frequency
        self.octaves = octaves
        self.max_height = max_height

    def generate_terrain(
        self,
        height_grid: list[Vertex],
        width: int,
        depth: int,
        spacing: float,
        max_height: float,
    ) -> None:
        if not height_grid:
            return

        perlin = PerlinNoise(NOISE_SEED)
        total_width = (width - 1) * spacing if width > 1 else 1.0
        total_depth = (depth - 1) * spacing if depth > 1 else 1.0
        if total_width == 0.0:
            total_width = 1.0
        if total_depth == 0.0:
            total_depth = 1.0

        for vertex in height_grid:
            noise_x = 0.0 if width == 1 else vertex[0] / total_width
            noise_z = 0.0 if depth == 1 else vertex[2] / total_depth
            normalized = abs(
                perlin.octave2d_01(
                    noise_x * self.frequency,
                    noise_z * self.frequency,
                    self.octaves,
                    PERSISTENCE,
                )
            )
            vertex[1] = normalized * max_height