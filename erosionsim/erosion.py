"""Droplet-based hydraulic erosion over a regular height grid."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import MutableSequence, Sequence

Vertex = MutableSequence[float]
TrailPoint = tuple[float, float, float, float]


@dataclass(frozen=True)
class HeightAndGradient:
    """Interpolated height and ascending gradient at a world position."""

    height: float = 0.0
    gradient_x: float = 0.0
    gradient_z: float = 0.0


@dataclass
class _Droplet:
    x: float
    z: float
    speed: float
    water: float
    lifetime: int
    dir_x: float = 0.0
    dir_z: float = 0.0
    sediment: float = 0.0


class HydraulicErosion:
    """Simulates water droplets that carve and deposit sediment on a height grid.

    The grid is a row-major list of mutable ``[x, y, z]`` vertices, ``y`` being
    the height.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.inertia_factor = 0.05
        self.sediment_capacity_factor = 4.0
        self.min_sediment_capacity = 0.01
        self.erosion_rate = 0.2
        self.deposition_rate = 0.1
        self.evaporation_rate = 0.1
        self.gravity = 4.0
        self.initial_water_amount = 1.0
        self.initial_speed = 1.0
        self.erosion_radius = 3
        self.deposition_radius = 3.0
        self.max_erosion_depth_factor = 0.5
        self.friction = 0.0
        self.brush_indices: list[list[int]] = []
        self.brush_weights: list[list[float]] = []
        self._trail: list[TrailPoint] = []

    @property
    def trail_points(self) -> Sequence[TrailPoint]:
        """Recorded ``(x, height, z, lifetime)`` points of every droplet step."""
        return self._trail

    def clear_trail_points(self) -> None:
        self._trail.clear()

    def erode(
        self,
        height_grid: list[Vertex],
        width: int,
        depth: int,
        spacing: float,
        num_droplets: int,
        droplet_max_lifetime: int,
    ) -> None:
        """Run ``num_droplets`` droplets over the grid, modifying heights in place."""
        if not height_grid:
            return

        self.compute_area_of_influence(width, depth, self.erosion_radius)

        for _ in range(num_droplets):
            grid_x = int(self.rng.random() * (width - 1))
            grid_z = int(self.rng.random() * (depth - 1))
            droplet = _Droplet(
                x=grid_x * spacing,
                z=grid_z * spacing,
                speed=self.initial_speed,
                water=self.initial_water_amount,
                lifetime=droplet_max_lifetime,
            )
            self._simulate(height_grid, width, depth, spacing, droplet, droplet_max_lifetime)

    def _simulate(
        self,
        height_grid: list[Vertex],
        width: int,
        depth: int,
        spacing: float,
        droplet: _Droplet,
        max_lifetime: int,
    ) -> None:
        inertia = self.inertia_factor
        for _ in range(max_lifetime):
            old = self.height_and_gradient(height_grid, width, depth, spacing, droplet.x, droplet.z)

            dir_x = droplet.dir_x * inertia - old.gradient_x * (1 - inertia)
            dir_z = droplet.dir_z * inertia - old.gradient_z * (1 - inertia)
            length = math.hypot(dir_x, dir_z)
            if length != 0:
                dir_x /= length
                dir_z /= length
            droplet.dir_x, droplet.dir_z = dir_x, dir_z

            droplet.x += dir_x
            droplet.z += dir_z
            self._trail.append((droplet.x, old.height, droplet.z, float(droplet.lifetime)))

            droplet.lifetime -= 1
            if droplet.lifetime <= 0 or droplet.water <= 0.1:
                break
            if not (0.0 <= droplet.x < width * spacing and 0.0 <= droplet.z < depth * spacing):
                break

            new_height = self.height_and_gradient(
                height_grid, width, depth, spacing, droplet.x, droplet.z
            ).height
            delta_height = new_height - old.height
            capacity = max(
                -delta_height * droplet.speed * droplet.water * self.sediment_capacity_factor,
                self.min_sediment_capacity,
            )

            if droplet.sediment > capacity or delta_height > 0:
                self._deposit(height_grid, width, depth, spacing, droplet, delta_height, capacity)
            else:
                self._erode_around(height_grid, width, depth, spacing, droplet, delta_height, capacity)

            droplet.speed = math.sqrt(
                max(0.0, droplet.speed * droplet.speed - delta_height * self.gravity)
            )
            droplet.water *= 1.0 - self.evaporation_rate

    def _deposit(
        self,
        height_grid: list[Vertex],
        width: int,
        depth: int,
        spacing: float,
        droplet: _Droplet,
        delta_height: float,
        capacity: float,
    ) -> None:
        if delta_height > 0:
            amount = min(delta_height, droplet.sediment) * self.deposition_rate
        else:
            amount = (droplet.sediment - capacity) * self.deposition_rate
        amount = min(max(0.0, amount), droplet.sediment)
        droplet.sediment -= amount

        grid_x = droplet.x / spacing
        grid_z = droplet.z / spacing
        node_x = int(grid_x)
        node_z = int(grid_z)
        off_x = grid_x - node_x
        off_z = grid_z - node_z

        if 0 <= node_x < width - 1 and 0 <= node_z < depth - 1:
            nw = node_z * width + node_x
            ne = nw + 1
            sw = nw + width
            se = sw + 1
            height_grid[nw][1] += amount * (1 - off_x) * (1 - off_z)
            height_grid[ne][1] += amount * off_x * (1 - off_z)
            height_grid[sw][1] += amount * (1 - off_x) * off_z
            height_grid[se][1] += amount * off_x * off_z

    def _erode_around(
        self,
        height_grid: list[Vertex],
        width: int,
        depth: int,
        spacing: float,
        droplet: _Droplet,
        delta_height: float,
        capacity: float,
    ) -> None:
        amount = min((capacity - droplet.sediment) * self.erosion_rate, -delta_height)
        cell_x = min(max(int(droplet.x / spacing), 0), width - 1)
        cell_z = min(max(int(droplet.z / spacing), 0), depth - 1)
        brush = cell_z * width + cell_x
        if not 0 <= brush < len(self.brush_indices):
            return
        for node, weight in zip(self.brush_indices[brush], self.brush_weights[brush]):
            vertex = height_grid[node]
            removed = min(vertex[1], amount * weight)
            vertex[1] -= removed
            droplet.sediment += removed

    def height_and_gradient(
        self,
        height_grid: Sequence[Sequence[float]],
        width: int,
        depth: int,
        spacing: float,
        world_x: float,
        world_z: float,
    ) -> HeightAndGradient:
        """Bilinearly interpolated height and gradient of ascent at a world point."""
        grid_x = world_x / spacing
        grid_z = world_z / spacing
        coord_x = math.floor(grid_x)
        coord_z = math.floor(grid_z)
        off_x = grid_x - coord_x
        off_z = grid_z - coord_z

        def clamp(value: int, upper: int) -> int:
            return min(max(value, 0), upper - 1)

        x0, x1 = clamp(coord_x, width), clamp(coord_x + 1, width)
        z0, z1 = clamp(coord_z, depth), clamp(coord_z + 1, depth)

        h_nw = height_grid[z0 * width + x0][1]
        h_ne = height_grid[z0 * width + x1][1]
        h_sw = height_grid[z1 * width + x0][1]
        h_se = height_grid[z1 * width + x1][1]

        gradient_x = (h_ne - h_nw) * (1.0 - off_z) + (h_se - h_sw) * off_z
        gradient_z = (h_sw - h_nw) * (1.0 - off_x) + (h_se - h_ne) * off_x
        near = h_nw * (1.0 - off_x) + h_ne * off_x
        far = h_sw * (1.0 - off_x) + h_se * off_x
        return HeightAndGradient(
            height=near * (1.0 - off_z) + far * off_z,
            gradient_x=gradient_x,
            gradient_z=gradient_z,
        )

    def compute_area_of_influence(self, width: int, depth: int, radius: float) -> None:
        """Precompute, for every grid node, the weighted circular erosion brush."""
        offsets: list[tuple[int, int, float]] = []
        radius_sq = radius * radius
        span = range(int(-radius), math.floor(radius) + 1)
        for off_y in span:
            for off_x in span:
                dist_sq = off_x * off_x + off_y * off_y
                if dist_sq < radius_sq:
                    offsets.append((off_x, off_y, 1.0 - math.sqrt(dist_sq) / radius))

        total = sum(weight for _, _, weight in offsets)
        offsets = [(ox, oy, weight / total) for ox, oy, weight in offsets]

        indices_per_cell: list[list[int]] = []
        weights_per_cell: list[list[float]] = []
        for y in range(depth):
            for x in range(width):
                indices: list[int] = []
                weights: list[float] = []
                for off_x, off_y, weight in offsets:
                    nx, ny = x + off_x, y + off_y
                    if 0 <= nx < width and 0 <= ny < depth:
                        indices.append(ny * width + nx)
                        weights.append(weight)
                indices_per_cell.append(indices)
                weights_per_cell.append(weights)
        self.brush_indices = indices_per_cell
        self.brush_weights = weights_per_cell