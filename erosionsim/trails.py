"""Vertex data for drawing droplet trail points."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

Vec4 = tuple[float, float, float, float]

TRAIL_ALPHA = 0.1
POINT_SIZE = 3.0


@dataclass(frozen=True)
class TrailVertexData:
    """Per-point positions and RGBA colours ready for a point draw call."""

    positions: list[Vec4] = field(default_factory=list)
    colours: list[Vec4] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.positions)


class DropletVisualizer:
    """Turns ``(x, y, z, lifetime)`` trail points into drawable vertex data."""

    def __init__(
        self,
        max_particles: int,
        max_alive: int = 1000,
        num_per_frame: int = 120,
        pos: tuple[float, float, float] = (0.0, 0.0, 0.0),
    ) -> None:
        self.max_particles = max_particles
        self.max_alive = max_alive
        self.num_per_frame = num_per_frame
        self.pos = pos
        self.show_trail_points = True

    def trail_vertex_data(self, points: Iterable[Vec4]) -> TrailVertexData | None:
        """Build positions and colours, the lifetime mapped to the red channel.

        Returns ``None`` when there are points but trails are hidden.
        """
        positions = [tuple(p) for p in points]
        if positions and not self.show_trail_points:
            return None
        colours = [
            (min(max(p[3] / 100.0, 0.0), 100.0), 0.0, 0.0, TRAIL_ALPHA) for p in positions
        ]
        return TrailVertexData(positions=positions, colours=colours)

    def toggle(self) -> bool:
        """Flip trail visibility and return the new state."""
        self.show_trail_points = not self.show_trail_points
        return self.show_trail_points