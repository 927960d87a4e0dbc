"""Scene state: terrain plane, droplet trails, camera and keyboard handling."""

from __future__ import annotations

import enum
import logging
import math
import random
from typing import Callable

from erosionsim.camera import CameraControl
from erosionsim.plane import Plane
from erosionsim.trails import DropletVisualizer

log = logging.getLogger(__name__)

Matrix = tuple[tuple[float, float, float, float], ...]

FIELD_OF_VIEW = 45.0
NEAR_PLANE = 0.001
FAR_PLANE = 10000.0
KEY_MOVE_INCREMENT = 0.2


class Key(enum.Enum):
    """Keys the scene reacts to."""

    E = "e"
    W = "w"
    V = "v"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    OTHER = "other"


def _perspective(fovy_degrees: float, aspect: float, near: float, far: float) -> Matrix:
    f = 1.0 / math.tan(math.radians(fovy_degrees) / 2.0)
    return (
        (f / aspect, 0.0, 0.0, 0.0),
        (0.0, f, 0.0, 0.0),
        (0.0, 0.0, (far + near) / (near - far), -1.0),
        (0.0, 0.0, (2.0 * far * near) / (near - far), 0.0),
    )


class Scene:
    """Owns the terrain and reacts to user input the way the viewer does."""

    droplets_per_update = 1000
    erosion_lifetime = 30
    erode_key_droplets = 40000

    def __init__(
        self,
        width: int = 300,
        depth: int = 300,
        spacing: float = 1.0,
        rng: random.Random | None = None,
    ) -> None:
        self.plane = Plane(width, depth, spacing, rng)
        self.emitter = DropletVisualizer(10000, 10000, 800, (0.0, 0.0, 0.0))
        self.camera = CameraControl()
        self.animate = True
        self.wireframe_mode = False
        self.keys_pressed: set[Key] = set()
        self.projection: Matrix = _perspective(
            FIELD_OF_VIEW,
            self.camera.win.width / self.camera.win.height,
            NEAR_PLANE,
            FAR_PLANE,
        )
        self.on_update: Callable[[], None] = lambda: None

    def _request_update(self) -> None:
        self.on_update()

    def resize(self, w: int, h: int, pixel_ratio: float = 1.0) -> None:
        """Store the framebuffer size and rebuild the projection matrix."""
        self.camera.win.width = int(w * pixel_ratio)
        self.camera.win.height = int(h * pixel_ratio)
        self.projection = _perspective(
            FIELD_OF_VIEW,
            self.camera.win.width / self.camera.win.height,
            NEAR_PLANE,
            FAR_PLANE,
        )

    def update_terrain_frequency(self, freq: float) -> None:
        self.plane.set_noise_frequency(freq)
        self.plane.regenerate()
        self._request_update()

    def update_terrain_octaves(self, octaves: int) -> None:
        self.plane.set_noise_octaves(octaves)
        self.plane.regenerate()
        self._request_update()

    def update_grid_width(self, width: int) -> None:
        self.plane.width = width
        self.plane.regenerate()
        self._request_update()

    def update_grid_depth(self, depth: int) -> None:
        self.plane.depth = depth
        self.plane.regenerate()
        self._request_update()

    def update_terrain_height(self, height: int) -> None:
        self.plane.max_height = height
        self.plane.regenerate()
        self._request_update()

    def call_erosion_event(self, total_droplets: int, lifetime: int) -> int:
        """Erode in batches of ``droplets_per_update``; returns the batch count.

        Each batch uses the fixed ``erosion_lifetime``; ``lifetime`` is only reported.
        """
        log.info("Erosion droplets %d", total_droplets)
        log.info("Droplet Lifetime %d", lifetime)
        return self._erode_in_batches(total_droplets)

    def _erode_in_batches(self, total_droplets: int) -> int:
        batches = max(0, int(total_droplets / self.droplets_per_update))
        for _ in range(batches):
            self.plane.apply_hydraulic_erosion(self.droplets_per_update, self.erosion_lifetime)
            self._request_update()
        return batches

    def key_press(self, key: Key) -> None:
        if key is Key.E:
            self._erode_in_batches(self.erode_key_droplets)
        elif key is Key.W:
            self.wireframe_mode = not self.wireframe_mode
            self._request_update()
        elif key is Key.V:
            self.emitter.toggle()
            self._request_update()

    def key_release(self, key: Key) -> None:
        self.keys_pressed.discard(key)

    def process_keys(self) -> tuple[float, float]:
        """Movement ``(dx, dz)`` implied by the keys currently held."""
        dx = 0.0
        dz = 0.0
        for key in self.keys_pressed:
            if key is Key.LEFT:
                dx -= KEY_MOVE_INCREMENT
            elif key is Key.RIGHT:
                dx += KEY_MOVE_INCREMENT
            elif key is Key.UP:
                dz += KEY_MOVE_INCREMENT
            elif key is Key.DOWN:
                dz -= KEY_MOVE_INCREMENT
        return dx, dz