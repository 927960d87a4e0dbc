"""Mouse-driven rotation, panning and zoom of the scene camera."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

INCREMENT = 0.5
ZOOM = 3.0


@dataclass
class WinParams:
    """Window size and the mouse state used while dragging."""

    spin_x_face: int = 0
    spin_y_face: int = 0
    rotate: bool = False
    translate: bool = False
    orig_x: int = 0
    orig_y: int = 0
    orig_x_pos: int = 0
    orig_y_pos: int = 0
    width: int = 1024
    height: int = 720


class MouseButton(enum.Flag):
    NONE = 0
    LEFT = enum.auto()
    RIGHT = enum.auto()
    MIDDLE = enum.auto()


@dataclass
class CameraControl:
    """Left drag rotates, right drag pans, the wheel moves along z."""

    win: WinParams = field(default_factory=WinParams)
    model_pos: list[float] = field(default_factory=lambda: [0.0, 0.0, 0.0])

    def mouse_press(self, x: float, y: float, button: MouseButton) -> None:
        if button == MouseButton.LEFT:
            self.win.orig_x = int(x)
            self.win.orig_y = int(y)
            self.win.rotate = True
        elif button == MouseButton.RIGHT:
            self.win.orig_x_pos = int(x)
            self.win.orig_y_pos = int(y)
            self.win.translate = True

    def mouse_move(self, x: float, y: float, buttons: MouseButton) -> bool:
        """Apply a drag; returns True when the view changed."""
        win = self.win
        if win.rotate and buttons == MouseButton.LEFT:
            diff_x = int(x - win.orig_x)
            diff_y = int(y - win.orig_y)
            win.spin_x_face += int(0.5 * diff_y)
            win.spin_y_face += int(0.5 * diff_x)
            win.orig_x = int(x)
            win.orig_y = int(y)
            return True
        if win.translate and buttons == MouseButton.RIGHT:
            diff_x = int(x - win.orig_x_pos)
            diff_y = int(y - win.orig_y_pos)
            win.orig_x_pos = int(x)
            win.orig_y_pos = int(y)
            self.model_pos[0] += INCREMENT * diff_x
            self.model_pos[1] -= INCREMENT * diff_y
            return True
        return False

    def mouse_release(self, button: MouseButton) -> None:
        if button == MouseButton.LEFT:
            self.win.rotate = False
        if button == MouseButton.RIGHT:
            self.win.translate = False

    def wheel(self, delta_y: float) -> None:
        if delta_y > 0:
            self.model_pos[2] += ZOOM
        elif delta_y < 0:
            self.model_pos[2] -= ZOOM