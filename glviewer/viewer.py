"""Scene viewer state: scene data, grid and axes, and camera input handling."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, IntFlag

from glviewer.camera import Camera, CameraConfig, CameraMode, ProjectionMode
from glviewer.gldata import GLData
from glviewer.geometry import Vec3

logger = logging.getLogger(__name__)

_ROTATE_SPEED = 0.2
_WHEEL_STEP = 150.0


@dataclass
class GridConfig:
    """Extent, spacing and colour of the ground grid."""

    min_x: int = -2000
    max_x: int = 2000
    min_y: int = -2000
    max_y: int = 2000
    step: int = 100
    color: Vec3 = Vec3(0.7, 0.7, 0.7)


@dataclass
class AxesConfig:
    """Length, arrow size and colours of the coordinate axes."""

    length: float = 250.0
    arrow_size: float = 10.0
    color_x: Vec3 = Vec3(1.0, 0.0, 0.0)
    color_y: Vec3 = Vec3(0.0, 1.0, 0.0)
    color_z: Vec3 = Vec3(0.0, 0.0, 1.0)


class MouseButton(IntFlag):
    NONE = 0
    LEFT = 1 << 0
    RIGHT = 1 << 1
    MIDDLE = 1 << 2


class Primitive(Enum):
    TRIANGLES = "triangles"
    LINES = "lines"


@dataclass(frozen=True)
class DrawCall:
    """One draw of a contiguous vertex range; line_width is None for triangles."""

    primitive: Primitive
    first: int
    count: int
    line_width: float | None = None


class Viewer:
    """Holds the scene, the grid and axes, and turns input into camera motion."""

    MINIMUM_SIZE_HINT = (50, 50)
    SIZE_HINT = (400, 400)

    def __init__(self) -> None:
        self.camera = Camera()
        self.draw_grid = True
        self.draw_axes = True
        self._data = GLData()
        self._grid_vertex_idx = -1
        self._axes_vertex_idx = -1
        self._grid_config = GridConfig()
        self._axes_config = AxesConfig()
        self._last_pos = (0, 0)
        self._setup()
        self.camera.reset()

    @property
    def data(self) -> GLData:
        return self._data

    @property
    def grid_config(self) -> GridConfig:
        return self._grid_config

    @property
    def axes_config(self) -> AxesConfig:
        return self._axes_config

    def set_data(self, data: GLData) -> None:
        """Replace the scene; data is copied and must hold no grid or axes yet."""
        self._data = data.copy()
        self._grid_vertex_idx = -1
        self._axes_vertex_idx = -1
        self._setup()

    def set_grid_config(self, grid: GridConfig) -> None:
        self._grid_config = grid
        self._setup()

    def set_axes_config(self, axes: AxesConfig) -> None:
        self._axes_config = axes
        self._setup()

    def _setup(self) -> None:
        if self._grid_config.step <= 0:
            raise ValueError("grid step must be positive")
        if self._grid_vertex_idx > -1:
            self._data.resize_line_vertex_count(self._grid_vertex_idx)

        self._grid_vertex_idx = self._data.line_vertex_count()
        self._add_grid()
        self._axes_vertex_idx = self._data.line_vertex_count()
        self._add_axes()

    def _add_grid(self) -> None:
        grid = self._grid_config
        for x in range(grid.min_x, grid.max_x + 1, grid.step):
            for y in range(grid.min_y, grid.max_y + 1, grid.step):
                self._data.add_line(Vec3(-x, y, 0.0), Vec3(x, y, 0.0), grid.color)
                self._data.add_line(Vec3(x, -y, 0.0), Vec3(x, y, 0.0), grid.color)

    def _add_axes(self) -> None:
        axes = self._axes_config
        length = axes.length
        arrow = axes.arrow_size
        half = arrow / 2.0
        add = self._data.add_line

        add(Vec3(-length, 0, 0), Vec3(length, 0, 0), axes.color_x)
        add(Vec3(length, 0, 0), Vec3(length - arrow, half, 0), axes.color_x)
        add(Vec3(length, 0, 0), Vec3(length - arrow, -half, 0), axes.color_x)

        add(Vec3(0, -length, 0), Vec3(0, length, 0), axes.color_y)
        add(Vec3(0, length, 0), Vec3(half, length - arrow, 0), axes.color_y)
        add(Vec3(0, length, 0), Vec3(-half, length - arrow, 0), axes.color_y)

        add(Vec3(0, 0, -length), Vec3(0, 0, length), axes.color_z)
        add(Vec3(0, 0, length), Vec3(half, 0, length - arrow), axes.color_z)
        add(Vec3(0, 0, length), Vec3(-half, 0, length - arrow), axes.color_z)

    def draw_ranges(self) -> list[DrawCall]:
        """The draws a frame consists of, in order."""
        calls = [
            DrawCall(Primitive.TRIANGLES, 0, self._data.triangle_vertex_count()),
            DrawCall(Primitive.LINES, 0, self._grid_vertex_idx, 2.0),
        ]
        if self.draw_grid and self._grid_vertex_idx > -1:
            calls.append(DrawCall(Primitive.LINES, self._grid_vertex_idx,
                                  self._axes_vertex_idx - self._grid_vertex_idx, 0.5))
        if self.draw_axes and self._axes_vertex_idx > -1:
            calls.append(DrawCall(Primitive.LINES, self._axes_vertex_idx,
                                  self._data.line_vertex_count() - self._axes_vertex_idx, 3.0))
        return calls

    def resize(self, width: int, height: int) -> None:
        if height == 0:
            raise ValueError("height must not be zero")
        self.camera.set_aspect_ratio(width / height)

    def key_press(self, key: str) -> None:
        """Handle a key: a, g toggle axes and grid; 0 resets; p, o, f, t switch modes; l logs."""
        key = key.lower()
        if key == "a":
            self.draw_axes = not self.draw_axes
        elif key == "g":
            self.draw_grid = not self.draw_grid
        elif key == "0":
            self.camera.reset()
        elif key == "p":
            self.camera.set_projection_mode(ProjectionMode.PERSPECTIVE)
        elif key == "o":
            self.camera.set_projection_mode(ProjectionMode.ORTHOGRAPHIC)
        elif key == "f":
            self.camera.set_camera_mode(CameraMode.FREE)
        elif key == "t":
            self.camera.set_camera_mode(CameraMode.TARGET)
        elif key == "l":
            logger.debug("%s", self.camera.describe())

    def mouse_press(self, x: int, y: int) -> None:
        self._last_pos = (x, y)

    def mouse_move(self, x: int, y: int, buttons: MouseButton, shift: bool = False) -> None:
        """Drag relative to the press point; the pointer is held at that point."""
        dx = float(x - self._last_pos[0])
        dy = float(y - self._last_pos[1])
        if shift:
            dx /= 4
            dy /= 4

        camera = self.camera
        free = camera.camera_mode is CameraMode.FREE
        up_down = -1 if camera.upside_down() else 1

        if buttons & MouseButton.LEFT:
            if free:
                camera.rotate_about(-_ROTATE_SPEED * dx, camera.up_vector())
                camera.rotate_about(-_ROTATE_SPEED * dy, camera.right_vector())
            else:
                camera.rotate_about(-_ROTATE_SPEED * dx, up_down * camera.world_up_vector)
                side = camera.forward_vector().cross(camera.world_up_vector)
                camera.rotate_about(-_ROTATE_SPEED * dy, up_down * side)
        elif buttons & MouseButton.RIGHT:
            if free:
                camera.rotate_about(_ROTATE_SPEED * dx, camera.forward_vector())
                camera.rotate_about(-_ROTATE_SPEED * dy, camera.right_vector())
            else:
                camera.rotate_about(-_ROTATE_SPEED * dx, camera.forward_vector())
                side = camera.forward_vector().cross(camera.world_up_vector)
                camera.rotate_about(-_ROTATE_SPEED * dy, up_down * side)
        elif buttons & MouseButton.MIDDLE:
            if free:
                dx, dy = -dx, -dy
            camera.translate(-dx * camera.right_vector())
            camera.translate(dy * camera.up_vector())

    def wheel(self, delta_y: float, shift: bool = False) -> None:
        """Move along the view direction; forward for positive delta."""
        if delta_y == 0:
            return
        factor = _WHEEL_STEP / 10 if shift else _WHEEL_STEP
        if delta_y < 0:
            factor = -factor
        self.camera.translate(factor * self.camera.forward_vector())


def example_config() -> CameraConfig:
    """A camera setup for a Z-up world seen from a distance."""
    return CameraConfig(
        camera_mode=CameraMode.TARGET,
        projection_mode=ProjectionMode.PERSPECTIVE,
        fov=45.0,
        near_plane=1.0,
        far_plane=4000.0,
        initial_translation=Vec3(900.0, 200.0, 100.0),
        world_forward=Vec3(-1.0, 0.0, 0.0),
        world_right=Vec3(0.0, 1.0, 0.0),
        world_up=Vec3(0.0, 0.0, 1.0),
    )