"""A camera with free or target-orbiting modes and configurable world axes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable

from glviewer.geometry import Matrix4, Quaternion, Vec3

LOCAL_FORWARD = Vec3(0.0, 0.0, -1.0)
LOCAL_RIGHT = Vec3(1.0, 0.0, 0.0)
LOCAL_UP = Vec3(0.0, 1.0, 0.0)


class CameraMode(Enum):
    FREE = "free"
    TARGET = "target"


class ProjectionMode(Enum):
    PERSPECTIVE = "perspective"
    ORTHOGRAPHIC = "orthographic"


@dataclass
class CameraConfig:
    """Camera settings; the world vectors say how world x, y, z map to directions."""

    camera_mode: CameraMode = CameraMode.TARGET
    projection_mode: ProjectionMode = ProjectionMode.PERSPECTIVE
    fov: float = 45.0
    near_plane: float = 0.1
    far_plane: float = 1000.0
    initial_translation: Vec3 = field(default_factory=Vec3)
    world_forward: Vec3 = LOCAL_FORWARD
    world_right: Vec3 = LOCAL_RIGHT
    world_up: Vec3 = LOCAL_UP


class _Signal:
    def __init__(self) -> None:
        self._slots: list[Callable] = []

    def connect(self, slot: Callable) -> None:
        self._slots.append(slot)

    def emit(self, *args) -> None:
        for slot in list(self._slots):
            slot(*args)


class Camera:
    """Position, orientation and projection of the viewer's eye."""

    LOCAL_FORWARD = LOCAL_FORWARD
    LOCAL_RIGHT = LOCAL_RIGHT
    LOCAL_UP = LOCAL_UP

    def __init__(self, config: CameraConfig | None = None) -> None:
        self.camera_mode_changed = _Signal()
        self.projection_mode_changed = _Signal()
        self.target_changed = _Signal()

        self._config = CameraConfig()
        self._world_to_local = Quaternion()
        self._target = Vec3()
        self._translation = Vec3()
        self._rotation = Quaternion()
        self._projection = Matrix4.identity()
        self._aspect_ratio = 1.0
        self._distance = 0.0
        self._world = Matrix4.identity()
        self._dirty = True
        self.set_config(config if config is not None else self._config)

    def set_config(self, config: CameraConfig) -> None:
        """Apply a configuration and reset the camera to its initial state."""
        self._config = replace(config)
        local_rotation = Quaternion.from_axes(-LOCAL_FORWARD, LOCAL_RIGHT, LOCAL_UP)
        world_rotation = Quaternion.from_axes(
            -self._config.world_forward, self._config.world_right, self._config.world_up
        )
        self._world_to_local = local_rotation * world_rotation.conjugated()
        self.reset()

    def translate(self, dt: Vec3) -> None:
        self._dirty = True
        self._translation = self._translation + dt
        self._distance = (self._target - self._translation).length()
        self._update_frustum()

    def rotate(self, dr: Quaternion) -> None:
        """Rotate by dr; in target mode the camera orbits the target."""
        self._dirty = True
        self._rotation = dr * self._rotation
        if self._config.camera_mode is CameraMode.TARGET:
            delta_old = self._target - self._translation
            delta_new = dr.rotated_vector(delta_old)
            self._translation = self._translation + delta_old - delta_new

    def rotate_about(self, angle: float, axis: Vec3) -> None:
        """Rotate by angle degrees about axis."""
        self.rotate(Quaternion.from_axis_and_angle(axis, angle))

    def set_translation(self, t: Vec3) -> None:
        self._dirty = True
        self._translation = t
        self._distance = (self._target - self._translation).length()
        self._update_frustum()

    def set_rotation(self, r: Quaternion) -> None:
        self._dirty = True
        self._rotation = r
        if self._config.camera_mode is CameraMode.TARGET:
            delta_old = self._target - self._translation
            delta_new = self.forward_vector()
            self._translation = self._translation + delta_old - delta_new

    def set_target(self, t: Vec3) -> None:
        """Look at t from the current position."""
        self._dirty = True
        self._target = t
        delta = self._translation - self._target
        self._rotation = Quaternion.from_direction(delta, self.up_vector())
        self._distance = delta.length()
        self._update_frustum()
        self.target_changed.emit(self._target)

    def set_camera_mode(self, mode: CameraMode) -> None:
        """Switch mode; switching to target mode picks a target in front of the camera."""
        self._config.camera_mode = mode
        self.camera_mode_changed.emit(mode)
        if mode is CameraMode.TARGET:
            forward = self.forward_vector()
            current = self._translation.length()
            log_distance = math.log(current) if current > 0 else -math.inf
            self.set_target(
                self._translation
                + forward * self._config.initial_translation.length()
                + forward * log_distance
            )

    def set_projection_mode(self, mode: ProjectionMode) -> None:
        self._config.projection_mode = mode
        self.set_aspect_ratio(self._aspect_ratio)
        self.projection_mode_changed.emit(mode)

    def set_aspect_ratio(self, r: float) -> None:
        self._dirty = True
        self._aspect_ratio = r
        self._update_frustum()

    def _update_frustum(self) -> None:
        config = self._config
        z_near = config.near_plane
        z_far = max(2.0 * self._distance, config.far_plane)
        projection = Matrix4.identity()
        if config.projection_mode is ProjectionMode.PERSPECTIVE:
            projection = projection.perspective(config.fov, self._aspect_ratio, z_near, z_far)
        else:
            half = self._distance * math.tan(math.radians(config.fov / 2.0))
            width = self._aspect_ratio * half
            projection = projection.ortho(-width, width, -half, half, z_near, z_far)
        self._projection = projection

    def reset(self) -> None:
        """Return to the configured initial translation, looking along the world axes."""
        self.set_translation(self._config.initial_translation)
        self.set_target(Vec3())
        self._rotation = self._world_to_local.conjugated()

    def to_matrix(self) -> Matrix4:
        """The combined projection and view matrix."""
        if self._dirty:
            self._dirty = False
            view = (
                Matrix4.identity()
                .rotate(self._rotation.conjugated())
                .translate(-self._translation)
            )
            self._world = self._projection @ view
        return self._world

    @property
    def translation(self) -> Vec3:
        return self._translation

    @property
    def rotation(self) -> Quaternion:
        return self._rotation

    @property
    def target(self) -> Vec3:
        return self._target

    @property
    def projection(self) -> Matrix4:
        return self._projection

    @property
    def camera_mode(self) -> CameraMode:
        return self._config.camera_mode

    @property
    def projection_mode(self) -> ProjectionMode:
        return self._config.projection_mode

    @property
    def world_forward_vector(self) -> Vec3:
        return self._config.world_forward

    @property
    def world_right_vector(self) -> Vec3:
        return self._config.world_right

    @property
    def world_up_vector(self) -> Vec3:
        return self._config.world_up

    def forward_vector(self) -> Vec3:
        return self._rotation.rotated_vector(LOCAL_FORWARD)

    def right_vector(self) -> Vec3:
        return self._rotation.rotated_vector(LOCAL_RIGHT)

    def up_vector(self) -> Vec3:
        return self._rotation.rotated_vector(LOCAL_UP)

    def upside_down(self) -> bool:
        """True when the camera's view of world up actually points down."""
        up = self._config.world_up
        return (self._rotation.conjugated() * up).dot(self._world_to_local * up) < 0

    def describe(self) -> str:
        """A readable summary of position and rotation."""
        t = self._translation
        r = self._rotation
        return (
            "Camera\n{\n"
            f"Position: <{t.x:g}, {t.y:g}, {t.z:g}>\n"
            f"Rotation: <{r.x:g}, {r.y:g}, {r.z:g} | {r.w:g}>\n}}"
        )

    __str__ = describe