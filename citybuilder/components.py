"""Camera, transformation and directional light with their matrix maths.

Matrices are 4x4 numpy arrays that act on column vectors (``M @ v``).
Projections use a right-handed view space and clip depth from -1 to 1.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import List, Tuple

import numpy as np

from .grid import CASCADE_FAR_PLANE_FACTORS, SHADOW_CASCADE_COUNT

_WORLD_UP = np.array([0.0, 1.0, 0.0])


def _vec(values: Sequence[float], size: int = 3) -> np.ndarray:
    array = np.asarray(values, dtype=float).reshape(-1)
    if array.shape != (size,):
        raise ValueError(f"expected a vector of {size} components")
    return array.copy()


def _normalize(vector: np.ndarray) -> np.ndarray:
    length = np.linalg.norm(vector)
    if length == 0:
        raise ValueError("cannot normalize the zero vector")
    return vector / length


def perspective(fov_y: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Perspective projection; ``fov_y`` in radians."""
    f = 1.0 / math.tan(fov_y / 2.0)
    result = np.zeros((4, 4))
    result[0, 0] = f / aspect
    result[1, 1] = f
    result[2, 2] = -(far + near) / (far - near)
    result[2, 3] = -(2.0 * far * near) / (far - near)
    result[3, 2] = -1.0
    return result


def look_at(eye: Sequence[float], center: Sequence[float], up: Sequence[float]) -> np.ndarray:
    """View matrix looking from ``eye`` towards ``center``."""
    eye_v = _vec(eye)
    forward = _normalize(_vec(center) - eye_v)
    side = _normalize(np.cross(forward, _vec(up)))
    upward = np.cross(side, forward)
    result = np.identity(4)
    result[0, :3] = side
    result[1, :3] = upward
    result[2, :3] = -forward
    result[0, 3] = -side @ eye_v
    result[1, 3] = -upward @ eye_v
    result[2, 3] = forward @ eye_v
    return result


def orthographic(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> np.ndarray:
    """Orthographic projection of the given box."""
    result = np.identity(4)
    result[0, 0] = 2.0 / (right - left)
    result[1, 1] = 2.0 / (top - bottom)
    result[2, 2] = -2.0 / (far - near)
    result[0, 3] = -(right + left) / (right - left)
    result[1, 3] = -(top + bottom) / (top - bottom)
    result[2, 3] = -(far + near) / (far - near)
    return result


def frustum_corners(projection: np.ndarray, view: np.ndarray) -> np.ndarray:
    """The eight world-space corners of a view frustum, as rows ``(x, y, z, 1)``."""
    inverse = np.linalg.inv(np.asarray(projection) @ np.asarray(view))
    corners = []
    for x in (0, 1):
        for y in (0, 1):
            for z in (0, 1):
                point = inverse @ np.array([2.0 * x - 1.0, 2.0 * y - 1.0, 2.0 * z - 1.0, 1.0])
                corners.append(point / point[3])
    return np.array(corners)


def _translation(offset: np.ndarray) -> np.ndarray:
    result = np.identity(4)
    result[:3, 3] = offset
    return result


def _scaling(factors: np.ndarray) -> np.ndarray:
    return np.diag([factors[0], factors[1], factors[2], 1.0])


def _angle_axis(angle: float, axis: Sequence[float]) -> np.ndarray:
    half = angle * 0.5
    return np.concatenate(([math.cos(half)], _vec(axis) * math.sin(half)))


def _quat_from_euler(angles: Sequence[float]) -> np.ndarray:
    cx, cy, cz = np.cos(_vec(angles) * 0.5)
    sx, sy, sz = np.sin(_vec(angles) * 0.5)
    return np.array(
        [
            cx * cy * cz + sx * sy * sz,
            sx * cy * cz - cx * sy * sz,
            cx * sy * cz + sx * cy * sz,
            cx * cy * sz - sx * sy * cz,
        ]
    )


def _quat_mul(p: np.ndarray, q: np.ndarray) -> np.ndarray:
    pw, px, py, pz = p
    qw, qx, qy, qz = q
    return np.array(
        [
            pw * qw - px * qx - py * qy - pz * qz,
            pw * qx + px * qw + py * qz - pz * qy,
            pw * qy + py * qw + pz * qx - px * qz,
            pw * qz + pz * qw + px * qy - py * qx,
        ]
    )


def _quat_to_mat4(q: np.ndarray) -> np.ndarray:
    w, x, y, z = q
    result = np.identity(4)
    result[:3, :3] = [
        [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
        [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
        [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
    ]
    return result


@dataclass(eq=False)
class Transformation:
    """Position, rotation quaternion ``(w, x, y, z)`` and scale of an entity."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    rotation: np.ndarray = field(default_factory=lambda: np.array([1.0, 0.0, 0.0, 0.0]))
    scale: np.ndarray = field(default_factory=lambda: np.ones(3))
    transform: np.ndarray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.position = _vec(self.position)
        self.rotation = _vec(self.rotation, 4)
        self.scale = _vec(self.scale)
        self.calculate_transform()

    def calculate_transform(self) -> np.ndarray:
        """Recompute the model matrix: translate, then scale, then rotate."""
        self.transform = (
            _translation(self.position) @ _scaling(self.scale) @ _quat_to_mat4(self.rotation)
        )
        return self.transform

    def translate(self, translation: Sequence[float]) -> None:
        self.position = self.position + _vec(translation)

    def rotate(self, axis: Sequence[float], angle: float) -> None:
        """Apply a further rotation of ``angle`` radians about ``axis``."""
        self.rotation = _quat_mul(_angle_axis(angle, axis), self.rotation)

    def set_rotation_axis_angle(self, axis: Sequence[float], angle: float) -> None:
        self.rotation = _angle_axis(angle, axis)

    def set_rotation_euler(self, euler_angles: Sequence[float]) -> None:
        """Set the rotation from pitch, yaw and roll in radians."""
        self.rotation = _quat_from_euler(euler_angles)

    def add_scale(self, scale: Sequence[float]) -> None:
        """Multiply the scale component-wise."""
        self.scale = self.scale * _vec(scale)


@dataclass(eq=False)
class Camera:
    """Perspective camera oriented by yaw and pitch in degrees."""

    fov: float
    width: float
    height: float
    near: float
    far: float
    yaw: float = 0.0
    pitch: float = 0.0
    front: np.ndarray = field(default_factory=lambda: np.array([1.0, 0.0, 0.0]))
    right: np.ndarray = field(default_factory=lambda: np.array([0.0, 0.0, 1.0]))
    up: np.ndarray = field(default_factory=lambda: np.array([0.0, 1.0, 0.0]))
    projection_matrix: np.ndarray = field(default_factory=lambda: np.identity(4))
    view_matrix: np.ndarray = field(default_factory=lambda: np.identity(4))

    def calculate_vectors(self) -> None:
        """Derive front, right and up from yaw and pitch."""
        yaw, pitch = math.radians(self.yaw), math.radians(self.pitch)
        self.front = np.array(
            [
                math.cos(yaw) * math.cos(pitch),
                math.sin(pitch),
                math.sin(yaw) * math.cos(pitch),
            ]
        )
        self.right = _normalize(np.cross(self.front, _WORLD_UP))
        self.up = _normalize(np.cross(self.right, self.front))

    def calculate_matrices(self, transform: Transformation) -> None:
        """Update projection and view matrices for a camera at ``transform``."""
        self.projection_matrix = perspective(
            math.radians(self.fov), self.width / self.height, self.near, self.far
        )
        self.calculate_vectors()
        self.view_matrix = look_at(
            transform.position, transform.position + self.front, self.up
        )


def _identities() -> List[np.ndarray]:
    return [np.identity(4) for _ in range(SHADOW_CASCADE_COUNT)]


@dataclass(eq=False)
class DirectionalLight:
    """Light shining along ``direction`` with one shadow cascade per split."""

    direction: np.ndarray
    ambient: np.ndarray = field(default_factory=lambda: np.zeros(3))
    diffuse: np.ndarray = field(default_factory=lambda: np.zeros(3))
    specular: np.ndarray = field(default_factory=lambda: np.zeros(3))
    light_projection: List[np.ndarray] = field(default_factory=_identities)
    light_view: List[np.ndarray] = field(default_factory=_identities)

    def __post_init__(self) -> None:
        self.direction = _normalize(_vec(self.direction))
        self.ambient = _vec(self.ambient)
        self.diffuse = _vec(self.diffuse)
        self.specular = _vec(self.specular)

    def calculate_light_matrices(self, camera: Camera) -> None:
        """Fit every shadow cascade to its slice of the camera frustum."""
        depth = camera.far - camera.near
        for i in range(SHADOW_CASCADE_COUNT):
            near = camera.near if i == 0 else depth * CASCADE_FAR_PLANE_FACTORS[i - 1] + camera.near
            far = depth * CASCADE_FAR_PLANE_FACTORS[i] + camera.near
            self.light_projection[i], self.light_view[i] = self.cascade_matrices(
                camera, near, far
            )

    def cascade_matrices(
        self, camera: Camera, near_plane: float, far_plane: float
    ) -> Tuple[np.ndarray, np.ndarray]:
        """Light projection and view matrices enclosing a frustum slice."""
        projection = perspective(
            math.radians(camera.fov), camera.width / camera.height, near_plane, far_plane
        )
        corners = frustum_corners(projection, camera.view_matrix)
        center = corners[:, :3].mean(axis=0)

        view = look_at(center - self.direction, center, _WORLD_UP)

        in_light = (view @ corners.T).T
        in_light = in_light[:, :3] / in_light[:, 3:4]
        min_x, min_y, min_z = in_light.min(axis=0)
        max_x, max_y, max_z = in_light.max(axis=0)

        z_mult = 5.1
        min_z = min_z * z_mult if min_z < 0 else min_z / z_mult
        max_z = max_z / z_mult if max_z < 0 else max_z * z_mult

        return orthographic(min_x, max_x, min_y, max_y, min_z, max_z), view