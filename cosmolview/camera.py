"""Orbit camera: view/projection matrices, drag rotation and scroll zoom."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

Quat = tuple[float, float, float, float]  # (x, y, z, w)

DEFAULT_DISTANCE = 35.0
DEFAULT_FOV = 15.0
NEAR_PLANE = 0.1
FAR_PLANE = 2000.0
DRAG_SENSITIVITY = 0.005
ZOOM_SENSITIVITY = 0.001
MIN_DISTANCE = 0.1
MAX_DISTANCE = 500.0

_IDENTITY: Quat = (0.0, 0.0, 0.0, 1.0)
_X = np.array([1.0, 0.0, 0.0])
_Y = np.array([0.0, 1.0, 0.0])
_FORWARD = np.array([0.0, 0.0, -1.0])


def _quat_rotate(q: Quat, v: np.ndarray) -> np.ndarray:
    """Rotate vector ``v`` by unit quaternion ``q``."""
    qv = np.array(q[:3], dtype=np.float64)
    w = q[3]
    t = 2.0 * np.cross(qv, v)
    return v + w * t + np.cross(qv, t)


def _quat_mul(a: Quat, b: Quat) -> Quat:
    ax, ay, az, aw = a
    bx, by, bz, bw = b
    return (
        aw * bx + ax * bw + ay * bz - az * by,
        aw * by - ax * bz + ay * bw + az * bx,
        aw * bz + ax * by - ay * bx + az * bw,
        aw * bw - ax * bx - ay * by - az * bz,
    )


def _quat_normalize(q: Quat) -> Quat:
    length = math.sqrt(sum(c * c for c in q))
    x, y, z, w = (c / length for c in q)
    return (x, y, z, w)


def _quat_from_axis_angle(axis: np.ndarray, angle: float) -> Quat:
    s = math.sin(0.5 * angle)
    return (float(axis[0] * s), float(axis[1] * s), float(axis[2] * s), math.cos(0.5 * angle))


def _normalize(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)


def look_at_rh(eye: np.ndarray, center: np.ndarray, up: np.ndarray) -> np.ndarray:
    """Right-handed view matrix (row-major, acts on column vectors)."""
    f = _normalize(center - eye)
    s = _normalize(np.cross(f, up))
    u = np.cross(s, f)
    matrix = np.eye(4)
    matrix[0, :3] = s
    matrix[1, :3] = u
    matrix[2, :3] = -f
    matrix[0, 3] = -np.dot(s, eye)
    matrix[1, 3] = -np.dot(u, eye)
    matrix[2, 3] = np.dot(f, eye)
    return matrix


def perspective_rh(fov_y: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection with depth mapped to [0, 1]."""
    h = math.cos(0.5 * fov_y) / math.sin(0.5 * fov_y)
    w = h / aspect
    r = far / (near - far)
    matrix = np.zeros((4, 4))
    matrix[0, 0] = w
    matrix[1, 1] = h
    matrix[2, 2] = r
    matrix[2, 3] = r * near
    matrix[3, 2] = -1.0
    return matrix


@dataclass
class CameraState:
    """A camera orbiting ``target`` at ``distance``, oriented by ``rotation``.

    ``rotation`` is a unit quaternion ``(x, y, z, w)``; ``fov`` is the
    vertical field of view in degrees.
    """

    target: tuple[float, float, float] = (0.0, 0.0, 0.0)
    distance: float = DEFAULT_DISTANCE
    rotation: Quat = field(default=_IDENTITY)
    fov: float = DEFAULT_FOV

    def matrices(self, aspect: float) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Return ``(view, projection, view_position)``.

        The matrices are row-major and transform column vectors.
        """
        direction = _quat_rotate(self.rotation, _FORWARD)
        target = np.asarray(self.target, dtype=np.float64)
        view_pos = target - direction * self.distance
        up = _quat_rotate(self.rotation, _Y)

        view = look_at_rh(view_pos, view_pos + direction, up)
        projection = perspective_rh(math.radians(self.fov), aspect, NEAR_PLANE, FAR_PLANE)
        return (
            view.astype(np.float32),
            projection.astype(np.float32),
            view_pos.astype(np.float32),
        )

    def rotate(self, drag_x: float, drag_y: float) -> None:
        """Turn the camera by a screen-space drag, about its own up and right axes."""
        angle_x = -drag_x * DRAG_SENSITIVITY
        angle_y = -drag_y * DRAG_SENSITIVITY

        camera_right = _quat_rotate(self.rotation, _X)
        camera_up = _quat_rotate(self.rotation, _Y)

        q_yaw = _quat_from_axis_angle(camera_up, angle_x)
        q_pitch = _quat_from_axis_angle(camera_right, angle_y)

        rotation = _quat_mul(_quat_mul(q_yaw, q_pitch), self.rotation)
        self.rotation = _quat_normalize(rotation)

    def zoom(self, scroll_delta: float) -> None:
        """Scale the distance by a scroll amount, kept within the allowed range."""
        if scroll_delta == 0.0:
            return
        factor = 1.0 + scroll_delta * ZOOM_SENSITIVITY
        self.distance = min(max(self.distance * factor, MIN_DISTANCE), MAX_DISTANCE)