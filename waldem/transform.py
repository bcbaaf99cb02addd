"""Position, rotation and scale of an object, with its world matrix."""

from __future__ import annotations

import math

import numpy as np

from waldem.mathutils import (
    IDENTITY_QUAT,
    ArrayLike,
    angle_axis,
    matrix_to_quat,
    normalize,
    quat_from_euler,
    quat_look_at,
    quat_multiply,
    quat_to_matrix,
    scale_matrix,
    translation_matrix,
)

_DEG_TO_RAD = math.pi / 180.0


class Transform:
    """An object's placement; the world matrix is kept up to date on change."""

    def __init__(
        self,
        position: ArrayLike = (0.0, 0.0, 0.0),
        rotation: ArrayLike | None = None,
        local_scale: ArrayLike = (1.0, 1.0, 1.0),
    ) -> None:
        self._position = np.array(position, dtype=float)
        self._rotation = np.array(IDENTITY_QUAT if rotation is None else rotation, dtype=float)
        self._local_scale = np.array(local_scale, dtype=float)
        self._matrix = np.eye(4)
        self._compile_matrix()

    @classmethod
    def from_matrix(cls, matrix: ArrayLike) -> Transform:
        """Build a transform by decomposing a world matrix."""
        transform = cls()
        transform.set_matrix(matrix)
        return transform

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @property
    def rotation(self) -> np.ndarray:
        return self._rotation.copy()

    @property
    def local_scale(self) -> np.ndarray:
        return self._local_scale.copy()

    @property
    def matrix(self) -> np.ndarray:
        return self._matrix.copy()

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        return self._matrix.astype(dtype) if dtype is not None else self._matrix.copy()

    def _direction(self, local: tuple[float, float, float]) -> np.ndarray:
        return (self._matrix @ np.array([*local, 0.0]))[:3]

    @property
    def forward_vector(self) -> np.ndarray:
        return self._direction((0.0, 0.0, 1.0))

    @property
    def right_vector(self) -> np.ndarray:
        return self._direction((1.0, 0.0, 0.0))

    @property
    def up_vector(self) -> np.ndarray:
        return self._direction((0.0, 1.0, 0.0))

    def reset(self) -> None:
        """Return to the origin with no rotation and unit scale."""
        self._local_scale = np.ones(3)
        self._position = np.zeros(3)
        self._rotation = IDENTITY_QUAT.copy()
        self._compile_matrix()

    def set_position(self, position: ArrayLike) -> None:
        self._position = np.array(position, dtype=float)
        self._compile_matrix()

    def translate(self, translation: ArrayLike) -> None:
        """Move by ``translation`` in world space."""
        self._position = self._position + np.asarray(translation, dtype=float)
        self._compile_matrix()

    def rotate(self, rotation: ArrayLike) -> None:
        """Apply the quaternion ``rotation`` on top of the current rotation."""
        self._rotation = quat_multiply(rotation, self._rotation)
        self._compile_matrix()

    def rotate_yaw_pitch_roll(self, yaw: float, pitch: float, roll: float) -> None:
        """Rotate by angles in degrees: pitch locally, yaw and roll globally."""
        vertical = angle_axis(pitch * _DEG_TO_RAD, (1.0, 0.0, 0.0))
        horizontal = angle_axis(yaw * _DEG_TO_RAD, (0.0, 1.0, 0.0))
        roll_rotation = angle_axis(roll * _DEG_TO_RAD, (0.0, 0.0, 1.0))

        rotation = quat_multiply(self._rotation, vertical)
        rotation = quat_multiply(horizontal, rotation)
        self._rotation = quat_multiply(roll_rotation, rotation)
        self._compile_matrix()

    def look_at(self, target: ArrayLike) -> None:
        """Turn so that the forward vector points at ``target``."""
        direction = normalize(np.asarray(target, dtype=float) - self._position)
        near_vertical = abs(float(np.dot(direction, (0.0, 1.0, 0.0)))) > 0.99
        up = (0.0, 0.0, 1.0) if near_vertical else (0.0, 1.0, 0.0)
        self.set_rotation(quat_look_at(direction, up))

    def move(self, delta: ArrayLike) -> None:
        """Move by ``delta`` given along the right, up and forward axes."""
        dx, dy, dz = np.asarray(delta, dtype=float)
        self.translate(self.forward_vector * dz + self.right_vector * dx + self.up_vector * dy)

    def set_euler(self, euler: ArrayLike) -> None:
        """Set the rotation from Euler angles in degrees."""
        self._rotation = quat_from_euler(np.asarray(euler, dtype=float) * _DEG_TO_RAD)
        self._compile_matrix()

    def set_rotation(self, rotation: ArrayLike) -> None:
        self._rotation = np.array(rotation, dtype=float)
        self._compile_matrix()

    def scale(self, local_scale: ArrayLike) -> None:
        """Replace the local scale."""
        self._local_scale = np.array(local_scale, dtype=float)
        self._compile_matrix()

    def set_matrix(self, matrix: ArrayLike) -> None:
        """Take ``matrix`` as the world matrix and derive the components from it."""
        m = np.array(matrix, dtype=float)
        self._matrix = m.copy()
        self._position = m[:3, 3].copy()
        scale = np.linalg.norm(m[:3, :3], axis=0)
        self._local_scale = scale
        self._rotation = matrix_to_quat(m[:3, :3] / scale)

    def inverse(self) -> np.ndarray:
        """The inverse of the world matrix, as used for view matrices."""
        return np.linalg.inv(self._matrix)

    def _compile_matrix(self) -> None:
        self._matrix = (
            translation_matrix(self._position)
            @ quat_to_matrix(self._rotation)
            @ scale_matrix(self._local_scale)
        )