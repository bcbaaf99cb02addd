"""Vector, matrix and quaternion helpers.

Vectors are numpy arrays. Matrices are 4x4 numpy arrays that act on column
vectors (``m @ v``). Quaternions are numpy arrays ordered ``(w, x, y, z)``.
Rotations follow the left-handed conventions the engine is built on.
"""

from __future__ import annotations

import math
from typing import Sequence, Union

import numpy as np

ArrayLike = Union[Sequence[float], np.ndarray]

IDENTITY_QUAT = np.array([1.0, 0.0, 0.0, 0.0])


def _as_vector(values: ArrayLike, size: int) -> np.ndarray:
    array = np.asarray(values, dtype=float)
    if array.shape != (size,):
        raise ValueError(f"expected a vector of {size} components, got shape {array.shape}")
    return array


def normalize(v: ArrayLike) -> np.ndarray:
    """Return ``v`` scaled to unit length; a zero vector raises ValueError."""
    array = np.asarray(v, dtype=float)
    length = float(np.linalg.norm(array))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return array / length


def quat_multiply(a: ArrayLike, b: ArrayLike) -> np.ndarray:
    """Hamilton product ``a * b``: the rotation ``b`` followed by ``a``."""
    aw, ax, ay, az = _as_vector(a, 4)
    bw, bx, by, bz = _as_vector(b, 4)
    return np.array(
        [
            aw * bw - ax * bx - ay * by - az * bz,
            aw * bx + ax * bw + ay * bz - az * by,
            aw * by + ay * bw + az * bx - ax * bz,
            aw * bz + az * bw + ax * by - ay * bx,
        ]
    )


def angle_axis(angle: float, axis: ArrayLike) -> np.ndarray:
    """Quaternion rotating by ``angle`` radians about ``axis``."""
    axis_vec = _as_vector(axis, 3)
    half = angle * 0.5
    s = math.sin(half)
    return np.array([math.cos(half), *(axis_vec * s)])


def quat_to_matrix(q: ArrayLike) -> np.ndarray:
    """4x4 rotation matrix of quaternion ``q``."""
    w, x, y, z = _as_vector(q, 4)
    result = np.eye(4)
    result[:3, :3] = [
        [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
        [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
        [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
    ]
    return result


def matrix_to_quat(m: ArrayLike) -> np.ndarray:
    """Quaternion of the rotation held in the upper 3x3 block of ``m``."""
    r = np.asarray(m, dtype=float)[:3, :3]
    candidates = [
        r[0, 0] + r[1, 1] + r[2, 2],
        r[0, 0] - r[1, 1] - r[2, 2],
        r[1, 1] - r[0, 0] - r[2, 2],
        r[2, 2] - r[0, 0] - r[1, 1],
    ]
    biggest_index = max(range(4), key=candidates.__getitem__)
    biggest = math.sqrt(candidates[biggest_index] + 1.0) * 0.5
    mult = 0.25 / biggest

    if biggest_index == 0:
        return np.array(
            [
                biggest,
                (r[2, 1] - r[1, 2]) * mult,
                (r[0, 2] - r[2, 0]) * mult,
                (r[1, 0] - r[0, 1]) * mult,
            ]
        )
    if biggest_index == 1:
        return np.array(
            [
                (r[2, 1] - r[1, 2]) * mult,
                biggest,
                (r[1, 0] + r[0, 1]) * mult,
                (r[0, 2] + r[2, 0]) * mult,
            ]
        )
    if biggest_index == 2:
        return np.array(
            [
                (r[0, 2] - r[2, 0]) * mult,
                (r[1, 0] + r[0, 1]) * mult,
                biggest,
                (r[2, 1] + r[1, 2]) * mult,
            ]
        )
    return np.array(
        [
            (r[1, 0] - r[0, 1]) * mult,
            (r[0, 2] + r[2, 0]) * mult,
            (r[2, 1] + r[1, 2]) * mult,
            biggest,
        ]
    )


def quat_from_euler(euler: ArrayLike) -> np.ndarray:
    """Quaternion from pitch, yaw and roll angles in radians."""
    half = _as_vector(euler, 3) * 0.5
    cx, cy, cz = np.cos(half)
    sx, sy, sz = np.sin(half)
    return np.array(
        [
            cx * cy * cz + sx * sy * sz,
            sx * cy * cz - cx * sy * sz,
            cx * sy * cz + sx * cy * sz,
            cx * cy * sz - sx * sy * cz,
        ]
    )


def quat_look_at(direction: ArrayLike, up: ArrayLike) -> np.ndarray:
    """Quaternion turning the +Z axis to ``direction`` with ``up`` as reference.

    ``direction`` is expected to be of unit length.
    """
    forward = _as_vector(direction, 3)
    right = np.cross(_as_vector(up, 3), forward)
    right = right / math.sqrt(max(1e-5, float(np.dot(right, right))))
    true_up = np.cross(forward, right)
    basis = np.column_stack([right, true_up, forward])
    return matrix_to_quat(basis)


def translation_matrix(offset: ArrayLike) -> np.ndarray:
    """4x4 matrix translating by ``offset``."""
    result = np.eye(4)
    result[:3, 3] = _as_vector(offset, 3)
    return result


def scale_matrix(factors: ArrayLike) -> np.ndarray:
    """4x4 matrix scaling each axis by ``factors``."""
    result = np.eye(4)
    result[:3, :3] = np.diag(_as_vector(factors, 3))
    return result


def rotation_matrix(angle: float, axis: ArrayLike) -> np.ndarray:
    """4x4 matrix rotating by ``angle`` radians about ``axis``."""
    a = normalize(_as_vector(axis, 3))
    c = math.cos(angle)
    s = math.sin(angle)
    cross = np.array(
        [
            [0.0, -a[2], a[1]],
            [a[2], 0.0, -a[0]],
            [-a[1], a[0], 0.0],
        ]
    )
    result = np.eye(4)
    result[:3, :3] = c * np.eye(3) + (1.0 - c) * np.outer(a, a) + s * cross
    return result