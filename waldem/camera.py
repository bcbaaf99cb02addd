"""Perspective camera, view frustum and axis-aligned bounding boxes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable

import numpy as np

from waldem.mathutils import ArrayLike

if TYPE_CHECKING:
    from waldem.transform import Transform


def perspective(fov_y: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Left-handed perspective projection mapping depth to -1..1.

    ``fov_y`` is the vertical field of view in radians.
    """
    tan_half = math.tan(fov_y / 2.0)
    result = np.zeros((4, 4))
    result[0, 0] = 1.0 / (aspect * tan_half)
    result[1, 1] = 1.0 / tan_half
    result[2, 2] = (far + near) / (far - near)
    result[3, 2] = 1.0
    result[2, 3] = -(2.0 * far * near) / (far - near)
    return result


@dataclass
class FrustumPlane:
    """A plane given by its unit normal and signed distance from the origin."""

    normal: np.ndarray
    distance: float

    def is_point_in_front(self, point: ArrayLike) -> bool:
        return float(np.dot(self.normal, np.asarray(point, dtype=float))) + self.distance >= 0.0


class Frustum:
    """The six planes bounding what a view-projection matrix can see."""

    def __init__(self) -> None:
        self.planes: list[FrustumPlane] = []

    def get_planes(self, view_proj_matrix: ArrayLike) -> list[FrustumPlane]:
        """Extract left, right, bottom, top, near and far planes, normalized."""
        m = np.asarray(view_proj_matrix, dtype=float)
        w_row = m[3]
        rows = [
            w_row + m[0],
            w_row - m[0],
            w_row + m[1],
            w_row - m[1],
            w_row + m[2],
            w_row - m[2],
        ]
        self.planes = []
        for row in rows:
            length = float(np.linalg.norm(row[:3]))
            self.planes.append(FrustumPlane(row[:3] / length, float(row[3]) / length))
        return list(self.planes)


@dataclass
class CameraSpeedParams:
    modification_step: float = 0.1
    min_speed_modificator: float = 0.01
    max_speed_modificator: float = 10.0


class Camera:
    """A perspective camera with a view matrix and movement settings."""

    def __init__(
        self,
        fov: float,
        aspect_ratio: float,
        near_clip: float,
        far_clip: float,
        movement_speed: float = 1.0,
        rotation_speed: float = 1.0,
    ) -> None:
        """``fov`` is the vertical field of view in degrees."""
        self._projection_matrix = perspective(math.radians(fov), aspect_ratio, near_clip, far_clip)
        self._view_matrix = np.eye(4)
        self.movement_speed = movement_speed
        self.rotation_speed = rotation_speed
        self.speed_modificator = 1.0
        self.speed_params = CameraSpeedParams()
        self.frustum = Frustum()
        self.frustum.get_planes(self._projection_matrix @ self._view_matrix)

    @property
    def view_matrix(self) -> np.ndarray:
        return self._view_matrix.copy()

    @property
    def projection_matrix(self) -> np.ndarray:
        return self._projection_matrix.copy()

    def set_view_matrix(self, matrix: ArrayLike) -> None:
        self._view_matrix = np.array(matrix, dtype=float)

    def set_view_from_transform(self, transform: Transform) -> None:
        """Use the inverse of ``transform``'s matrix as the view matrix."""
        self._view_matrix = transform.inverse()

    def extract_frustum_planes(self) -> list[FrustumPlane]:
        """Planes of the current view frustum."""
        return self.frustum.get_planes(self._projection_matrix @ self._view_matrix)


@dataclass
class BoundingBox:
    """Axis-aligned box given by its two extreme corners."""

    min: np.ndarray = field(default_factory=lambda: np.zeros(3))
    max: np.ndarray = field(default_factory=lambda: np.zeros(3))

    def __post_init__(self) -> None:
        self.min = np.asarray(self.min, dtype=float)
        self.max = np.asarray(self.max, dtype=float)

    def transform(self, matrix: ArrayLike) -> BoundingBox:
        """Return the box with both corners transformed by ``matrix``."""
        m = np.asarray(matrix, dtype=float)
        return BoundingBox(
            (m @ np.array([*self.min, 1.0]))[:3],
            (m @ np.array([*self.max, 1.0]))[:3],
        )

    def is_in_frustum(self, planes: Iterable[FrustumPlane]) -> bool:
        """False only if every corner lies behind one of ``planes``."""
        lo, hi = self.min, self.max
        corners = [
            (x, y, z)
            for z in (lo[2], hi[2])
            for y in (lo[1], hi[1])
            for x in (lo[0], hi[0])
        ]
        return all(
            any(plane.is_point_in_front(corner) for corner in corners) for plane in planes
        )