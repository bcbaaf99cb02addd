"""Coloured line segments for debug drawing."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from waldem.mathutils import ArrayLike


@dataclass
class LineVertex:
    """One end of a line: homogeneous position and RGBA colour."""

    position: np.ndarray
    color: np.ndarray


class Line:
    """A segment between two points, both ends sharing one colour."""

    def __init__(self, start: ArrayLike, end: ArrayLike, color: ArrayLike) -> None:
        rgba = np.array(color, dtype=float)
        self.start = LineVertex(np.array([*np.asarray(start, dtype=float), 1.0]), rgba.copy())
        self.end = LineVertex(np.array([*np.asarray(end, dtype=float), 1.0]), rgba.copy())

    def to_clip_space(self, matrix: ArrayLike) -> None:
        """Transform both end positions by ``matrix`` in place."""
        m = np.asarray(matrix, dtype=float)
        self.start.position = m @ self.start.position
        self.end.position = m @ self.end.position