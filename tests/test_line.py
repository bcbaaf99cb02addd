import numpy as np

from waldem.line import Line
from waldem.mathutils import scale_matrix, translation_matrix


def test_line_positions_are_homogeneous_points():
    line = Line([1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [1.0, 0.0, 0.0, 1.0])
    assert np.allclose(line.start.position, [1.0, 2.0, 3.0, 1.0])
    assert np.allclose(line.end.position, [4.0, 5.0, 6.0, 1.0])


def test_both_ends_share_color():
    color = [0.2, 0.4, 0.6, 1.0]
    line = Line([0.0, 0.0, 0.0], [1.0, 1.0, 1.0], color)
    assert np.allclose(line.start.color, color)
    assert np.allclose(line.end.color, color)


def test_to_clip_space_with_identity_keeps_positions():
    line = Line([1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [1.0, 1.0, 1.0, 1.0])
    before_start, before_end = line.start.position.copy(), line.end.position.copy()
    line.to_clip_space(np.eye(4))
    assert np.allclose(line.start.position, before_start)
    assert np.allclose(line.end.position, before_end)


def test_to_clip_space_applies_matrix():
    start, end = np.array([1.0, 0.0, 0.0]), np.array([0.0, 2.0, 0.0])
    offset = np.array([0.5, -1.0, 2.0])
    line = Line(start, end, [0.0, 1.0, 0.0, 1.0])
    line.to_clip_space(translation_matrix(offset) @ scale_matrix([2.0, 2.0, 2.0]))
    assert np.allclose(line.start.position[:3], start * 2.0 + offset)
    assert np.allclose(line.end.position[:3], end * 2.0 + offset)
    assert np.allclose(line.start.color, [0.0, 1.0, 0.0, 1.0])