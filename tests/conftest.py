import numpy as np
import pytest

from _camera import look_at
from _frame import Frame, WORLD_FRAME
from _vector import Point, Direction, Y_AXIS


def _axis_rotation(axis, angle: float) -> np.ndarray:
    """Rodrigues 회전 행렬"""
    k = np.asarray(axis, dtype=np.float64)
    k = k / np.linalg.norm(k)
    kx = np.array([
        [0.0, -k[2], k[1]],
        [k[2], 0.0, -k[0]],
        [-k[1], k[0], 0.0],
    ])
    return np.eye(3) + np.sin(angle) * kx + (1.0 - np.cos(angle)) * (kx @ kx)


SAMPLE_FRAMES = {
    "world": WORLD_FRAME,
    "translated": Frame.at(Point(1.0, -2.0, 3.5)),
    "rotated": Frame.from_rotation(Point(0.0, 0.0, 0.0), _axis_rotation([0.0, 0.0, 1.0], 0.7)),
    "general": Frame.from_rotation(Point(-4.0, 2.25, 10.0), _axis_rotation([1.0, 2.0, -0.5], 2.1)),
    "camera": look_at(Point(0.0, 0.0, 0.0), Point(3.0, 2.5, 4.0), Y_AXIS),
    "camera_far": look_at(Point(10.0, -3.0, 2.0), Point(-250.0, 40.0, 125.0), Direction(0.0, 0.0, 1.0)),
}


@pytest.fixture(params=sorted(SAMPLE_FRAMES), ids=sorted(SAMPLE_FRAMES))
def frame(request) -> Frame:
    return SAMPLE_FRAMES[request.param]


@pytest.fixture(params=sorted(SAMPLE_FRAMES), ids=sorted(SAMPLE_FRAMES))
def other_frame(request) -> Frame:
    return SAMPLE_FRAMES[request.param]
