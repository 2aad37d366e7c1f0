# _frame.py
"""
좌표계(Frame): 원점 + 오른손 정규직교 기저 3축

Frame 은 강체 자세(pose)를 나타내는 불변 값 타입입니다.
부모(월드) 좌표계 기준으로 원점과 x/y/z 축 방향을 저장합니다.
"""

from dataclasses import dataclass

import numpy as np

from _vector import Point, Direction, X_AXIS, Y_AXIS, Z_AXIS

# Frame 기저의 직교성/단위 길이/오른손 여부 판정 허용 오차
FRAME_TOLERANCE = 1e-6


@dataclass(frozen=True)
class Frame:
    """
    강체 좌표계

    Attributes
    ----------
    origin : Point
        부모 좌표계에서의 원점
    x_direction, y_direction, z_direction : Direction
        부모 좌표계에서의 각 축 방향 (x × y == z)
    """
    origin: Point
    x_direction: Direction
    y_direction: Direction
    z_direction: Direction

    def __post_init__(self):
        r = self.rotation
        gram = r.T @ r
        if not np.allclose(gram, np.eye(3), rtol=0.0, atol=FRAME_TOLERANCE):
            raise ValueError("Frame 의 축 방향이 서로 수직인 단위 벡터가 아닙니다")
        det = np.linalg.det(r)
        if det < 0.0:
            raise ValueError(f"Frame 은 오른손 좌표계여야 합니다 (det = {det:.6f})")

    @classmethod
    def at(cls, point: Point) -> "Frame":
        """point 에 위치하고 부모 축과 정렬된 Frame"""
        return cls(point, X_AXIS, Y_AXIS, Z_AXIS)

    @classmethod
    def from_rotation(cls, origin: Point, rotation: np.ndarray) -> "Frame":
        """열(column)이 축 방향인 3x3 회전 행렬로부터 Frame 을 만듭니다."""
        rotation = np.asarray(rotation, dtype=np.float64)
        return cls(
            origin,
            Direction(*(float(v) for v in rotation[:, 0])),
            Direction(*(float(v) for v in rotation[:, 1])),
            Direction(*(float(v) for v in rotation[:, 2])),
        )

    @property
    def rotation(self) -> np.ndarray:
        """3x3 회전 행렬 (열 = x, y, z 축 방향)"""
        return np.column_stack([
            self.x_direction.components,
            self.y_direction.components,
            self.z_direction.components,
        ])

    def to_parent(self, point: Point) -> Point:
        """Frame 로컬 좌표의 점을 부모 좌표로 변환"""
        return Point.from_array(self.rotation @ point.coordinates + self.origin.coordinates)

    def to_local(self, point: Point) -> Point:
        """부모 좌표의 점을 Frame 로컬 좌표로 변환"""
        return Point.from_array(self.rotation.T @ (point.coordinates - self.origin.coordinates))


WORLD_FRAME = Frame.at(Point(0.0, 0.0, 0.0))


def relative_to(base: Frame, target: Frame) -> Frame:
    """
    target 의 자세를 base 의 로컬 좌표로 다시 표현합니다.

    원점: R_base^T (o_target - o_base), 축: R_base^T d_target
    """
    r_base_t = base.rotation.T
    origin = r_base_t @ (target.origin.coordinates - base.origin.coordinates)
    return Frame.from_rotation(Point.from_array(origin), r_base_t @ target.rotation)
