# _vector.py
"""
3차원 점/벡터/방향 값 타입과 기본 벡터 연산

Frame 과 행렬 변환(_math.py), Look-At 카메라(_camera.py)가 사용하는
최소한의 벡터 수학 모듈입니다. 모든 타입은 불변(frozen) 값 타입입니다.

사용법:
    from _vector import Point, Vector, Direction, vector_from, orthonormalize

    v = vector_from(Point(0, 0, 5), Point(0, 0, 0))   # (0, 0, 5)
    d = direction(v)                                   # Direction(0, 0, 1)
"""

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

# 단위 벡터 판정 허용 오차 (|norm - 1| <= UNIT_TOLERANCE)
UNIT_TOLERANCE = 1e-6
# 이 길이 이하의 벡터는 영벡터로 취급
ZERO_LENGTH = 1e-12
# 직교화 후 남은 성분이 원래 길이의 이 비율 이하이면 평행으로 취급
PARALLEL_TOLERANCE = 1e-10


@dataclass(frozen=True)
class Point:
    """3차원 공간의 위치"""
    x: float
    y: float
    z: float

    @property
    def coordinates(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @classmethod
    def from_array(cls, values) -> "Point":
        x, y, z = (float(v) for v in values)
        return cls(x, y, z)

    def __sub__(self, other: "Point") -> "Vector":
        return vector_from(self, other)

    def __add__(self, other: "Vector") -> "Point":
        return Point(self.x + other.x, self.y + other.y, self.z + other.z)


@dataclass(frozen=True)
class Vector:
    """크기와 방향을 갖는 변위 벡터"""
    x: float
    y: float
    z: float

    @property
    def components(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @classmethod
    def from_array(cls, values) -> "Vector":
        x, y, z = (float(v) for v in values)
        return cls(x, y, z)

    def __add__(self, other: "Vector") -> "Vector":
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector") -> "Vector":
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vector":
        return Vector(-self.x, -self.y, -self.z)

    def __mul__(self, scale: float) -> "Vector":
        return Vector(self.x * scale, self.y * scale, self.z * scale)

    __rmul__ = __mul__

    def dot(self, other: "Vector") -> float:
        return float(np.dot(self.components, other.components))

    def length(self) -> float:
        return _norm(self.components)


@dataclass(frozen=True)
class Direction:
    """
    단위 벡터 (|d| == 1)

    정규화(direction, orthonormalize)나 Frame 의 축으로만 만들어집니다.
    길이가 1이 아닌 값으로 직접 생성하면 ValueError 를 발생시킵니다.
    """
    x: float
    y: float
    z: float

    def __post_init__(self):
        norm = _norm(self.components)
        if not np.isfinite(norm) or abs(norm - 1.0) > UNIT_TOLERANCE:
            raise ValueError(f"Direction 은 단위 벡터여야 합니다 (|d| = {norm:.9f})")

    @property
    def components(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def to_vector(self) -> Vector:
        return Vector(self.x, self.y, self.z)


def _norm(a: np.ndarray) -> float:
    """유클리드 길이. 가장 큰 성분으로 나눈 뒤 제곱해서 큰 좌표에서도 넘치지 않음"""
    scale = float(np.max(np.abs(a)))
    if scale == 0.0 or not np.isfinite(scale):
        return scale
    return scale * float(np.linalg.norm(a / scale))


def _to_direction(a: np.ndarray) -> Direction:
    return Direction(*(float(c) for c in a))


X_AXIS = Direction(1.0, 0.0, 0.0)
Y_AXIS = Direction(0.0, 1.0, 0.0)
Z_AXIS = Direction(0.0, 0.0, 1.0)


def vector_from(a: Point, b: Point) -> Vector:
    """b 에서 a 를 향하는 벡터 (a - b)"""
    return Vector.from_array(a.coordinates - b.coordinates)


def cross_product(u: Vector, v: Vector) -> Vector:
    """오른손 좌표계 외적 u × v"""
    return Vector.from_array(np.cross(u.components, v.components))


def direction(v: Vector) -> Optional[Direction]:
    """벡터를 정규화합니다. 영벡터이면 None 을 반환합니다."""
    a = v.components
    n = _norm(a)
    if n <= ZERO_LENGTH:
        return None
    return _to_direction(a / n)


def orthonormalize(
    v1: Vector, v2: Vector, v3: Vector
) -> Optional[Tuple[Direction, Direction, Direction]]:
    """
    Gram-Schmidt 직교 정규화

    입력 순서대로 앞선 결과 방향의 성분을 제거한 뒤 정규화합니다.
    각 결과는 입력 벡터의 대략적인 방향을 유지합니다. 거의 평행한
    입력에서 생기는 상쇄 오차를 없애기 위해 투영을 두 번 수행합니다.

    Parameters
    ----------
    v1, v2, v3 : Vector
        직교화할 벡터 (순서가 의미를 가짐)

    Returns
    -------
    Optional[Tuple[Direction, Direction, Direction]]
        서로 수직인 단위 벡터 3개. v1 의 길이가 ZERO_LENGTH 이하이거나,
        v2/v3 에서 남은 성분이 입력 길이의 PARALLEL_TOLERANCE 배 이하라서
        (선형 종속 또는 거의 평행) 기저를 만들 수 없으면 None.
    """
    basis = []
    for v in (v1, v2, v3):
        a = v.components
        r = a
        for _ in range(2):
            for e in basis:
                r = r - e * np.dot(r, e)
        length = _norm(r)
        limit = PARALLEL_TOLERANCE * _norm(a) if basis else ZERO_LENGTH
        if length <= limit:
            return None
        basis.append(r / length)
    e1, e2, e3 = basis
    return _to_direction(e1), _to_direction(e2), _to_direction(e3)


def perpendicular_basis(d: Direction) -> Tuple[Direction, Direction]:
    """
    d 에 수직인 두 방향 (t, b) 를 결정적으로 만듭니다.

    (t, b, d) 는 오른손 정규직교 기저입니다 (t × b == d).
    b 는 |d.x| > |d.z| 이면 (-d.y, d.x, 0), 아니면 (0, -d.z, d.y) 를
    정규화한 값이고, t = b × d 입니다.
    예: d = +Y 이면 t = (-1, 0, 0), b = (0, 0, 1).
    """
    if abs(d.x) > abs(d.z):
        b = direction(Vector(-d.y, d.x, 0.0))
    else:
        b = direction(Vector(0.0, -d.z, d.y))
    # d 가 단위 벡터이므로 위의 후보는 영벡터가 될 수 없음
    t = direction(cross_product(b.to_vector(), d.to_vector()))
    return t, b
