# _camera.py
"""
Look-At 카메라 좌표계 생성

눈(eye) 위치, 초점(focal) 위치, 대략적인 위쪽(up) 방향으로부터
카메라 Frame 을 만듭니다. 카메라의 +z 축은 초점에서 눈을 향하므로
(화면 밖 방향) 카메라는 -z 방향을 바라봅니다.

퇴화(degenerate) 입력에서도 예외 없이 항상 유효한 Frame 을 반환합니다:
    ORTHONORMAL : 일반적인 경우
    PARALLEL_UP : 시선이 up 방향과 평행 → 임의의 수직 기저 사용
    COINCIDENT  : eye == focal → 부모 축 정렬(항등 회전)
"""

import logging
from enum import Enum
from typing import Tuple

from _frame import Frame
from _vector import (
    Direction,
    Point,
    cross_product,
    direction,
    orthonormalize,
    perpendicular_basis,
    vector_from,
)

logger = logging.getLogger("frame_matrices.camera")


class LookAtCase(Enum):
    """look_at 이 사용한 분기"""
    ORTHONORMAL = "orthonormal"
    PARALLEL_UP = "parallel_up"
    COINCIDENT = "coincident"


def resolve_look_at(
    focal_point: Point, eye_point: Point, up_direction: Direction
) -> Tuple[Frame, LookAtCase]:
    """
    카메라 Frame 과 사용된 분기를 함께 반환합니다.

    Parameters
    ----------
    focal_point : Point
        바라볼 지점
    eye_point : Point
        카메라 위치 (Frame 의 원점이 됨)
    up_direction : Direction
        대략적인 위쪽 방향

    Returns
    -------
    Tuple[Frame, LookAtCase]
    """
    z_vector = vector_from(eye_point, focal_point)
    y_vector = up_direction.to_vector()
    x_vector = cross_product(y_vector, z_vector)

    # 1. 정상: (z, y, x) 순서로 직교 정규화. z 와 up 이 (거의) 평행이면 실패
    basis = orthonormalize(z_vector, y_vector, x_vector)
    if basis is not None:
        z_dir, y_dir, x_dir = basis
        return Frame(eye_point, x_dir, y_dir, z_dir), LookAtCase.ORTHONORMAL

    # 2. 시선이 up 과 평행
    z_dir = direction(z_vector)
    if z_dir is not None:
        x_dir, y_dir = perpendicular_basis(z_dir)
        logger.debug("look_at: 시선이 up 방향과 평행합니다. 임의의 수직 기저를 사용합니다.")
        return Frame(eye_point, x_dir, y_dir, z_dir), LookAtCase.PARALLEL_UP

    # 3. eye == focal: 시선 방향이 정의되지 않음
    logger.debug("look_at: eye 와 focal 이 같은 점입니다. 항등 회전을 사용합니다.")
    return Frame.at(eye_point), LookAtCase.COINCIDENT


def look_at(focal_point: Point, eye_point: Point, up_direction: Direction) -> Frame:
    """eye_point 에서 focal_point 를 바라보는 카메라 Frame 을 생성합니다."""
    frame, _ = resolve_look_at(focal_point, eye_point, up_direction)
    return frame
