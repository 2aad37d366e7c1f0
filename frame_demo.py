# frame_demo.py
"""
Look-At 카메라 Frame 과 모델/뷰 행렬 계산 데모

이 스크립트는 다음을 시연합니다:
1. eye / focal / up 으로 카메라 Frame 생성 (퇴화 입력 포함)
2. 모델 Frame 의 모델 행렬
3. 카메라의 뷰 행렬
4. Frame 합성으로 계산한 모델-뷰 행렬과 행렬 곱의 차이

사용법:
    uv run python frame_demo.py
    uv run python frame_demo.py --eye 0 5 0 --focal 0 0 0 --up 0 1 0
    uv run python frame_demo.py --model-origin 1 0 -2 --verbose
"""

import argparse
import logging
from typing import Optional, Sequence

import numpy as np

from _camera import resolve_look_at
from _frame import Frame
from _logging_config import setup_logging
from _math import model_matrix, model_view_matrix, uniform_bytes, view_matrix
from _vector import Point, Vector, direction

logger = logging.getLogger("frame_matrices.demo")


def _format_matrix(m: np.ndarray) -> str:
    return "\n".join("    [" + ", ".join(f"{v:9.5f}" for v in row) + "]" for row in m)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Look-At 카메라 Frame 및 모델/뷰 행렬 계산')
    parser.add_argument('--eye', type=float, nargs=3, default=[3.0, 2.5, 4.0],
                        metavar=('X', 'Y', 'Z'), help='카메라 위치')
    parser.add_argument('--focal', type=float, nargs=3, default=[0.0, 0.0, 0.0],
                        metavar=('X', 'Y', 'Z'), help='바라볼 지점')
    parser.add_argument('--up', type=float, nargs=3, default=[0.0, 1.0, 0.0],
                        metavar=('X', 'Y', 'Z'), help='대략적인 위쪽 방향 (정규화됨)')
    parser.add_argument('--model-origin', type=float, nargs=3, default=[0.0, 0.0, 0.0],
                        metavar=('X', 'Y', 'Z'), help='모델 Frame 의 원점')
    parser.add_argument('--verbose', action='store_true',
                        help='DEBUG 로그 출력')
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    up = direction(Vector(*args.up))
    if up is None:
        parser.error("--up 은 영벡터가 될 수 없습니다.")

    # 1. 카메라 Frame
    eye_frame, case = resolve_look_at(Point(*args.focal), Point(*args.eye), up)
    logger.info("카메라 Frame 생성 (분기: %s)", case.value)
    print(f"\n[1] 카메라 Frame ({case.value})")
    print(f"    origin : {eye_frame.origin}")
    print(f"    x      : {eye_frame.x_direction}")
    print(f"    y      : {eye_frame.y_direction}")
    print(f"    z      : {eye_frame.z_direction}")

    # 2. 모델 행렬
    model_frame = Frame.at(Point(*args.model_origin))
    model = model_matrix(model_frame)
    print("\n[2] 모델 행렬")
    print(_format_matrix(model))

    # 3. 뷰 행렬
    view = view_matrix(eye_frame)
    print("\n[3] 뷰 행렬")
    print(_format_matrix(view))

    # 4. 모델-뷰 행렬 (Frame 합성 vs 행렬 곱)
    model_view = model_view_matrix(eye_frame, model_frame)
    error = np.abs(model_view.astype(np.float64) - view @ model).max()
    print("\n[4] 모델-뷰 행렬")
    print(_format_matrix(model_view))
    print(f"    view @ model 과의 최대 차이: {error:.3e}")

    # model, view, model_view 를 mat4x4<f32> 유니폼으로 패킹
    data = uniform_bytes(model, view, model_view)
    print(f"    유니폼 버퍼 크기: {len(data)} 바이트")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
