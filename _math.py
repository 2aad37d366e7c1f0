# _math.py
import numpy as np

from _frame import Frame, WORLD_FRAME, relative_to

# 셰이더의 mat4x4<f32> 와 맞춤
MATRIX_DTYPE = np.float32


# 행렬 생성 함수 (전부 4x4 numpy.ndarray 반환, m[행, 열])
def mat4_from_column_major(*values: float) -> np.ndarray:
    """열 우선(column-major) 순서의 16개 값으로 4x4 행렬을 생성합니다."""
    if len(values) != 16:
        raise ValueError(f"4x4 행렬에는 16개의 값이 필요합니다 (받은 값: {len(values)}개)")
    return np.array(values, dtype=MATRIX_DTYPE).reshape((4, 4), order="F")


def model_matrix(frame: Frame) -> np.ndarray:
    """
    모델(Model) 행렬을 생성합니다.

    Frame 로컬 좌표의 점을 부모(월드) 좌표로 옮기는 행렬입니다.
    1~3열은 x/y/z 축 방향, 4열은 원점, 마지막 행은 (0, 0, 0, 1).
    """
    x = frame.x_direction
    y = frame.y_direction
    z = frame.z_direction
    o = frame.origin
    return mat4_from_column_major(
        x.x, x.y, x.z, 0.0,
        y.x, y.y, y.z, 0.0,
        z.x, z.y, z.z, 0.0,
        o.x, o.y, o.z, 1.0,
    )


def view_matrix(frame: Frame) -> np.ndarray:
    """
    뷰(View) 행렬을 생성합니다.

    월드 좌표를 frame(카메라)의 로컬 좌표로 옮깁니다.
    카메라는 -z 방향을 바라보며 +x 는 오른쪽, +y 는 위쪽입니다.
    """
    return model_matrix(relative_to(frame, WORLD_FRAME))


def model_view_matrix(eye_frame: Frame, model_frame: Frame) -> np.ndarray:
    """
    모델-뷰(Model-View) 행렬을 생성합니다.

    view_matrix(eye) @ model_matrix(model) 과 같은 변환이지만, Frame 끼리
    double 정밀도로 먼저 합성한 뒤 float32 로 한 번만 반올림합니다.
    """
    return model_matrix(relative_to(eye_frame, model_frame))


def to_column_major(m: np.ndarray) -> np.ndarray:
    """WebGPU 업로드용으로 4x4 행렬을 열 우선 순서의 float32 배열(16,)로 펼칩니다."""
    m = np.asarray(m)
    if m.shape != (4, 4):
        raise ValueError(f"4x4 행렬이 아닙니다: shape={m.shape}")
    # WebGPU는 컬럼-주요(Column-Major) 행렬을 사용하므로 order="F" (Fortran)로 reshape
    return m.astype(MATRIX_DTYPE).reshape(-1, order="F")


def uniform_bytes(*matrices: np.ndarray) -> bytes:
    """여러 mat4x4<f32> 를 순서대로 이어 붙여 유니폼 버퍼용 바이트로 만듭니다."""
    data = np.concatenate([to_column_major(m) for m in matrices])
    return data.astype("<f4").tobytes()
