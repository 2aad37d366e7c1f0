# _logging_config.py
"""데모 스크립트용 'frame_matrices' 로거 설정"""
import logging
import sys

LOGGER_NAME = "frame_matrices"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """stdout 으로 출력하는 'frame_matrices' 로거를 준비합니다. verbose 이면 DEBUG 까지 출력."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    # 다시 호출해도 핸들러는 하나만 유지
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter('[%(levelname)s] %(name)s: %(message)s'))
    logger.addHandler(handler)
    return logger
