# navigator/core/logging.py
# -----------------------------------------------------------------------------
# Loguru 기반 로깅 설정
# - 회전/백트레이스/레벨 지정
# - 서버 기동 시 setup_logging() 한 번 호출
# -----------------------------------------------------------------------------
import sys
from pathlib import Path

from loguru import logger

from navigator.core.config import settings


def setup_logging(log_dir: str | None = None, level: str | None = None) -> None:
    level = level or settings.LOG_LEVEL
    path = Path(log_dir or settings.LOG_DIR)
    path.mkdir(exist_ok=True, parents=True)

    logger.remove()  # 기본 핸들러 제거
    logger.add(sys.stderr, level=level)
    logger.add(
        path / "app.log",
        rotation="10 MB",
        retention="10 files",
        enqueue=True,  # 멀티프로세스 안전
        backtrace=True,
        diagnose=False,  # 응답 원문/키가 로그에 남지 않도록
        level=level,
    )
