# Logger utility
"""
Rich 기반 구조화된 로깅 시스템

Features:
- 콘솔 출력: Rich 스타일 (stderr, 데모 출력과 분리)
- 파일 저장: 실행별 로그 파일 (선택)
- 구조화된 메시지: 컨텍스트 정보 포함
"""
import logging
from pathlib import Path
from datetime import datetime
from typing import Optional
from rich.logging import RichHandler
from rich.console import Console

# 로그 전용 Console (stdout은 데모 출력용)
console = Console(stderr=True)


class StructuredFormatter(logging.Formatter):
    """구조화된 로그 포맷터"""

    def format(self, record: logging.LogRecord) -> str:
        base_format = super().format(record)

        # 추가 컨텍스트 (extra 필드)
        if hasattr(record, 'context'):
            context_str = " | ".join(
                f"{k}={v}" for k, v in record.context.items()
            )
            return f"{base_format} | {context_str}"

        return base_format


def setup_logger(
    name: str = "pattern_catalogue",
    run_id: Optional[str] = None,
    log_level: str = "INFO",
    log_dir: Optional[str] = None
) -> logging.Logger:
    """
    로거 설정 및 반환

    Args:
        name: 로거 이름
        run_id: 실행 ID (파일명에 사용, None이면 타임스탬프)
        log_level: 로그 레벨 (DEBUG, INFO, WARNING, ERROR)
        log_dir: 로그 파일 저장 디렉토리 (None이면 파일 로그 없음)

    Returns:
        설정된 Logger 인스턴스
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, log_level.upper()))

    # 기존 핸들러 제거 (중복 방지)
    logger.handlers.clear()
    logger.propagate = False

    # 1. 콘솔 핸들러 (Rich)
    console_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True
    )
    console_handler.setLevel(getattr(logging, log_level.upper()))
    logger.addHandler(console_handler)

    # 2. 파일 핸들러
    if log_dir is not None:
        if run_id is None:
            run_id = datetime.now().strftime("%Y%m%d_%H%M%S")

        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        log_file = log_path / f"run_{run_id}.log"

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(StructuredFormatter(
            fmt='%(asctime)s | %(name)s | %(levelname)-8s | %(funcName)s:%(lineno)d | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        logger.addHandler(file_handler)

        logger.debug(f"Logger initialized: run_id={run_id}, log_file={log_file}")

    return logger


def get_logger(module_name: str) -> logging.Logger:
    """
    default_logger의 하위 로거 반환

    하위 로거는 핸들러 없이 default_logger로 전파됨
    """
    return default_logger.getChild(module_name.rsplit(".", 1)[-1])


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    **context
):
    """
    컨텍스트 정보와 함께 로그 출력

    Example:
        log_with_context(
            logger,
            'info',
            'Demo finished',
            demo='builder',
            lines=6
        )
    """
    log_func = getattr(logger, level.lower())
    log_func(message, extra={'context': context})


# 전역 로거 (기본)
default_logger = setup_logger()
