# Error handler utility
"""
에러 처리 및 에러 리포트 덤프

Features:
- 에러 리포트: 데모 실행 실패 시 JSON 저장 (선택)
- 에러 컨텍스트: 실패한 데모/단계 추적
"""
import json
import traceback
from pathlib import Path
from datetime import datetime
from typing import Any, Dict, Optional

from src.utils.logger import default_logger


def dump_error_report(
    error: Exception,
    stage: str,
    output_dir: str = "data/logs/error_reports",
    details: Optional[Dict[str, Any]] = None
) -> Path:
    """
    에러 발생 시 리포트를 JSON으로 저장

    Args:
        error: 발생한 예외
        stage: 에러 발생 단계 (예: "builder", "singleton")
        output_dir: 저장 디렉토리
        details: 추가로 기록할 정보

    Returns:
        저장된 파일 Path
    """
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

    error_dump = {
        "timestamp": timestamp,
        "stage": stage,
        "error": {
            "type": type(error).__name__,
            "message": str(error),
            "traceback": "".join(
                traceback.format_exception(type(error), error, error.__traceback__)
            )
        },
        "details": _serialize_details(details or {})
    }

    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    file_path = output_path / f"error_{stage}_{timestamp}.json"

    with open(file_path, 'w', encoding='utf-8') as f:
        json.dump(error_dump, f, indent=2, ensure_ascii=False)

    default_logger.error(
        f"Error report dumped to {file_path}",
        extra={'context': {'stage': stage, 'error_type': type(error).__name__}}
    )

    return file_path


def _serialize_details(details: Dict[str, Any]) -> Dict[str, Any]:
    """JSON 직렬화가 안 되는 값은 문자열로 변환"""
    serialized = {}

    for key, value in details.items():
        try:
            json.dumps(value)
            serialized[key] = value
        except (TypeError, ValueError):
            serialized[key] = str(value)

    return serialized


class ErrorContext:
    """
    에러 컨텍스트 관리자 (with문 사용)

    Example:
        with ErrorContext(stage="builder"):
            builder_demo.main()
    """

    def __init__(
        self,
        stage: str,
        dump_on_error: bool = False,
        output_dir: str = "data/logs/error_reports",
        details: Optional[Dict[str, Any]] = None
    ):
        self.stage = stage
        self.dump_on_error = dump_on_error
        self.output_dir = output_dir
        self.details = details or {}
        self.report_path: Optional[Path] = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None or not issubclass(exc_type, Exception):
            return False

        default_logger.error(
            f"Stage '{self.stage}' failed: {exc_val}",
            extra={'context': {'stage': self.stage, 'error_type': exc_type.__name__}}
        )

        if self.dump_on_error:
            self.report_path = dump_error_report(
                exc_val, self.stage, self.output_dir, self.details
            )

        # 예외 전파
        return False
