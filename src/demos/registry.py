"""
데모 카탈로그

key -> (PatternInfo, 실행 함수) 매핑과 조회/실행 헬퍼
"""
from typing import Any, Callable, Dict, List, Optional

from config.pattern_notes import (
    ABSTRACT_FACTORY_NOTES,
    ADAPTER_NOTES,
    BUILDER_NOTES,
    FACTORY_METHOD_NOTES,
    PROTOTYPE_NOTES,
    SINGLETON_NOTES,
)
from src.core.exceptions import UnknownDemoError
from src.core.models import PatternCategory, PatternInfo
from src.core.patterns.base_model import ImmutableModel, Field
from src.core.settings import get_settings
from src.demos.creational import abstract_factory, builder, factory_method, prototype, singleton
from src.demos.structural import adapter
from src.utils.error_handler import ErrorContext
from src.utils.logger import get_logger, log_with_context

logger = get_logger(__name__)


class DemoEntry(ImmutableModel):
    """카탈로그 항목"""

    info: PatternInfo
    runner: Callable[[], Any] = Field(description="데모 main 함수")

    @property
    def key(self) -> str:
        return self.info.key


_REGISTRY: Dict[str, DemoEntry] = {
    entry.key: entry
    for entry in (
        DemoEntry(info=PatternInfo(**ABSTRACT_FACTORY_NOTES), runner=abstract_factory.main),
        DemoEntry(info=PatternInfo(**ADAPTER_NOTES), runner=adapter.main),
        DemoEntry(info=PatternInfo(**BUILDER_NOTES), runner=builder.main),
        DemoEntry(info=PatternInfo(**FACTORY_METHOD_NOTES), runner=factory_method.main),
        DemoEntry(info=PatternInfo(**PROTOTYPE_NOTES), runner=prototype.main),
        DemoEntry(info=PatternInfo(**SINGLETON_NOTES), runner=singleton.main),
    )
}


def get_registry() -> Dict[str, DemoEntry]:
    """등록 순서대로 정렬된 카탈로그 사본 반환"""
    return dict(_REGISTRY)


def demo_keys() -> List[str]:
    return list(_REGISTRY)


def get_demo(key: str) -> DemoEntry:
    """
    key로 데모 조회

    Raises:
        UnknownDemoError: 등록되지 않은 key
    """
    try:
        return _REGISTRY[key]
    except KeyError:
        raise UnknownDemoError(key, demo_keys()) from None


def list_demos(category: Optional[PatternCategory] = None) -> List[DemoEntry]:
    """카테고리별 데모 목록 (None이면 전체)"""
    if category is None:
        return list(_REGISTRY.values())

    return [entry for entry in _REGISTRY.values() if entry.info.category == category]


def run_demo(key: str) -> Any:
    """
    데모 하나 실행

    실패 시 ErrorContext가 로그를 남기고 (설정에 따라) 에러 리포트를 저장한 뒤 예외를 전파

    Returns:
        데모 main()의 반환값
    """
    entry = get_demo(key)
    settings = get_settings()

    with ErrorContext(
        stage=key,
        dump_on_error=settings.dump_error_reports,
        output_dir=str(settings.error_reports_path),
        details={"pattern": entry.info.name}
    ):
        result = entry.runner()

    log_with_context(logger, 'debug', 'Demo finished', demo=key)
    return result
