"""
카탈로그 전용 예외 정의

데모 자체는 오류 경로가 없으므로, 여기 정의된 예외는
패턴의 계약을 어기는 잘못된 사용을 알리기 위한 것
"""
from typing import Optional


class PatternCatalogueError(Exception):
    """기본 예외 클래스"""

    pass


class SingletonInstantiationError(PatternCatalogueError):
    """
    싱글톤 생성자를 직접 호출했을 때 발생
    인스턴스는 get_instance()로만 얻을 수 있음
    """

    def __init__(self, class_name: str):
        super().__init__(
            f"{class_name} cannot be instantiated directly; "
            f"use {class_name}.get_instance()"
        )
        self.class_name = class_name


class TemplateMethodOverrideError(PatternCatalogueError):
    """템플릿 메서드를 하위 클래스에서 재정의하려 할 때 발생"""

    def __init__(self, class_name: str, method_name: str):
        super().__init__(
            f"{class_name} must not override template method '{method_name}'"
        )
        self.class_name = class_name
        self.method_name = method_name


class UnknownDemoError(PatternCatalogueError, KeyError):
    """등록되지 않은 데모 키를 요청했을 때 발생"""

    def __init__(self, key: str, available: Optional[list] = None):
        message = f"Unknown demo: '{key}'"
        if available:
            message += f" (available: {', '.join(available)})"
        super().__init__(message)
        self.key = key
        self.available = available or []

    def __str__(self) -> str:
        # KeyError는 메시지를 repr로 감싸므로 원문 그대로 반환
        return self.args[0]
