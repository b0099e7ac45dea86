"""
Singleton Metaclass
설정 객체처럼 프로세스 전역에서 하나만 존재해야 하는 인프라 객체용
"""
import threading
from typing import Dict, Any


class Singleton(type):
    """
    Thread-safe Singleton metaclass

    Usage:
        class Settings(metaclass=Singleton):
            ...

    Settings() 를 몇 번 호출해도 항상 같은 객체가 반환됨
    """

    _instances: Dict[type, Any] = {}
    _lock: threading.Lock = threading.Lock()

    def __call__(cls, *args, **kwargs):
        if cls not in cls._instances:
            with cls._lock:
                # Double-checked locking
                if cls not in cls._instances:
                    cls._instances[cls] = super().__call__(*args, **kwargs)

        return cls._instances[cls]

    @classmethod
    def has_instance(mcs, target: type) -> bool:
        """target 클래스의 인스턴스가 이미 생성되었는지 확인"""
        return target in mcs._instances

    @classmethod
    def clear_instances(mcs):
        """모든 인스턴스 제거 (테스트용)"""
        with mcs._lock:
            mcs._instances.clear()
