"""
싱글톤 패턴

Singleton.get_instance()만이 인스턴스를 얻는 유일한 방법.
최초 호출 시 지연 생성되며, 이후 모든 호출(모든 스레드)에서 같은 인스턴스를 반환한다.

Usage:
    python -m src.demos.creational.singleton
"""
import threading
from typing import Optional

from src.core.exceptions import SingletonInstantiationError
from src.utils.logger import get_logger

logger = get_logger(__name__)

# get_instance() 외부에서는 얻을 수 없는 생성 토큰
_CONSTRUCTION_TOKEN = object()


class Singleton:
    """
    지연 생성 싱글톤

    - 직접 생성(Singleton())은 SingletonInstantiationError
    - 최초 접근은 double-checked locking으로 보호
    - 해제/재설정 메서드 없음 (프로세스 종료까지 유지)

    서브 클래스는 각자 별도의 인스턴스 슬롯을 가진다.
    """

    _instance: Optional["Singleton"] = None
    _lock: threading.Lock = threading.Lock()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls._instance = None
        cls._lock = threading.Lock()

    def __init__(self, _token: object = None):
        if _token is not _CONSTRUCTION_TOKEN:
            raise SingletonInstantiationError(type(self).__name__)

        print("싱글톤 인스턴스 생성")

    @classmethod
    def get_instance(cls) -> "Singleton":
        if cls._instance is None:
            with cls._lock:
                # Double-checked locking
                if cls._instance is None:
                    cls._instance = cls(_token=_CONSTRUCTION_TOKEN)
                    logger.debug(f"{cls.__name__} instance created (thread={threading.current_thread().name})")

        return cls._instance


# 클라이언트
def main() -> bool:
    singleton1 = Singleton.get_instance()
    singleton2 = Singleton.get_instance()

    same = singleton1 is singleton2
    print(same)
    return same


if __name__ == "__main__":
    main()
