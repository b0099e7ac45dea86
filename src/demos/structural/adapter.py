"""
어댑터 패턴

110V 전력만 제공하는 기존 시스템을 220V 인터페이스 뒤에 감싼다

Usage:
    python -m src.demos.structural.adapter
"""
from abc import ABC, abstractmethod

from src.utils.logger import get_logger

logger = get_logger(__name__)


# 타겟
class Target(ABC):
    """클라이언트가 기대하는 인터페이스"""

    @abstractmethod
    def provide_power(self) -> str:
        pass


# 적응 대상
class OldSystem:
    def use_110v(self) -> str:
        return "110V 전력 공급 중"


# 적응자
class PowerAdapter(Target):
    """OldSystem.use_110v() 결과를 220V 공급 문구로 변환"""

    def __init__(self, old_system: OldSystem):
        self._old_system = old_system

    def provide_power(self) -> str:
        power = self._old_system.use_110v()
        return f"{power} => 220V 전력 공급 중"


# 클라이언트
class Client:
    def use_power(self, target: Target) -> str:
        output = target.provide_power()
        logger.debug(f"power provided by {type(target).__name__}")
        print(output)
        return output


def main() -> str:
    old_system = OldSystem()
    adapter = PowerAdapter(old_system)
    client = Client()

    return client.use_power(adapter)


if __name__ == "__main__":
    main()
