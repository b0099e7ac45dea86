"""
추상 팩토리 패턴

윈도우 / 맥 팩토리가 각각 짝이 맞는 버튼 + 체크박스를 생성

Usage:
    python -m src.demos.creational.abstract_factory
"""
from abc import ABC, abstractmethod
from typing import List

from src.utils.logger import get_logger

logger = get_logger(__name__)


# 추상 제품
class Button(ABC):
    @abstractmethod
    def click(self) -> str:
        pass


class CheckBox(ABC):
    @abstractmethod
    def check(self) -> str:
        pass


# 구체 제품
class WindowButton(Button):
    def click(self) -> str:
        return "윈도우 버튼 클릭"


class MacButton(Button):
    def click(self) -> str:
        return "맥 버튼 클릭"


class WindowCheckBox(CheckBox):
    def check(self) -> str:
        return "윈도우 체크박스 클릭"


class MacCheckBox(CheckBox):
    def check(self) -> str:
        return "맥 체크박스 클릭"


# 추상 팩토리
class GUIFactory(ABC):
    """
    관련 제품군(버튼, 체크박스)을 생성하는 인터페이스

    기본 구현 없음: 구체 팩토리는 두 메서드를 모두 구현해야 인스턴스화 가능
    """

    @abstractmethod
    def create_button(self) -> Button:
        pass

    @abstractmethod
    def create_checkbox(self) -> CheckBox:
        pass


# 구체 팩토리
class WindowFactory(GUIFactory):
    def create_button(self) -> Button:
        return WindowButton()

    def create_checkbox(self) -> CheckBox:
        return WindowCheckBox()


class MacFactory(GUIFactory):
    def create_button(self) -> Button:
        return MacButton()

    def create_checkbox(self) -> CheckBox:
        return MacCheckBox()


# 클라이언트
def client_code(factory: GUIFactory) -> List[str]:
    """
    팩토리로 제품을 만들고 동작 결과를 출력

    Returns:
        출력한 문자열 목록 (버튼, 체크박스 순)
    """
    logger.debug(f"client_code with {type(factory).__name__}")

    button = factory.create_button()
    checkbox = factory.create_checkbox()

    lines = [button.click(), checkbox.check()]
    for line in lines:
        print(line)

    return lines


def main() -> List[str]:
    return client_code(WindowFactory()) + client_code(MacFactory())


if __name__ == "__main__":
    main()
