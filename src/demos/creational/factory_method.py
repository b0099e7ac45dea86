"""
팩토리 메서드 패턴

Dialog.render()는 고정된 흐름(버튼 생성 -> 렌더링)을 정의하고,
어떤 버튼을 만들지는 서브 클래스의 create_button()이 결정

Usage:
    python -m src.demos.creational.factory_method
"""
from abc import ABC, abstractmethod
from typing import List

from src.core.exceptions import TemplateMethodOverrideError
from src.utils.logger import get_logger

logger = get_logger(__name__)


# 제품
class Button(ABC):
    @abstractmethod
    def render(self) -> None:
        pass

    @abstractmethod
    def on_click(self) -> None:
        pass


# 구체 제품
class WindowButton(Button):
    def render(self) -> None:
        print("윈도우 버튼 렌더링")

    def on_click(self) -> None:
        print("윈도우 버튼 클릭")


class MacButton(Button):
    def render(self) -> None:
        print("맥 버튼 렌더링")

    def on_click(self) -> None:
        print("맥 버튼 클릭")


# 창조자
class Dialog(ABC):
    """
    창조자 (Creator)

    render()는 템플릿 메서드로 재정의할 수 없음.
    서브 클래스는 팩토리 메서드 create_button()만 구현한다.
    """

    _template_methods = ("render",)

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        for method_name in Dialog._template_methods:
            if method_name in cls.__dict__:
                raise TemplateMethodOverrideError(cls.__name__, method_name)

    @abstractmethod
    def create_button(self) -> Button:
        pass

    def render(self) -> Button:
        """
        버튼을 하나 생성해 렌더링

        Returns:
            생성된 버튼
        """
        button = self.create_button()
        logger.debug(f"{type(self).__name__} created {type(button).__name__}")
        button.render()
        return button


# 구체 창조자
class WindowDialog(Dialog):
    def create_button(self) -> Button:
        return WindowButton()


class MacDialog(Dialog):
    def create_button(self) -> Button:
        return MacButton()


# 클라이언트
def client_code(dialog: Dialog) -> Button:
    return dialog.render()


def main() -> List[Button]:
    return [client_code(WindowDialog()), client_code(MacDialog())]


if __name__ == "__main__":
    main()
