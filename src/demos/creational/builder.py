"""
빌더 패턴

디렉터가 빌더의 단계(버튼, 체크박스)를 정해진 순서로 호출해 GUI 구성 요소 목록을 조립

Usage:
    python -m src.demos.creational.builder
"""
from abc import ABC, abstractmethod
from typing import List

from src.core.patterns.base_model import BaseModel, Field
from src.utils.logger import get_logger

logger = get_logger(__name__)


# 제품
class GUI(BaseModel):
    """조립 중인 GUI (구성 요소 라벨을 추가 순서대로 보관)"""

    components: List[str] = Field(default_factory=list, description="구성 요소 라벨")

    def add_component(self, component: str) -> None:
        self.components.append(component)

    def display(self) -> List[str]:
        """
        구성 요소를 번호와 함께 출력

        Returns:
            출력한 줄 목록 (제목 포함)
        """
        lines = ["GUI 구성 요소"]
        lines.extend(
            f"{idx}. {component}"
            for idx, component in enumerate(self.components, 1)
        )
        for line in lines:
            print(line)

        return lines


# 빌더
class GUIBuilder(ABC):
    """
    GUI 생성 단계의 공통 인터페이스

    각 단계는 자기 자신을 반환하므로 체이닝 가능:
        builder.build_button().build_checkbox()
    """

    def __init__(self):
        self._gui = GUI()

    @abstractmethod
    def build_button(self) -> "GUIBuilder":
        pass

    @abstractmethod
    def build_checkbox(self) -> "GUIBuilder":
        pass

    def get_gui(self) -> GUI:
        return self._gui


# 구체 빌더
class WindowGUIBuilder(GUIBuilder):
    def build_button(self) -> "WindowGUIBuilder":
        self._gui.add_component("윈도우 버튼")
        return self

    def build_checkbox(self) -> "WindowGUIBuilder":
        self._gui.add_component("윈도우 체크박스")
        return self


class MacGUIBuilder(GUIBuilder):
    def build_button(self) -> "MacGUIBuilder":
        self._gui.add_component("맥 버튼")
        return self

    def build_checkbox(self) -> "MacGUIBuilder":
        self._gui.add_component("맥 체크박스")
        return self


# 디렉터
class GUIDirector:
    """빌더 단계를 이름 붙은 레시피로 묶어 호출 순서를 관리"""

    def __init__(self, builder: GUIBuilder):
        self._builder = builder

    @property
    def builder(self) -> GUIBuilder:
        return self._builder

    def set_builder(self, new_builder: GUIBuilder) -> None:
        logger.debug(
            f"builder swapped: {type(self._builder).__name__} -> {type(new_builder).__name__}"
        )
        self._builder = new_builder

    def build_basic_gui(self) -> None:
        self._builder.build_button().build_checkbox()

    def build_advanced_gui(self) -> None:
        self._builder.build_button().build_checkbox().build_button()


# 클라이언트
def client_code() -> List[str]:
    windows_builder = WindowGUIBuilder()
    director = GUIDirector(windows_builder)
    director.build_basic_gui()
    lines = windows_builder.get_gui().display()

    mac_builder = MacGUIBuilder()
    director.set_builder(mac_builder)
    director.build_basic_gui()
    lines += mac_builder.get_gui().display()

    return lines


def main() -> List[str]:
    return client_code()


if __name__ == "__main__":
    main()
