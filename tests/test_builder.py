"""Tests for the Builder demo."""

import pytest

from src.demos.creational.builder import (
    GUI,
    GUIBuilder,
    GUIDirector,
    MacGUIBuilder,
    WindowGUIBuilder,
    main,
)


class TestGUIBuilder:
    """Builder steps append labels and chain."""

    def test_product_starts_empty(self):
        assert WindowGUIBuilder().get_gui().components == []

    def test_steps_return_builder_for_chaining(self):
        builder = MacGUIBuilder()

        assert builder.build_button() is builder
        assert builder.build_checkbox() is builder

    def test_chained_steps_keep_call_order(self):
        builder = WindowGUIBuilder()
        builder.build_checkbox().build_button().build_checkbox()

        assert builder.get_gui().components == ["윈도우 체크박스", "윈도우 버튼", "윈도우 체크박스"]

    def test_builders_are_independent(self):
        first = WindowGUIBuilder().build_button()
        second = WindowGUIBuilder()

        assert first.get_gui() is not second.get_gui()
        assert second.get_gui().components == []

    def test_abstract_builder_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            GUIBuilder()


class TestGUIDirector:
    """Director recipes drive the current builder."""

    @pytest.mark.parametrize(
        "builder_cls, button, checkbox",
        [
            (WindowGUIBuilder, "윈도우 버튼", "윈도우 체크박스"),
            (MacGUIBuilder, "맥 버튼", "맥 체크박스"),
        ],
    )
    def test_recipes(self, builder_cls, button, checkbox):
        basic = builder_cls()
        GUIDirector(basic).build_basic_gui()
        advanced = builder_cls()
        GUIDirector(advanced).build_advanced_gui()

        assert basic.get_gui().components == [button, checkbox]
        assert advanced.get_gui().components == [button, checkbox, button]

    def test_swapping_builder_affects_only_later_steps(self):
        window_builder = WindowGUIBuilder()
        director = GUIDirector(window_builder)
        director.build_basic_gui()

        mac_builder = MacGUIBuilder()
        director.set_builder(mac_builder)
        director.build_advanced_gui()

        assert director.builder is mac_builder
        assert window_builder.get_gui().components == ["윈도우 버튼", "윈도우 체크박스"]
        assert mac_builder.get_gui().components == ["맥 버튼", "맥 체크박스", "맥 버튼"]

    def test_recipes_accumulate_on_same_builder(self):
        builder = MacGUIBuilder()
        director = GUIDirector(builder)
        director.build_basic_gui()
        director.build_basic_gui()

        assert builder.get_gui().components == ["맥 버튼", "맥 체크박스"] * 2


class TestGUI:
    def test_display_numbers_components(self, capsys):
        gui = GUI()
        gui.add_component("윈도우 버튼")
        gui.add_component("윈도우 체크박스")

        lines = gui.display()

        assert lines == ["GUI 구성 요소", "1. 윈도우 버튼", "2. 윈도우 체크박스"]
        assert capsys.readouterr().out.splitlines() == lines

    def test_empty_gui_displays_title_only(self, capsys):
        assert GUI().display() == ["GUI 구성 요소"]

    def test_main_transcript(self, capsys):
        main()

        assert capsys.readouterr().out.splitlines() == [
            "GUI 구성 요소",
            "1. 윈도우 버튼",
            "2. 윈도우 체크박스",
            "GUI 구성 요소",
            "1. 맥 버튼",
            "2. 맥 체크박스",
        ]
