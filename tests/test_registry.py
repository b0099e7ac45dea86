"""Tests for the demo catalogue."""

import json

import pytest

from src.core.exceptions import UnknownDemoError
from src.core.models import PatternCategory, PatternInfo
from src.demos import registry as registry_module
from src.demos.registry import DemoEntry, demo_keys, get_demo, get_registry, list_demos, run_demo


class TestRegistry:
    def test_catalogue_order(self):
        assert demo_keys() == [
            "abstract_factory",
            "adapter",
            "builder",
            "factory_method",
            "prototype",
            "singleton",
        ]

    def test_get_registry_returns_copy(self):
        registry = get_registry()
        registry.pop("adapter")

        assert "adapter" in get_registry()

    def test_entries_carry_pattern_info(self):
        for entry in list_demos():
            assert isinstance(entry.info, PatternInfo)
            assert entry.key == entry.info.key
            assert entry.info.pros and entry.info.cons and entry.info.participants
            assert callable(entry.runner)

    def test_list_by_category(self):
        structural = list_demos(PatternCategory.STRUCTURAL)
        creational = list_demos(PatternCategory.CREATIONAL)

        assert [entry.key for entry in structural] == ["adapter"]
        assert len(creational) == 5

    def test_unknown_demo(self):
        with pytest.raises(UnknownDemoError) as exc_info:
            get_demo("observer")

        assert "observer" in str(exc_info.value)
        assert "singleton" in exc_info.value.available

    def test_unknown_demo_is_key_error(self):
        with pytest.raises(KeyError):
            get_demo("observer")


class TestRunDemo:
    def test_run_demo_returns_runner_result(self, fresh_settings, capsys):
        assert run_demo("adapter") == "110V 전력 공급 중 => 220V 전력 공급 중"
        assert capsys.readouterr().out == "110V 전력 공급 중 => 220V 전력 공급 중\n"

    def test_run_demo_propagates_and_dumps_report(self, fresh_settings, monkeypatch):
        monkeypatch.setenv("DUMP_ERROR_REPORTS", "true")
        monkeypatch.setenv("ERROR_REPORTS_PATH", str(fresh_settings / "reports"))

        def broken():
            raise RuntimeError("boom")

        entry = get_demo("builder")
        monkeypatch.setitem(
            registry_module._REGISTRY, "builder", DemoEntry(info=entry.info, runner=broken)
        )

        with pytest.raises(RuntimeError, match="boom"):
            run_demo("builder")

        reports = list((fresh_settings / "reports").glob("error_builder_*.json"))
        assert len(reports) == 1
        report = json.loads(reports[0].read_text(encoding="utf-8"))
        assert report["stage"] == "builder"
        assert report["error"]["type"] == "RuntimeError"
        assert report["details"] == {"pattern": "Builder"}
