"""Tests for the Adapter demo."""

from unittest.mock import Mock

from src.demos.structural.adapter import Client, OldSystem, PowerAdapter, Target, main


class TestPowerAdapter:
    """PowerAdapter exposes the 220V target interface over the 110V system."""

    def test_legacy_system_output(self):
        assert OldSystem().use_110v() == "110V 전력 공급 중"

    def test_adapter_implements_target(self):
        assert isinstance(PowerAdapter(OldSystem()), Target)

    def test_adapter_appends_conversion_suffix(self):
        adapter = PowerAdapter(OldSystem())

        assert adapter.provide_power() == "110V 전력 공급 중 => 220V 전력 공급 중"

    def test_adapter_delegates_to_legacy_object(self):
        legacy = Mock(spec=OldSystem)
        legacy.use_110v.return_value = "legacy"

        assert PowerAdapter(legacy).provide_power() == "legacy => 220V 전력 공급 중"
        legacy.use_110v.assert_called_once_with()

    def test_client_accepts_any_target(self, capsys):
        class DirectSupply(Target):
            def provide_power(self):
                return "220V 직접 공급"

        assert Client().use_power(DirectSupply()) == "220V 직접 공급"
        assert capsys.readouterr().out == "220V 직접 공급\n"

    def test_main_transcript(self, capsys):
        main()

        assert capsys.readouterr().out == "110V 전력 공급 중 => 220V 전력 공급 중\n"
