"""Tests for settings and the infrastructure Singleton metaclass."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from src.core.patterns.singleton import Singleton as SingletonMeta
from src.core.settings import Settings, get_settings


class TestSettings:
    def test_defaults(self, fresh_settings):
        settings = get_settings()

        assert settings.log_level == "INFO"
        assert settings.logs_path == Path("data/logs")
        assert settings.log_to_file is False
        assert settings.dump_error_reports is False
        assert settings.show_pattern_info is False

    def test_settings_is_singleton(self, fresh_settings):
        assert Settings() is Settings()
        assert get_settings() is Settings()
        assert SingletonMeta.has_instance(Settings)

    def test_environment_overrides(self, fresh_settings, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("SHOW_PATTERN_INFO", "true")

        settings = get_settings()

        assert settings.log_level == "DEBUG"
        assert settings.show_pattern_info is True

    def test_dotenv_file_is_read(self, fresh_settings):
        (fresh_settings / ".env").write_text("DUMP_ERROR_REPORTS=true\n", encoding="utf-8")

        assert get_settings().dump_error_reports is True

    def test_clear_instances_rebuilds(self, fresh_settings):
        first = get_settings()
        SingletonMeta.clear_instances()

        assert get_settings() is not first


class TestSingletonMetaclass:
    def test_metaclass_returns_one_instance(self):
        class Registry(metaclass=SingletonMeta):
            def __init__(self):
                self.items = []

        Registry().items.append("x")

        assert Registry() is Registry()
        assert Registry().items == ["x"]


class TestLogLevelValidation:
    def test_log_level_is_case_insensitive(self, fresh_settings, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", " debug ")

        assert get_settings().log_level == "DEBUG"

    def test_unknown_log_level_is_rejected(self, fresh_settings, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "verbose")

        with pytest.raises(ValidationError, match="log_level"):
            get_settings()

        assert not SingletonMeta.has_instance(Settings)
