"""Shared pytest fixtures for the pattern catalogue tests."""

import pytest

from src.core.patterns.singleton import Singleton as SingletonMeta


@pytest.fixture
def fresh_settings(monkeypatch, tmp_path):
    """Settings singleton rebuilt from a clean environment inside tmp_path."""
    for name in (
        "LOG_LEVEL",
        "LOGS_PATH",
        "LOG_TO_FILE",
        "ERROR_REPORTS_PATH",
        "DUMP_ERROR_REPORTS",
        "SHOW_PATTERN_INFO",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)

    SingletonMeta.clear_instances()
    yield tmp_path
    SingletonMeta.clear_instances()
