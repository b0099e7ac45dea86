"""
전역 설정 관리 (Pydantic BaseSettings with Singleton)
환경변수 / .env 기반 설정
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator
from pathlib import Path
from typing import Literal
from src.core.patterns.singleton import Singleton


class SettingsMeta(Singleton, type(BaseSettings)):
    """
    Metaclass combining Singleton and BaseSettings
    Ensures Settings is a singleton
    """
    pass


class Settings(BaseSettings, metaclass=SettingsMeta):
    """데모 러너 전역 설정"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False
    )

    # ===== Logging =====
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")
    logs_path: Path = Field(default=Path("data/logs"))
    log_to_file: bool = Field(default=False)

    # ===== Error Reports =====
    error_reports_path: Path = Field(default=Path("data/logs/error_reports"))
    dump_error_reports: bool = Field(default=False)

    # ===== Runner =====
    show_pattern_info: bool = Field(default=False)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """대소문자 구분 없이 로그 레벨 허용"""
        if isinstance(v, str):
            return v.strip().upper()
        return v


def get_settings() -> Settings:
    """
    설정 싱글톤 반환

    Settings는 Singleton metaclass를 사용하므로
    직접 인스턴스화해도 항상 같은 객체 반환
    """
    return Settings()
