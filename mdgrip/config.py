import os
from enum import StrEnum, auto

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from pygments.styles import get_all_styles


class Theme(StrEnum):
    AUTO = auto()  # follows prefers-color-scheme in the browser
    LIGHT = auto()
    DARK = auto()


class Settings(BaseSettings):
    theme: Theme = Theme.AUTO
    code_style: str = "default"  # Pygments style used for highlighted code blocks
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="MDGRIP_",
        env_file=[os.getenv("ENV_FILE", ""), ".env"],
        extra="ignore",
    )

    @field_validator("code_style")
    @classmethod
    def _check_code_style(cls, value: str) -> str:
        if value not in set(get_all_styles()):
            raise ValueError(f"Unknown Pygments style: {value!r}")
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.upper()
