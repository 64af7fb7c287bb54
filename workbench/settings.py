from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from dotenv import dotenv_values
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from modules.base_convert.core.base import parse_base

BASE_DIR = Path(__file__).resolve().parents[1]


def _load_env() -> None:
    """
    Merge dotenv files into os.environ without overriding the process env:
    1) variables already set in the OS win
    2) ENV-<ENV> file (PROD/TEST/DEV) overrides the shared .env
    3) the shared .env is the base
    SKIP_DOTENV turns disk loading off entirely.
    """
    if (os.getenv("SKIP_DOTENV") or "").lower() in {"1", "true", "yes"}:
        return
    common_path = BASE_DIR / ".env"
    base_vals = dotenv_values(common_path) if common_path.exists() else {}

    prefer = os.getenv("ENV", base_vals.get("ENV", "dev")).lower()
    env_file = {
        "prod": BASE_DIR / "ENV-PROD",
        "test": BASE_DIR / "ENV-TEST",
    }.get(prefer, BASE_DIR / "ENV-DEV")
    env_vals = dotenv_values(env_file) if env_file.exists() else {}

    merged = {**base_vals, **env_vals}
    for key, value in merged.items():
        if key in os.environ or value is None:
            continue
        os.environ[key] = str(value)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="BASECONV_",
        env_file=None,  # dotenv handled by _load_env()
        extra="ignore",
    )

    env: str = Field(default_factory=lambda: os.getenv("ENV", "dev"))
    default_base: str = "auto"
    max_input_length: int = 64
    log_level: str = "INFO"
    log_json: bool = True

    @field_validator("default_base", mode="before")
    @classmethod
    def _normalize_base(cls, v):
        return parse_base(v).value

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, v):
        return str(v or "INFO").strip().upper()

    @field_validator("max_input_length")
    @classmethod
    def _positive_length(cls, v: int) -> int:
        if v < 1:
            raise ValueError("max_input_length must be at least 1")
        return v


@lru_cache()
def get_settings() -> Settings:
    _load_env()
    return Settings()
