# autocompress/common/settings.py
from __future__ import annotations

from functools import lru_cache
from typing import Optional
from pydantic import BaseModel, Field, AliasChoices, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _to_bool(v: str | bool | int | None, default: bool = False) -> bool:
    if isinstance(v, bool):
        return v
    if v is None:
        return default
    s = str(v).strip().lower()
    return s in {"1", "true", "yes", "y", "on"}


_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class BudgetConfig(BaseModel):
    default_audio_bitrate_kbps: int = Field(128, gt=0, description="Used when the audio bitrate cannot be parsed")
    min_video_bitrate_kbps: int = Field(100, gt=0, description="Smallest video bitrate we agree to encode with")


class Settings(BaseSettings):
    # -------- App / Env --------
    app_name: str = "autocompress"
    log_level: str = "INFO"

    # -------- ffmpeg --------
    ffmpeg_bin: str = Field(default="ffmpeg", validation_alias=AliasChoices("FFMPEG_BIN", "ffmpeg_bin"))
    # None blocks until ffmpeg exits
    probe_timeout_sec: Optional[int] = Field(60, ge=1)
    encode_timeout_sec: Optional[int] = Field(None, ge=1)
    ffmpeg_overwrite: bool = False

    # -------- Output naming --------
    output_prefix: str = "compressed_"

    # -------- Sub-configs --------
    budget: BudgetConfig = BudgetConfig()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _known_level(cls, v):
        level = str(v or "INFO").strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level {v!r}; use one of {sorted(_LOG_LEVELS)}")
        return level

    @field_validator("ffmpeg_overwrite", mode="before")
    @classmethod
    def _boolify(cls, v):
        return _to_bool(v)

    @field_validator("probe_timeout_sec", "encode_timeout_sec", mode="before")
    @classmethod
    def _empty_is_none(cls, v):
        # PROBE_TIMEOUT_SEC="" or "none" disables the timeout
        if v is None or (isinstance(v, str) and v.strip().lower() in {"", "none", "0"}):
            return None
        return v


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Use this everywhere you need config:
        from autocompress.common.settings import get_settings
        cfg = get_settings()
    """
    return Settings()  # pydantic_settings will read from .env automatically
