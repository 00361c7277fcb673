from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from ..api import DEFAULT_CORS_ORIGINS

LogLevel = Literal["critical", "error", "warning", "info", "debug"]
LOG_LEVELS: tuple[str, ...] = ("critical", "error", "warning", "info", "debug")


def _normalize_base_url(url: str) -> str:
    url = url.strip()
    if not url:
        return ""
    # Allow passing just host:port.
    if "://" not in url:
        url = "http://" + url
    return url.rstrip("/")


class Settings(BaseSettings):
    """Runtime settings, read from `DEEDBOOK_*` environment variables.

    Keyword arguments win over the environment, so `Settings(port=8000)` never
    looks at `DEEDBOOK_PORT`. Use `load_settings()` to pass optional overrides.
    """

    model_config = SettingsConfigDict(env_prefix="DEEDBOOK_", env_ignore_empty=True, extra="ignore", frozen=True)

    url: str = ""
    host: str = "127.0.0.1"
    port: int = Field(0, ge=0, le=65535)
    log_level: LogLevel = "info"
    cors_origins: Annotated[tuple[str, ...], NoDecode] = DEFAULT_CORS_ORIGINS

    @field_validator("url", mode="before")
    @classmethod
    def _url(cls, v: Any) -> Any:
        return _normalize_base_url(v) if isinstance(v, str) else v

    @field_validator("host", mode="before")
    @classmethod
    def _host(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip() or "127.0.0.1"
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def _log_level(cls, v: Any) -> Any:
        return v.strip().lower() if isinstance(v, str) else v

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _cors_origins(cls, v: Any) -> Any:
        if isinstance(v, str):
            return tuple(o.strip() for o in v.split(",") if o.strip())
        return v


def load_settings(**overrides: Any) -> Settings:
    """Build settings from the environment, letting non-None `overrides` take precedence."""

    return Settings(**{k: v for k, v in overrides.items() if v is not None})
