from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env(name, None)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_list(name: str, default: list[str]) -> tuple[str, ...]:
    raw = _get_env(name, None)
    if raw is None:
        return tuple(default)
    values = [item.strip() for item in raw.split(",")]
    clean = [item for item in values if item]
    return tuple(clean) if clean else tuple(default)


def _default_provider() -> str:
    if _get_env("OPENAI_API_KEY"):
        return "openai"
    if _get_env("GEMINI_API_KEY"):
        return "gemini"
    return "mock"


@dataclass(frozen=True)
class Settings:
    provider: str
    openai_api_key: str | None
    openai_model: str
    openai_base_url: str | None
    openai_timeout_s: float
    openai_max_retries: int
    gemini_api_key: str | None
    gemini_model: str
    gemini_fallback_models: tuple[str, ...]
    log_level: str
    sentry_dsn: str | None
    cors_allowed_origins: tuple[str, ...]
    cors_allow_origin_regex: str | None
    cors_allow_credentials: bool
    min_text_chars: int
    max_upload_bytes: int


settings = Settings(
    provider=(_get_env("PROVIDER") or _default_provider()).strip().lower(),
    openai_api_key=_get_env("OPENAI_API_KEY"),
    openai_model=_get_env("OPENAI_MODEL", "gpt-4o-mini") or "gpt-4o-mini",
    openai_base_url=_get_env("OPENAI_BASE_URL"),
    openai_timeout_s=float(_get_env("OPENAI_TIMEOUT_S", "30") or "30"),
    openai_max_retries=_get_env_int("OPENAI_MAX_RETRIES", 2),
    gemini_api_key=_get_env("GEMINI_API_KEY"),
    gemini_model=_get_env("GEMINI_MODEL", "gemini-2.5-flash") or "gemini-2.5-flash",
    gemini_fallback_models=_get_env_list("GEMINI_FALLBACK_MODELS", ["gemini-2.0-flash"]),
    log_level=_get_env("LOG_LEVEL", "INFO") or "INFO",
    sentry_dsn=_get_env("SENTRY_DSN"),
    cors_allowed_origins=_get_env_list(
        "CORS_ALLOWED_ORIGINS",
        [
            "http://localhost:8787",
            "http://127.0.0.1:8787",
            "http://localhost:5173",
            "http://localhost:3000",
        ],
    ),
    cors_allow_origin_regex=_get_env("CORS_ALLOW_ORIGIN_REGEX"),
    cors_allow_credentials=_get_env_bool("CORS_ALLOW_CREDENTIALS", False),
    min_text_chars=_get_env_int("MIN_TEXT_CHARS", 50),
    max_upload_bytes=_get_env_int("MAX_UPLOAD_BYTES", 10 * 1024 * 1024),
)

if settings.provider not in {"openai", "gemini", "mock"}:
    raise RuntimeError("PROVIDER must be one of 'openai', 'gemini' or 'mock'.")
