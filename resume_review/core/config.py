from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from resume_review.schemas.review import FirstWordPolicy

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


def _get_env_list(name: str, default: list[str]) -> tuple[str, ...]:
    raw = _get_env(name, None)
    if raw is None:
        return tuple(default)
    values = [item.strip() for item in raw.split(",")]
    clean = [item for item in values if item]
    return tuple(clean) if clean else tuple(default)


def _get_first_word_policy() -> FirstWordPolicy:
    raw = (_get_env("FIRST_WORD_POLICY", "reject") or "reject").strip().lower()
    if raw == "reject":
        return "reject"
    if raw == "accept":
        return "accept"
    raise RuntimeError("FIRST_WORD_POLICY must be either 'reject' or 'accept'.")


@dataclass(frozen=True)
class Settings:
    api_key: str | None
    review_auth_mode: str
    rate_limit: str
    rate_limit_enabled: bool
    log_level: str
    sentry_dsn: str | None
    cors_allowed_origins: tuple[str, ...]
    cors_allow_origin_regex: str | None
    cors_allow_credentials: bool
    lexicon_path: str | None
    trust_x_forwarded_for: bool
    first_word_policy: FirstWordPolicy


settings = Settings(
    api_key=_get_env("API_KEY"),
    review_auth_mode=(_get_env("REVIEW_AUTH_MODE", "public") or "public").strip().lower(),
    rate_limit=_get_env("RATE_LIMIT", "30/minute") or "30/minute",
    rate_limit_enabled=_get_env_bool("RATE_LIMIT_ENABLED", True),
    log_level=_get_env("LOG_LEVEL", "INFO") or "INFO",
    sentry_dsn=_get_env("SENTRY_DSN"),
    cors_allowed_origins=_get_env_list(
        "CORS_ALLOWED_ORIGINS",
        [
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:3000",
        ],
    ),
    cors_allow_origin_regex=_get_env("CORS_ALLOW_ORIGIN_REGEX"),
    cors_allow_credentials=_get_env_bool("CORS_ALLOW_CREDENTIALS", False),
    lexicon_path=_get_env("LEXICON_PATH"),
    trust_x_forwarded_for=_get_env_bool("TRUST_X_FORWARDED_FOR", False),
    first_word_policy=_get_first_word_policy(),
)

if settings.review_auth_mode not in {"public", "protected"}:
    raise RuntimeError("REVIEW_AUTH_MODE must be either 'public' or 'protected'.")

if settings.review_auth_mode == "protected" and not settings.api_key:
    raise RuntimeError("REVIEW_AUTH_MODE=protected requires API_KEY to be set.")