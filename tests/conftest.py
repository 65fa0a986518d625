"""Shared pytest fixtures for the appconfig test suite."""

from __future__ import annotations

import os

import pytest

ENV_KEYS = (
    "PORT", "APP_ENV", "DB_URI", "DB_NAME",
    "REFRESH_TOKEN_SECRET", "ACCESS_TOKEN_SECRET",
    "REFRESH_TOKEN_EXPIRE_HOURS", "ACCESS_TOKEN_EXPIRE_MINUTES",
    "CONTEXT_TIMEOUT_SECONDS", "PAGE", "PAGE_SIZE", "RECENCY",
    "USER_COLLECTION", "REFRESH_TOKEN_COLLECTION",
    "PASSWORD_RESET_TOKEN_COLLECTION", "PASSWORD_RESET_TOKEN_EXPIRE_MINUTES",
    "SMTP_HOST", "SMTP_PORT", "SMTP_FROM", "SMTP_USERNAME", "SMTP_PASSWORD",
    "RESET_URL", "GEMINI_API_KEY", "GEMINI_MODEL_NAME",
    "IMAGEKIT_PRIVATE_KEY", "IMAGEKIT_PUBLIC_KEY", "IMAGEKIT_URL_ENDPOINT",
    "MY_SUPER_SECRET_SALT", "OTP_COLLECTION", "OTP_EXPIRE_MINUTES",
    "OTP_MAXIMUM_ATTEMPTS", "REDIS_HOST", "REDIS_PORT", "REDIS_PASSWORD",
    "REDIS_DB", "CACHE_EXPIRATION_SECONDS",
    "GOOGLE_CLIENT_ID", "GOOGLE_CLIENT_SECRET", "GOOGLE_REDIRECT_URL",
)


@pytest.fixture()
def clean_env(monkeypatch, tmp_path) -> dict:
    """Swap ``os.environ`` for a copy without any config keys.

    The working directory moves to an empty temp dir so no stray .env
    file is picked up. Dotenv writes land in the copy and vanish after
    the test.
    """
    env = {k: v for k, v in os.environ.items() if k not in ENV_KEYS}
    monkeypatch.setattr(os, "environ", env)
    monkeypatch.chdir(tmp_path)
    return env


@pytest.fixture()
def base_env() -> dict:
    """Return the smallest environment that loads successfully."""
    return {"DB_URI": "mongodb://x"}
