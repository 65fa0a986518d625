"""Frozen dataclass config loaded from environment variables and an optional .env file."""

import logging
import os
import re
from dataclasses import asdict, dataclass
from datetime import timedelta
from typing import Callable, Mapping, Optional

from appconfig.dotenv_overlay import DEFAULT_DOTENV_PATH, apply_dotenv, read_dotenv
from appconfig.errors import InvalidIntegerError, MissingRequiredError

logger = logging.getLogger(__name__)

Lookup = Callable[[str], Optional[str]]

REQUIRED_KEY = "DB_URI"

SECRET_FIELDS = frozenset({
    "refresh_token_secret",
    "access_token_secret",
    "smtp_password",
    "gemini_api_key",
    "imagekit_private_key",
    "secret_salt",
    "redis_password",
    "google_client_secret",
})

MASK = "****"

_INT_RE = re.compile(r"[+-]?[0-9]+")
INT_MIN = -2 ** 63
INT_MAX = 2 ** 63 - 1


def env_str(lookup: Lookup, key: str, default: str) -> str:
    value = lookup(key)
    return default if value is None else value


def env_int(lookup: Lookup, key: str, default: int) -> int:
    """Return *key* parsed as a base-10 integer, or *default* when unset."""
    value = lookup(key)
    if value is None:
        return default
    if not _INT_RE.fullmatch(value):
        raise InvalidIntegerError(key, value)
    parsed = int(value)
    # signed 64-bit range
    if not INT_MIN <= parsed <= INT_MAX:
        raise InvalidIntegerError(key, value)
    return parsed


@dataclass(frozen=True)
class Config:
    # server
    port: str = ":8080"
    app_env: str = "development"
    context_timeout_seconds: int = 10

    # database
    db_uri: str = ""
    db_name: str = ""

    # tokens
    refresh_token_secret: str = ""
    access_token_secret: str = ""
    refresh_token_expire_hours: int = 24 * 7
    access_token_expire_minutes: int = 15

    # pagination
    page: int = 1
    page_size: int = 10
    recency: str = "new"

    # collections
    user_collection: str = "users"
    refresh_token_collection: str = "refresh_tokens"
    password_reset_collection: str = "password_resets"
    password_reset_expire_minutes: int = 15

    # email
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 587
    smtp_from: str = ""
    smtp_username: str = ""
    smtp_password: str = ""
    reset_url: str = "http://localhost:3000/reset-password"

    # gemini
    gemini_api_key: str = ""
    gemini_model_name: str = "gemini-2.0-flash"

    # imagekit
    imagekit_private_key: str = ""
    imagekit_public_key: str = ""
    imagekit_endpoint: str = ""

    # otp
    secret_salt: str = ""
    otp_collection: str = "otps"
    otp_expire_minutes: int = 5
    otp_maximum_attempts: int = 3

    # redis / cache
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_password: str = ""
    redis_db: int = 0
    cache_expiration_seconds: int = 3600

    # google oauth2
    google_client_id: str = ""
    google_client_secret: str = ""
    google_redirect_url: str = ""

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

    @property
    def refresh_token_ttl(self) -> timedelta:
        return timedelta(hours=self.refresh_token_expire_hours)

    @property
    def access_token_ttl(self) -> timedelta:
        return timedelta(minutes=self.access_token_expire_minutes)

    @property
    def context_timeout(self) -> timedelta:
        return timedelta(seconds=self.context_timeout_seconds)

    @property
    def password_reset_ttl(self) -> timedelta:
        return timedelta(minutes=self.password_reset_expire_minutes)

    @property
    def otp_ttl(self) -> timedelta:
        return timedelta(minutes=self.otp_expire_minutes)

    @property
    def cache_ttl(self) -> timedelta:
        return timedelta(seconds=self.cache_expiration_seconds)

    @property
    def redis_address(self) -> str:
        return f"{self.redis_host}:{self.redis_port}"

    def as_dict(self, mask_secrets: bool = True) -> dict:
        """Return the fields as a plain dict.

        Non-empty secret fields are replaced with ``MASK`` unless
        *mask_secrets* is False.
        """
        data = asdict(self)
        if mask_secrets:
            for name in SECRET_FIELDS:
                if data[name]:
                    data[name] = MASK
        return data


def load_config(
    environ: Optional[Mapping[str, str]] = None,
    dotenv_path: Optional[str] = DEFAULT_DOTENV_PATH,
) -> Config:
    """Build Config from environment variables with the defaults above.

    With no *environ*, the dotenv file at *dotenv_path* is applied to
    ``os.environ`` (existing variables win) and ``os.environ`` is read.
    With an explicit *environ*, the dotenv values sit underneath it and the
    process environment is left alone. Pass ``dotenv_path=None`` to skip
    the dotenv file entirely.

    Raises:
        InvalidIntegerError: An integer variable is set to a non-integer.
        MissingRequiredError: DB_URI is empty after defaulting.
    """
    if environ is None:
        if dotenv_path is not None:
            apply_dotenv(dotenv_path)
        lookup = os.environ.get
    else:
        merged = read_dotenv(dotenv_path) if dotenv_path is not None else {}
        merged.update(environ)
        lookup = merged.get

    config = Config(
        port=env_str(lookup, "PORT", Config.port),
        app_env=env_str(lookup, "APP_ENV", Config.app_env),
        db_uri=env_str(lookup, "DB_URI", Config.db_uri),
        db_name=env_str(lookup, "DB_NAME", Config.db_name),
        refresh_token_secret=env_str(lookup, "REFRESH_TOKEN_SECRET", Config.refresh_token_secret),
        access_token_secret=env_str(lookup, "ACCESS_TOKEN_SECRET", Config.access_token_secret),
        refresh_token_expire_hours=env_int(
            lookup, "REFRESH_TOKEN_EXPIRE_HOURS", Config.refresh_token_expire_hours
        ),
        access_token_expire_minutes=env_int(
            lookup, "ACCESS_TOKEN_EXPIRE_MINUTES", Config.access_token_expire_minutes
        ),
        context_timeout_seconds=env_int(
            lookup, "CONTEXT_TIMEOUT_SECONDS", Config.context_timeout_seconds
        ),
        page=env_int(lookup, "PAGE", Config.page),
        page_size=env_int(lookup, "PAGE_SIZE", Config.page_size),
        recency=env_str(lookup, "RECENCY", Config.recency),
        user_collection=env_str(lookup, "USER_COLLECTION", Config.user_collection),
        refresh_token_collection=env_str(
            lookup, "REFRESH_TOKEN_COLLECTION", Config.refresh_token_collection
        ),
        password_reset_collection=env_str(
            lookup, "PASSWORD_RESET_TOKEN_COLLECTION", Config.password_reset_collection
        ),
        password_reset_expire_minutes=env_int(
            lookup, "PASSWORD_RESET_TOKEN_EXPIRE_MINUTES", Config.password_reset_expire_minutes
        ),
        smtp_host=env_str(lookup, "SMTP_HOST", Config.smtp_host),
        smtp_port=env_int(lookup, "SMTP_PORT", Config.smtp_port),
        smtp_from=env_str(lookup, "SMTP_FROM", Config.smtp_from),
        smtp_username=env_str(lookup, "SMTP_USERNAME", Config.smtp_username),
        smtp_password=env_str(lookup, "SMTP_PASSWORD", Config.smtp_password),
        reset_url=env_str(lookup, "RESET_URL", Config.reset_url),
        gemini_api_key=env_str(lookup, "GEMINI_API_KEY", Config.gemini_api_key),
        gemini_model_name=env_str(lookup, "GEMINI_MODEL_NAME", Config.gemini_model_name),
        imagekit_private_key=env_str(lookup, "IMAGEKIT_PRIVATE_KEY", Config.imagekit_private_key),
        imagekit_public_key=env_str(lookup, "IMAGEKIT_PUBLIC_KEY", Config.imagekit_public_key),
        imagekit_endpoint=env_str(lookup, "IMAGEKIT_URL_ENDPOINT", Config.imagekit_endpoint),
        secret_salt=env_str(lookup, "MY_SUPER_SECRET_SALT", Config.secret_salt),
        otp_collection=env_str(lookup, "OTP_COLLECTION", Config.otp_collection),
        otp_expire_minutes=env_int(lookup, "OTP_EXPIRE_MINUTES", Config.otp_expire_minutes),
        otp_maximum_attempts=env_int(lookup, "OTP_MAXIMUM_ATTEMPTS", Config.otp_maximum_attempts),
        redis_host=env_str(lookup, "REDIS_HOST", Config.redis_host),
        redis_port=env_int(lookup, "REDIS_PORT", Config.redis_port),
        redis_password=env_str(lookup, "REDIS_PASSWORD", Config.redis_password),
        redis_db=env_int(lookup, "REDIS_DB", Config.redis_db),
        cache_expiration_seconds=env_int(
            lookup, "CACHE_EXPIRATION_SECONDS", Config.cache_expiration_seconds
        ),
        google_client_id=env_str(lookup, "GOOGLE_CLIENT_ID", Config.google_client_id),
        google_client_secret=env_str(lookup, "GOOGLE_CLIENT_SECRET", Config.google_client_secret),
        google_redirect_url=env_str(lookup, "GOOGLE_REDIRECT_URL", Config.google_redirect_url),
    )

    if config.is_development:
        logger.info("The App is running in development env")

    if not config.db_uri:
        raise MissingRequiredError(REQUIRED_KEY)

    return config
