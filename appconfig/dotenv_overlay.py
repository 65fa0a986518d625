"""Best-effort .env overlay built on python-dotenv."""

import logging
import os

from dotenv import dotenv_values, load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_DOTENV_PATH = ".env"


def apply_dotenv(path: str = DEFAULT_DOTENV_PATH) -> bool:
    """Load *path* into ``os.environ`` without overriding variables already set.

    Any failure is ignored. Returns True if the file held at least one variable.
    """
    if not os.path.isfile(path):
        logger.debug("No dotenv file at %s, skipping", path)
        return False
    try:
        loaded = load_dotenv(path, override=False)
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Ignoring unreadable dotenv file %s: %s", path, exc)
        return False
    logger.debug("Applied dotenv file %s", path)
    return loaded


def read_dotenv(path: str = DEFAULT_DOTENV_PATH) -> dict[str, str]:
    """Parse *path* into a dict, dropping keys that have no value.

    ${VAR} references are left as written; expanding them would read the
    process environment.
    """
    if not os.path.isfile(path):
        return {}
    try:
        values = dotenv_values(path, interpolate=False)
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Ignoring unreadable dotenv file %s: %s", path, exc)
        return {}
    return {k: v for k, v in values.items() if v is not None}
