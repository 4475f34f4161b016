"""Load ``.env`` into the environment and resolve the OpenAI credential."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from gpt_chat.errors import (
    ConfigLoadError,
    InvalidCredentialError,
    MissingCredentialError,
)

logger = logging.getLogger(__name__)

API_KEY_VAR = "OPEN_API_KEY"
ENV_FILE = ".env"


def load_env(path: str | Path = ENV_FILE) -> bool:
    """Merge ``path`` into ``os.environ`` without overriding existing values.

    Relative paths resolve against the current working directory only. A
    missing file is fine and returns ``False``, as does a file with no
    entries. A file that exists but can't be read raises ``ConfigLoadError``.
    """

    env_path = Path(path)
    if not env_path.exists():
        logger.debug("No env file at %s; using process environment", env_path)
        return False
    if not env_path.is_file():
        raise ConfigLoadError()

    try:
        loaded = load_dotenv(env_path, override=False)
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Failed to read %s: %s", env_path, exc)
        raise ConfigLoadError() from exc
    logger.debug("Loaded env file %s", env_path)
    return loaded


def check_api_key(api_key: str) -> str:
    """Return ``api_key`` if it can go in an HTTP header.

    Header values are sent as Latin-1; real keys are ASCII, so anything else
    (typically curly quotes pasted along with the key) is rejected.
    """
    if not api_key.isascii():
        raise InvalidCredentialError()
    return api_key


def get_api_key() -> str:
    """Return ``OPEN_API_KEY`` or raise ``MissingCredentialError``."""
    api_key = (os.getenv(API_KEY_VAR) or "").strip()
    if not api_key:
        raise MissingCredentialError()
    return check_api_key(api_key)


def mask_secret(value: str) -> str:
    """Return ``value`` redacted for log output, keeping at most the last 4 chars."""
    if len(value) < 12:
        return "****"
    return f"...{value[-4:]}"
