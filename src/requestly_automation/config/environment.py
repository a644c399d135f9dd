"""Environment configuration."""

import os
from typing import Optional

from dotenv import load_dotenv, find_dotenv

import logging
logger = logging.getLogger(__name__)


def _read_optional(name: str) -> Optional[str]:
    value = (os.getenv(name) or "").strip()
    return value or None


def get_env_config() -> dict:
    """
    Read environment variables (and a .env file, if one is found from the cwd).

    Optional:   REQUESTLY_EXTENSIONS_DIR  directory holding requestly.crx,
                                          requestly.xpi and requestly-unpacked
                CHROME_BINARY             Chrome executable used by create_webdriver

    Unset or blank variables map to None.
    """
    load_dotenv(find_dotenv(filename=".env", usecwd=True))

    config = {
        "extensions_dir": _read_optional("REQUESTLY_EXTENSIONS_DIR"),
        "chrome_binary": _read_optional("CHROME_BINARY"),
    }
    logger.debug(f"Loaded environment config: {config}")
    return config
