"""
Environment variable loading and validation for psw_strength.

- PSW_WORDLIST_SOURCE: URL or file path of the word-list JSON (default: wordlist.json)
- PSW_WORDLIST_CACHE_PATH: cache file for the fetched word list; empty disables caching
- PSW_WORDLIST_CACHE_TTL_SEC: cache expiry in seconds (default: 2 weeks)
- PSW_WORDLIST_TIMEOUT_SEC: HTTP timeout when fetching the word list
- API_HOST / API_PORT: bind address for the API server
- LOG_LEVEL / LOG_FORMAT: structlog level and renderer (json | console)
- Loads .env from project root when available.
"""

from __future__ import annotations

import math
import os
from pathlib import Path

from dotenv import load_dotenv

from psw_strength.psw_logging import get_logger

logger = get_logger(__name__)

# Project root: config is psw_strength/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"

DEFAULT_WORDLIST_SOURCE = "wordlist.json"
DEFAULT_CACHE_PATH = Path.home() / ".cache" / "psw_strength" / "wordlist.json"
DEFAULT_CACHE_TTL_SEC = 1209600  # 2 weeks
DEFAULT_TIMEOUT_SEC = 15.0
DEFAULT_API_HOST = "0.0.0.0"
DEFAULT_API_PORT = 8000
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "json"
LOG_FORMATS = ("json", "console")


def load_psw_env() -> None:
    """Load .env from project root. Safe to call multiple times; existing env wins."""
    load_dotenv(_ENV_PATH, override=False)


def _env_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip()


def _env_float(name: str, default: float) -> float:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("config_invalid_number", variable=name, value=raw, default=default)
        return default
    if not math.isfinite(value):
        logger.warning("config_invalid_number", variable=name, value=raw, default=default)
        return default
    if value < 0:
        logger.warning("config_negative_number", variable=name, value=raw, default=default)
        return default
    return value


def get_wordlist_source() -> str:
    """Return PSW_WORDLIST_SOURCE, or wordlist.json when unset or blank."""
    load_psw_env()
    return _env_str("PSW_WORDLIST_SOURCE", DEFAULT_WORDLIST_SOURCE) or DEFAULT_WORDLIST_SOURCE


def get_wordlist_cache_path() -> Path | None:
    """
    Return the cache file path.
    Unset -> ~/.cache/psw_strength/wordlist.json; set to empty -> None (caching disabled).
    """
    load_psw_env()
    raw = os.getenv("PSW_WORDLIST_CACHE_PATH")
    if raw is None:
        return DEFAULT_CACHE_PATH
    raw = raw.strip()
    if not raw:
        return None
    return Path(raw).expanduser()


def get_wordlist_cache_ttl_sec() -> float:
    load_psw_env()
    return _env_float("PSW_WORDLIST_CACHE_TTL_SEC", float(DEFAULT_CACHE_TTL_SEC))


def get_wordlist_timeout_sec() -> float:
    load_psw_env()
    return _env_float("PSW_WORDLIST_TIMEOUT_SEC", DEFAULT_TIMEOUT_SEC)


def get_api_host() -> str:
    load_psw_env()
    return _env_str("API_HOST", DEFAULT_API_HOST) or DEFAULT_API_HOST


def get_api_port() -> int:
    load_psw_env()
    raw = (os.getenv("API_PORT") or "").strip()
    if not raw:
        return DEFAULT_API_PORT
    try:
        return int(raw)
    except ValueError:
        logger.warning("config_invalid_number", variable="API_PORT", value=raw, default=DEFAULT_API_PORT)
        return DEFAULT_API_PORT


def get_log_level() -> str:
    """Return LOG_LEVEL upper-cased; unknown level names fall back to INFO."""
    load_psw_env()
    raw = (os.getenv("LOG_LEVEL") or "").strip().upper()
    if raw in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        return raw
    return DEFAULT_LOG_LEVEL


def get_log_format() -> str:
    """Return LOG_FORMAT: json (default) or console."""
    load_psw_env()
    raw = (os.getenv("LOG_FORMAT") or "").strip().lower()
    return raw if raw in LOG_FORMATS else DEFAULT_LOG_FORMAT
