"""
Application settings.

Collects the env getters into one frozen object so the API, the CLI and the
word-list loader read the same configuration.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from psw_strength.config import env
from psw_strength.psw_logging import configure_structlog
from psw_strength.wordlist.loader import WordListLoaderConfig


@dataclass(frozen=True)
class Settings:
    wordlist_source: str
    wordlist_cache_path: Path | None
    wordlist_cache_ttl_sec: float
    wordlist_timeout_sec: float
    api_host: str
    api_port: int
    log_level: str
    log_format: str

    def configure_logging(self) -> None:
        """Apply log_level / log_format (which may come from .env) to structlog."""
        configure_structlog(self.log_format, self.log_level)

    def loader_config(self) -> WordListLoaderConfig:
        """Build the word-list loader configuration from these settings."""
        return WordListLoaderConfig(
            source=self.wordlist_source,
            cache_path=self.wordlist_cache_path,
            cache_ttl_sec=self.wordlist_cache_ttl_sec,
            request_timeout_sec=self.wordlist_timeout_sec,
        )


def get_settings() -> Settings:
    """Return the current application settings (read fresh from the environment)."""
    return Settings(
        wordlist_source=env.get_wordlist_source(),
        wordlist_cache_path=env.get_wordlist_cache_path(),
        wordlist_cache_ttl_sec=env.get_wordlist_cache_ttl_sec(),
        wordlist_timeout_sec=env.get_wordlist_timeout_sec(),
        api_host=env.get_api_host(),
        api_port=env.get_api_port(),
        log_level=env.get_log_level(),
        log_format=env.get_log_format(),
    )
