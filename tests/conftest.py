"""
Pytest fixtures for psw_strength tests. Word lists live in tmp_path; no network.
"""

from __future__ import annotations

import json

import pytest

from psw_strength.config import env
from psw_strength.psw_logging import configure_structlog
from psw_strength.wordlist import StaticWordList, WordListLoader, WordListLoaderConfig

WEAK_WORDS = ["password", "letmein", "qwerty", "abc123", "dragon"]


@pytest.fixture
def weak_words() -> StaticWordList:
    return StaticWordList(WEAK_WORDS)


@pytest.fixture
def wordlist_file(tmp_path):
    """JSON word-list document on disk in the {"wordlist": [...]} format."""
    path = tmp_path / "wordlist.json"
    path.write_text(json.dumps({"wordlist": WEAK_WORDS}), encoding="utf-8")
    return path


class FakeClock:
    def __init__(self, now: float = 1_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache_path(tmp_path):
    return tmp_path / "cache" / "wordlist.json"


@pytest.fixture
def make_loader(cache_path, clock):
    """Build a WordListLoader with its cache in tmp_path and the fake clock."""

    def _make(source: str, *, cache: bool = True, ttl: float = 1209600) -> WordListLoader:
        config = WordListLoaderConfig(
            source=source,
            cache_path=cache_path if cache else None,
            cache_ttl_sec=ttl,
        )
        return WordListLoader(config, clock=clock)

    return _make


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Keep tests independent of the developer's .env and home cache."""
    for name in (
        "PSW_WORDLIST_SOURCE",
        "PSW_WORDLIST_CACHE_TTL_SEC",
        "PSW_WORDLIST_TIMEOUT_SEC",
        "API_HOST",
        "API_PORT",
        "LOG_LEVEL",
        "LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("PSW_WORDLIST_CACHE_PATH", str(tmp_path / "env_cache" / "wordlist.json"))
    monkeypatch.setattr(env, "_ENV_PATH", tmp_path / "no.env")
    yield
    configure_structlog("json", "INFO")
