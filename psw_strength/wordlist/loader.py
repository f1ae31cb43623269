"""
Word-list loader: fetch once, cache with expiry, in-memory fallback.

Loads the known-weak word list from a URL (requests) or a local JSON file,
keeps it in memory, and caches the raw document on disk together with a
timestamp. A cache younger than cache_ttl_sec is used instead of fetching.

Failures never propagate to the scorer: an unloaded loader answers
contains() with False, which the scorer reads as "not a known weak word".
load_async() populates the list on a background thread so callers can
start scoring immediately.
"""

from __future__ import annotations

import json
import math
import os
import threading
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable

import requests

from psw_strength.core.exceptions import WordListError, WordListFetchError, WordListFormatError
from psw_strength.psw_logging import get_logger
from psw_strength.wordlist.base import parse_wordlist_document

logger = get_logger(__name__)

DEFAULT_SOURCE = "wordlist.json"
DEFAULT_CACHE_TTL_SEC = 1209600  # 2 weeks
DEFAULT_REQUEST_TIMEOUT_SEC = 15.0

LOADED_FROM_CACHE = "cache"
LOADED_FROM_SOURCE = "source"


@dataclass
class WordListLoaderConfig:
    """Where to load the word list from and how long a cached copy stays valid."""

    source: str = DEFAULT_SOURCE
    cache_path: Path | None = None
    """JSON cache file; None disables caching."""
    cache_ttl_sec: float = DEFAULT_CACHE_TTL_SEC
    request_timeout_sec: float = DEFAULT_REQUEST_TIMEOUT_SEC


def _is_url(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


class WordListLoader:
    """
    WordList backed by a JSON document fetched from config.source.

    The backing frozenset is swapped under a lock, so readers always see
    either the previous or the new complete list.
    """

    def __init__(
        self,
        config: WordListLoaderConfig | None = None,
        *,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._config = config or WordListLoaderConfig()
        self._clock = clock
        self._words: frozenset[str] = frozenset()
        self._lock = threading.Lock()
        self._attempted = threading.Event()
        self._loaded = False
        self._loaded_from: str | None = None

    @property
    def config(self) -> WordListLoaderConfig:
        return self._config

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def loaded_from(self) -> str | None:
        return self._loaded_from

    def contains(self, lowercased_text: str) -> bool:
        return lowercased_text in self._words

    def __len__(self) -> int:
        return len(self._words)

    # -------------------------------------------------------------------------
    # Cache
    # -------------------------------------------------------------------------

    def _read_cache(self) -> dict[str, Any] | None:
        path = self._config.cache_path
        if path is None or not path.is_file():
            return None
        try:
            with open(path, encoding="utf-8") as f:
                entry = json.load(f)
        except (OSError, ValueError) as e:
            # ValueError covers JSONDecodeError and UnicodeDecodeError
            logger.warning("wordlist_cache_read_failed", path=str(path), error=str(e))
            return None
        if not isinstance(entry, dict) or "data" not in entry:
            logger.warning("wordlist_cache_malformed", path=str(path))
            return None
        return entry

    def _entry_expired(self, entry: dict[str, Any] | None, now: float | None = None) -> bool:
        if entry is None:
            return True
        try:
            stamp = float(entry.get("timestamp"))
        except (TypeError, ValueError, OverflowError):
            return True
        if not math.isfinite(stamp):
            return True
        now = self._clock() if now is None else now
        # A timestamp from the future (clock skew, edited file) is not trusted.
        if stamp > now:
            return True
        return (now - stamp) >= self._config.cache_ttl_sec

    def cache_expired(self, now: float | None = None) -> bool:
        """True when there is no readable cache, it is at least cache_ttl_sec old, or it is dated in the future."""
        return self._entry_expired(self._read_cache(), now)

    def _write_cache(self, document: dict[str, Any]) -> None:
        path = self._config.cache_path
        if path is None:
            return
        entry = {"timestamp": self._clock(), "data": document}
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp = path.with_suffix(path.suffix + ".tmp")
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump(entry, f)
            os.replace(tmp, path)
        except OSError as e:
            logger.warning("wordlist_cache_write_failed", path=str(path), error=str(e))
            return
        logger.debug("wordlist_cache_written", path=str(path))

    def clear_cache(self) -> None:
        path = self._config.cache_path
        if path is not None and path.exists():
            path.unlink()
            logger.info("wordlist_cache_cleared", path=str(path))

    # -------------------------------------------------------------------------
    # Source
    # -------------------------------------------------------------------------

    def _fetch_document(self) -> dict[str, Any]:
        """Read config.source and return the decoded JSON object (not yet validated)."""
        source = self._config.source
        if _is_url(source):
            try:
                resp = requests.get(source, timeout=self._config.request_timeout_sec)
                resp.raise_for_status()
            except requests.RequestException as e:
                raise WordListFetchError(source, str(e)) from e
            raw: Any = resp.text
        else:
            path = Path(source).expanduser()
            try:
                raw = path.read_text(encoding="utf-8")
            except OSError as e:
                raise WordListFetchError(source, str(e)) from e
            except UnicodeDecodeError as e:
                raise WordListFormatError(f"Word list is not valid UTF-8: {e}") from e
        if isinstance(raw, str):
            try:
                raw = json.loads(raw)
            except json.JSONDecodeError as e:
                raise WordListFormatError(f"Error parsing data read: {e}") from e
        if not isinstance(raw, dict):
            raise WordListFormatError(f"Word list must be a JSON object, got {type(raw).__name__}")
        return raw

    def _swap(self, words: frozenset[str], loaded_from: str) -> None:
        with self._lock:
            self._words = words
            self._loaded = True
            self._loaded_from = loaded_from

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def load(self) -> bool:
        """
        Populate the word list from a fresh cache or from the source.

        Returns True on success. On failure the current in-memory list is kept
        and the error is logged; nothing is raised.
        """
        try:
            entry = self._read_cache()
            if entry is not None and not self._entry_expired(entry):
                try:
                    words = parse_wordlist_document(entry["data"])
                except WordListFormatError as e:
                    logger.warning("wordlist_cache_invalid", error=str(e))
                else:
                    self._swap(words, LOADED_FROM_CACHE)
                    logger.info("wordlist_loaded", source=LOADED_FROM_CACHE, size=len(words))
                    return True

            try:
                document = self._fetch_document()
                words = parse_wordlist_document(document)
            except WordListError as e:
                logger.warning(
                    "wordlist_fetch_failed",
                    source=self._config.source,
                    error=str(e),
                    error_type=type(e).__name__,
                    fallback_size=len(self._words),
                )
                return False

            self._swap(words, LOADED_FROM_SOURCE)
            self._write_cache(document)
            logger.info("wordlist_loaded", source=self._config.source, size=len(words))
            return True
        finally:
            self._attempted.set()

    def load_async(self) -> threading.Thread:
        """Run load() on a daemon thread and return the thread."""
        thread = threading.Thread(target=self.load, name="wordlist-loader", daemon=True)
        thread.start()
        return thread

    def wait_loaded(self, timeout: float | None = None) -> bool:
        """Block until a load attempt has finished; return whether a list is loaded."""
        self._attempted.wait(timeout)
        return self._loaded
