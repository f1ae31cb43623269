"""
FastAPI server — password strength scoring over HTTP.

POST /analyze scores a password against the current word list.
GET /wordlist/status reports whether the word list has been loaded.
The word list is loaded in the background at startup; requests served
before it finishes simply score without the dictionary penalty.
"""

from __future__ import annotations

import threading
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from pydantic import BaseModel, Field

from psw_strength.config import get_settings
from psw_strength.psw_logging import get_logger
from psw_strength.scoring import analyze
from psw_strength.wordlist import WordListLoader

logger = get_logger(__name__)

_loader: WordListLoader | None = None
_loader_lock = threading.Lock()


# -----------------------------------------------------------------------------
# Dependency
# -----------------------------------------------------------------------------

def get_wordlist_loader() -> WordListLoader:
    """Dependency: process-wide word-list loader built from settings."""
    global _loader
    with _loader_lock:
        if _loader is None:
            _loader = WordListLoader(get_settings().loader_config())
        return _loader


# -----------------------------------------------------------------------------
# Request / response models
# -----------------------------------------------------------------------------

class AnalyzeRequest(BaseModel):
    """POST /analyze body."""

    password: str = Field(..., description="Password or passphrase to score")


class AnalyzeResponse(BaseModel):
    score: int = Field(..., description="Strength score; 0 for empty input")
    meaning: str = Field(..., description="Label such as Dreadful or Fantastic; empty for empty input")
    color: str = Field(..., description="Band color as #RRGGBB; empty for empty input")


class WordListStatusResponse(BaseModel):
    loaded: bool
    source: str | None = Field(None, description="cache, source, or null when not loaded")
    size: int


# -----------------------------------------------------------------------------
# App
# -----------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    get_settings().configure_logging()
    loader = get_wordlist_loader()
    loader.load_async()
    logger.info("api_wordlist_load_started", source=loader.config.source)
    yield
    logger.info("api_shutdown")


app = FastAPI(title="psw_strength", version="0.1.0", lifespan=lifespan)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/analyze", response_model=AnalyzeResponse)
def analyze_password(
    body: AnalyzeRequest,
    loader: WordListLoader = Depends(get_wordlist_loader),
) -> AnalyzeResponse:
    result = analyze(body.password, loader)
    logger.info(
        "api_password_analyzed",
        length=len(body.password),
        score=result.score,
        meaning=result.meaning,
        wordlist_loaded=loader.is_loaded,
    )
    return AnalyzeResponse(**result.to_dict())


@app.get("/wordlist/status", response_model=WordListStatusResponse)
def wordlist_status(loader: WordListLoader = Depends(get_wordlist_loader)) -> WordListStatusResponse:
    return WordListStatusResponse(
        loaded=loader.is_loaded,
        source=loader.loaded_from,
        size=len(loader),
    )
