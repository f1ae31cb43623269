"""
Main entrypoint: FastAPI password strength server.

The word list is loaded on a background thread at startup (see api_server.server
lifespan); scoring is available immediately.

Env: PSW_WORDLIST_SOURCE, PSW_WORDLIST_CACHE_PATH, PSW_WORDLIST_CACHE_TTL_SEC, API_HOST, API_PORT, LOG_LEVEL.

Equivalent: uvicorn psw_strength.api_server.app:app --host 0.0.0.0 --port 8000
"""

# Configure structured JSON logging before other imports that may log
from psw_strength.psw_logging import get_logger

logger = get_logger("main")


def main() -> None:
    from psw_strength.config import get_settings
    from psw_strength.api_server.app import app
    import uvicorn

    settings = get_settings()
    settings.configure_logging()
    logger.info(
        "main_server_starting",
        host=settings.api_host,
        port=settings.api_port,
        wordlist_source=settings.wordlist_source,
    )
    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
