"""
Structured logging for psw_strength.

JSON logs with timestamp and event_type. Use get_logger() in every module.
"""

from psw_strength.psw_logging.logger import configure_structlog, get_logger, level_value

__all__ = ["configure_structlog", "get_logger", "level_value"]
