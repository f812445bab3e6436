import os
import sys

from loguru import logger

_logger_initialized = False
_sink_ids: list[int] = []

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | run={extra[run_id]} | {message}"
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def setup_logger(log_level: str = "INFO", log_path: str | None = None, run_id: str | None = None):
    """Install the console (and optional file) sinks once and return a bound logger."""
    global _logger_initialized, _sink_ids

    resolved_run_id = run_id or str(os.getpid())
    log_level = log_level.upper()

    if not _logger_initialized:
        logger.remove()
        logger.configure(extra={"run_id": resolved_run_id})

        _sink_ids = [
            logger.add(
                sys.stderr,
                colorize=True,
                level=log_level,
                format=LOG_FORMAT,
            )
        ]

        if log_path:
            log_dir = os.path.dirname(log_path)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            _sink_ids.append(
                logger.add(
                    log_path,
                    rotation="10 MB",
                    retention="7 days",
                    level=log_level,
                    format=LOG_FORMAT,
                    encoding="utf-8",
                )
            )

        _logger_initialized = True

    return logger.bind(run_id=resolved_run_id)


def reset_logger() -> None:
    """Drop the sinks installed by ``setup_logger`` so it can be configured again."""
    global _logger_initialized, _sink_ids

    for sink_id in _sink_ids:
        logger.remove(sink_id)
    _sink_ids = []
    _logger_initialized = False
