"""
Logging setup

Loguru is the single logging backend. Stdlib logging (uvicorn, fastapi) is
intercepted and routed through it so every log line has the same format.
"""

import logging
import sys

from loguru import logger


def setup_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """Configure Loguru and intercept stdlib logging. Safe to call more than once."""
    logger.remove()

    if json_logs:
        logger.add(sys.stdout, level=level, format="{message}", serialize=True)
    else:
        logger.add(
            sys.stdout,
            level=level,
            format=(
                "<green>{time:HH:mm:ss}</green> | "
                "<level>{level: <8}</level> | "
                "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
                "{message}"
            ),
            colorize=True,
        )

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)

    # uvicorn installs its own handlers; send them through the intercept instead
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        std_logger = logging.getLogger(name)
        std_logger.handlers = []
        std_logger.propagate = True
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    logger.debug("Logging configured (level={}, json={})", level, json_logs)


class _InterceptHandler(logging.Handler):
    """Route stdlib logging records to Loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Skip frames from the logging module so Loguru reports the real caller
        frame, depth = logging.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )
