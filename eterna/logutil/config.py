"""
Logging configuration and setup for Eterna.

Configures loguru for AWS Lambda (JSON output) and for local runs of the
decay worker or tests (pretty console output).
"""

import os
import sys

from loguru import logger

__all__ = ["logger", "setup_logging"]

_SILENT_LEVELS = {"0", "OFF", "NONE", "SILENT"}
_NUMERIC_LEVELS = {"1": "INFO", "2": "DEBUG"}


# -----------------------------------------------------------------------------
# Logging Setup
# -----------------------------------------------------------------------------
def setup_logging() -> None:
    """
    Configure Loguru logging.

    Lambda: JSON structured logging to CloudWatch
    Local: Pretty console output
    """
    logger.remove()

    log_level = os.getenv("LOG_LEVEL", "INFO").upper()

    if log_level in _SILENT_LEVELS:
        return

    log_level = _NUMERIC_LEVELS.get(log_level, log_level)

    is_lambda = bool(os.getenv("AWS_LAMBDA_FUNCTION_NAME"))

    if is_lambda:
        logger.add(
            sys.stdout,
            level=log_level,
            format=(
                "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {name}:{function}:{line} | {message}"
            ),
            serialize=True,  # JSON output for CloudWatch
            enqueue=False,
            backtrace=True,
            diagnose=False,  # SECURITY: never dump variable values to CloudWatch
        )
    else:
        # enqueue=True: the decay worker logs from APScheduler threads
        logger.add(
            sys.stdout,
            level=log_level,
            format=(
                "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
                "<level>{level: <8}</level> | "
                "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
                "<level>{message}</level>"
            ),
            colorize=True,
            enqueue=True,
            backtrace=True,
            diagnose=True,
        )

    logger.debug(f"Logging initialized with level: {log_level}")
