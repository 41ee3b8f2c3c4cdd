"""
Eterna logging infrastructure.

Provides logging utilities for the Lambda handlers and the decay worker:
- Structured logging with loguru
- Correlation ID tracking
- Request/response logging for Lambda handlers
- Operation timing and batch processing tracking (decay sweeps)

Usage:
    from eterna.logutil import clogger, log_lambda_handler

    @log_lambda_handler("POST /artifacts/{id}/support")
    def lambda_handler(event, context):
        clogger.info("Applying support", extra={"artifact_id": "..."})
        ...
"""

from eterna.logutil.config import logger, setup_logging
from eterna.logutil.context import clogger, correlation_id, request_start_time
from eterna.logutil.decorators import log_lambda_handler
from eterna.logutil.operations import BatchOperationLogger, log_operation

# Initialize logging when package is imported
setup_logging()

__all__ = [
    "logger",
    "clogger",
    "log_lambda_handler",
    "log_operation",
    "BatchOperationLogger",
    "correlation_id",
    "request_start_time",
    "setup_logging",
]
