"""
Operation timing and batch operation tracking.

log_operation times single storage calls; BatchOperationLogger tracks the
per-artifact outcome of a decay sweep and emits a summary when it ends.
"""

import time
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

from eterna.logutil.context import clogger

__all__ = ["log_operation", "BatchOperationLogger"]


# -----------------------------------------------------------------------------
# Operation Timing Context Manager
# -----------------------------------------------------------------------------
@contextmanager
def log_operation(
    operation_name: str, log_level: str = "debug", **metadata: Any
) -> Iterator[None]:
    """
    Context manager for timing and logging operations.

    Usage:
        with log_operation("support_artifact", artifact_id="123"):
            store.update(...)
    """
    start = time.time()
    clogger.debug(f"Starting operation: {operation_name}", extra=metadata)

    try:
        yield
    except Exception as e:
        duration_ms = int((time.time() - start) * 1000)
        clogger.error(
            f"Operation failed: {operation_name} ({duration_ms}ms): {e}",
            extra={
                **metadata,
                "duration_ms": duration_ms,
                "status": "failure",
                "error_type": type(e).__name__,
            },
        )
        raise

    duration_ms = int((time.time() - start) * 1000)
    getattr(clogger, log_level)(
        f"Operation completed: {operation_name} ({duration_ms}ms)",
        extra={**metadata, "duration_ms": duration_ms, "status": "success"},
    )


# -----------------------------------------------------------------------------
# Batch Operation Logger
# -----------------------------------------------------------------------------
class BatchOperationLogger:
    """
    Logger for batch operations (e.g., one decay sweep over all artifacts).
    Tracks per-item status and logs a summary on exit.

    Usage:
        with BatchOperationLogger("decay_tick", total=len(artifacts)) as batch:
            for artifact in artifacts:
                batch.log_item(artifact.artifact_id, status="updated", fade_level=42)
    """

    FAILURE_STATUS = "failed"

    def __init__(self, operation_name: str, total: Optional[int] = None):
        self.operation_name = operation_name
        self.total = total
        self.results: List[Dict[str, Any]] = []
        self.start_time: Optional[float] = None

    def __enter__(self) -> "BatchOperationLogger":
        self.start_time = time.time()
        clogger.info(
            f"Starting batch operation: {self.operation_name}",
            extra={"total_items": self.total},
        )
        return self

    def log_item(self, item_name: str, status: str = "success", **metadata: Any) -> None:
        """Log progress for an individual item."""
        self.results.append({"item": item_name, "status": status, **metadata})

        progress = (
            f"[{len(self.results)}/{self.total}]" if self.total else f"[{len(self.results)}]"
        )
        log_func = clogger.warning if status == self.FAILURE_STATUS else clogger.debug
        log_func(
            f"{progress} {item_name}: {status}",
            extra={"item": item_name, "status": status, **metadata},
        )

    @property
    def failure_count(self) -> int:
        return sum(1 for r in self.results if r["status"] == self.FAILURE_STATUS)

    def __exit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[BaseException],
        exc_tb: Optional[Any],
    ) -> None:
        duration_ms = int((time.time() - (self.start_time or time.time())) * 1000)
        failure_count = self.failure_count
        summary = {
            "operation": self.operation_name,
            "duration_ms": duration_ms,
            "total_items": len(self.results),
            "success_count": len(self.results) - failure_count,
            "failure_count": failure_count,
        }

        if exc_type is None:
            clogger.info(
                f"Batch operation completed: {self.operation_name} "
                f"({summary['success_count']}/{len(self.results)} ok in {duration_ms}ms)",
                extra=summary,
            )
        else:
            clogger.error(
                f"Batch operation failed: {self.operation_name}: {exc_val}",
                extra={**summary, "error_type": exc_type.__name__},
            )
