"""Structured logging for the profiling engine.

Usage:
    from bi_profiler.core.logging import get_logger, configure_logging

    # Importing the package configures nothing; the host opts in at startup
    configure_logging(log_level="INFO", log_format="console")

    # Get logger in any module
    logger = get_logger(__name__)

    # Log with structured context
    logger.info("dataset_assembled", dataset_id="abc123", columns=12)

    # Scoped context propagation
    with log_context(dataset_id="abc123"):
        logger.debug("column_profiled", column="amount", type="numeric")
"""

from __future__ import annotations

import logging
import sys
from collections.abc import MutableMapping
from contextvars import ContextVar
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, cast

import structlog
from structlog.typing import FilteringBoundLogger

from bi_profiler.core.config import get_settings

_run_context: ContextVar[dict[str, Any] | None] = ContextVar("run_context", default=None)


@dataclass
class ProfilingMetrics:
    """Metrics collected while profiling one dataset."""

    dataset_id: str
    start_time: datetime = field(default_factory=lambda: datetime.now(UTC))
    end_time: datetime | None = None

    columns_processed: int = 0
    rows_processed: int = 0

    # Per-operation timings (seconds)
    timings: dict[str, float] = field(default_factory=dict)

    @property
    def duration_seconds(self) -> float:
        """Get duration in seconds."""
        if self.end_time:
            return (self.end_time - self.start_time).total_seconds()
        return (datetime.now(UTC) - self.start_time).total_seconds()

    def record_timing(self, operation: str, seconds: float) -> None:
        """Record timing for a sub-operation."""
        self.timings[operation] = self.timings.get(operation, 0.0) + seconds

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        return {
            "dataset_id": self.dataset_id,
            "duration_seconds": self.duration_seconds,
            "columns_processed": self.columns_processed,
            "rows_processed": self.rows_processed,
            "timings": self.timings,
        }


_current_metrics: ContextVar[ProfilingMetrics | None] = ContextVar(
    "current_metrics", default=None
)


def start_profiling_metrics(dataset_id: str) -> ProfilingMetrics:
    """Start collecting metrics for one profiling call."""
    metrics = ProfilingMetrics(dataset_id=dataset_id)
    _current_metrics.set(metrics)
    return metrics


def get_profiling_metrics() -> ProfilingMetrics | None:
    """Get current profiling metrics."""
    return _current_metrics.get()


def end_profiling_metrics() -> ProfilingMetrics | None:
    """End metrics collection for the current profiling call."""
    metrics = _current_metrics.get()
    if metrics:
        metrics.end_time = datetime.now(UTC)
        _current_metrics.set(None)
    return metrics


def _add_run_context(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Processor to add run context to log events."""
    context = _run_context.get()
    if context:
        event_dict.update(context)
    return event_dict


def configure_logging(
    log_level: str = "INFO",
    log_format: str = "console",
    show_timestamps: bool = True,
    color: bool = True,
) -> None:
    """Configure structured logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_format: Output format ("console" for development, "json" for production)
        show_timestamps: Whether to show timestamps
        color: Whether to use colors in console mode
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        _add_run_context,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if show_timestamps:
        shared_processors.insert(0, structlog.processors.TimeStamper(fmt="iso", utc=True))

    if log_format == "json":
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(
                colors=color,
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, log_level.upper())),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    # Also configure stdlib logging for libraries
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, log_level.upper()),
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def get_logger(name: str | None = None) -> FilteringBoundLogger:
    """Get a structured logger.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Bound structlog logger
    """
    return cast(FilteringBoundLogger, structlog.get_logger(name))


def configure_logging_from_settings() -> None:
    """Configure logging from BI_PROFILER_LOG_LEVEL / BI_PROFILER_LOG_FORMAT.

    Host applications call this once at startup.
    """
    settings = get_settings()
    configure_logging(
        log_level=settings.log_level,
        log_format=settings.log_format,
        color=settings.log_format == "console",
    )


class LogContext:
    """Context manager for adding context to logs within a scope."""

    def __init__(self, **context: Any):
        self.context = context
        self.token: Any = None

    def __enter__(self) -> LogContext:
        current = _run_context.get() or {}
        self.token = _run_context.set({**current, **self.context})
        return self

    def __exit__(self, *args: Any) -> None:
        if self.token:
            _run_context.reset(self.token)


def log_context(**context: Any) -> LogContext:
    """Create a context manager for scoped logging context.

    Usage:
        with log_context(dataset_id="abc"):
            logger.info("processing")  # Will include dataset_id
    """
    return LogContext(**context)


def record_columns_processed(count: int) -> None:
    """Record profiled columns in current metrics."""
    metrics = _current_metrics.get()
    if metrics:
        metrics.columns_processed += count


def record_rows_processed(count: int) -> None:
    """Record profiled rows in current metrics."""
    metrics = _current_metrics.get()
    if metrics:
        metrics.rows_processed += count


def record_operation_timing(operation: str, seconds: float) -> None:
    """Record timing for a sub-operation in current metrics."""
    metrics = _current_metrics.get()
    if metrics:
        metrics.record_timing(operation, seconds)
