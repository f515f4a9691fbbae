"""
Structured logging for the Character Catalog.

Every entry emitted while a database load is in flight carries the source
being read and the load operation, so a parse, a fallback and the rebuild
that follows can be read together in the log.
"""

import logging
import time
from contextvars import ContextVar
from typing import Any, Dict, List, Optional

import structlog
from structlog.stdlib import LoggerFactory

source_var: ContextVar[Optional[str]] = ContextVar("source", default=None)
operation_var: ContextVar[Optional[str]] = ContextVar("operation", default=None)


class StructuredLogger:
    """structlog wrapper that attaches the active load context."""

    def __init__(self, name: str):
        self.name = name
        self.logger = structlog.get_logger(name)

    @staticmethod
    def _load_context() -> Dict[str, Any]:
        context: Dict[str, Any] = {}
        if source := source_var.get():
            context["source"] = source
        if operation := operation_var.get():
            context["operation"] = operation
        return context

    def _emit(self, level: str, event: str, **fields: Any) -> None:
        getattr(self.logger, level)(event, **self._load_context(), **fields)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._emit("debug", message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._emit("info", message, **kwargs)

    def log_processing_step(
        self,
        step: str,
        component: str,
        duration_ms: Optional[float] = None,
        **kwargs: Any,
    ) -> None:
        """Record one step of catalog processing, with its duration once known."""
        if duration_ms is not None:
            kwargs["duration_ms"] = round(duration_ms, 3)
        self._emit(
            "info",
            f"Processing step: {step}",
            step=step,
            component=component,
            **kwargs,
        )

    def log_source_event(self, event_type: str, success: bool, **kwargs: Any) -> None:
        """Record the outcome of reading a database source.

        Failures are warnings: the catalog keeps its previous collection and
        callers may fall back to another source.
        """
        self._emit(
            "info" if success else "warning",
            f"Source event: {event_type}",
            event_type=event_type,
            success=success,
            **kwargs,
        )


def get_logger(name: str) -> StructuredLogger:
    return StructuredLogger(name)


def set_load_context(
    source: Optional[str] = None, operation: Optional[str] = None
) -> None:
    """Tag subsequent entries with the source being loaded."""
    if source:
        source_var.set(source)
    if operation:
        operation_var.set(operation)


def clear_load_context() -> None:
    source_var.set(None)
    operation_var.set(None)


def configure_logging(level: str = "INFO", json_format: bool = True) -> None:
    """Route structlog through the standard library at ``level``.

    ``json_format`` selects one JSON object per line; otherwise entries are
    rendered for a terminal.
    """
    numeric_level = logging.getLevelName(level.upper())

    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="ISO"),
        structlog.processors.JSONRenderer()
        if json_format
        else structlog.dev.ConsoleRenderer(),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        level=numeric_level,
        format="%(message)s",
        handlers=[logging.StreamHandler()],
    )


class ProcessingTimer:
    """Context manager logging the start and end of a timed step."""

    def __init__(
        self, logger: StructuredLogger, step: str, component: str, **kwargs: Any
    ):
        self.logger = logger
        self.step = step
        self.component = component
        self.kwargs = kwargs
        self.start_time: Optional[float] = None
        self.duration_ms: Optional[float] = None

    def __enter__(self) -> "ProcessingTimer":
        self.start_time = time.perf_counter()
        self.logger.log_processing_step(
            f"{self.step}_start", self.component, **self.kwargs
        )
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if self.start_time is None:
            return
        self.duration_ms = (time.perf_counter() - self.start_time) * 1000
        self.logger.log_processing_step(
            f"{self.step}_end",
            self.component,
            duration_ms=self.duration_ms,
            status="success" if exc_type is None else "error",
            **self.kwargs,
        )


configure_logging(json_format=False)
