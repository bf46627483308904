"""structlog setup for dgql.

Every event goes to stderr, because `dgql generate` writes SDL to stdout.
"""

import logging
import sys
import time
from typing import Any

import structlog
from structlog.typing import EventDict, Processor


def add_service_name(
    _logger: Any, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Tag each event with the emitting service."""
    event_dict.setdefault("service", "dgql")
    return event_dict


def configure_logging(
    environment: str = "development", log_level: str = "INFO", json_logs: bool = False
) -> None:
    """Route structlog through stdlib logging on stderr.

    Production environments or ``json_logs`` select JSON lines, otherwise
    the console renderer is used. Safe to call more than once.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, log_level.upper()),
        force=True,
    )

    renderer: Processor
    if json_logs or environment == "production":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            add_service_name,
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Attach ``kwargs`` (e.g. ``schema_file``) to later events in this context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()


class SchemaOperationLogger:
    """Helper for logging schema operation duration and outcome."""

    def __init__(self, logger: structlog.stdlib.BoundLogger, operation: str):
        self.logger = logger
        self.operation = operation
        self.start_time: float | None = None

    def __enter__(self) -> "SchemaOperationLogger":
        self.start_time = time.perf_counter()
        self.logger.debug("Schema operation started", operation=self.operation)
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if self.start_time is None:
            return
        duration = time.perf_counter() - self.start_time

        if exc_type is None:
            self.logger.info(
                "Schema operation completed",
                operation=self.operation,
                duration_ms=round(duration * 1000, 2),
            )
        else:
            self.logger.error(
                "Schema operation failed",
                operation=self.operation,
                duration_ms=round(duration * 1000, 2),
                error=str(exc_val),
                error_type=exc_type.__name__,
            )

    def log_progress(self, message: str, **kwargs: Any) -> None:
        """Log operation progress with context."""
        self.logger.debug(message, operation=self.operation, **kwargs)
