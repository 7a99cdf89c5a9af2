"""Structured Logging for formcheck

- Colored, human-readable dev output
- JSON structured output for log shippers
- Context propagation via contextvars

The library only emits events; hosts opt in to rendering by calling
``configure_logging``.
"""
import logging
import sys

import structlog
from structlog.types import EventDict, Processor

logging.getLogger("formcheck").addHandler(logging.NullHandler())


def _add_service_info(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Processor that adds library metadata."""
    event_dict.setdefault("service", "formcheck")
    event_dict.setdefault("version", "0.1.0")
    return event_dict


def get_shared_processors() -> list[Processor]:
    """Processors used in both dev and JSON configurations."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _add_service_info,
    ]


def configure_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """Configure the logging system.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: If True, output JSON format. If False, colored console output.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    shared_processors = get_shared_processors()

    if json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=True,
            exception_formatter=structlog.dev.plain_traceback,
        )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    lib_logger = logging.getLogger("formcheck")
    lib_logger.handlers = [handler]
    lib_logger.setLevel(log_level)
    lib_logger.propagate = False


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    """Get a structured logger backed by the stdlib logger ``name``.

    Output goes through stdlib handlers only, so nothing is rendered until
    the host configures logging.
    """
    return structlog.wrap_logger(logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger)


class LoggerRegistry:
    """Registry of pre-configured loggers for the engine's components."""

    _loggers: dict[str, structlog.stdlib.BoundLogger] = {}

    @classmethod
    def get(cls, name: str) -> structlog.stdlib.BoundLogger:
        """Get or create a logger for the given component."""
        if name not in cls._loggers:
            cls._loggers[name] = get_logger(f"formcheck.{name}")
        return cls._loggers[name]


def walker_logger() -> structlog.stdlib.BoundLogger:
    """Logger for tree discovery."""
    return LoggerRegistry.get("walker")


def engine_logger() -> structlog.stdlib.BoundLogger:
    """Logger for validation passes and reports."""
    return LoggerRegistry.get("engine")


def binder_logger() -> structlog.stdlib.BoundLogger:
    """Logger for observer attachment and live re-validation."""
    return LoggerRegistry.get("binder")


def controls_logger() -> structlog.stdlib.BoundLogger:
    """Logger for capability reads."""
    return LoggerRegistry.get("controls")
