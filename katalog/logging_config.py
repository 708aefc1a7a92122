import logging
from pathlib import Path
from typing import Final

import structlog
from opentelemetry import trace
from rich.logging import RichHandler

from .config import settings

LOG_FILE: Final = Path("logs") / "katalog.log"
LOG_FORMAT: Final = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Engine and pool chatter is only useful when debugging storage itself
_QUIET_LOGGERS: Final = ("sqlalchemy.engine", "sqlalchemy.pool")


def _resolve_level(log_level: str | None) -> int:
    if log_level is None:
        return logging.DEBUG if settings.debug else logging.INFO
    return logging.getLevelNamesMapping().get(log_level.upper(), logging.INFO)


def _build_handlers() -> list[logging.Handler]:
    """Console output always; the catalog log file outside debug runs."""
    handlers: list[logging.Handler] = [RichHandler(rich_tracebacks=True)]
    if settings.log_to_file or not settings.debug:
        LOG_FILE.parent.mkdir(exist_ok=True)
        file_handler = logging.FileHandler(LOG_FILE, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handlers.append(file_handler)
    return handlers


def setup_logging(log_level: str | None = None) -> None:
    """Route stdlib and structlog records for the catalog engine.

    Args:
        log_level: Level name overriding the one implied by ``settings.debug``
    """
    level = _resolve_level(log_level)
    logging.basicConfig(level=level, handlers=_build_handlers(), force=True)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    _configure_structlog(level)

    get_logger(__name__).info(
        "Logging configured",
        level=logging.getLevelName(level),
        variant=settings.variant,
        log_file=str(LOG_FILE) if len(logging.getLogger().handlers) > 1 else None,
    )


def _add_span_ids(logger, method_name, event_dict):
    """Tag entries emitted inside a controller intent span."""
    span_context = trace.get_current_span().get_span_context()
    if span_context.is_valid:
        event_dict["trace_id"] = format(span_context.trace_id, "032x")
        event_dict["span_id"] = format(span_context.span_id, "016x")
    return event_dict


def _configure_structlog(level: int) -> None:
    renderer = (
        structlog.dev.ConsoleRenderer(colors=False)
        if settings.debug
        else structlog.processors.JSONRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            _add_span_ids,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        logger_factory=structlog.WriteLoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str):
    return structlog.get_logger(name)
