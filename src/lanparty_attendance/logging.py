"""Structured logging configuration using structlog.

Used as a library, the package stays quiet: unless the host application has
configured structlog itself, only warnings and errors are written, and
always to stderr. setup_logging() switches to the configured level and
format, which is what the command line entry point does.
"""

import logging
import sys

import structlog

from lanparty_attendance.config import get_config

LIBRARY_LOG_LEVEL = logging.WARNING


def _stderr_logger(*args) -> structlog.PrintLogger:
    # Resolve sys.stderr per logger so redirected streams are honoured.
    return structlog.PrintLogger(sys.stderr)


def _processors(json_output: bool) -> list:
    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        renderer,
    ]


def _configure(json_output: bool, numeric_level: int) -> None:
    structlog.configure(
        processors=_processors(json_output),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )


def use_library_defaults() -> None:
    """Warnings and errors only, console format, on stderr."""
    _configure(json_output=False, numeric_level=LIBRARY_LOG_LEVEL)


def setup_logging(json_output: bool | None = None, log_level: str | None = None) -> None:
    """Configure structlog for an application run.

    Args:
        json_output: If True, output JSON. Defaults to the log_json setting.
        log_level: Logging level name. Defaults to the log_level setting.
    """
    config = get_config()
    if json_output is None:
        json_output = config.log_json
    numeric_level = getattr(
        logging, (log_level or config.log_level).upper(), logging.INFO
    )

    _configure(json_output, numeric_level)

    # Stdlib loggers share the stream and threshold
    root = logging.getLogger()
    root.handlers = [logging.StreamHandler(sys.stderr)]
    root.setLevel(numeric_level)


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a logger instance bound with the module name.

    Args:
        name: Logger name (typically __name__ from calling module).
    """
    return structlog.get_logger(name)


if not structlog.is_configured():
    use_library_defaults()
