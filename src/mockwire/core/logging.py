# src/mockwire/core/logging.py
"""Structured logging for mockwire.

The expectation core logs advisories such as ignored lenient expectations
or a conflicting assertion time through structlog. ``configure_logging``
routes those events, and anything a message transport logs through
``logging.getLogger``, into one stdlib handler rendered either as
key/value console lines or as JSON.

Output goes to stderr unless another stream is given, so the CLI can keep
stdout for the configuration it prints.
"""

import logging
import sys
from typing import Any, TextIO

import structlog
from structlog.stdlib import ProcessorFormatter

_SHARED_PROCESSORS: tuple[Any, ...] = (
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.StackInfoRenderer(),
)


def _drop_record_fields(
    logger: logging.Logger | None,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Strip the bookkeeping keys ProcessorFormatter adds to every event."""
    event_dict.pop("_record", None)
    event_dict.pop("_from_structlog", None)
    return event_dict


def _renderer_chain(json_output: bool) -> list[Any]:
    if json_output:
        return [_drop_record_fields, structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [_drop_record_fields, structlog.dev.ConsoleRenderer(colors=False)]


def configure_logging(
    *,
    json_output: bool = False,
    level: str = "INFO",
    stream: TextIO | None = None,
) -> None:
    """Install a single root handler shared by structlog and stdlib logging.

    Calling it again replaces the previous handler, so a CLI command can
    reconfigure once its settings are resolved.

    Args:
        json_output: Render one JSON object per line instead of console text.
        level: Root log level name (DEBUG, INFO, WARNING, ERROR).
        stream: Destination for log lines. Defaults to stderr.

    Raises:
        ValueError: If ``level`` is not a known level name.
    """
    log_level = logging.getLevelNamesMapping().get(level.upper())
    if log_level is None:
        raise ValueError(f"Unknown log level: {level!r}")

    structlog.configure(
        processors=[*_SHARED_PROCESSORS, ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Reconfiguration must reach loggers created at import time
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(
        ProcessorFormatter(
            processors=_renderer_chain(json_output),
            foreign_pre_chain=list(_SHARED_PROCESSORS),
        )
    )

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(log_level)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Bound structlog logger for ``name`` (typically ``__name__``)."""
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return logger
