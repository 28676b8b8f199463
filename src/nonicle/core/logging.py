"""Opt-in structured log output for the nonicle logger namespace.

nonicle is a library: its modules log through logging.getLogger(__name__)
and the package logger carries only a NullHandler, so nothing is written
unless the host application asks for it. Hosts with their own logging
setup receive nonicle records through normal propagation.

configure_logging() is for hosts that want nonicle's records rendered by
structlog (JSON or console) without touching the root logger: it attaches
a single ProcessorFormatter handler to the "nonicle" logger. Structured
fields passed via extra= become keys of the rendered event.
"""

import logging
import sys
from typing import Any, TextIO

import structlog
from structlog.stdlib import ProcessorFormatter

LOGGER_NAMESPACE = "nonicle"

_handler: logging.Handler | None = None


def _remove_internal_fields(
    logger: logging.Logger | None,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Remove internal structlog fields from output.

    ProcessorFormatter always adds _record and _from_structlog when
    processing log records. KeyError here would indicate a bug in the
    structlog integration.
    """
    del event_dict["_record"]
    del event_dict["_from_structlog"]
    return event_dict


def configure_logging(
    *,
    json_output: bool = False,
    level: str = "INFO",
    stream: TextIO | None = None,
) -> logging.Handler:
    """Render nonicle log records through structlog.

    Replaces any handler installed by a previous call. Records handled
    here do not propagate further, so they are not printed twice by the
    host's root handlers.

    Args:
        json_output: If True, output JSON. If False, human-readable.
        level: Log level (DEBUG, INFO, WARNING, ERROR).
        stream: Output stream, defaults to sys.stdout at call time.

    Returns:
        The installed handler.
    """
    global _handler

    pre_chain: list[Any] = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if json_output:
        final_processors: list[Any] = [
            _remove_internal_fields,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        final_processors = [
            _remove_internal_fields,
            structlog.dev.ConsoleRenderer(colors=False),
        ]

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(ProcessorFormatter(processors=final_processors, foreign_pre_chain=pre_chain))

    reset_logging()
    package_logger = logging.getLogger(LOGGER_NAMESPACE)
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, level.upper()))
    package_logger.propagate = False
    _handler = handler
    return handler


def reset_logging() -> None:
    """Undo configure_logging(): records propagate to the host again."""
    global _handler

    package_logger = logging.getLogger(LOGGER_NAMESPACE)
    if _handler is not None:
        package_logger.removeHandler(_handler)
        _handler = None
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
