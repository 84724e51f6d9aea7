"""structlog configuration for hosts embedding tempotime.

The library itself only logs through stdlib loggers under ``tempotime``
and never installs handlers on import. Applications that want to see
those records can call :func:`configure_logging`, which attaches one
handler to the ``tempotime`` logger and leaves the root logger and its
handlers to the host.

Two output modes:
- Human (default): colored console output to stderr
- JSON (log_json=True): structured JSON lines to stderr
"""

from __future__ import annotations

import logging
import sys

import structlog

_HANDLER_NAME = "tempotime.stderr"


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Configure structlog processors and route tempotime records to stderr.

    Calling it again replaces the handler it installed earlier. structlog's
    own configuration is process-wide, as with any structlog.configure call.

    Args:
        verbose: Enable DEBUG-level output from tempotime, which includes
            the silently ignored unit and zone names. When False, only
            WARNING+.
        log_json: Use JSON renderer instead of console renderer.
    """
    tempotime_level = logging.DEBUG if verbose else logging.WARNING

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    handler.set_name(_HANDLER_NAME)

    library_logger = logging.getLogger("tempotime")
    for existing in list(library_logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            library_logger.removeHandler(existing)
    library_logger.addHandler(handler)
    library_logger.setLevel(tempotime_level)
    # Written once here, not again through the root handlers
    library_logger.propagate = False


__all__ = ["configure_logging"]
