"""Diagnostic logging: structlog rendered through stdlib logging on stderr."""

from __future__ import annotations

import logging
import logging.config
import os

import structlog


def setup_logging() -> None:
    """Configure structlog and stdlib logging.

    ARCHITECT_LOG_LEVEL sets the level of the ``architect`` loggers (default
    WARNING), ARCHITECT_LOG_FORMAT picks ``console`` or ``json`` output.
    """
    log_level = os.environ.get("ARCHITECT_LOG_LEVEL", "WARNING").upper()
    log_format = os.environ.get("ARCHITECT_LOG_FORMAT", "console").lower()

    shared_processors: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
    ]

    if log_format == "json":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=shared_processors
        + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "structlog": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "foreign_pre_chain": shared_processors,
                    "processors": [
                        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                        renderer,
                    ],
                },
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "formatter": "structlog",
                },
            },
            "loggers": {
                "architect": {
                    "handlers": ["stderr"],
                    "level": log_level,
                    "propagate": False,
                },
            },
        }
    )
