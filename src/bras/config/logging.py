"""structlog setup for the ``bras`` CLI.

The domain never logs. ``CpfService`` reports accepted and rejected inputs
through stdlib loggers under ``bras.*``; this module renders those records
(and any ``structlog.get_logger`` calls) on stderr so stdout carries only the
formatted CPF result.

- Human (default): ``ConsoleRenderer``, colored only when stderr is a TTY.
- ``--log-json``: one JSON object per record, for piping into log tooling.
- ``--verbose``: lowers ``bras.*`` to DEBUG; other libraries stay at WARNING.
"""

from __future__ import annotations

import logging
import sys

import structlog

APP_LOGGER = "bras"

_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Install a single stderr handler on the root logger.

    Safe to call once per CLI invocation; earlier handlers are replaced.

    Args:
        verbose: DEBUG for ``bras.*`` loggers. When False, only WARNING+.
        log_json: Render JSON lines instead of console output.
    """
    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_SHARED_PROCESSORS,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger(APP_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
