"""structlog setup for the localeroute CLI.

Every record, structlog or plain ``logging.getLogger(__name__)``, goes
through the same processor chain and lands on stderr so stdout stays
reserved for command results:
- Human (default): console renderer, colored only on a TTY
- JSON (--log-json): one JSON object per line
"""

from __future__ import annotations

import logging
import sys

import structlog

APP_LOGGER = "localeroute"

_PRE_CHAIN: list[structlog.types.Processor] = [
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
    """Route structlog and stdlib logging through one stderr handler.

    Safe to call repeatedly: the root handler is replaced, not stacked.

    Args:
        verbose: ``localeroute.*`` loggers emit DEBUG; otherwise WARNING+.
        log_json: Render JSON lines instead of console text.
    """
    structlog.configure(
        processors=[*_PRE_CHAIN, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_PRE_CHAIN,
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
