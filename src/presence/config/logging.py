"""Log routing for the presence CLI.

Library modules log through ``logging.getLogger(__name__)``: the registry
records every (un)registration at DEBUG and the plugin manager reports
broken plugins at WARNING with the traceback attached.
:func:`configure_logging` renders those records, and any structlog
loggers, through a single :class:`structlog.stdlib.ProcessorFormatter`
on stderr, leaving stdout to command output.  With ``--log-json`` a
plugin traceback becomes a structured ``exception`` field instead of
embedded text.
"""

from __future__ import annotations

import logging
import sys

import structlog

PRESENCE_LOGGER = "presence"

# -v raises presence's own loggers only; the plugin framework stays at WARNING.
QUIET_LOGGERS = ("pluggy",)


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Install the stderr handler and set the presence log level.

    Safe to call more than once; the root handler is replaced, not stacked.

    Args:
        verbose: Show registry and plugin-loading events (DEBUG).
        log_json: Emit one JSON object per record instead of console lines.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    render_chain: list[structlog.types.Processor]
    if log_json:
        render_chain = [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]
    else:
        render_chain = [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]

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
            *render_chain,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(PRESENCE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
