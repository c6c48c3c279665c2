"""structlog configuration for bombadil.

Everything under ``bombadil.*`` goes through structlog, rendered either
for humans (console) or as JSON lines, to stderr.

Import diagnostics (WARNING+ records of ``bombadil.config.imports``) are
the one exception in human mode: they are printed as their bare message,
e.g. ``Unable to find bombadil import file: /path``, exactly once. In
JSON mode they are ordinary JSON records.
"""

from __future__ import annotations

import logging
import sys

import structlog

DIAGNOSTIC_LOGGER = "bombadil.config.imports"


def is_import_diagnostic(record: logging.LogRecord) -> bool:
    """True for records reported as bare import diagnostics."""
    return record.name == DIAGNOSTIC_LOGGER and record.levelno >= logging.WARNING


def _structlog_formatter(log_json: bool) -> logging.Formatter:
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

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route bombadil logs to stderr. Safe to call more than once.

    Args:
        verbose: DEBUG for ``bombadil.*``; otherwise WARNING+.
        log_json: JSON lines instead of console output, diagnostics included.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_structlog_formatter(log_json))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)
    logging.getLogger("bombadil").setLevel(logging.DEBUG if verbose else logging.WARNING)

    diagnostics = logging.getLogger(DIAGNOSTIC_LOGGER)
    diagnostics.handlers.clear()
    if log_json:
        return

    # Diagnostics keep propagating (debug records still reach structlog);
    # the root handler just skips the ones printed here.
    handler.addFilter(lambda record: not is_import_diagnostic(record))
    plain = logging.StreamHandler(sys.stderr)
    plain.setFormatter(logging.Formatter("%(message)s"))
    plain.addFilter(is_import_diagnostic)
    diagnostics.addHandler(plain)
