# core/log.py

"""
structlog on top of the stdlib root logger.

Importing this module already routes structlog through stdlib logging, so
nothing is printed until a handler is installed (see configure_logging).

>>> from core.log import get_logger
>>> logger = get_logger(__name__)
>>> logger.debug("activity added", trip_id="abc", count=3)
"""

import logging
import sys

import structlog
from structlog.stdlib import BoundLogger

_SHARED_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
]


def _configure_structlog(*processors) -> None:
    structlog.configure(
        processors=[*_SHARED_PROCESSORS, *processors],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=BoundLogger,
    )


def configure_logging(level: str = "WARNING") -> None:
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level.upper())

    _configure_structlog(
        structlog.processors.TimeStamper(fmt="%H:%M:%S"),
        structlog.processors.format_exc_info,
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    )

    # stderr so log lines never mix with the interactive output on stdout
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.dev.ConsoleRenderer(colors=False),
            foreign_pre_chain=[structlog.stdlib.add_log_level],
        )
    )
    root.addHandler(handler)


def get_logger(name: str) -> BoundLogger:
    return structlog.get_logger(name)


# library default: stdlib levels and handlers decide, no output of our own
_configure_structlog(
    structlog.processors.format_exc_info,
    structlog.processors.KeyValueRenderer(key_order=["event"]),
)
