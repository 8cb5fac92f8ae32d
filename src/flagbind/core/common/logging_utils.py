"""
Logging utilities for flagbind.

Structured loggers here wrap the stdlib logger of the same name, so records
only appear when the host application configures ``logging``. The library
never installs handlers or calls ``structlog.configure``.
"""

import logging

import structlog


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger backed by the stdlib logger ``name``.

    Args:
        name: Optional logger name

    Returns:
        A structured logger
    """
    return structlog.wrap_logger(  # type: ignore[return-value]
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )
