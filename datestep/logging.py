"""Logging configuration for datestep.

Events go through structlog into the stdlib ``datestep`` logger. Until
configure_logging() is called that logger inherits the root level
(WARNING), so the debug events iterators emit when they stop are dropped.
"""

import logging
import sys

import structlog

PACKAGE_LOGGER = "datestep"


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger backed by the stdlib logger ``name``."""
    return structlog.wrap_logger(
        logging.getLogger(name or PACKAGE_LOGGER),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def configure_logging(
    level: str = "WARNING",
    json_output: bool = False,
) -> None:
    """Configure datestep logging.

    Installs a single stdout handler on the ``datestep`` logger; calling
    this again replaces it rather than stacking handlers.

    Args:
        level: Log level ("DEBUG", "INFO", "WARNING", "ERROR")
        json_output: True for JSON output (production), False for console
    """
    log_level = getattr(logging, level.upper())

    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=[
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers[:] = [handler]
    package_logger.setLevel(log_level)
    package_logger.propagate = False


def reset_logging() -> None:
    """Undo configure_logging(). Useful for testing."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
    structlog.reset_defaults()
