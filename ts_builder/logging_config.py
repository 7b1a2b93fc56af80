"""Logging setup for ts_builder.

Library modules obtain namespaced loggers through :func:`get_logger`.
Handlers are only installed when an application calls :func:`setup_logging`.
"""

import logging
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAMESPACE = "ts_builder"


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``ts_builder`` namespace."""
    if name == LOGGER_NAMESPACE or name.startswith(f"{LOGGER_NAMESPACE}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")


def setup_logging(level: Union[int, str] = logging.INFO, console: Optional[Console] = None) -> logging.Logger:
    """Route ts_builder logs through a rich console handler.

    Calling this more than once only updates the level.

    Args:
        level: Logging level for the ``ts_builder`` logger.
        console: Console to write to (defaults to stderr).

    Returns:
        The package root logger.
    """
    logger = logging.getLogger(LOGGER_NAMESPACE)

    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger
