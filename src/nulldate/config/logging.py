"""Logging setup for applications that embed nulldate."""

from __future__ import annotations

import logging
from typing import Final

PACKAGE_LOGGER: Final[str] = "nulldate"


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> logging.Logger:
    """Entry hook for the embedding application's startup code.

    nulldate never configures logging on import; its modules only log through
    children of the ``nulldate`` logger. Call this once from the application's
    entry point to install a root handler and set the ``nulldate`` level (parse
    failures are reported at DEBUG). ``force=True`` replaces existing root
    handlers, as with ``logging.basicConfig``.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    return package_logger
