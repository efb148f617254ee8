"""
vidcoach.logging - Package logger and console logging setup.

Everything logs through the "vidcoach" logger. The LLM and HTTP libraries
are chatty at INFO, so they are held at WARNING unless verbose output was
asked for.
"""

from __future__ import annotations

import logging

logger = logging.getLogger("vidcoach")

NOISY_LOGGERS = ("LiteLLM", "httpx", "httpcore")


def configure_logging(verbose: bool = False) -> None:
    """Set up console logging.

    Args:
        verbose: DEBUG for vidcoach and its libraries; otherwise WARNING
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(name)s: %(message)s")
    logger.setLevel(level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(level)
