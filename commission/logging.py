"""
Logging setup.

Configures loguru sinks for command line use. Library code only
emits records and never configures sinks itself.
"""

import sys

from loguru import logger


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logger for stderr and an optional rotating file."""
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message} | {extra}",
        level=level,
    )

    if log_file:
        logger.add(
            log_file,
            rotation="1 day",
            retention="7 days",
            level=level,
            encoding="utf-8",
        )
