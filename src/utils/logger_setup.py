"""
Logger Setup
-----------
Logging configuration for the CLI using loguru.
"""

import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<level>{message}</level>"
)


def configure_logger(verbose: bool = False) -> None:
    """Configure loguru for command line use.

    Removes the default handler and logs to the current stderr, which lets
    click's test runner capture the output.

    Args:
        verbose: If True, also emit DEBUG messages.
    """
    logger.remove()
    logger.add(
        sys.stderr,
        format=LOG_FORMAT,
        level="DEBUG" if verbose else "INFO",
        colorize=None,
        backtrace=False,
        diagnose=False,
    )
