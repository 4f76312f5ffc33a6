"""Logging configuration for hostreport."""

import logging
import sys


def configure_logging(
    level: int = logging.INFO,
    fmt: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
) -> None:
    """Configure root hostreport logging.

    Logs go to stderr so they never mix with the console output of the CLI.

    Args:
        level: Logging level (default INFO)
        fmt: Log format string
    """
    logger = logging.getLogger("hostreport")
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(handler)
    logger.setLevel(level)
