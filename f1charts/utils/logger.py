"""
Logging setup using loguru.
The library logs through the shared loguru logger; applications call
`setup_logger` once to choose the level and console format.
"""
import sys

from loguru import logger as _logger

from f1charts.config import cfg


def setup_logger(level: str | None = None) -> None:
    """
    Configure loguru logger with a console sink.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR).
            Defaults to `cfg.log.level`.
    """
    _logger.remove()  # Remove default handler

    _logger.add(
        sys.stderr,
        level=level or cfg.log.level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
        colorize=True,
    )


# Re-export the configured logger
logger = _logger
