import os
import sys

from loguru import logger

_configured = False


def setup_logger(*, json_logs: bool = False, level: str = "INFO") -> None:
    """Configure loguru for the functions.

    Console level controlled by LOG_LEVEL env (default: INFO).
    Only a stdout sink is installed: the function runtime collects stdout
    and its filesystem is read-only outside /tmp.
    """
    global _configured
    console_level = os.getenv("LOG_LEVEL", level).upper()
    logger.remove()

    if json_logs:
        logger.add(sys.stdout, serialize=True, level=console_level)
    else:
        logger.add(
            sys.stdout,
            format=(
                "<green>{time:HH:mm:ss}</green> | "
                "<level>{level: <8}</level> | "
                "<cyan>{name}</cyan>:<cyan>{function}</cyan> - "
                "<level>{message}</level>"
            ),
            level=console_level,
            colorize=False,
        )
    _configured = True


def ensure_logger(*, json_logs: bool = False, level: str = "INFO") -> None:
    """Configure the logger once per warm container."""
    if not _configured:
        setup_logger(json_logs=json_logs, level=level)
