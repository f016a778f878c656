"""
Logging Configuration
Opt-in setup for the 'linalg3' logger. The library itself only emits records.
"""
import logging
import sys
from typing import Optional


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger for the 'linalg3' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG shows singular inverses
            and non-unit rotation axes)
        log_file: Optional path to save logs to a file.
    """
    logger = logging.getLogger("linalg3")
    logger.setLevel(level)

    # Avoid duplicate handlers on repeated setup
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
