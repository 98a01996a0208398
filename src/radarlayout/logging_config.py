"""
Logging Configuration
Attaches console (and optional file) output to the 'radarlayout' logger.

Library code only calls `logging.getLogger(__name__)`; handlers are installed
here by applications such as the command-line demo.
"""
import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATEFMT = '%H:%M:%S'

# JIT compilation is very talkative at DEBUG
NOISY_LOGGERS = ("numba",)


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the 'radarlayout' logger.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to also write the log to.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("radarlayout")
    logger.setLevel(level)
    logger.propagate = False

    # Re-running the CLI in one process must not stack handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    logger.debug(f"Logging initialized at level {logging.getLevelName(level)}.")
    return logger
