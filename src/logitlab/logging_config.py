"""
Logging Configuration
Sets up the 'logitlab' logger for the desktop app and the test runs.
"""
import logging
import sys
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the package logger with a console handler and an optional file handler.

    Args:
        level: Logging level, either a number (logging.DEBUG) or a name ("DEBUG").
        log_file: Optional path to save logs to a file (overwritten on each start).

    Returns:
        The configured 'logitlab' logger.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger("logitlab")
    logger.setLevel(level)
    logger.propagate = False

    # Re-running setup (e.g. a second window) must not duplicate every line
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # pyqtgraph is chatty at DEBUG when the history plot rescales
    logging.getLogger("pyqtgraph").setLevel(max(level, logging.INFO))

    logger.info(f"Logging initialized at level {logging.getLevelName(level)}.")
    return logger
