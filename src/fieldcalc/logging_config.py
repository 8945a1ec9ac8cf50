"""
Logging Configuration
Attaches handlers to the 'fieldcalc' logger.

The field report is printed to stdout, so log records go to stderr and,
when $FIELDCALC_LOG_FILE is set, to that file as well.
"""
import logging
import sys
from typing import List, Optional

from fieldcalc import config

PACKAGE_LOGGER = "fieldcalc"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def _build_handlers(log_file: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    return handlers


def setup_logging(level: Optional[int] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the package logger and returns it.

    Args:
        level: Logging level. Defaults to ``config.get_log_level()``
            ($FIELDCALC_LOG_LEVEL, WARNING when unset).
        log_file: Extra file to write logs to. Defaults to
            ``config.get_log_file()`` ($FIELDCALC_LOG_FILE).
    """
    if level is None:
        level = config.get_log_level()
    if log_file is None:
        log_file = config.get_log_file()

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Re-running replaces the previous handlers instead of stacking them
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _build_handlers(log_file):
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(f"Logging at {logging.getLevelName(level)}, file: {log_file or '-'}")
    return logger
