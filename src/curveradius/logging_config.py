"""
Logging Configuration
Sets up the 'curveradius' logger. Input commits and recomputed radii are
logged at DEBUG, so running with DEBUG shows every settled measurement.
"""
import logging
import sys
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATEFMT = '%H:%M:%S'


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown logging level '{level}'.")
        return resolved
    return level


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configures the logger for the 'curveradius' namespace.

    Args:
        level: Logging level, as a number (logging.DEBUG) or a name ("debug").
        log_file: Optional path to also write the session log to.
    """
    level = _resolve_level(level)
    logger = logging.getLogger("curveradius")
    logger.setLevel(level)

    # Window may be recreated in the same process, avoid duplicate records
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

    logger.info(f"Logging initialized at {logging.getLevelName(level)}.")
