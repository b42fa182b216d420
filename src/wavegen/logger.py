"""
Logging configuration for wavegen

All wavegen modules log under the "wavegen" logger. Nothing is printed until
an application attaches a handler, either its own or via set_global_logging().

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and wavegen contributors

MIT License
"""

import logging
import sys
from typing import Optional

LOGGER_NAME = "wavegen"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def set_global_logging(
    level: str = "INFO",
    format_string: Optional[str] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Send wavegen log records to stdout, and optionally to a file.

    Only the "wavegen" logger is configured; the root logger is left alone.
    Calling this again replaces the handlers installed by the previous call.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string for log messages
        log_file: Optional file path to write logs to

    Returns:
        The configured 'wavegen' logger

    Example:
        set_global_logging("DEBUG")
        Waveform(44100, [sine(440.0)])   # logs "Created Waveform(...)"
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, "_wavegen_global", False):
            logger.removeHandler(handler)
            handler.close()

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    formatter = logging.Formatter(format_string, datefmt="%Y-%m-%d %H:%M:%S")
    for handler in handlers:
        handler.setFormatter(formatter)
        handler._wavegen_global = True
        logger.addHandler(handler)
    logger.setLevel(log_level)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger in the wavegen namespace.

    Args:
        name: Logger name (defaults to 'wavegen'). Names outside the
              namespace are placed under it, so "waveform" becomes
              "wavegen.waveform".

    Returns:
        Logger instance
    """
    if name is None or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    if not name.startswith(LOGGER_NAME + "."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
