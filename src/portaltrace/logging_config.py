"""Logging configuration for portaltrace.

The library only creates module loggers; it never installs handlers on
import. Applications (such as the example scripts) call setup_logging once.
"""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO", name: str = "portaltrace") -> logging.Logger:
    """Attach a console handler to the package logger.

    Calling it again replaces the previous handler instead of adding a
    second one.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        name: Logger to configure.

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    for handler in list(logger.handlers):
        if getattr(handler, "_portaltrace_console", False):
            logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    console_handler._portaltrace_console = True
    logger.addHandler(console_handler)

    return logger
