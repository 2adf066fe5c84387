"""Shared logger for the form_calculator package."""
import logging

LOGGER_NAME: str = "form_calculator"
LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """
    Attach a stream handler to the package logger and set its level.

    Calling it again only updates the level, handlers are never duplicated.

    :param str level: Logging level name (DEBUG, INFO, WARNING, ERROR)

    :return: The configured package logger
    :rtype: logging.Logger
    """
    pkg_logger = logging.getLogger(LOGGER_NAME)
    if not pkg_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        pkg_logger.addHandler(handler)
    pkg_logger.setLevel(level.upper())
    return pkg_logger


logger: logging.Logger = logging.getLogger(LOGGER_NAME)
