"""Shared logger for the calculator package."""
import logging
import os
import sys


LOGGER_NAME: str = "infix_calculator"
LOG_LEVEL_ENV: str = "INFIX_CALCULATOR_LOG_LEVEL"
LOG_FORMAT: str = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

# Library modules only log; the host application decides where records go
logger: logging.Logger = logging.getLogger(LOGGER_NAME)


def configure_logging(verbose: bool = False) -> logging.Logger:
    """
    Attach a stderr handler to the package logger, for command line use.

    The level is DEBUG when ``verbose`` is set, otherwise it is read from the
    ``INFIX_CALCULATOR_LOG_LEVEL`` environment variable and falls back to INFO.
    Records stop propagating to the root logger so they are not printed twice.

    :param bool verbose: Enable debug logging

    :return: Configured logger
    :rtype: logging.Logger
    """
    # Avoid stacking handlers when called more than once
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.propagate = False

    if verbose:
        logger.setLevel(logging.DEBUG)
    else:
        level_name: str = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
        logger.setLevel(getattr(logging, level_name, logging.INFO))
    return logger
