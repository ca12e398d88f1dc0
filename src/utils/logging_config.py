"""Structured logger setup shared by the router modules."""

import logging

from pythonjsonlogger import jsonlogger

from utils.settings import RouterSettings


def get_logger(name: str) -> logging.Logger:
    """
    Configure a JSON logger once and reuse it.

    The level comes from ``LOG_LEVEL`` so route misses can be silenced in
    prod without touching code.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    formatter = jsonlogger.JsonFormatter(
        "%(levelname)s %(name)s %(message)s %(asctime)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(RouterSettings.from_environment().log_level)
    logger.propagate = False
    return logger
