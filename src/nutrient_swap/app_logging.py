"""Logging configuration helpers."""

import logging


def configure_logging(level: int | str = logging.INFO) -> None:
    """Configure application logging with a single stream handler.

    ``level`` accepts a number or a name such as ``"DEBUG"``; it is applied on
    every call, the handler is installed only once.
    """
    if isinstance(level, str):
        level = level.strip().upper()
    logger = logging.getLogger("nutrient_swap")
    logger.setLevel(level)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
