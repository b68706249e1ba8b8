import logging
import sys

from propgraph.config.settings import get_settings


def setup_logger(name: str = "propgraph") -> logging.Logger:
    settings = get_settings().logging
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, settings.level.upper(), logging.INFO))

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(settings.format))
        logger.addHandler(handler)

    return logger
# Usage: setup_logger() once in an entry point, then logging.getLogger(__name__) per module
