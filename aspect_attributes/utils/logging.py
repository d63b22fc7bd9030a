import logging
import sys
import typing as t

from aspect_attributes.settings import Settings, get_settings


def get_logger(settings: t.Optional[Settings] = None, name=None):
    settings = settings or get_settings()
    logger = logging.getLogger(name or settings.name)
    level = logging.getLevelName(settings.log_level.upper())
    logger.setLevel(level)
    if not any(_is_stdout_handler(h) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(settings.log_format, style="{"))
        logger.addHandler(handler)
    return logger


def _is_stdout_handler(handler: logging.Handler):
    return isinstance(handler, logging.StreamHandler) and handler.stream is sys.stdout
