import logging

from htmx_layout.config import Settings


def configure_logging(settings: Settings) -> int:
    """Set the package logger level from settings and return it."""
    log_level = getattr(logging, settings.log_level.upper(), None)
    if not isinstance(log_level, int):
        log_level = logging.INFO
    logging.getLogger("htmx_layout").setLevel(log_level)
    return log_level
