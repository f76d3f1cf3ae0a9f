"""Logging setup driven by :class:`Settings`."""

import logging

from cinqmille.config.settings import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: Settings | None = None) -> int:
    """
    Configure root logging from settings.

    Returns:
        The numeric level that was applied
    """
    settings = settings or get_settings()
    level_name = "DEBUG" if settings.debug else settings.log_level
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("cinqmille").setLevel(level)
    return level
