"""
Cinq Mille Configuration.

Environment variables, settings, and logging configuration.
"""

from cinqmille.config.logging import configure_logging
from cinqmille.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
