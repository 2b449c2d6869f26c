"""roombroker core: configuration loading and typed properties."""

from roombroker.core.config import Config, config_properties
from roombroker.core.properties import FOUR_HOURS, LoggingProperties, ServerProperties, StorageProperties

__all__ = ["FOUR_HOURS", "Config", "LoggingProperties", "ServerProperties", "StorageProperties", "config_properties"]
