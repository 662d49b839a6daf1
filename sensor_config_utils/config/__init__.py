"""Module de configuration."""

from sensor_config_utils.config.loader import (
    SettingsLoader,
    FileSettingsLoader,
    load_settings
)
from sensor_config_utils.config.settings import (
    ConverterSettings,
    DisplaySettings,
    LoggingSettings
)

__all__ = [
    "SettingsLoader",
    "FileSettingsLoader",
    "load_settings",
    "ConverterSettings",
    "DisplaySettings",
    "LoggingSettings"
]
