"""Module de configuration."""

from wp_climate.config.loader import (
    ConfigLoader,
    FileConfigLoader,
    load_settings
)
from wp_climate.config.models import (
    AppSettings,
    FlowSettings,
    GitSettings,
    LoggingSettings,
    ShellSettings,
    WpCliSettings
)

__all__ = [
    "ConfigLoader",
    "FileConfigLoader",
    "load_settings",
    "AppSettings",
    "FlowSettings",
    "GitSettings",
    "LoggingSettings",
    "ShellSettings",
    "WpCliSettings",
]
