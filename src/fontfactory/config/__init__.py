"""Configuration management for fontfactory.

Application settings are Pydantic models; the font list itself lives in a
Java-style properties file read by load_properties.

Key classes:
- RegistryConfig: Font registry settings
- LoggingConfig: Logging settings
- FontFactorySettings: Main application settings
"""

from fontfactory.config.properties import load_properties, parse_properties
from fontfactory.config.settings import (
    FONT_CONFIG_FILE_LOCATION,
    FontFactorySettings,
    LoggingConfig,
    RegistryConfig,
    get_default_settings,
)

__all__ = [
    "FONT_CONFIG_FILE_LOCATION",
    "FontFactorySettings",
    "LoggingConfig",
    "RegistryConfig",
    "get_default_settings",
    "load_properties",
    "parse_properties",
]
