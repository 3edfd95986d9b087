"""Configuration settings for fontfactory."""

from pathlib import Path

from pydantic import BaseModel, Field

from fontfactory.domain.style import FontStyle

FONT_CONFIG_FILE_LOCATION = Path("config/fonts.properties")


class RegistryConfig(BaseModel):
    """Configuration for the font registry."""

    config_file: Path = Field(
        default=FONT_CONFIG_FILE_LOCATION,
        description="Properties file mapping logical font names to font files",
    )
    default_size: float = Field(
        default=12.0,
        gt=0.0,
        description="Point size used when a request does not name one",
    )
    default_style: FontStyle = Field(
        default=FontStyle.PLAIN,
        description="Style used when a request does not name one",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class FontFactorySettings(BaseModel):
    """Main application settings."""

    registry: RegistryConfig = Field(default_factory=RegistryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> FontFactorySettings:
    """Get default application settings."""
    return FontFactorySettings()
