"""Exception hierarchy for fontfactory."""


class FontFactoryError(Exception):
    """Base exception for all fontfactory errors."""

    pass


class ConfigError(FontFactoryError):
    """Errors related to the font configuration file."""

    pass


class ConfigUnreadableError(ConfigError):
    """Configuration file is missing or cannot be read."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read font configuration '{path}': {reason}")


class PropertiesSyntaxError(ConfigError):
    """Malformed content in a properties file."""

    def __init__(self, line_number: int, reason: str) -> None:
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"Line {line_number}: {reason}")


class FontError(FontFactoryError):
    """Errors related to font loading."""

    pass


class FontLoadError(FontError):
    """Error reading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class FontFormatError(FontError):
    """Unsupported or invalid font format."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid font format '{path}': {details}")
