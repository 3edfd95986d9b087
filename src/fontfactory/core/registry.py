"""Registry of fonts loaded from the font configuration file.

The FontRegistry maps logical names to typefaces parsed from the files
listed in a properties file, and resolves font requests against that mapping
before falling back to the platform fonts.
"""

import threading
import time
from pathlib import Path

import structlog

from fontfactory.config.properties import load_properties
from fontfactory.config.settings import FONT_CONFIG_FILE_LOCATION, RegistryConfig
from fontfactory.domain.font import Font, Typeface
from fontfactory.domain.style import FontStyle
from fontfactory.exceptions import ConfigError, FontError
from fontfactory.io.environment import FontEnvironment, SystemFontEnvironment
from fontfactory.utils.logging import LoadLogger, LoadStats


class FontRegistry:
    """Thread-safe registry of custom fonts with system font fallback.

    The configuration file is loaded once when the registry is constructed
    and again on every reload_fonts() call. Each load builds a new mapping
    from scratch and swaps it in while holding the registry lock, so readers
    never observe a partially loaded registry.

    Example:
        registry = FontRegistry()
        font = registry.create_font("heading", FontStyle.BOLD, 14)
        if font is None:
            ...
    """

    def __init__(
        self,
        config_file: Path = FONT_CONFIG_FILE_LOCATION,
        environment: FontEnvironment | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the registry and load the configured fonts.

        Args:
            config_file: Properties file mapping logical names to font files
            environment: Platform font environment (default: system fonts)
            logger: Logger for load diagnostics
        """
        self._config_file = Path(config_file)
        self._environment: FontEnvironment = (
            environment if environment is not None else SystemFontEnvironment()
        )
        self._logger = (
            logger if logger is not None else structlog.get_logger("fontfactory.registry")
        )
        self._lock = threading.Lock()
        self._loaded_fonts: dict[str, Typeface] = {}
        self._last_load = LoadStats(config_file=str(self._config_file))

        self.reload_fonts()

    @classmethod
    def from_config(
        cls,
        config: RegistryConfig,
        environment: FontEnvironment | None = None,
    ) -> "FontRegistry":
        """Create a registry from registry settings."""
        return cls(config_file=config.config_file, environment=environment)

    @property
    def config_file(self) -> Path:
        return self._config_file

    @property
    def environment(self) -> FontEnvironment:
        return self._environment

    @property
    def last_load(self) -> LoadStats:
        """Statistics of the most recent load."""
        with self._lock:
            return self._last_load

    def registered_font_names(self) -> list[str]:
        """Return the logical names of all registered fonts.

        The order of the returned names is unspecified.
        """
        with self._lock:
            return list(self._loaded_fonts)

    def system_font_names(self) -> list[str]:
        """Return the family names of all platform fonts."""
        return self._environment.available_font_families()

    def get_typeface(self, name: str) -> Typeface | None:
        """Return the typeface registered under a logical name."""
        with self._lock:
            return self._loaded_fonts.get(name)

    def create_font(
        self,
        name: str,
        style: FontStyle = FontStyle.PLAIN,
        size: float = 12.0,
    ) -> Font | None:
        """Create a font by logical or platform family name.

        Registered fonts are checked before platform fonts, so a registered
        name shadows a platform family of the same name.

        Args:
            name: Logical name or exact platform family name
            style: Requested style
            size: Point size

        Returns:
            The font, or None if neither source knows the name

        Raises:
            ValueError: If size is not positive
        """
        if size <= 0:
            raise ValueError(f"Font size must be positive, got {size}")

        with self._lock:
            typeface = self._loaded_fonts.get(name)
            if typeface is not None:
                return typeface.derive(style, size, name=name)

        if name in self._environment.available_font_families():
            return self._environment.construct_font(name, style, size)
        return None

    def reload_fonts(self) -> None:
        """Reload every font listed in the configuration file.

        Entries that fail to load are logged and left out; an unreadable
        configuration file leaves the registry empty. Blocks other callers
        until the reload completes.
        """
        with self._lock:
            self._loaded_fonts, self._last_load = self._load_fonts()

    def _load_fonts(self) -> tuple[dict[str, Typeface], LoadStats]:
        load_logger = LoadLogger(self._logger, self._config_file)
        load_logger.stats.start_time = time.perf_counter()
        loaded_fonts: dict[str, Typeface] = {}

        try:
            entries = load_properties(self._config_file)
        except ConfigError as e:
            load_logger.log_config_unreadable(e)
            entries = {}
        else:
            load_logger.log_config_read(len(entries))

        for name, font_path in entries.items():
            try:
                typeface = self._environment.parse_font_file(Path(font_path))
            except FontError as e:
                load_logger.log_font_failed(name, font_path, e)
                continue

            loaded_fonts[name] = typeface
            load_logger.log_font_loaded(name, font_path, typeface.family_name)

        load_logger.stats.end_time = time.perf_counter()
        load_logger.log_load_complete()
        return loaded_fonts, load_logger.stats

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._loaded_fonts

    def __len__(self) -> int:
        with self._lock:
            return len(self._loaded_fonts)
