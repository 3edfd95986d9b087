"""Logging utilities for fontfactory."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

# Handlers added by configure_logging, replaced on the next call
_installed_handlers: list[logging.Handler] = []


@dataclass
class LoadStats:
    """Statistics from one font load."""

    config_file: str = ""
    config_found: bool = False
    loaded: list[str] = field(default_factory=list)
    failed: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def loaded_count(self) -> int:
        return len(self.loaded)

    @property
    def failed_count(self) -> int:
        return len(self.failed)

    @property
    def duration_seconds(self) -> float:
        """Calculate load duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure console and optional file logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)
        _installed_handlers.append(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("fontfactory")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


class LoadLogger:
    """Logger for one font load, collecting LoadStats as it goes."""

    def __init__(self, logger: structlog.stdlib.BoundLogger, config_file: Path) -> None:
        self._logger = logger
        self._stats = LoadStats(config_file=str(config_file))

    def log_config_read(self, entry_count: int) -> None:
        """Log a successfully parsed configuration file."""
        self._logger.debug(
            "Font configuration read",
            path=self._stats.config_file,
            entries=entry_count,
        )
        self._stats.config_found = True

    def log_config_unreadable(self, error: Exception) -> None:
        """Log a configuration file that could not be used."""
        self._logger.warning(
            "Failed to load font configuration",
            path=self._stats.config_file,
            error=str(error),
            error_type=type(error).__name__,
        )

    def log_font_loaded(self, name: str, path: str, family: str) -> None:
        """Log a registered font."""
        self._logger.debug("Font loaded", name=name, path=path, family=family)
        self._stats.loaded.append(name)

    def log_font_failed(self, name: str, path: str, error: Exception) -> None:
        """Log a font entry that was skipped."""
        self._logger.warning(
            "Failed to load font",
            name=name,
            path=path,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.failed.append((name, str(error)))

    def log_load_complete(self) -> None:
        """Log the load summary."""
        self._logger.info(
            "Fonts loaded",
            path=self._stats.config_file,
            loaded=self._stats.loaded_count,
            failed=self._stats.failed_count,
            duration_ms=round(self._stats.duration_seconds * 1000, 2),
        )

    @property
    def stats(self) -> LoadStats:
        """Get statistics for this load."""
        return self._stats
