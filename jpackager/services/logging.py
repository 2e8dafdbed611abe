"""
Diagnostic logging for jpackager.

Resolver and runner steps are logged here, never through the presenter.
The [logging] settings pick the level and whether records go to stderr,
to a rotating file, or both. Records carry the thread name so lines from
the stdout and stderr relay threads can be told apart.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from ..core.interfaces.logger import ILogger
from ..core.models.config import LoggingConfig

LOGGER_NAME = "jpackager"


class JPackagerLogger(ILogger):
    """ILogger writing to stderr and/or a rotating log file."""

    DEFAULT_LOG_FILE = Path.home() / ".jpackager" / "jpackager.log"
    MAX_FILE_SIZE = 2 * 1024 * 1024
    BACKUP_COUNT = 2
    FORMAT = "%(asctime)s %(levelname)-7s [%(threadName)s] %(message)s"

    def __init__(self, config: LoggingConfig | None = None) -> None:
        config = config or LoggingConfig()
        self._logger = logging.getLogger(LOGGER_NAME)
        self._logger.setLevel(getattr(logging, config.level.upper()))
        self._logger.propagate = False
        self.close()

        formatter = logging.Formatter(self.FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        for handler in self._build_handlers(config):
            handler.setFormatter(formatter)
            self._logger.addHandler(handler)

    def log_file(self, config: LoggingConfig) -> Path:
        """Where file records go: [logging] path, or ~/.jpackager/jpackager.log."""
        if config.path:
            return Path(config.path).expanduser()
        return self.DEFAULT_LOG_FILE

    def _build_handlers(self, config: LoggingConfig) -> list[logging.Handler]:
        handlers: list[logging.Handler] = []
        if config.console:
            handlers.append(logging.StreamHandler(sys.stderr))
        if config.file:
            path = self.log_file(config)
            path.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(
                RotatingFileHandler(
                    path,
                    maxBytes=self.MAX_FILE_SIZE,
                    backupCount=self.BACKUP_COUNT,
                    encoding="utf-8",
                )
            )
        return handlers

    @property
    def handlers(self) -> list[logging.Handler]:
        return list(self._logger.handlers)

    def close(self) -> None:
        """Detach and close every handler, releasing the log file."""
        for handler in self.handlers:
            self._logger.removeHandler(handler)
            handler.close()

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.error(message, *args, **kwargs)


class NullLogger(ILogger):
    """Discards everything; used until logging is configured."""

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass


_logger: JPackagerLogger | None = None


def configure_logging(config: LoggingConfig | None = None) -> ILogger:
    """Create the process-wide logger from the [logging] settings."""
    global _logger
    if _logger is not None:
        _logger.close()
    _logger = JPackagerLogger(config)
    return _logger


def get_logger() -> ILogger:
    """Return the configured logger, or a NullLogger before configuration."""
    if _logger is None:
        return NullLogger()
    return _logger


def reset_logging() -> None:
    """Close the configured logger and go back to NullLogger."""
    global _logger
    if _logger is not None:
        _logger.close()
    _logger = None
