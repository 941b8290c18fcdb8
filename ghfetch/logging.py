"""Logging setup for the ghfetch CLI.

Fetched records go to stdout, so every log line goes to stderr.

Levels:
- ERROR: a failed fetch (with the number of records fetched before it)
- WARNING: pagination stopped by pagination.max_pages, config fallbacks
- INFO: one summary per fetched collection
- DEBUG: every request (URL and whether basic auth was used) and page size

Configure via config.yaml (logging.level, logging.format) or env (LOGGING_LEVEL, LOGGING_FORMAT).
"""

import logging
import sys

from ghfetch.config import LoggingConfig

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Third-party loggers that repeat request URLs; only shown at DEBUG
NOISY_LOGGERS = ("urllib3",)


def _resolve_level(level: str) -> int:
    """Map level name to logging constant; unknown names mean INFO."""
    return LEVELS.get(level.upper().strip(), logging.INFO)


class FetchLogging:
    """Routes the root logger to stderr using LoggingConfig (YAML + env LOGGING_*)."""

    def __init__(self, config: LoggingConfig) -> None:
        self._level = _resolve_level(config.level)
        self._format = config.format or DEFAULT_FORMAT

    def setup(self) -> None:
        """Replace root handlers with a single stderr handler."""
        logging.basicConfig(
            level=self._level,
            format=self._format,
            stream=sys.stderr,
            force=True,
        )
        noisy_level = logging.DEBUG if self._level <= logging.DEBUG else logging.WARNING
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(noisy_level)

    def get_logger(self, name: str = "ghfetch") -> logging.Logger:
        return logging.getLogger(name)
