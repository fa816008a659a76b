import logging
import sys
from typing import Dict, Optional

from src.probe.exceptions import ConfigurationError

from .config import Config


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LEVEL_ALIASES: Dict[str, str] = {
    "trace": "DEBUG",
    "debug": "DEBUG",
    "info": "INFO",
    "warn": "WARNING",
    "warning": "WARNING",
    "error": "ERROR",
    "fatal": "CRITICAL",
    "panic": "CRITICAL",
    "critical": "CRITICAL",
}


class LoggingManager:
    """Manager for logging setup and logger retrieval."""

    @classmethod
    def parse_level(cls, level: str) -> int:
        """Convert a level name to a logging level.

        Raises:
            ConfigurationError: If the name is not a known level.
        """
        name = LEVEL_ALIASES.get(level.strip().lower())
        if name is None:
            raise ConfigurationError(f"not a valid log level: {level!r}")
        return getattr(logging, name)

    @classmethod
    def setup_logging(cls, level: str = "info", config: Optional[Config] = None) -> None:
        """Setup logging for the probe.

        Diagnostics go to stderr so stdout only carries the results.

        Args:
            level: Logging level (trace, debug, info, warning, error, fatal, panic)
            config: Settings providing library log levels; loaded when omitted.

        Raises:
            ConfigurationError: If the level is unknown.
        """
        numeric_level = cls.parse_level(level)

        # Create formatter
        formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

        # Setup console handler
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(numeric_level)

        # Configure root logger
        root_logger = logging.getLogger()
        root_logger.setLevel(numeric_level)
        root_logger.addHandler(console_handler)

        # Set levels for noisy libraries
        config = config or Config()
        for logger_name, library_level in config.library_log_levels.items():
            logging.getLogger(logger_name).setLevel(getattr(logging, library_level.upper(), logging.WARNING))

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get a logger instance.

        Args:
            name: Logger name, typically __name__

        Returns:
            Configured logger instance
        """
        return logging.getLogger(name)
