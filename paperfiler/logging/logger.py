import logging
import sys
from pathlib import Path


class Log:
    """Centralized logging with structured format."""

    _FORMAT = "%(asctime)s [%(levelname)s] [%(threadName)s] %(message)s"

    _logger: logging.Logger = logging.getLogger("paperfiler")

    @classmethod
    def configure(cls, log_level: str, log_file: str | Path | None = None) -> None:
        """Configure the logger with a stdout handler and an optional log file."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(logging.Formatter(cls._FORMAT))
            cls._logger.addHandler(handler)
        if log_file and not any(
            isinstance(h, logging.FileHandler) for h in cls._logger.handlers
        ):
            path = Path(log_file)
            path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(path, encoding="utf-8")
            file_handler.setFormatter(logging.Formatter(cls._FORMAT))
            cls._logger.addHandler(file_handler)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        """Log an info message."""
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        """Log an error message."""
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        """Log a warning message."""
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        """Log a debug message."""
        cls._logger.debug(message, extra=kwargs)
