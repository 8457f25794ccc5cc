import logging
import sys
from typing import TextIO


class Log:
    """Centralized logging for the file sender, one line per event."""

    FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

    _logger: logging.Logger = logging.getLogger("filesender")

    @classmethod
    def configure(cls, log_level: str, stream: TextIO | None = None) -> None:
        """Set the level and attach a single stream handler (stdout by default)."""
        cls._logger.setLevel(log_level.upper())
        if cls._logger.handlers:
            return
        handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
        handler.setFormatter(logging.Formatter(cls.FORMAT))
        cls._logger.addHandler(handler)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        """Log a debug message."""
        cls._log(logging.DEBUG, message, kwargs)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        """Log an info message."""
        cls._log(logging.INFO, message, kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        """Log a warning message."""
        cls._log(logging.WARNING, message, kwargs)

    @classmethod
    def error(cls, message: str, exc: BaseException | None = None, **kwargs: object) -> None:
        """Log an error, attaching the traceback of ``exc`` when given."""
        cls._log(logging.ERROR, message, kwargs, exc_info=exc)

    @classmethod
    def _log(
        cls,
        level: int,
        message: str,
        extra: dict[str, object],
        exc_info: BaseException | None = None,
    ) -> None:
        cls._logger.log(level, message, extra=extra, exc_info=exc_info)
