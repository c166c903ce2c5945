"""Logger implementations: a no-op default and a bridge to the stdlib logging tree."""

import logging
from typing import Optional

from .interfaces import EventSocketLogger

NOTICE = 25
ALERT = 55
EMERGENCY = 60

logging.addLevelName(NOTICE, "NOTICE")
logging.addLevelName(ALERT, "ALERT")
logging.addLevelName(EMERGENCY, "EMERGENCY")


class NopLogger(EventSocketLogger):
    """Discards every message. Default when no sink is wired in."""

    def alert(self, message: str) -> Optional[Exception]:
        return None

    def critical(self, message: str) -> Optional[Exception]:
        return None

    def debug(self, message: str) -> Optional[Exception]:
        return None

    def emergency(self, message: str) -> Optional[Exception]:
        return None

    def error(self, message: str) -> Optional[Exception]:
        return None

    def info(self, message: str) -> Optional[Exception]:
        return None

    def notice(self, message: str) -> Optional[Exception]:
        return None

    def warning(self, message: str) -> Optional[Exception]:
        return None

    def close(self) -> Optional[Exception]:
        return None


class StdlibLogger(EventSocketLogger):
    """
    Routes messages to a logging.Logger (default: the "event_socket" logger).

    Severities logging has no level for are registered as NOTICE (25),
    ALERT (55) and EMERGENCY (60), so handlers and filters see them by name.
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger if logger is not None else logging.getLogger("event_socket")

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def _log(self, level: int, message: str) -> Optional[Exception]:
        self._logger.log(level, message)
        return None

    def alert(self, message: str) -> Optional[Exception]:
        return self._log(ALERT, message)

    def critical(self, message: str) -> Optional[Exception]:
        return self._log(logging.CRITICAL, message)

    def debug(self, message: str) -> Optional[Exception]:
        return self._log(logging.DEBUG, message)

    def emergency(self, message: str) -> Optional[Exception]:
        return self._log(EMERGENCY, message)

    def error(self, message: str) -> Optional[Exception]:
        return self._log(logging.ERROR, message)

    def info(self, message: str) -> Optional[Exception]:
        return self._log(logging.INFO, message)

    def notice(self, message: str) -> Optional[Exception]:
        return self._log(NOTICE, message)

    def warning(self, message: str) -> Optional[Exception]:
        return self._log(logging.WARNING, message)

    def close(self) -> Optional[Exception]:
        """Flush every handler of the target, returning the first flush error. Handlers stay open."""
        first_error: Optional[Exception] = None
        for handler in self._logger.handlers:
            try:
                handler.flush()
            except (OSError, ValueError) as e:
                if first_error is None:
                    first_error = e
        return first_error
