from abc import ABC, abstractmethod
from typing import Dict, List, Optional

EVENT_BODY_TAG = "EvBody"

# Header name -> decoded value. The body, when present, sits under EVENT_BODY_TAG.
Event = Dict[str, str]
ChannelRow = Dict[str, str]
ChannelTable = List[ChannelRow]


class EventSocketLogger(ABC):
    """
    Diagnostic sink with one method per syslog severity.

    Each method returns None on success or the exception that prevented the
    message from being written. Components accept an instance through their
    constructor and fall back to NopLogger when none is given.
    """

    @abstractmethod
    def alert(self, message: str) -> Optional[Exception]:
        ...

    @abstractmethod
    def critical(self, message: str) -> Optional[Exception]:
        ...

    @abstractmethod
    def debug(self, message: str) -> Optional[Exception]:
        ...

    @abstractmethod
    def emergency(self, message: str) -> Optional[Exception]:
        ...

    @abstractmethod
    def error(self, message: str) -> Optional[Exception]:
        ...

    @abstractmethod
    def info(self, message: str) -> Optional[Exception]:
        ...

    @abstractmethod
    def notice(self, message: str) -> Optional[Exception]:
        ...

    @abstractmethod
    def warning(self, message: str) -> Optional[Exception]:
        ...

    @abstractmethod
    def close(self) -> Optional[Exception]:
        """Release the sink. Further messages after close are undefined."""
        ...
