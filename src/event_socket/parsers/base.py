"""Abstract base for frame parsers. Implement this to decode other event socket payloads."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from ..interfaces import EventSocketLogger
from ..loggers import NopLogger


class FrameParserBase(ABC):
    """
    Interface for turning one raw text frame into plain Python structures.

    Parsers never raise on malformed protocol text; anything they cannot use
    is skipped and reported at debug level through the injected logger.
    """

    def __init__(self, raw: str, logger: Optional[EventSocketLogger] = None) -> None:
        self.raw = raw
        self.logger = logger if logger is not None else NopLogger()

    @abstractmethod
    def parse(self) -> Any:
        """Parse the raw frame and return the decoded structure."""
        ...
