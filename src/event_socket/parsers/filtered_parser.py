"""Parser for header-only views of an event block, with optional header exclusion."""

from typing import Iterable, Optional

from ..interfaces import Event, EventSocketLogger
from ..utils import parse_header_line
from .base import FrameParserBase


class FilteredEventParser(FrameParserBase):
    """
    Parses every "Name: value" line of a block, skipping headers listed in
    excluded_headers. Unlike EventFrameParser there is no body handling: all
    lines are scanned, including those after a blank line.
    """

    def __init__(
        self,
        raw: str,
        excluded_headers: Optional[Iterable[str]] = None,
        logger: Optional[EventSocketLogger] = None,
    ) -> None:
        super().__init__(raw, logger=logger)
        self.excluded_headers = frozenset(excluded_headers or ())

    def parse(self) -> Event:
        event: Event = {}
        for line in self.raw.split("\n"):
            pair = parse_header_line(line)
            if pair is None:
                continue
            key, value = pair
            if key in self.excluded_headers:
                continue
            event[key] = value
        return event


def event_headers_to_map(
    text: str,
    excluded_headers: Optional[Iterable[str]] = None,
    logger: Optional[EventSocketLogger] = None,
) -> Event:
    """Shortcut for FilteredEventParser(text, excluded_headers).parse()."""
    return FilteredEventParser(text, excluded_headers=excluded_headers, logger=logger).parse()
