"""Parser for complete event frames: header lines, a blank line, then an optional body."""

from typing import Optional

from ..interfaces import EVENT_BODY_TAG, Event, EventSocketLogger
from ..utils import parse_header_line
from .base import FrameParserBase


class EventFrameParser(FrameParserBase):
    """
    Parses an event frame such as:

        Event-Name: CHANNEL_ANSWER
        Unique-ID: 4f6b...

        body text

    into {"Event-Name": "CHANNEL_ANSWER", "Unique-ID": "4f6b...", "EvBody": "body text"}.

    Header values are URL-decoded and the last duplicate wins. The body starts
    at the first non-empty line after the blank separator and is kept verbatim;
    it is never scanned for headers. No body key is set when nothing follows
    the separator.
    """

    def parse(self) -> Event:
        event: Event = {}
        in_body = False
        lines = self.raw.split("\n")
        for index, line in enumerate(lines):
            if not line:
                in_body = True
                continue
            if in_body:
                event[EVENT_BODY_TAG] = "\n".join(lines[index:])
                break
            pair = parse_header_line(line)
            if pair is None:
                self.logger.debug(f"Skipping malformed header line {line!r}")
                continue
            key, value = pair
            event[key] = value
        return event


def event_to_map(frame: str, logger: Optional[EventSocketLogger] = None) -> Event:
    """Shortcut for EventFrameParser(frame).parse()."""
    return EventFrameParser(frame, logger=logger).parse()
