"""
DeegzLibs EventSocket: decoding helpers for line-oriented event socket text.
"""

from .backoff import BackoffSettings, FibonacciBackoff
from .interfaces import (
    EVENT_BODY_TAG,
    ChannelRow,
    ChannelTable,
    Event,
    EventSocketLogger,
)
from .loggers import NopLogger, StdlibLogger
from .parsers import (
    ChannelTableParser,
    EventFrameParser,
    FilteredEventParser,
    FrameParserBase,
    event_headers_to_map,
    event_to_map,
    map_channel_data,
)
from .utils import (
    generate_uuid,
    header_value,
    parse_header_line,
    split_ignore_groups,
    to_json,
    url_decode,
)

__all__ = [
    "BackoffSettings",
    "ChannelRow",
    "ChannelTable",
    "ChannelTableParser",
    "EVENT_BODY_TAG",
    "Event",
    "EventFrameParser",
    "EventSocketLogger",
    "FibonacciBackoff",
    "FilteredEventParser",
    "FrameParserBase",
    "NopLogger",
    "StdlibLogger",
    "event_headers_to_map",
    "event_to_map",
    "generate_uuid",
    "header_value",
    "map_channel_data",
    "parse_header_line",
    "split_ignore_groups",
    "to_json",
    "url_decode",
]
