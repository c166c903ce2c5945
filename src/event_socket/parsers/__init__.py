"""
Frame parsers: decode raw event socket text into dicts and lists.

Use EventFrameParser for full events (headers plus optional body),
FilteredEventParser for header-only views that drop selected headers,
ChannelTableParser for comma-separated channel listings, or implement
FrameParserBase for other payloads.
"""

from .base import FrameParserBase
from .channel_parser import ChannelTableParser, map_channel_data
from .event_parser import EventFrameParser, event_to_map
from .filtered_parser import FilteredEventParser, event_headers_to_map

__all__ = [
    "ChannelTableParser",
    "EventFrameParser",
    "FilteredEventParser",
    "FrameParserBase",
    "event_headers_to_map",
    "event_to_map",
    "map_channel_data",
]
