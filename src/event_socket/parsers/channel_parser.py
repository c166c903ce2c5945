"""Parser for comma-separated channel listings ("show channels" style output)."""

from typing import Optional

from ..interfaces import ChannelTable, EventSocketLogger
from ..utils import split_ignore_groups, to_json
from .base import FrameParserBase

# Blank line, "N total." and the final empty line after it
TRAILER_LINES = 3
MIN_LINES = 6


class ChannelTableParser(FrameParserBase):
    """
    Parses a listing of the form:

        uuid,direction,created,name,...
        <row>
        <row>

        2 total.

    into one dict per data row, keyed by the header row's column names.
    Cells may contain commas inside [], {} or () groups. Rows whose field
    count differs from the header are skipped.
    """

    def parse(self) -> ChannelTable:
        rows: ChannelTable = []
        lines = self.raw.split("\n")
        if len(lines) < MIN_LINES:
            return rows
        headers = lines[0].split(",")
        for line in lines[1 : len(lines) - TRAILER_LINES]:
            fields = split_ignore_groups(line, ",")
            if len(fields) != len(headers):
                self.logger.debug(
                    f"Skipping channel row with {len(fields)} fields, "
                    f"expected {len(headers)}: {to_json(fields)}"
                )
                continue
            rows.append(dict(zip(headers, fields)))
        return rows


def map_channel_data(block: str, logger: Optional[EventSocketLogger] = None) -> ChannelTable:
    """Shortcut for ChannelTableParser(block).parse()."""
    return ChannelTableParser(block, logger=logger).parse()
