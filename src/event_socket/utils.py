"""Low-level helpers shared by the frame parsers: decoding, splitting and header lookup."""

import json
import re
import secrets
import uuid
from typing import Any, List, Optional, Tuple
from urllib.parse import unquote_plus

HEADER_SEPARATOR = ": "

# A "%" that does not start a two-digit hex escape
_MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")

_GROUPS = {"[": "]", "{": "}", "(": ")"}
_CLOSERS = {closer: opener for opener, closer in _GROUPS.items()}


def url_decode(value: str) -> str:
    """
    Decode a query-escaped header value ("+" and "%XX").

    Event socket header values arrive URL-encoded. If the value is not a
    well-formed escape sequence the original string is returned unchanged.
    """
    if _MALFORMED_ESCAPE.search(value):
        return value
    try:
        return unquote_plus(value, errors="strict")
    except UnicodeDecodeError:
        return value


def _clean_value(value: str) -> str:
    return value.strip()


def parse_header_line(line: str) -> Optional[Tuple[str, str]]:
    """Split "Name: value" into (name, decoded value); None if there is no ": "."""
    key, sep, value = line.partition(HEADER_SEPARATOR)
    if not sep:
        return None
    return key, url_decode(_clean_value(value))


def header_value(headers: str, header: str) -> str:
    """
    Return the value of `header` found anywhere in `headers`, or "".

    The match is a plain substring search, not anchored to the start of a
    line, so a name contained in an earlier header name or value matches there.
    """
    start = headers.find(header)
    if start == -1:
        return ""
    end = headers.find("\n", start)
    if end == -1:
        end = len(headers)
    pair = parse_header_line(headers[start:end])
    if pair is None:
        return ""
    return pair[1]


def split_ignore_groups(s: str, sep: str) -> List[str]:
    """
    Split `s` on the first character of `sep`, ignoring separators that sit
    inside [], {} or () groups. Unbalanced closers are ignored.
    """
    if s == "":
        return []
    if sep == "":
        return [s]
    sep_char = sep[0]
    depth = {opener: 0 for opener in _GROUPS}
    parts: List[str] = []
    start = 0
    for i, ch in enumerate(s):
        if ch == sep_char and not any(depth.values()):
            parts.append(s[start:i])
            start = i + 1
        elif ch in depth:
            depth[ch] += 1
        elif ch in _CLOSERS and depth[_CLOSERS[ch]] > 0:
            depth[_CLOSERS[ch]] -= 1
    parts.append(s[start:])
    return parts


def generate_uuid() -> str:
    """Random (version 4) UUID string, e.g. for job or event identifiers."""
    try:
        raw = secrets.token_bytes(16)
    except (OSError, NotImplementedError):
        # No entropy source; still hand back a well-formed identifier
        raw = bytes(16)
    return str(uuid.UUID(bytes=raw, version=4))


def to_json(value: Any) -> str:
    """Compact JSON for diagnostics; "" if the value is not serializable."""
    try:
        return json.dumps(value, separators=(",", ":"))
    except (TypeError, ValueError):
        return ""
