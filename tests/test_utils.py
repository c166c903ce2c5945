"""Tests for decoding, splitting and header lookup helpers."""

import re

from event_socket import (
    generate_uuid,
    header_value,
    parse_header_line,
    split_ignore_groups,
    to_json,
    url_decode,
)
from event_socket import utils

UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$"
)


def test_split_ignore_groups_keeps_bracketed_commas():
    assert split_ignore_groups("a,[b,c],d", ",") == ["a", "[b,c]", "d"]


def test_split_ignore_groups_nested_groups():
    parts = split_ignore_groups("x,{a,(b,c)},[d,e]", ",")
    assert parts == ["x", "{a,(b,c)}", "[d,e]"]


def test_split_ignore_groups_empty_input():
    assert split_ignore_groups("", ",") == []


def test_split_ignore_groups_empty_separator():
    assert split_ignore_groups("a,b", "") == ["a,b"]


def test_split_ignore_groups_no_separator_present():
    assert split_ignore_groups("abc", ",") == ["abc"]


def test_split_ignore_groups_trailing_segment():
    assert split_ignore_groups("a,", ",") == ["a", ""]
    assert split_ignore_groups(",", ",") == ["", ""]


def test_split_ignore_groups_ignores_unmatched_closer():
    assert split_ignore_groups("a],b", ",") == ["a]", "b"]
    assert split_ignore_groups("a)},b,c", ",") == ["a)}", "b", "c"]


def test_split_ignore_groups_tracks_kinds_independently():
    # "]" closes the square bracket while the parenthesis stays open
    assert split_ignore_groups("[a,(b],c),d", ",") == ["[a,(b],c)", "d"]


def test_split_ignore_groups_unclosed_group_swallows_rest():
    assert split_ignore_groups("a,{b,c", ",") == ["a", "{b,c"]


def test_split_ignore_groups_uses_first_separator_char():
    assert split_ignore_groups("a;b;c", ";|") == ["a", "b", "c"]


def test_url_decode_percent_and_plus():
    assert url_decode("hello%20world") == "hello world"
    assert url_decode("a+b") == "a b"
    assert url_decode("2024-01-01%2010%3A00%3A00") == "2024-01-01 10:00:00"


def test_url_decode_plain_value_unchanged():
    assert url_decode("CHANNEL_ANSWER") == "CHANNEL_ANSWER"
    assert url_decode("") == ""


def test_url_decode_utf8():
    assert url_decode("caf%C3%A9") == "café"


def test_url_decode_malformed_returns_original():
    assert url_decode("100%") == "100%"
    assert url_decode("%zz") == "%zz"
    assert url_decode("a%2") == "a%2"


def test_url_decode_invalid_utf8_returns_original():
    assert url_decode("%ff%fe") == "%ff%fe"


def test_parse_header_line():
    assert parse_header_line("Event-Name: HEARTBEAT") == ("Event-Name", "HEARTBEAT")


def test_parse_header_line_without_separator():
    assert parse_header_line("Event-Name:HEARTBEAT") is None
    assert parse_header_line("just text") is None
    assert parse_header_line("") is None


def test_parse_header_line_splits_once():
    assert parse_header_line("variable_x: a: b") == ("variable_x", "a: b")


def test_parse_header_line_trims_and_decodes():
    assert parse_header_line("Caller-Caller-ID-Name: Jane%20Doe \r") == (
        "Caller-Caller-ID-Name",
        "Jane Doe",
    )
    assert parse_header_line("Empty: ") == ("Empty", "")


def test_header_value():
    block = "Content-Type: command/reply\nReply-Text: OK accepted\n"
    assert header_value(block, "Reply-Text") == "OK accepted"
    assert header_value(block, "Content-Type") == "command/reply"


def test_header_value_last_line_without_newline():
    assert header_value("A: 1\nB: 2", "B") == "2"


def test_header_value_missing():
    assert header_value("A: 1\nB: 2", "Missing") == ""
    assert header_value("", "A") == ""


def test_header_value_without_separator():
    assert header_value("Name-only\nOther: x", "Name") == ""


def test_header_value_decodes():
    assert header_value("Caller: Jane%20Doe\n", "Caller") == "Jane Doe"


def test_header_value_matches_substring_of_longer_header():
    """The lookup is not line-anchored: a longer header that contains the name wins if it comes first."""
    block = "Event-Name-Sub: first\nEvent-Name: second\n"
    assert header_value(block, "Event-Name") == "first"


def test_generate_uuid_format():
    value = generate_uuid()
    assert len(value) == 36
    assert UUID_PATTERN.match(value)


def test_generate_uuid_is_random():
    assert generate_uuid() != generate_uuid()


def test_generate_uuid_random_source_failure(monkeypatch):
    def broken(n):
        raise OSError("no entropy")

    monkeypatch.setattr(utils.secrets, "token_bytes", broken)
    assert generate_uuid() == "00000000-0000-4000-8000-000000000000"


def test_to_json():
    assert to_json({"a": 1}) == '{"a":1}'
    assert to_json(["x", "y"]) == '["x","y"]'


def test_to_json_unserializable():
    assert to_json(object()) == ""


def test_parse_header_line_strips_line_endings():
    assert parse_header_line("Event-Name: HEARTBEAT\r\n") == ("Event-Name", "HEARTBEAT")
    assert parse_header_line("Event-Name: \tHEARTBEAT\n") == ("Event-Name", "HEARTBEAT")
