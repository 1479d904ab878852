"""Tests for API enums and constants."""

from intervals_icu.types import STREAM_TYPES, EventCategory, StreamFormat


class TestEnums:
    def test_event_category_values(self):
        assert EventCategory.WORKOUT == "WORKOUT"
        assert EventCategory.RACE_A == "RACE_A"
        assert EventCategory.NOTE == "NOTE"

    def test_stream_format_from_string(self):
        assert StreamFormat("csv") is StreamFormat.CSV
        assert StreamFormat("json") is StreamFormat.JSON


class TestStreamTypes:
    def test_common_types_present(self):
        for name in ("watts", "heartrate", "cadence", "latlng", "time"):
            assert name in STREAM_TYPES

    def test_no_duplicates(self):
        assert len(STREAM_TYPES) == len(set(STREAM_TYPES))
