"""
Tests for Range header parsing and file responses.
"""

import pytest

from utils.http_range import InvalidRangeError, media_type_for, parse_range_header


class TestParseRangeHeader:

    @pytest.mark.parametrize("header,expected", [
        ("bytes=0-99", (0, 99)),
        ("bytes=100-", (100, 999)),
        ("bytes=900-5000", (900, 999)),
        ("bytes=-100", (900, 999)),
        ("bytes=-5000", (0, 999)),
        ("bytes=999-999", (999, 999)),
    ])
    def test_valid_ranges(self, header, expected):
        assert parse_range_header(header, 1000) == expected

    @pytest.mark.parametrize("header", [
        "bytes=1000-",
        "bytes=500-100",
        "bytes=0-1,5-10",
        "items=0-10",
        "bytes=abc-",
        "bytes=-0",
        "bytes=-",
        "bytes 0-10",
    ])
    def test_invalid_ranges(self, header):
        with pytest.raises(InvalidRangeError):
            parse_range_header(header, 1000)

    def test_empty_file(self):
        with pytest.raises(InvalidRangeError):
            parse_range_header("bytes=0-", 0)


class TestMediaType:

    def test_known_extensions(self):
        assert media_type_for("album1.JPG") == "image/jpeg"
        assert media_type_for("cover.png") == "image/png"
        assert media_type_for("x_track.mp3") == "audio/mpeg"

    def test_unknown_extension(self):
        assert media_type_for("notes.txt") == "application/octet-stream"
