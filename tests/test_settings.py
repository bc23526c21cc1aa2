"""Unit tests for settings.py."""

import pytest
from pomoclock.settings import INPUT_ERROR, parse_durations


class TestParseDurations:
    """Test settings input validation."""

    def test_valid_values(self):
        """Three positive integers are accepted."""
        assert parse_durations("25", "5", "15") == (25, 5, 15)

    def test_whitespace_is_ignored(self):
        """Surrounding whitespace is stripped."""
        assert parse_durations(" 10 ", "2\n", "\t20") == (10, 2, 20)

    @pytest.mark.parametrize(
        "texts",
        [
            ("", "5", "15"),
            ("abc", "5", "15"),
            ("25", "5.5", "15"),
            ("25", "5", "0"),
            ("-1", "5", "15"),
        ],
    )
    def test_invalid_values(self, texts):
        """Non-numeric and non-positive values are rejected."""
        with pytest.raises(ValueError, match=INPUT_ERROR):
            parse_durations(*texts)
