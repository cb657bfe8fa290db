"""Tests for WPM calculation."""

import pytest
from wordrush.metrics import wpm


class TestWpm:
    """Tests for wpm()."""

    def test_one_minute(self):
        """30 words in 60 seconds = 30 WPM."""
        assert wpm(30, 0, 60000) == pytest.approx(30.0)

    def test_half_minute(self):
        assert wpm(10, 0, 30000) == pytest.approx(20.0)

    def test_offset_start(self):
        assert wpm(5, 10000, 70000) == pytest.approx(5.0)

    def test_zero_elapsed(self):
        """No division by zero at the start of a session."""
        assert wpm(0, 1000, 1000) == 0.0
        assert wpm(3, 1000, 1000) == 0.0

    def test_negative_elapsed(self):
        assert wpm(3, 1000, 500) == 0.0

    def test_zero_words(self):
        assert wpm(0, 0, 60000) == 0.0

    def test_not_rounded(self):
        """1 word after 5001 ms."""
        assert wpm(1, 0, 5001) == pytest.approx(60000 / 5001)
        assert wpm(1, 0, 5001) != 12.0

    def test_decays_without_new_words(self):
        """WPM falls as time passes with no typing."""
        assert wpm(10, 0, 120000) < wpm(10, 0, 60000)
