"""Tests for ssr.report module."""

from __future__ import annotations

from ssr.models import Share, ShareSet
from ssr.recovery import recover
from ssr.report import format_case, format_points, format_summary


class TestReport:
    def test_points(self, sample_share_set: ShareSet):
        result = recover(sample_share_set)
        assert format_points(result) == "(1,4), (2,7), (3,12)"

    def test_case(self, sample_share_set: ShareSet):
        lines = format_case(recover(sample_share_set))
        assert "TESTCASE1" in lines
        assert "Polynomial degree: 2" in lines
        assert "Point 2: x = 2, y = 7" in lines
        assert '  (Original: base 2, value "111")' in lines
        assert "SECRET (Constant term c): 3" in lines

    def test_single_summary(self, sample_share_set: ShareSet):
        lines = format_summary([recover(sample_share_set)])
        assert "RESULT" in lines
        assert "testcase1 Secret: 3" in lines

    def test_multi_summary(self, sample_share_set: ShareSet):
        result = recover(sample_share_set)
        assert "SUMMARY OF RESULTS" in format_summary([result, result])

    def test_values_beyond_str_digit_limit(self):
        share_set = ShareSet(n=1, k=1, shares=[Share(1, 10, "7" * 4500)], name="long")
        lines = format_case(recover(share_set))
        assert f"Point 1: x = 1, y = {'7' * 4500}" in lines
        assert f"SECRET (Constant term c): {'7' * 4500}" in lines
        assert f"long Secret: {'7' * 4500}" in format_summary([recover(share_set)])
