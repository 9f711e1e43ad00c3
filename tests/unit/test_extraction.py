"""
Unit tests for the extraction primitives.
"""

import logging

import pytest

from argmatch.extraction import (
    find_flag,
    find_parameter,
    find_parameter_each,
    find_parameters,
    is_flag,
    is_number,
)


class TestIsFlag:
    """Tests for is_number() and is_flag()."""

    def test_numbers(self):
        """Test that signed and decimal numbers are recognized."""
        for token in ["3", "-3", "+4", "-1.5", "1e3", "-2E-2"]:
            assert is_number(token) is True

    def test_not_numbers(self):
        """Test that non-numeric tokens are rejected."""
        for token in ["-s", "abc", "", "--help", "1.2.3"]:
            assert is_number(token) is False

    def test_flag_looking_tokens(self):
        """Test that marker-prefixed tokens are flags."""
        assert is_flag("-s") is True
        assert is_flag("--help") is True
        assert is_flag("-?") is True
        assert is_flag("-") is True

    def test_negative_number_is_not_a_flag(self):
        """Test that negative numbers are values, not flags."""
        assert is_flag("-3") is False
        assert is_flag("-0.25") is False

    def test_plain_token_is_not_a_flag(self):
        """Test that tokens without the marker are not flags."""
        assert is_flag("left.csv") is False


class TestFindFlag:
    """Tests for find_flag()."""

    def test_absent_flag_leaves_tokens_unchanged(self):
        """Test that an absent flag returns False and changes nothing."""
        tokens = ["a", "-x", "b"]
        assert find_flag("-t", tokens) is False
        assert tokens == ["a", "-x", "b"]

    def test_removes_every_occurrence(self):
        """Test that all exact matches are removed."""
        tokens = ["-t", "a", "-t", "b"]
        assert find_flag("-t", tokens) is True
        assert tokens == ["a", "b"]

    def test_exact_match_only(self):
        """Test that prefixes and longer flags are not matched."""
        tokens = ["-tt", "--t"]
        assert find_flag("-t", tokens) is False
        assert tokens == ["-tt", "--t"]

    def test_action_called_once(self):
        """Test that the callback runs once even for repeated flags."""
        calls = []
        tokens = ["-t", "-t", "-t"]
        assert find_flag("-t", tokens, lambda: calls.append(1)) is True
        assert calls == [1]
        assert tokens == []

    def test_action_not_called_when_absent(self):
        """Test that the callback does not run for an absent flag."""
        calls = []
        find_flag("-t", ["a"], lambda: calls.append(1))
        assert calls == []


class TestFindParameter:
    """Tests for find_parameter() and find_parameter_each()."""

    def test_extracts_value(self):
        """Test that the flag and its value are removed."""
        tokens = ["-s", "3"]
        assert find_parameter("-s", tokens) == (True, "3")
        assert tokens == []

    def test_flag_followed_by_flag(self):
        """Test that a flag-looking value is not consumed."""
        tokens = ["-s", "-t"]
        assert find_parameter("-s", tokens) == (False, None)
        assert tokens == ["-s", "-t"]

    def test_flag_at_end(self):
        """Test that a flag without a following token is left in place."""
        tokens = ["a", "-s"]
        assert find_parameter("-s", tokens) == (False, None)
        assert tokens == ["a", "-s"]

    def test_negative_number_value(self):
        """Test that a negative number is accepted as a value."""
        tokens = ["-s", "-3", "x"]
        assert find_parameter("-s", tokens) == (True, "-3")
        assert tokens == ["x"]

    def test_skips_unusable_occurrence(self):
        """Test that scanning continues past an occurrence followed by a flag."""
        tokens = ["-s", "-t", "-s", "5", "rest"]
        assert find_parameter("-s", tokens) == (True, "5")
        assert tokens == ["-s", "-t", "rest"]

    def test_first_usable_occurrence_only(self):
        """Test that only one pair is removed per call."""
        tokens = ["-s", "1", "-s", "2"]
        assert find_parameter("-s", tokens) == (True, "1")
        assert tokens == ["-s", "2"]

    def test_each_collects_all_values(self):
        """Test that the repeating variant extracts every occurrence in order."""
        values = []
        tokens = ["-s", "1", "a", "-s", "2", "-s"]
        assert find_parameter_each("-s", tokens, values.append) is True
        assert values == ["1", "2"]
        assert tokens == ["a", "-s"]

    def test_each_returns_false_without_match(self):
        """Test that the repeating variant reports no extraction."""
        values = []
        tokens = ["-s", "-t"]
        assert find_parameter_each("-s", tokens, values.append) is False
        assert values == []
        assert tokens == ["-s", "-t"]


class TestFindParameters:
    """Tests for find_parameters()."""

    def test_extracts_required_values(self):
        """Test a complete occurrence."""
        tokens = ["-k", "a", "b", "rest"]
        assert find_parameters("-k", 2, tokens) == ["a", "b"]
        assert tokens == ["rest"]

    def test_partial_occurrence_is_consumed(self):
        """Test that an incomplete occurrence returns None but is still removed."""
        tokens = ["-k", "a"]
        assert find_parameters("-k", 2, tokens) is None
        assert tokens == []

    def test_flag_cuts_occurrence_short(self):
        """Test that a flag-looking token stops the occurrence and is kept."""
        tokens = ["-k", "a", "-t", "b"]
        assert find_parameters("-k", 2, tokens) is None
        assert tokens == ["-t", "b"]

    def test_absent_flag(self):
        """Test that an absent flag returns None and changes nothing."""
        tokens = ["a", "b"]
        assert find_parameters("-k", 1, tokens) is None
        assert tokens == ["a", "b"]

    def test_zero_required(self):
        """Test that zero required values behaves like a flag."""
        tokens = ["x", "-k", "y"]
        assert find_parameters("-k", 0, tokens) == []
        assert tokens == ["x", "y"]

    def test_last_occurrence_wins(self):
        """Test that only the last occurrence's values are returned."""
        tokens = ["-k", "a", "b", "mid", "-k", "c", "d"]
        assert find_parameters("-k", 2, tokens) == ["c", "d"]
        assert tokens == ["mid"]

    def test_failed_last_occurrence_discards_earlier_success(self):
        """Test that an incomplete last occurrence yields None."""
        tokens = ["-k", "a", "b", "-k", "c"]
        assert find_parameters("-k", 2, tokens) is None
        assert tokens == []

    def test_adjacent_occurrences(self):
        """Test that an occurrence right after a removed span is found."""
        tokens = ["-k", "a", "-k", "b"]
        assert find_parameters("-k", 1, tokens) == ["b"]
        assert tokens == []

    def test_repeated_flag_logs_warning(self, caplog):
        """Test that multiple occurrences are reported in the log."""
        with caplog.at_level(logging.WARNING, logger="argmatch.extraction"):
            find_parameters("-k", 1, ["-k", "a", "-k", "b"])
        assert "only the last occurrence is used" in caplog.text

    def test_negative_required_count(self):
        """Test that a negative count is rejected."""
        with pytest.raises(ValueError, match="non-negative"):
            find_parameters("-k", -1, ["-k"])
