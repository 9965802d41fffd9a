"""
Unit tests for the bounded split tokenizer.
"""

import pytest

from httpmessage.http.tokenizer import split_bounded


class TestSplitBounded:
    """Tests for split_bounded()."""

    def test_exact_number_of_parts(self):
        """Test splitting when the delimiter count matches."""
        assert split_bounded("GET /users HTTP/1.1", " ", 3) == ("GET", "/users", "HTTP/1.1")

    def test_pads_missing_parts(self):
        """Test that missing trailing parts become empty strings."""
        assert split_bounded("POST /users/5", " ", 3) == ("POST", "/users/5", "")
        assert split_bounded("GET", " ", 3) == ("GET", "", "")

    def test_last_part_keeps_delimiters(self):
        """Test that only the first n-1 delimiters split."""
        assert split_bounded("HTTP/1.1 404 Not Found", " ", 2) == ("HTTP/1.1", "404 Not Found")

    def test_multi_character_delimiter(self):
        """Test splitting on the blank-line separator."""
        assert split_bounded("head\n\nbody\n\nmore", "\n\n", 2) == ("head", "body\n\nmore")

    def test_empty_text(self):
        """Test that an empty string pads to n empty parts."""
        assert split_bounded("", "\n", 2) == ("", "")

    def test_always_returns_tuple_of_n(self):
        """Test the result arity for several inputs."""
        for text in ("", "a", "a b", "a b c", "a b c d e"):
            result = split_bounded(text, " ", 3)
            assert isinstance(result, tuple)
            assert len(result) == 3

    def test_single_part(self):
        """Test that n=1 returns the text untouched."""
        assert split_bounded("a b c", " ", 1) == ("a b c",)

    def test_invalid_arity(self):
        """Test that n < 1 is rejected."""
        with pytest.raises(ValueError):
            split_bounded("a b", " ", 0)
