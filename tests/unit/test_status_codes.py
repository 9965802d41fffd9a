"""
Unit tests for the status code table.
"""

import pytest

from httpmessage.http.status_codes import (
    HTTPStatus,
    STATUS_CODES,
    is_valid,
    is_valid_status,
    parse_status_code,
)


def _table_codes() -> set:
    codes = set()
    for entry in STATUS_CODES:
        if isinstance(entry, range):
            codes.update(entry)
        else:
            codes.add(entry)
    return codes


class TestIsValid:
    """Tests for the numeric is_valid() predicate."""

    def test_range_boundaries(self):
        """Test the edges of the 2xx and 5xx ranges."""
        assert is_valid(208) is True
        assert is_valid(209) is False
        assert is_valid(599) is True
        assert is_valid(600) is False

    @pytest.mark.parametrize("code", [100, 102, 200, 226, 305, 307, 308, 418, 421,
                                      426, 429, 431, 444, 451, 499, 500, 508, 511])
    def test_recognized_codes(self, code: int):
        """Test codes from the single entries and the ranges."""
        assert is_valid(code) is True

    @pytest.mark.parametrize("code", [0, 99, 103, 209, 225, 306, 309, 419, 420,
                                      425, 427, 430, 450, 498, 509, 512, 598])
    def test_unrecognized_codes(self, code: int):
        """Test gaps between the table entries."""
        assert is_valid(code) is False


class TestParseStatusCode:
    """Tests for validating textual status tokens."""

    def test_code_with_reason_phrase(self):
        """Test that a reason phrase after the code is ignored."""
        assert parse_status_code("200 OK") == 200
        assert parse_status_code("404 NOT FOUND") == 404

    def test_bare_code(self):
        """Test a status token with no reason phrase."""
        assert parse_status_code("200") == 200
        assert is_valid_status("200") is True

    def test_non_numeric(self):
        """Test that words are rejected."""
        assert parse_status_code("an invalid status") is None
        assert is_valid_status("an invalid status") is False

    def test_trailing_characters(self):
        """Test that characters glued to the number are rejected."""
        assert parse_status_code("200OK") is None
        assert parse_status_code("20.0") is None

    def test_signs_and_whitespace(self):
        """Test that only plain ASCII digits are accepted."""
        assert parse_status_code("+200") is None
        assert parse_status_code(" 200") is None
        assert parse_status_code("2_00") is None

    def test_out_of_table(self):
        """Test well-formed numbers that aren't recognized."""
        assert parse_status_code("600 Weird") is None
        assert parse_status_code("209") is None

    def test_empty(self):
        """Test an empty token."""
        assert parse_status_code("") is None


class TestHTTPStatus:
    """Tests for the HTTPStatus enum."""

    def test_members_match_table(self):
        """Test that the enum and the table describe the same codes."""
        assert {int(status) for status in HTTPStatus} == _table_codes()

    def test_every_member_has_phrase(self):
        """Test that no member falls back to "Unknown"."""
        for status in HTTPStatus:
            assert status.phrase != "Unknown"

    def test_phrase(self):
        """Test reason phrase lookup."""
        assert HTTPStatus.OK.phrase == "OK"
        assert HTTPStatus(404).phrase == "Not Found"
        assert HTTPStatus(499).phrase == "Client Closed Request"

    def test_int_comparison(self):
        """Test that members behave as integers."""
        assert HTTPStatus.OK == 200
        assert HTTPStatus.NOT_FOUND == 404

    def test_categories(self):
        """Test category predicates."""
        assert HTTPStatus.CONTINUE.is_informational
        assert HTTPStatus.OK.is_success
        assert HTTPStatus.FOUND.is_redirect
        assert HTTPStatus.NOT_FOUND.is_client_error
        assert HTTPStatus.BAD_GATEWAY.is_server_error
        assert not HTTPStatus.OK.is_client_error
