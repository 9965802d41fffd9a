"""
Unit tests for CLI configuration.
"""

import pytest

from httpmessage.config import ParserConfig


class TestParserConfig:
    """Tests for ParserConfig."""

    def test_defaults(self):
        """Test default values."""
        config = ParserConfig()

        assert config.output_format == "json"
        assert config.normalize_newlines is False
        assert config.json_indent == 2
        assert config.log_level == "WARNING"
        config.validate()

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch):
        """Test reading HTTPMESSAGE_* variables."""
        monkeypatch.setenv("HTTPMESSAGE_FORMAT", "TEXT")
        monkeypatch.setenv("HTTPMESSAGE_CRLF", "yes")
        monkeypatch.setenv("HTTPMESSAGE_INDENT", "0")
        monkeypatch.setenv("HTTPMESSAGE_LOG_LEVEL", "debug")

        config = ParserConfig.from_env()

        assert config.output_format == "text"
        assert config.normalize_newlines is True
        assert config.json_indent == 0
        assert config.log_level == "DEBUG"

    def test_from_env_defaults(self, monkeypatch: pytest.MonkeyPatch):
        """Test that unset variables fall back to defaults."""
        for name in ("HTTPMESSAGE_FORMAT", "HTTPMESSAGE_CRLF",
                     "HTTPMESSAGE_INDENT", "HTTPMESSAGE_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        assert ParserConfig.from_env() == ParserConfig()

    def test_from_env_bad_flag(self, monkeypatch: pytest.MonkeyPatch):
        """Test that a non-boolean flag is rejected."""
        monkeypatch.setenv("HTTPMESSAGE_CRLF", "maybe")

        with pytest.raises(ValueError):
            ParserConfig.from_env()

    def test_from_env_bad_indent(self, monkeypatch: pytest.MonkeyPatch):
        """Test that a non-integer indent is rejected."""
        monkeypatch.setenv("HTTPMESSAGE_INDENT", "wide")

        with pytest.raises(ValueError):
            ParserConfig.from_env()

    @pytest.mark.parametrize("kwargs", [
        {"output_format": "xml"},
        {"json_indent": -1},
        {"log_level": "CHATTY"},
    ])
    def test_validate_rejects(self, kwargs: dict):
        """Test validation of out-of-range settings."""
        with pytest.raises(ValueError):
            ParserConfig(**kwargs).validate()
