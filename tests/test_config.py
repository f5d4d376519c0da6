"""Tests for vcardgen.config -- CardConfig defaults and env overrides."""

from __future__ import annotations

import pytest

from vcardgen.config import CardConfig, parse_format
from vcardgen.embed import DEFAULT_SUMMARY, DEFAULT_TIMEZONE
from vcardgen.types import OutputFormat


class TestDefaults:
    def test_defaults(self):
        config = CardConfig()
        assert config.format is OutputFormat.VCARD
        assert config.charset == "utf-8"
        assert config.filename == "vcard"
        assert config.timezone == DEFAULT_TIMEZONE
        assert config.summary == DEFAULT_SUMMARY

    def test_empty_filename_falls_back(self):
        assert CardConfig(filename="").filename == "vcard"


class TestEnvOverrides:
    def test_env_vars_applied(self, monkeypatch):
        monkeypatch.setenv("VCARDGEN_FORMAT", "vcalendar")
        monkeypatch.setenv("VCARDGEN_CHARSET", "iso-8859-1")
        monkeypatch.setenv("VCARDGEN_FILENAME", "contact")
        monkeypatch.setenv("VCARDGEN_TIMEZONE", "UTC")
        monkeypatch.setenv("VCARDGEN_SUMMARY", "Save me")
        config = CardConfig()
        assert config.format is OutputFormat.VCALENDAR
        assert config.charset == "iso-8859-1"
        assert config.filename == "contact"
        assert config.timezone == "UTC"
        assert config.summary == "Save me"

    def test_constructor_beats_env(self, monkeypatch):
        monkeypatch.setenv("VCARDGEN_FORMAT", "vcalendar")
        monkeypatch.setenv("VCARDGEN_FILENAME", "contact")
        config = CardConfig(format="vcard", filename="john")
        assert config.format is OutputFormat.VCARD
        assert config.filename == "john"

    def test_invalid_env_format(self, monkeypatch):
        monkeypatch.setenv("VCARDGEN_FORMAT", "pdf")
        with pytest.raises(ValueError, match="Invalid format 'pdf'"):
            CardConfig()


class TestParseFormat:
    def test_enum_passthrough(self):
        assert parse_format(OutputFormat.VCALENDAR) is OutputFormat.VCALENDAR

    def test_case_insensitive(self):
        assert parse_format(" VCalendar ") is OutputFormat.VCALENDAR

    def test_invalid(self):
        with pytest.raises(ValueError, match="Must be one of"):
            parse_format("csv")
