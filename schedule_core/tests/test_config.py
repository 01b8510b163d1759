"""Tests for environment-driven configuration."""

import logging

from schedule_core.config import (
    check_required_env_vars,
    get_allowed_origins,
    get_display_zones,
    get_placeholder,
)
from schedule_core.constants import DISPLAY_ZONES


class TestGetDisplayZones:
    def test_defaults_when_unset(self, monkeypatch):
        monkeypatch.delenv("SCHEDULE_DISPLAY_ZONES", raising=False)
        assert get_display_zones() == DISPLAY_ZONES

    def test_parses_override(self, monkeypatch):
        monkeypatch.setenv(
            "SCHEDULE_DISPLAY_ZONES", "Asia/Jerusalem=Israel, Europe/Paris = Paris"
        )
        assert get_display_zones() == [
            ("Asia/Jerusalem", "Israel"),
            ("Europe/Paris", "Paris"),
        ]

    def test_label_defaults_to_zone(self, monkeypatch):
        monkeypatch.setenv("SCHEDULE_DISPLAY_ZONES", "UTC")
        assert get_display_zones() == [("UTC", "UTC")]

    def test_malformed_entries_skipped(self, monkeypatch, caplog):
        monkeypatch.setenv("SCHEDULE_DISPLAY_ZONES", "=Nowhere,,Asia/Seoul=Seoul")

        with caplog.at_level(logging.WARNING, logger="schedule_core.config"):
            zones = get_display_zones()

        assert zones == [("Asia/Seoul", "Seoul")]
        assert "=Nowhere" in caplog.text

    def test_falls_back_when_nothing_usable(self, monkeypatch):
        monkeypatch.setenv("SCHEDULE_DISPLAY_ZONES", "=a,=b")
        assert get_display_zones() == DISPLAY_ZONES


class TestMiscConfig:
    def test_placeholder_default(self, monkeypatch):
        monkeypatch.delenv("SCHEDULE_PLACEHOLDER", raising=False)
        assert get_placeholder() == "—"

    def test_frontend_url_in_allowed_origins(self, monkeypatch):
        monkeypatch.setenv("FRONTEND_URL", "https://courses.example.com")
        monkeypatch.delenv("DEV_MODE", raising=False)
        assert "https://courses.example.com" in get_allowed_origins()

    def test_missing_sentry_is_only_a_warning(self, monkeypatch):
        monkeypatch.delenv("SENTRY_DSN", raising=False)

        ok, warnings = check_required_env_vars()

        assert ok
        assert any("SENTRY_DSN" in w for w in warnings)
