"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from flouss_config import Settings, get_settings


class TestSettings:
    def test_defaults(self):
        settings = Settings()

        assert settings.app_name == "Flouss"
        assert settings.default_language == "tn"
        assert settings.default_currency == "TND"
        assert settings.donut_gap_degrees == 3.0
        assert settings.analytics_top_categories == 6
        assert settings.supabase_anon_key is None

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_LANGUAGE", "fr")
        monkeypatch.setenv("DONUT_GAP_DEGREES", "2.5")
        monkeypatch.setenv("SUPABASE_ANON_KEY", "anon-key")

        settings = Settings()

        assert settings.default_language == "fr"
        assert settings.donut_gap_degrees == 2.5
        assert settings.supabase_anon_key.get_secret_value() == "anon-key"

    def test_unsupported_language_rejected(self):
        with pytest.raises(ValidationError):
            Settings(default_language="de")

    def test_analytics_counts_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings(analytics_lookback_months=0)

    def test_cors_origins_parsed(self):
        settings = Settings(api_cors_origins="http://a.test, http://b.test,")

        assert settings.cors_origins == ["http://a.test", "http://b.test"]

    def test_cors_origins_from_list(self):
        settings = Settings(api_cors_origins=["http://a.test", "http://b.test"])

        assert settings.api_cors_origins == "http://a.test,http://b.test"

    def test_supabase_rest_url(self):
        settings = Settings(supabase_url="https://project.supabase.co/")

        assert settings.supabase_rest_url == "https://project.supabase.co/rest/v1"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
