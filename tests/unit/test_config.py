"""Tests for Settings."""

from pydantic import ValidationError
import pytest

from serp_interactions.config import Settings


class TestSettings:
    def test_loads_from_environment(self, settings):
        assert settings.backend_url == "http://backend.test"
        assert settings.http_timeout == 5
        assert settings.autocomplete_delay_ms == 0
        assert settings.log_json is True

    def test_defaults_without_environment(self, monkeypatch):
        for key in ["BACKEND_URL", "HTTP_TIMEOUT", "AUTOCOMPLETE_DELAY_MS", "LOG_JSON"]:
            monkeypatch.delenv(key, raising=False)

        settings = Settings(_env_file=None)

        assert settings.backend_url == "http://127.0.0.1:8000"
        assert settings.http_timeout == 10
        assert settings.autocomplete_delay_ms == 75

    def test_endpoint_urls(self, monkeypatch):
        monkeypatch.setenv("BACKEND_URL", "https://search.example.com/")

        settings = Settings(_env_file=None)

        assert settings.vote_url() == "https://search.example.com/vote"
        assert settings.autocomplete_url() == "https://search.example.com/autocomplete"

    def test_paths_need_leading_slash(self, monkeypatch):
        monkeypatch.setenv("VOTE_PATH", "vote")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    @pytest.mark.parametrize(("key", "value"), [("HTTP_TIMEOUT", "0"), ("SERVER_PORT", "70000"), ("EMPHASIS_TAG", "<b>")])
    def test_rejects_out_of_range_values(self, monkeypatch, key, value):
        monkeypatch.setenv(key, value)
        with pytest.raises(ValidationError):
            Settings(_env_file=None)
