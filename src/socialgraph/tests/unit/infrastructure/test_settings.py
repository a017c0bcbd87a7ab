"""Unit tests for gateway settings."""

import pytest
from pydantic import ValidationError

from infrastructure.settings import GatewaySettings, get_settings


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in (
        "SOCIALGRAPH_PROFILE_URL_TEMPLATE",
        "SOCIALGRAPH_INFO_URL_TEMPLATE",
        "SOCIALGRAPH_EVENTS_ENABLED",
        "SOCIALGRAPH_EVENTS_LOGGING",
        "SOCIALGRAPH_REMOTE_TIMEOUT_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestGatewaySettings:
    """Tests for defaults and environment loading."""

    def test_optional_features_are_off_by_default(self):
        settings = GatewaySettings(_env_file=None)

        assert settings.profile_url_template is None
        assert settings.info_url_template is None
        assert settings.events_enabled is False
        assert settings.events_logging is False
        assert settings.remote_timeout_seconds == 30.0

    def test_loads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("SOCIALGRAPH_PROFILE_URL_TEMPLATE", "https://x/${ID}")
        monkeypatch.setenv("SOCIALGRAPH_EVENTS_ENABLED", "true")
        monkeypatch.setenv("SOCIALGRAPH_REMOTE_TIMEOUT_SECONDS", "2.5")

        settings = GatewaySettings(_env_file=None)

        assert settings.profile_url_template == "https://x/${ID}"
        assert settings.events_enabled is True
        assert settings.remote_timeout_seconds == 2.5

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            GatewaySettings(_env_file=None, remote_timeout_seconds=0)

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
