"""Tests for client settings."""

import pytest

from helpdesk_client.client import HelpdeskClient
from helpdesk_client.config import ClientSettings
from helpdesk_client.http import TokenAuthProvider


class TestClientSettings:
    """Tests for ClientSettings."""

    def test_defaults(self):
        settings = ClientSettings(base_url="https://example.zendesk.com")
        assert settings.timeout == 30.0
        assert settings.format == "json"
        assert settings.headers == {}
        assert settings.token is None

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("HELPDESK_URL", "https://example.zendesk.com")
        monkeypatch.setenv("HELPDESK_EMAIL", "agent@example.com")
        monkeypatch.setenv("HELPDESK_TOKEN", "abc123")
        monkeypatch.setenv("HELPDESK_TIMEOUT", "5")
        monkeypatch.delenv("HELPDESK_PASSWORD", raising=False)

        settings = ClientSettings.from_env()

        assert settings.base_url == "https://example.zendesk.com"
        assert settings.email == "agent@example.com"
        assert settings.token == "abc123"
        assert settings.password is None
        assert settings.timeout == 5.0

    def test_from_env_custom_prefix(self, monkeypatch):
        monkeypatch.setenv("SUPPORT_URL", "https://support.example.com")
        settings = ClientSettings.from_env(prefix="SUPPORT_")
        assert settings.base_url == "https://support.example.com"

    def test_from_env_requires_url(self, monkeypatch):
        monkeypatch.delenv("HELPDESK_URL", raising=False)
        with pytest.raises(ValueError, match="HELPDESK_URL"):
            ClientSettings.from_env()

    def test_client_from_settings(self):
        settings = ClientSettings(
            base_url="https://example.zendesk.com/",
            email="agent@example.com",
            token="abc123",
            timeout=12.0,
        )

        client = HelpdeskClient.from_settings(settings)

        assert client.base_url == "https://example.zendesk.com"
        assert client.http.timeout == 12.0
        assert isinstance(client.http.auth_provider, TokenAuthProvider)
        assert client.is_authenticated
