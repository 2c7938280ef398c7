"""Tests for configuration handling."""

import pytest

from wordpress_oauth2_provider.config import PluginConfig, WordPressProviderConfig
from wordpress_oauth2_provider.exceptions import ConfigurationError


class TestWordPressProviderConfig:
    """Tests for WordPressProviderConfig.from_options."""

    def test_splits_local_and_forwarded_options(self):
        """Test that endpoint options stay local and the rest is forwarded."""
        config, forwarded = WordPressProviderConfig.from_options({
            "domain": "https://example.com",
            "url_authorize": "https://auth.example.com/authorize",
            "client_id": "id",
            "redirect_uri": "none",
        })

        assert config.domain == "https://example.com"
        assert config.url_authorize == "https://auth.example.com/authorize"
        assert config.url_access_token is None
        assert forwarded == {"client_id": "id", "redirect_uri": "none"}

    def test_missing_domain(self):
        """Test that a missing domain is reported by name."""
        with pytest.raises(ConfigurationError, match="Required options not defined: domain"):
            WordPressProviderConfig.from_options({"client_id": "id"})

    def test_empty_domain(self):
        """Test that an empty domain counts as missing."""
        with pytest.raises(ConfigurationError, match="domain"):
            WordPressProviderConfig.from_options({"domain": ""})

    def test_is_frozen(self):
        """Test that the configuration cannot change after construction."""
        config, _ = WordPressProviderConfig.from_options({"domain": "https://example.com"})
        with pytest.raises(AttributeError):
            config.domain = "https://other.example.com"


class TestPluginConfig:
    """Tests for PluginConfig."""

    def test_from_env(self, monkeypatch):
        """Test loading configuration from environment variables."""
        monkeypatch.setenv("WORDPRESS_OAUTH2_DOMAIN", "https://blog.example.com/")
        monkeypatch.setenv("WORDPRESS_OAUTH2_CLIENT_ID", "client")
        monkeypatch.setenv("WORDPRESS_OAUTH2_CLIENT_SECRET", "secret")
        monkeypatch.setenv("WORDPRESS_OAUTH2_BASE_URL", "https://app.example.org")
        monkeypatch.setenv("WORDPRESS_OAUTH2_SCOPE", "basic profile")
        monkeypatch.delenv("WORDPRESS_OAUTH2_REDIRECT_URI", raising=False)

        config = PluginConfig.from_env()

        assert config.domain == "https://blog.example.com"
        assert config.client_id == "client"
        assert config.redirect_uri == "https://app.example.org/auth/callback"
        assert config.scope == "basic profile"
        assert config.is_configured

    def test_defaults(self, monkeypatch):
        """Test defaults when nothing is configured."""
        for name in ("WORDPRESS_OAUTH2_DOMAIN", "WORDPRESS_OAUTH2_CLIENT_ID"):
            monkeypatch.delenv(name, raising=False)

        config = PluginConfig.from_env()

        assert config.domain == ""
        assert config.login_error_redirect == "/login?error=auth_failed"
        assert not config.is_configured

    def test_to_provider_options_skips_empty_overrides(self):
        """Test that empty overrides are left out of the provider options."""
        config = PluginConfig(
            domain="https://example.com",
            url_access_token="https://example.com/custom/token",
            client_id="id",
        )

        options = config.to_provider_options()

        assert options["domain"] == "https://example.com"
        assert options["url_access_token"] == "https://example.com/custom/token"
        assert "url_authorize" not in options
        assert "scope" not in options
