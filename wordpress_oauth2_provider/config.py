"""
Configuration management for the WordPress OAuth2 provider.

This module holds the provider's endpoint configuration, splits the options
passed to the provider into local and forwarded parts, and loads the Flask
plugin configuration from environment variables.
"""

import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

from .exceptions import ConfigurationError

AUTHORIZE_PATH = "/oauth/authorize"
ACCESS_TOKEN_PATH = "/oauth/token"
RESOURCE_OWNER_DETAILS_PATH = "/wp-json/wp/v2/users/me?context=edit"

REQUIRED_OPTIONS = ("domain",)
CONFIGURABLE_OPTIONS = REQUIRED_OPTIONS + (
    "url_authorize",
    "url_access_token",
    "url_resource_owner_details",
)


@dataclass(frozen=True)
class WordPressProviderConfig:
    """WordPress OAuth server endpoints."""

    domain: str
    url_authorize: Optional[str] = None
    url_access_token: Optional[str] = None
    url_resource_owner_details: Optional[str] = None

    @property
    def authorization_url(self) -> str:
        return self.url_authorize or self.domain + AUTHORIZE_PATH

    @property
    def access_token_url(self) -> str:
        return self.url_access_token or self.domain + ACCESS_TOKEN_PATH

    @property
    def resource_owner_details_url(self) -> str:
        return self.url_resource_owner_details or self.domain + RESOURCE_OWNER_DETAILS_PATH

    @classmethod
    def from_options(
        cls, options: Mapping[str, Any]
    ) -> Tuple["WordPressProviderConfig", Dict[str, Any]]:
        """
        Build the configuration from a provider options mapping.

        Args:
            options: Options passed to the provider

        Returns:
            Tuple of the configuration and the remaining options, which are
            meant for the OAuth2 client session

        Raises:
            ConfigurationError: If a required option is missing or empty
        """
        missing = [key for key in REQUIRED_OPTIONS if not options.get(key)]
        if missing:
            raise ConfigurationError(
                f"Required options not defined: {', '.join(missing)}"
            )

        config = cls(
            domain=options["domain"],
            url_authorize=options.get("url_authorize"),
            url_access_token=options.get("url_access_token"),
            url_resource_owner_details=options.get("url_resource_owner_details"),
        )
        forwarded = {
            key: value
            for key, value in options.items()
            if key not in CONFIGURABLE_OPTIONS
        }
        return config, forwarded


@dataclass
class PluginConfig:
    """Flask plugin configuration."""

    name: str = "wordpress"

    # WordPress site and optional endpoint overrides
    domain: str = ""
    url_authorize: str = ""
    url_access_token: str = ""
    url_resource_owner_details: str = ""

    # Client credentials
    client_id: str = ""
    client_secret: str = ""
    redirect_uri: str = ""

    # Space separated; WordPress has no default scopes
    scope: str = ""

    # Frontend redirect settings
    frontend_url: str = "/"
    login_success_redirect: str = "/"
    login_error_redirect: str = "/login?error=auth_failed"

    @property
    def is_configured(self) -> bool:
        return bool(self.domain and self.client_id)

    def to_provider_options(self) -> Dict[str, Any]:
        """Return the options mapping for WordPressProvider."""
        options: Dict[str, Any] = {
            "domain": self.domain,
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "redirect_uri": self.redirect_uri,
        }
        for key in ("url_authorize", "url_access_token", "url_resource_owner_details", "scope"):
            value = getattr(self, key)
            if value:
                options[key] = value
        return options

    @classmethod
    def from_env(cls) -> "PluginConfig":
        """Create configuration from environment variables."""
        base_url = os.environ.get("WORDPRESS_OAUTH2_BASE_URL", "http://localhost:5000")

        return cls(
            name=os.environ.get("WORDPRESS_OAUTH2_PROVIDER_NAME", "wordpress"),
            domain=os.environ.get("WORDPRESS_OAUTH2_DOMAIN", "").rstrip("/"),
            url_authorize=os.environ.get("WORDPRESS_OAUTH2_URL_AUTHORIZE", ""),
            url_access_token=os.environ.get("WORDPRESS_OAUTH2_URL_ACCESS_TOKEN", ""),
            url_resource_owner_details=os.environ.get(
                "WORDPRESS_OAUTH2_URL_RESOURCE_OWNER_DETAILS", ""
            ),
            client_id=os.environ.get("WORDPRESS_OAUTH2_CLIENT_ID", ""),
            client_secret=os.environ.get("WORDPRESS_OAUTH2_CLIENT_SECRET", ""),
            redirect_uri=os.environ.get(
                "WORDPRESS_OAUTH2_REDIRECT_URI",
                f"{base_url}/auth/callback"
            ),
            scope=os.environ.get("WORDPRESS_OAUTH2_SCOPE", ""),
            frontend_url=os.environ.get("WORDPRESS_OAUTH2_FRONTEND_URL", "/"),
            login_success_redirect=os.environ.get(
                "WORDPRESS_OAUTH2_LOGIN_SUCCESS_REDIRECT", "/"
            ),
            login_error_redirect=os.environ.get(
                "WORDPRESS_OAUTH2_LOGIN_ERROR_REDIRECT", "/login?error=auth_failed"
            ),
        )
