"""
wordpress-oauth2-provider

OAuth 2.0 provider for WordPress sites running the WP OAuth Server plugin,
built on Authlib.

This package provides:
- WordPress authorize, token and user details endpoints
- Detection of OAuth error payloads as IdentityProviderError
- Access to the WordPress user returned by /wp-json/wp/v2/users/me
- A Flask blueprint and CLI for login via WordPress
"""

__version__ = "0.1.0"

from .exceptions import ConfigurationError, IdentityProviderError, WordPressOAuth2Error
from .provider import WordPressProvider
from .resource_owner import WordPressResourceOwner
from .plugin import WordPressOAuth2Plugin
from .blueprint import wordpress_bp

__all__ = [
    "ConfigurationError",
    "IdentityProviderError",
    "WordPressOAuth2Error",
    "WordPressOAuth2Plugin",
    "WordPressProvider",
    "WordPressResourceOwner",
    "wordpress_bp",
    "__version__",
]
