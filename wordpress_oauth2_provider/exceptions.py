"""
Exceptions raised by the WordPress OAuth2 provider.
"""

from typing import Any, Optional


class WordPressOAuth2Error(Exception):
    """Base class for all errors raised by this package."""


class ConfigurationError(WordPressOAuth2Error):
    """Raised when the provider is constructed without its required options."""


class IdentityProviderError(WordPressOAuth2Error):
    """
    Raised when the WordPress OAuth server answers with an error payload.

    Attributes:
        status_code: HTTP status code of the response
        response_body: Decoded response body as returned by the server
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_body: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_body = response_body

    def __str__(self) -> str:
        return self.message
