"""
WordPress OAuth2 provider.

Supplies the WordPress OAuth server endpoints, error detection and the
resource owner factory to an Authlib OAuth2 session. Authlib performs the
authorization code exchange, state handling and token parsing.
"""

import logging
from collections.abc import Mapping
from typing import Any, Callable, Dict, FrozenSet, Optional, Tuple

import httpx
from authlib.integrations.requests_client import OAuth2Session

from .config import WordPressProviderConfig
from .exceptions import IdentityProviderError
from .resource_owner import WordPressResourceOwner

logger = logging.getLogger(__name__)


class WordPressProvider:
    """
    OAuth2 provider for the WordPress OAuth server plugin.

    Options:
        domain: WordPress site URL, e.g. ``https://example.com`` (required)
        url_authorize: Authorization endpoint override
        url_access_token: Token endpoint override
        url_resource_owner_details: User details endpoint override

    Any other option (``client_id``, ``client_secret``, ``redirect_uri``,
    ``scope``, ...) is passed on to the OAuth2 session untouched.

    Collaborators:
        session_factory: Callable returning an OAuth2Session-like object
        http_client: httpx.Client used to fetch the resource owner
    """

    def __init__(
        self,
        options: Mapping[str, Any],
        collaborators: Optional[Mapping[str, Any]] = None,
    ):
        self.config, self.session_options = WordPressProviderConfig.from_options(options)

        collaborators = collaborators or {}
        self._session_factory: Callable[..., Any] = collaborators.get(
            "session_factory", OAuth2Session
        )
        self._http_client: Optional[httpx.Client] = collaborators.get("http_client")

    def base_authorization_url(self) -> str:
        """Get authorization url to begin OAuth flow."""
        return self.config.authorization_url

    def base_access_token_url(self, params: Optional[Mapping[str, Any]] = None) -> str:
        """Get access token url to retrieve token."""
        return self.config.access_token_url

    def resource_owner_details_url(self, token: Any = None) -> str:
        """Get provider url to fetch user details."""
        return self.config.resource_owner_details_url

    def default_scopes(self) -> FrozenSet[str]:
        """WordPress grants no implicit scopes; callers must request them."""
        return frozenset()

    def check_response(self, response: Any, data: Any) -> None:
        """
        Check a provider response for errors.

        Args:
            response: HTTP response exposing ``status_code``
            data: Parsed response body

        Raises:
            IdentityProviderError: If the body carries a non-empty ``error``
        """
        if not isinstance(data, Mapping) or not data.get("error"):
            return

        message = f"{data['error']}: {data.get('error_description') or ''}"
        logger.warning(f"WordPress OAuth error (status={response.status_code}): {message}")
        raise IdentityProviderError(message, response.status_code, data)

    def create_resource_owner(
        self, data: Mapping[str, Any], token: Any = None
    ) -> WordPressResourceOwner:
        """Generate a user object from a successful user details request."""
        return WordPressResourceOwner(data)

    def get_authorization_headers(self, token: Any) -> Dict[str, str]:
        """Return the bearer authorization header for an access token."""
        if isinstance(token, Mapping):
            token = token["access_token"]
        return {"Authorization": f"Bearer {token}"}

    def create_session(self, **kwargs) -> Any:
        """
        Create an OAuth2 session for this provider.

        The session reports token endpoint responses back through
        check_response before it parses them.
        """
        session_kwargs = {**self.session_options, **kwargs}
        session_kwargs.setdefault("scope", " ".join(sorted(self.default_scopes())) or None)

        session = self._session_factory(**session_kwargs)
        session.register_compliance_hook("access_token_response", self._check_token_response)
        return session

    def _check_token_response(self, response: Any) -> Any:
        try:
            data = response.json()
        except ValueError:
            # Leave undecodable bodies to the session's own token parsing
            return response
        self.check_response(response, data)
        return response

    def get_authorization_url(
        self, state: Optional[str] = None, **kwargs
    ) -> Tuple[str, str]:
        """
        Build the URL the user is redirected to for authorization.

        Args:
            state: CSRF state; generated by the session if omitted
            **kwargs: Extra query parameters

        Returns:
            Tuple of (authorization URL, state)
        """
        session = self.create_session()
        url, state = session.create_authorization_url(
            self.base_authorization_url(), state=state, **kwargs
        )
        logger.debug(f"Authorization URL: {url}")
        return url, state

    def get_access_token(
        self,
        code: Optional[str] = None,
        authorization_response: Optional[str] = None,
        **kwargs,
    ) -> Any:
        """
        Exchange an authorization code for an access token.

        Args:
            code: Authorization code received on the callback
            authorization_response: Full callback URL, as an alternative to code
            **kwargs: Extra token request parameters

        Returns:
            The token returned by the session (an Authlib OAuth2Token)

        Raises:
            IdentityProviderError: If the token endpoint answers with an error
        """
        session = self.create_session()
        fetch_kwargs = dict(kwargs)
        if code is not None:
            fetch_kwargs["code"] = code
        if authorization_response is not None:
            fetch_kwargs["authorization_response"] = authorization_response

        token = session.fetch_token(self.base_access_token_url(fetch_kwargs), **fetch_kwargs)
        logger.info("Obtained access token from WordPress")
        return token

    def get_resource_owner(self, token: Any) -> WordPressResourceOwner:
        """
        Fetch the user details for an access token.

        Raises:
            IdentityProviderError: If the user details endpoint answers with an error
        """
        url = self.resource_owner_details_url(token)
        headers = self.get_authorization_headers(token)

        if self._http_client is not None:
            response = self._http_client.get(url, headers=headers)
        else:
            with httpx.Client() as client:
                response = client.get(url, headers=headers)

        data = response.json()
        logger.debug(f"User details response: {data}")
        self.check_response(response, data)
        return self.create_resource_owner(data, token)
