"""Shared fixtures for wordpress-oauth2-provider tests."""

import json
from typing import Any, Callable

import httpx
import pytest
import requests

from wordpress_oauth2_provider.provider import WordPressProvider

DOMAIN = "https://example.com"


def make_requests_response(body: Any, status_code: int = 200) -> requests.Response:
    """Build a requests.Response carrying a JSON body."""
    response = requests.Response()
    response.status_code = status_code
    response.headers["Content-Type"] = "application/json"
    response._content = json.dumps(body).encode("utf-8")
    return response


def make_http_client(body: Any, status_code: int = 200) -> httpx.Client:
    """Build an httpx client that answers every request with a JSON body."""
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=body)

    return httpx.Client(transport=httpx.MockTransport(handler))


@pytest.fixture
def provider_options() -> dict:
    """Options as passed by an application."""
    return {
        "client_id": "mock_client_id",
        "client_secret": "mock_secret",
        "redirect_uri": "https://app.example.org/auth/callback",
        "domain": DOMAIN,
    }


@pytest.fixture
def provider(provider_options: dict) -> WordPressProvider:
    """Provider with derived endpoints."""
    return WordPressProvider(provider_options)


@pytest.fixture
def user_details() -> dict:
    """A users/me response."""
    return {
        "id": 4321,
        "username": "bob",
        "email": "e@x.com",
        "link": "https://example.com/author/bob/",
        "avatar_urls": {
            "24": "https://secure.gravatar.com/avatar/abc?s=24",
            "48": "https://secure.gravatar.com/avatar/abc?s=48",
            "96": "https://secure.gravatar.com/avatar/abc?s=96",
        },
    }


@pytest.fixture
def http_client_factory() -> Callable[..., httpx.Client]:
    return make_http_client


@pytest.fixture
def requests_response_factory() -> Callable[..., requests.Response]:
    return make_requests_response
