"""
Resource owner returned by the WordPress REST API.

Wraps the decoded body of ``/wp-json/wp/v2/users/me?context=edit``::

    {
        "id": 1,
        "username": "admin",
        "email": "admin@example.com",
        "link": "https://example.com/author/admin/",
        "avatar_urls": {"24": "...", "48": "...", "96": "..."},
        ...
    }
"""

import copy
from collections.abc import Mapping as MappingABC
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from .accessor import get_value_by_key

# WordPress only renders avatars in these sizes
AVATAR_SIZES = ("24", "48", "96")


def _freeze(value: Any) -> Any:
    if isinstance(value, MappingABC):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    return copy.deepcopy(value)


class WordPressResourceOwner:
    """Read-only view over a WordPress user details response."""

    def __init__(self, response: Optional[Mapping[str, Any]] = None):
        self._response = _freeze(response or {})

    @property
    def id(self) -> Optional[Any]:
        return get_value_by_key(self._response, "id")

    @property
    def email(self) -> Optional[str]:
        return get_value_by_key(self._response, "email")

    @property
    def username(self) -> Optional[str]:
        return get_value_by_key(self._response, "username")

    @property
    def link(self) -> Optional[str]:
        return get_value_by_key(self._response, "link")

    def avatar_url(self, size: Union[int, str] = 96) -> Optional[str]:
        """
        Return the avatar URL for one of the sizes WordPress provides.

        Any size other than 24, 48 or 96 yields None, even if the response
        happens to carry an entry for it.
        """
        size = str(size)
        if size not in AVATAR_SIZES:
            return None
        avatar_urls = get_value_by_key(self._response, "avatar_urls")
        return get_value_by_key(avatar_urls, size)

    def to_dict(self) -> Mapping[str, Any]:
        """Return all of the owner details as returned by the server.

        Nested objects such as avatar_urls are read-only views as well.
        """
        return self._response

    def __repr__(self) -> str:
        return f"WordPressResourceOwner(id={self.id!r}, username={self.username!r})"
