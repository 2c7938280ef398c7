"""Optional-value lookup over decoded JSON mappings."""

from collections.abc import Mapping
from typing import Any


def get_value_by_key(data: Any, key: str, default: Any = None) -> Any:
    """
    Return the value stored under ``key``, or ``default`` when it is absent.

    Dotted keys walk into nested mappings, so ``"avatar_urls.96"`` reads
    ``data["avatar_urls"]["96"]``. A key that exists verbatim takes
    precedence over the dotted walk.
    """
    if not isinstance(data, Mapping):
        return default

    if key in data:
        return data[key]

    if "." not in key:
        return default

    current = data
    for part in key.split("."):
        if not isinstance(current, Mapping) or part not in current:
            return default
        current = current[part]
    return current
