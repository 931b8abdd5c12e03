"""Registry of API keys and the users they belong to."""

from __future__ import annotations


class ApiKeyRegistry:
    """Maps API keys to user names."""

    def __init__(self) -> None:
        self._keys: dict[str, str] = {}

    def add_key(self, key: str, user: str) -> None:
        """Register a key for a user, replacing any earlier owner."""
        self._keys[key] = user

    def user_for(self, key: str) -> str | None:
        """Return the user owning the key, or None if the key is unknown."""
        return self._keys.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._keys