"""Cross-origin resource sharing policy."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class CorsPolicy:
    """Which origins, methods and headers cross-origin requests may use.

    ``max_age`` is in seconds; -1 means it is not set.
    """

    allowed_origins: set[str] = field(default_factory=set)
    allowed_methods: set[str] = field(default_factory=set)
    allowed_headers: set[str] = field(default_factory=set)
    allow_credentials: bool = False
    max_age: int = -1

    def is_origin_allowed(self, origin: str) -> bool:
        """Return whether the origin is listed, or any origin is allowed."""
        return "*" in self.allowed_origins or origin in self.allowed_origins