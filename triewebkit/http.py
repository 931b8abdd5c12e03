"""HTTP request and response value types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from urllib.parse import parse_qsl


@dataclass
class Header:
    """A single HTTP header line."""

    name: str
    value: str


class StatusCode(IntEnum):
    """HTTP status codes a response can carry."""

    OK = 200
    CREATED = 201
    ACCEPTED = 202
    NO_CONTENT = 204
    MULTIPLE_CHOICES = 300
    MOVED_PERMANENTLY = 301
    MOVED_TEMPORARILY = 302
    NOT_MODIFIED = 304
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    INTERNAL_SERVER_ERROR = 500
    NOT_IMPLEMENTED = 501
    BAD_GATEWAY = 502
    SERVICE_UNAVAILABLE = 503


@dataclass
class Request:
    """An incoming HTTP request."""

    method: str = ""
    uri: str = ""
    http_version_major: int = 1
    http_version_minor: int = 1
    headers: list[Header] = field(default_factory=list)
    body: str = ""
    context: dict[str, str] = field(default_factory=dict)

    @property
    def path(self) -> str:
        """The URI without its query string or fragment."""
        without_fragment = self.uri.partition("#")[0]
        return without_fragment.partition("?")[0]

    @property
    def query_params(self) -> dict[str, str]:
        """The query string decoded into a mapping; later keys win."""
        query = self.uri.partition("#")[0].partition("?")[2]
        return dict(parse_qsl(query, keep_blank_values=True))

    def header(self, name: str) -> str:
        """Return the value of the named header, or an empty string."""
        wanted = name.lower()
        return next(
            (item.value for item in self.headers if item.name.lower() == wanted),
            "",
        )


@dataclass
class Response:
    """An outgoing HTTP response."""

    status: StatusCode = StatusCode.OK
    headers: list[Header] = field(default_factory=list)
    content: str = ""