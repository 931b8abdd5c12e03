"""Session storage, cookie parsing and the session middleware."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod

from .http import Header, Request, Response
from .middleware import Middleware, Next
from .request_id import generate_request_id

SESSION_COOKIE = "session_id"
_LEADING_SPACE = " \t\n\r\f\v"


class SessionStore(ABC):
    """Storage of session data by session ID."""

    @abstractmethod
    def set(self, session_id: str, data: str) -> None:
        """Store data for a session, replacing what was there."""

    @abstractmethod
    def get(self, session_id: str) -> str:
        """Return a session's data, or an empty string if there is none."""

    @abstractmethod
    def remove(self, session_id: str) -> None:
        """Forget a session; unknown IDs are ignored."""


class InMemorySessionStore(SessionStore):
    """Thread-safe session store kept in a dictionary."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}
        self._lock = threading.Lock()

    def set(self, session_id: str, data: str) -> None:
        with self._lock:
            self._data[session_id] = data

    def get(self, session_id: str) -> str:
        with self._lock:
            return self._data.get(session_id, "")

    def remove(self, session_id: str) -> None:
        with self._lock:
            self._data.pop(session_id, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)


def parse_cookies(cookie_header: str) -> dict[str, str]:
    """Split a Cookie header into a name-to-value mapping.

    Pairs without ``=`` are skipped, leading whitespace is stripped from
    names only, and a repeated name keeps its last value.
    """
    cookies: dict[str, str] = {}
    for pair in cookie_header.split(";"):
        key, eq, value = pair.partition("=")
        if eq:
            cookies[key.lstrip(_LEADING_SPACE)] = value
    return cookies


def create_session_middleware(store: SessionStore) -> Middleware:
    """Middleware that puts the session ID in the request context.

    A request without a session cookie gets a new ID, sent back in a
    ``Set-Cookie`` header.
    """

    def attach_session(request: Request, response: Response, next_: Next) -> None:
        cookies = parse_cookies(request.header("Cookie"))
        session_id = cookies.get(SESSION_COOKIE)
        if session_id is None:
            session_id = generate_request_id()
            response.headers.append(
                Header("Set-Cookie", f"{SESSION_COOKIE}={session_id}; HttpOnly; Secure")
            )
        request.context["session_id"] = session_id
        next_()

    attach_session.store = store  # type: ignore[attr-defined]
    return Middleware(attach_session)