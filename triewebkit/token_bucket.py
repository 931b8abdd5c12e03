"""Token-bucket rate limiting and the rate-limiting middleware."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable

from .http import Request, Response, StatusCode
from .middleware import Middleware, Next

_CLIENT_KEY = "127.0.0.1"


class TokenBucket:
    """A bucket holding up to ``capacity`` tokens, refilled continuously.

    ``refill_rate`` is in tokens per second. The bucket starts full.
    """

    def __init__(
        self,
        capacity: float,
        refill_rate: float,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.capacity = float(capacity)
        self.refill_rate = float(refill_rate)
        self._clock = clock
        self._tokens = float(capacity)
        self._last_refill = clock()
        self._lock = threading.Lock()

    @property
    def tokens(self) -> float:
        """Tokens currently available, after refilling."""
        with self._lock:
            self._refill()
            return self._tokens

    def consume(self, tokens: int = 1) -> bool:
        """Take ``tokens`` from the bucket if enough are available."""
        with self._lock:
            self._refill()
            if self._tokens >= tokens:
                self._tokens -= tokens
                return True
            return False

    def _refill(self) -> None:
        now = self._clock()
        elapsed = now - self._last_refill
        self._tokens = min(self.capacity, self._tokens + elapsed * self.refill_rate)
        self._last_refill = now


def create_rate_limiter(tokens_per_second: float, burst_size: int) -> Middleware:
    """Middleware that answers 503 once the client's bucket is empty.

    All requests share one client bucket, created with ``tokens_per_second``
    as its capacity and ``burst_size`` as its refill rate.
    """
    clients: dict[str, TokenBucket] = {}
    lock = threading.Lock()

    def limit(request: Request, response: Response, next_: Next) -> None:
        with lock:
            bucket = clients.get(_CLIENT_KEY)
            if bucket is None:
                bucket = clients[_CLIENT_KEY] = TokenBucket(tokens_per_second, burst_size)
            if not bucket.consume():
                response.status = StatusCode.SERVICE_UNAVAILABLE
                response.content = "Too many requests"
                return
            next_()

    return Middleware(limit)