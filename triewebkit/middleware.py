"""Middleware values, chaining and the error-handling middleware."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from . import logger
from .error_renderer import render_error
from .http import Request, Response, StatusCode

Next = Callable[[], None]
Handler = Callable[[Request, Response], None]
MiddlewareHandler = Callable[[Request, Response, Next], None]


@dataclass(eq=False)
class Middleware:
    """A request hook that may call ``next`` to continue the chain.

    Middlewares order by priority, lowest first.
    """

    handler: MiddlewareHandler
    priority: int = 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Middleware):
            return NotImplemented
        return self.priority < other.priority

    def __call__(self, request: Request, response: Response, next_: Next) -> None:
        self.handler(request, response, next_)


class MiddlewareChain:
    """Runs middlewares in order, then the final handler."""

    def __init__(self, middlewares: Iterable[Middleware], final_handler: Handler | None = None):
        self.middlewares = list(middlewares)
        self.final_handler = final_handler

    def run(self, request: Request, response: Response) -> None:
        """Start the chain; each middleware decides whether to continue."""
        pending = iter(self.middlewares)
        finished = False

        def advance() -> None:
            nonlocal finished
            middleware = next(pending, None)
            if middleware is not None:
                middleware(request, response, advance)
            elif not finished and self.final_handler is not None:
                finished = True
                self.final_handler(request, response)

        advance()


def _handle_errors(request: Request, response: Response, next_: Next) -> None:
    try:
        next_()
    except Exception as exc:
        message = str(exc)
        logger.error(message or "An unknown error occurred.")
        render_error(
            response,
            StatusCode.INTERNAL_SERVER_ERROR,
            message or "Internal Server Error",
            request.header("Accept"),
        )


def create_error_handler() -> Middleware:
    """Middleware that turns exceptions raised downstream into a 500 response."""
    return Middleware(_handle_errors)