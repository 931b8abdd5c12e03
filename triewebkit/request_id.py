"""Request identifiers and the middleware that assigns them."""

from __future__ import annotations

import secrets

from .http import Header, Request, Response
from .middleware import Middleware, Next

REQUEST_ID_HEADER = "X-Request-ID"
_HEX_DIGITS = "0123456789abcdef"
_VARIANT_DIGITS = "89ab"


def _hex(count: int) -> str:
    return "".join(secrets.choice(_HEX_DIGITS) for _ in range(count))


def generate_request_id() -> str:
    """Return a random identifier in the textual layout of a version 4 UUID."""
    return (
        f"{_hex(8)}-{_hex(4)}-4{_hex(3)}-"
        f"{secrets.choice(_VARIANT_DIGITS)}{_hex(3)}-{_hex(12)}"
    )


def _assign_request_id(request: Request, response: Response, next_: Next) -> None:
    incoming = request.header(REQUEST_ID_HEADER)
    if incoming:
        request.context["request_id"] = incoming
    else:
        request_id = generate_request_id()
        request.context["request_id"] = request_id
        response.headers.append(Header(REQUEST_ID_HEADER, request_id))
    next_()


def create_request_id_middleware() -> Middleware:
    """Middleware that stores the request's ID in its context.

    An ID sent by the client is kept; otherwise a new one is generated and
    echoed back in the response headers.
    """
    return Middleware(_assign_request_id)