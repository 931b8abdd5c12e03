"""Rendering of error responses in the format the client accepts."""

from __future__ import annotations

from .http import Header, Response, StatusCode


def _render_html(response: Response, status: StatusCode, message: str) -> None:
    response.status = status
    response.headers.append(Header("Content-Type", "text/html"))
    response.content = (
        "<html><head><title>Error</title></head><body><h1>"
        f"{int(status)}</h1><p>{message}</p></body></html>"
    )


def _render_json(response: Response, status: StatusCode, message: str) -> None:
    response.status = status
    response.headers.append(Header("Content-Type", "application/json"))
    response.content = f'{{"status": {int(status)}, "error": "{message}"}}'


def _render_text(response: Response, status: StatusCode, message: str) -> None:
    response.status = status
    response.headers.append(Header("Content-Type", "text/plain"))
    response.content = f"{int(status)} {message}"


def render_error(response: Response, status: StatusCode, message: str, content_type: str) -> None:
    """Fill the response with an error body chosen by the accepted content type.

    JSON is preferred over HTML when both appear; anything else gets plain text.
    """
    if "application/json" in content_type:
        _render_json(response, status, message)
    elif "text/html" in content_type:
        _render_html(response, status, message)
    else:
        _render_text(response, status, message)