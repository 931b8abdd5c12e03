import threading

import pytest

from triewebkit.http import Header, Request, Response
from triewebkit.middleware import MiddlewareChain
from triewebkit.session import (
    InMemorySessionStore,
    SessionStore,
    create_session_middleware,
    parse_cookies,
)


def test_store_set_get_remove_round_trip():
    store = InMemorySessionStore()
    store.set("one", "data")
    assert store.get("one") == "data"
    store.set("one", "other")
    assert store.get("one") == "other"
    store.remove("one")
    assert store.get("one") == ""


def test_store_missing_session_is_empty():
    assert InMemorySessionStore().get("missing") == ""


def test_store_remove_unknown_is_harmless():
    store = InMemorySessionStore()
    store.set("kept", "x")
    store.remove("unknown")
    assert store.get("kept") == "x"
    assert len(store) == 1


def test_store_is_thread_safe():
    store = InMemorySessionStore()

    def fill(offset):
        for n in range(100):
            store.set(f"{offset}-{n}", str(n))

    threads = [threading.Thread(target=fill, args=(t,)) for t in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert len(store) == 400


def test_session_store_is_abstract():
    with pytest.raises(TypeError):
        SessionStore()


def test_parse_cookies_basic():
    assert parse_cookies("a=1; b=2") == {"a": "1", "b": "2"}


def test_parse_cookies_skips_pairs_without_equals():
    assert parse_cookies("flag; a=1;") == {"a": "1"}


def test_parse_cookies_empty_header():
    assert parse_cookies("") == {}


def test_parse_cookies_keeps_value_whitespace_and_last_duplicate():
    assert parse_cookies("a=1;\t a= 2 ") == {"a": " 2 "}


def test_parse_cookies_value_may_contain_equals():
    assert parse_cookies("k=x=y") == {"k": "x=y"}


def _run(request):
    response = Response()
    reached = []
    chain = MiddlewareChain(
        [create_session_middleware(InMemorySessionStore())],
        lambda req, res: reached.append(True),
    )
    chain.run(request, response)
    return response, reached


def test_middleware_uses_existing_cookie():
    request = Request("GET", "/", headers=[Header("Cookie", "theme=dark; session_id=placeholder")])
    response, reached = _run(request)
    assert request.context["session_id"] == "placeholder"
    assert response.headers == []
    assert reached == [True]


def test_middleware_creates_session_cookie():
    request = Request("GET", "/")
    response, reached = _run(request)
    session_id = request.context["session_id"]
    assert session_id
    assert response.headers == [
        Header("Set-Cookie", f"session_id={session_id}; HttpOnly; Secure")
    ]
    assert reached == [True]


def test_middleware_new_sessions_differ():
    first, second = Request("GET", "/"), Request("GET", "/")
    _run(first)
    _run(second)
    assert first.context["session_id"] != second.context["session_id"]
    assert len(first.context["session_id"]) == len(second.context["session_id"])