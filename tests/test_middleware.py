from triewebkit.http import Header, Request, Response, StatusCode
from triewebkit.middleware import Middleware, MiddlewareChain, create_error_handler


def _recorder(calls, label):
    def handler(request, response, next_):
        calls.append(label)
        next_()

    return Middleware(handler)


def test_chain_runs_in_order_then_handler():
    calls = []

    def final(request, response):
        calls.append("handler")

    chain = MiddlewareChain([_recorder(calls, "first"), _recorder(calls, "second")], final)
    chain.run(Request("GET", "/"), Response())
    assert calls == ["first", "second", "handler"]


def test_empty_chain_calls_handler():
    res = Response()

    def final(request, response):
        response.content = "done"

    MiddlewareChain([], final).run(Request("GET", "/"), res)
    assert res.content == "done"


def test_middleware_can_short_circuit():
    calls = []

    def block(request, response, next_):
        response.status = StatusCode.UNAUTHORIZED

    def final(request, response):
        calls.append("handler")

    res = Response()
    MiddlewareChain([Middleware(block)], final).run(Request("GET", "/"), res)
    assert calls == []
    assert res.status is StatusCode.UNAUTHORIZED


def test_middlewares_sort_by_priority():
    noop = lambda req, res, nxt: nxt()  # noqa: E731
    items = [Middleware(noop, 2), Middleware(noop, 0), Middleware(noop, 1)]
    assert [m.priority for m in sorted(items)] == [0, 1, 2]


def test_error_handler_renders_exception(capsys):
    def final(request, response):
        raise RuntimeError("boom")

    req = Request("GET", "/", headers=[Header("Accept", "application/json")])
    res = Response()
    MiddlewareChain([create_error_handler()], final).run(req, res)
    assert res.status is StatusCode.INTERNAL_SERVER_ERROR
    assert res.content == '{"status": 500, "error": "boom"}'
    assert "boom" in capsys.readouterr().out


def test_error_handler_passes_through_on_success():
    def final(request, response):
        response.content = "fine"

    res = Response()
    MiddlewareChain([create_error_handler()], final).run(Request("GET", "/"), res)
    assert res.status is StatusCode.OK
    assert res.content == "fine"
    assert res.headers == []


def test_error_handler_uses_generic_message_for_empty_error(capsys):
    def final(request, response):
        raise ValueError()

    res = Response()
    MiddlewareChain([create_error_handler()], final).run(Request("GET", "/"), res)
    assert res.content == "500 Internal Server Error"