# triewebkit

Building blocks for an HTTP server: a trie-based router with parameters,
wildcards, regex segments and priorities, a middleware chain, and small
utilities for rate limiting, sessions, request IDs, CORS policies, gzip
compression, configuration, error rendering and static files.

It has no runtime dependencies beyond the standard library.

## Installation

```
pip install triewebkit
```

## Requests and responses

`triewebkit.http` holds plain dataclasses:

- `Request(method, uri, http_version_major, http_version_minor, headers, body, context)`,
  with `path` (the URI without query string or fragment), `query_params`
  (the decoded query string) and `header(name)`, a case-insensitive lookup
  that returns `""` when the header is absent. `context` is a dictionary
  middlewares use to pass values such as the request or session ID.
- `Response(status, headers, content)`, where `status` is a `StatusCode`.
- `Header(name, value)` and the `StatusCode` enum.

## Routing

```python
from triewebkit.http import Request, Response
from triewebkit.routing import Router

def show_user(request, response):
    response.content = "user page"

router = Router()
router.add_route("GET", "/users/:id", show_user, name="user.show")
router.add_route("GET", "/files/*path", show_user)
router.add_route("GET", "/orders/<order:\\d+>", show_user)
router.add_route("GET", "/lang/:locale=en", show_user)

result = router.match_route(Request(method="GET", uri="/users/42"))
# result.params == {"id": "42"}
response = Response()
result.handler(Request(method="GET", uri="/users/42"), response)

router.url_for("user.show", {"id": "42"})   # "/users/42"
```

Segment forms a route path understands:

| Segment           | Meaning                                          |
|-------------------|--------------------------------------------------|
| `name`            | static text                                      |
| `:id`             | named parameter                                  |
| `:id?`            | optional parameter                               |
| `:locale=en`      | optional parameter with a default                |
| `*path`           | wildcard, takes the rest of the path             |
| `<id:\d+>`        | segment that must fully match a regular expression (`<id>` alone matches anything) |

`match_route` returns a `MatchResult` with `handler`, `params` and
`allowed_methods`:

- Without an explicit `priority`, static routes win over parameters, and
  parameters over wildcards; a higher `priority` passed to `add_route` wins.
- A route on `/` catches every path that nothing else matches.
- If nothing matches, `handler` is `None`. If the path exists only under
  other methods, `allowed_methods` lists them and `handler` sets the
  response status to 400 (`StatusCode.BAD_REQUEST`).
- The method may be overridden by an `X-HTTP-Method-Override` header or,
  failing that, a `_method` query parameter.

Registering a second route under an existing name raises `ValueError`;
registering the same path twice logs a "Route conflict" warning and replaces
the handler. `url_for` returns `""` for an unknown name and leaves
placeholders without a value in place.

`triewebkit.routing.match_node(root, path)` exposes the tree lookup itself,
returning the matching `TrieNode` (or `None`) and the captured parameters.

### Groups

```python
router.group("/api", lambda g: g.add_route("GET", "/users", show_user))
```

`Router.group(prefix, group_routes, middlewares)` and
`RouteGroup.group(prefix, middlewares, group_routes)` nest groups; prefixes
are joined, and group middleware runs before the route's own middleware.

### Static files

```python
router.add_static_route("/static", "static")
```

GET requests below `/static` are answered by `triewebkit.file_server.FileServer`,
which reads the file under the base directory, answers 400 for paths
containing `..` and 404 for files it cannot open. No `Content-Type` header
is set.

## Middleware

`triewebkit.middleware.Middleware(handler, priority=0)` wraps a callable
taking `(request, response, next)`; calling `next()` continues the chain.
When a route runs, global middlewares (`Router.use`) and the route's own are
sorted by priority, lowest first, keeping registration order among equals,
and then the route handler runs. `MiddlewareChain(middlewares, final_handler).run(request, response)`
runs such a chain directly.

Every router starts with the middleware from `create_error_handler()`, which
turns an exception raised downstream into a 500 response rendered as JSON,
HTML or plain text depending on the `Accept` header
(`triewebkit.error_renderer.render_error`).

Other middleware factories:

- `triewebkit.request_id.create_request_id_middleware()`: keeps a client's
  `X-Request-ID` or generates one (`generate_request_id()`, in UUID v4
  layout), stores it in `request.context["request_id"]` and echoes a new one
  in the response headers.
- `triewebkit.session.create_session_middleware(store)`: reads the
  `session_id` cookie, or creates a new ID and sends it in a `Set-Cookie`
  header, and stores it in `request.context["session_id"]`. The store is
  not read or written by the middleware. `InMemorySessionStore` and
  `parse_cookies` live in the same module.
- `triewebkit.token_bucket.create_rate_limiter(tokens_per_second, burst_size)`:
  answers 503 with "Too many requests" once the bucket is empty. All
  requests share one bucket, whose capacity is `tokens_per_second` and whose
  refill rate per second is `burst_size`. `TokenBucket` can also be used
  on its own.

## Utilities

- `triewebkit.config.ServerConfig`: defaults (port 8080, address `0.0.0.0`,
  1024 connections, 60 s timeout, 4 threads, no SSL, INFO), `load_from_file`
  for a JSON file, `load_from_env` for `SERVER_*` variables, and `validate`,
  which raises `ValueError` for a bad port or zero connections or threads.
- `triewebkit.cors.CorsPolicy`: allowed origins, methods and headers, with
  `is_origin_allowed`.
- `triewebkit.compressor.GzipCompressor`: gzip-encodes `str` or `bytes`.
- `triewebkit.api_keys.ApiKeyRegistry`: `add_key` and `user_for`.
- `triewebkit.buffer_pool.BufferPool`: a bounded pool of reusable
  `bytearray` buffers; `acquire` raises `MemoryError` past `max_memory`.
- `triewebkit.connections.ConnectionManager`: starts, tracks and stops
  objects with `start()` and `stop()` methods.
- `triewebkit.parameter_parser`: `parse(value, int | float | str)` and
  `validate(value, pattern)` for path parameters.
- `triewebkit.logger`: timestamped messages on standard output; the router
  logs its decisions through it.

## What it does not do

triewebkit does not listen on a socket, parse raw HTTP or write responses to
the network: there is no server, connection or thread-pool implementation,
and no command to run. It has no authentication middleware, no request
logging middleware, and nothing that applies a `CorsPolicy` or a
`Compressor` to responses; those pieces are left to the application that
uses it.

## Running the tests

```
pip install -e .[test]
pytest
```