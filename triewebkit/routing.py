"""Trie-based HTTP routing with parameters, wildcards, regexes and groups."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import Enum

from . import logger
from .file_server import FileServer
from .http import Request, Response, StatusCode
from .middleware import Handler, Middleware, MiddlewareChain, create_error_handler


class NodeType(Enum):
    """Kind of path segment a trie node stands for."""

    STATIC = "static"
    PARAMETER = "parameter"
    WILDCARD = "wildcard"
    REGEX = "regex"


_DEFAULT_PRIORITIES = {
    NodeType.STATIC: 3,
    NodeType.PARAMETER: 2,
    NodeType.WILDCARD: 1,
}


@dataclass(eq=False)
class TrieNode:
    """One segment of a route tree."""

    part: str
    type: NodeType
    children: dict[str, TrieNode] = field(default_factory=dict)
    handler: Handler | None = None
    middlewares: list[Middleware] = field(default_factory=list)
    is_wildcard: bool = False
    is_catch_all: bool = False
    is_static_files: bool = False
    static_files_base_dir: str = ""
    is_optional: bool = False
    default_value: str = ""
    regex_pattern: str = ""
    priority: int = 0


@dataclass
class MatchResult:
    """Outcome of routing a request.

    ``handler`` is None when nothing matched. When the path exists only for
    other methods, ``allowed_methods`` lists them and ``handler`` answers
    with an error status.
    """

    handler: Handler | None = None
    allowed_methods: list[str] = field(default_factory=list)
    params: dict[str, str] = field(default_factory=dict)


def _split_path(path: str) -> list[str]:
    return [segment for segment in path.split("/") if segment]


def _regex_matches(pattern: str, value: str) -> bool:
    try:
        return re.fullmatch(pattern, value) is not None
    except re.error:
        return False


def match_node(root: TrieNode, path: str) -> tuple[TrieNode | None, dict[str, str]]:
    """Find the best node for a path and the parameters it captures.

    Returns ``(None, {})`` when nothing matches and the root is not a
    catch-all route.
    """
    segments = _split_path(path)
    matches: list[TrieNode] = []

    def collect(node: TrieNode, index: int) -> None:
        if node.is_static_files:
            matches.append(node)
            return
        if index == len(segments):
            if node.handler is not None:
                matches.append(node)
            matches.extend(
                child
                for child in node.children.values()
                if child.is_optional and child.handler is not None
            )
            return
        segment = segments[index]
        exact = node.children.get(segment)
        if exact is not None:
            collect(exact, index + 1)
        for child in node.children.values():
            if child.type is NodeType.PARAMETER:
                collect(child, index + 1)
            elif child.type is NodeType.WILDCARD:
                collect(child, len(segments))
            elif child.type is NodeType.REGEX and _regex_matches(child.regex_pattern, segment):
                collect(child, index + 1)

    collect(root, 0)

    if not matches:
        return (root, {}) if root.is_catch_all else (None, {})

    best = max(matches, key=lambda node: node.priority)
    params: dict[str, str] = {}

    def locate(node: TrieNode, index: int) -> bool:
        if index == len(segments):
            return node is best
        segment = segments[index]
        exact = node.children.get(segment)
        if exact is not None and locate(exact, index + 1):
            return True
        for child in node.children.values():
            if child.type is NodeType.PARAMETER:
                if locate(child, index + 1):
                    params[child.part] = segment
                    return True
            elif child.type is NodeType.WILDCARD:
                if child is best:
                    params[child.part] = "/".join(segments[index:])
                    return True
            elif child.type is NodeType.REGEX:
                if _regex_matches(child.regex_pattern, segment) and locate(child, index + 1):
                    params[child.part] = segment
                    return True
        return False

    locate(root, 0)

    if best.is_optional and best.default_value and best.part not in params:
        params[best.part] = best.default_value

    return best, params


class RouteGroup:
    """Routes sharing a path prefix and a list of middlewares."""

    def __init__(self, prefix: str, router: Router, middlewares: Iterable[Middleware] = ()):
        self.prefix = prefix
        self.router = router
        self.middlewares = list(middlewares)

    def add_route(
        self,
        method: str,
        path: str,
        handler: Handler,
        middlewares: Iterable[Middleware] = (),
        name: str = "",
        priority: int = 0,
    ) -> None:
        """Register a route below this group's prefix."""
        self.router.add_route(
            method,
            self.prefix + path,
            handler,
            [*self.middlewares, *middlewares],
            name,
            priority,
        )

    def group(
        self,
        prefix: str,
        middlewares: Iterable[Middleware],
        group_routes: Callable[[RouteGroup], None],
    ) -> None:
        """Open a nested group that inherits this group's prefix and middlewares."""
        nested = RouteGroup(self.prefix + prefix, self.router, [*self.middlewares, *middlewares])
        group_routes(nested)


class Router:
    """Per-method route trees with named routes and global middlewares."""

    def __init__(self) -> None:
        self.trees: dict[str, TrieNode] = {}
        self._named_routes: dict[str, str] = {}
        self._global_middlewares: list[Middleware] = []
        self.use(create_error_handler())

    def _tree(self, method: str) -> TrieNode:
        return self.trees.setdefault(method, TrieNode("", NodeType.STATIC))

    def add_static_route(self, path: str, base_dir: str) -> None:
        """Serve files from ``base_dir`` for GET requests below ``path``."""
        current = self._tree("GET")
        for segment in _split_path(path):
            current = current.children.setdefault(segment, TrieNode(segment, NodeType.STATIC))
        current.is_static_files = True
        current.static_files_base_dir = base_dir

    def add_route(
        self,
        method: str,
        path: str,
        handler: Handler,
        middlewares: Iterable[Middleware] = (),
        name: str = "",
        priority: int = 0,
    ) -> None:
        """Register a handler for a method and path pattern.

        Raises ``ValueError`` when ``name`` is already taken.
        """
        middlewares = list(middlewares)
        if name:
            if name in self._named_routes:
                raise ValueError(f"Route name '{name}' is already defined.")
            self._named_routes[name] = path
            logger.debug(f"Registered route '{path}' with name '{name}'.")

        root = self._tree(method)
        if path == "/":
            root.is_catch_all = True
            root.handler = handler
            root.middlewares = middlewares
            return

        current = root
        for segment in _split_path(path):
            node_type = NodeType.STATIC
            part = segment
            is_optional = False
            default_value = ""
            regex_pattern = ""

            if segment.startswith(":"):
                node_type = NodeType.PARAMETER
                part = segment[1:]
                if part.endswith("?"):
                    is_optional = True
                    part = part[:-1]
                if "=" in part:
                    part, _, default_value = part.partition("=")
                    is_optional = True
            elif segment.startswith("*"):
                node_type = NodeType.WILDCARD
                part = segment[1:]
            elif len(segment) >= 2 and segment[0] == "<" and segment[-1] == ">":
                node_type = NodeType.REGEX
                content = segment[1:-1]
                part, colon, pattern = content.partition(":")
                regex_pattern = pattern if colon else ".*"

            current = current.children.setdefault(part, TrieNode(part, node_type))
            if node_type is NodeType.PARAMETER:
                current.is_optional = is_optional
                current.default_value = default_value
            elif node_type is NodeType.WILDCARD:
                current.is_wildcard = True
            elif node_type is NodeType.REGEX:
                current.regex_pattern = regex_pattern

        if current.handler is not None:
            logger.warning(f"Route conflict: {path} conflicts with an existing route.")
        current.handler = handler
        current.middlewares = middlewares
        if priority != 0:
            current.priority = priority
        elif current.type in _DEFAULT_PRIORITIES:
            current.priority = _DEFAULT_PRIORITIES[current.type]

    def group(
        self,
        prefix: str,
        group_routes: Callable[[RouteGroup], None],
        middlewares: Iterable[Middleware] = (),
    ) -> None:
        """Register routes through a group sharing ``prefix`` and ``middlewares``."""
        middlewares = list(middlewares)
        logger.debug(
            f"Creating route group with prefix '{prefix}' and {len(middlewares)} middlewares."
        )
        group_routes(RouteGroup(prefix, self, middlewares))

    def url_for(self, name: str, params: dict[str, str] | None = None) -> str:
        """Build the path of a named route, filling in ``:name`` placeholders.

        Returns an empty string for an unknown name; placeholders without a
        value are left in place.
        """
        path = self._named_routes.get(name)
        if path is None:
            logger.warning(f"Route with name '{name}' not found.")
            return ""
        logger.debug(f"Generating URL for named route '{name}' with path '{path}'.")
        for key, value in (params or {}).items():
            placeholder = ":" + key
            if placeholder in path:
                path = path.replace(placeholder, value, 1)
            else:
                logger.warning(f"Parameter '{key}' not found in route path for '{name}'.")
        return path

    def _effective_method(self, request: Request) -> str:
        override = request.header("X-HTTP-Method-Override")
        if override:
            logger.debug(f"Method overridden by X-HTTP-Method-Override header to: {override}")
            return override
        query_params = request.query_params
        if "_method" in query_params:
            method = query_params["_method"]
            logger.debug(f"Method overridden by _method query parameter to: {method}")
            return method
        return request.method

    def _route_handler(self, node: TrieNode) -> Handler:
        def handle(request: Request, response: Response) -> None:
            middlewares = sorted([*self._global_middlewares, *node.middlewares])
            MiddlewareChain(middlewares, node.handler).run(request, response)

        return handle

    def match_route(self, request: Request) -> MatchResult:
        """Find the handler and path parameters for a request."""
        method = self._effective_method(request)
        path = request.path
        logger.info(f"Matching route: {method} {path}")

        tree = self.trees.get(method)
        if tree is not None:
            node, params = match_node(tree, path)
            if node is not None:
                if node.is_static_files:
                    logger.debug("Static file route matched")
                    server = FileServer(node.static_files_base_dir)
                    return MatchResult(handler=server.handle_request, params=params)
                logger.info("Route matched")
                return MatchResult(handler=self._route_handler(node), params=params)
            logger.debug(f"Node not found for path: {path}")
        else:
            logger.debug(f"Tree not found for method: {method}")

        logger.warning(f"Route not found for method: {method}")
        result = MatchResult()
        result.allowed_methods = [
            tree_method
            for tree_method, other in self.trees.items()
            if tree_method != method and match_node(other, path)[0] is not None
        ]
        if result.allowed_methods:
            logger.warning("Path found for other methods, returning 405")

            def reject(_request: Request, response: Response) -> None:
                response.status = StatusCode.BAD_REQUEST

            result.handler = reject
        else:
            logger.warning("No route found for path")
        return result

    def use(self, middleware: Middleware) -> None:
        """Add a middleware that runs for every matched route."""
        self._global_middlewares.append(middleware)