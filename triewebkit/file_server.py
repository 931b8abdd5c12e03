"""Serving files from a directory."""

from __future__ import annotations

from .http import Request, Response, StatusCode


class FileServer:
    """Serves files below a base directory, mounted at ``/<base_dir>``."""

    def __init__(self, base_dir: str):
        self.base_dir = base_dir

    def handle_request(self, request: Request, response: Response) -> None:
        """Fill the response with the requested file, or an error status."""
        path = request.path
        prefix = "/" + self.base_dir
        if path.startswith(prefix):
            path = path[len(prefix):]
        file_path = self.base_dir + path

        if ".." in file_path:
            response.status = StatusCode.BAD_REQUEST
            response.content = "Bad Request"
            return

        try:
            with open(file_path, "rb") as handle:
                data = handle.read()
        except OSError:
            response.status = StatusCode.NOT_FOUND
            response.content = "Not Found"
            return

        response.content = data.decode("utf-8", errors="surrogateescape")
        response.status = StatusCode.OK