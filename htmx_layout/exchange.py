from typing import Protocol

from fastapi import Request
from fastapi.responses import Response
from starlette.background import BackgroundTask

HTML_MEDIA_TYPE = "text/html; charset=utf-8"


class HttpExchange(Protocol):
    """The request/response pair a renderer reads from and writes to."""

    def get_header(self, name: str) -> str | None: ...

    def set_status(self, status: int) -> None: ...

    def write(self, body: str, media_type: str | None = None) -> None: ...


class StarletteExchange:
    """Collects status and body for a Starlette/FastAPI request.

    Starlette handlers return responses rather than writing to a socket, so
    the rendered body is held here until ``to_response()`` builds one.
    """

    def __init__(self, request: Request):
        self.request = request
        self.status_code = 200
        self.body: str | None = None
        self.media_type: str | None = None

    def get_header(self, name: str) -> str | None:
        return self.request.headers.get(name)

    def set_status(self, status: int) -> None:
        self.status_code = int(status)

    def write(self, body: str, media_type: str | None = None) -> None:
        if self.body is not None:
            raise RuntimeError("Response body has already been written")
        self.body = body
        self.media_type = media_type

    def to_response(
        self,
        headers: dict | None = None,
        background: BackgroundTask | None = None,
    ) -> Response:
        return Response(
            content=self.body or "",
            status_code=self.status_code,
            headers=headers,
            media_type=self.media_type or HTML_MEDIA_TYPE,
            background=background,
        )
