"""
Rasoi API - Request Body Limit Middleware.

Rejects requests whose body exceeds MAX_BODY_BYTES, whether the size is
declared in Content-Length or only known once a chunked body is read.
"""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

BODY_METHODS = ("POST", "PUT", "PATCH", "DELETE")


def _too_large() -> JSONResponse:
    return JSONResponse(status_code=413, content={"error": "Request body too large"})


class BodyLimitMiddleware(BaseHTTPMiddleware):
    """Middleware that answers 413 for oversized request bodies."""

    def __init__(self, app, max_body_bytes: int):
        super().__init__(app)
        self.max_body_bytes = max_body_bytes

    async def dispatch(self, request: Request, call_next) -> Response:
        content_length = request.headers.get("content-length")

        if content_length is not None:
            try:
                too_large = int(content_length) > self.max_body_bytes
            except ValueError:
                return JSONResponse(status_code=400, content={"error": "Invalid Content-Length"})
            if too_large:
                return _too_large()
        elif request.method in BODY_METHODS:
            # No declared length: read the body (cached for the route) and count it
            body = await request.body()
            if len(body) > self.max_body_bytes:
                return _too_large()

        return await call_next(request)
