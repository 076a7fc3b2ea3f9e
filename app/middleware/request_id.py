"""Request ID middleware.

Every HTTP response carries a request ID: the client's own value when it is a
safe token, otherwise a freshly minted one. The ID is also stored on the
request state so error handlers outside the middleware stack can echo it.
"""

import re
import uuid
from typing import Callable

from starlette.datastructures import Headers, MutableHeaders

_SAFE_REQUEST_ID = re.compile(r"[A-Za-z0-9_-]{1,64}")


def sanitize_request_id(raw: str | None) -> str:
    """Return the stripped client value if it is a safe token, else a new hex UUID."""
    candidate = (raw or "").strip()
    if _SAFE_REQUEST_ID.fullmatch(candidate):
        return candidate
    return uuid.uuid4().hex


def RequestIDMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Forward or mint the request ID header. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        request_id = sanitize_request_id(Headers(scope=scope).get(header_name))
        scope.setdefault("state", {})["request_id"] = request_id

        async def send_with_id(message: dict) -> None:
            if message["type"] == "http.response.start":
                message.setdefault("headers", [])
                MutableHeaders(scope=message)[header_name] = request_id
            await send(message)

        await app(scope, receive, send_with_id)

    return asgi_app
