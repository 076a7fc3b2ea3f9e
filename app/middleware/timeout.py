"""Request timeout middleware.

Bounds how long the downstream app may spend on one HTTP request. A 504 is
only sent while the response has not started; after that the handler is
cancelled and the truncated response is left for the server to close.
"""

import asyncio
import logging
from typing import Callable

from starlette.responses import JSONResponse

from app.domain.exceptions import RequestTimeoutException

logger = logging.getLogger(__name__)


def TimeoutMiddleware(app: Callable, timeout_seconds: float) -> Callable:
    """Cancel the request after timeout_seconds. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        response_started = False

        async def tracking_send(message: dict) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await asyncio.wait_for(
                app(scope, receive, tracking_send), timeout=float(timeout_seconds)
            )
        except asyncio.TimeoutError:
            logger.warning(
                "Request timed out after %ss (response started: %s): %s %s",
                timeout_seconds,
                response_started,
                scope.get("method", ""),
                scope.get("path", ""),
            )
            if response_started:
                return
            exc = RequestTimeoutException(timeout_seconds)
            response = JSONResponse(status_code=504, content=exc.to_dict())
            await response(scope, receive, send)

    return asgi_app
