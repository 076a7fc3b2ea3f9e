"""No-cache headers middleware for browse views.

Browse pages reflect live catalog/library state, so every response under
the browse path (including error pages) must be revalidated.
Uses raw ASGI (no BaseHTTPMiddleware) for production-safe streaming.
"""

from typing import Callable

NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}


def NoCacheMiddleware(app: Callable, path_prefix: str = "/browse") -> Callable:
    """Set NO_CACHE_HEADERS on responses whose path starts with path_prefix. Raw ASGI."""
    header_list = [(k.lower().encode(), v.encode()) for k, v in NO_CACHE_HEADERS.items()]
    names = {name for name, _ in header_list}

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http" or not scope.get("path", "").startswith(path_prefix):
            await app(scope, receive, send)
            return

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                headers = [
                    h for h in message.get("headers", []) if h[0].lower() not in names
                ]
                headers.extend(header_list)
                message["headers"] = headers
            await send(message)

        await app(scope, receive, send_wrapper)

    return asgi_app
