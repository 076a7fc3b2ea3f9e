"""HTTP middleware: timeout, request ID, no-cache headers for browse views.

Applied in main app; order matters (last added = outermost).
Import and use from app.main.
"""

from app.middleware.no_cache import NoCacheMiddleware
from app.middleware.request_id import RequestIDMiddleware
from app.middleware.timeout import TimeoutMiddleware

__all__ = [
    "NoCacheMiddleware",
    "RequestIDMiddleware",
    "TimeoutMiddleware",
]
