"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain and framework
exceptions to HTTP responses: JSON for the API, an HTML error page for
browse views.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings
from app.domain.exceptions import VantageException
from app.middleware.no_cache import NO_CACHE_HEADERS

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status when applicable
_ERROR_CODE_STATUS: dict[str, int] = {
    "RESOURCE_NOT_FOUND": 404,
    "METHOD_NOT_ALLOWED": 405,
    "VALIDATION_ERROR": 400,
    "GATEWAY_TIMEOUT": 504,
}


def _is_browse_request(request: Request) -> bool:
    return request.url.path.startswith(f"{get_settings().url_prefix}/browse")


def _render_error_page(request: Request, status: int) -> Response:
    """Return the HTML error page; fall back to an empty body if it cannot render.

    No-cache headers are set here as well: a 500 is sent from outside the
    middleware stack, so NoCacheMiddleware never sees it.
    """
    renderer = getattr(request.app.state, "renderer", None)
    try:
        body = renderer.render("error.html", {"request": request, "status": status})
    except Exception as e:
        logger.exception("Failed to render error page for status %s: %s", status, e)
        return Response(status_code=status, headers=NO_CACHE_HEADERS)
    return HTMLResponse(content=body, status_code=status, headers=NO_CACHE_HEADERS)


def _error_response(
    request: Request, status: int, content: dict[str, Any]
) -> Response:
    if _is_browse_request(request):
        return _render_error_page(request, status)
    return JSONResponse(status_code=status, content=content)


def _vantage_exception_handler(request: Request, exc: VantageException) -> Response:
    """Return exc.to_dict() (or the error page) with the mapped status code."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    response = _error_response(request, status, exc.to_dict())
    if status == 405:
        response.headers["Allow"] = ", ".join(exc.details.get("allowed", ["GET", "HEAD"]))
    return response


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 422 with validation error details."""
    return JSONResponse(
        status_code=422,
        content={
            "error": "VALIDATION_ERROR",
            "message": "Request validation failed",
            "details": exc.errors(),
        },
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> Response:
    """Return JSON (or the error page) for Starlette HTTP exceptions."""
    response = _error_response(
        request,
        exc.status_code,
        {"error": "HTTP_ERROR", "message": exc.detail},
    )
    if exc.headers:
        response.headers.update(exc.headers)
    return response


def _generic_exception_handler(request: Request, exc: Exception) -> Response:
    """Return 500; include detail only when debug is True."""
    logger.error("Unhandled exception: %s", exc, exc_info=exc)
    settings = get_settings()
    detail: Any = str(exc) if settings.debug else "Internal server error"
    response = _error_response(
        request, 500, {"error": "INTERNAL_ERROR", "message": detail}
    )
    request_id = getattr(request.state, "request_id", None)
    if request_id:
        response.headers[settings.request_id_header] = request_id
    return response


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: VantageException (and
    subclasses), RequestValidationError, StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(VantageException, _vantage_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
