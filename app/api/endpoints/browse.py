"""Browse front end: index, collection and search HTML views.

A single catch-all route hands method and path to BrowseDispatcher, then
renders the view it selects. Errors (404, 405) are raised as domain
exceptions and rendered as HTML by the exception handlers.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from app.api.dependencies import (
    get_collection_resolver,
    get_dispatcher,
    get_renderer,
    get_search_service,
)
from app.application.interfaces import ITemplateRenderer
from app.application.services.dispatcher import BrowseDispatcher
from app.application.use_cases import CollectionResolver, SearchService
from app.domain.enums import BrowseView

router = APIRouter()

_ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.api_route(
    "/{rest:path}",
    methods=_ALL_METHODS,
    response_class=HTMLResponse,
    include_in_schema=False,
)
def browse(
    request: Request,
    dispatcher: Annotated[BrowseDispatcher, Depends(get_dispatcher)],
    renderer: Annotated[ITemplateRenderer, Depends(get_renderer)],
    resolver: Annotated[CollectionResolver, Depends(get_collection_resolver)],
    search_svc: Annotated[SearchService, Depends(get_search_service)],
) -> HTMLResponse:
    """Render the browse view addressed by the request path."""
    route = dispatcher.dispatch(request.method, request.url.path)
    # First value wins when q is repeated.
    queries = request.query_params.getlist("q")
    query = queries[0] if queries else ""
    context: dict = {"request": request, "query": query}

    if route.view == BrowseView.COLLECTION:
        context["collection"] = resolver.resolve(route.identifier or "", query)
        template = "browse/collection.html"
    elif route.view == BrowseView.SEARCH:
        context["search"] = search_svc.search(query)
        template = "browse/search.html"
    else:
        template = "browse/index.html"

    return HTMLResponse(content=renderer.render(template, context))
