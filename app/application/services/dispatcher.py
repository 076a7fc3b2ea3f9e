"""Browse path dispatcher: request method and path → browse view.

Holds no domain logic; it only decides which view a path addresses and
extracts the path identifier handed to the resolver.
"""

from app.application.dtos.browse import BrowseRoute
from app.domain.enums import BrowseView
from app.domain.exceptions import MethodNotAllowedException, ResourceNotFoundException

ALLOWED_METHODS = ("GET", "HEAD")


class BrowseDispatcher:
    """Route browse paths to the index, collection or search view."""

    def __init__(self, url_prefix: str = "") -> None:
        self.browse_path = f"{url_prefix}/browse/"
        self.collections_path = f"{self.browse_path}collections/"
        self.search_path = f"{self.browse_path}search"

    def dispatch(self, method: str, path: str) -> BrowseRoute:
        """Return the route for path.

        Raises:
            MethodNotAllowedException: method is not GET or HEAD.
            ResourceNotFoundException: path addresses no browse view.
        """
        if method.upper() not in ALLOWED_METHODS:
            raise MethodNotAllowedException(method.upper(), ALLOWED_METHODS)
        if path.startswith(self.collections_path):
            return BrowseRoute(
                BrowseView.COLLECTION, path[len(self.collections_path):]
            )
        if path == self.search_path:
            return BrowseRoute(BrowseView.SEARCH)
        if path == self.browse_path:
            return BrowseRoute(BrowseView.INDEX)
        raise ResourceNotFoundException("path", path)
