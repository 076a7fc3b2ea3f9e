"""Tests for BrowseDispatcher (path → view, method checks)."""

import pytest

from app.application.services.dispatcher import BrowseDispatcher
from app.domain.enums import BrowseView
from app.domain.exceptions import MethodNotAllowedException, ResourceNotFoundException


class TestDispatch:
    def setup_method(self) -> None:
        self.dispatcher = BrowseDispatcher()

    def test_index(self) -> None:
        route = self.dispatcher.dispatch("GET", "/browse/")
        assert route.view == BrowseView.INDEX
        assert route.identifier is None

    def test_search(self) -> None:
        assert self.dispatcher.dispatch("GET", "/browse/search").view == BrowseView.SEARCH

    def test_collection_identifier_is_path_remainder(self) -> None:
        route = self.dispatcher.dispatch("GET", "/browse/collections/web/servers")
        assert route.view == BrowseView.COLLECTION
        assert route.identifier == "web/servers"

    def test_head_allowed(self) -> None:
        assert self.dispatcher.dispatch("HEAD", "/browse/").view == BrowseView.INDEX

    def test_lowercase_method_accepted(self) -> None:
        assert self.dispatcher.dispatch("get", "/browse/").view == BrowseView.INDEX

    @pytest.mark.parametrize("method", ["POST", "PUT", "DELETE", "PATCH"])
    def test_other_methods_rejected(self, method: str) -> None:
        with pytest.raises(MethodNotAllowedException) as exc_info:
            self.dispatcher.dispatch(method, "/browse/search")
        assert exc_info.value.details["method"] == method

    def test_method_checked_before_path(self) -> None:
        with pytest.raises(MethodNotAllowedException):
            self.dispatcher.dispatch("POST", "/browse/unknown")

    @pytest.mark.parametrize("path", ["/browse/unknown", "/browse/search/", "/browse", "/other/"])
    def test_unknown_path_not_found(self, path: str) -> None:
        with pytest.raises(ResourceNotFoundException):
            self.dispatcher.dispatch("GET", path)


class TestDispatchWithPrefix:
    def test_prefix_is_part_of_every_path(self) -> None:
        dispatcher = BrowseDispatcher(url_prefix="/vantage")
        assert dispatcher.dispatch("GET", "/vantage/browse/").view == BrowseView.INDEX
        assert dispatcher.dispatch("GET", "/vantage/browse/collections/x").identifier == "x"
        with pytest.raises(ResourceNotFoundException):
            dispatcher.dispatch("GET", "/browse/")
