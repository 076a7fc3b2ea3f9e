"""Tests for CollectionResolver (lookup, optional filter, parent marker)."""

import pytest

from app.application.dtos.browse import ROOT_PARENT
from app.application.use_cases.browse import CollectionResolver
from app.domain.enums import LibraryItemType
from app.domain.exceptions import ResourceNotFoundException


class TestResolve:
    def test_root_collection_gets_root_sentinel(self, library) -> None:
        view = CollectionResolver(library).resolve("infra")
        assert view.parent == ROOT_PARENT == "null"
        assert view.id == "infra"
        assert [c.id for c in view.collection.children] == ["web", "db"]

    def test_child_collection_gets_parent_id(self, library) -> None:
        view = CollectionResolver(library).resolve("web")
        assert view.parent == "infra"
        assert view.name == "Web servers"

    def test_unknown_collection_raises_not_found(self, library) -> None:
        with pytest.raises(ResourceNotFoundException) as exc_info:
            CollectionResolver(library).resolve("missing")
        assert exc_info.value.error_code == "RESOURCE_NOT_FOUND"
        assert exc_info.value.details == {
            "resource_type": "collection",
            "resource_id": "missing",
        }

    def test_empty_query_returns_stored_collection(self, library) -> None:
        stored = library.get_item("web", LibraryItemType.COLLECTION)
        view = CollectionResolver(library).resolve("web", "")
        assert view.collection is stored


class TestResolveFiltered:
    def test_query_filters_entries(self, library) -> None:
        view = CollectionResolver(library).resolve("web", "cpu")
        # g-tpl is a template graph and always kept.
        assert [e.id for e in view.collection.entries] == ["g-cpu", "g-tpl"]
        assert view.parent == "infra"

    def test_filter_leaves_stored_collection_untouched(self, library) -> None:
        CollectionResolver(library).resolve("web", "cpu")
        stored = library.get_item("web", LibraryItemType.COLLECTION)
        assert [e.id for e in stored.entries] == ["g-cpu", "g-disk", "g-tpl"]

    def test_filter_matching_nothing_is_empty_not_error(self, library) -> None:
        view = CollectionResolver(library).resolve("db", "zzz")
        assert view.collection.entries == []
        assert view.collection.children == []
        assert view.parent == "infra"

    def test_filtered_root_keeps_root_sentinel(self, library) -> None:
        view = CollectionResolver(library).resolve("infra", "disk")
        assert view.parent == ROOT_PARENT
        assert view.collection.entries == []
        assert [c.id for c in view.collection.children] == ["web", "db"]
