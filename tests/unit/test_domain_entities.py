"""Tests for catalog and library entities."""

import pytest

from app.domain.entities import Collection, CollectionEntry, Graph, Group, Metric, Origin, Source
from app.domain.enums import LibraryItemType
from app.domain.exceptions import ValidationException


class TestCatalogEntities:
    def test_names_required(self) -> None:
        with pytest.raises(ValidationException):
            Origin(name="")
        with pytest.raises(ValidationException):
            Source(name="", origin="o")
        with pytest.raises(ValidationException):
            Metric(name="", source="s")

    def test_origin_copy_is_deep_enough(self) -> None:
        origin = Origin(name="o", sources={"s": Source(name="s", origin="o")})
        clone = origin.copy()
        clone.sources["s"].metrics["m"] = Metric(name="m", source="s")
        clone.sources["t"] = Source(name="t", origin="o")
        assert origin.sources["s"].metrics == {}
        assert list(origin.sources) == ["s"]


class TestLibraryEntities:
    def test_ids_required(self) -> None:
        with pytest.raises(ValidationException):
            Graph(id="", name="g")
        with pytest.raises(ValidationException):
            Collection(id="", name="c")

    def test_group_type_must_be_a_group(self) -> None:
        with pytest.raises(ValidationException):
            Group(id="g", name="g", type=LibraryItemType.GRAPH)

    def test_collection_copy_shares_parent_not_lists(self) -> None:
        parent = Collection(id="p", name="P")
        child = Collection(id="c", name="C", parent=parent, entries=[CollectionEntry(id="g1")])
        clone = child.copy()
        clone.entries.clear()
        assert clone.parent is parent
        assert len(child.entries) == 1
