"""Tests for the all-tokens-must-match corpus predicate."""

from dataclasses import dataclass

import pytest

from app.application.services.matcher import matches
from app.domain.entities import Collection, Source


@dataclass
class Named:
    name: str


class TestMatches:
    def test_all_tokens_are_substrings(self) -> None:
        assert matches(Named("CPU Load Avg"), ["cpu", "load"]) is True

    def test_one_missing_token_fails(self) -> None:
        assert matches(Named("CPU Load Avg"), ["cpu", "memory"]) is False

    def test_case_insensitive(self) -> None:
        assert matches(Named("web01.EXAMPLE.net"), ["example"]) is True

    def test_substring_not_whole_word(self) -> None:
        assert matches(Named("loadavg"), ["oad"]) is True

    def test_empty_token_sequence_never_matches(self) -> None:
        assert matches(Named("anything"), []) is False

    def test_empty_token_matches_everything(self) -> None:
        assert matches(Named("anything"), [""]) is True
        assert matches(Named("anything"), ["any", ""]) is True

    @pytest.mark.parametrize(
        "entity",
        [
            Source(name="CPU Load Avg", origin="collectd"),
            Collection(id="c1", name="CPU Load Avg"),
        ],
    )
    def test_sources_and_collections_are_searchable(self, entity: object) -> None:
        assert matches(entity, ["load", "avg"]) is True
