"""All-tokens-must-match predicate over a single searchable name."""

from collections.abc import Sequence
from typing import Protocol


class Searchable(Protocol):
    """Anything exposing a display name (catalog source, library collection)."""

    name: str


def matches(entity: Searchable, tokens: Sequence[str]) -> bool:
    """Return True iff every token is a substring of the lowercased entity name.

    An empty token sequence never matches.
    """
    if not tokens:
        return False
    name = entity.name.lower()
    return all(token in name for token in tokens)
