"""Lock-guarded set used for deduplicating counts across worker threads."""

from __future__ import annotations

import threading
from collections.abc import Hashable, Iterable


class ConcurrentSet:
    """Set whose insertions and size reads are serialized by a lock.

    Only the operations needed for distinct counting are exposed.
    """

    def __init__(self, items: Iterable[Hashable] | None = None) -> None:
        self._items: set[Hashable] = set(items or ())
        self._lock = threading.Lock()

    def add(self, item: Hashable) -> None:
        with self._lock:
            self._items.add(item)

    def update(self, items: Iterable[Hashable]) -> None:
        """Add every item under a single lock acquisition."""
        batch = list(items)
        with self._lock:
            self._items.update(batch)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
