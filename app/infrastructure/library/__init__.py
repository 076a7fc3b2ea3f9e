"""Library storage implementations."""

from app.infrastructure.library.memory_library import InMemoryLibrary

__all__ = ["InMemoryLibrary"]
