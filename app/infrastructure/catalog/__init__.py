"""Catalog storage implementations."""

from app.infrastructure.catalog.memory_catalog import InMemoryCatalog

__all__ = ["InMemoryCatalog"]
