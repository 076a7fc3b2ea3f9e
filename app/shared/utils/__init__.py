"""Shared utilities: concurrency helpers."""

from app.shared.utils.concurrent_set import ConcurrentSet

__all__ = ["ConcurrentSet"]
