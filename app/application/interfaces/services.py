"""Service interfaces (ports) for the application layer."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol


class ITemplateRenderer(Protocol):
    """Protocol for the rendering collaborator (template name + data → body)."""

    def render(self, template_name: str, context: Mapping[str, Any]) -> str:
        """Render template_name with context and return the response body."""
