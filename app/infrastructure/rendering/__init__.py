"""Rendering collaborator (Jinja2 templates)."""

from app.infrastructure.rendering.templates import TemplateRenderer, highlight

__all__ = ["TemplateRenderer", "highlight"]
