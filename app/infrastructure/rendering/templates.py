"""HTML rendering for browse views (Jinja2).

Templates live under Settings.template_dir and extend layout.html.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup, escape

from app.application.services.tokenizer import tokenize


def highlight(text: str, query: str | None) -> Markup:
    """Wrap every occurrence of each query token in a highlight span.

    Matching is case-insensitive; the original casing of text is kept and
    everything is HTML-escaped.
    """
    tokens = sorted({t for t in tokenize(query or "") if t}, key=len, reverse=True)
    if not tokens:
        return escape(text)
    pattern = re.compile("|".join(re.escape(t) for t in tokens), re.IGNORECASE)
    parts: list[str] = []
    last = 0
    for found in pattern.finditer(text):
        parts.append(escape(text[last:found.start()]))
        parts.append(Markup('<span class="highlight">%s</span>') % found.group(0))
        last = found.end()
    parts.append(escape(text[last:]))
    return Markup("").join(parts)


class TemplateRenderer:
    """Renders named templates with a data mapping."""

    def __init__(self, template_dir: str, url_prefix: str = "") -> None:
        self.url_prefix = url_prefix
        self._env = Environment(
            loader=FileSystemLoader(template_dir),
            autoescape=select_autoescape(["html"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self._env.globals["asset"] = self.asset
        self._env.globals["url_prefix"] = url_prefix
        self._env.filters["hl"] = highlight

    def asset(self, path: str) -> str:
        """Return the public URL of a static asset."""
        return f"{self.url_prefix}/static/{path.lstrip('/')}"

    def render(self, template_name: str, context: Mapping[str, Any]) -> str:
        """Render template_name. Raises jinja2 errors (TemplateNotFound, UndefinedError)."""
        return self._env.get_template(template_name).render(**context)
