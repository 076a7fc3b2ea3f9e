"""Catalog domain entities.

The catalog maps origins to sources and sources to metrics. Dict keys are
the entity names, so a key is unique within its parent only: the same
source name may appear under several origins.
"""

from dataclasses import dataclass, field

from app.domain.exceptions import ValidationException


@dataclass
class Metric:
    """A metric reported by a source."""

    name: str
    source: str
    original_name: str | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValidationException("Metric name is required", field="name")
        if self.original_name is None:
            self.original_name = self.name


@dataclass
class Source:
    """A source (e.g. host) within an origin, holding its metrics by name."""

    name: str
    origin: str
    metrics: dict[str, Metric] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValidationException("Source name is required", field="name")

    def copy(self) -> "Source":
        """Return a shallow copy with its own metrics dict."""
        return Source(name=self.name, origin=self.origin, metrics=dict(self.metrics))


@dataclass
class Origin:
    """An origin (e.g. a collector backend), holding its sources by name."""

    name: str
    sources: dict[str, Source] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValidationException("Origin name is required", field="name")

    def copy(self) -> "Origin":
        """Return a copy whose sources dict and source metric dicts are private."""
        return Origin(
            name=self.name,
            sources={key: source.copy() for key, source in self.sources.items()},
        )
