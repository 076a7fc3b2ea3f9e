"""Seed file schemas for the catalog and library (JSON, loaded at startup)."""

from typing import Any, Literal

from pydantic import BaseModel, Field


class SourceSeed(BaseModel):
    name: str = Field(..., min_length=1)
    metrics: list[str] = Field(default_factory=list)


class OriginSeed(BaseModel):
    name: str = Field(..., min_length=1)
    sources: list[SourceSeed] = Field(default_factory=list)


class CatalogSeed(BaseModel):
    """Catalog seed: origins with their sources and metric names."""

    origins: list[OriginSeed] = Field(default_factory=list)


class GraphSeed(BaseModel):
    id: str = Field(..., min_length=1)
    name: str
    description: str = ""
    template: bool = False


class CollectionEntrySeed(BaseModel):
    id: str = Field(..., min_length=1)
    options: dict[str, Any] = Field(default_factory=dict)


class CollectionSeed(BaseModel):
    id: str = Field(..., min_length=1)
    name: str
    description: str = ""
    parent: str | None = None
    entries: list[CollectionEntrySeed] = Field(default_factory=list)


class GroupSeed(BaseModel):
    id: str = Field(..., min_length=1)
    name: str
    type: Literal["sourcegroup", "metricgroup"]
    entries: list[dict[str, Any]] = Field(default_factory=list)


class LibrarySeed(BaseModel):
    """Library seed. Collections reference their parent by ID."""

    graphs: list[GraphSeed] = Field(default_factory=list)
    collections: list[CollectionSeed] = Field(default_factory=list)
    groups: list[GroupSeed] = Field(default_factory=list)
