"""DTOs for catalog and library statistics."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CardinalityReport:
    """Distinct counts over the catalog and structural sizes of the library.

    sources and metrics are distinct keys across all origins; the other
    fields are plain sizes.
    """

    origins: int
    sources: int
    metrics: int
    graphs: int
    collections: int
    groups: int
