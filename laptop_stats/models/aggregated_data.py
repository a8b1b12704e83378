from __future__ import annotations

from dataclasses import dataclass

from .laptop import Laptop

"""Aggregate models produced by the aggregation service.

Both types are ephemeral: they are recomputed from the current record
sequence whenever needed and never persisted.
"""

__all__ = [
    "AggregatedData",
    "SummaryStats",
    "NO_BRAND",
]

NO_BRAND = "N/A"


@dataclass(frozen=True)
class AggregatedData:
    """A ``{label, value, count?}`` triple for display tables."""
    label: str
    value: float
    count: int | None = None


@dataclass(frozen=True)
class SummaryStats:
    """Overall statistics for a record sequence."""
    total_laptops: int
    avg_price: float  # unrounded mean
    most_popular_brand: str
    most_expensive: Laptop | None

    @classmethod
    def empty(cls) -> SummaryStats:
        return cls(
            total_laptops=0,
            avg_price=0,
            most_popular_brand=NO_BRAND,
            most_expensive=None,
        )
