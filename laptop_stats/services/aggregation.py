from __future__ import annotations

from collections.abc import Sequence
import math
from dataclasses import dataclass, fields

import numpy as np
import pandas as pd

from ..models.aggregated_data import AggregatedData, SummaryStats
from ..models.laptop import Laptop

"""Descriptive aggregates over a parsed record sequence.

All functions are pure: they take the current records and return freshly
computed display tables. Group order is first-seen order so that ties are
resolved deterministically by source row order.
"""

__all__ = [
    "DatasetReport",
    "records_to_frame",
    "average_price_by_company",
    "ram_distribution",
    "summary_stats",
    "build_report",
    "format_quantity",
]

_COLUMNS = [f.name for f in fields(Laptop)]


@dataclass(frozen=True)
class DatasetReport:
    """All aggregates for one loaded dataset."""
    average_price_by_company: list[AggregatedData]
    ram_distribution: list[AggregatedData]
    stats: SummaryStats


def records_to_frame(records: Sequence[Laptop]) -> pd.DataFrame:
    """Build a DataFrame with one row per record, in sequence order."""
    return pd.DataFrame([r.to_dict() for r in records], columns=_COLUMNS)


def format_quantity(value: float) -> str:
    """Render a number without a trailing ``.0`` (8.0 -> "8", 1.5 -> "1.5")."""
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


def _round_half_up(value: float) -> float:
    # inf/nan pass through; format_currency renders them as the zero sentinel
    if not math.isfinite(value):
        return value
    return float(np.floor(value + 0.5))


def _display_number(value: float) -> float | int:
    return int(value) if math.isfinite(value) else value


def average_price_by_company(records: Sequence[Laptop]) -> list[AggregatedData]:
    """Mean price per company, rounded, sorted descending by mean."""
    if not records:
        return []
    df = records_to_frame(records)
    grouped = df.groupby("company", sort=False)["price"].agg(total="sum", n="count")
    grouped["avg"] = (grouped["total"] / grouped["n"]).map(_round_half_up)
    # stable sort keeps first-seen order between equal averages
    grouped = grouped.sort_values("avg", ascending=False, kind="stable")
    return [
        AggregatedData(label=str(company), value=_display_number(avg), count=int(n))
        for company, avg, n in zip(grouped.index, grouped["avg"], grouped["n"])
    ]


def ram_distribution(records: Sequence[Laptop]) -> list[AggregatedData]:
    """Number of records per exact RAM size, ascending by size."""
    if not records:
        return []
    df = records_to_frame(records)
    counts = df.groupby("ram", sort=True).size()
    return [
        AggregatedData(label=f"{format_quantity(ram)}GB", value=int(n))
        for ram, n in counts.items()
    ]


def summary_stats(records: Sequence[Laptop]) -> SummaryStats:
    """Count, mean price, most frequent brand and most expensive record.

    The most popular brand is the first brand (in record order) whose count is
    not strictly exceeded by any later-seen brand.
    """
    if not records:
        return SummaryStats.empty()

    total = len(records)
    avg_price = sum(r.price for r in records) / total

    brand_counts: dict[str, int] = {}
    brand_order: list[str] = []
    for r in records:
        if r.company not in brand_counts:
            brand_counts[r.company] = 0
            brand_order.append(r.company)
        brand_counts[r.company] += 1

    best = brand_order[0]
    for brand in brand_order[1:]:
        if brand_counts[brand] > brand_counts[best]:
            best = brand

    # max() keeps the first of equal maxima
    most_expensive = max(records, key=lambda r: r.price)

    return SummaryStats(
        total_laptops=total,
        avg_price=avg_price,
        most_popular_brand=best,
        most_expensive=most_expensive,
    )


def build_report(records: Sequence[Laptop]) -> DatasetReport:
    return DatasetReport(
        average_price_by_company=average_price_by_company(records),
        ram_distribution=ram_distribution(records),
        stats=summary_stats(records),
    )
