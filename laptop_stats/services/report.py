from __future__ import annotations

from .aggregation import DatasetReport, format_quantity
from .currency import CurrencyFormatter

"""Plain-text rendering of a dataset report for the CLI."""

__all__ = [
    "render_report_lines",
]


def render_report_lines(
    report: DatasetReport,
    formatter: CurrencyFormatter | None = None,
    top_companies: int = 10,
) -> list[str]:
    """Render the top companies by average price, the RAM distribution and
    a one-line stats summary, with prices passed through ``formatter``.
    """
    fmt = formatter or CurrencyFormatter()
    lines: list[str] = []

    companies = report.average_price_by_company[:top_companies]
    lines.append(f"Average price by company (top {len(companies)}):")
    width = max((len(c.label) for c in companies), default=0)
    for c in companies:
        lines.append(f"  {c.label:<{width}}  {fmt(c.value):>12}  ({c.count} laptops)")

    lines.append("RAM distribution:")
    for r in report.ram_distribution:
        lines.append(f"  {r.label:>6}  {format_quantity(r.value)}")

    stats = report.stats
    if stats.most_expensive is not None:
        top = stats.most_expensive
        expensive = f"{top.company} {top.type_name} ({fmt(top.price)})"
    else:
        expensive = "-"
    lines.append(
        f"Stats: laptops={stats.total_laptops} avg_price={fmt(stats.avg_price)} "
        f"most_popular={stats.most_popular_brand} most_expensive={expensive}"
    )
    return lines
