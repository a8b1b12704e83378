from __future__ import annotations

from dataclasses import dataclass, field

from .laptop import Laptop

"""Detailed outcome of a single table parse."""

__all__ = [
    "ParseReport",
]


@dataclass(frozen=True)
class ParseReport:
    """Records plus the counters needed to explain them.

    ``format_error`` distinguishes "could not parse" (a mandatory column is
    missing from the header) from "parsed, but no usable rows".
    """
    records: list[Laptop]
    data_lines: int = 0  # non-blank lines after the header
    dropped_rows: int = 0  # price <= 0
    failed_rows: int = 0  # record construction raised
    format_error: bool = False
    column_map: dict[str, int | None] = field(default_factory=dict)

    @property
    def parsed_rows(self) -> int:
        return len(self.records)
