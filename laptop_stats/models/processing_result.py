from __future__ import annotations

import statistics
from dataclasses import dataclass
from datetime import datetime

from .parse_report import ParseReport

"""Processing result models for batch runs over several CSV files.

Each file is an independent dataset; results are aggregated here only for
the SUMMARY line and exit code.
"""

__all__ = [
    "FileStat",
    "ProcessingResult",
]


@dataclass(frozen=True)
class FileStat:
    """Per-file processing statistics."""
    file_name: str
    status: str  # success/failed
    records: int
    dropped_rows: int
    failed_rows: int
    elapsed_seconds: float
    report: ParseReport | None = None  # None when the file could not be read


@dataclass(frozen=True)
class ProcessingResult:
    """Aggregated results of a batch run."""
    success_files: int
    failed_files: int
    total_records: int
    total_dropped_rows: int
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float
    file_stats: list[FileStat] | None = None

    @property
    def avg_file_seconds(self) -> float:
        if not self.file_stats:
            return 0.0
        return statistics.mean(s.elapsed_seconds for s in self.file_stats)
