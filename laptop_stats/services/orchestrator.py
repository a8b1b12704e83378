from __future__ import annotations

import logging
import time
from datetime import UTC, datetime
from pathlib import Path

from ..config.loader import StatsConfig
from ..models.processing_result import FileStat, ProcessingResult
from ..table.parser import TableReadError, read_csv_file
from .progress import ProgressTracker

"""Batch processing of laptop listing tables.

Every file is parsed on its own and yields an independent dataset; nothing is
merged across files. A file counts as failed when it cannot be read or when
its header lacks a mandatory column.
"""

logger = logging.getLogger(__name__)


class ProcessingError(Exception):
    """Raised when a batch run cannot start."""


def scan_csv_files(directory: Path) -> list[Path]:
    """List ``*.csv`` files in ``directory`` (non-recursive, sorted by name).

    Raises:
        ProcessingError: the directory does not exist
    """
    if not directory.is_dir():
        raise ProcessingError(f"directory not found: {directory}")
    return sorted(p for p in directory.iterdir() if p.is_file() and p.suffix.lower() == ".csv")


def process_file(path: Path, config: StatsConfig) -> FileStat:
    started = time.perf_counter()
    try:
        report = read_csv_file(path, encoding=config.encoding)
    except TableReadError as e:
        logger.error(f"file={path.name} {e}")
        return FileStat(
            file_name=path.name,
            status="failed",
            records=0,
            dropped_rows=0,
            failed_rows=0,
            elapsed_seconds=time.perf_counter() - started,
        )

    status = "failed" if report.format_error else "success"
    if report.format_error:
        logger.error(f"file={path.name} missing mandatory columns (company, price)")
    else:
        logger.info(
            f"file={path.name} records={report.parsed_rows} "
            f"dropped={report.dropped_rows} failed_rows={report.failed_rows}"
        )
    return FileStat(
        file_name=path.name,
        status=status,
        records=report.parsed_rows,
        dropped_rows=report.dropped_rows,
        failed_rows=report.failed_rows,
        elapsed_seconds=time.perf_counter() - started,
        report=report,
    )


def process_files(paths: list[Path], config: StatsConfig) -> ProcessingResult:
    """Parse each file and aggregate the per-file statistics."""
    start_time = datetime.now(UTC)
    stats: list[FileStat] = []

    with ProgressTracker(len(paths), description="Parsing tables") as progress:
        for path in paths:
            progress.start_file(path)
            stat = process_file(path, config)
            stats.append(stat)
            progress.finish_file(records=stat.records)

    end_time = datetime.now(UTC)
    result = ProcessingResult(
        success_files=sum(1 for s in stats if s.status == "success"),
        failed_files=sum(1 for s in stats if s.status == "failed"),
        total_records=sum(s.records for s in stats),
        total_dropped_rows=sum(s.dropped_rows for s in stats),
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=(end_time - start_time).total_seconds(),
        file_stats=stats,
    )
    logger.debug(f"avg_file_sec={result.avg_file_seconds:.6f}")
    return result
