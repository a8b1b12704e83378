from __future__ import annotations

from pathlib import Path

import pytest

from laptop_stats.config.loader import StatsConfig
from laptop_stats.services.orchestrator import (
    ProcessingError,
    process_file,
    process_files,
    scan_csv_files,
)


def test_scan_csv_files_sorted_non_recursive(temp_workdir: Path):
    data = temp_workdir / "data"
    (data / "b.csv").write_text("x", encoding="utf-8")
    (data / "a.CSV").write_text("x", encoding="utf-8")
    (data / "notes.txt").write_text("x", encoding="utf-8")
    (data / "nested").mkdir()
    (data / "nested" / "c.csv").write_text("x", encoding="utf-8")
    assert [p.name for p in scan_csv_files(data)] == ["a.CSV", "b.csv"]


def test_scan_csv_files_missing_directory(temp_workdir: Path):
    with pytest.raises(ProcessingError):
        scan_csv_files(temp_workdir / "missing")


def test_process_file_success(sample_csv_file: Path):
    stat = process_file(sample_csv_file, StatsConfig())
    assert stat.status == "success"
    assert stat.records == 4
    assert stat.dropped_rows == 1
    assert stat.report is not None and stat.report.parsed_rows == 4


def test_process_file_format_error(temp_workdir: Path):
    bad = temp_workdir / "data" / "bad.csv"
    bad.write_text("Brand,Cost\nApple,1\n", encoding="utf-8")
    stat = process_file(bad, StatsConfig())
    assert stat.status == "failed"
    assert stat.report is not None and stat.report.format_error


def test_process_file_unreadable(temp_workdir: Path):
    stat = process_file(temp_workdir / "data" / "gone.csv", StatsConfig())
    assert stat.status == "failed"
    assert stat.report is None


def test_process_files_aggregates(sample_csv_file: Path, temp_workdir: Path):
    other = temp_workdir / "data" / "other.csv"
    other.write_text("Company,Price\nAsus,100\nAsus,0\n", encoding="utf-8")
    bad = temp_workdir / "data" / "zbad.csv"
    bad.write_text("Name,Cost\nx,1\n", encoding="utf-8")

    result = process_files([sample_csv_file, other, bad], StatsConfig())
    assert result.success_files == 2
    assert result.failed_files == 1
    assert result.total_records == 5
    assert result.total_dropped_rows == 2
    assert [s.file_name for s in result.file_stats] == ["laptops.csv", "other.csv", "zbad.csv"]
    assert result.elapsed_seconds >= 0


def test_process_files_empty():
    result = process_files([], StatsConfig())
    assert result.success_files == 0
    assert result.failed_files == 0
    assert result.file_stats == []
