from __future__ import annotations

from ..models.processing_result import ProcessingResult

"""SUMMARY line rendering for batch runs.

Format:
SUMMARY files={total}/{total} success={success} failed={failed}
records={records} dropped={dropped} elapsed_sec={elapsed}
"""


def _format_seconds(seconds: float) -> str:
    if seconds == 0:
        return "0"
    if seconds == int(seconds):
        return str(int(seconds))
    if seconds < 0.01:
        # avoid scientific notation
        return f"{seconds:.6f}".rstrip("0").rstrip(".")
    return str(round(seconds, 3))


def render_summary_line(total_files: int, result: ProcessingResult) -> str:
    """Render the SUMMARY line for a batch result.

    Examples:
        >>> from datetime import datetime, timezone
        >>> start = datetime(2024, 1, 1, 10, 0, 0, tzinfo=timezone.utc)
        >>> end = datetime(2024, 1, 1, 10, 0, 2, tzinfo=timezone.utc)
        >>> result = ProcessingResult(
        ...     success_files=1, failed_files=0, total_records=1000,
        ...     total_dropped_rows=3, start_time=start, end_time=end,
        ...     elapsed_seconds=2.0,
        ... )
        >>> render_summary_line(1, result)
        'SUMMARY files=1/1 success=1 failed=0 records=1000 dropped=3 elapsed_sec=2'
    """
    return (
        f"SUMMARY files={total_files}/{total_files} "
        f"success={result.success_files} "
        f"failed={result.failed_files} "
        f"records={result.total_records} "
        f"dropped={result.total_dropped_rows} "
        f"elapsed_sec={_format_seconds(result.elapsed_seconds)}"
    )
