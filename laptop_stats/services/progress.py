from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

from tqdm import tqdm
from tqdm.std import tqdm as TqdmType

"""Progress display service with tqdm (TTY only).

A single tqdm bar tracks files processed in a batch run. In non-TTY
environments (CI, pipes) the bar is disabled to avoid ANSI control sequence
spam in captured output.
"""

__all__ = [
    "ProgressTracker",
    "is_tty_enabled",
]


def is_tty_enabled() -> bool:
    """Return True when stdout is a TTY and progress should be displayed."""
    return sys.stdout.isatty()


class ProgressTracker:
    """Progress tracker using tqdm for file processing."""

    def __init__(self, total_files: int, *, description: str = "Processing files") -> None:
        self.total_files = total_files
        self.description = description

        self.enabled = is_tty_enabled()
        self.pbar: TqdmType[Any] | None
        if self.enabled:
            self.pbar = tqdm(
                total=total_files,
                desc=description,
                unit="file",
                disable=False,
                leave=True,
                position=0,
                ncols=80,
                ascii=True,
            )
        else:
            self.pbar = None

    def start_file(self, file_path: Path) -> None:
        if self.enabled and self.pbar is not None:
            self.pbar.set_description(f"{self.description} ({file_path.name})")

    def finish_file(self, records: int = 0) -> None:
        if self.enabled and self.pbar is not None:
            self.pbar.update(1)
            self.pbar.set_postfix(records=records)
            self.pbar.set_description(self.description)

    def close(self) -> None:
        if self.enabled and self.pbar is not None:
            self.pbar.close()
            self.pbar = None

    def __enter__(self) -> ProgressTracker:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
