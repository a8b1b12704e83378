from __future__ import annotations

import logging
import re
from pathlib import Path

from ..models.laptop import UNKNOWN, Laptop
from ..models.parse_report import ParseReport
from .normalizer import clean_number, parse_leading_float
from .tokenizer import tokenize_row

"""Laptop listing table parser.

The first line of the text is the header. Each canonical field is located by
case-insensitive substring match against the header cells (first matching
cell wins), so headers such as ``"Price (INR)"`` or ``"Price_euros"`` resolve
to the price column. Company and price are mandatory: without them the whole
input is rejected and an empty result is returned.

Problems never raise to the caller:
- missing mandatory column -> empty result, INFO diagnostic
- a row whose construction raises -> row skipped, WARN diagnostic
- unparsable numeric cell -> 0 via the normalizer, silent
- price <= 0 -> row dropped, silent
"""

__all__ = [
    "COLUMN_CANDIDATES",
    "MANDATORY_FIELDS",
    "TableReadError",
    "build_column_map",
    "parse_csv",
    "parse_csv_report",
    "read_csv_file",
]

logger = logging.getLogger(__name__)

# Evaluated in this order; each field takes the first header cell containing
# any of its substrings.
COLUMN_CANDIDATES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("company", ("company",)),
    ("type_name", ("typename", "type")),
    ("inches", ("inches",)),
    ("screen_resolution", ("screenresolution", "screen")),
    ("cpu", ("cpu",)),
    ("ram", ("ram",)),
    ("memory", ("memory", "storage")),
    ("gpu", ("gpu",)),
    ("op_sys", ("opsys", "os")),
    ("weight", ("weight",)),
    ("price", ("price",)),
)

MANDATORY_FIELDS = ("price", "company")

_LINE_BREAK = re.compile(r"\r?\n")
_BOM = "\ufeff"


class TableReadError(Exception):
    """Raised when a table file cannot be read from disk."""


def build_column_map(header_cells: list[str]) -> dict[str, int | None]:
    """Map each canonical field to the index of its header cell (None if absent).

    ``header_cells`` are expected lower-cased and trimmed.
    """
    column_map: dict[str, int | None] = {}
    for field_name, substrings in COLUMN_CANDIDATES:
        column_map[field_name] = next(
            (idx for idx, cell in enumerate(header_cells) if any(s in cell for s in substrings)),
            None,
        )
    return column_map


def _cell(row: list[str], index: int | None) -> str:
    if index is None or index >= len(row):
        return ""
    return row[index]


def _build_record(row_id: int, row: list[str], column_map: dict[str, int | None]) -> Laptop:
    def text(field_name: str) -> str:
        return _cell(row, column_map[field_name])

    return Laptop(
        id=row_id,
        company=text("company") or UNKNOWN,
        type_name=text("type_name") or UNKNOWN,
        inches=parse_leading_float(text("inches")),
        screen_resolution=text("screen_resolution"),
        cpu=text("cpu"),
        ram=clean_number(text("ram")),
        memory=text("memory"),
        gpu=text("gpu"),
        op_sys=text("op_sys"),
        weight=clean_number(text("weight")),
        price=clean_number(text("price")),
    )


def parse_csv_report(text: str) -> ParseReport:
    """Parse the full table text and report what happened to each row."""
    lines = _LINE_BREAK.split(text.lstrip(_BOM).strip()) if text else []
    if len(lines) < 2:
        logger.info("table has no data rows")
        return ParseReport(records=[])

    header = [cell.lower().strip() for cell in tokenize_row(lines[0])]
    column_map = build_column_map(header)

    missing = [name for name in MANDATORY_FIELDS if column_map[name] is None]
    if missing:
        logger.info(f"could not find mandatory columns {missing} in header: {header}")
        return ParseReport(records=[], format_error=True, column_map=column_map)

    records: list[Laptop] = []
    data_lines = 0
    dropped = 0
    failed = 0
    for row_id in range(1, len(lines)):
        line = lines[row_id].strip()
        if not line:
            continue
        data_lines += 1
        row = tokenize_row(line)
        try:
            laptop = _build_record(row_id, row, column_map)
        except Exception as e:
            failed += 1
            logger.warning(f"failed to parse row {row_id}: {row} ({e})")
            continue
        # Sanity check: price must be positive
        if laptop.price > 0:
            records.append(laptop)
        else:
            dropped += 1

    logger.info(f"parsed {len(records)} laptops successfully")
    return ParseReport(
        records=records,
        data_lines=data_lines,
        dropped_rows=dropped,
        failed_rows=failed,
        column_map=column_map,
    )


def parse_csv(text: str) -> list[Laptop]:
    """Parse the full table text into an ordered list of records.

    Returns an empty list when there are no data rows or when the header lacks
    the company or price column.
    """
    return parse_csv_report(text).records


def read_csv_file(path: Path, encoding: str = "utf-8-sig") -> ParseReport:
    """Read a table file and parse it.

    Raises:
        TableReadError: the file is missing, unreadable or not decodable
    """
    try:
        text = path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError, LookupError) as e:
        raise TableReadError(f"cannot read {path}: {e}") from e
    logger.debug(f"read {path} ({len(text)} chars)")
    return parse_csv_report(text)
