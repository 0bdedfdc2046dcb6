"""
Workbook loader for daily branch sales.

Reads the first worksheet of an .xlsx file: row 1 is a header, column A holds a
branch label and columns B-G the units sold of products A-F. Rows come back in
sheet order so that position i is branch i + 1.
"""

from __future__ import annotations

from numbers import Real
from zipfile import BadZipFile
from pathlib import Path
from typing import Any, List, Sequence, Tuple

from openpyxl import Workbook, load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from branch_sales.domain.models import PRODUCT_COUNT, PRODUCT_NAMES, Record, branch_id_for
from branch_sales.errors import DataLoadError
from branch_sales.utils.logging import get_logger

log = get_logger(__name__)

FIRST_DATA_ROW = 2
FIRST_PRODUCT_COLUMN = 2  # column B


def _parse_units(row_number: int, cells: Sequence[Any]) -> Record:
    if len(cells) < PRODUCT_COUNT:
        raise DataLoadError(
            f"row {row_number}: expected {PRODUCT_COUNT} product columns, got {len(cells)}"
        )
    units: List[int] = []
    for offset, value in enumerate(cells[:PRODUCT_COUNT]):
        column = chr(ord("A") + FIRST_PRODUCT_COLUMN - 1 + offset)
        if isinstance(value, bool) or not isinstance(value, Real):
            raise DataLoadError(f"row {row_number}, column {column}: not a number: {value!r}")
        count = int(value)
        if count < 0:
            raise DataLoadError(f"row {row_number}, column {column}: negative units {count}")
        units.append(count)
    return tuple(units)


def load_sales_records(path: Path | str) -> List[Record]:
    """
    Read every data row of the first worksheet as a record of six unit counts.

    Fractional cell values are truncated toward zero. Rows with no values at all
    (common at the end of edited sheets) are skipped.

    Raises
    ------
    DataLoadError
        If the file is missing or unreadable, or a row is malformed.
    """
    workbook_path = Path(path)
    if not workbook_path.is_file():
        raise DataLoadError(f"Sales workbook not found: {workbook_path}")

    try:
        workbook = load_workbook(workbook_path, read_only=True, data_only=True)
    except (InvalidFileException, BadZipFile, OSError, KeyError) as exc:
        raise DataLoadError(f"Cannot open sales workbook {workbook_path}: {exc}") from exc

    records: List[Record] = []
    try:
        sheet = workbook.worksheets[0]
        rows = sheet.iter_rows(
            min_row=FIRST_DATA_ROW,
            min_col=FIRST_PRODUCT_COLUMN,
            max_col=FIRST_PRODUCT_COLUMN + PRODUCT_COUNT - 1,
            values_only=True,
        )
        for row_number, cells in enumerate(rows, start=FIRST_DATA_ROW):
            if all(value is None for value in cells):
                continue
            records.append(_parse_units(row_number, cells))
    finally:
        workbook.close()

    log.debug("Parsed workbook", extra={"path": str(workbook_path), "rows": len(records)})
    return records


def write_sales_workbook(path: Path | str, records: Sequence[Sequence[int]]) -> Path:
    """
    Write `records` in the layout `load_sales_records` reads, one branch per row.
    """
    workbook_path = Path(path)
    workbook_path.parent.mkdir(parents=True, exist_ok=True)

    workbook = Workbook(write_only=True)
    sheet = workbook.create_sheet("Sales")
    sheet.append(["Branch", *PRODUCT_NAMES])
    for index, record in enumerate(records):
        sheet.append([branch_id_for(index), *record])
    workbook.save(workbook_path)
    return workbook_path


__all__ = ["load_sales_records", "write_sales_workbook"]
