"""Read the first sheet of a score spreadsheet as rows of text cells."""

import csv
import io
from pathlib import Path
from typing import Any, BinaryIO
from zipfile import BadZipFile

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException


class SpreadsheetError(Exception):
    """The input file could not be opened or read."""


def cell_text(value: Any) -> str:
    """Render a cell value the way it would be typed into the sheet."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _trim(row: list[str]) -> list[str]:
    # Trailing blank cells are not part of the row.
    end = len(row)
    while end and row[end - 1] == "":
        end -= 1
    return row[:end]


def _read_xlsx(source) -> list[list[str]]:
    wb = load_workbook(source, read_only=True, data_only=True)
    try:
        ws = wb.worksheets[0]
        return [_trim([cell_text(v) for v in row]) for row in ws.iter_rows(values_only=True)]
    finally:
        wb.close()


def _read_csv(source) -> list[list[str]]:
    # Rows may differ in width and blank lines keep their place, so row
    # numbers match the file.
    if isinstance(source, (str, Path)):
        with open(source, "r", encoding="utf-8-sig", newline="") as f:
            return [_trim(row) for row in csv.reader(f)]
    text = io.TextIOWrapper(source, encoding="utf-8-sig", newline="")
    try:
        return [_trim(row) for row in csv.reader(text)]
    finally:
        text.detach()


def read_rows(source: str | Path | BinaryIO, name: str | None = None) -> list[list[str]]:
    """
    Read every row of the first sheet, header included.

    Args:
        source: Path or binary file object (e.g. a Streamlit upload)
        name: File name used to pick the format when ``source`` is a file object

    Raises:
        SpreadsheetError: the file is missing, unreadable or not a spreadsheet
    """
    if name is None:
        name = str(getattr(source, "name", source))
    suffix = Path(name).suffix.lower()

    try:
        if suffix == ".csv":
            return _read_csv(source)
        return _read_xlsx(source)
    except (OSError, BadZipFile, InvalidFileException, KeyError, ValueError, csv.Error) as exc:
        raise SpreadsheetError(f"Failed to open file {name}: {exc}") from exc
