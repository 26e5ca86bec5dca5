from __future__ import annotations

import csv
import re
import warnings
import zipfile
from datetime import date, datetime, time
from pathlib import Path
from typing import List, Optional

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from . import sdrf
from .types import SheetGrid


def _normalize_header(header: str) -> str:
    return header.strip()


def _cell_to_str(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return str(value)


def _pad(values: List[str], width: int) -> List[str]:
    return values[:width] + [""] * (width - len(values))


def _to_grid(name: str, raw_rows: List[List[object]]) -> SheetGrid:
    if not raw_rows or all(_cell_to_str(v).strip() == "" for v in raw_rows[0]):
        raise ValueError(f"Sheet '{name}' has no header row")
    header = [_normalize_header(_cell_to_str(v)) for v in raw_rows[0]]
    rows = []
    for r in raw_rows[1:]:
        values = [_cell_to_str(v) for v in r]
        if all(v.strip() == "" for v in values):
            continue
        rows.append(_pad(values, len(header)))
    return SheetGrid(name=name, header=header, rows=rows)


def _sheet_filter(sheet_name: Optional[str]):
    if sdrf.selects_all_sheets(sheet_name):
        return None
    try:
        return re.compile(sheet_name, re.IGNORECASE)
    except re.error as e:
        raise ValueError(f"Invalid sheet name pattern '{sheet_name}': {e}")


def _load_workbook(xlsx_path: str):
    # Suppress openpyxl warnings about unsupported extensions
    warnings.filterwarnings("ignore", category=UserWarning, module="openpyxl")
    try:
        return load_workbook(filename=xlsx_path, data_only=True, read_only=True)
    except (InvalidFileException, zipfile.BadZipFile, KeyError, OSError) as e:
        raise ValueError(f"Could not read spreadsheet '{xlsx_path}': {e}")


def list_sheet_names(input_path: str) -> List[str]:
    p = Path(input_path)
    if p.suffix.lower() in sdrf.TEXT_SUFFIXES:
        return [p.stem]
    wb = _load_workbook(str(p))
    try:
        return list(wb.sheetnames)
    finally:
        wb.close()


def read_xlsx_sheets(xlsx_path: str, sheet_name: Optional[str] = sdrf.DEFAULT_SHEET_NAME) -> List[SheetGrid]:
    """Read the SDRF sheets of an XLSX workbook.

    Args:
        xlsx_path: Path to XLSX file
        sheet_name: Case-insensitive pattern searched in each sheet title
            ('sdrf-kd|sdrf-seq' selects both). Empty or 'FALSE' selects all sheets.

    Returns:
        list of SheetGrid in workbook order
    """
    pattern = _sheet_filter(sheet_name)
    wb = _load_workbook(xlsx_path)
    try:
        sheets = []
        for title in wb.sheetnames:
            if pattern is not None and not pattern.search(title):
                continue
            ws = wb[title]
            raw_rows = [list(r or ()) for r in ws.iter_rows(values_only=True)]
            sheets.append(_to_grid(title, raw_rows))
        return sheets
    finally:
        wb.close()


def read_text_sheet(text_path: str, delimiter: str = "\t") -> SheetGrid:
    """Read a tab- or comma-delimited SDRF file as a single sheet named after the file."""
    p = Path(text_path)
    with open(p, "r", newline="", encoding="utf-8-sig") as f:  # utf-8-sig strips BOM
        raw_rows = [row for row in csv.reader(f, delimiter=delimiter)]
    return _to_grid(p.stem, raw_rows)


def read_sdrf_sheets(input_path: str, sheet_name: Optional[str] = sdrf.DEFAULT_SHEET_NAME) -> List[SheetGrid]:
    p = Path(input_path)
    if not p.is_file():
        raise ValueError(f"Input not found: {input_path}")
    suffix = p.suffix.lower()
    if suffix in sdrf.TEXT_SUFFIXES:
        return [read_text_sheet(str(p), sdrf.TEXT_SUFFIXES[suffix])]
    if suffix in sdrf.XLSX_SUFFIXES:
        return read_xlsx_sheets(str(p), sheet_name)
    raise ValueError(f"Unsupported input file type: {p.suffix or p.name}")
