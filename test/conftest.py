from __future__ import annotations

from pathlib import Path

import pytest
from openpyxl import Workbook

SCENARIO_A_HEADER = ["Sample Name", "Protocol REF", "Parameter Value [duration]", "Extract Name"]
SCENARIO_A_ROWS = [
    ["S1", "Extraction", "30min", "E1"],
    ["S1", "Extraction", "45min", "E1"],
]


def write_workbook(path: Path, sheets: dict[str, list[list[object]]]) -> Path:
    wb = Workbook()
    wb.remove(wb.active)
    for title, rows in sheets.items():
        ws = wb.create_sheet(title)
        for row in rows:
            ws.append(row)
    wb.save(path)
    return path


@pytest.fixture
def make_workbook(tmp_path: Path):
    def _make(sheets: dict[str, list[list[object]]], name: str = "experiment.xlsx") -> Path:
        return write_workbook(tmp_path / name, sheets)

    return _make


@pytest.fixture
def scenario_a_xlsx(make_workbook) -> Path:
    return make_workbook({"sdrf": [SCENARIO_A_HEADER] + SCENARIO_A_ROWS})


@pytest.fixture
def scenario_a_sheet():
    from sdrf2graph.types import SheetGrid

    return SheetGrid(name="sdrf", header=list(SCENARIO_A_HEADER), rows=[list(r) for r in SCENARIO_A_ROWS])
