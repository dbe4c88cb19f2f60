# tests/test_render.py

from __future__ import annotations

from gantt_planner.core.models import BarType
from gantt_planner.render.grid import EMPTY_CELL, GLYPHS, cell_glyph, render_row, render_sheet

from .fakes import make_task


def test_cell_glyph_uses_top_band() -> None:
    assert cell_glyph(()) == EMPTY_CELL
    assert cell_glyph((BarType.PLAN_DURATION,)) == GLYPHS[BarType.PLAN_DURATION]
    assert cell_glyph((BarType.PLAN_DURATION, BarType.ACTUAL_START, BarType.PERCENT_COMPLETE)) == GLYPHS[
        BarType.PERCENT_COMPLETE
    ]


def test_render_row_cells() -> None:
    # plan 1..2, actual 1..4 at 50% -> complete 1..2
    task = make_task(plan_start=1, plan_duration=2, actual_start=1, actual_duration=4, percent_complete=50)
    row = render_row(task, 6, 5)
    cells = row[-6:]
    assert cells == "██xx··"


def test_render_sheet_marks_selection_and_highlight() -> None:
    tasks = [make_task("a"), make_task("b")]
    sheet = render_sheet(tasks, period_count=10, period_highlight=3, selected_id="b")
    lines = sheet.splitlines()
    assert lines[0] == "Project Planner"
    assert any(line.startswith(">  6 Activity b") for line in lines)
    assert lines[-1].rstrip().endswith("^")
    assert len(lines[-1].rstrip()) == len(lines[-2]) - 10 + 3


def test_render_sheet_empty() -> None:
    assert "(no activities)" in render_sheet([], period_count=5)
