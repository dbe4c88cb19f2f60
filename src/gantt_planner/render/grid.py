# src/gantt_planner/render/grid.py

"""Plain-text rendering of the planner sheet: numeric columns + one cell per period."""

from __future__ import annotations

from collections.abc import Sequence

from ..core.geometry import period_bands
from ..core.models import BarType, Task

GLYPHS: dict[BarType, str] = {
    BarType.PLAN_DURATION: "░",
    BarType.ACTUAL_START: "▒",
    BarType.PERCENT_COMPLETE: "█",
    BarType.ACTUAL_BEYOND: "x",
    BarType.PERCENT_BEYOND: "▓",
}
EMPTY_CELL = "·"

LEGEND_LABELS: dict[BarType, str] = {
    BarType.PLAN_DURATION: "Plan Duration",
    BarType.ACTUAL_START: "Actual Start",
    BarType.PERCENT_COMPLETE: "% Complete",
    BarType.ACTUAL_BEYOND: "Actual (beyond plan)",
    BarType.PERCENT_BEYOND: "% Complete (beyond plan)",
}

# First sheet row used by task rows (title, legend, spacer and headers sit above).
FIRST_TASK_ROW = 5

ACTIVITY_WIDTH = 28
_NUM_HEADERS = ("PlanS", "PlanD", "ActS", "ActD", "Pct")


def cell_glyph(bands: Sequence[BarType]) -> str:
    """The top-most band wins; complete is drawn above actual, actual above plan."""
    return GLYPHS[bands[-1]] if bands else EMPTY_CELL


def render_legend() -> str:
    return "  ".join(f"{GLYPHS[b]} {LEGEND_LABELS[b]}" for b in BarType)


def _clip(text: str, width: int) -> str:
    return text if len(text) <= width else text[: width - 1] + "…"


def _period_header(period_count: int, highlight: int) -> tuple[str, str, str]:
    """Tens digits, ones digits, and a marker line under the highlighted period."""
    tens = "".join(str(p // 10) if p % 10 == 0 else " " for p in range(1, period_count + 1))
    ones = "".join(str(p % 10) for p in range(1, period_count + 1))
    marker = "".join("^" if p == highlight else " " for p in range(1, period_count + 1))
    return tens, ones, marker


def render_row(task: Task, period_count: int, row_no: int, *, selected: bool = False) -> str:
    cells = "".join(cell_glyph(period_bands(task, p)) for p in range(1, period_count + 1))
    mark = ">" if selected else " "
    return (
        f"{mark}{row_no:>3} {_clip(task.activity, ACTIVITY_WIDTH):<{ACTIVITY_WIDTH}} "
        f"{task.plan_start:>5} {task.plan_duration:>5} {task.actual_start:>5} "
        f"{task.actual_duration:>5} {task.percent_complete:>4}% "
        f"{cells}"
    )


def render_sheet(
    tasks: Sequence[Task],
    *,
    period_count: int,
    period_highlight: int = 1,
    selected_id: str | None = None,
    title: str = "Project Planner",
) -> str:
    prefix_width = 1 + 3 + 1 + ACTIVITY_WIDTH + 1 + 6 * 4 + 5 + 1
    header_cols = (
        f" {'#':>3} {'Activity':<{ACTIVITY_WIDTH}} "
        + " ".join(f"{h:>5}" for h in _NUM_HEADERS[:4])
        + f" {_NUM_HEADERS[4]:>5} "
    )
    tens, ones, marker = _period_header(period_count, period_highlight)

    lines = [
        title,
        render_legend(),
        "",
        " " * prefix_width + tens,
        header_cols.ljust(prefix_width) + ones,
    ]
    for i, task in enumerate(tasks):
        lines.append(render_row(task, period_count, FIRST_TASK_ROW + i, selected=task.id == selected_id))
    lines.append(" " * prefix_width + marker)
    if not tasks:
        lines.insert(-1, "  (no activities)")
    return "\n".join(lines)
