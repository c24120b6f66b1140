"""Calendar heatmap aggregation.

Two independent halves are composed here:

* date bucketing (``collect_cells``) folds solved problems into per-day values;
* the calendar half (``build_weeks``, ``month_labels``, ``build_grid``) lays those
  values out on a Sunday-first weekly grid and resolves colors.
"""

import re
from collections.abc import Callable, Iterable, Mapping
from datetime import date, timedelta
from typing import Any, Optional

from domain.difficulty import NEUTRAL_COLOR
from domain.models import HeatmapCell, HeatmapDay, HeatmapGrid, MonthLabel, SolvedProblem

DAYS_IN_WEEK = 7
MONTH_LABELS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

EMPTY_COLOR = NEUTRAL_COLOR
COUNT_COLORS = ["#9be9a8", "#40c463", "#30a14e", "#216e39"]

LEADING_INT_PATTERN = re.compile(r"\s*([+-]?\d+)")

# (current value for the day or None, problem) -> new value or None to leave it unchanged
ValueFn = Callable[[Optional[int], SolvedProblem], Optional[int]]
ColorIndexFn = Callable[[int, int], int]


def count_solved(current: int | None, problem: SolvedProblem) -> int:
    """Count mode: one per record."""
    return (current or 0) + 1


def max_of(extract: Callable[[SolvedProblem], Optional[int]]) -> ValueFn:
    """Max mode: keep the largest ``extract(problem)``, ignoring records where it is None."""

    def fold(current: int | None, problem: SolvedProblem) -> int | None:
        value = extract(problem)
        if value is None:
            return current
        return value if current is None else max(current, value)

    return fold


def problem_rating(problem: SolvedProblem) -> int | None:
    """Leading integer of the difficulty (``"1500.0"`` gives 1500), None when there is none."""
    match = LEADING_INT_PATTERN.match(problem.difficulty)
    return int(match.group(1)) if match else None


def collect_cells(problems: Iterable[SolvedProblem], value_fn: ValueFn = count_solved) -> dict[str, int]:
    """Fold problems into ``{YYYY-MM-DD: value}`` for dates with a qualifying record."""
    cells: dict[str, int] = {}
    for problem in problems:
        day = problem.solved_date
        if not day:
            continue
        value = value_fn(cells.get(day), problem)
        if value is not None:
            cells[day] = value
    return cells


def to_heatmap_cells(cells: Mapping[str, int], meta: Mapping[str, Any] | None = None) -> list[HeatmapCell]:
    return [
        HeatmapCell(date=day, value=value, meta=meta.get(day) if meta else None)
        for day, value in sorted(cells.items())
    ]


def week_start(day: date) -> date:
    """Sunday on or before ``day``."""
    return day - timedelta(days=(day.weekday() + 1) % DAYS_IN_WEEK)


def build_weeks(start_date: date, end_date: date) -> list[list[date]]:
    """Consecutive 7-day weeks covering ``[week_start(start_date), end_date]``."""
    weeks = []
    current = week_start(start_date)
    while current <= end_date:
        weeks.append([current + timedelta(days=offset) for offset in range(DAYS_IN_WEEK)])
        current += timedelta(days=DAYS_IN_WEEK)
    return weeks


def month_labels(weeks: list[list[date]], start_date: date, end_date: date) -> list[MonthLabel]:
    """Label each week whose first in-range day starts a new month."""
    labels = []
    current_month = None
    for index, week in enumerate(weeks):
        first_in_range = next((day for day in week if start_date <= day <= end_date), None)
        if first_in_range is None:
            continue
        if first_in_range.month != current_month:
            current_month = first_in_range.month
            labels.append(MonthLabel(label=MONTH_LABELS[current_month - 1], week_index=index))
    return labels


def default_color_index(value: int, max_value: int, num_colors: int) -> int | None:
    """Position of ``value`` on the color scale, None for an empty day."""
    if value == 0:
        return None
    if max_value == 0:
        return 0
    index = int(value / max_value * num_colors)
    return max(0, min(index, num_colors - 1))


def resolve_color(
    value: int,
    max_value: int,
    colors: list[str],
    empty_color: str = EMPTY_COLOR,
    color_index: ColorIndexFn | None = None,
) -> str:
    if value == 0 or not colors:
        return empty_color

    if color_index is not None:
        index = min(color_index(value, max_value), len(colors) - 1)
    else:
        index = default_color_index(value, max_value, len(colors))

    if index is None or index < 0:
        return empty_color
    return colors[index]


def build_grid(
    cells: Mapping[str, int],
    start_date: date,
    end_date: date,
    *,
    colors: list[str] | None = None,
    empty_color: str = EMPTY_COLOR,
    color_index: ColorIndexFn | None = None,
    meta: Mapping[str, Any] | None = None,
) -> HeatmapGrid:
    """Lay pre-collected cells out on the weekly grid."""
    colors = list(colors) if colors is not None else list(COUNT_COLORS)
    max_value = max(cells.values(), default=0)
    weeks = build_weeks(start_date, end_date)

    grid_weeks = []
    for week in weeks:
        days = []
        for day in week:
            if not start_date <= day <= end_date:
                days.append(HeatmapDay(date=day, in_range=False))
                continue
            key = day.isoformat()
            value = cells.get(key, 0)
            days.append(
                HeatmapDay(
                    date=day,
                    in_range=True,
                    value=value,
                    color=resolve_color(value, max_value, colors, empty_color, color_index),
                    meta=meta.get(key) if meta else None,
                )
            )
        grid_weeks.append(days)

    return HeatmapGrid(
        start_date=start_date,
        end_date=end_date,
        weeks=grid_weeks,
        month_labels=month_labels(weeks, start_date, end_date),
        max_value=max_value,
        colors=colors,
        empty_color=empty_color,
        cells=to_heatmap_cells(cells, meta),
    )


def aggregate(
    problems: Iterable[SolvedProblem],
    start_date: date,
    end_date: date,
    value_fn: ValueFn = count_solved,
    *,
    colors: list[str] | None = None,
    empty_color: str = EMPTY_COLOR,
    color_index: ColorIndexFn | None = None,
) -> HeatmapGrid:
    """Bucket problems by day and build the calendar grid for the window."""
    cells = collect_cells(problems, value_fn)
    return build_grid(
        cells,
        start_date,
        end_date,
        colors=colors,
        empty_color=empty_color,
        color_index=color_index,
    )


def default_window(today: date) -> tuple[date, date]:
    """From the first day of the month eleven months back through ``today``."""
    months = today.year * 12 + today.month - 1 - 11
    return date(months // 12, months % 12 + 1, 1), today
