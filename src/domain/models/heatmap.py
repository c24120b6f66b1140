"""Value objects produced by the calendar aggregator."""

from dataclasses import dataclass, field
from datetime import date
from typing import Any


@dataclass(frozen=True)
class HeatmapCell:
    """Aggregated value for one date with at least one record."""

    date: str
    value: int
    meta: Any = None


@dataclass(frozen=True)
class HeatmapDay:
    """One grid position. Days outside the window carry no value or color."""

    date: date
    in_range: bool
    value: int | None = None
    color: str | None = None
    meta: Any = None


@dataclass(frozen=True)
class MonthLabel:
    label: str
    week_index: int


@dataclass
class HeatmapGrid:
    """Week-aligned grid consumed by a renderer."""

    start_date: date
    end_date: date
    weeks: list[list[HeatmapDay]]
    month_labels: list[MonthLabel]
    max_value: int
    colors: list[str]
    empty_color: str
    cells: list[HeatmapCell] = field(default_factory=list)

    @property
    def total(self) -> int:
        """Sum of in-range values."""
        return sum(day.value or 0 for week in self.weeks for day in week if day.in_range)
