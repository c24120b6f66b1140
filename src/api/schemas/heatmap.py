"""Pydantic schemas for heatmap API endpoints."""

from datetime import date
from typing import Any

from pydantic import BaseModel

from domain.difficulty import DIFFICULTY_LEGEND
from domain.models import HeatmapGrid


class HeatmapDayResponse(BaseModel):
    """One grid cell with everything a renderer needs for color and tooltip."""

    date: date
    in_range: bool
    value: int | None = None
    color: str | None = None
    meta: dict[str, Any] | None = None

    class Config:
        from_attributes = True


class HeatmapCellResponse(BaseModel):
    """Sparse per-day value; only days with data are listed."""

    date: str
    value: int
    meta: dict[str, Any] | None = None

    class Config:
        from_attributes = True


class MonthLabelResponse(BaseModel):
    label: str
    week_index: int

    class Config:
        from_attributes = True


class LegendEntryResponse(BaseModel):
    level: int
    label: str
    color: str


class HeatmapResponse(BaseModel):
    """Week-aligned heatmap grid."""

    start_date: date
    end_date: date
    weeks: list[list[HeatmapDayResponse]]
    month_labels: list[MonthLabelResponse]
    max_value: int
    total: int
    colors: list[str]
    empty_color: str
    cells: list[HeatmapCellResponse] = []
    legend: list[LegendEntryResponse] = []

    @classmethod
    def from_grid(cls, grid: HeatmapGrid, with_difficulty_legend: bool = False) -> "HeatmapResponse":
        legend = []
        if with_difficulty_legend:
            legend = [
                LegendEntryResponse(level=level, label=label, color=color)
                for level, label, color in DIFFICULTY_LEGEND
            ]

        return cls(
            start_date=grid.start_date,
            end_date=grid.end_date,
            weeks=[[HeatmapDayResponse.model_validate(day) for day in week] for week in grid.weeks],
            month_labels=[MonthLabelResponse.model_validate(label) for label in grid.month_labels],
            max_value=grid.max_value,
            total=grid.total,
            colors=grid.colors,
            empty_color=grid.empty_color,
            cells=[HeatmapCellResponse.model_validate(cell) for cell in grid.cells],
            legend=legend,
        )
