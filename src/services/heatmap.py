"""Service building activity heatmaps from stored problems."""

from datetime import date

from loguru import logger

from domain.calendar import (
    COUNT_COLORS,
    EMPTY_COLOR,
    aggregate,
    build_grid,
    collect_cells,
    default_window,
    max_of,
    problem_rating,
)
from domain.difficulty import LEVEL_COLORS, difficulty_level
from domain.exceptions import ValidationError
from domain.models import HeatmapGrid
from infrastructure.store import ProblemStoreProtocol


class HeatmapService:
    """Builds the daily solve-count and daily max-difficulty heatmaps."""

    def __init__(self, store: ProblemStoreProtocol):
        self.store = store

    async def count_heatmap(self, start_date: date | None = None, end_date: date | None = None) -> HeatmapGrid:
        """Number of problems solved per day."""
        start_date, end_date = self._window(start_date, end_date)
        problems = await self.store.get_all()

        grid = aggregate(problems, start_date, end_date, colors=COUNT_COLORS, empty_color=EMPTY_COLOR)
        logger.debug(f"Built count heatmap {start_date}..{end_date} over {len(problems)} problems")
        return grid

    async def difficulty_heatmap(
        self, start_date: date | None = None, end_date: date | None = None
    ) -> HeatmapGrid:
        """Difficulty level of the hardest problem solved each day."""
        start_date, end_date = self._window(start_date, end_date)
        problems = await self.store.get_all()

        max_ratings = collect_cells(problems, max_of(problem_rating))
        levels = {day: difficulty_level(rating) for day, rating in max_ratings.items()}
        meta = {day: {"rating": rating} for day, rating in max_ratings.items()}

        grid = build_grid(
            levels,
            start_date,
            end_date,
            colors=[LEVEL_COLORS[level] for level in sorted(LEVEL_COLORS)],
            empty_color=EMPTY_COLOR,
            color_index=lambda level, _max_level: level - 1,
            meta=meta,
        )
        logger.debug(f"Built difficulty heatmap {start_date}..{end_date} over {len(problems)} problems")
        return grid

    @staticmethod
    def _window(start_date: date | None, end_date: date | None) -> tuple[date, date]:
        default_start, default_end = default_window(end_date or date.today())
        start_date, end_date = start_date or default_start, end_date or default_end
        if start_date > end_date:
            raise ValidationError(f"Start date {start_date} is after end date {end_date}")
        return start_date, end_date
