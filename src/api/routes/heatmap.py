"""API routes for activity heatmaps."""

from datetime import date

from litestar import Controller, get
from litestar.di import Provide
from litestar.status_codes import HTTP_200_OK

from api.dependencies import provide_heatmap_service
from api.schemas.heatmap import HeatmapResponse
from services import HeatmapService


class HeatmapController(Controller):
    """Controller for heatmap endpoints.

    Query parameters ``start`` and ``end`` (YYYY-MM-DD) default to the last
    twelve calendar months ending today.
    """

    path = "/heatmap"
    dependencies = {"heatmap_service": Provide(provide_heatmap_service, sync_to_thread=False)}

    @get("/count", status_code=HTTP_200_OK)
    async def count_heatmap(
        self,
        heatmap_service: HeatmapService,
        start: date | None = None,
        end: date | None = None,
    ) -> HeatmapResponse:
        grid = await heatmap_service.count_heatmap(start, end)
        return HeatmapResponse.from_grid(grid)

    @get("/difficulty", status_code=HTTP_200_OK)
    async def difficulty_heatmap(
        self,
        heatmap_service: HeatmapService,
        start: date | None = None,
        end: date | None = None,
    ) -> HeatmapResponse:
        grid = await heatmap_service.difficulty_heatmap(start, end)
        return HeatmapResponse.from_grid(grid, with_difficulty_legend=True)
