"""API routes for importing solved problems from online judges."""

from litestar import Controller, get, post, put
from litestar.di import Provide
from litestar.status_codes import HTTP_200_OK
from loguru import logger

from api.dependencies import provide_orchestrator
from api.schemas.importer import (
    ConfirmRequest,
    FetchRequest,
    ImportStateResponse,
    SelectJudgeRequest,
)
from application.orchestrator import ImportOrchestrator


class ImportController(Controller):
    """Controller driving the fetch / preview / confirm import flow."""

    path = "/import"
    dependencies = {"orchestrator": Provide(provide_orchestrator, sync_to_thread=False)}

    @get("/", status_code=HTTP_200_OK)
    async def get_state(self, orchestrator: ImportOrchestrator) -> ImportStateResponse:
        return ImportStateResponse.from_state(orchestrator.state, orchestrator.judge)

    @put("/judge", status_code=HTTP_200_OK)
    async def select_judge(
        self, data: SelectJudgeRequest, orchestrator: ImportOrchestrator
    ) -> ImportStateResponse:
        """Select the judge to import from; discards a pending preview or error."""
        state = orchestrator.select_judge(data.judge)
        return ImportStateResponse.from_state(state, orchestrator.judge)

    @post("/fetch", status_code=HTTP_200_OK)
    async def fetch(self, data: FetchRequest, orchestrator: ImportOrchestrator) -> ImportStateResponse:
        """
        Fetch solved problems for a handle.

        A failed fetch is reported in the returned state, not as an HTTP error.
        """
        logger.debug(f"API request to fetch {orchestrator.judge.value} handle={data.handle!r}")
        state = await orchestrator.fetch(data.handle)
        return ImportStateResponse.from_state(state, orchestrator.judge)

    @post("/confirm", status_code=HTTP_200_OK)
    async def confirm(self, data: ConfirmRequest, orchestrator: ImportOrchestrator) -> ImportStateResponse:
        """Commit the previewed problems."""
        state = await orchestrator.confirm(data.clear_existing)
        return ImportStateResponse.from_state(state, orchestrator.judge)

    @post("/reset", status_code=HTTP_200_OK)
    async def reset(self, orchestrator: ImportOrchestrator) -> ImportStateResponse:
        return ImportStateResponse.from_state(orchestrator.reset(), orchestrator.judge)
