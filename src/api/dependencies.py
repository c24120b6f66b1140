from litestar.datastructures import State

from application.orchestrator import ImportOrchestrator
from services import HeatmapService, ProblemService


def provide_problem_service(state: State) -> ProblemService:
    return ProblemService(state.store)


def provide_heatmap_service(state: State) -> HeatmapService:
    return HeatmapService(state.store)


def provide_orchestrator(state: State) -> ImportOrchestrator:
    # One import flow per process, shared across requests
    return state.orchestrator
