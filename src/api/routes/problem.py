"""API routes for stored problems."""

from litestar import Controller, delete, get, patch, post
from litestar.di import Provide
from litestar.status_codes import HTTP_200_OK, HTTP_201_CREATED, HTTP_204_NO_CONTENT
from loguru import logger

from api.dependencies import provide_problem_service
from api.schemas.problem import (
    ProblemCountResponse,
    ProblemCreate,
    ProblemResponse,
    ProblemUpdate,
)
from domain.models import Judge, StoredProblem
from domain.parsers import URLParser
from services import ProblemService


def _to_response(problem: StoredProblem) -> ProblemResponse:
    judge = URLParser.parse_judge(problem.problem_url)
    return ProblemResponse(
        id=problem.id,
        problem_url=problem.problem_url,
        difficulty=problem.difficulty,
        solution_note=problem.solution_note,
        tags=problem.tags,
        solved_at=problem.solved_at,
        synced_at=problem.synced_at,
        judge=judge.value if judge else None,
    )


class ProblemController(Controller):
    """Controller for the solved problem list."""

    path = "/problems"
    dependencies = {"problem_service": Provide(provide_problem_service, sync_to_thread=False)}

    @get("/", status_code=HTTP_200_OK)
    async def list_problems(
        self, problem_service: ProblemService, judge: Judge | None = None
    ) -> list[ProblemResponse]:
        """
        List stored problems.

        Query parameters:
        - judge: Optional judge filter ("codeforces" or "atcoder")
        """
        problems = await problem_service.list_problems(judge)
        return [_to_response(problem) for problem in problems]

    @get("/count", status_code=HTTP_200_OK)
    async def count_problems(self, problem_service: ProblemService) -> ProblemCountResponse:
        return ProblemCountResponse(count=await problem_service.count_problems())

    @post("/", status_code=HTTP_201_CREATED)
    async def add_problems(
        self, data: list[ProblemCreate], problem_service: ProblemService
    ) -> ProblemCountResponse:
        """Add problems entered by the user."""
        logger.debug(f"API request to add {len(data)} problems")
        added = await problem_service.add_problems([item.to_domain() for item in data])
        return ProblemCountResponse(count=added)

    @patch("/{problem_id:int}", status_code=HTTP_204_NO_CONTENT)
    async def update_problem(
        self, problem_id: int, data: ProblemUpdate, problem_service: ProblemService
    ) -> None:
        await problem_service.update_problem(problem_id, data.model_dump(exclude_none=True))

    @delete("/{problem_id:int}", status_code=HTTP_204_NO_CONTENT)
    async def delete_problem(self, problem_id: int, problem_service: ProblemService) -> None:
        await problem_service.delete_problem(problem_id)

    @delete("/", status_code=HTTP_204_NO_CONTENT)
    async def clear_problems(self, problem_service: ProblemService) -> None:
        await problem_service.clear_problems()
