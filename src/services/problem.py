"""Service for handling stored problem operations."""

from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from loguru import logger

from domain.exceptions import ProblemNotFoundError, StoreError
from domain.models import Judge, SolvedProblem, StoredProblem
from domain.parsers import URLParser
from infrastructure.store import ProblemStoreProtocol

T = TypeVar("T")


class ProblemService:
    """Service for managing the user's solved problems."""

    def __init__(self, store: ProblemStoreProtocol):
        """Initialize service."""
        self.store = store

    async def list_problems(self, judge: Judge | None = None) -> list[StoredProblem]:
        """All stored problems, optionally only those from one judge."""
        problems = await self._run(self.store.get_all, "Failed to load data")
        if judge is None:
            return problems
        return [problem for problem in problems if URLParser.parse_judge(problem.problem_url) is judge]

    async def add_problems(self, problems: list[SolvedProblem]) -> int:
        logger.info(f"Adding {len(problems)} problems")
        return await self._run(lambda: self.store.add_batch(problems), "Failed to add data")

    async def update_problem(self, problem_id: int, changes: dict[str, Any]) -> None:
        logger.info(f"Updating problem {problem_id}: {sorted(changes)}")
        await self._run(lambda: self.store.update(problem_id, changes), "Failed to update data")

    async def delete_problem(self, problem_id: int) -> None:
        logger.info(f"Deleting problem {problem_id}")
        await self._run(lambda: self.store.delete(problem_id), "Failed to delete data")

    async def clear_problems(self) -> None:
        logger.info("Clearing all problems")
        await self._run(self.store.clear, "Failed to clear data")

    async def count_problems(self) -> int:
        return await self._run(self.store.count, "Failed to load data")

    @staticmethod
    async def _run(operation: Callable[[], Awaitable[T]], message: str) -> T:
        """Await a store call, turning unexpected failures into ``StoreError``."""
        try:
            return await operation()
        except (ProblemNotFoundError, StoreError):
            raise
        except Exception as e:
            logger.error(f"{message}: {e}", exc_info=True)
            raise StoreError(message) from e
