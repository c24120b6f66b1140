"""Problem stores: auto-increment record stores for solved problems."""

import json
import os
from collections.abc import Callable, Iterable
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Protocol

from loguru import logger

from domain.exceptions import ProblemNotFoundError, StoreError
from domain.models import SolvedProblem, StoredProblem
from domain.models.problem import EDITABLE_FIELDS


class ProblemStoreProtocol(Protocol):
    """Protocol for a solved problem store."""

    async def get_all(self) -> list[StoredProblem]:
        ...

    async def add_batch(self, problems: Iterable[SolvedProblem]) -> int:
        ...

    async def update(self, problem_id: int, changes: dict[str, Any]) -> None:
        ...

    async def delete(self, problem_id: int) -> None:
        ...

    async def clear(self) -> None:
        ...

    async def count(self) -> int:
        ...

    async def import_batch(self, problems: Iterable[SolvedProblem], clear_existing: bool = False) -> int:
        ...


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryProblemStore:
    """Store that keeps problems in process memory.

    Every mutation builds the new contents first and swaps them in through
    ``_commit``, so a failing batch leaves the previous contents untouched.
    """

    def __init__(self, clock: Callable[[], datetime] = _utcnow):
        self._problems: dict[int, StoredProblem] = {}
        self._next_id = 1
        self._clock = clock

    async def get_all(self) -> list[StoredProblem]:
        return list(self._problems.values())

    async def get(self, problem_id: int) -> StoredProblem:
        try:
            return self._problems[problem_id]
        except KeyError:
            raise ProblemNotFoundError(problem_id) from None

    async def add_batch(self, problems: Iterable[SolvedProblem]) -> int:
        staged = dict(self._problems)
        next_id = self._stage(staged, problems, self._next_id)
        added = next_id - self._next_id
        self._commit(staged, next_id)
        logger.debug(f"Added {added} problems")
        return added

    async def update(self, problem_id: int, changes: dict[str, Any]) -> None:
        unknown = set(changes) - EDITABLE_FIELDS
        if unknown:
            raise StoreError(f"Unknown fields: {', '.join(sorted(unknown))}")

        current = await self.get(problem_id)
        staged = dict(self._problems)
        staged[problem_id] = current.with_changes(changes, synced_at=self._clock())
        self._commit(staged, self._next_id)
        logger.debug(f"Updated problem {problem_id}")

    async def delete(self, problem_id: int) -> None:
        await self.get(problem_id)
        staged = {key: value for key, value in self._problems.items() if key != problem_id}
        self._commit(staged, self._next_id)
        logger.debug(f"Deleted problem {problem_id}")

    async def clear(self) -> None:
        self._commit({}, self._next_id)
        logger.debug("Cleared all problems")

    async def count(self) -> int:
        return len(self._problems)

    async def import_batch(self, problems: Iterable[SolvedProblem], clear_existing: bool = False) -> int:
        staged = {} if clear_existing else dict(self._problems)
        next_id = self._stage(staged, problems, self._next_id)
        imported = next_id - self._next_id
        self._commit(staged, next_id)
        logger.info(f"Imported {imported} problems (clear_existing={clear_existing})")
        return imported

    def _stage(self, staged: dict[int, StoredProblem], problems: Iterable[SolvedProblem], next_id: int) -> int:
        synced_at = self._clock()
        for problem in problems:
            staged[next_id] = StoredProblem.from_problem(problem, id=next_id, synced_at=synced_at)
            next_id += 1
        return next_id

    def _commit(self, problems: dict[int, StoredProblem], next_id: int) -> None:
        self._problems = problems
        self._next_id = next_id


class JsonFileProblemStore(InMemoryProblemStore):
    """In-memory store mirrored to a JSON file after every mutation."""

    def __init__(self, path: str | Path, clock: Callable[[], datetime] = _utcnow):
        super().__init__(clock=clock)
        self.path = Path(path)
        self._load()

    def _load(self) -> None:
        if not self.path.exists():
            logger.info(f"Problem store {self.path} does not exist yet, starting empty")
            return

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            if not isinstance(data, dict):
                raise ValueError(f"expected a JSON object, got {type(data).__name__}")
            problems = [StoredProblem.from_dict(item) for item in data.get("problems", [])]
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
            raise StoreError(f"Failed to load problem store {self.path}: {e}") from e

        self._problems = {problem.id: problem for problem in problems}
        self._next_id = max(data.get("next_id", 1), max(self._problems, default=0) + 1)
        logger.info(f"Loaded {len(self._problems)} problems from {self.path}")

    def _commit(self, problems: dict[int, StoredProblem], next_id: int) -> None:
        payload = {
            "next_id": next_id,
            "problems": [problem.to_dict() for problem in problems.values()],
        }
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.error(f"Failed to write problem store {self.path}: {e}")
            raise StoreError(f"Failed to write problem store: {e}") from e

        super()._commit(problems, next_id)


def create_store(path: str | None = None) -> InMemoryProblemStore:
    """JSON-backed store when ``path`` is given, in-memory otherwise."""
    if path:
        return JsonFileProblemStore(path)
    return InMemoryProblemStore()
