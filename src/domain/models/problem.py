"""Domain models for solved problems."""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from datetime import datetime, timezone
from typing import Any

SOLVED_AT_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_epoch(epoch_seconds: int) -> str:
    """Format epoch seconds as a UTC ``YYYY-MM-DD HH:MM:SS`` string."""
    return datetime.fromtimestamp(epoch_seconds, tz=timezone.utc).strftime(SOLVED_AT_FORMAT)


@dataclass(frozen=True)
class SolvedProblem:
    """One solved problem, independent of the judge it came from."""

    problem_url: str
    difficulty: str = ""
    solution_note: str = ""
    tags: str = ""
    solved_at: str = ""

    @property
    def solved_date(self) -> str:
        """Day part of ``solved_at``."""
        return self.solved_at.split(" ")[0]


@dataclass(frozen=True)
class StoredProblem(SolvedProblem):
    """Solved problem as persisted by a store."""

    id: int = 0
    synced_at: datetime | None = None

    @classmethod
    def from_problem(cls, problem: SolvedProblem, id: int, synced_at: datetime) -> StoredProblem:
        return cls(
            problem_url=problem.problem_url,
            difficulty=problem.difficulty,
            solution_note=problem.solution_note,
            tags=problem.tags,
            solved_at=problem.solved_at,
            id=id,
            synced_at=synced_at,
        )

    def as_problem(self) -> SolvedProblem:
        """Drop store-assigned fields."""
        return SolvedProblem(
            problem_url=self.problem_url,
            difficulty=self.difficulty,
            solution_note=self.solution_note,
            tags=self.tags,
            solved_at=self.solved_at,
        )

    def with_changes(self, changes: dict[str, Any], synced_at: datetime) -> StoredProblem:
        return replace(self, **changes, synced_at=synced_at)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["synced_at"] = self.synced_at.isoformat() if self.synced_at else None
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> StoredProblem:
        synced_at = data.get("synced_at")
        return cls(
            problem_url=data["problem_url"],
            difficulty=data.get("difficulty", ""),
            solution_note=data.get("solution_note", ""),
            tags=data.get("tags", ""),
            solved_at=data.get("solved_at", ""),
            id=int(data["id"]),
            synced_at=datetime.fromisoformat(synced_at) if synced_at else None,
        )


EDITABLE_FIELDS = frozenset(("problem_url", "difficulty", "solution_note", "tags", "solved_at"))
