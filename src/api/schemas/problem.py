"""Pydantic schemas for problem API endpoints."""

from datetime import datetime

from pydantic import BaseModel

from domain.models import SolvedProblem


class ProblemCreate(BaseModel):
    """A solved problem entered by the user."""

    problem_url: str
    difficulty: str = ""
    solution_note: str = ""
    tags: str = ""
    solved_at: str = ""  # YYYY-MM-DD HH:MM:SS

    def to_domain(self) -> SolvedProblem:
        return SolvedProblem(**self.model_dump())


class ProblemUpdate(BaseModel):
    """Partial update; omitted fields are left unchanged."""

    problem_url: str | None = None
    difficulty: str | None = None
    solution_note: str | None = None
    tags: str | None = None
    solved_at: str | None = None


class ProblemResponse(BaseModel):
    """Response containing a stored problem."""

    id: int
    problem_url: str
    difficulty: str
    solution_note: str
    tags: str
    solved_at: str
    synced_at: datetime | None = None
    judge: str | None = None  # None for URLs outside the supported judges

    class Config:
        from_attributes = True


class ProblemCountResponse(BaseModel):
    count: int
