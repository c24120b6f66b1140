"""Pydantic schemas for import API endpoints."""

from pydantic import BaseModel

from application.orchestrator import (
    Committing,
    FetchedPreview,
    FetchFailed,
    Fetching,
    Idle,
    ImportState,
)
from domain.models import Judge


class SelectJudgeRequest(BaseModel):
    judge: Judge


class FetchRequest(BaseModel):
    handle: str


class ConfirmRequest(BaseModel):
    clear_existing: bool = False


class ImportStateResponse(BaseModel):
    """Current state of the import flow. Previewed problems are only exposed as a count."""

    state: str
    judge: Judge
    handle: str | None = None
    count: int | None = None
    message: str | None = None
    last_imported: int | None = None

    @classmethod
    def from_state(cls, state: ImportState, judge: Judge) -> "ImportStateResponse":
        if isinstance(state, Idle):
            return cls(state="idle", judge=judge, last_imported=state.last_imported)
        if isinstance(state, Fetching):
            return cls(state="fetching", judge=state.judge, handle=state.handle)
        if isinstance(state, FetchedPreview):
            return cls(
                state="fetched",
                judge=state.judge,
                handle=state.handle,
                count=state.count,
                message=state.commit_error,
            )
        if isinstance(state, FetchFailed):
            return cls(state="failed", judge=state.judge, handle=state.handle, message=state.message)
        if isinstance(state, Committing):
            return cls(
                state="committing",
                judge=state.judge,
                handle=state.handle,
                count=len(state.problems),
            )
        raise TypeError(f"Unknown import state: {state!r}")
