"""Async orchestrator for importing solved problems from an online judge.

The import flow is a small state machine::

    Idle -> Fetching -> FetchedPreview | FetchFailed
    FetchedPreview -> Committing -> Idle            (commit succeeded)
    FetchedPreview -> Committing -> FetchedPreview  (commit failed, preview kept)

Exactly one state value is held at a time.
"""

from dataclasses import dataclass
from typing import Union

from loguru import logger

from domain.exceptions import FetchError, StoreError, ValidationError
from domain.models import Judge, SolvedProblem
from infrastructure.judges import JudgeAdapterProtocol
from infrastructure.store import ProblemStoreProtocol

GENERIC_FETCH_ERROR = "Failed to fetch data"
GENERIC_IMPORT_ERROR = "Failed to import data"
EMPTY_HANDLE_ERROR = "Please enter a handle"
NOTHING_TO_IMPORT_ERROR = "Nothing to import"


@dataclass(frozen=True)
class Idle:
    last_imported: int | None = None


@dataclass(frozen=True)
class Fetching:
    judge: Judge
    handle: str


@dataclass(frozen=True)
class FetchedPreview:
    judge: Judge
    handle: str
    problems: tuple[SolvedProblem, ...]
    commit_error: str | None = None

    @property
    def count(self) -> int:
        return len(self.problems)


@dataclass(frozen=True)
class FetchFailed:
    judge: Judge
    handle: str
    message: str


@dataclass(frozen=True)
class Committing:
    judge: Judge
    handle: str
    problems: tuple[SolvedProblem, ...]
    clear_existing: bool


ImportState = Union[Idle, Fetching, FetchedPreview, FetchFailed, Committing]


class ImportOrchestrator:
    """Coordinates fetching from the selected judge and committing to the store."""

    def __init__(
        self,
        adapters: dict[Judge, JudgeAdapterProtocol],
        store: ProblemStoreProtocol,
        judge: Judge = Judge.CODEFORCES,
    ):
        """
        Initialize orchestrator with dependency injection.

        Args:
            adapters: One adapter per selectable judge
            store: Store receiving confirmed imports
            judge: Initially selected judge
        """
        self.adapters = adapters
        self.store = store
        self.judge = judge
        self.state: ImportState = Idle()

    def select_judge(self, judge: Judge) -> ImportState:
        """Select the judge; a pending preview or error is discarded."""
        if judge not in self.adapters:
            raise ValidationError(f"Unsupported judge: {judge}")

        self.judge = judge
        if isinstance(self.state, (FetchedPreview, FetchFailed)):
            logger.debug(f"Judge switched to {judge.value}, discarding {type(self.state).__name__}")
            self.state = Idle()
        return self.state

    async def fetch(self, handle: str) -> ImportState:
        """
        Fetch solved problems for ``handle`` from the selected judge.

        Raises:
            ValidationError: If the handle is blank (no request is made)
        """
        handle = handle.strip()
        if not handle:
            raise ValidationError(EMPTY_HANDLE_ERROR)

        judge = self.judge
        adapter = self.adapters[judge]
        self.state = Fetching(judge=judge, handle=handle)
        logger.info(f"Fetching solved problems from {judge.display_name} for {handle}")

        try:
            problems = await adapter.fetch(handle)
        except FetchError as e:
            logger.warning(f"Fetch from {judge.display_name} failed for {handle}: {e}")
            self.state = FetchFailed(judge=judge, handle=handle, message=str(e))
        except Exception:
            logger.error(f"Unexpected error fetching from {judge.display_name}", exc_info=True)
            self.state = FetchFailed(judge=judge, handle=handle, message=GENERIC_FETCH_ERROR)
        else:
            self.state = FetchedPreview(judge=judge, handle=handle, problems=tuple(problems))
            logger.info(f"Fetched {len(problems)} problems from {judge.display_name} for {handle}")

        return self.state

    async def confirm(self, clear_existing: bool = False) -> ImportState:
        """
        Commit the previewed problems to the store.

        Raises:
            ValidationError: If there is no fetched preview, or it is empty
        """
        preview = self.state
        if not isinstance(preview, FetchedPreview) or preview.count == 0:
            raise ValidationError(NOTHING_TO_IMPORT_ERROR)

        self.state = Committing(
            judge=preview.judge,
            handle=preview.handle,
            problems=preview.problems,
            clear_existing=clear_existing,
        )

        try:
            imported = await self.store.import_batch(list(preview.problems), clear_existing)
        except StoreError as e:
            logger.warning(f"Import commit failed: {e}")
            self.state = FetchedPreview(
                judge=preview.judge,
                handle=preview.handle,
                problems=preview.problems,
                commit_error=str(e),
            )
        except Exception:
            logger.error("Unexpected error committing import", exc_info=True)
            self.state = FetchedPreview(
                judge=preview.judge,
                handle=preview.handle,
                problems=preview.problems,
                commit_error=GENERIC_IMPORT_ERROR,
            )
        else:
            logger.info(f"Imported {imported} problems from {preview.judge.display_name}")
            self.state = Idle(last_imported=imported)

        return self.state

    def reset(self) -> ImportState:
        """Drop any preview or error."""
        self.state = Idle()
        return self.state
