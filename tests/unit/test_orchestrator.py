"""Unit tests for the import orchestrator state machine."""

import pytest
from unittest.mock import AsyncMock

from application.orchestrator import (
    GENERIC_FETCH_ERROR,
    GENERIC_IMPORT_ERROR,
    NOTHING_TO_IMPORT_ERROR,
    FetchedPreview,
    FetchFailed,
    Idle,
    ImportOrchestrator,
)
from domain.exceptions import FetchError, StoreError, ValidationError
from domain.models import Judge, SolvedProblem
from infrastructure.store import InMemoryProblemStore

PROBLEMS = [
    SolvedProblem(problem_url="https://codeforces.com/contest/100/problem/A", difficulty="800", solved_at="2024-01-01 10:00:00"),
    SolvedProblem(problem_url="https://codeforces.com/contest/100/problem/B", difficulty="1200", solved_at="2024-01-02 10:00:00"),
]


@pytest.fixture
def adapters():
    codeforces = AsyncMock()
    codeforces.fetch.return_value = list(PROBLEMS)
    atcoder = AsyncMock()
    atcoder.fetch.return_value = []
    return {Judge.CODEFORCES: codeforces, Judge.ATCODER: atcoder}


@pytest.fixture
def store():
    return InMemoryProblemStore()


@pytest.fixture
def orchestrator(adapters, store):
    return ImportOrchestrator(adapters=adapters, store=store)


@pytest.mark.asyncio
@pytest.mark.parametrize("handle", ["", "   ", "\t\n"])
async def test_blank_handle_is_rejected_without_network(orchestrator, adapters, handle):
    """Test that a blank handle raises before any adapter call and keeps the state."""
    with pytest.raises(ValidationError):
        await orchestrator.fetch(handle)

    adapters[Judge.CODEFORCES].fetch.assert_not_called()
    assert orchestrator.state == Idle()


@pytest.mark.asyncio
async def test_fetch_success_holds_preview(orchestrator, adapters, store):
    """Test that a successful fetch holds a preview and leaves the store alone."""
    state = await orchestrator.fetch("  tourist ")

    adapters[Judge.CODEFORCES].fetch.assert_awaited_once_with("tourist")
    assert isinstance(state, FetchedPreview)
    assert state.count == 2
    assert state.handle == "tourist"
    assert await store.count() == 0


@pytest.mark.asyncio
async def test_fetch_error_message_is_kept_verbatim(orchestrator, adapters):
    """Test that a FetchError message reaches the failed state unchanged."""
    adapters[Judge.CODEFORCES].fetch.side_effect = FetchError("Failed to fetch Codeforces submissions")

    state = await orchestrator.fetch("tourist")

    assert isinstance(state, FetchFailed)
    assert state.message == "Failed to fetch Codeforces submissions"


@pytest.mark.asyncio
async def test_unknown_error_uses_generic_message(orchestrator, adapters):
    """Test that unexpected adapter errors are reported with the generic message."""
    adapters[Judge.CODEFORCES].fetch.side_effect = KeyError("result")

    state = await orchestrator.fetch("tourist")

    assert isinstance(state, FetchFailed)
    assert state.message == GENERIC_FETCH_ERROR


@pytest.mark.asyncio
async def test_fetch_uses_selected_judge(orchestrator, adapters):
    """Test that fetch goes to the adapter of the selected judge only."""
    orchestrator.select_judge(Judge.ATCODER)
    state = await orchestrator.fetch("chokudai")

    adapters[Judge.ATCODER].fetch.assert_awaited_once_with("chokudai")
    adapters[Judge.CODEFORCES].fetch.assert_not_called()
    assert state.judge is Judge.ATCODER
    assert state.count == 0


@pytest.mark.asyncio
async def test_switching_judge_discards_preview(orchestrator, adapters):
    """Test that selecting another judge drops the preview without fetching."""
    await orchestrator.fetch("tourist")

    state = orchestrator.select_judge(Judge.ATCODER)

    assert state == Idle()
    adapters[Judge.ATCODER].fetch.assert_not_called()


@pytest.mark.asyncio
async def test_switching_judge_discards_error(orchestrator, adapters):
    """Test that selecting another judge clears a failed fetch."""
    adapters[Judge.CODEFORCES].fetch.side_effect = FetchError("boom")
    await orchestrator.fetch("tourist")

    assert orchestrator.select_judge(Judge.ATCODER) == Idle()


@pytest.mark.asyncio
async def test_confirm_commits_and_resets(orchestrator, store):
    """Test that confirm stores the preview and returns to idle with the count."""
    await orchestrator.fetch("tourist")

    state = await orchestrator.confirm()

    assert state == Idle(last_imported=2)
    stored = await store.get_all()
    assert [problem.as_problem() for problem in stored] == PROBLEMS
    assert [problem.id for problem in stored] == [1, 2]


@pytest.mark.asyncio
async def test_confirm_with_clear_replaces_existing(orchestrator, store):
    """Test that confirm with clear_existing leaves exactly the new batch."""
    await store.add_batch([SolvedProblem(problem_url="https://atcoder.jp/contests/abc1/tasks/abc1_a")])
    await orchestrator.fetch("tourist")

    await orchestrator.confirm(clear_existing=True)

    stored = await store.get_all()
    assert sorted(problem.problem_url for problem in stored) == sorted(p.problem_url for p in PROBLEMS)


@pytest.mark.asyncio
async def test_empty_preview_cannot_be_confirmed(orchestrator, store):
    """Test that an empty preview is rejected and a clearing import never wipes the store."""
    await store.add_batch(PROBLEMS + [SolvedProblem(problem_url="https://atcoder.jp/contests/abc1/tasks/abc1_a")])
    orchestrator.select_judge(Judge.ATCODER)
    preview = await orchestrator.fetch("newbie")
    assert preview.count == 0

    with pytest.raises(ValidationError, match=NOTHING_TO_IMPORT_ERROR):
        await orchestrator.confirm(clear_existing=True)

    assert orchestrator.state == preview
    assert await store.count() == 3


@pytest.mark.asyncio
async def test_failed_commit_keeps_preview(adapters):
    """Test that a store failure keeps the preview so the commit can be retried."""
    store = AsyncMock()
    store.import_batch.side_effect = StoreError("disk full")
    orchestrator = ImportOrchestrator(adapters=adapters, store=store)
    await orchestrator.fetch("tourist")

    state = await orchestrator.confirm(clear_existing=True)

    assert isinstance(state, FetchedPreview)
    assert state.count == 2
    assert state.commit_error == "disk full"

    store.import_batch.side_effect = None
    store.import_batch.return_value = 2
    assert await orchestrator.confirm() == Idle(last_imported=2)
    assert adapters[Judge.CODEFORCES].fetch.await_count == 1


@pytest.mark.asyncio
async def test_unexpected_commit_failure_uses_generic_message(adapters):
    """Test that unexpected store errors are reported with the generic message."""
    store = AsyncMock()
    store.import_batch.side_effect = RuntimeError("boom")
    orchestrator = ImportOrchestrator(adapters=adapters, store=store)
    await orchestrator.fetch("tourist")

    state = await orchestrator.confirm()

    assert state.commit_error == GENERIC_IMPORT_ERROR


@pytest.mark.asyncio
async def test_confirm_without_preview_is_rejected(orchestrator):
    """Test that confirm outside a preview raises ValidationError."""
    with pytest.raises(ValidationError):
        await orchestrator.confirm()


@pytest.mark.asyncio
async def test_reset(orchestrator):
    """Test that reset drops a pending preview."""
    await orchestrator.fetch("tourist")

    assert orchestrator.reset() == Idle()
