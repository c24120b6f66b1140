from .orchestrator import (
    Committing,
    FetchedPreview,
    FetchFailed,
    Fetching,
    Idle,
    ImportOrchestrator,
    ImportState,
)

__all__ = [
    "Committing",
    "FetchFailed",
    "FetchedPreview",
    "Fetching",
    "Idle",
    "ImportOrchestrator",
    "ImportState",
]
