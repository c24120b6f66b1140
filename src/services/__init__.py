from typing import TYPE_CHECKING

from services.heatmap import HeatmapService
from services.problem import ProblemService

if TYPE_CHECKING:
    from application.orchestrator import ImportOrchestrator
    from config import Settings
    from infrastructure.store import ProblemStoreProtocol


def create_import_orchestrator(
    store: "ProblemStoreProtocol", settings: "Settings | None" = None
) -> "ImportOrchestrator":
    """Factory function to create the import orchestrator with all dependencies."""
    from application.orchestrator import ImportOrchestrator
    from infrastructure.http_client import AsyncHTTPClient
    from infrastructure.judges import create_adapters

    http_client = AsyncHTTPClient(timeout=settings.http_timeout if settings else None)
    return ImportOrchestrator(adapters=create_adapters(http_client, settings), store=store)


__all__ = ["HeatmapService", "ProblemService", "create_import_orchestrator"]
