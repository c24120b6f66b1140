"""Litestar application for the solve tracker."""

import sys

from litestar import Litestar, Request, Response
from litestar.datastructures import State
from litestar.status_codes import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)
from loguru import logger

from api.routes import HeatmapController, ImportController, ProblemController
from application.orchestrator import ImportOrchestrator
from config import Settings, load_settings
from domain.exceptions import ProblemNotFoundError, StoreError, ValidationError
from infrastructure.store import ProblemStoreProtocol, create_store
from services import create_import_orchestrator


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level)


def _error_response(status_code: int):
    def handler(request: Request, exc: Exception) -> Response:
        logger.debug(f"{request.method} {request.url.path} -> {status_code}: {exc}")
        return Response(content={"detail": str(exc)}, status_code=status_code)

    return handler


def create_app(
    settings: Settings | None = None,
    store: ProblemStoreProtocol | None = None,
    orchestrator: ImportOrchestrator | None = None,
) -> Litestar:
    """Build the application with its store and import orchestrator."""
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    store = store if store is not None else create_store(settings.store_path)
    orchestrator = orchestrator or create_import_orchestrator(store, settings)

    return Litestar(
        route_handlers=[ProblemController, ImportController, HeatmapController],
        state=State({"store": store, "orchestrator": orchestrator}),
        exception_handlers={
            ValidationError: _error_response(HTTP_400_BAD_REQUEST),
            ProblemNotFoundError: _error_response(HTTP_404_NOT_FOUND),
            StoreError: _error_response(HTTP_500_INTERNAL_SERVER_ERROR),
        },
    )
