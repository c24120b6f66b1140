"""Protocol interfaces for judge adapters."""

from typing import Any, Protocol

from domain.models import SolvedProblem


class HTTPClientProtocol(Protocol):
    """Protocol for HTTP client."""

    async def get_json(self, url: str, params: dict[str, Any] | None = None) -> Any:
        """Get decoded JSON from URL."""
        ...


class JudgeAdapterProtocol(Protocol):
    """Protocol for fetching a user's solved problems from one judge."""

    async def fetch(self, handle: str) -> list[SolvedProblem]:
        """Fetch first accepted solve of every problem solved by ``handle``."""
        ...
