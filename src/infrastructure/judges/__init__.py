"""Judge adapters and the registry that selects between them."""

from typing import TYPE_CHECKING

from domain.models import Judge

from .atcoder import AtCoderAdapter
from .codeforces import CodeforcesAdapter
from .interfaces import HTTPClientProtocol, JudgeAdapterProtocol

if TYPE_CHECKING:
    from config import Settings


def create_adapter(
    judge: Judge, http_client: HTTPClientProtocol, settings: "Settings | None" = None
) -> JudgeAdapterProtocol:
    """Build the adapter for ``judge``."""
    if judge is Judge.CODEFORCES:
        if settings is None:
            return CodeforcesAdapter(http_client)
        return CodeforcesAdapter(http_client, api_url=settings.codeforces_api_url)

    if settings is None:
        return AtCoderAdapter(http_client)
    return AtCoderAdapter(
        http_client,
        api_url=settings.atcoder_api_url,
        resources_url=settings.atcoder_resources_url,
    )


def create_adapters(
    http_client: HTTPClientProtocol, settings: "Settings | None" = None
) -> dict[Judge, JudgeAdapterProtocol]:
    """One adapter per supported judge."""
    return {judge: create_adapter(judge, http_client, settings) for judge in Judge}


__all__ = [
    "AtCoderAdapter",
    "CodeforcesAdapter",
    "HTTPClientProtocol",
    "JudgeAdapterProtocol",
    "create_adapter",
    "create_adapters",
]
