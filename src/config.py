"""Runtime configuration loaded from the environment (and an optional .env file)."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_CODEFORCES_API_URL = "https://codeforces.com/api"
DEFAULT_ATCODER_API_URL = "https://kenkoooo.com/atcoder/atcoder-api"
DEFAULT_ATCODER_RESOURCES_URL = "https://kenkoooo.com/atcoder/resources"


@dataclass(frozen=True)
class Settings:
    """Service settings."""

    codeforces_api_url: str = DEFAULT_CODEFORCES_API_URL
    atcoder_api_url: str = DEFAULT_ATCODER_API_URL
    atcoder_resources_url: str = DEFAULT_ATCODER_RESOURCES_URL
    http_timeout: float | None = None  # no timeout unless configured
    log_level: str = "INFO"
    store_path: str | None = None  # in-memory store when unset


def _optional_float(value: str | None) -> float | None:
    if value is None or not value.strip():
        return None
    return float(value)


def load_settings() -> Settings:
    """Build settings from environment variables."""
    load_dotenv()

    return Settings(
        codeforces_api_url=os.getenv("CODEFORCES_API_URL", DEFAULT_CODEFORCES_API_URL).rstrip("/"),
        atcoder_api_url=os.getenv("ATCODER_API_URL", DEFAULT_ATCODER_API_URL).rstrip("/"),
        atcoder_resources_url=os.getenv(
            "ATCODER_RESOURCES_URL", DEFAULT_ATCODER_RESOURCES_URL
        ).rstrip("/"),
        http_timeout=_optional_float(os.getenv("HTTP_TIMEOUT")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        store_path=os.getenv("STORE_PATH") or None,
    )
