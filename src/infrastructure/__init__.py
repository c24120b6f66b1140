"""Infrastructure layer: HTTP access, judge adapters and problem stores."""

from .http_client import AsyncHTTPClient

__all__ = ["AsyncHTTPClient"]
