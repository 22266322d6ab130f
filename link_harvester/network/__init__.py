"""
Network operations module: session setup and the single-GET fetcher.
"""

from link_harvester.network.client import (
    FetchError,
    HTTPStatusError,
    build_session,
    fetch,
    robots_url,
    sitemap_url,
)

__all__ = [
    "FetchError",
    "HTTPStatusError",
    "build_session",
    "fetch",
    "robots_url",
    "sitemap_url",
]
