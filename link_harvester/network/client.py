"""
HTTP fetcher shared by every extractor.

Each extractor builds its own session so no connection is shared between
concurrently running units beyond what requests pools inside one session.
"""

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..config import MAX_RETRIES, ROBOTS_PATH, SITEMAP_PATH, USER_AGENT
from ..logging_setup import log


class FetchError(Exception):
    """The resource could not be retrieved (transport or body-read failure)."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class HTTPStatusError(FetchError):
    """The server answered with something other than ``200 OK``."""

    def __init__(self, url: str, status_code: int) -> None:
        super().__init__(url, f"HTTP {status_code}")
        self.status_code = status_code


def build_session(verify_ssl: bool = True) -> requests.Session:
    """
    Return a requests.Session that performs single-shot GETs.

    Args:
        verify_ssl: Whether to verify TLS certificates

    Returns:
        Configured requests.Session instance
    """
    session = requests.Session()
    adapter = HTTPAdapter(max_retries=Retry(total=MAX_RETRIES, read=False))
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.verify = verify_ssl
    session.headers.update({"User-Agent": USER_AGENT})
    return session


def fetch(session: requests.Session, url: str) -> bytes:
    """
    GET *url* once and return the response body.

    Raises:
        HTTPStatusError: the status code was not 200
        FetchError: the request or the body read failed
    """
    log.debug("GET %s", url)
    try:
        with session.get(url) as resp:
            if resp.status_code != 200:
                raise HTTPStatusError(url, resp.status_code)
            body = resp.content
    except requests.RequestException as exc:
        raise FetchError(url, str(exc)) from exc
    log.debug("GET %s → %d bytes", url, len(body))
    return body


def robots_url(base: str) -> str:
    """Return the robots.txt location for *base* (plain concatenation)."""
    return base + ROBOTS_PATH


def sitemap_url(base: str) -> str:
    """Return the sitemap.xml location for *base* (plain concatenation)."""
    return base + SITEMAP_PATH
