"""Configuration constants and the per-run target for link_harvester."""

from dataclasses import dataclass
from pathlib import Path

BANNER = r"""
	 _       ___   _   _   _  __   ____
	| |     |_ _| | \ | | | |/ /  / ___|
	| |      | |  |  \| | | ' /  | |  _
	| |___   | |  | |\  | | . \  | |_| |
	|_____| |___| |_| \_| |_|\_\  \____|
"""

ROBOTS_PATH  = "/robots.txt"
SITEMAP_PATH = "/sitemap.xml"

# Extractor name → suffix appended to the --output prefix
OUTPUT_SUFFIXES = {
    "robots":  "_robots.txt",
    "sitemap": "_sitemap.txt",
    "links":   "_links.txt",
}

# Each fetch is a single GET: no retries, requests' default redirect handling
MAX_RETRIES = 0

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)


@dataclass(frozen=True)
class Target:
    """Everything an extractor needs to know about one invocation.

    ``url`` is used exactly as supplied: no trailing slash is added or
    stripped.  ``output`` is the prefix every output file name starts with.
    """

    url: str
    output: str
    verify_ssl: bool = True

    def output_path(self, kind: str) -> Path:
        """Return ``<output>_<kind>.txt`` for the extractor named *kind*."""
        return Path(self.output + OUTPUT_SUFFIXES[kind])
