"""
link_harvester
==============
Fetch a site's robots.txt, sitemap.xml or page HTML and harvest the URLs
they contain into plain text files, one URL per line.

Package structure
-----------------
link_harvester/
├── __init__.py       – package init and public API
├── config.py         – constants and the immutable ``Target``
├── logging_setup.py  – package logger (colorlog)
├── network/          – requests session factory and single-GET fetcher
├── extract/          – robots / sitemap / links parsers
├── utils/            – output-file helpers
├── runner.py         – extractor units and the concurrent dispatcher
└── cli.py            – argparse CLI (``python -m link_harvester``)

Quick start
-----------
    from link_harvester import Target, run_extractors

    target = Target(url="https://example.com", output="example")
    run_extractors(target, ["robots", "sitemap", "links"])
"""

from .config  import Target
from .extract import extract_disallowed, extract_hrefs, extract_locations
from .network import FetchError, HTTPStatusError, fetch
from .runner  import run_extractors, run_links, run_robots, run_sitemap

__all__ = [
    "Target",
    "extract_disallowed",
    "extract_hrefs",
    "extract_locations",
    "FetchError",
    "HTTPStatusError",
    "fetch",
    "run_extractors",
    "run_robots",
    "run_sitemap",
    "run_links",
]
