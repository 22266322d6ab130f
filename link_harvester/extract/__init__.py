"""
link_harvester.extract
=======================
Sub-package of pure parsers, one per extractor.

Public API
----------
    from link_harvester.extract import (
        extract_disallowed, extract_locations, extract_hrefs,
    )
"""

from .links   import extract_hrefs, iter_elements
from .robots  import extract_disallowed
from .sitemap import SitemapParseError, extract_locations

__all__ = [
    "extract_disallowed",
    "extract_locations",
    "extract_hrefs",
    "iter_elements",
    "SitemapParseError",
]
