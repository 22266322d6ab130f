"""
link_harvester.extract.robots
==============================
Extracts disallowed paths from robots.txt text.
"""

import re

# Case-sensitive literal prefix; the rest of the line is captured verbatim
_DISALLOW_RE = re.compile(r"Disallow: (.+)")


def extract_disallowed(text: str, base: str) -> list[str]:
    """
    Return ``base + path`` for every ``Disallow: <path>`` match in *text*,
    in source order.  Repeated rules are kept and paths are not normalised.
    """
    return [base + m.group(1) for m in _DISALLOW_RE.finditer(text)]
