"""
link_harvester.extract.links
=============================
Extracts anchor ``href`` values from HTML using BeautifulSoup.

The whole document is walked, ``<head>`` included.  Values are returned
literally: nothing is resolved against the page URL, deduplicated, or
filtered out (empty and fragment-only hrefs are kept).
"""

from collections.abc import Iterator

from bs4 import BeautifulSoup, Tag

# html.parser recovers from malformed markup and, unlike the lxml backend,
# reports repeated attributes so that none of them is lost
_BS4_PARSER = "html.parser"


def _keep_all(attrs: dict, key: str, value: str) -> None:
    """Collect every value of a repeated attribute into a list."""
    existing = attrs[key]
    if isinstance(existing, list):
        existing.append(value)
    else:
        attrs[key] = [existing, value]


def iter_elements(node: Tag) -> Iterator[Tag]:
    """Yield *node* and every element below it in pre-order (children
    left-to-right).  Uses an explicit stack instead of recursion."""
    stack = [node]
    while stack:
        el = stack.pop()
        yield el
        stack.extend(
            child for child in reversed(el.contents) if isinstance(child, Tag)
        )


def extract_hrefs(html: bytes | str) -> list[str]:
    """Return every ``href`` of every ``<a>`` element in document pre-order.

    An anchor carrying the attribute more than once contributes each value,
    in source order.
    """
    soup = BeautifulSoup(html, _BS4_PARSER, on_duplicate_attribute=_keep_all)
    hrefs: list[str] = []
    for el in iter_elements(soup):
        if el.name != "a":
            continue
        href = el.get("href")
        if isinstance(href, list):
            hrefs.extend(href)
        elif href is not None:
            hrefs.append(href)
    return hrefs
