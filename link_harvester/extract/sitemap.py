"""
link_harvester.extract.sitemap
===============================
Extracts ``<loc>`` entries from a sitemap ``<urlset>`` document.

Only ``<url>`` children of the root element are considered.  Element names
are compared by local name, so both plain and namespaced sitemaps
(``xmlns="http://www.sitemaps.org/schemas/sitemap/0.9"``) are handled.
``<lastmod>``, ``<priority>`` and sitemap-index structures are ignored.
Anything after the closing tag of the root element is ignored as well.
"""

from lxml import etree

_PARSER = etree.XMLParser(resolve_entities=False, no_network=True)
# Only used once the root element is known to be complete
_TRAILING_PARSER = etree.XMLParser(
    resolve_entities=False, no_network=True, recover=True,
)


class SitemapParseError(ValueError):
    """The sitemap body is not well-formed XML."""


def _local_name(el) -> str:
    return etree.QName(el).localname


def _parse_root(body: bytes):
    try:
        return etree.fromstring(body, _PARSER)
    except etree.XMLSyntaxError as exc:
        errors = exc.error_log.filter_from_errors()
        if not errors or any(
            e.type != etree.ErrorTypes.ERR_DOCUMENT_END for e in errors
        ):
            raise SitemapParseError(str(exc)) from exc
    # "Extra content at the end of the document": the root closed cleanly
    return etree.fromstring(body, _TRAILING_PARSER)


def extract_locations(body: bytes) -> list[str]:
    """
    Return the text of every ``<url><loc>`` entry in document order.

    The text is the concatenation of the ``<loc>`` element's own text nodes,
    so comments inside it do not cut the value short.  When a ``<url>``
    holds several ``<loc>`` elements the last one wins; an empty or missing
    ``<loc>`` contributes an empty string.  Text is returned exactly as it
    appears in the document.

    Raises
    ------
    SitemapParseError
        If *body* cannot be parsed as XML.
    """
    if not body.strip():
        raise SitemapParseError("sitemap document is empty")
    root = _parse_root(body)

    locations: list[str] = []
    for url_el in root:
        if not isinstance(url_el.tag, str) or _local_name(url_el) != "url":
            continue
        loc = ""
        for child in url_el:
            if isinstance(child.tag, str) and _local_name(child) == "loc":
                loc = "".join(child.xpath("text()"))
        locations.append(loc)
    return locations
