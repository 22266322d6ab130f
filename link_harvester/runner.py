"""
link_harvester.runner
======================
The three extractor units and the dispatcher that runs them concurrently.

Every unit follows the same path: fetch → parse in memory → write the output
file.  Any failure is logged as a single line and ends that unit only; the
output file is never created before the parse has completed.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Callable

from .config import Target
from .extract import (
    SitemapParseError,
    extract_disallowed,
    extract_hrefs,
    extract_locations,
)
from .logging_setup import log
from .network import FetchError, build_session, fetch, robots_url, sitemap_url
from .utils import write_lines


def _save(target: Target, kind: str, lines: list[str]) -> Path | None:
    path = target.output_path(kind)
    try:
        write_lines(path, lines)
    except OSError as exc:
        log.error("[%s] Error creating output file %s: %s", kind.upper(), path, exc)
        return None
    return path


def run_robots(target: Target) -> Path | None:
    """Write ``<url><path>`` for every robots.txt ``Disallow:`` rule."""
    url = robots_url(target.url)
    try:
        with build_session(target.verify_ssl) as session:
            body = fetch(session, url)
    except FetchError as exc:
        log.error("[ROBOTS] Failed to retrieve robots.txt from %s (%s)",
                  target.url, exc.reason)
        return None

    # surrogateescape keeps non-UTF-8 bytes intact through to the output file
    text = body.decode("utf-8", errors="surrogateescape")
    urls = extract_disallowed(text, target.url)
    path = _save(target, "robots", urls)
    if path:
        log.info("[ROBOTS] Extracted %d URL(s) from robots.txt saved in %s",
                 len(urls), path)
    return path


def run_sitemap(target: Target) -> Path | None:
    """Write every ``<url><loc>`` entry of sitemap.xml."""
    url = sitemap_url(target.url)
    try:
        with build_session(target.verify_ssl) as session:
            body = fetch(session, url)
    except FetchError as exc:
        log.error("[SITEMAP] Failed to retrieve sitemap.xml from %s (%s)",
                  target.url, exc.reason)
        return None

    try:
        locations = extract_locations(body)
    except SitemapParseError as exc:
        log.error("[SITEMAP] Error parsing sitemap.xml from %s: %s", url, exc)
        return None

    path = _save(target, "sitemap", locations)
    if path:
        log.info("[SITEMAP] Extracted %d URL(s) from sitemap.xml saved in %s",
                 len(locations), path)
    return path


def run_links(target: Target) -> Path | None:
    """Write the ``href`` of every anchor on the page at ``target.url``."""
    try:
        with build_session(target.verify_ssl) as session:
            body = fetch(session, target.url)
    except FetchError as exc:
        log.error("[LINKS] Failed to retrieve page from %s (%s)",
                  target.url, exc.reason)
        return None

    hrefs = extract_hrefs(body)
    path = _save(target, "links", hrefs)
    if path:
        log.info("[LINKS] Extracted %d link(s) from page saved in %s",
                 len(hrefs), path)
    return path


EXTRACTORS: dict[str, Callable[[Target], Path | None]] = {
    "robots":  run_robots,
    "sitemap": run_sitemap,
    "links":   run_links,
}


def run_extractors(target: Target, kinds: list[str]) -> dict[str, Path | None]:
    """
    Run the extractors named in *kinds* in parallel threads and wait for all
    of them.

    Returns a mapping of extractor name to the output file it wrote, or
    ``None`` when that extractor failed.  Results are keyed in the order of
    *kinds*.  There is no timeout: a unit that never returns blocks the call.
    """
    unknown = [k for k in kinds if k not in EXTRACTORS]
    if unknown:
        raise ValueError(f"unknown extractor(s): {', '.join(unknown)}")
    kinds = list(dict.fromkeys(kinds))

    results: dict[str, Path | None] = {kind: None for kind in kinds}
    if not kinds:
        return results

    with ThreadPoolExecutor(max_workers=len(kinds),
                            thread_name_prefix="extractor") as pool:
        future_to_kind = {
            pool.submit(EXTRACTORS[kind], target): kind for kind in kinds
        }
        for future in as_completed(future_to_kind):
            kind = future_to_kind[future]
            try:
                results[kind] = future.result()
            except Exception:
                log.exception("[%s] Extractor crashed", kind.upper())
    return results
