"""Output-file helpers."""

from collections.abc import Iterable
from pathlib import Path

from ..logging_setup import log


def write_lines(path: Path, lines: Iterable[str]) -> int:
    """Write *lines* to *path*, one per line, each ending in ``\\n``.

    The file is created (or truncated) even when *lines* is empty.  Bytes
    that were decoded with ``surrogateescape`` are written back unchanged.
    Returns the number of lines written.
    """
    count = 0
    with open(path, "w", encoding="utf-8", errors="surrogateescape",
              newline="\n") as fh:
        for line in lines:
            fh.write(line + "\n")
            count += 1
    log.debug("Saved → %s (%d lines)", path, count)
    return count
