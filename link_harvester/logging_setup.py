"""Logging configuration for link_harvester."""

import logging
import sys
from pathlib import Path

import colorlog

log = logging.getLogger("link-harvester")

_FILE_LOG_FMT = "%(asctime)s [%(levelname)s] %(threadName)s %(message)s"
_FILE_LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(debug: bool = False, log_file: str | None = None) -> None:
    """Configure the package logger.

    Diagnostics go to standard output with colorlog level colours.  When
    *log_file* is given every record is also written there at DEBUG level.
    """
    level = logging.DEBUG if debug else logging.INFO
    log.setLevel(logging.DEBUG if log_file else level)
    log.handlers.clear()

    handler = colorlog.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(colorlog.ColoredFormatter(
        "%(log_color)s%(asctime)s [%(levelname)s]%(reset)s %(message)s",
        datefmt="%H:%M:%S",
        log_colors={
            "DEBUG":    "cyan",
            "INFO":     "green",
            "WARNING":  "yellow",
            "ERROR":    "red",
            "CRITICAL": "bold_red",
        },
    ))
    log.addHandler(handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_path), encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter(_FILE_LOG_FMT, datefmt=_FILE_LOG_DATEFMT))
        log.addHandler(fh)
        log.debug("Logging to file: %s", log_path.resolve())
