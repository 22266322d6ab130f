"""Utility subpackage for link_harvester."""

from .files import write_lines

__all__ = ["write_lines"]
