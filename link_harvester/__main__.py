"""
Main entry point for the link_harvester package.

Allows running the tool as: python -m link_harvester
"""

import sys

from link_harvester.cli import main

if __name__ == "__main__":
    sys.exit(main())
