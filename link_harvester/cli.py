"""
Command-line interface for link_harvester.

Provides argument parsing and main execution flow.
"""

import argparse
import logging

import urllib3

from link_harvester.config import BANNER, Target
from link_harvester.logging_setup import log, setup_logging
from link_harvester.runner import EXTRACTORS, run_extractors


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argument parser.

    ``--url`` and ``--output`` are validated by :func:`main` rather than by
    argparse so that a missing value prints the usage text and returns
    normally instead of exiting with status 2.
    """
    parser = argparse.ArgumentParser(
        prog="link-harvester",
        description="Extract URLs from a site's robots.txt, sitemap.xml "
                    "and page links into separate text files.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Output files are named <output>_robots.txt, <output>_sitemap.txt\n"
            "and <output>_links.txt.  Selected extractors run concurrently."
        ),
    )
    parser.add_argument(
        "--url", default="",
        help="Website URL (used as given, no trailing slash added or removed)",
    )
    parser.add_argument(
        "--output", default="",
        help="Output file name prefix",
    )
    parser.add_argument(
        "--robots", action="store_true",
        help="Extract URLs from robots.txt",
    )
    parser.add_argument(
        "--sitemap", action="store_true",
        help="Extract URLs from sitemap.xml",
    )
    parser.add_argument(
        "--links", action="store_true",
        help="Extract all links from the webpage",
    )
    parser.add_argument(
        "--no-verify-ssl", dest="verify_ssl", action="store_false", default=True,
        help="Disable TLS certificate verification (use for self-signed certs)",
    )
    parser.add_argument(
        "--log-file", default=None,
        help="Also write the log to this file",
    )
    parser.add_argument(
        "--no-banner", dest="banner", action="store_false", default=True,
        help="Do not print the start-up banner",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable verbose debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Always returns 0: extractor failures are reported through the log only.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(debug=args.debug, log_file=args.log_file)

    if args.debug:
        logging.getLogger("urllib3").setLevel(logging.DEBUG)

    if args.banner:
        print(BANNER)

    if not args.url or not args.output:
        print("Website URL and output file name prefix are required.")
        parser.print_help()
        return 0

    kinds = [kind for kind in EXTRACTORS if getattr(args, kind)]
    if not kinds:
        print("At least one of --robots, --sitemap, or --links options "
              "must be specified.")
        parser.print_help()
        return 0

    if not args.verify_ssl:
        urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
        log.warning("TLS certificate verification is DISABLED (--no-verify-ssl)")

    target = Target(url=args.url, output=args.output, verify_ssl=args.verify_ssl)
    log.debug("Running %s against %s", ", ".join(kinds), target.url)
    run_extractors(target, kinds)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
