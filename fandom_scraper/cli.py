# -*- coding: utf-8 -*-

"""
Command-line entry point.

Usage:
  fandom-scraper dragon-ball --limit 20
  fandom-scraper death-note --language fr --recursive --no-base64
  fandom-scraper --list-sites

Writes the result as JSON to stdout.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .errors import InvalidOptionsError, UnknownSiteError
from .models import ScrapeOptions
from .scraper import FandomScraper
from .sites import DEFAULT_REGISTRY

logger = logging.getLogger("fandom_scraper.cli")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="fandom-scraper",
        description="Scrape character data from a Fandom wiki's character listing.",
    )
    ap.add_argument("name", nargs="?", help="Fiction name, e.g. dragon-ball")
    ap.add_argument("--language", default=None, help="Wiki language (default: en)")
    ap.add_argument("--limit", type=int, default=100000, help="Maximum number of characters")
    ap.add_argument("--offset", type=int, default=0, help="Number of listing entries to skip")
    ap.add_argument("--recursive", action="store_true", help="Extract infobox fields from each character page")
    ap.add_argument("--no-base64", action="store_true", help="Keep image URLs instead of base64 content")
    ap.add_argument("--no-id", action="store_true", help="Do not extract the page id")
    ap.add_argument("--list-sites", action="store_true", help="List the available wikis and exit")
    ap.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    return ap


def _list_sites() -> None:
    for name in DEFAULT_REGISTRY.names():
        print(f"{name}: {', '.join(DEFAULT_REGISTRY.languages(name))}")


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
        stream=sys.stderr,
    )

    if args.list_sites:
        _list_sites()
        return 0
    if not args.name:
        ap.print_usage(sys.stderr)
        logger.error("a fiction name is required (see --list-sites)")
        return 2

    options = ScrapeOptions(
        limit=args.limit,
        offset=args.offset,
        recursive=args.recursive,
        base64=not args.no_base64,
        with_id=not args.no_id,
    )
    try:
        scraper = FandomScraper(args.name, language=args.language)
    except UnknownSiteError as e:
        logger.error("%s (available: %s)", e, ", ".join(DEFAULT_REGISTRY.names()))
        return 2

    try:
        result = scraper.get_all(options)
    except InvalidOptionsError as e:
        logger.error("%s", e)
        return 2
    finally:
        scraper.fetcher.close()

    json.dump(result.to_dict(), sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")
    logger.info("Done (characters=%d, failures=%d)", len(result), len(result.failures))
    return 0 if result.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
