"""Command line interface: print an RSS 2.0 feed summary or convert it to HTML."""
from __future__ import annotations

import argparse
from dataclasses import replace
import io
import logging
import sys
from typing import List, Optional

from .config import __version__, load_settings
from .core import FeedConverter
from .exceptions import MalformedFeed, RSSFetchError

logger = logging.getLogger(__name__)

URL_PROMPT = "Enter the URL of an RSS 2.0 news feed: "


def _positive_float(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {raw!r}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {raw!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="rss-reader",
        description="Summarize an RSS 2.0 feed on the console or convert it to an HTML table.",
    )
    p.add_argument("source", nargs="?", help="feed URL or local file (prompted for when omitted)")
    p.add_argument("--html", metavar="OUTPUT", help="write an HTML document to OUTPUT ('-' for stdout)")
    p.add_argument("--no-escape", action="store_true", help="emit feed text into HTML without escaping")
    p.add_argument("--timeout", type=_positive_float, help="network timeout in seconds")
    p.add_argument("-v", "--verbose", action="count", default=0, help="more logging (-vv for debug)")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def _log_level(configured: str, verbose: int) -> int:
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return getattr(logging, configured, logging.WARNING)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings()
    logging.basicConfig(
        level=_log_level(settings.log_level, args.verbose),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    source = args.source
    if not source:
        source = input(URL_PROMPT).strip()
    if not source:
        print("No feed source given", file=sys.stderr)
        return 2

    if args.timeout is not None:
        settings = replace(settings, timeout_sec=args.timeout)
    if args.no_escape:
        settings = replace(settings, escape_html=False)
    converter = FeedConverter.from_settings(settings)

    # Render into memory first so a failed conversion leaves no output file
    buffer = io.StringIO()
    try:
        converter.write(source, buffer, mode="html" if args.html else "console")
    except MalformedFeed as e:
        logger.debug("Rejected feed %s", source, exc_info=True)
        print(f"Not Valid RSS 2.0: {e}", file=sys.stderr)
        return 1
    except RSSFetchError as e:
        print(str(e), file=sys.stderr)
        return 1

    if not args.html or args.html == "-":
        sys.stdout.write(buffer.getvalue())
    else:
        with open(args.html, "w", encoding="utf-8") as f:
            f.write(buffer.getvalue())
        logger.info("Wrote %s", args.html)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
