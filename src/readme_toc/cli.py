"""Command-line interface for readme_toc."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from readme_toc.aggregator import AggregatorOptions, regenerate
from readme_toc.exceptions import ReadmeTocError

EXIT_OK = 0
EXIT_DRIFT = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    defaults = AggregatorOptions()
    parser = argparse.ArgumentParser(
        prog="readme-toc",
        description="Regenerate the folder links and sections of a project README.",
    )
    parser.add_argument("--root", type=Path, default=Path.cwd(), help="Project root to scan (default: cwd)")
    parser.add_argument("--readme", type=Path, help="README to rewrite (default: <root>/README.md)")
    parser.add_argument("--marker", default=defaults.marker, help="Marker after which content is generated")
    parser.add_argument(
        "--end-marker",
        default=defaults.end_marker or "",
        help="Optional closing marker; content after it is preserved (empty disables)",
    )
    parser.add_argument("--no-sort", action="store_true", help="Keep filesystem directory order")
    parser.add_argument("--include-hidden", action="store_true", help="Include dot-directories")
    parser.add_argument(
        "--refresh-sections",
        action="store_true",
        help="Replace stale section bodies instead of appending new sections",
    )
    parser.add_argument("--strict", action="store_true", help="Fail on non-canonical managed content")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--dry-run", action="store_true", help="Print the result instead of writing it")
    mode.add_argument("--check", action="store_true", help="Exit 1 if the README is out of date")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    defaults = AggregatorOptions()
    options = AggregatorOptions(
        marker=args.marker,
        end_marker=args.end_marker or None,
        sort_directories=defaults.sort_directories and not args.no_sort,
        include_hidden=args.include_hidden or defaults.include_hidden,
        refresh_sections=args.refresh_sections or defaults.refresh_sections,
        strict=args.strict or defaults.strict,
        dry_run=args.dry_run or args.check,
    )

    try:
        result = regenerate(args.root, args.readme, options)
    except ReadmeTocError as exc:
        print(f"readme-toc: {exc}", file=sys.stderr)
        return EXIT_ERROR

    if args.dry_run:
        sys.stdout.write(result.content)
        return EXIT_OK
    if args.check and result.changed:
        print("readme-toc: README is out of date", file=sys.stderr)
        return EXIT_DRIFT
    return EXIT_OK
