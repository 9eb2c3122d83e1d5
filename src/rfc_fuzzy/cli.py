"""
List the local RFC index, optionally ranked by a fuzzy filter.

Run with:
    rfc-fuzzy --filter tls
    rfc-fuzzy --index ./rfc_list.txt --filter "http 2"
    cat names.txt | rfc-fuzzy --index - --filter quic
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rfc_fuzzy.config import ScoringConfig
from rfc_fuzzy.ranker import FuzzyRanker

DEFAULT_INDEX = Path.home() / ".rfc_dirs_nvim" / "rfc_list.txt"


def read_index(path: str) -> list[str]:
    """Non-empty lines of the index file, or of stdin when ``path`` is ``-``."""
    if path == "-":
        lines = sys.stdin.read().splitlines()
    else:
        lines = Path(path).read_text(encoding="utf-8").splitlines()
    return [line for line in lines if line]


def list_index(
    entries: list[str],
    filter_term: str,
    config: ScoringConfig,
    deadline: float | None = None,
) -> list[str]:
    """Entries ranked by ``filter_term``; an empty filter returns them unchanged."""
    if not filter_term:
        return entries
    return FuzzyRanker(config).rank(filter_term, entries, deadline=deadline)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rfc-fuzzy",
        description="List saved RFCs, ranked by a fuzzy filter.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Whole index, file order
  rfc-fuzzy

  # Ranked by a filter term
  rfc-fuzzy --filter "tls 1.3"

  # Read candidates from stdin with a smaller pool
  cat names.txt | rfc-fuzzy --index - --filter quic --pool-size 4

Scoring weights can also be set with RFC_FUZZY_* environment variables,
e.g. RFC_FUZZY_GAP_INNER=-0.02.
""",
    )
    parser.add_argument(
        "--filter",
        type=str,
        default="",
        help="Fuzzy filter term (default: none, list everything).",
    )
    parser.add_argument(
        "--index",
        type=str,
        default=str(DEFAULT_INDEX),
        help=f"Index file with one entry per line, or '-' for stdin (default: {DEFAULT_INDEX}).",
    )
    parser.add_argument(
        "--deadline",
        type=float,
        default=None,
        help="Stop scoring after this many seconds (default: no limit).",
    )
    parser.add_argument(
        "--pool-size",
        type=int,
        default=None,
        help="Number of scoring workers (default: from config, 20).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = ScoringConfig.from_env()
        if args.pool_size is not None:
            config = config.replace(pool_size=args.pool_size)
        entries = read_index(args.index)
    except (OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    results = list_index(entries, args.filter, config, deadline=args.deadline)

    print(f"Total line count: {len(results)}")
    for line in results:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
