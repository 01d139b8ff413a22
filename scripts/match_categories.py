"""
CategoryMatch — Command-line Runner
Matches suggested category names against a taxonomy snapshot file and
prints the match results plus dashboard triage as JSON.

  python scripts/match_categories.py --categories snapshot.json Smartphone "Gaming Consoles"
  python scripts/match_categories.py --validate "women's clothing"
"""

import argparse
import json
import sys
from pathlib import Path

from catmatch import (
    CategoryMatchError,
    batch_match,
    load_category_snapshot,
    summarize_confidence,
    triage,
    validate_name,
)
from catmatch.utils.logger import configure_logging, get_logger

log = get_logger("catmatch.runner")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Match suggested category names against an existing taxonomy",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/match_categories.py --categories snapshot.json Smartphone
  python scripts/match_categories.py --categories snapshot.json --threshold 0.9 "Laptop Computers"
  python scripts/match_categories.py --validate "Home & Garden"
        """,
    )
    parser.add_argument(
        "suggestions",
        nargs="*",
        help="Suggested category names to match",
    )
    parser.add_argument(
        "--categories",
        type=Path,
        help="Path to a JSON category snapshot",
    )
    parser.add_argument(
        "--threshold",
        type=float,
        default=None,
        help="Reuse threshold in [0, 1] (default: SIMILARITY_THRESHOLD setting)",
    )
    parser.add_argument(
        "--validate",
        metavar="NAME",
        help="Validate a proposed category name instead of matching",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    configure_logging()
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.validate is not None:
        result = validate_name(args.validate)
        print(json.dumps(result.model_dump(), indent=2))
        return 0 if result.valid else 1

    if args.categories is None or not args.suggestions:
        parser.error("--categories and at least one suggestion are required")

    try:
        categories = load_category_snapshot(args.categories)
    except CategoryMatchError as e:
        log.error("snapshot_load_failed", error=str(e))
        return 1

    results = batch_match(args.suggestions, categories, threshold=args.threshold)
    report = triage(results)

    output = {
        "results": [
            {"suggestion": s, **r.model_dump()}
            for s, r in zip(args.suggestions, results)
        ],
        "triage": report.model_dump(),
        "stats": summarize_confidence(results),
    }
    print(json.dumps(output, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
