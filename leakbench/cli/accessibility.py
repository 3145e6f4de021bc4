"""CLI for the accessibility audit."""

import argparse
import json
import sys

from ..accessibility.auditor import AccessibilityTester
from ..results.aggregator import print_accessibility_report


def main():
    """Main entry point for accessibility CLI."""
    parser = argparse.ArgumentParser(description="Run the accessibility audit")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )
    parser.add_argument(
        "--min-score",
        type=int,
        default=0,
        help="Exit with status 1 if the score is below this value (default: 0)",
    )

    args = parser.parse_args()

    result = AccessibilityTester().run()

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print_accessibility_report(result)

    if result.score < args.min_score:
        sys.exit(1)


if __name__ == "__main__":
    main()
