"""CLI for single load tests."""

import argparse
import asyncio
import json
import sys

from ..core.models import TestConfig
from ..core.load_tester import LoadTester
from ..results.aggregator import ResultAggregator
from .common import add_pacing_arguments, add_probe_arguments, open_probe


async def _run(tester: LoadTester, args):
    async with open_probe(
        args.probe, args.server_url, args.samples_dir, args.api_key
    ) as probe:
        return await tester.run(probe)


def main():
    """Main entry point for load-test CLI."""
    parser = argparse.ArgumentParser(
        description="Load test a leak-reporting operation"
    )
    parser.add_argument(
        "--duration",
        type=float,
        required=True,
        help="Test duration in seconds",
    )
    parser.add_argument(
        "--concurrent-users",
        type=int,
        default=1,
        help="Probe calls launched per batch (default: 1)",
    )
    add_pacing_arguments(parser)
    add_probe_arguments(parser, default_probe="report-submission")
    parser.add_argument(
        "--output",
        type=str,
        help="Output TSV file path for results",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON instead of the formatted report",
    )

    args = parser.parse_args()

    config = TestConfig(
        duration=args.duration,
        concurrent_users=args.concurrent_users,
        requests_per_second=args.requests_per_second,
        pacing=args.pacing,
        label=args.probe,
    )
    try:
        config.validate()
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    tester = LoadTester(config)

    try:
        result = asyncio.run(_run(tester, args))
    except KeyboardInterrupt:
        print("\nTest interrupted by user")
        if tester.aggregator is not None and tester.aggregator.total_requests:
            tester.print_results(tester.aggregator.finalize())
        sys.exit(130)
    except Exception as e:
        print(f"Error running load test: {e}")
        sys.exit(1)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        tester.print_results(result)

    if args.output:
        aggregator = ResultAggregator()
        aggregator.add_result(result)
        aggregator.to_tsv(args.output)
        print(f"\nResults saved to: {args.output}")

    if result.failed_requests > 0:
        sys.exit(1)


if __name__ == "__main__":
    main()
