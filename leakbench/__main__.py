"""Main entry point for the leakbench package.

Usage:
    python -m leakbench load-test --probe report-submission --duration 60 --concurrent-users 5 --requests-per-second 2
    python -m leakbench stress-test --probe map-loading --duration 120 --max-concurrent-users 100
    python -m leakbench accessibility
    python -m leakbench suite --duration 30
"""

import sys


def main():
    """Main entry point that dispatches to subcommands."""
    if len(sys.argv) < 2:
        print_help()
        sys.exit(1)

    command = sys.argv[1]

    if command in ["-h", "--help", "help"]:
        print_help()
        sys.exit(0)

    # Remove the command from argv so subcommand parsers see correct args
    sys.argv = [sys.argv[0]] + sys.argv[2:]

    if command == "load-test":
        from .cli.load_test import main as load_test_main

        load_test_main()
    elif command == "stress-test":
        from .cli.stress_test import main as stress_test_main

        stress_test_main()
    elif command == "accessibility":
        from .cli.accessibility import main as accessibility_main

        accessibility_main()
    elif command == "suite":
        from .cli.test_suite import main as test_suite_main

        test_suite_main()
    else:
        print(f"Unknown command: {command}")
        print_help()
        sys.exit(1)


def print_help():
    """Print help message."""
    print(
        """Leak Reporting Load, Stress and Accessibility Testing

Usage: python -m leakbench <command> [options]

Commands:
    load-test      Run one load test against a probe
    stress-test    Double concurrency per round until failures exceed the threshold
    accessibility  Run the accessibility audit
    suite          Run the full plan: login and submission load, map stress, accessibility

Probes:
    login, report-submission, map-loading, real-time-updates   (simulated)
    fetch-reports, submit-report                               (HTTP, need --server-url)

Examples:
    # Report submission under load
    python -m leakbench load-test --probe report-submission --duration 60 \\
        --concurrent-users 5 --requests-per-second 2

    # Exact aggregate rate instead of per-batch pacing
    python -m leakbench load-test --probe login --duration 30 \\
        --concurrent-users 10 --requests-per-second 5 --pacing token_bucket

    # Stress the map data endpoint of a running report API
    python -m leakbench stress-test --probe fetch-reports \\
        --server-url http://localhost:3000 --max-concurrent-users 64

    # Everything, with shorter tests
    python -m leakbench suite --duration 10

For command-specific help:
    python -m leakbench <command> --help
"""
    )


if __name__ == "__main__":
    main()
