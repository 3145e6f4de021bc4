"""Result aggregation and reporting."""

import pandas as pd
from typing import List, Optional, Sequence

from ..accessibility.auditor import AccessibilityTestResult
from ..core.models import LoadTestResult


def _format_ms(value: float) -> str:
    return f"{value:.2f}"


class ResultAggregator:
    """Aggregates and formats test results for export."""

    def __init__(self):
        self.results: List[LoadTestResult] = []

    def add_result(self, result: LoadTestResult) -> None:
        """Add a single test result."""
        self.results.append(result)

    def add_results(self, results: List[LoadTestResult]) -> None:
        """Add multiple test results."""
        self.results.extend(results)

    def clear(self) -> None:
        """Clear all results."""
        self.results = []

    def to_dataframe(self) -> pd.DataFrame:
        """Convert results to pandas DataFrame."""
        data = []
        for result in self.results:
            data.append({
                "Test": result.label or "-",
                "Total": result.total_requests,
                "Success": result.successful_requests,
                "Failed": result.failed_requests,
                "Error%": f"{result.error_rate:.2f}",
                "Avg_ms": _format_ms(result.average_response_time),
                "Min_ms": _format_ms(result.min_response_time) if result.has_requests else "-",
                "Max_ms": _format_ms(result.max_response_time),
                "P95_ms": _format_ms(result.p95_response_time),
                "P99_ms": _format_ms(result.p99_response_time),
                "RPS": f"{result.throughput_rps:.2f}",
            })
        return pd.DataFrame(data)

    @staticmethod
    def stress_dataframe(rounds: Sequence) -> pd.DataFrame:
        """One row per stress round (cumulative totals plus the round's own counts)."""
        data = []
        for r in rounds:
            data.append({
                "Users": r.concurrent_users,
                "Round_Requests": r.round_requests,
                "Round_Failed": r.round_failures,
                "Cumulative_Total": r.cumulative.total_requests,
                "Cumulative_Failed": r.cumulative.failed_requests,
                "Failure%": f"{r.failure_rate * 100:.2f}",
                "Avg_ms": _format_ms(r.cumulative.average_response_time),
                "Max_ms": _format_ms(r.cumulative.max_response_time),
            })
        return pd.DataFrame(data)

    def to_csv(self, path: str) -> None:
        """Export to CSV file."""
        df = self.to_dataframe()
        df.to_csv(path, index=False)

    def to_tsv(self, path: str) -> None:
        """Export to TSV file."""
        df = self.to_dataframe()
        df.to_csv(path, sep="\t", index=False)

    def get_tsv_string(self) -> str:
        """Get results as TSV string for easy copy/paste to spreadsheet."""
        df = self.to_dataframe()
        return df.to_csv(sep="\t", index=False)

    def print_summary_table(
        self,
        title: Optional[str] = None,
        description: Optional[str] = None,
    ) -> None:
        """Print formatted summary table to console."""
        if not self.results:
            print("No results to display.")
            return

        print()
        print("=" * 100)
        if title:
            print(title.center(100))
        else:
            print("LOAD TEST RESULTS SUMMARY".center(100))
        print("=" * 100)

        if description:
            print(description)
            print("-" * 100)

        df = self.to_dataframe()
        print(df.to_string(index=False))

        print()
        print("=" * 100)
        print("TSV OUTPUT (copy to spreadsheet):")
        print("=" * 100)
        print(self.get_tsv_string())
        print("=" * 100)

    def print_single_result(self, result: LoadTestResult) -> None:
        """Print a single test result as it completes."""
        print(f"\nResults for {result.label or 'load test'}:")
        print(f"  Requests: {result.successful_requests}/{result.total_requests} succeeded")
        print(f"  Throughput: {result.throughput_rps:.2f} req/s")
        print(f"  Avg Response: {result.average_response_time:.2f}ms")
        print(f"  P95 Response: {result.p95_response_time:.2f}ms")
        print(f"  Error Rate: {result.error_rate:.2f}%")


def print_stress_rounds(rounds: Sequence, breaking_point: Optional[int] = None) -> None:
    """Print the per-round table of a stress test."""
    if not rounds:
        print("No stress rounds ran.")
        return

    print()
    print("=" * 100)
    print("STRESS TEST ROUNDS".center(100))
    print("=" * 100)
    print(ResultAggregator.stress_dataframe(rounds).to_string(index=False))
    print("-" * 100)
    if breaking_point is not None:
        print(f"Stress limit reached at {breaking_point} concurrent users")
    else:
        print("No stress limit reached")
    print("=" * 100)


def print_accessibility_report(result: AccessibilityTestResult) -> None:
    """Print an accessibility audit result."""
    print()
    print("=" * 60)
    print("ACCESSIBILITY TEST RESULTS")
    print("=" * 60)
    print(f"Score:               {result.score}/100")
    print(f"Summary:             {result.summary}")

    counts = result.count_by_severity()
    print()
    print("ISSUES BY SEVERITY")
    print("-" * 30)
    for severity in ("critical", "high", "medium", "low"):
        print(f"{severity.capitalize():<21}{counts[severity]}")

    if result.issues:
        print()
        print("ISSUES")
        print("-" * 30)
        for issue in result.issues:
            element = f" ({issue.element})" if issue.element else ""
            print(f"[{issue.severity.value.upper()}] {issue.type.value}{element}")
            print(f"  {issue.description}")
            print(f"  Suggestion: {issue.suggestion}")
    print("=" * 60)
