"""Chart generation for load and stress test results."""

import matplotlib.pyplot as plt
from datetime import datetime
from typing import List, Optional, Sequence

from ..core.models import LoadTestResult


def _save(fig, output_path: Optional[str], prefix: str, show: bool) -> str:
    if output_path:
        saved_path = output_path
    else:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        saved_path = f"{prefix}_{timestamp}.png"

    fig.savefig(saved_path, dpi=300, bbox_inches="tight")
    print(f"\nChart saved as: {saved_path}")

    if show:
        plt.show()
    plt.close(fig)
    return saved_path


def generate_charts(
    results: List[LoadTestResult],
    output_path: Optional[str] = None,
    show: bool = True,
) -> Optional[str]:
    """
    Generate comparison charts for a set of load test results.

    Args:
        results: Load test results to plot (one bar group per result)
        output_path: Path to save the chart (auto-generated if None)
        show: Whether to display the chart

    Returns:
        Path to saved chart file, or None if there was nothing to plot
    """
    if not results:
        print("No results to chart.")
        return None

    labels = [r.label or f"test {i + 1}" for i, r in enumerate(results)]
    positions = list(range(len(results)))
    avg_latency = [r.average_response_time for r in results]
    p95_latency = [r.p95_response_time for r in results]
    error_rates = [r.error_rate for r in results]

    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(15, 6))
    fig.suptitle("Load Test Results", fontsize=16, fontweight="bold")

    width = 0.4
    ax1.bar([p - width / 2 for p in positions], avg_latency, width, label="Average")
    ax1.bar([p + width / 2 for p in positions], p95_latency, width, label="95th Percentile")
    ax1.set_xticks(positions)
    ax1.set_xticklabels(labels)
    ax1.set_ylabel("Response Time (ms)")
    ax1.set_title("Response Time by Test")
    ax1.legend()
    ax1.grid(True, alpha=0.3)

    ax2.bar(positions, error_rates, color="r")
    ax2.set_xticks(positions)
    ax2.set_xticklabels(labels)
    ax2.set_ylabel("Error Rate (%)")
    ax2.set_title("Error Rate by Test")
    ax2.grid(True, alpha=0.3)

    plt.tight_layout()
    return _save(fig, output_path, "load_test_results", show)


def generate_stress_charts(
    rounds: Sequence,
    output_path: Optional[str] = None,
    show: bool = True,
    failure_threshold: Optional[float] = None,
) -> Optional[str]:
    """
    Plot a stress test's rounds against concurrency.

    Args:
        rounds: StressRound entries in execution order
        output_path: Path to save the chart (auto-generated if None)
        show: Whether to display the chart
        failure_threshold: Drawn as a horizontal line when given (fraction)

    Returns:
        Path to saved chart file, or None if there was nothing to plot
    """
    if not rounds:
        print("No stress rounds to chart.")
        return None

    users = [r.concurrent_users for r in rounds]
    failure_rates = [r.failure_rate * 100 for r in rounds]
    round_requests = [r.round_requests for r in rounds]
    avg_latency = [r.cumulative.average_response_time for r in rounds]
    max_latency = [r.cumulative.max_response_time for r in rounds]

    fig, ((ax1, ax2), (ax3, ax4)) = plt.subplots(2, 2, figsize=(15, 12))
    fig.suptitle("Stress Test Results", fontsize=16, fontweight="bold")

    ax1.plot(users, failure_rates, "r-o", linewidth=2, markersize=6)
    if failure_threshold is not None:
        ax1.axhline(failure_threshold * 100, color="gray", linestyle="--", label="Threshold")
        ax1.legend()
    ax1.set_xlabel("Concurrent Users")
    ax1.set_ylabel("Cumulative Failure Rate (%)")
    ax1.set_title("Failure Rate vs Concurrent Users")
    ax1.grid(True, alpha=0.3)

    ax2.plot(users, round_requests, "b-o", linewidth=2, markersize=6)
    ax2.set_xlabel("Concurrent Users")
    ax2.set_ylabel("Requests")
    ax2.set_title("Requests per Round")
    ax2.grid(True, alpha=0.3)

    ax3.plot(users, avg_latency, "g-o", label="Average", linewidth=2, markersize=6)
    ax3.plot(users, max_latency, "r-o", label="Maximum", linewidth=2, markersize=6)
    ax3.set_xlabel("Concurrent Users")
    ax3.set_ylabel("Response Time (ms)")
    ax3.set_title("Cumulative Response Time")
    ax3.legend()
    ax3.grid(True, alpha=0.3)

    round_failure = [r.round_failure_rate * 100 for r in rounds]
    ax4.bar([str(u) for u in users], round_failure, color="purple")
    ax4.set_xlabel("Concurrent Users")
    ax4.set_ylabel("Failure Rate (%)")
    ax4.set_title("Per-Round Failure Rate")
    ax4.grid(True, alpha=0.3)

    for ax in (ax1, ax2, ax3):
        ax.set_xscale("log", base=2)

    plt.tight_layout()
    return _save(fig, output_path, "stress_test_results", show)
