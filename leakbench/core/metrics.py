"""Timing aggregation for probe invocations."""

import statistics
from datetime import datetime
from typing import List, Optional, Union

from .models import LoadTestResult


def _calculate_percentile(values: List[float], percentile: float) -> float:
    """Calculate percentile value from a list."""
    if not values:
        return 0.0
    sorted_values = sorted(values)
    index = int(len(sorted_values) * percentile / 100)
    index = min(index, len(sorted_values) - 1)
    return sorted_values[index]


def format_error(error: Union[str, BaseException, None]) -> str:
    """Render a failure as the text stored in ``LoadTestResult.errors``."""
    if error is None:
        return "Unknown error"
    if isinstance(error, BaseException):
        return str(error) or type(error).__name__
    return str(error)


class TimingAggregator:
    """
    Accumulates per-call outcomes into a single LoadTestResult.

    The aggregator owns one result object. Load tests that should add to an
    existing run (for example the rounds of a stress test) receive the same
    aggregator instead of a fresh one, so nothing is ever reset mid-run.

    ``record`` never awaits, so completions interleaved by the event loop
    cannot observe a half-updated result.
    """

    def __init__(self, label: Optional[str] = None):
        self.result = LoadTestResult(label=label)
        self.latencies: List[float] = []
        self._latency_sum = 0.0
        self._first_start: Optional[datetime] = None
        self._last_end: Optional[datetime] = None

    @property
    def total_requests(self) -> int:
        return self.result.total_requests

    def mark_started(self) -> None:
        """Remember when the first round began (kept across rounds)."""
        if self._first_start is None:
            self._first_start = datetime.now()

    def mark_finished(self) -> None:
        self._last_end = datetime.now()

    def record(
        self,
        success: bool,
        latency_ms: float,
        error: Union[str, BaseException, None] = None,
    ) -> None:
        """
        Record one probe invocation.

        Args:
            success: Whether the probe completed without raising
            latency_ms: Wall-clock duration of the call in milliseconds
            error: Failure message or exception (ignored on success)
        """
        result = self.result
        result.total_requests += 1
        if success:
            result.successful_requests += 1
        else:
            result.failed_requests += 1
            result.errors.append(format_error(error))

        result.max_response_time = max(result.max_response_time, latency_ms)
        result.min_response_time = min(result.min_response_time, latency_ms)
        self._latency_sum += latency_ms
        self.latencies.append(latency_ms)

    def merge(self, other: "TimingAggregator") -> None:
        """Fold another aggregator's samples into this one."""
        result = self.result
        result.total_requests += other.result.total_requests
        result.successful_requests += other.result.successful_requests
        result.failed_requests += other.result.failed_requests
        result.errors.extend(other.result.errors)
        result.max_response_time = max(
            result.max_response_time, other.result.max_response_time
        )
        result.min_response_time = min(
            result.min_response_time, other.result.min_response_time
        )
        self._latency_sum += other._latency_sum
        self.latencies.extend(other.latencies)

        starts = [t for t in (self._first_start, other._first_start) if t]
        ends = [t for t in (self._last_end, other._last_end) if t]
        self._first_start = min(starts) if starts else None
        self._last_end = max(ends) if ends else None

    def finalize(self) -> LoadTestResult:
        """
        Compute derived statistics and return the result.

        Safe to call repeatedly; values are always recomputed from the
        running totals. With no recorded calls the average stays 0.0 and
        ``min_response_time`` stays +inf.
        """
        result = self.result
        total = result.total_requests

        if total > 0:
            result.average_response_time = self._latency_sum / total
            result.p95_response_time = _calculate_percentile(self.latencies, 95)
            result.p99_response_time = _calculate_percentile(self.latencies, 99)
            result.error_rate = (result.failed_requests / total) * 100
        else:
            result.average_response_time = 0.0
            result.p95_response_time = 0.0
            result.p99_response_time = 0.0
            result.error_rate = 0.0

        result.start_timestamp = self._first_start
        result.end_timestamp = self._last_end
        if self._first_start and self._last_end:
            duration = (self._last_end - self._first_start).total_seconds()
            result.duration_seconds = duration
            result.throughput_rps = total / duration if duration > 0 else 0.0

        return result

    def stdev(self) -> float:
        """Standard deviation of recorded latencies (0.0 below two samples)."""
        if len(self.latencies) < 2:
            return 0.0
        return statistics.stdev(self.latencies)

