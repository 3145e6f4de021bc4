"""Core load testing functionality."""

import asyncio
import logging
import time
from typing import Any, Awaitable, Callable, Dict, List, Optional

from .metrics import TimingAggregator
from .models import TestConfig, LoadTestResult
from .pacing import create_pacer

Probe = Callable[[], Awaitable[Any]]

PROGRESS_LOG_INTERVAL_SECONDS = 10


class LoadTester:
    """
    Load tester for asynchronous probes.

    Supports three launch modes:
    - Closed loop: no rate set, each batch finishes before the next starts
    - Batch paced: a batch of ``concurrent_users`` calls every 1/rps seconds
    - Token bucket: individual calls launched at ``requests_per_second``
    """

    def __init__(self, config: TestConfig):
        self.config = config
        self.aggregator: Optional[TimingAggregator] = None
        self.start_time: Optional[float] = None

        logging.basicConfig(
            level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
        )
        self.logger = logging.getLogger(__name__)

    async def run(
        self, probe: Probe, aggregator: Optional[TimingAggregator] = None
    ) -> LoadTestResult:
        """
        Drive ``probe`` for ``config.duration`` seconds.

        Args:
            probe: Zero-argument coroutine function; raising means failure
            aggregator: Existing accumulator to continue, or None for a new one

        Returns:
            The (possibly cumulative) LoadTestResult of the aggregator

        Raises:
            ValueError: If the config is invalid. No probe runs in that case.
        """
        self.config.validate()

        if aggregator is None:
            aggregator = TimingAggregator(label=self.config.label)
        self.aggregator = aggregator
        pacer = create_pacer(self.config)
        users = self.config.concurrent_users

        self.logger.info(f"Starting load test for {self.config.duration} seconds:")
        self.logger.info(f"  Concurrent users: {users}")
        if pacer is None:
            self.logger.info("  Pacing: none (closed loop)")
        else:
            self.logger.info(
                f"  Pacing: {self.config.pacing} at {self.config.requests_per_second} req/s"
            )

        aggregator.mark_started()
        self.start_time = time.monotonic()
        end_time = self.start_time + self.config.duration
        last_progress = self.start_time
        in_flight: List[asyncio.Task] = []
        launched = 0

        while time.monotonic() < end_time:
            batch = []
            for _ in range(users):
                if pacer is not None and pacer.per_call:
                    await pacer.acquire()
                    if time.monotonic() >= end_time:
                        break
                batch.append(asyncio.create_task(self._execute(probe, aggregator)))
            launched += len(batch)

            if pacer is None:
                await asyncio.gather(*batch, return_exceptions=True)
            else:
                in_flight.extend(batch)
                await pacer.wait_batch()

            now = time.monotonic()
            if now - last_progress >= PROGRESS_LOG_INTERVAL_SECONDS:
                last_progress = now
                self.logger.info(
                    f"Launched {launched} requests ({now - self.start_time:.1f}s elapsed)"
                )

        if in_flight:
            pending = sum(1 for t in in_flight if not t.done())
            self.logger.info(f"Waiting for {pending} in-flight requests to complete...")
            await asyncio.gather(*in_flight, return_exceptions=True)

        aggregator.mark_finished()
        result = aggregator.finalize()
        self.logger.info(
            f"Load test completed: {result.successful_requests}/{result.total_requests} "
            f"succeeded, avg {result.average_response_time:.2f}ms"
        )
        return result

    async def _execute(self, probe: Probe, aggregator: TimingAggregator) -> None:
        """Invoke the probe once and record the outcome."""
        start_time = time.perf_counter()
        try:
            await probe()
        except Exception as e:
            latency_ms = (time.perf_counter() - start_time) * 1000
            aggregator.record(False, latency_ms, e)
            self.logger.debug(f"Probe failed after {latency_ms:.0f}ms: {e}")
        else:
            latency_ms = (time.perf_counter() - start_time) * 1000
            aggregator.record(True, latency_ms)

    def print_results(self, result: LoadTestResult):
        """Print test results in a formatted way."""
        print("\n" + "=" * 60)
        print(f"LOAD TEST RESULTS{f' - {result.label}' if result.label else ''}")
        print("=" * 60)
        print(f"Total Requests:      {result.total_requests}")
        print(f"Successful Requests: {result.successful_requests}")
        print(f"Failed Requests:     {result.failed_requests}")
        print(f"Error Rate:          {result.error_rate:.2f}%")
        print()
        print("RESPONSE TIME (ms)")
        print("-" * 30)
        if result.has_requests:
            print(f"Average:             {result.average_response_time:.2f}")
            print(f"Minimum:             {result.min_response_time:.2f}")
            print(f"Maximum:             {result.max_response_time:.2f}")
            print(f"95th Percentile:     {result.p95_response_time:.2f}")
            print(f"99th Percentile:     {result.p99_response_time:.2f}")
            if self.aggregator is not None:
                print(f"Std Deviation:       {self.aggregator.stdev():.2f}")
        else:
            print("No requests completed.")
        print()
        print("THROUGHPUT")
        print("-" * 30)
        print(f"Actual Throughput:   {result.throughput_rps:.2f} requests/second")
        print("=" * 60)

        if result.failed_requests > 0:
            print("\nERROR SUMMARY")
            print("-" * 30)
            for error_key, count in summarize_errors(result.errors).items():
                print(f"Error ({count} occurrences): {error_key}")


def summarize_errors(errors: List[str], width: int = 100) -> Dict[str, int]:
    """Count error messages, truncating long ones to ``width`` characters."""
    error_counts: Dict[str, int] = {}
    for error_text in errors:
        error_key = error_text[:width]
        error_counts[error_key] = error_counts.get(error_key, 0) + 1
    return error_counts
