"""Escalating-concurrency stress testing."""

import dataclasses
import logging
from dataclasses import dataclass
from typing import List, Optional

from ..core.load_tester import LoadTester, Probe
from ..core.metrics import TimingAggregator
from ..core.models import LoadTestResult, StressTestConfig


@dataclass
class StressRound:
    """State after one concurrency round of a stress test."""

    concurrent_users: int
    round_requests: int
    round_failures: int
    failure_rate: float  # cumulative, as a fraction
    cumulative: LoadTestResult

    @property
    def round_failure_rate(self) -> float:
        if self.round_requests == 0:
            return 0.0
        return self.round_failures / self.round_requests


class StressTester:
    """
    Runs load test rounds at 1, 2, 4, 8, ... concurrent users.

    All rounds accumulate into one TimingAggregator. After each round the
    failure rate over the cumulative totals decides whether to escalate
    further; the run stops once it exceeds ``failure_threshold`` or the next
    concurrency level would pass ``max_concurrent_users``.
    """

    def __init__(self, config: StressTestConfig):
        self.config = config
        self.aggregator: Optional[TimingAggregator] = None
        self.rounds: List[StressRound] = []
        self.breaking_point: Optional[int] = None

        logging.basicConfig(
            level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
        )
        self.logger = logging.getLogger(__name__)

    def concurrency_levels(self) -> List[int]:
        """Concurrency of each round the test may run."""
        levels = []
        users = 1
        while users <= self.config.max_concurrent_users:
            levels.append(users)
            users *= 2
        return levels

    async def run(self, probe: Probe) -> LoadTestResult:
        """
        Run the stress test.

        Returns:
            Cumulative LoadTestResult at termination

        Raises:
            ValueError: If the config is invalid
        """
        self.config.validate()

        self.aggregator = TimingAggregator(label=self.config.label)
        self.rounds = []
        self.breaking_point = None
        round_duration = self.config.round_duration

        self.logger.info("=" * 60)
        self.logger.info("Starting stress test with increasing load")
        self.logger.info("=" * 60)
        self.logger.info(f"  Max concurrent users: {self.config.max_concurrent_users}")
        self.logger.info(f"  Round duration: {round_duration} seconds")
        self.logger.info(f"  Failure threshold: {self.config.failure_threshold:.0%}")
        self.logger.info("=" * 60)

        for users in self.concurrency_levels():
            self.logger.info(f"Testing with {users} concurrent users...")

            before_total = self.aggregator.result.total_requests
            before_failed = self.aggregator.result.failed_requests

            round_config = dataclasses.replace(
                self.config, concurrent_users=users, duration=round_duration
            )
            tester = LoadTester(round_config)
            result = await tester.run(probe, aggregator=self.aggregator)

            # Cumulative, not per round; zero requests is not a breach
            failure_rate = result.failure_rate
            self.rounds.append(
                StressRound(
                    concurrent_users=users,
                    round_requests=result.total_requests - before_total,
                    round_failures=result.failed_requests - before_failed,
                    failure_rate=failure_rate,
                    cumulative=result.copy(),
                )
            )

            if failure_rate > self.config.failure_threshold:
                self.breaking_point = users
                self.logger.warning(
                    f"System stress limit reached at {users} concurrent users "
                    f"(failure rate {failure_rate:.1%})"
                )
                break

            self.logger.info(
                f"Completed round with {users} users (failure rate {failure_rate:.1%})"
            )

        return self.aggregator.finalize()
