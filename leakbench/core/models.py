"""Data models for load and stress testing."""

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, List, Dict, Any

PACING_MODES = ("batch", "token_bucket")


@dataclass(frozen=True)
class TestConfig:
    """Configuration for a single load test run."""

    __test__ = False

    duration: float
    concurrent_users: int = 1

    # Optional pacing between batches (None = closed loop)
    requests_per_second: Optional[float] = None
    pacing: str = "batch"

    # Name shown in summary tables
    label: Optional[str] = None

    @property
    def is_paced(self) -> bool:
        """Check if this config throttles probe launches."""
        return self.requests_per_second is not None

    def validate(self) -> None:
        """Raise ValueError if the config cannot be run."""
        if self.duration is None or self.duration < 0:
            raise ValueError(f"duration must be >= 0 seconds, got {self.duration}")
        if self.concurrent_users is None or self.concurrent_users < 1:
            raise ValueError(
                f"concurrent_users must be at least 1, got {self.concurrent_users}"
            )
        if self.requests_per_second is not None and self.requests_per_second <= 0:
            raise ValueError(
                f"requests_per_second must be positive, got {self.requests_per_second}"
            )
        if self.pacing not in PACING_MODES:
            raise ValueError(
                f"pacing must be one of {', '.join(PACING_MODES)}, got {self.pacing!r}"
            )


@dataclass(frozen=True)
class StressTestConfig(TestConfig):
    """Configuration for an escalating stress test."""

    max_concurrent_users: int = 1
    failure_threshold: float = 0.10
    round_duration_cap: float = 30

    @property
    def round_duration(self) -> float:
        """Duration of each concurrency round."""
        return min(self.duration, self.round_duration_cap)

    def validate(self) -> None:
        super().validate()
        if self.max_concurrent_users is None or self.max_concurrent_users < 1:
            raise ValueError(
                f"max_concurrent_users must be at least 1, got {self.max_concurrent_users}"
            )
        if not 0 <= self.failure_threshold <= 1:
            raise ValueError(
                f"failure_threshold must be between 0 and 1, got {self.failure_threshold}"
            )


@dataclass
class LoadTestResult:
    """Accumulated results of one or more load test rounds."""

    # Request metrics
    total_requests: int = 0
    successful_requests: int = 0
    failed_requests: int = 0

    # Latency metrics (milliseconds)
    average_response_time: float = 0.0
    max_response_time: float = 0.0
    min_response_time: float = math.inf
    p95_response_time: float = 0.0
    p99_response_time: float = 0.0

    # Failure messages, in completion order
    errors: List[str] = field(default_factory=list)

    # Derived metrics
    error_rate: float = 0.0
    throughput_rps: float = 0.0

    # Optional timing metadata
    label: Optional[str] = None
    start_timestamp: Optional[datetime] = None
    end_timestamp: Optional[datetime] = None
    duration_seconds: Optional[float] = None

    @property
    def has_requests(self) -> bool:
        return self.total_requests > 0

    @property
    def failure_rate(self) -> float:
        """Failed / total as a fraction; 0.0 when nothing ran."""
        if self.total_requests == 0:
            return 0.0
        return self.failed_requests / self.total_requests

    def copy(self) -> "LoadTestResult":
        """Snapshot of the current state (errors list is copied)."""
        return LoadTestResult(
            total_requests=self.total_requests,
            successful_requests=self.successful_requests,
            failed_requests=self.failed_requests,
            average_response_time=self.average_response_time,
            max_response_time=self.max_response_time,
            min_response_time=self.min_response_time,
            p95_response_time=self.p95_response_time,
            p99_response_time=self.p99_response_time,
            errors=list(self.errors),
            error_rate=self.error_rate,
            throughput_rps=self.throughput_rps,
            label=self.label,
            start_timestamp=self.start_timestamp,
            end_timestamp=self.end_timestamp,
            duration_seconds=self.duration_seconds,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "label": self.label,
            "total_requests": self.total_requests,
            "successful_requests": self.successful_requests,
            "failed_requests": self.failed_requests,
            "average_response_time": self.average_response_time,
            "max_response_time": self.max_response_time,
            # +inf means "no calls yet"
            "min_response_time": self.min_response_time if self.has_requests else None,
            "p95_response_time": self.p95_response_time,
            "p99_response_time": self.p99_response_time,
            "error_rate": self.error_rate,
            "throughput_rps": self.throughput_rps,
            "duration_seconds": self.duration_seconds,
            "errors": list(self.errors),
        }
