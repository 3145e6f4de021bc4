"""Request pacing strategies for the load tester."""

import asyncio
import time
from typing import Optional, Union

from .models import TestConfig


class BatchPacer:
    """
    Sleeps a fixed interval after every batch.

    Each batch fires ``concurrent_users`` calls, so the aggregate rate is
    roughly ``concurrent_users * requests_per_second`` rather than an exact
    ``requests_per_second``.
    """

    per_call = False

    def __init__(self, requests_per_second: float):
        self.interval = 1.0 / requests_per_second

    async def wait_batch(self) -> None:
        await asyncio.sleep(self.interval)


class TokenBucket:
    """
    Token bucket limiting individual probe launches.

    Tokens refill continuously at ``rate`` per second up to ``capacity``.
    ``acquire`` suspends until a whole token is available, so the aggregate
    launch rate stays at ``rate`` whatever the batch size is.
    """

    per_call = True

    def __init__(self, rate: float, capacity: Optional[float] = None):
        if rate <= 0:
            raise ValueError(f"rate must be positive, got {rate}")
        self.rate = rate
        self.capacity = capacity if capacity is not None else max(1.0, rate)
        self.tokens = self.capacity
        self._updated = time.monotonic()
        self._lock = asyncio.Lock()

    def _refill(self) -> None:
        now = time.monotonic()
        elapsed = now - self._updated
        self._updated = now
        self.tokens = min(self.capacity, self.tokens + elapsed * self.rate)

    async def acquire(self) -> None:
        async with self._lock:
            while True:
                self._refill()
                if self.tokens >= 1:
                    self.tokens -= 1
                    return
                await asyncio.sleep((1 - self.tokens) / self.rate)

    async def wait_batch(self) -> None:
        # Let launched tasks start before the next batch is scheduled
        await asyncio.sleep(0)


Pacer = Union[BatchPacer, TokenBucket]


def create_pacer(config: TestConfig) -> Optional[Pacer]:
    """Build the pacer selected by ``config.pacing`` (None when unpaced)."""
    if config.requests_per_second is None:
        return None
    if config.pacing == "token_bucket":
        return TokenBucket(config.requests_per_second)
    return BatchPacer(config.requests_per_second)
