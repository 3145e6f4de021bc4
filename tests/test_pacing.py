import time

import pytest

from leakbench.core.models import TestConfig
from leakbench.core.pacing import BatchPacer, TokenBucket, create_pacer


def test_create_pacer_selects_strategy() -> None:
    assert create_pacer(TestConfig(duration=1)) is None
    assert isinstance(create_pacer(TestConfig(duration=1, requests_per_second=4)), BatchPacer)
    bucket = create_pacer(
        TestConfig(duration=1, requests_per_second=4, pacing="token_bucket")
    )
    assert isinstance(bucket, TokenBucket)
    assert bucket.rate == 4


def test_batch_pacer_interval() -> None:
    assert BatchPacer(4).interval == 0.25


async def test_token_bucket_allows_initial_burst() -> None:
    bucket = TokenBucket(rate=5, capacity=3)

    start = time.monotonic()
    for _ in range(3):
        await bucket.acquire()

    assert time.monotonic() - start < 0.1


async def test_token_bucket_waits_when_empty() -> None:
    bucket = TokenBucket(rate=20, capacity=1)
    await bucket.acquire()

    start = time.monotonic()
    await bucket.acquire()

    assert time.monotonic() - start >= 0.04


def test_token_bucket_rejects_non_positive_rate() -> None:
    with pytest.raises(ValueError):
        TokenBucket(rate=0)
