import asyncio

import pytest

from leakbench.core.models import StressTestConfig
from leakbench.sweeps.stress import StressTester


def test_concurrency_levels_double_up_to_ceiling() -> None:
    tester = StressTester(StressTestConfig(duration=1, max_concurrent_users=10))

    assert tester.concurrency_levels() == [1, 2, 4, 8]


def test_round_duration_is_capped() -> None:
    assert StressTestConfig(duration=120).round_duration == 30
    assert StressTestConfig(duration=5).round_duration == 5


async def test_runs_every_level_when_probe_succeeds(succeeding_probe) -> None:
    config = StressTestConfig(duration=0.05, max_concurrent_users=8)
    tester = StressTester(config)

    result = await tester.run(succeeding_probe)

    assert [r.concurrent_users for r in tester.rounds] == [1, 2, 4, 8]
    assert tester.breaking_point is None
    assert result.failed_requests == 0
    assert result.total_requests == sum(r.round_requests for r in tester.rounds)


async def test_stops_at_first_round_over_threshold(failing_probe) -> None:
    tester = StressTester(StressTestConfig(duration=0.05, max_concurrent_users=64))

    result = await tester.run(failing_probe)

    assert [r.concurrent_users for r in tester.rounds] == [1]
    assert tester.breaking_point == 1
    assert result.failed_requests == result.total_requests > 0


async def test_failure_rate_uses_cumulative_totals() -> None:
    in_flight = {"count": 0}

    async def contended_probe() -> None:
        # Fails whenever another call is already running
        in_flight["count"] += 1
        try:
            if in_flight["count"] > 1:
                raise RuntimeError("contention")
            await asyncio.sleep(0.01)
        finally:
            in_flight["count"] -= 1

    tester = StressTester(StressTestConfig(duration=0.1, max_concurrent_users=16))
    result = await tester.run(contended_probe)

    first, second = tester.rounds
    assert first.concurrent_users == 1 and first.round_failures == 0
    assert second.concurrent_users == 2 and second.round_failures > 0
    assert tester.breaking_point == 2
    assert second.failure_rate == pytest.approx(
        result.failed_requests / result.total_requests
    )
    assert second.failure_rate < second.round_failure_rate


async def test_zero_requests_never_breach_threshold(succeeding_probe) -> None:
    tester = StressTester(StressTestConfig(duration=0, max_concurrent_users=4))

    result = await tester.run(succeeding_probe)

    assert [r.concurrent_users for r in tester.rounds] == [1, 2, 4]
    assert all(r.failure_rate == 0.0 for r in tester.rounds)
    assert result.total_requests == 0
    assert tester.breaking_point is None


async def test_rounds_snapshot_cumulative_state(succeeding_probe) -> None:
    tester = StressTester(StressTestConfig(duration=0.05, max_concurrent_users=4))

    await tester.run(succeeding_probe)

    totals = [r.cumulative.total_requests for r in tester.rounds]
    assert totals == sorted(totals)
    assert totals[-1] == tester.aggregator.result.total_requests


async def test_invalid_ceiling_rejected(succeeding_probe) -> None:
    tester = StressTester(StressTestConfig(duration=1, max_concurrent_users=0))

    with pytest.raises(ValueError):
        await tester.run(succeeding_probe)

    assert succeeding_probe.calls["count"] == 0
