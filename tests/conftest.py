import asyncio

import matplotlib

matplotlib.use("Agg")

import pytest  # noqa: E402


@pytest.fixture
def succeeding_probe():
    """Probe that yields briefly and always succeeds; counts its calls."""
    calls = {"count": 0}

    async def probe() -> None:
        calls["count"] += 1
        await asyncio.sleep(0.005)

    probe.calls = calls
    return probe


@pytest.fixture
def failing_probe():
    async def probe() -> None:
        await asyncio.sleep(0)
        raise RuntimeError("Report submission failed")

    return probe
