"""Probe factories for the load and stress testers.

A probe is a zero-argument coroutine function. Returning normally counts as a
successful request; raising counts as a failure whose message is recorded.
"""

import asyncio
import random
from typing import Dict, Optional

from .load_tester import Probe


class ProbeError(Exception):
    """Raised by a probe to signal a failed request."""


def simulated_probe(
    base_ms: float,
    jitter_ms: float,
    failure_rate: float,
    message: str,
    rng: Optional[random.Random] = None,
) -> Probe:
    """
    Build a probe that simulates an I/O call.

    Args:
        base_ms: Minimum latency in milliseconds
        jitter_ms: Extra uniformly distributed latency (0..jitter_ms)
        failure_rate: Probability in [0, 1] that a call raises ProbeError
        message: Error message used for failures
        rng: Random source (module-level random when None)

    Returns:
        Async probe function
    """
    if not 0 <= failure_rate <= 1:
        raise ValueError(f"failure_rate must be between 0 and 1, got {failure_rate}")
    source = rng or random

    async def probe() -> None:
        await asyncio.sleep((base_ms + source.random() * jitter_ms) / 1000)
        if source.random() < failure_rate:
            raise ProbeError(message)

    return probe


# Timings and failure rates of the app's main flows
SIMULATED_PROBES: Dict[str, Dict] = {
    "login": {
        "base_ms": 500,
        "jitter_ms": 1000,
        "failure_rate": 0.05,
        "message": "Login failed",
    },
    "report-submission": {
        "base_ms": 1000,
        "jitter_ms": 2000,
        "failure_rate": 0.03,
        "message": "Report submission failed",
    },
    "map-loading": {
        "base_ms": 500,
        "jitter_ms": 1500,
        "failure_rate": 0.02,
        "message": "Map data loading failed",
    },
    "real-time-updates": {
        "base_ms": 200,
        "jitter_ms": 800,
        "failure_rate": 0.01,
        "message": "Real-time update failed",
    },
}


def get_simulated_probe(name: str, rng: Optional[random.Random] = None) -> Probe:
    """Look up one of the built-in simulated probes by name."""
    try:
        params = SIMULATED_PROBES[name]
    except KeyError:
        raise ValueError(
            f"Unknown probe {name!r}; choose from {', '.join(SIMULATED_PROBES)}"
        ) from None
    return simulated_probe(rng=rng, **params)


def fetch_reports_probe(client) -> Probe:
    """Probe that loads the report list (map / home data)."""

    async def probe() -> None:
        await client.fetch_reports()

    return probe


def submit_report_probe(client, loader) -> Probe:
    """Probe that submits sample reports, cycling through the loader."""
    counter = {"index": 0}

    async def probe() -> None:
        index = counter["index"]
        counter["index"] += 1
        await client.create_report(loader.get_report(index))

    return probe
