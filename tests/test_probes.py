import random

import pytest

from leakbench.core.probes import (
    ProbeError,
    SIMULATED_PROBES,
    get_simulated_probe,
    simulated_probe,
    submit_report_probe,
)


async def test_simulated_probe_always_fails_at_rate_one() -> None:
    probe = simulated_probe(0, 1, 1.0, "Login failed", rng=random.Random(1))

    with pytest.raises(ProbeError, match="Login failed"):
        await probe()


async def test_simulated_probe_never_fails_at_rate_zero() -> None:
    probe = simulated_probe(0, 1, 0.0, "never", rng=random.Random(1))

    for _ in range(5):
        await probe()


def test_simulated_probe_rejects_bad_rate() -> None:
    with pytest.raises(ValueError):
        simulated_probe(0, 0, 1.5, "x")


def test_builtin_probes_available() -> None:
    assert set(SIMULATED_PROBES) == {
        "login",
        "report-submission",
        "map-loading",
        "real-time-updates",
    }
    assert callable(get_simulated_probe("map-loading"))
    with pytest.raises(ValueError, match="Unknown probe"):
        get_simulated_probe("photo-upload")


async def test_submit_report_probe_cycles_samples() -> None:
    submitted = []

    class FakeClient:
        async def create_report(self, report):
            submitted.append(report)
            return "id"

    class FakeLoader:
        reports = ["first", "second"]

        def get_report(self, index):
            return self.reports[index % 2]

    probe = submit_report_probe(FakeClient(), FakeLoader())
    for _ in range(3):
        await probe()

    assert submitted == ["first", "second", "first"]
