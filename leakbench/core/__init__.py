"""Core load testing components."""

from .models import TestConfig, StressTestConfig, LoadTestResult
from .metrics import TimingAggregator
from .pacing import BatchPacer, TokenBucket, create_pacer
from .load_tester import LoadTester, Probe
from .probes import ProbeError, simulated_probe, get_simulated_probe

__all__ = [
    "TestConfig",
    "StressTestConfig",
    "LoadTestResult",
    "TimingAggregator",
    "BatchPacer",
    "TokenBucket",
    "create_pacer",
    "LoadTester",
    "Probe",
    "ProbeError",
    "simulated_probe",
    "get_simulated_probe",
]
