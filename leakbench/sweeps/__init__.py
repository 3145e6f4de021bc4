"""Stress testing and test-suite orchestration."""

from .stress import StressRound, StressTester
from .suite import SuiteResult, run_all_tests
from .presets import (
    DEFAULT_SERVER_URL,
    DEFAULT_SAMPLES_DIR,
    LOGIN_LOAD_DEFAULTS,
    REPORT_SUBMISSION_LOAD_DEFAULTS,
    MAP_LOADING_STRESS_DEFAULTS,
    SUITE_PRESETS,
)

__all__ = [
    "StressRound",
    "StressTester",
    "SuiteResult",
    "run_all_tests",
    "DEFAULT_SERVER_URL",
    "DEFAULT_SAMPLES_DIR",
    "LOGIN_LOAD_DEFAULTS",
    "REPORT_SUBMISSION_LOAD_DEFAULTS",
    "MAP_LOADING_STRESS_DEFAULTS",
    "SUITE_PRESETS",
]
