"""Predefined test plans and connection defaults."""

import os

DEFAULT_SERVER_URL = os.environ.get("LEAKBENCH_SERVER_URL", "http://localhost:3000")

DEFAULT_SAMPLES_DIR = "samples/reports"

# Load tests run by the full suite
LOGIN_LOAD_DEFAULTS = {
    "label": "login",
    "probe": "login",
    "duration": 60,
    "concurrent_users": 10,
    "requests_per_second": 5,
}

REPORT_SUBMISSION_LOAD_DEFAULTS = {
    "label": "report-submission",
    "probe": "report-submission",
    "duration": 60,
    "concurrent_users": 5,
    "requests_per_second": 2,
}

# Stress test run by the full suite
MAP_LOADING_STRESS_DEFAULTS = {
    "label": "map-loading-stress",
    "probe": "map-loading",
    "duration": 120,
    "max_concurrent_users": 100,
    "requests_per_second": 10,
}

SUITE_PRESETS = {
    "load_tests": [LOGIN_LOAD_DEFAULTS, REPORT_SUBMISSION_LOAD_DEFAULTS],
    "stress_test": MAP_LOADING_STRESS_DEFAULTS,
}
