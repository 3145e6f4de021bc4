"""Arguments and probe wiring shared by the CLI commands."""

import argparse
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import aiohttp

from ..core.load_tester import Probe
from ..core.probes import (
    SIMULATED_PROBES,
    fetch_reports_probe,
    get_simulated_probe,
    submit_report_probe,
)
from ..reports.client import ReportApiClient
from ..reports.sample_loader import SampleLoader
from ..sweeps.presets import DEFAULT_SAMPLES_DIR, DEFAULT_SERVER_URL

HTTP_PROBES = ("fetch-reports", "submit-report")
PROBE_CHOICES = list(SIMULATED_PROBES) + list(HTTP_PROBES)


def add_probe_arguments(parser: argparse.ArgumentParser, default_probe: str) -> None:
    """Add --probe and the report API connection arguments."""
    parser.add_argument(
        "--probe",
        choices=PROBE_CHOICES,
        default=default_probe,
        help=f"Operation to exercise (default: {default_probe})",
    )
    parser.add_argument(
        "--server-url",
        type=str,
        default=DEFAULT_SERVER_URL,
        help=f"Report API URL for HTTP probes (default: {DEFAULT_SERVER_URL})",
    )
    parser.add_argument(
        "--samples-dir",
        type=str,
        default=DEFAULT_SAMPLES_DIR,
        help=f"Directory of sample report JSON files (default: {DEFAULT_SAMPLES_DIR})",
    )
    parser.add_argument(
        "--api-key",
        type=str,
        default=None,
        help="API key for authentication (Bearer token)",
    )


def add_pacing_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--requests-per-second",
        type=float,
        default=None,
        help="Pacing rate; omit to run closed loop",
    )
    parser.add_argument(
        "--pacing",
        choices=["batch", "token_bucket"],
        default="batch",
        help="batch: one batch per 1/rps seconds; token_bucket: exact aggregate rate",
    )


@asynccontextmanager
async def open_probe(
    name: str,
    server_url: str = DEFAULT_SERVER_URL,
    samples_dir: str = DEFAULT_SAMPLES_DIR,
    api_key: Optional[str] = None,
) -> AsyncIterator[Probe]:
    """
    Yield the named probe, keeping any HTTP session open while it is used.

    Raises:
        ValueError: If the probe name is unknown
        FileNotFoundError: If submit-report has no sample reports
    """
    if name in SIMULATED_PROBES:
        yield get_simulated_probe(name)
        return
    if name not in HTTP_PROBES:
        raise ValueError(f"Unknown probe {name!r}")

    timeout = aiohttp.ClientTimeout(total=60)
    connector = aiohttp.TCPConnector(limit=200, limit_per_host=200)
    async with aiohttp.ClientSession(timeout=timeout, connector=connector) as session:
        client = ReportApiClient(server_url, session, api_key=api_key)
        if name == "fetch-reports":
            yield fetch_reports_probe(client)
        else:
            loader = SampleLoader(samples_dir)
            await loader.load()
            yield submit_report_probe(client, loader)
