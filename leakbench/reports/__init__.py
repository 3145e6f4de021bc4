"""Leak report domain: classification, models and the report API client."""

from .classifier import (
    MarkerColor,
    Severity,
    Status,
    get_marker_color,
    get_status_color,
    status_bucket,
)
from .models import LeakReport, Location, NewReport
from .stats import ReportStats, compute_stats, filter_reports, latest_reports
from .client import ReportApiClient, ReportApiError
from .sample_loader import SampleLoader

__all__ = [
    "MarkerColor",
    "Severity",
    "Status",
    "get_marker_color",
    "get_status_color",
    "status_bucket",
    "LeakReport",
    "Location",
    "NewReport",
    "ReportStats",
    "compute_stats",
    "filter_reports",
    "latest_reports",
    "ReportApiClient",
    "ReportApiError",
    "SampleLoader",
]
