"""Report list views: filtering, ordering and status counters."""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Union

from .classifier import Severity, Status, status_bucket
from .models import LeakReport

ALL = "all"


@dataclass(frozen=True)
class ReportStats:
    """Counters shown on the home screen."""

    total: int = 0
    pending: int = 0
    in_progress: int = 0
    resolved: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "total": self.total,
            "pending": self.pending,
            "in_progress": self.in_progress,
            "resolved": self.resolved,
        }


def filter_reports(
    reports: Iterable[LeakReport],
    status: Union[Status, str] = ALL,
    severity: Union[Severity, str] = ALL,
) -> List[LeakReport]:
    """
    Keep reports matching both filters; ``"all"`` disables a filter.

    An unrecognised filter value matches nothing.
    """
    wanted_status = None if status == ALL else Status.parse(status)
    wanted_severity = None if severity == ALL else Severity.parse(severity)
    if wanted_status is Status.UNKNOWN or wanted_severity is Severity.UNKNOWN:
        return []

    return [
        r
        for r in reports
        if (wanted_status is None or r.status == wanted_status)
        and (wanted_severity is None or r.severity == wanted_severity)
    ]


def latest_reports(reports: Iterable[LeakReport], limit: int = 10) -> List[LeakReport]:
    """Newest ``limit`` reports by creation time."""
    ordered = sorted(reports, key=lambda r: r.created_at, reverse=True)
    return ordered[:limit]


def compute_stats(reports: Iterable[LeakReport]) -> ReportStats:
    counts = {"pending": 0, "in_progress": 0, "resolved": 0}
    total = 0
    for report in reports:
        total += 1
        bucket = status_bucket(report.status)
        if bucket is not None:
            counts[bucket] += 1
    return ReportStats(total=total, **counts)
