from datetime import datetime, timedelta, timezone

from leakbench.reports.classifier import Severity, Status
from leakbench.reports.models import LeakReport, Location, NewReport
from leakbench.reports.stats import compute_stats, filter_reports, latest_reports

BASE_TIME = datetime(2024, 3, 1, 8, 0, tzinfo=timezone.utc)


def _report(report_id: str, severity: str, status: str, minutes: int = 0) -> LeakReport:
    created = BASE_TIME + timedelta(minutes=minutes)
    return LeakReport(
        id=report_id,
        title=f"Leak {report_id}",
        description="",
        severity=Severity.parse(severity),
        status=Status.parse(status),
        location=Location(-26.2, 28.04),
        created_at=created,
        updated_at=created,
    )


REPORTS = [
    _report("a", "critical", "pending", 0),
    _report("b", "low", "assigned", 5),
    _report("c", "high", "in-progress", 10),
    _report("d", "critical", "resolved", 15),
    _report("e", "medium", "closed", 20),
    _report("f", "low", "pending", 25),
]


def test_from_dict_parses_api_json() -> None:
    report = LeakReport.from_dict(
        {
            "id": 7,
            "userId": "u1",
            "userName": "Thandi",
            "title": "Burst pipe",
            "description": "Water everywhere",
            "severity": "critical",
            "status": "in-progress",
            "location": {"latitude": -26.2, "longitude": 28.04, "address": "Main Rd"},
            "images": ["img1.jpg"],
            "createdAt": "2024-03-01T08:00:00Z",
            "updatedAt": "2024-03-01T09:30:00.000Z",
        }
    )

    assert report.id == "7"
    assert report.severity is Severity.CRITICAL
    assert report.status is Status.IN_PROGRESS
    assert report.location.address == "Main Rd"
    assert report.created_at == BASE_TIME
    assert report.updated_at == BASE_TIME + timedelta(minutes=90)
    assert report.resolved_at is None


def test_from_dict_tolerates_unknown_values() -> None:
    report = LeakReport.from_dict(
        {"id": "x", "severity": "apocalyptic", "status": "lost", "location": {"lat": 1}}
    )

    assert report.severity is Severity.UNKNOWN
    assert report.status is Status.UNKNOWN
    assert report.location is None
    assert report.created_at is not None


def test_to_dict_round_trips_enums() -> None:
    data = REPORTS[3].to_dict()

    assert data["severity"] == "critical"
    assert data["status"] == "resolved"
    assert data["createdAt"] == (BASE_TIME + timedelta(minutes=15)).isoformat()


def test_new_report_payload_starts_pending() -> None:
    new_report = NewReport(
        title="Leaking hydrant",
        description="Hydrant leaking at the base",
        severity=Severity.HIGH,
        location=Location(-26.1, 28.0, "Corner of 4th and 7th"),
        images=["a.jpg"],
    )

    payload = new_report.to_payload(now=BASE_TIME)

    assert payload["status"] == "pending"
    assert payload["severity"] == "high"
    assert payload["createdAt"] == payload["updatedAt"] == BASE_TIME.isoformat()
    assert payload["location"] == {
        "latitude": -26.1,
        "longitude": 28.0,
        "address": "Corner of 4th and 7th",
    }


def test_filter_reports() -> None:
    assert [r.id for r in filter_reports(REPORTS)] == ["a", "b", "c", "d", "e", "f"]
    assert [r.id for r in filter_reports(REPORTS, status="pending")] == ["a", "f"]
    assert [r.id for r in filter_reports(REPORTS, severity="critical")] == ["a", "d"]
    assert [
        r.id for r in filter_reports(REPORTS, status="pending", severity="low")
    ] == ["f"]


def test_compute_stats_buckets_statuses() -> None:
    stats = compute_stats(REPORTS)

    assert stats.to_dict() == {"total": 6, "pending": 2, "in_progress": 2, "resolved": 2}


def test_latest_reports_newest_first() -> None:
    assert [r.id for r in latest_reports(REPORTS, limit=3)] == ["f", "e", "d"]


def test_mixed_timestamp_formats_sort_newest_first() -> None:
    reports = [
        LeakReport.from_dict({"id": "naive", "createdAt": "2024-03-01T08:00:00"}),
        LeakReport.from_dict({"id": "zulu", "createdAt": "2024-03-01T09:00:00Z"}),
        LeakReport.from_dict({"id": "missing"}),
    ]

    assert all(r.created_at.tzinfo is not None for r in reports)
    assert [r.id for r in latest_reports(reports)] == ["missing", "zulu", "naive"]


def test_unrecognised_filter_matches_nothing() -> None:
    unknown = LeakReport.from_dict({"id": "u", "status": "weird", "severity": "odd"})
    reports = REPORTS + [unknown]

    assert filter_reports(reports, status="archived") == []
    assert filter_reports(reports, severity="urgent") == []
