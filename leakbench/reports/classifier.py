"""Marker and status colour classification for leak reports.

Severity and status text is matched ignoring case and surrounding whitespace,
so ``"Critical "`` classifies as CRITICAL rather than falling through to the
neutral colour.
"""

from enum import Enum
from typing import Dict, Optional, Union


class Severity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: Union["Severity", str, None]) -> "Severity":
        """Map free-form text to a Severity, UNKNOWN when unrecognised."""
        if isinstance(value, cls):
            return value
        if not value:
            return cls.UNKNOWN
        normalized = str(value).strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        return cls.UNKNOWN


class Status(str, Enum):
    PENDING = "pending"
    ASSIGNED = "assigned"
    IN_PROGRESS = "in-progress"
    RESOLVED = "resolved"
    CLOSED = "closed"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: Union["Status", str, None]) -> "Status":
        """Map free-form text to a Status, UNKNOWN when unrecognised."""
        if isinstance(value, cls):
            return value
        if not value:
            return cls.UNKNOWN
        normalized = str(value).strip().lower().replace("_", "-")
        for member in cls:
            if member.value == normalized:
                return member
        return cls.UNKNOWN

    @property
    def is_final(self) -> bool:
        return self in (Status.RESOLVED, Status.CLOSED)


class MarkerColor(str, Enum):
    """Presentation colour tokens shared by the map and home views."""

    RESOLVED = "#10B981"  # green
    DANGER = "#EF4444"  # red
    WARNING = "#F59E0B"  # orange
    INFO = "#3B82F6"  # blue
    ACCENT = "#8B5CF6"  # purple
    NEUTRAL = "#64748B"  # gray

    @property
    def hex(self) -> str:
        return self.value


SEVERITY_COLORS: Dict[Severity, MarkerColor] = {
    Severity.CRITICAL: MarkerColor.DANGER,
    Severity.HIGH: MarkerColor.WARNING,
    Severity.MEDIUM: MarkerColor.INFO,
    Severity.LOW: MarkerColor.ACCENT,
    Severity.UNKNOWN: MarkerColor.NEUTRAL,
}

STATUS_COLORS: Dict[Status, MarkerColor] = {
    Status.PENDING: MarkerColor.WARNING,
    Status.ASSIGNED: MarkerColor.INFO,
    Status.IN_PROGRESS: MarkerColor.INFO,
    Status.RESOLVED: MarkerColor.RESOLVED,
    Status.CLOSED: MarkerColor.RESOLVED,
    Status.UNKNOWN: MarkerColor.NEUTRAL,
}

# Every enum member must have a colour
_missing = set(Severity) - set(SEVERITY_COLORS) | set(Status) - set(STATUS_COLORS)
if _missing:
    raise RuntimeError(f"No colour mapping for: {sorted(m.value for m in _missing)}")


def get_marker_color(
    severity: Union[Severity, str, None], status: Union[Status, str, None]
) -> MarkerColor:
    """
    Colour of a report's map marker.

    Resolved and closed reports are always RESOLVED; otherwise the colour is
    chosen by severity, with NEUTRAL for anything unrecognised.
    """
    if Status.parse(status).is_final:
        return MarkerColor.RESOLVED
    return SEVERITY_COLORS[Severity.parse(severity)]


def get_status_color(status: Union[Status, str, None]) -> MarkerColor:
    """Colour of a report's status badge."""
    return STATUS_COLORS[Status.parse(status)]


def status_bucket(status: Union[Status, str, None]) -> Optional[str]:
    """Group a status into the home screen's pending / in progress / resolved counters."""
    parsed = Status.parse(status)
    if parsed == Status.PENDING:
        return "pending"
    if parsed in (Status.ASSIGNED, Status.IN_PROGRESS):
        return "in_progress"
    if parsed.is_final:
        return "resolved"
    return None
