"""Leak report data models."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, List, Dict, Any

from .classifier import Severity, Status


def _parse_datetime(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 string (``Z`` suffix allowed) into a UTC-aware datetime."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if isinstance(value, (int, float)):
        # Epoch milliseconds
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    text = str(value)
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        # Offset-less timestamps are UTC
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _format_datetime(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


@dataclass
class Location:
    """Geolocation of a report."""

    latitude: float
    longitude: float
    address: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Location":
        return cls(
            latitude=float(data["latitude"]),
            longitude=float(data["longitude"]),
            address=data.get("address") or None,
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"latitude": self.latitude, "longitude": self.longitude}
        if self.address:
            result["address"] = self.address
        return result


@dataclass
class LeakReport:
    """A leak report as returned by the report API."""

    id: str
    title: str
    description: str
    severity: Severity
    status: Status
    location: Optional[Location]
    created_at: datetime
    updated_at: datetime

    user_id: str = ""
    user_name: str = ""
    images: List[str] = field(default_factory=list)

    # Maintenance fields
    assigned_to: Optional[str] = None
    assigned_to_name: Optional[str] = None
    resolution: Optional[str] = None
    resolved_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LeakReport":
        """
        Build a report from the API's camelCase JSON.

        Missing timestamps fall back to the current time, and a missing or
        malformed location becomes None.
        """
        now = datetime.now(timezone.utc)
        location = data.get("location")
        try:
            parsed_location = Location.from_dict(location) if location else None
        except (KeyError, TypeError, ValueError):
            parsed_location = None

        return cls(
            id=str(data.get("id", "")),
            title=data.get("title", ""),
            description=data.get("description", ""),
            severity=Severity.parse(data.get("severity")),
            status=Status.parse(data.get("status")),
            location=parsed_location,
            created_at=_parse_datetime(data.get("createdAt")) or now,
            updated_at=_parse_datetime(data.get("updatedAt")) or now,
            user_id=data.get("userId", ""),
            user_name=data.get("userName", ""),
            images=list(data.get("images") or []),
            assigned_to=data.get("assignedTo"),
            assigned_to_name=data.get("assignedToName"),
            resolution=data.get("resolution"),
            resolved_at=_parse_datetime(data.get("resolvedAt")),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the API's camelCase JSON shape."""
        return {
            "id": self.id,
            "userId": self.user_id,
            "userName": self.user_name,
            "title": self.title,
            "description": self.description,
            "severity": self.severity.value,
            "status": self.status.value,
            "location": self.location.to_dict() if self.location else None,
            "images": list(self.images),
            "assignedTo": self.assigned_to,
            "assignedToName": self.assigned_to_name,
            "resolution": self.resolution,
            "createdAt": _format_datetime(self.created_at),
            "updatedAt": _format_datetime(self.updated_at),
            "resolvedAt": _format_datetime(self.resolved_at),
        }


@dataclass
class NewReport:
    """Payload for submitting a new report."""

    title: str
    description: str
    severity: Severity
    location: Optional[Location] = None
    images: List[str] = field(default_factory=list)
    user_id: str = "anonymous"
    user_name: str = "Anonymous"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NewReport":
        location = data.get("location")
        return cls(
            title=data["title"],
            description=data.get("description", ""),
            severity=Severity.parse(data.get("severity")),
            location=Location.from_dict(location) if location else None,
            images=list(data.get("images") or []),
            user_id=data.get("userId", "anonymous"),
            user_name=data.get("userName", "Anonymous"),
        )

    def to_payload(self, now: Optional[datetime] = None) -> Dict[str, Any]:
        """JSON body for ingestion; new reports always start as pending."""
        timestamp = _format_datetime(now or datetime.now(timezone.utc))
        return {
            "userId": self.user_id,
            "userName": self.user_name,
            "title": self.title,
            "description": self.description,
            "severity": self.severity.value,
            "location": self.location.to_dict() if self.location else None,
            "images": list(self.images),
            "status": Status.PENDING.value,
            "createdAt": timestamp,
            "updatedAt": timestamp,
        }
