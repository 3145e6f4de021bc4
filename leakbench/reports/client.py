"""HTTP client for the leak report API."""

import asyncio
import json
import logging
from typing import List, Optional

import aiohttp

from .models import LeakReport, NewReport


class ReportApiError(RuntimeError):
    """Raised when the report API answers with an error or malformed body."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class ReportApiClient:
    """
    Minimal client for the report backend.

    The backend exposes ``GET /reports`` (list, newest first) and
    ``POST /reports`` (create, returns ``{"id": ...}``).
    """

    def __init__(
        self,
        base_url: str,
        session: aiohttp.ClientSession,
        api_key: Optional[str] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session
        self.api_key = api_key
        self.logger = logging.getLogger(__name__)

    def _headers(self):
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    async def fetch_reports(self) -> List[LeakReport]:
        """
        Fetch all reports.

        Raises:
            ReportApiError: On a non-2xx status or a body that is not a JSON list
        """
        url = f"{self.base_url}/reports"
        async with self.session.get(url, headers=self._headers()) as response:
            text = await response.text()
            if response.status >= 300:
                raise ReportApiError(
                    f"Report API error: {response.status}", status=response.status
                )

        try:
            data = json.loads(text)
        except (json.JSONDecodeError, ValueError) as e:
            raise ReportApiError(f"Invalid JSON from report API: {e}") from e

        if not isinstance(data, list):
            raise ReportApiError("Expected a list of reports")
        try:
            return [LeakReport.from_dict(item) for item in data]
        except (ValueError, TypeError, AttributeError) as e:
            raise ReportApiError(f"Malformed report from report API: {e}") from e

    async def fetch_reports_or_empty(self) -> List[LeakReport]:
        """Fetch reports, logging and returning an empty list on any failure."""
        try:
            return await self.fetch_reports()
        except (ReportApiError, aiohttp.ClientError, asyncio.TimeoutError) as e:
            self.logger.error(f"Failed to fetch reports: {e}")
            return []

    async def create_report(self, report: NewReport) -> str:
        """
        Submit a new report.

        Returns:
            Identifier assigned by the backend

        Raises:
            ReportApiError: On a non-2xx status or a response without an id
        """
        url = f"{self.base_url}/reports"
        async with self.session.post(
            url, json=report.to_payload(), headers=self._headers()
        ) as response:
            text = await response.text()
            if response.status >= 300:
                raise ReportApiError(
                    f"HTTP {response.status}: {text[:200]}", status=response.status
                )

        try:
            report_id = json.loads(text).get("id")
        except (json.JSONDecodeError, ValueError, AttributeError) as e:
            raise ReportApiError(f"Invalid response from report API: {e}") from e

        if report_id is None:
            raise ReportApiError("Report API response did not include an id")
        return str(report_id)
