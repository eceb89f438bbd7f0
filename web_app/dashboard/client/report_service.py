from __future__ import annotations

from typing import Any, Dict, List, Optional

from dashboard.client.api_client import ApiError
from dashboard.constants import REPORTS, UI_MESSAGES


class ReportNotFoundError(KeyError):
    """Report id outside the catalog; raised before any request is sent."""

    def __str__(self) -> str:
        return self.args[0] if self.args else UI_MESSAGES["REPORT_NOT_FOUND"]


class ReportService:
    """Catalog of report definitions plus fetching through an injected API client."""

    endpoint = "/reports"

    def __init__(self, client, reports: Optional[List[Dict[str, Any]]] = None):
        self.client = client
        self._reports = list(reports if reports is not None else REPORTS)

    def get_available_reports(self) -> List[Dict[str, Any]]:
        return list(self._reports)

    def get_report_by_id(self, report_id: str) -> Optional[Dict[str, Any]]:
        return next((r for r in self._reports if r["id"] == report_id), None)

    def fetch_report(self, report_id: str) -> List[Dict[str, Any]]:
        report = self.get_report_by_id(report_id)
        if not report:
            raise ReportNotFoundError(UI_MESSAGES["REPORT_NOT_FOUND"])

        data = self.client.post(self.endpoint, report["payload"])
        if not isinstance(data, list) or not all(isinstance(row, dict) for row in data):
            raise ApiError(f"Unexpected response for report '{report_id}': expected a list of rows")
        return data
