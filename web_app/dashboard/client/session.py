# dashboard/client/session.py
from __future__ import annotations

from typing import Any, Dict, List, Optional

from dashboard.client.api_client import ApiError
from dashboard.client.report_service import ReportNotFoundError
from dashboard.client.table import SortConfig, TableControls, columns_of
from dashboard.constants import SORT_ASC, UI_MESSAGES
from dashboard.logger import logger

IDLE = "idle"
LOADING = "loading"
LOADED = "loaded"
FAILED = "failed"


class ReportSession:
    """
    State of one user's report view: Idle -> Loading -> Loaded | Failed.

    Every load gets a new token; completions carrying an older token are
    dropped so a slow answer for an abandoned selection cannot overwrite
    the current one.
    """

    def __init__(self):
        self.state = IDLE
        self.selected_report = ""
        self.report_data: Optional[List[Dict[str, Any]]] = None
        self.error: Optional[str] = None
        self.token = 0
        self.table = TableControls()

    # -------------------------
    # transitions
    # -------------------------

    def begin_load(self, report_id: str) -> int:
        self.selected_report = report_id or ""
        self.token += 1
        self.error = None
        self.report_data = None
        self.table.set_data(None)
        self.table.reset()
        self.state = LOADING if self.selected_report else IDLE
        return self.token

    def complete(self, token: int, rows: List[Dict[str, Any]]) -> bool:
        if token != self.token or self.state != LOADING:
            logger.info(f"[{self.selected_report}] Dropping stale report response (token {token} != {self.token})")
            return False
        self.report_data = list(rows)
        self.table.set_data(self.report_data)
        self.state = LOADED
        return True

    def fail(self, token: int, message: str) -> bool:
        if token != self.token or self.state != LOADING:
            logger.info(f"[{self.selected_report}] Dropping stale report error (token {token} != {self.token})")
            return False
        self.error = message
        self.report_data = None
        self.table.set_data(None)
        self.state = FAILED
        return True

    def load(self, report_id: str, service) -> str:
        token = self.begin_load(report_id)
        if self.state == IDLE:
            return self.state

        try:
            rows = service.fetch_report(report_id)
        except ReportNotFoundError as e:
            logger.warning(f"[{report_id}] Report not in catalog")
            self.fail(token, str(e))
        except ApiError as e:
            logger.error(f"[{report_id}] Fetching report failed: {e}")
            self.fail(token, UI_MESSAGES["FETCH_ERROR"])
        else:
            logger.info(f"[{report_id}] Report loaded: {len(rows)} rows")
            self.complete(token, rows)
        return self.state

    def clear_error(self) -> None:
        self.error = None

    # -------------------------
    # table view
    # -------------------------

    @property
    def columns(self) -> List[str]:
        return self.table.columns

    @property
    def sort_config(self) -> SortConfig:
        return self.table.sort_config

    def sort(self, column: str) -> SortConfig:
        return self.table.handle_sort(column)

    @property
    def visible_rows(self) -> List[Dict[str, Any]]:
        return self.table.processed_data

    # -------------------------
    # (de)serialization for the cookie session
    # -------------------------

    def to_dict(self) -> Dict[str, Any]:
        return {
            "state": self.state,
            "selected_report": self.selected_report,
            "report_data": self.report_data,
            "columns": self.columns,
            "error": self.error,
            "token": self.token,
            "sort_key": self.sort_config.key,
            "sort_direction": self.sort_config.direction,
        }

    @classmethod
    def from_dict(cls, raw: Optional[Dict[str, Any]]) -> "ReportSession":
        s = cls()
        if not raw:
            return s
        s.state = raw.get("state", IDLE)
        s.selected_report = raw.get("selected_report", "")
        rows = raw.get("report_data")
        columns = raw.get("columns") or columns_of(rows)
        # cookie JSON may not keep key order, rebuild rows in column order
        s.report_data = [{c: row.get(c) for c in columns} for row in rows] if rows is not None else None
        s.error = raw.get("error")
        s.token = int(raw.get("token", 0))
        s.table = TableControls(
            s.report_data,
            SortConfig(key=raw.get("sort_key"), direction=raw.get("sort_direction", SORT_ASC)),
        )
        return s
