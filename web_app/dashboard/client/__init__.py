from .api_client import ApiClient, ApiError, InProcessClient
from .report_service import ReportNotFoundError, ReportService
from .session import ReportSession
from .table import SortConfig, TableControls, columns_of, sort_rows

__all__ = [
    "ApiClient", "ApiError", "InProcessClient",
    "ReportNotFoundError", "ReportService",
    "ReportSession",
    "SortConfig", "TableControls", "columns_of", "sort_rows",
]
