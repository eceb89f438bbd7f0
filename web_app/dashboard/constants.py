"""
Application-wide constants shared by the endpoint, the client and the pages.
"""

ROWS_PER_REPORT = 10

INVALID_REPORT_TYPE = "Invalid report type"

# catalog shown in the selector; payload is what the client posts to /api/reports
REPORTS = [
    {"id": "sales", "name": "Sales Report", "payload": {"type": "sales", "period": "monthly"}},
    {"id": "inventory", "name": "Inventory Status", "payload": {"type": "inventory", "status": "current"}},
    {"id": "customers", "name": "Customer Analysis", "payload": {"type": "customers", "segment": "all"}},
    {"id": "products", "name": "Product Performance", "payload": {"type": "products", "metric": "revenue"}},
    {"id": "orders", "name": "Order Summary", "payload": {"type": "orders", "status": "completed"}},
]

SORT_ASC = "asc"
SORT_DESC = "desc"

UI_MESSAGES = {
    "LOADING": "Loading report data...",
    "FETCH_ERROR": "Failed to fetch report data",
    "NO_DATA": "No data available",
    "SELECT_FIRST": "Please select a report first",
    "REPORT_NOT_FOUND": "Report not found",
}
