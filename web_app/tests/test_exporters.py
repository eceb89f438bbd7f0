# tests/test_exporters.py
# unit tests for dashboard/reports/exporters.py (csv / xlsx / pdf)

import csv
import io

import pytest
from openpyxl import load_workbook

from dashboard.client.table import columns_of, sort_rows
from dashboard.constants import SORT_DESC
from dashboard.reports.exporters import export_rows, filename_stem
from dashboard.reports.service import generate_report_rows

pytestmark = pytest.mark.order(5)


def test_empty_rows_export_nothing():
    for fmt in ("csv", "xlsx", "pdf"):
        assert export_rows([], [], "sales_report", fmt) is None


def test_csv_has_header_plus_one_line_per_row():
    rows = sort_rows(generate_report_rows("orders"), "total", SORT_DESC)
    columns = columns_of(rows)

    result = export_rows(rows, columns, "order_summary")
    assert result.filename == "order_summary.csv"
    assert result.mimetype == "text/csv"

    parsed = list(csv.reader(io.StringIO(result.content.decode("utf-8"))))
    assert len(parsed) == len(rows) + 1
    assert parsed[0] == columns
    # exported in the visible (sorted) order
    assert [int(line[columns.index("total")]) for line in parsed[1:]] == [r["total"] for r in rows]


def test_xlsx_workbook_content():
    rows = generate_report_rows("inventory")
    columns = columns_of(rows)

    result = export_rows(rows, columns, "inventory_status", "xlsx")
    assert result.filename == "inventory_status.xlsx"

    ws = load_workbook(io.BytesIO(result.content)).active
    assert ws.title == "Report"
    assert ws.max_row == len(rows) + 1
    assert [c.value for c in ws[1]] == columns
    assert ws.cell(row=2, column=columns.index("sku") + 1).value == "SKU0001"


def test_pdf_is_produced():
    rows = generate_report_rows("customers")
    result = export_rows(rows, columns_of(rows), "customer_analysis", "pdf", title="Customer Analysis")
    assert result.filename == "customer_analysis.pdf"
    assert result.mimetype == "application/pdf"
    assert result.content.startswith(b"%PDF")


def test_unknown_format_rejected():
    with pytest.raises(ValueError):
        export_rows([{"a": 1}], ["a"], "x", "docx")


@pytest.mark.parametrize("name, stem", [
    ("Sales Report", "sales_report"),
    ("Order  Summary", "order_summary"),
    ("", "report"),
])
def test_filename_stem(name, stem):
    assert filename_stem(name) == stem
