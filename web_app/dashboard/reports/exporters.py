# dashboard/reports/exporters.py
from __future__ import annotations

import csv
import io
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from dashboard.logger import logger


@dataclass(frozen=True)
class ExportResult:
    content: bytes
    filename: str
    mimetype: str


Row = Dict[str, Any]


def filename_stem(report_name: str) -> str:
    """'Sales Report' -> 'sales_report'"""
    return re.sub(r"\s+", "_", (report_name or "report").strip().lower())


def _cell(v: Any) -> Any:
    return "" if v is None else v


def _table_rows(rows: Sequence[Row], columns: Sequence[str]) -> List[List[Any]]:
    return [[_cell(row.get(col)) for col in columns] for row in rows]


# -------------------------
# CSV export
# -------------------------

def export_csv(rows: Sequence[Row], columns: Sequence[str]) -> bytes:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(columns)
    writer.writerows(_table_rows(rows, columns))
    return buf.getvalue().encode("utf-8")


# -------------------------
# Excel export
# -------------------------

def export_xlsx(rows: Sequence[Row], columns: Sequence[str]) -> bytes:
    wb = Workbook()
    ws = wb.active
    ws.title = "Report"

    ws.append(list(columns))
    for values in _table_rows(rows, columns):
        ws.append(values)

    # Simple column width auto-fit (cheap)
    for col_idx, header in enumerate(columns, start=1):
        widest = max([len(str(header))] + [len(str(_cell(r.get(header)))) for r in rows])
        ws.column_dimensions[get_column_letter(col_idx)].width = min(60, max(12, widest + 2))

    buf = io.BytesIO()
    wb.save(buf)
    return buf.getvalue()


# -------------------------
# PDF export
# -------------------------

def export_pdf(rows: Sequence[Row], columns: Sequence[str], title: str = "Report") -> bytes:
    buf = io.BytesIO()
    styles = getSampleStyleSheet()

    doc = SimpleDocTemplate(
        buf,
        pagesize=landscape(A4),
        leftMargin=12 * mm,
        rightMargin=12 * mm,
        topMargin=10 * mm,
        bottomMargin=12 * mm,
        title=title,
    )

    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    data = [list(columns)] + [[str(v) for v in values] for values in _table_rows(rows, columns)]

    table = Table(data, repeatRows=1)
    table.setStyle(TableStyle([
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, -1), 9),
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#f5f5f5")),
        ("LINEBELOW", (0, 0), (-1, 0), 0.6, colors.lightgrey),
        ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, colors.HexColor("#fafafa")]),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
    ]))

    story = [
        Paragraph(title, styles["Title"]),
        Paragraph(f"Generated: {ts}", styles["Normal"]),
        Spacer(1, 4 * mm),
        table,
    ]
    doc.build(story)
    return buf.getvalue()


EXPORT_FORMATS = {
    "csv": ("text/csv", "csv"),
    "xlsx": ("application/vnd.openxmlformats-officedocument.spreadsheetml.sheet", "xlsx"),
    "pdf": ("application/pdf", "pdf"),
}


def export_rows(
    rows: Sequence[Row],
    columns: Sequence[str],
    stem: str,
    fmt: str = "csv",
    title: Optional[str] = None,
) -> Optional[ExportResult]:
    """
    Serialize the visible rows. Returns None when there is nothing to export
    so callers can skip the download.
    """
    if fmt not in EXPORT_FORMATS:
        raise ValueError(f"Unsupported export format: {fmt}")
    if not rows:
        return None

    mimetype, ext = EXPORT_FORMATS[fmt]
    if fmt == "csv":
        content = export_csv(rows, columns)
    elif fmt == "xlsx":
        content = export_xlsx(rows, columns)
    else:
        content = export_pdf(rows, columns, title=title or stem)

    filename = f"{stem}.{ext}"
    logger.info(f"Export {fmt}: {len(rows)} rows -> {filename}")
    return ExportResult(content=content, filename=filename, mimetype=mimetype)
