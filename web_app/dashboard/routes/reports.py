# dashboard/routes/reports.py
from __future__ import annotations

import io

from flask import Blueprint, abort, current_app, flash, redirect, render_template, request, send_file, session, url_for

from dashboard.client import ApiClient, InProcessClient, ReportService, ReportSession
from dashboard.constants import UI_MESSAGES
from dashboard.logger import logger
from dashboard.reports.exporters import EXPORT_FORMATS, export_rows, filename_stem

reports_bp = Blueprint("reports", __name__)

SESSION_KEY = "report_session"

# browsers drop cookies above ~4 KB (same limit werkzeug warns about)
COOKIE_SIZE_LIMIT = 4093


def build_report_service() -> ReportService:
    cfg = current_app.config
    log_calls = bool(cfg.get("ENABLE_API_LOGGING"))

    if cfg.get("ENABLE_MOCKING"):
        client = InProcessClient(current_app._get_current_object(), log_calls=log_calls)
    else:
        client = ApiClient(cfg["API_BASE_URL"], timeout=cfg.get("REQUEST_TIMEOUT", 10), log_calls=log_calls)
        client.set_auth_token(cfg.get("API_TOKEN"))

    return ReportService(client)


def _load_state() -> ReportSession:
    return ReportSession.from_dict(session.get(SESSION_KEY))


def _save_state(state: ReportSession) -> None:
    session[SESSION_KEY] = state.to_dict()

    get_serializer = getattr(current_app.session_interface, "get_signing_serializer", None)
    serializer = get_serializer(current_app) if get_serializer else None
    if serializer is None:
        return
    size = len(serializer.dumps(dict(session)))
    if size > COOKIE_SIZE_LIMIT:
        logger.warning(
            f"[{state.selected_report}] Session cookie is {size} bytes (limit {COOKIE_SIZE_LIMIT}), "
            f"the browser will likely drop the loaded report"
        )


def _report_name(service: ReportService, report_id: str) -> str:
    report = service.get_report_by_id(report_id)
    return report["name"] if report else "report"


@reports_bp.get("/")
def root():
    return redirect(url_for("reports.reports"))


@reports_bp.get("/reports")
def reports():
    service = build_report_service()
    state = _load_state()

    return render_template(
        "reports.html",
        reports=service.get_available_reports(),
        state=state,
        report_name=_report_name(service, state.selected_report),
        columns=state.columns,
        rows=state.visible_rows,
        export_formats=list(EXPORT_FORMATS),
        messages=UI_MESSAGES,
    )


@reports_bp.post("/reports/load")
def load_report():
    report_id = (request.form.get("report_id") or "").strip()
    if not report_id:
        flash(UI_MESSAGES["SELECT_FIRST"], "warning")
        return redirect(url_for("reports.reports"))

    service = build_report_service()
    state = _load_state()

    logger.info(f"[{report_id}] Loading report")
    state.load(report_id, service)
    _save_state(state)

    return redirect(url_for("reports.reports"))


@reports_bp.get("/reports/sort/<column>")
def sort_report(column: str):
    state = _load_state()

    if column not in state.columns:
        logger.warning(f"[{state.selected_report}] Sort on unknown column '{column}' ignored")
        return redirect(url_for("reports.reports"))

    cfg = state.sort(column)
    logger.info(f"[{state.selected_report}] Sorted by {cfg.key} {cfg.direction}")
    _save_state(state)

    return redirect(url_for("reports.reports"))


@reports_bp.get("/reports/export/<fmt>")
def export_report(fmt: str):
    service = build_report_service()
    state = _load_state()
    name = _report_name(service, state.selected_report)

    try:
        result = export_rows(state.visible_rows, state.columns, filename_stem(name), fmt, title=name)
    except ValueError as e:
        logger.warning(f"[{state.selected_report}] Export rejected: {e}")
        return abort(400)

    if result is None:
        flash(UI_MESSAGES["NO_DATA"], "warning")
        return redirect(url_for("reports.reports"))

    return send_file(
        io.BytesIO(result.content),
        mimetype=result.mimetype,
        as_attachment=True,
        download_name=result.filename,
    )


@reports_bp.post("/reports/dismiss-error")
def dismiss_error():
    state = _load_state()
    state.clear_error()
    _save_state(state)
    return redirect(url_for("reports.reports"))
