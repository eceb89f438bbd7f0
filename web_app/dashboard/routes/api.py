# dashboard/routes/api.py
from __future__ import annotations

import time

from flask import Blueprint, current_app, jsonify, request

from dashboard.constants import INVALID_REPORT_TYPE
from dashboard.logger import logger
from dashboard.reports.service import generate_report_rows

api_bp = Blueprint("api", __name__, url_prefix="/api")


@api_bp.post("/reports")
def generate_report():
    payload = request.get_json(silent=True)
    report_type = payload.get("type") if isinstance(payload, dict) else None

    # simulated processing latency
    delay = current_app.config.get("REPORT_DELAY_SECONDS", 0) or 0
    if delay > 0:
        time.sleep(delay)

    try:
        rows = generate_report_rows(report_type)
    except KeyError as e:
        logger.warning(f"[{report_type!r}] Invalid report type requested: {e}")
        return jsonify({"error": INVALID_REPORT_TYPE}), 400

    extras = {k: v for k, v in payload.items() if k != "type"}
    if extras:
        logger.debug(f"[{report_type}] Ignoring extra payload fields: {extras}")

    logger.info(f"[{report_type}] Generated {len(rows)} rows")
    return jsonify(rows), 200
