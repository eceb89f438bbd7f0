# tests/test_api.py
# endpoint tests for POST /api/reports via Flask test client

import pytest

from dashboard.reports.registry import REPORT_FIELDS, REPORT_SPECS

pytestmark = pytest.mark.order(2)

INVALID = {"error": "Invalid report type"}


@pytest.mark.parametrize("report_type", list(REPORT_SPECS))
def test_valid_type_returns_ten_rows(client, report_type):
    resp = client.post("/api/reports", json={"type": report_type})
    assert resp.status_code == 200
    assert resp.mimetype == "application/json"

    rows = resp.get_json()
    assert len(rows) == 10
    # key order survives JSON encoding (column headers depend on it)
    expected = [f.name for f in REPORT_FIELDS[report_type]]
    assert all(list(row.keys()) == expected for row in rows)


def test_sales_scenario(client):
    rows = client.post("/api/reports", json={"type": "sales"}).get_json()
    for row in rows:
        assert {"date", "product", "revenue", "units"} <= set(row)
        assert 0 <= row["revenue"] <= 9999
        assert 0 <= row["units"] <= 99


@pytest.mark.parametrize("body", [
    {"type": "bogus"},
    {"type": ""},
    {"type": "SALES"},
    {"type": None},
    {"type": ["sales"]},
    {},
    ["sales"],
])
def test_invalid_type_returns_400(client, body):
    resp = client.post("/api/reports", json=body)
    assert resp.status_code == 400
    assert resp.mimetype == "application/json"
    assert resp.get_json() == INVALID


def test_non_json_body_is_invalid_type(client):
    resp = client.post("/api/reports", data="type=sales", content_type="text/plain")
    assert resp.status_code == 400
    assert resp.get_json() == INVALID


def test_extra_payload_fields_are_accepted(client):
    resp = client.post("/api/reports", json={"type": "orders", "status": "completed", "period": "monthly"})
    assert resp.status_code == 200
    assert len(resp.get_json()) == 10


def test_only_post_is_routed(client):
    assert client.get("/api/reports").status_code == 405


def test_delay_is_taken_from_config(app, client, monkeypatch):
    calls = []
    monkeypatch.setattr("dashboard.routes.api.time.sleep", lambda s: calls.append(s))

    client.post("/api/reports", json={"type": "sales"})
    assert calls == []

    app.config["REPORT_DELAY_SECONDS"] = 0.25
    client.post("/api/reports", json={"type": "bogus"})
    assert calls == [0.25]
