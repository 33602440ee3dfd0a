"""
Readiness, health and request validation behavior of the assembled application.
"""

from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

import main as app_main
from config import API_PREFIX


@pytest.fixture
def client():
    return TestClient(app_main.app)


@pytest.mark.asyncio
async def test_ready_endpoint_returns_200():
    response = await app_main.ready()
    payload = json.loads(response.body.decode("utf-8"))
    assert response.status_code == 200
    assert payload == {"ready": True}


def test_health_reports_defaults(client):
    r = client.get(f"{API_PREFIX}/health")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert body["defaults"]["forecast_periods"] == 8


def test_forecast_over_http(client):
    r = client.post(f"{API_PREFIX}/forecast", json={"values": [10, 12, 14, 16], "periods": 2})
    assert r.status_code == 200
    assert r.json()["predictions"] == pytest.approx([18.0, 20.0])


def test_misaligned_report_is_rejected(client):
    r = client.post(f"{API_PREFIX}/forecast/report", json={"revenue": [1, 2, 3], "units": [1, 2]})
    assert r.status_code == 422


def test_unknown_prediction_metric_is_rejected(client):
    r = client.post(f"{API_PREFIX}/forecast/predictions", json={"supplier_id": "S", "metrics": {"margin": [1]}})
    assert r.status_code == 422


def test_accuracy_length_mismatch_is_400(client):
    r = client.post(f"{API_PREFIX}/metrics/accuracy", json={"actual": [1, 2], "predicted": [1]})
    assert r.status_code == 400
    assert "same length" in r.json()["detail"]


def test_report_week_labels_over_http(client, weekly_revenue, weekly_units):
    starts = [f"2026-06-{d:02d}" for d in (1, 8, 15, 22, 29)] + [
        f"2026-07-{d:02d}" for d in (6, 13, 20, 27)
    ] + ["2026-08-03", "2026-08-10", "2026-08-17"]
    r = client.post(f"{API_PREFIX}/forecast/report", json={
        "revenue": weekly_revenue, "units": weekly_units, "week_starts": starts, "weeks": 4,
    })
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    assert body["weeks"]["future"] == ["2026-08-24", "2026-08-31", "2026-09-07", "2026-09-14"]


def _post_raw(client, path, body):
    # NaN is not valid strict JSON, so the body is written by hand
    return client.post(f"{API_PREFIX}{path}", content=body, headers={"Content-Type": "application/json"})


def test_report_drops_nan_weeks(client):
    body = (
        '{"revenue": [10, 12, 14, NaN, 16, 18, 20, 22, 24],'
        ' "units": [1, 2, 3, NaN, 4, 5, 6, 7, 8], "weeks": 4}'
    )
    r = _post_raw(client, "/forecast/report", body)
    assert r.status_code == 200
    payload = r.json()
    assert payload["success"] is True
    assert payload["historical_weeks"] == 8
    assert payload["revenue"]["predictions"] == pytest.approx([26.0, 28.0, 30.0, 32.0])
    assert None not in payload["revenue"]["confidence_1sigma"]["lower"]
    assert None not in payload["units"]["predictions"]


def test_report_with_nan_in_one_series_is_400(client):
    body = '{"revenue": [1, 2, 3, 4, 5, 6, 7, NaN], "units": [1, 2, 3, 4, 5, 6, 7, 8]}'
    r = _post_raw(client, "/forecast/report", body)
    assert r.status_code == 400


def test_accuracy_with_nan_is_400(client):
    r = _post_raw(client, "/metrics/accuracy", '{"actual": [1, NaN], "predicted": [1, 2]}')
    assert r.status_code == 400


def test_accuracy_with_infinity_in_history(client):
    body = '{"actual": [100], "predicted": [90], "history": [' + ", ".join(["10"] * 12) + ', Infinity]}'
    r = _post_raw(client, "/metrics/accuracy", body)
    assert r.status_code == 200
    assert r.json()["mape"] == pytest.approx(10.0)
    assert r.json()["backtest"]["mape"] == pytest.approx(0.0)


def test_performance_rejects_nan_revenue(client):
    body = '{"products": [{"product_id": "P1", "product_name": "x", "total_revenue": NaN}]}'
    r = _post_raw(client, "/metrics/performance", body)
    assert r.status_code == 422
