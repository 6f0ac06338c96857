from __future__ import annotations

import json
from math import isclose

from flask.testing import FlaskClient

from blendcalc.app import create_app
from blendcalc.config import Settings


def simulation_payload() -> dict:
    return {"growthWeightPct": 70, "initialCapital": 10_000_000, "horizonYears": 30}


def test_simulate_returns_full_result(client: FlaskClient):
    resp = client.post("/api/simulate", json=simulation_payload())

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["growthWeightPct"] == 70
    assert body["incomeWeightPct"] == 30
    assert len(body["chartData"]) == 13
    assert body["chartData"][0] == {"year": 2013, "value": 10_000_000, "savings": 10_000_000}
    assert body["finalBalance"] == body["chartData"][-1]["value"]
    assert body["maxDrawdownPct"] < 0
    assert isclose(body["cagr"], 0.163784, abs_tol=1e-6)
    assert body["projectedFutureValue"] > body["finalBalance"]
    assert body["profile"]["key"] == "aggressive_balance"
    assert body["estimatedMonthlyIncomeAfterTax"] < body["estimatedMonthlyIncome"]


def test_simulate_without_horizon(client: FlaskClient):
    resp = client.post("/api/simulate", json={"growthWeightPct": 0, "initialCapital": 100})

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["projectedFutureValue"] is None
    assert body["finalBalance"] == 390
    assert isclose(body["maxDrawdownPct"], -5.56, abs_tol=1e-9)


def test_invalid_payload_returns_422(client: FlaskClient):
    for payload in (
        {"growthWeightPct": 120, "initialCapital": 100},
        {"growthWeightPct": 50, "initialCapital": 0},
        {"growthWeightPct": 50, "initialCapital": -10},
        {"growthWeightPct": 50, "initialCapital": 100, "horizonYears": 0},
        {"initialCapital": 100},
        {"growthWeightPct": 50, "initialCapital": 100, "extra": True},
    ):
        resp = client.post("/api/simulate", json=payload)
        assert resp.status_code == 422, payload
        assert "detail" in resp.get_json()


def test_non_json_body_returns_400(client: FlaskClient):
    resp = client.post("/api/simulate", data="not json", content_type="text/plain")

    assert resp.status_code == 400


def test_returns_endpoint_lists_reference_table(client: FlaskClient):
    resp = client.get("/api/returns")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["firstYear"] == 2014
    assert body["lastYear"] == 2025
    assert body["returns"][8] == {"year": 2022, "growthReturnPct": -32.58, "incomeReturnPct": -3.23}


def test_holdings_endpoint(client: FlaskClient):
    resp = client.get("/api/holdings")

    assert resp.status_code == 200
    holdings = resp.get_json()["holdings"]
    assert holdings["growth"][0] == {"name": "Apple", "symbol": "AAPL", "weight": 12.4}
    assert len(holdings["income"]) == 3


def test_configured_return_file_and_assumptions_are_used(tmp_path):
    path = tmp_path / "returns.json"
    path.write_text(
        json.dumps([{"year": 2000, "growthReturnPct": 10.0, "incomeReturnPct": 0.0}]),
        encoding="utf-8",
    )
    app = create_app(
        Settings(_env_file=None, returns_file=path, growth_yield_pct=1.2, tax_rate=0.0)
    )

    with app.test_client() as client:
        ping = client.get("/api/ping").get_json()
        resp = client.post("/api/simulate", json={"growthWeightPct": 100, "initialCapital": 1000})

    assert ping == {"message": "pong", "firstYear": 2000, "lastYear": 2000}
    body = resp.get_json()
    assert [point["value"] for point in body["chartData"]] == [1000, 1100]
    assert isclose(body["estimatedDividendYieldPct"], 1.2, rel_tol=1e-12)
    assert isclose(body["estimatedMonthlyIncome"], 1100 * 1.2 / 100 / 12, rel_tol=1e-9)
    assert body["estimatedMonthlyIncomeAfterTax"] == body["estimatedMonthlyIncome"]


def test_cors_header_for_configured_origin(app):
    with app.test_client() as client:
        resp = client.get("/api/ping", headers={"Origin": "http://localhost:5173"})

    assert resp.headers.get("Access-Control-Allow-Origin") == "http://localhost:5173"


def test_fractional_capital_kept_in_first_chart_row(client: FlaskClient):
    resp = client.post("/api/simulate", json={"growthWeightPct": 50, "initialCapital": 1234.56})

    assert resp.status_code == 200
    first = resp.get_json()["chartData"][0]
    assert first == {"year": 2013, "value": 1234.56, "savings": 1234.56}


def test_very_long_horizon_serializes(client: FlaskClient):
    resp = client.post(
        "/api/simulate",
        json={"growthWeightPct": 100, "initialCapital": 100, "horizonYears": 5000},
    )

    assert resp.status_code == 200
    body = json.loads(resp.get_data(as_text=True))
    assert body["projectedFutureValue"] == "Infinity"
    assert body["estimatedMonthlyIncome"] == "Infinity"
    assert body["finalBalance"] == 710


def test_huge_or_non_finite_capital_returns_422(client: FlaskClient):
    huge = client.post("/api/simulate", json={"growthWeightPct": 100, "initialCapital": 1e308})
    infinite = client.post(
        "/api/simulate",
        data='{"growthWeightPct": 100, "initialCapital": Infinity}',
        content_type="application/json",
    )

    assert huge.status_code == 422
    assert infinite.status_code == 422
    assert "detail" in infinite.get_json()


def test_overflowing_return_table_returns_422(tmp_path):
    path = tmp_path / "returns.json"
    path.write_text(
        json.dumps([{"year": 2000, "growthReturnPct": 1e300, "incomeReturnPct": 0.0}]),
        encoding="utf-8",
    )
    app = create_app(Settings(_env_file=None, returns_file=path))

    with app.test_client() as client:
        resp = client.post("/api/simulate", json={"growthWeightPct": 100, "initialCapital": 1e15})

    assert resp.status_code == 422
    assert resp.get_json()["detail"][0]["type"] == "overflow"
