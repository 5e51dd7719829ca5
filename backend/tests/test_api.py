"""Tests for the FastAPI endpoints."""

import pytest
from fastapi.testclient import TestClient

from unitgraph.main import app

client = TestClient(app)


class TestHealthEndpoint:
    def test_health(self):
        r = client.get("/api/health")
        assert r.status_code == 200
        assert r.json() == {"status": "ok", "version": "0.1.0"}


class TestParseEndpoint:
    def test_compound_unit(self):
        r = client.post("/api/units/parse", json={"symbol": "kg*m/s2"})
        assert r.status_code == 200
        data = r.json()
        assert data["ascii_symbol"] == "kg*m/s2"
        assert data["unicode_symbol"] == "kg·m/s²"
        assert data["dimension"] == "MLT-2"
        assert data["quantity_type"] == "force"
        assert [t["symbol"] for t in data["terms"]] == ["kg", "m", "s-2"]

    def test_prefix_reported(self):
        r = client.post("/api/units/parse", json={"symbol": "km"})
        term = r.json()["terms"][0]
        assert term["unit"] == "metre"
        assert term["prefix"] == "kilo"

    def test_unknown_quantity_type(self):
        r = client.post("/api/units/parse", json={"symbol": "N*s"})
        assert r.status_code == 200
        assert r.json()["quantity_type"] is None

    def test_syntax_error_position(self):
        r = client.post("/api/units/parse", json={"symbol": "m//s"})
        assert r.status_code == 422
        detail = r.json()["detail"][0]
        assert detail["position"] == 2

    def test_unknown_unit(self):
        r = client.post("/api/units/parse", json={"symbol": "furlongs"})
        assert r.status_code == 422
        assert "Unknown unit" in r.json()["detail"][0]["message"]

    def test_symbol_too_long(self):
        r = client.post("/api/units/parse", json={"symbol": "m*" * 150 + "m"})
        assert r.status_code == 422


class TestExpandEndpoint:
    def test_expand(self):
        r = client.post("/api/units/expand", json={"value": 2, "symbol": "kN"})
        assert r.status_code == 200
        data = r.json()
        assert data["ascii_symbol"] == "kg*m/s2"
        assert data["value"] == pytest.approx(2000)

    def test_invalid_symbol(self):
        r = client.post("/api/units/expand", json={"symbol": "kft"})
        assert r.status_code == 422


class TestConvertEndpoint:
    def test_convert(self):
        r = client.post("/api/convert", json={"value": 2, "src": "h", "dest": "s"})
        assert r.status_code == 200
        data = r.json()
        assert data["value"] == 7200
        assert data["factor"] == 3600
        assert data["relative_error"] == 0
        assert data["dimension"] == "T"

    def test_default_value(self):
        r = client.post("/api/convert", json={"src": "m", "dest": "ft"})
        assert r.json()["value"] == pytest.approx(3.28084, rel=1e-6)

    def test_dimension_mismatch(self):
        r = client.post("/api/convert", json={"src": "m", "dest": "s"})
        assert r.status_code == 422
        assert "invalid for length quantities" in r.json()["detail"][0]["message"]

    def test_non_finite_value(self):
        r = client.post("/api/convert", content='{"value": "NaN", "src": "m", "dest": "ft"}',
                        headers={"Content-Type": "application/json"})
        assert r.status_code == 422

    def test_missing_fields(self):
        r = client.post("/api/convert", json={"value": 1})
        assert r.status_code == 422


class TestDimensionEndpoint:
    def test_normalize(self):
        r = client.post("/api/dimensions/normalize", json={"code": "T-2LM"})
        assert r.status_code == 200
        data = r.json()
        assert data["code"] == "MLT-2"
        assert data["axes"] == {"M": 1, "L": 1, "T": -2}
        assert data["names"]["T"] == "time"
        assert data["si_unit"] == "kg*m/s2"
        assert data["quantity_type"] == "force"

    def test_invalid_code(self):
        r = client.post("/api/dimensions/normalize", json={"code": "Q2"})
        assert r.status_code == 422

    def test_empty_code(self):
        r = client.post("/api/dimensions/normalize", json={"code": "  "})
        assert r.status_code == 422
