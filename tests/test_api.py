"""Tests for the FastAPI surface."""

import pytest
from fastapi.testclient import TestClient

from subsidy_engine.engine.calculations import calculate
from subsidy_engine.engine.validation import validate
from subsidy_engine.main import app
from subsidy_engine.programs.models_farm import FarmInput


@pytest.fixture
def client():
    return TestClient(app)


FARM = {
    "total_area": 10,
    "is_young_farmer": True,
    "cattle_count": 25,
    "honey_plants_area": 200,
    "extensive_grassland_area": 150,
}


class TestRoot:
    def test_status(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"


class TestSchedules:
    def test_list(self, client):
        body = client.get("/schedules").json()
        assert 2025 in body["program_years"]
        assert body["default_year"] == 2025

    def test_get_schedule(self, client):
        resp = client.get("/schedules/2025")
        assert resp.status_code == 200
        body = resp.json()
        assert body["direct_payments"]["basic_income_support"] == 114.42
        assert body["animal_payments"]["cattle"] == {"rate": 75.73, "limit": 20.0}
        assert body["currency_rates"]["PLN"] == 4.45

    def test_unknown_year(self, client):
        assert client.get("/schedules/1999").status_code == 404

    def test_deadlines(self, client):
        body = client.get("/schedules/2025/deadlines").json()
        assert body["application_start"] == "2025-03-15"
        assert body["payment_end"] == "2026-06-30"

    def test_currencies(self, client):
        body = client.get("/currencies", params={"year": 2025}).json()
        assert body == {"program_year": 2025, "base_currency": "EUR", "currencies": ["PLN", "EUR", "UAH"]}


class TestSubsidies:
    def test_calculate_matches_engine(self, client, schedule_2025):
        resp = client.post("/subsidies/calculate", params={"currency": "pln"}, json=FARM)
        assert resp.status_code == 200

        expected = calculate(FarmInput(**FARM), schedule_2025, "PLN")
        body = resp.json()
        assert body["currency"] == "PLN"
        assert body["grand_total"] == pytest.approx(expected.grand_total)
        assert body["grand_total_converted"] == pytest.approx(expected.grand_total_converted)
        assert body["animal_payments"]["cattle"] == pytest.approx(1514.6)

    def test_calculate_defaults_to_base_currency(self, client):
        body = client.post("/subsidies/calculate", json={"total_area": 10}).json()
        assert body["currency"] == "EUR"
        assert body["grand_total"] == pytest.approx(1672.2)
        assert body["grand_total_converted"] == body["grand_total"]

    def test_calculate_unknown_currency(self, client):
        resp = client.post("/subsidies/calculate", params={"currency": "USD"}, json=FARM)
        assert resp.status_code == 400
        assert "USD" in resp.json()["detail"]

    def test_calculate_unknown_year(self, client):
        resp = client.post("/subsidies/calculate", params={"year": 1999}, json=FARM)
        assert resp.status_code == 404

    def test_unknown_farm_field(self, client):
        resp = client.post("/subsidies/calculate", json={"total_area": 1, "llama_count": 3})
        assert resp.status_code == 422

    def test_validate_is_advisory(self, client, schedule_2025):
        resp = client.post("/subsidies/validate", json={**FARM, "total_area": -4})
        assert resp.status_code == 200
        assert resp.json()["issues"] == validate(FarmInput(**{**FARM, "total_area": -4}), schedule_2025)

    def test_quote(self, client):
        resp = client.post("/subsidies/quote", params={"currency": "UAH"}, json=FARM)
        assert resp.status_code == 200

        body = resp.json()
        assert body["program_year"] == 2025
        assert body["currency"] == "UAH"
        assert body["issues"] == ["Ecoschemes total area exceeds limit (300 ha)"]
        result = body["result"]
        assert result["grand_total_converted"] == pytest.approx(result["grand_total"] * 45.20)
        assert result["ecoschemes"]["honey_plants"] == pytest.approx(200 * 269.21)


class TestCurrencyConvert:
    def test_convert(self, client):
        body = client.get("/currency/convert", params={"amount": 100, "currency": "PLN"}).json()
        assert body["converted"] == 445
        assert body["base_currency"] == "EUR"

    def test_identity_for_base(self, client):
        body = client.get("/currency/convert", params={"amount": 1672.2, "currency": "EUR"}).json()
        assert body["converted"] == 1672.2

    def test_unknown_currency(self, client):
        resp = client.get("/currency/convert", params={"amount": 1, "currency": "XYZ"})
        assert resp.status_code == 400
