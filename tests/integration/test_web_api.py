"""Integration tests for the REST API."""

from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

from cutstock import __version__
from cutstock.web.app import create_app

pytestmark = pytest.mark.integration


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


def test_health(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "version": __version__}


class TestOptimizeBars:
    """Tests for POST /api/v1/optimize/bars."""

    def test_manual_cut_list(
        self, client: TestClient, bar_job_data: dict[str, Any]
    ) -> None:
        response = client.post("/api/v1/optimize/bars", json=bar_job_data["bars"])

        assert response.status_code == 200
        data = response.json()
        assert data["summary"]["totalBars"] == 3
        assert data["summary"]["totalPartsPlaced"] == 3
        assert data["optimalBars"] is None
        assert data["unplaced"] == []
        assert data["cuts"][0]["barId"] == 1
        assert data["bars"][0]["cuts"][0]["markNo"] == "A"

    def test_auto_mode_returns_optimal_bars(self, client: TestClient) -> None:
        body = {
            "find_optimal": True,
            "parts": [
                {"id": 1, "length": 100, "part_no": "P1", "qty": 3},
                {"id": 2, "length": 50, "part_no": "P2"},
            ],
        }
        response = client.post("/api/v1/optimize/bars", json=body)

        assert response.status_code == 200
        assert response.json()["optimalBars"] == [
            {"partNo": "P1", "length": 312},
            {"partNo": "P2", "length": 120},
        ]

    def test_unplaced_parts_still_succeed(self, client: TestClient) -> None:
        body = {
            "parts": [{"id": 1, "length": 100, "qty": 3}],
            "stock": [{"id": 1, "length": 120, "qty": 1}],
        }
        response = client.post("/api/v1/optimize/bars", json=body)

        assert response.status_code == 200
        data = response.json()
        assert len(data["unplaced"]) == 2
        assert data["warnings"] == ["2 of 3 parts could not be placed"]

    def test_missing_stock_is_rejected(self, client: TestClient) -> None:
        body = {"parts": [{"id": 1, "length": 100}]}
        response = client.post("/api/v1/optimize/bars", json=body)

        assert response.status_code == 422
        data = response.json()
        assert data["error_type"] == "optimization"
        assert "Bar stock is required" in data["details"][0]["message"]

    def test_schema_error(self, client: TestClient) -> None:
        body = {"parts": [{"id": 1, "length": -10}]}
        response = client.post("/api/v1/optimize/bars", json=body)
        assert response.status_code == 422


class TestOptimizePanels:
    """Tests for POST /api/v1/optimize/panels."""

    def test_manual_layout(
        self, client: TestClient, panel_job_data: dict[str, Any]
    ) -> None:
        response = client.post("/api/v1/optimize/panels", json=panel_job_data["panels"])

        assert response.status_code == 200
        data = response.json()
        assert data["summary"]["totalPanelsPlaced"] == 6
        assert data["optimalSheet"] is None
        assert {p["sheetId"] for p in data["placements"]} == {1}
        assert data["stock"] == [
            {"sheetId": 1, "width": 48, "height": 96, "qty": 5, "maxQty": 5, "used": 2}
        ]

    def test_auto_mode_returns_sheet_size(self, client: TestClient) -> None:
        body = {
            "blade_width": 0,
            "find_optimal": True,
            "panels": [{"id": 1, "width": 24, "height": 48, "qty": 4}],
        }
        response = client.post("/api/v1/optimize/panels", json=body)

        assert response.status_code == 200
        data = response.json()
        assert data["optimalSheet"] == {"width": 48, "height": 96}
        assert data["summary"]["totalSheets"] == 1

    def test_missing_sheets_is_rejected(self, client: TestClient) -> None:
        body = {"panels": [{"id": 1, "width": 10, "height": 10}]}
        response = client.post("/api/v1/optimize/panels", json=body)

        assert response.status_code == 422
        assert response.json()["error_type"] == "optimization"


class TestValidateEndpoint:
    """Tests for POST /api/v1/validate."""

    def test_valid_job(self, client: TestClient, bar_job_data: dict[str, Any]) -> None:
        response = client.post("/api/v1/validate", json={"config": bar_job_data})

        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is True
        assert data["errors"] == []
        assert data["warnings"] == []

    def test_warnings(self, client: TestClient, bar_job_data: dict[str, Any]) -> None:
        bar_job_data["bars"]["kerf"] = 2
        response = client.post("/api/v1/validate", json={"config": bar_job_data})

        data = response.json()
        assert data["is_valid"] is True
        assert data["warnings"][0]["path"] == "bars.kerf"
        assert data["warnings"][0]["suggestion"]

    def test_schema_error(self, client: TestClient) -> None:
        config = {"bars": {"parts": [{"id": 1, "length": -10}]}}
        response = client.post("/api/v1/validate", json={"config": config})

        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is False
        assert data["errors"][0]["path"] == "bars.parts[0].length"

    def test_job_error(self, client: TestClient) -> None:
        config = {"bars": {"parts": [{"id": 1, "length": 100}]}}
        response = client.post("/api/v1/validate", json={"config": config})

        data = response.json()
        assert data["is_valid"] is False
        assert data["errors"][0]["path"] == "bars.stock"
