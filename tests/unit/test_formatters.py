"""Tests for cut list, sheet layout and JSON output."""

from __future__ import annotations

import json
from dataclasses import replace

import pytest

from cutstock.domain import (
    Bar,
    BarOptimizationResult,
    OptimalBar,
    Panel,
    PanelOptimizationResult,
    Part,
    Sheet,
    SheetSize,
)
from cutstock.infrastructure import (
    BarCutListFormatter,
    JsonExporter,
    SheetLayoutFormatter,
    optimize_bars,
    optimize_panels,
)
from cutstock.web.schemas import BarSummarySchema


@pytest.fixture
def bar_result() -> BarOptimizationResult:
    parts = [
        Part(id=1, length=100, mark_no="A1", part_no="P1", qty=2),
        Part(id=2, length=50, mark_no="B1", part_no="P1"),
    ]
    return optimize_bars(parts, [Bar(id=1, length=120, qty=10, description="Mill")])


@pytest.fixture
def panel_result() -> PanelOptimizationResult:
    panels = [Panel(id=1, width=24, height=48, mark_no="SIDE", qty=2)]
    return optimize_panels(panels, [Sheet(id=1, width=48, height=96, qty=5)])


class TestBarCutListFormatter:
    """Tests for the text cut list."""

    def test_empty_result(self) -> None:
        assert BarCutListFormatter().format(BarOptimizationResult.empty()) == "No bars used."

    def test_lists_every_bar_and_cut(self, bar_result: BarOptimizationResult) -> None:
        output = BarCutListFormatter().format(bar_result)

        assert "BAR CUT LIST" in output
        assert "Bar 1 #1" in output
        assert "Bar 1 #3" in output
        assert "A1" in output
        assert "B1" in output
        assert "Mill" in output
        assert "Parts placed:   3 of 3" in output
        assert "UNPLACED" not in output

    def test_optimal_lengths_section(self, bar_result: BarOptimizationResult) -> None:
        output = BarCutListFormatter().format(
            bar_result, [OptimalBar("P1", 312), OptimalBar("", 120)]
        )
        assert "Optimal stock lengths:" in output
        assert "(no part number)" in output

    def test_unplaced_parts_listed(self) -> None:
        result = optimize_bars(
            [Part(id=1, length=500, mark_no="LONG")], [Bar(id=1, length=240, qty=1)]
        )
        output = BarCutListFormatter().format(result)

        assert "UNPLACED PARTS:" in output
        assert "LONG" in output
        assert "Parts placed:   0 of 1" in output


class TestSheetLayoutFormatter:
    """Tests for the text sheet layout."""

    def test_empty_result(self) -> None:
        assert SheetLayoutFormatter().format(PanelOptimizationResult.empty()) == "No sheets used."

    def test_lists_placements(self, panel_result: PanelOptimizationResult) -> None:
        output = SheetLayoutFormatter().format(panel_result)

        assert "SHEET LAYOUT" in output
        assert "Sheet 1 #1" in output
        assert "SIDE" in output
        assert "Panels placed:  2 of 2" in output

    def test_optimal_sheet_shown(self, panel_result: PanelOptimizationResult) -> None:
        result = replace(panel_result, optimal_sheet=SheetSize(48, 96))
        assert "Optimal sheet size:" in SheetLayoutFormatter().format(result)

    def test_stock_usage_shown(self, panel_result: PanelOptimizationResult) -> None:
        stock = [Sheet(id=1, width=48, height=96, qty=5, max_qty=20)]
        output = SheetLayoutFormatter().format(panel_result, stock)

        assert "SHEET STOCK:" in output
        assert "used 1 of 5 (max 20)" in output


class TestJsonExporter:
    """Tests for JSON export."""

    def test_bar_export_uses_camel_case(self, bar_result: BarOptimizationResult) -> None:
        data = json.loads(JsonExporter().export_bars(bar_result))

        assert set(data) == {"cuts", "bars", "summary", "unplaced"}
        assert data["summary"]["totalBars"] == 3
        assert data["summary"]["totalPartsPlaced"] == 3
        assert data["summary"]["totalPartsNeeded"] == 3
        assert "yieldPercentage" in data["summary"]
        assert data["bars"][0]["barId"] == 1
        assert data["bars"][0]["usedLength"] == pytest.approx(100.0)
        assert data["bars"][0]["cuts"][0]["markNo"] == "A1"
        assert data["cuts"][0]["partId"] == 1

    def test_optimal_bars_included_when_given(
        self, bar_result: BarOptimizationResult
    ) -> None:
        data = JsonExporter().bars_to_dict(bar_result, [OptimalBar("P1", 312)])
        assert data["optimalBars"] == [{"partNo": "P1", "length": 312}]

    def test_panel_export(self, panel_result: PanelOptimizationResult) -> None:
        data = json.loads(JsonExporter().export_panels(panel_result))

        assert len(data["placements"]) == 2
        assert data["placements"][0]["sheetNo"] == 1
        assert data["sheets"][0]["usedArea"] == pytest.approx(2304.0)
        assert data["summary"]["totalPanelsPlaced"] == 2
        assert "optimalSheet" not in data

    def test_panel_export_with_optimal_sheet(
        self, panel_result: PanelOptimizationResult
    ) -> None:
        result = replace(panel_result, optimal_sheet=SheetSize(48, 96))
        data = JsonExporter().panels_to_dict(result)
        assert data["optimalSheet"] == {"width": 48, "height": 96}

    def test_panel_export_with_stock(self, panel_result: PanelOptimizationResult) -> None:
        stock = [
            Sheet(id=1, width=48, height=96, qty=5),
            Sheet(id=2, width=60, height=120, qty=2, max_qty=4),
        ]
        data = JsonExporter().panels_to_dict(panel_result, stock)

        assert data["stock"] == [
            {"sheetId": 1, "width": 48, "height": 96, "qty": 5, "maxQty": 5, "used": 1},
            {"sheetId": 2, "width": 60, "height": 120, "qty": 2, "maxQty": 4, "used": 0},
        ]

    def test_keys_match_api_schema(self, bar_result: BarOptimizationResult) -> None:
        data = JsonExporter().bars_to_dict(bar_result)
        schema = BarSummarySchema.model_validate(bar_result.summary)
        assert set(data["summary"]) == set(schema.model_dump(by_alias=True))
