"""Integration tests for the bars and panels CLI commands.

These tests drive the typer application end to end:
- Text and JSON output
- Command line overrides of job settings
- Exit codes for bad input and partially placed demand
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from cutstock.cli.main import app

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "jobs"

pytestmark = pytest.mark.integration


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestBarsCommand:
    """Tests for `cutstock bars`."""

    def test_text_cut_list(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["bars", "--config", str(FIXTURES_PATH / "bars_manual.json")])

        assert result.exit_code == 0
        assert "BAR CUT LIST" in result.output
        assert "Bar 1 #3" in result.output
        assert "Parts placed:   3 of 3" in result.output

    def test_json_output_to_file(self, runner: CliRunner, tmp_path: Path) -> None:
        out = tmp_path / "cuts.json"
        result = runner.invoke(
            app,
            [
                "bars",
                "--config", str(FIXTURES_PATH / "bars_manual.json"),
                "--format", "json",
                "--output", str(out),
            ],
        )

        assert result.exit_code == 0
        assert f"Wrote {out}" in result.output
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["summary"]["totalBars"] == 3
        assert data["summary"]["totalPartsPlaced"] == 3
        assert "optimalBars" not in data

    def test_auto_mode(self, runner: CliRunner, tmp_path: Path) -> None:
        out = tmp_path / "cuts.json"
        result = runner.invoke(
            app,
            [
                "bars",
                "-c", str(FIXTURES_PATH / "bars_auto.json"),
                "-f", "json",
                "-o", str(out),
            ],
        )

        assert result.exit_code == 0
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["optimalBars"] == [
            {"partNo": "P1", "length": 312},
            {"partNo": "P2", "length": 120},
        ]
        assert data["summary"]["totalBars"] == 2

    def test_auto_flag_overrides_job(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["bars", "--config", str(FIXTURES_PATH / "no_stock.json"), "--auto"]
        )

        assert result.exit_code == 0
        assert "Optimal stock lengths:" in result.output

    def test_kerf_override(self, runner: CliRunner, tmp_path: Path) -> None:
        out = tmp_path / "cuts.json"
        result = runner.invoke(
            app,
            [
                "bars",
                "--config", str(FIXTURES_PATH / "bars_manual.json"),
                "--kerf", "0",
                "--format", "json",
                "--output", str(out),
            ],
        )

        assert result.exit_code == 0
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["summary"]["totalBars"] == 3

    def test_partial_placement_exits_2(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["bars", "--config", str(FIXTURES_PATH / "bars_short_stock.json")]
        )

        assert result.exit_code == 2
        assert "UNPLACED PARTS:" in result.output
        assert "2 of 3 parts could not be placed" in result.output

    def test_missing_stock_exits_1(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["bars", "--config", str(FIXTURES_PATH / "no_stock.json")]
        )

        assert result.exit_code == 1
        assert "Bar stock is required" in result.output

    def test_missing_file_exits_1(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["bars", "--config", str(FIXTURES_PATH / "nonexistent.json")]
        )

        assert result.exit_code == 1
        assert "not found" in result.output

    def test_job_without_bars_section(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["bars", "--config", str(FIXTURES_PATH / "panels_manual.json")]
        )

        assert result.exit_code == 1
        assert "no 'bars' section" in result.output

    def test_unknown_format(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            ["bars", "--config", str(FIXTURES_PATH / "bars_manual.json"), "--format", "xml"],
        )

        assert result.exit_code == 1
        assert "Unknown format" in result.output

    def test_verbose_flag(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            ["--verbose", "bars", "--config", str(FIXTURES_PATH / "bars_manual.json")],
        )
        assert result.exit_code == 0


class TestPanelsCommand:
    """Tests for `cutstock panels`."""

    def test_text_layout(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["panels", "--config", str(FIXTURES_PATH / "panels_manual.json")]
        )

        assert result.exit_code == 0
        assert "SHEET LAYOUT" in result.output
        assert "TOP" in result.output
        assert "Panels placed:  3 of 3" in result.output
        assert "used 2 of 5 (max 5)" in result.output

    def test_no_rotation_exits_2(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            ["panels", "--config", str(FIXTURES_PATH / "panels_manual.json"), "--no-rotation"],
        )

        assert result.exit_code == 2
        assert "UNPLACED PANELS:" in result.output

    def test_blade_width_override(self, runner: CliRunner, tmp_path: Path) -> None:
        out = tmp_path / "layout.json"
        result = runner.invoke(
            app,
            [
                "panels",
                "--config", str(FIXTURES_PATH / "panels_manual.json"),
                "--blade-width", "0.5",
                "--format", "json",
                "--output", str(out),
            ],
        )

        assert result.exit_code == 0
        data = json.loads(out.read_text(encoding="utf-8"))
        sides = sorted(
            (p for p in data["placements"] if p["mark"] == "SIDE"),
            key=lambda p: p["y"],
        )
        assert sides[1]["y"] - (sides[0]["y"] + sides[0]["height"]) == pytest.approx(0.5)

    def test_auto_mode_reports_sheet_size(self, runner: CliRunner, tmp_path: Path) -> None:
        out = tmp_path / "layout.json"
        result = runner.invoke(
            app,
            [
                "panels",
                "--config", str(FIXTURES_PATH / "full_job.json"),
                "--format", "json",
                "--output", str(out),
            ],
        )

        assert result.exit_code == 0
        data = json.loads(out.read_text(encoding="utf-8"))
        assert set(data["optimalSheet"]) == {"width", "height"}
        assert data["summary"]["totalPanelsPlaced"] == 4

    def test_job_without_panels_section(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["panels", "--config", str(FIXTURES_PATH / "bars_manual.json")]
        )

        assert result.exit_code == 1
        assert "no 'panels' section" in result.output
