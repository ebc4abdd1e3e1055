"""Tests for job configuration advisory checks."""

from __future__ import annotations

from typing import Any

from cutstock.application.config import (
    ValidationResult,
    load_config_from_dict,
    validate_config,
)


def _validate(data: dict[str, Any]) -> ValidationResult:
    return validate_config(load_config_from_dict(data))


class TestValidationResult:
    """Tests for ValidationResult."""

    def test_exit_codes(self) -> None:
        assert ValidationResult().exit_code == 0
        assert ValidationResult().add_warning("a", "w").exit_code == 2
        assert ValidationResult().add_warning("a", "w").add_error("b", "e").exit_code == 1

    def test_merge(self) -> None:
        result = ValidationResult().add_error("a", "e")
        result.merge(ValidationResult().add_warning("b", "w"))
        assert not result.is_valid
        assert result.has_warnings


class TestBarJobChecks:
    """Tests for bar cutting section checks."""

    def test_clean_job(self, bar_job_data: dict[str, Any]) -> None:
        result = _validate(bar_job_data)
        assert result.is_valid
        assert not result.has_warnings

    def test_manual_mode_without_stock_is_an_error(self) -> None:
        result = _validate({"bars": {"parts": [{"id": 1, "length": 100}]}})
        assert not result.is_valid
        assert result.errors[0].path == "bars.stock"

    def test_auto_mode_without_stock_is_fine(self) -> None:
        result = _validate(
            {"bars": {"find_optimal": True, "parts": [{"id": 1, "length": 100}]}}
        )
        assert result.is_valid

    def test_part_longer_than_available_stock(self, bar_job_data: dict[str, Any]) -> None:
        bar_job_data["bars"]["parts"].append({"id": 3, "length": 200})
        result = _validate(bar_job_data)

        assert result.is_valid
        assert any(w.path == "bars.parts[2]" for w in result.warnings)

    def test_reserved_stock_does_not_count_for_other_parts(self) -> None:
        result = _validate(
            {
                "bars": {
                    "parts": [{"id": 1, "length": 100, "part_no": "P2"}],
                    "stock": [{"id": 1, "length": 240, "qty": 5, "part_no": "P1"}],
                }
            }
        )
        paths = [w.path for w in result.warnings]
        assert "bars.parts[0]" in paths
        assert "bars.stock[0]" in paths

    def test_part_longer_than_search_maximum(self) -> None:
        result = _validate(
            {"bars": {"find_optimal": True, "parts": [{"id": 1, "length": 500}]}}
        )
        assert any("search maximum" in w.message for w in result.warnings)

    def test_large_kerf_warning(self, bar_job_data: dict[str, Any]) -> None:
        bar_job_data["bars"]["kerf"] = 2
        result = _validate(bar_job_data)
        assert any(w.path == "bars.kerf" for w in result.warnings)

    def test_duplicate_part_ids(self, bar_job_data: dict[str, Any]) -> None:
        bar_job_data["bars"]["parts"][1]["id"] = 1
        result = _validate(bar_job_data)
        assert any("used 2 times" in w.message for w in result.warnings)

    def test_no_parts_warning(self) -> None:
        result = _validate({"bars": {"stock": [{"id": 1, "length": 240, "qty": 1}]}})
        assert result.is_valid
        assert result.warnings[0].path == "bars.parts"


class TestPanelJobChecks:
    """Tests for panel nesting section checks."""

    def test_clean_job(self, panel_job_data: dict[str, Any]) -> None:
        result = _validate(panel_job_data)
        assert result.is_valid
        assert not result.has_warnings

    def test_manual_mode_without_sheets_is_an_error(self) -> None:
        result = _validate({"panels": {"panels": [{"id": 1, "width": 10, "height": 10}]}})
        assert result.errors[0].path == "panels.sheets"

    def test_panel_fitting_only_when_rotated(self, panel_job_data: dict[str, Any]) -> None:
        panel_job_data["panels"]["panels"].append({"id": 3, "width": 90, "height": 40})
        assert not _validate(panel_job_data).has_warnings

        panel_job_data["panels"]["allow_rotation"] = False
        result = _validate(panel_job_data)
        assert any(w.path == "panels.panels[2]" for w in result.warnings)

    def test_edge_trim_consuming_sheet(self, panel_job_data: dict[str, Any]) -> None:
        panel_job_data["panels"]["edge_trim"] = 30
        result = _validate(panel_job_data)
        assert any(e.path == "panels.sheets[0]" for e in result.errors)

    def test_panel_larger_than_search_maximum(self) -> None:
        result = _validate(
            {
                "panels": {
                    "find_optimal": True,
                    "panels": [{"id": 1, "width": 100, "height": 100}],
                }
            }
        )
        assert result.is_valid
        assert "does not fit" in result.warnings[0].message

    def test_both_sections_checked(
        self, bar_job_data: dict[str, Any], panel_job_data: dict[str, Any]
    ) -> None:
        data = {**bar_job_data, "panels": panel_job_data["panels"]}
        data["bars"]["kerf"] = 2
        data["panels"]["blade_width"] = 2
        paths = {w.path for w in _validate(data).warnings}
        assert {"bars.kerf", "panels.blade_width"} <= paths
