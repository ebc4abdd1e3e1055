"""Tests for converting job configuration into application DTOs."""

from __future__ import annotations

from typing import Any

from cutstock.application.config import (
    config_to_bar_job,
    config_to_panel_job,
    load_config_from_dict,
)
from cutstock.domain import Bar, Part, Sheet


class TestConfigToBarJob:
    """Tests for config_to_bar_job."""

    def test_converts_parts_and_stock(self, bar_job_data: dict[str, Any]) -> None:
        config = load_config_from_dict(bar_job_data)
        job = config_to_bar_job(config.bars)

        assert job.parts[0] == Part(id=1, length=100, mark_no="A", qty=2)
        assert job.bars == [Bar(id=1, length=120, qty=10)]
        assert job.kerf == 0.125
        assert job.find_optimal is False

    def test_zero_quantity_becomes_one(self) -> None:
        config = load_config_from_dict(
            {"bars": {"parts": [{"id": 1, "length": 10, "qty": 0}]}}
        )
        assert config_to_bar_job(config.bars).parts[0].qty == 1

    def test_blank_strings_become_none(self) -> None:
        config = load_config_from_dict(
            {
                "bars": {
                    "parts": [{"id": 1, "length": 10, "part_no": "", "finish": "", "fab": ""}],
                    "stock": [{"id": 1, "length": 240, "qty": 1, "part_no": ""}],
                }
            }
        )
        job = config_to_bar_job(config.bars)

        assert job.parts[0].part_no is None
        assert job.parts[0].finish is None
        assert job.parts[0].fab is None
        assert job.bars[0].is_universal

    def test_search_range(self) -> None:
        config = load_config_from_dict(
            {
                "bars": {
                    "find_optimal": True,
                    "search": {"min_length": 96, "max_length": 288, "step_size": 24},
                }
            }
        )
        job = config_to_bar_job(config.bars)

        assert job.find_optimal is True
        assert (job.search.min_length, job.search.max_length, job.search.step_size) == (
            96,
            288,
            24,
        )


class TestConfigToPanelJob:
    """Tests for config_to_panel_job."""

    def test_converts_panels_and_sheets(self, panel_job_data: dict[str, Any]) -> None:
        config = load_config_from_dict(panel_job_data)
        job = config_to_panel_job(config.panels)

        assert len(job.panels) == 2
        assert job.panels[0].mark_no == "A"
        assert job.panels[0].qty == 4
        assert job.sheets == [Sheet(id=1, width=48, height=96, qty=5)]
        assert job.blade_width == 0.25
        assert job.allow_rotation is True

    def test_options(self) -> None:
        config = load_config_from_dict(
            {
                "panels": {
                    "allow_rotation": False,
                    "edge_trim": 0.5,
                    "find_optimal": True,
                    "search": {"min_width": 24, "max_width": 60},
                }
            }
        )
        job = config_to_panel_job(config.panels)

        assert job.allow_rotation is False
        assert job.edge_trim == 0.5
        assert job.search.min_width == 24
        assert job.search.max_width == 60
        assert job.search.min_height == 48
