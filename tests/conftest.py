"""Pytest configuration and shared fixtures for cutstock tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from cutstock.domain import Bar, Panel, Part, Sheet


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: tests that drive the CLI or HTTP API end to end"
    )


# =============================================================================
# Shared demand and stock fixtures
# =============================================================================


@pytest.fixture
def universal_bar() -> Bar:
    """A 20' universal bar with plenty of stock."""
    return Bar(id=1, length=240.0, qty=50)


@pytest.fixture
def mixed_parts() -> list[Part]:
    """Parts spread over two part numbers and two finishes."""
    return [
        Part(id=1, length=96.0, mark_no="M1", part_no="P100", finish="MF", qty=3),
        Part(id=2, length=48.0, mark_no="M2", part_no="P100", finish="MF", qty=2),
        Part(id=3, length=72.0, mark_no="M3", part_no="P200", finish="MF", qty=2),
        Part(id=4, length=60.0, mark_no="M4", part_no="P100", finish="BK", qty=1),
    ]


@pytest.fixture
def plywood_sheet() -> Sheet:
    """A 4'x8' sheet with plenty of stock."""
    return Sheet(id=1, width=48.0, height=96.0, qty=20)


@pytest.fixture
def cabinet_panels() -> list[Panel]:
    """A typical set of carcass panels."""
    return [
        Panel(id=1, width=24.0, height=30.0, mark_no="SIDE", qty=4),
        Panel(id=2, width=22.5, height=23.25, mark_no="BOTTOM", qty=2),
        Panel(id=3, width=22.5, height=11.0, mark_no="SHELF", qty=4),
        Panel(id=4, width=4.0, height=22.5, mark_no="STRETCHER", qty=4),
    ]


# =============================================================================
# Job file fixtures
# =============================================================================


@pytest.fixture
def bar_job_data() -> dict[str, Any]:
    """A manual-mode bar cutting job."""
    return {
        "schema_version": "1.0",
        "bars": {
            "kerf": 0.125,
            "parts": [
                {"id": 1, "length": 100, "mark_no": "A", "qty": 2},
                {"id": 2, "length": 50, "mark_no": "B"},
            ],
            "stock": [{"id": 1, "length": 120, "qty": 10}],
        },
    }


@pytest.fixture
def panel_job_data() -> dict[str, Any]:
    """A manual-mode panel nesting job."""
    return {
        "schema_version": "1.0",
        "panels": {
            "blade_width": 0.25,
            "panels": [
                {"id": 1, "width": 24, "height": 48, "mark_no": "A", "qty": 4},
                {"id": 2, "width": 12, "height": 12, "mark_no": "B", "qty": 2},
            ],
            "sheets": [{"id": 1, "width": 48, "height": 96, "qty": 5}],
        },
    }


@pytest.fixture
def write_job(tmp_path: Path) -> Callable[[dict[str, Any]], Path]:
    """Write job data to a JSON file and return its path."""

    def _write(data: dict[str, Any], name: str = "job.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
