"""Conversion from job configuration models to application DTOs."""

from cutstock.application.config.schema import BarJobConfig, PanelJobConfig
from cutstock.application.dtos import (
    BarJobInput,
    BarSearchInput,
    PanelJobInput,
    SheetSearchInput,
)
from cutstock.domain import Bar, Panel, Part, Sheet


def config_to_bar_job(config: BarJobConfig) -> BarJobInput:
    """Convert a bar cutting section into a BarJobInput.

    A part quantity of 0 becomes 1. Empty part numbers and finishes become
    ``None`` so they group with parts that omit them.
    """
    parts = [
        Part(
            id=p.id,
            length=p.length,
            mark_no=p.mark_no,
            part_no=p.part_no or None,
            finish=p.finish or None,
            fab=p.fab or None,
            qty=p.qty or 1,
        )
        for p in config.parts
    ]
    bars = [
        Bar(
            id=b.id,
            length=b.length,
            qty=b.qty,
            part_no=b.part_no or None,
            description=b.description,
        )
        for b in config.stock
    ]
    return BarJobInput(
        parts=parts,
        bars=bars,
        kerf=config.kerf,
        find_optimal=config.find_optimal,
        search=BarSearchInput(
            min_length=config.search.min_length,
            max_length=config.search.max_length,
            step_size=config.search.step_size,
        ),
    )


def config_to_panel_job(config: PanelJobConfig) -> PanelJobInput:
    """Convert a panel nesting section into a PanelJobInput."""
    panels = [
        Panel(
            id=p.id,
            width=p.width,
            height=p.height,
            mark_no=p.mark_no,
            part_no=p.part_no or None,
            finish=p.finish or None,
            qty=p.qty or 1,
        )
        for p in config.panels
    ]
    sheets = [
        Sheet(id=s.id, width=s.width, height=s.height, qty=s.qty, max_qty=s.max_qty)
        for s in config.sheets
    ]
    search = config.search
    return PanelJobInput(
        panels=panels,
        sheets=sheets,
        blade_width=config.blade_width,
        allow_rotation=config.allow_rotation,
        edge_trim=config.edge_trim,
        find_optimal=config.find_optimal,
        search=SheetSearchInput(
            min_width=search.min_width,
            max_width=search.max_width,
            min_height=search.min_height,
            max_height=search.max_height,
            step_size=search.step_size,
        ),
    )
