"""Application commands (use cases) for bar cutting and panel nesting."""

from __future__ import annotations

import logging
from dataclasses import replace

from cutstock.domain import (
    OPTIMIZATION_STOCK_QTY,
    BarOptimizationResult,
    PanelOptimizationResult,
    Sheet,
)
from cutstock.infrastructure import (
    LinearBinPacker,
    PanelPackingConfig,
    ShelfPanelPacker,
    create_bars_from_optimal_results,
    find_best_sheet_size,
    find_optimal_bars_by_part_no,
)

from .dtos import BarJobInput, BarJobOutput, PanelJobInput, PanelJobOutput

logger = logging.getLogger(__name__)


class OptimizeBarsCommand:
    """Command to produce a bar cut list.

    In manual mode the caller's bars are packed directly. In auto mode the
    best bar length is searched for every part number and the results are
    merged into the caller's bars before packing.
    """

    def execute(self, job: BarJobInput) -> BarJobOutput:
        """Execute the bar cutting command.

        Args:
            job: Parts, stock and options.

        Returns:
            BarJobOutput with the result, the stock used for packing and any
            errors or warnings. Errors leave the result empty.
        """
        errors = job.validate()
        if errors:
            return BarJobOutput(result=BarOptimizationResult.empty(), errors=errors)

        stock = list(job.bars)
        optimal_bars = []
        if job.find_optimal:
            optimal_bars = find_optimal_bars_by_part_no(
                job.parts,
                min_length=job.search.min_length,
                max_length=job.search.max_length,
                step_size=job.search.step_size,
                kerf=job.kerf,
            )
            stock = create_bars_from_optimal_results(optimal_bars, job.bars)
            logger.info(
                "Found %d optimal bar lengths: %s",
                len(optimal_bars),
                ", ".join(f"{o.part_no or '*'}={o.length:g}" for o in optimal_bars),
            )

        result = LinearBinPacker(job.kerf).pack(job.parts, stock)

        warnings: list[str] = []
        summary = result.summary
        if not summary.is_complete:
            warnings.append(
                f"{summary.total_parts_needed - summary.total_parts_placed} of "
                f"{summary.total_parts_needed} parts could not be placed"
            )

        return BarJobOutput(
            result=result,
            stock=stock,
            optimal_bars=optimal_bars,
            warnings=warnings,
        )


class OptimizePanelsCommand:
    """Command to produce a panel nesting layout.

    In auto mode the best sheet size is searched and panels are nested onto
    an unlimited supply of that sheet, which is recorded on the result.
    """

    def execute(self, job: PanelJobInput) -> PanelJobOutput:
        errors = job.validate()
        if errors:
            return PanelJobOutput(result=PanelOptimizationResult.empty(), errors=errors)

        config = PanelPackingConfig(
            blade_width=job.blade_width,
            allow_rotation=job.allow_rotation,
            edge_trim=job.edge_trim,
        )

        stock = list(job.sheets)
        optimal_sheet = None
        if job.find_optimal:
            optimal_sheet = find_best_sheet_size(
                job.panels,
                min_width=job.search.min_width,
                max_width=job.search.max_width,
                min_height=job.search.min_height,
                max_height=job.search.max_height,
                step_size=job.search.step_size,
                blade_width=job.blade_width,
                allow_rotation=job.allow_rotation,
                edge_trim=job.edge_trim,
            )
            stock = [
                Sheet(
                    id=1,
                    width=optimal_sheet.width,
                    height=optimal_sheet.height,
                    qty=OPTIMIZATION_STOCK_QTY,
                    max_qty=OPTIMIZATION_STOCK_QTY,
                )
            ]
            logger.info(
                "Found optimal sheet size %gx%g",
                optimal_sheet.width,
                optimal_sheet.height,
            )

        result = ShelfPanelPacker(config).pack(job.panels, stock)
        if optimal_sheet is not None:
            result = replace(result, optimal_sheet=optimal_sheet)

        warnings: list[str] = []
        summary = result.summary
        if not summary.is_complete:
            warnings.append(
                f"{summary.total_panels_needed - summary.total_panels_placed} of "
                f"{summary.total_panels_needed} panels could not be placed"
            )

        return PanelJobOutput(result=result, stock=stock, warnings=warnings)
