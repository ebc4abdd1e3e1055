"""Two-dimensional bin packing for panel nesting on sheet stock.

Panels are placed with a shelf algorithm: each sheet is divided into
horizontal bands (shelves) whose height is set by the first panel placed on
them, and panels are placed left to right along a shelf. Every cut therefore
runs edge to edge, which suits panel saws.

Sheet selection follows the bar packer: panels are sorted largest first
and grouped by part number and finish, and each new sheet is the smallest stock
that holds the largest panel still waiting. That sheet is then filled by
scanning the rest of the group's queue in order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Sequence

from cutstock.domain.results import (
    CutSheet,
    PanelOptimizationResult,
    PanelSummary,
    Placement,
    waste_percentage,
)
from cutstock.domain.value_objects import DEFAULT_BLADE_WIDTH, Panel, Sheet

from .stock_pool import StockPool, StockSlot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PanelPackingConfig:
    """Configuration for panel nesting.

    Attributes:
        blade_width: Material lost to each saw cut in inches (default 1/4").
        allow_rotation: Whether panels may be turned 90 degrees to fit.
        edge_trim: Unusable material at every sheet edge in inches.
    """

    blade_width: float = DEFAULT_BLADE_WIDTH
    allow_rotation: bool = True
    edge_trim: float = 0.0

    def __post_init__(self) -> None:
        if self.blade_width < 0:
            raise ValueError("Blade width must be non-negative")
        if self.edge_trim < 0:
            raise ValueError("Edge trim must be non-negative")


@dataclass
class _Shelf:
    """Internal shelf representation for the packing algorithm.

    Attributes:
        y: Bottom Y position of shelf (relative to the usable area).
        height: Height of shelf (set by first panel placed).
        remaining_width: Width remaining for more panels.
        right_edge: X position after the last panel on the shelf.
        count: Number of panels on the shelf.
    """

    y: float
    height: float
    remaining_width: float
    right_edge: float = 0.0
    count: int = 0


@dataclass
class _SheetState:
    """Internal state for a sheet instance while it is being filled.

    Attributes:
        sheet: Stock definition of the sheet.
        sheet_no: 1-based instance number.
        usable_width: Sheet width less edge trim on both sides.
        usable_height: Sheet height less edge trim on both sides.
        current_y: Y position for the next new shelf.
    """

    sheet: Sheet
    sheet_no: int
    usable_width: float
    usable_height: float
    current_y: float = 0.0
    shelves: list[_Shelf] = field(default_factory=list)
    placements: list[Placement] = field(default_factory=list)

    @property
    def available_height(self) -> float:
        """Remaining height for new shelves."""
        return self.usable_height - self.current_y


class ShelfPanelPacker:
    """Shelf-based guillotine packer for rectangular panels.

    Within one shelf adjacent panels are separated by one blade width, and
    consecutive shelves are separated by one blade width. No blade width is
    charged against the sheet edges; use ``edge_trim`` for that.

    Attributes:
        config: Packing configuration (blade width, rotation, edge trim).
    """

    def __init__(self, config: PanelPackingConfig | None = None) -> None:
        self.config = config or PanelPackingConfig()

    def pack(
        self,
        panels: Sequence[Panel],
        sheets: Sequence[Sheet],
    ) -> PanelOptimizationResult:
        """Pack panels onto sheets.

        Args:
            panels: Panels to cut (quantities are expanded to single panels).
            sheets: Available sheet stock.

        Returns:
            PanelOptimizationResult with placements, consumed sheets and summary.
        """
        panels_needed = sum(panel.qty for panel in panels)
        if panels_needed == 0:
            return PanelOptimizationResult.empty()

        pool: StockPool[Sheet] = StockPool(sheets, lambda sheet: sheet.qty)
        groups = self._group_panels(panels)

        logger.info(
            "Nesting %d panels in %d groups onto %d sheet types "
            "(blade %.4f, rotation %s)",
            panels_needed,
            len(groups),
            len(sheets),
            self.config.blade_width,
            "on" if self.config.allow_rotation else "off",
        )

        states: list[_SheetState] = []
        unplaced: list[Panel] = []

        for group_key, group_panels in groups.items():
            queue = list(group_panels)

            while queue:
                slot = self._select_sheet(pool, queue[0])
                if slot is None:
                    logger.warning(
                        "No sheet holds panel '%s' (%sx%s) in group %s; "
                        "%d panels left unplaced",
                        queue[0].mark_no,
                        queue[0].width,
                        queue[0].height,
                        group_key,
                        len(queue),
                    )
                    break

                state = self._open_sheet(slot)
                queue = self._fill_sheet(state, queue)
                states.append(state)

                logger.debug(
                    "Sheet %d #%d (%sx%s): %d panels on %d shelves",
                    state.sheet.id,
                    state.sheet_no,
                    state.sheet.width,
                    state.sheet.height,
                    len(state.placements),
                    len(state.shelves),
                )

            unplaced.extend(replace(panel, qty=1) for panel in queue)

        cut_sheets = [self._to_cut_sheet(state) for state in states]
        placements = tuple(p for state in states for p in state.placements)

        return PanelOptimizationResult(
            placements=placements,
            sheets=tuple(cut_sheets),
            summary=PanelSummary.from_sheets(
                cut_sheets, len(placements), panels_needed
            ),
            unplaced=tuple(unplaced),
        )

    def _group_panels(
        self,
        panels: Sequence[Panel],
    ) -> dict[tuple[str, str], list[Panel]]:
        """Expand quantities, sort largest first, then group by (part number, finish).

        Groups are ordered by their largest panel and keep the largest-first
        order inside.
        """
        units = [panel for panel in panels for _ in range(panel.qty)]
        groups: dict[tuple[str, str], list[Panel]] = {}
        for panel in self._sort_by_area(units):
            groups.setdefault(panel.group_key, []).append(panel)
        return groups

    def _sort_by_area(self, panels: list[Panel]) -> list[Panel]:
        """Sort panels by area (largest first) for first-fit decreasing.

        Secondary sort by longest side to improve shelf utilization. The
        sort is stable, so identical panels keep their input order.
        """
        return sorted(
            panels,
            key=lambda p: (p.area, p.longest_side),
            reverse=True,
        )

    def _usable(self, sheet: Sheet) -> tuple[float, float]:
        trim = 2 * self.config.edge_trim
        return sheet.width - trim, sheet.height - trim

    def _orientations(self, panel: Panel) -> list[tuple[float, float, bool]]:
        """Candidate (width, height, rotated) orientations, original first."""
        options = [(panel.width, panel.height, False)]
        if self.config.allow_rotation and panel.width != panel.height:
            options.append((panel.height, panel.width, True))
        return options

    def _fits_empty(self, panel: Panel, width: float, height: float) -> bool:
        return any(
            w <= width and h <= height for w, h, _ in self._orientations(panel)
        )

    def _select_sheet(
        self,
        pool: StockPool[Sheet],
        panel: Panel,
    ) -> StockSlot[Sheet] | None:
        """Pick the sheet for the largest waiting panel.

        Candidates hold the panel in some allowed orientation. The smallest
        sheet area wins, then the earliest stock definition.
        """
        best: StockSlot[Sheet] | None = None
        for slot in pool.available():
            usable_width, usable_height = self._usable(slot.stock)
            if usable_width <= 0 or usable_height <= 0:
                continue
            if not self._fits_empty(panel, usable_width, usable_height):
                continue
            if best is None or slot.stock.area < best.stock.area:
                best = slot
        return best

    def _open_sheet(self, slot: StockSlot[Sheet]) -> _SheetState:
        usable_width, usable_height = self._usable(slot.stock)
        return _SheetState(
            sheet=slot.stock,
            sheet_no=slot.take(),
            usable_width=usable_width,
            usable_height=usable_height,
        )

    def _fill_sheet(self, state: _SheetState, queue: list[Panel]) -> list[Panel]:
        """Place the head panel, then every later panel that still fits.

        Returns:
            Panels from ``queue`` that were not placed on this sheet.
        """
        left_over: list[Panel] = []
        for panel in queue:
            if not self._place(state, panel):
                left_over.append(panel)
        return left_over

    def _place(self, state: _SheetState, panel: Panel) -> bool:
        """Place a panel on the best existing shelf or a new shelf."""
        blade = self.config.blade_width

        # Existing shelf with the least height waste; earlier shelves and the
        # original orientation win ties.
        best: tuple[float, _Shelf, float, float, bool] | None = None
        for shelf in state.shelves:
            gap = blade if shelf.count else 0.0
            for width, height, rotated in self._orientations(panel):
                if height <= shelf.height and gap + width <= shelf.remaining_width:
                    height_waste = shelf.height - height
                    if best is None or height_waste < best[0]:
                        best = (height_waste, shelf, width, height, rotated)

        if best is not None:
            _, shelf, width, height, rotated = best
            self._place_on_shelf(state, panel, shelf, width, height, rotated)
            return True

        for width, height, rotated in self._orientations(panel):
            if height <= state.available_height and width <= state.usable_width:
                shelf = _Shelf(
                    y=state.current_y,
                    height=height,
                    remaining_width=state.usable_width,
                )
                state.shelves.append(shelf)
                state.current_y += height + blade
                self._place_on_shelf(state, panel, shelf, width, height, rotated)
                return True

        return False

    def _place_on_shelf(
        self,
        state: _SheetState,
        panel: Panel,
        shelf: _Shelf,
        width: float,
        height: float,
        rotated: bool,
    ) -> None:
        """Record the placement and update shelf state."""
        blade = self.config.blade_width
        x = shelf.right_edge + blade if shelf.count else 0.0
        trim = self.config.edge_trim

        state.placements.append(
            Placement(
                panel_id=panel.id,
                sheet_id=state.sheet.id,
                sheet_no=state.sheet_no,
                x=x + trim,
                y=shelf.y + trim,
                width=width,
                height=height,
                rotated=rotated,
                mark=panel.mark_no,
            )
        )
        shelf.remaining_width -= width + (blade if shelf.count else 0.0)
        shelf.right_edge = x + width
        shelf.count += 1

        if rotated:
            logger.debug(
                "Panel '%s' placed rotated at (%s, %s) as %sx%s",
                panel.mark_no,
                x + trim,
                shelf.y + trim,
                width,
                height,
            )

    def _to_cut_sheet(self, state: _SheetState) -> CutSheet:
        used_area = sum(p.area for p in state.placements)
        return CutSheet(
            sheet_id=state.sheet.id,
            sheet_no=state.sheet_no,
            width=state.sheet.width,
            height=state.sheet.height,
            used_area=used_area,
            waste_percentage=waste_percentage(state.sheet.area, used_area),
        )


def optimize_panels(
    panels: Sequence[Panel],
    sheets: Sequence[Sheet],
    blade_width: float = DEFAULT_BLADE_WIDTH,
    allow_rotation: bool = True,
    edge_trim: float = 0.0,
) -> PanelOptimizationResult:
    """Nest panels onto sheets with the shelf packer.

    Args:
        panels: Panels to cut.
        sheets: Available sheet stock.
        blade_width: Saw blade width in inches (default 1/4").
        allow_rotation: Whether panels may be turned 90 degrees.
        edge_trim: Unusable border on every sheet edge in inches.

    Returns:
        PanelOptimizationResult with placements, consumed sheets and summary.
    """
    config = PanelPackingConfig(
        blade_width=blade_width,
        allow_rotation=allow_rotation,
        edge_trim=edge_trim,
    )
    return ShelfPanelPacker(config).pack(panels, sheets)
