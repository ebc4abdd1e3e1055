"""Result records produced by the bar and panel optimizers.

Results are created once per optimization run and never mutated afterwards.
Summaries are derived from the cut and placement lists and are never the
source of truth.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from .value_objects import Panel, Part, SheetSize


def waste_percentage(total: float, used: float) -> float:
    """Percentage of ``total`` not covered by ``used``, clamped to [0, 100].

    Returns 0 when ``total`` is 0.
    """
    if total <= 0:
        return 0.0
    return min(100.0, max(0.0, (1 - used / total) * 100))


# =============================================================================
# Bar cutting
# =============================================================================


@dataclass(frozen=True)
class BarCut:
    """A single part cut from a bar instance.

    Attributes:
        part_id: Id of the part this cut satisfies.
        bar_id: Id of the bar stock definition.
        bar_no: 1-based instance number within the bar stock definition.
        position: Offset of the cut start from the bar start in inches.
        length: Cut length in inches.
    """

    part_id: int
    bar_id: int
    bar_no: int
    position: float
    length: float
    mark_no: str = ""
    finish: str | None = None
    fab: str | None = None
    part_no: str | None = None

    @property
    def end(self) -> float:
        """Offset of the cut end from the bar start."""
        return self.position + self.length


@dataclass(frozen=True)
class CutBar:
    """A consumed bar instance and the cuts placed on it."""

    bar_id: int
    bar_no: int
    length: float
    used_length: float
    waste_percentage: float
    cuts: tuple[BarCut, ...]
    part_no: str | None = None
    description: str = ""

    @property
    def remaining_length(self) -> float:
        """Drop left on the bar after the last cut."""
        return self.length - self.used_length

    @property
    def yield_percentage(self) -> float:
        return 100 - self.waste_percentage


@dataclass(frozen=True)
class BarSummary:
    """Aggregate statistics for a bar optimization run."""

    total_bars: int
    total_length: float
    used_length: float
    waste_percentage: float
    total_parts_placed: int
    total_parts_needed: int
    bar_types_used: int

    @property
    def yield_percentage(self) -> float:
        return 100 - self.waste_percentage if self.total_bars else 0.0

    @property
    def is_complete(self) -> bool:
        """True if every required piece was placed."""
        return self.total_parts_placed == self.total_parts_needed

    @classmethod
    def from_bars(
        cls,
        bars: Sequence[CutBar],
        parts_needed: int,
    ) -> BarSummary:
        """Derive the summary from the finished list of consumed bars."""
        total_length = sum(bar.length for bar in bars)
        used_length = sum(bar.used_length for bar in bars)
        return cls(
            total_bars=len(bars),
            total_length=total_length,
            used_length=used_length,
            waste_percentage=waste_percentage(total_length, used_length),
            total_parts_placed=sum(len(bar.cuts) for bar in bars),
            total_parts_needed=parts_needed,
            bar_types_used=len({bar.bar_id for bar in bars}),
        )


@dataclass(frozen=True)
class BarOptimizationResult:
    """Complete result of a bar cutting optimization.

    Attributes:
        cuts: Every cut, in the order bars were consumed.
        bars: Every consumed bar instance.
        summary: Aggregate statistics.
        unplaced: One single-quantity part per piece that could not be placed.
    """

    cuts: tuple[BarCut, ...]
    bars: tuple[CutBar, ...]
    summary: BarSummary
    unplaced: tuple[Part, ...] = ()

    @classmethod
    def empty(cls) -> BarOptimizationResult:
        return cls(cuts=(), bars=(), summary=BarSummary.from_bars((), 0))

    def cuts_for(self, bar_id: int, bar_no: int) -> list[BarCut]:
        """Cuts on one bar instance, sorted by position."""
        return sorted(
            (c for c in self.cuts if c.bar_id == bar_id and c.bar_no == bar_no),
            key=lambda c: c.position,
        )


# =============================================================================
# Panel cutting
# =============================================================================


@dataclass(frozen=True)
class Placement:
    """A panel placed on a sheet instance.

    Coordinates are measured from the sheet's lower-left corner. ``width`` and
    ``height`` are the dimensions as placed, already swapped when ``rotated``.
    """

    panel_id: int
    sheet_id: int
    sheet_no: int
    x: float
    y: float
    width: float
    height: float
    rotated: bool = False
    mark: str = ""

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError("Position coordinates must be non-negative")

    @property
    def right_edge(self) -> float:
        return self.x + self.width

    @property
    def top_edge(self) -> float:
        return self.y + self.height

    @property
    def area(self) -> float:
        return self.width * self.height

    def overlaps(self, other: Placement) -> bool:
        """True if the two rectangles share interior area."""
        return (
            self.x < other.right_edge
            and other.x < self.right_edge
            and self.y < other.top_edge
            and other.y < self.top_edge
        )


@dataclass(frozen=True)
class CutSheet:
    """A consumed sheet instance."""

    sheet_id: int
    sheet_no: int
    width: float
    height: float
    used_area: float
    waste_percentage: float

    @property
    def area(self) -> float:
        return self.width * self.height


@dataclass(frozen=True)
class PanelSummary:
    """Aggregate statistics for a panel optimization run."""

    total_sheets: int
    total_area: float
    used_area: float
    waste_percentage: float
    total_panels_placed: int
    total_panels_needed: int
    sheet_types_used: int

    @property
    def yield_percentage(self) -> float:
        return 100 - self.waste_percentage if self.total_sheets else 0.0

    @property
    def is_complete(self) -> bool:
        return self.total_panels_placed == self.total_panels_needed

    @classmethod
    def from_sheets(
        cls,
        sheets: Sequence[CutSheet],
        panels_placed: int,
        panels_needed: int,
    ) -> PanelSummary:
        total_area = sum(sheet.area for sheet in sheets)
        used_area = sum(sheet.used_area for sheet in sheets)
        return cls(
            total_sheets=len(sheets),
            total_area=total_area,
            used_area=used_area,
            waste_percentage=waste_percentage(total_area, used_area),
            total_panels_placed=panels_placed,
            total_panels_needed=panels_needed,
            sheet_types_used=len({sheet.sheet_id for sheet in sheets}),
        )


@dataclass(frozen=True)
class PanelOptimizationResult:
    """Complete result of a panel nesting optimization.

    Attributes:
        placements: Every placement, in the order sheets were consumed.
        sheets: Every consumed sheet instance.
        summary: Aggregate statistics.
        unplaced: One single-quantity panel per piece that could not be placed.
        optimal_sheet: Sheet size chosen by the search, when one was run.
    """

    placements: tuple[Placement, ...]
    sheets: tuple[CutSheet, ...]
    summary: PanelSummary
    unplaced: tuple[Panel, ...] = ()
    optimal_sheet: SheetSize | None = field(default=None)

    @classmethod
    def empty(cls) -> PanelOptimizationResult:
        return cls(
            placements=(),
            sheets=(),
            summary=PanelSummary.from_sheets((), 0, 0),
        )

    def placements_for(self, sheet_id: int, sheet_no: int) -> list[Placement]:
        """Placements on one sheet instance."""
        return [
            p
            for p in self.placements
            if p.sheet_id == sheet_id and p.sheet_no == sheet_no
        ]

    def sheets_used(self, sheet_id: int) -> int:
        """Number of instances consumed from one sheet stock definition."""
        return sum(1 for sheet in self.sheets if sheet.sheet_id == sheet_id)
