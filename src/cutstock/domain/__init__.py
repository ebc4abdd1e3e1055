"""Domain layer - cutting demand, stock supply and optimization results."""

from .results import (
    BarCut,
    BarOptimizationResult,
    BarSummary,
    CutBar,
    CutSheet,
    PanelOptimizationResult,
    PanelSummary,
    Placement,
    waste_percentage,
)
from .value_objects import (
    DEFAULT_BLADE_WIDTH,
    DEFAULT_KERF,
    NO_FINISH,
    NO_PART_NO,
    OPTIMIZATION_STOCK_QTY,
    STANDARD_BAR_LENGTHS,
    Bar,
    OptimalBar,
    Panel,
    Part,
    Sheet,
    SheetSize,
)

__all__ = [
    "DEFAULT_BLADE_WIDTH",
    "DEFAULT_KERF",
    "NO_FINISH",
    "NO_PART_NO",
    "OPTIMIZATION_STOCK_QTY",
    "STANDARD_BAR_LENGTHS",
    "Bar",
    "BarCut",
    "BarOptimizationResult",
    "BarSummary",
    "CutBar",
    "CutSheet",
    "OptimalBar",
    "Panel",
    "PanelOptimizationResult",
    "PanelSummary",
    "Part",
    "Placement",
    "Sheet",
    "SheetSize",
    "waste_percentage",
]
