"""Infrastructure layer - packing engines, stock search and formatters."""

from .bar_packing import LinearBinPacker, optimize_bars
from .bin_packing import PanelPackingConfig, ShelfPanelPacker, optimize_panels
from .formatters import BarCutListFormatter, JsonExporter, SheetLayoutFormatter
from .stock_pool import StockPool, StockSlot
from .stock_search import (
    candidate_bar_lengths,
    create_bars_from_optimal_results,
    find_best_bar_length,
    find_best_sheet_size,
    find_optimal_bars_by_part_no,
)

__all__ = [
    # Bar cutting
    "LinearBinPacker",
    "optimize_bars",
    # Panel nesting
    "PanelPackingConfig",
    "ShelfPanelPacker",
    "optimize_panels",
    # Stock pools
    "StockPool",
    "StockSlot",
    # Stock search
    "candidate_bar_lengths",
    "create_bars_from_optimal_results",
    "find_best_bar_length",
    "find_best_sheet_size",
    "find_optimal_bars_by_part_no",
    # Formatters
    "BarCutListFormatter",
    "JsonExporter",
    "SheetLayoutFormatter",
]
