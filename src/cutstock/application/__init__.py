"""Application layer - use cases and DTOs."""

from .commands import OptimizeBarsCommand, OptimizePanelsCommand
from .dtos import (
    BarJobInput,
    BarJobOutput,
    BarSearchInput,
    PanelJobInput,
    PanelJobOutput,
    SheetSearchInput,
)

__all__ = [
    "OptimizeBarsCommand",
    "OptimizePanelsCommand",
    "BarJobInput",
    "BarJobOutput",
    "BarSearchInput",
    "PanelJobInput",
    "PanelJobOutput",
    "SheetSearchInput",
]
