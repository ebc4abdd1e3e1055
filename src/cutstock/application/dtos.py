"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from cutstock.domain import (
    DEFAULT_BLADE_WIDTH,
    DEFAULT_KERF,
    Bar,
    BarOptimizationResult,
    OptimalBar,
    Panel,
    PanelOptimizationResult,
    Part,
    Sheet,
)


@dataclass
class BarSearchInput:
    """Range of bar lengths tried when finding optimal stock."""

    min_length: float = 120.0
    max_length: float = 480.0
    step_size: float = 12.0

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if self.min_length <= 0:
            errors.append("Minimum bar length must be positive")
        if self.max_length < self.min_length:
            errors.append("Maximum bar length must not be less than minimum")
        if self.step_size <= 0:
            errors.append("Step size must be positive")
        return errors


@dataclass
class SheetSearchInput:
    """Range of sheet sizes tried when finding the optimal sheet."""

    min_width: float = 48.0
    max_width: float = 96.0
    min_height: float = 48.0
    max_height: float = 96.0
    step_size: float = 12.0

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if self.min_width <= 0 or self.min_height <= 0:
            errors.append("Minimum sheet dimensions must be positive")
        if self.max_width < self.min_width:
            errors.append("Maximum sheet width must not be less than minimum")
        if self.max_height < self.min_height:
            errors.append("Maximum sheet height must not be less than minimum")
        if self.step_size <= 0:
            errors.append("Step size must be positive")
        return errors


@dataclass
class BarJobInput:
    """Input DTO for a bar cutting job.

    When ``find_optimal`` is set, stock lengths are searched per part number
    and merged into ``bars`` before packing; otherwise ``bars`` is used as is.
    """

    parts: list[Part]
    bars: list[Bar] = field(default_factory=list)
    kerf: float = DEFAULT_KERF
    find_optimal: bool = False
    search: BarSearchInput = field(default_factory=BarSearchInput)

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if self.kerf < 0:
            errors.append("Kerf must be non-negative")
        if self.find_optimal:
            errors.extend(self.search.validate())
        elif self.parts and not self.bars:
            errors.append("Bar stock is required when not finding optimal length")
        return errors


@dataclass
class PanelJobInput:
    """Input DTO for a panel nesting job.

    When ``find_optimal`` is set, the best sheet size is searched and used in
    place of ``sheets``.
    """

    panels: list[Panel]
    sheets: list[Sheet] = field(default_factory=list)
    blade_width: float = DEFAULT_BLADE_WIDTH
    allow_rotation: bool = True
    edge_trim: float = 0.0
    find_optimal: bool = False
    search: SheetSearchInput = field(default_factory=SheetSearchInput)

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if self.blade_width < 0:
            errors.append("Blade width must be non-negative")
        if self.edge_trim < 0:
            errors.append("Edge trim must be non-negative")
        if self.find_optimal:
            errors.extend(self.search.validate())
        elif self.panels and not self.sheets:
            errors.append("Sheet stock is required when not finding optimal sheet size")
        return errors


@dataclass
class BarJobOutput:
    """Output DTO for a bar cutting job."""

    result: BarOptimizationResult
    stock: list[Bar] = field(default_factory=list)
    optimal_bars: list[OptimalBar] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


@dataclass
class PanelJobOutput:
    """Output DTO for a panel nesting job."""

    result: PanelOptimizationResult
    stock: list[Sheet] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors
