"""Validation results and advisory checks for job configurations.

Pydantic already enforces the structure of a job file. The checks here look
at the job as a whole: demand that no stock can hold, search ranges that
cannot cover the longest part, and settings that are legal but unusual.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Any

from cutstock.application.config.schema import (
    BarJobConfig,
    JobConfiguration,
    PanelJobConfig,
)

# Kerf or blade widths above this are almost certainly a unit mistake.
MAX_TYPICAL_KERF = 0.5


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g. "bars.stock")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    The job can still be run, but the result will probably not be what the
    user expects.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def _check_duplicate_ids(
    result: ValidationResult, path: str, ids: list[int], noun: str
) -> None:
    for item_id, count in Counter(ids).items():
        if count > 1:
            result.add_warning(
                path=path,
                message=f"{noun} id {item_id} is used {count} times",
                suggestion="Give each definition a unique id so results can be traced",
            )


def check_bar_job(bars: BarJobConfig) -> ValidationResult:
    """Check the bar cutting section of a job.

    Args:
        bars: A validated bar cutting section

    Returns:
        ValidationResult containing any errors or warnings found
    """
    result = ValidationResult()

    if not bars.parts:
        result.add_warning(path="bars.parts", message="No parts to cut")

    if not bars.find_optimal and bars.parts and not bars.stock:
        result.add_error(
            path="bars.stock",
            message="Bar stock is required when find_optimal is false",
        )

    if bars.kerf > MAX_TYPICAL_KERF:
        result.add_warning(
            path="bars.kerf",
            message=f'Kerf of {bars.kerf}" is unusually large',
            suggestion="Kerf is given in inches; a typical saw kerf is 1/8\" (0.125)",
        )

    _check_duplicate_ids(result, "bars.parts", [p.id for p in bars.parts], "Part")
    _check_duplicate_ids(result, "bars.stock", [b.id for b in bars.stock], "Bar")

    for i, part in enumerate(bars.parts):
        path = f"bars.parts[{i}]"
        if bars.find_optimal:
            if part.length > bars.search.max_length:
                result.add_warning(
                    path=path,
                    message=(
                        f'Part {part.mark_no or part.id} ({part.length}") exceeds '
                        f'the search maximum of {bars.search.max_length}"'
                    ),
                    suggestion="Raise search.max_length or split the part",
                )
            continue

        usable = [
            bar
            for bar in bars.stock
            if bar.qty > 0 and (not bar.part_no or bar.part_no == part.part_no)
        ]
        if bars.stock and not any(bar.length >= part.length for bar in usable):
            result.add_warning(
                path=path,
                message=(
                    f'Part {part.mark_no or part.id} ({part.length}") is longer '
                    f"than every bar available to it"
                ),
                suggestion="Add longer stock or enable find_optimal",
            )

    part_numbers = {part.part_no for part in bars.parts if part.part_no}
    for i, bar in enumerate(bars.stock):
        if bar.part_no and bar.part_no not in part_numbers:
            result.add_warning(
                path=f"bars.stock[{i}]",
                message=f"Bar {bar.id} is reserved for part number "
                f"'{bar.part_no}' which no part uses",
            )

    return result


def check_panel_job(panels: PanelJobConfig) -> ValidationResult:
    """Check the panel nesting section of a job."""
    result = ValidationResult()

    if not panels.panels:
        result.add_warning(path="panels.panels", message="No panels to cut")

    if not panels.find_optimal and panels.panels and not panels.sheets:
        result.add_error(
            path="panels.sheets",
            message="Sheet stock is required when find_optimal is false",
        )

    if panels.blade_width > MAX_TYPICAL_KERF:
        result.add_warning(
            path="panels.blade_width",
            message=f'Blade width of {panels.blade_width}" is unusually large',
            suggestion="Blade width is given in inches; a typical panel saw is 1/4\" (0.25)",
        )

    _check_duplicate_ids(
        result, "panels.panels", [p.id for p in panels.panels], "Panel"
    )
    _check_duplicate_ids(
        result, "panels.sheets", [s.id for s in panels.sheets], "Sheet"
    )

    trim = 2 * panels.edge_trim
    for i, sheet in enumerate(panels.sheets):
        if sheet.width <= trim or sheet.height <= trim:
            result.add_error(
                path=f"panels.sheets[{i}]",
                message=f"Edge trim leaves no usable area on sheet {sheet.id}",
                value=panels.edge_trim,
            )

    if panels.find_optimal:
        sizes = [(panels.search.max_width, panels.search.max_height)]
    else:
        sizes = [(s.width, s.height) for s in panels.sheets if s.qty > 0]

    for i, panel in enumerate(panels.panels):
        if not sizes:
            break
        orientations = [(panel.width, panel.height)]
        if panels.allow_rotation:
            orientations.append((panel.height, panel.width))
        fits = any(
            w + trim <= width and h + trim <= height
            for width, height in sizes
            for w, h in orientations
        )
        if not fits:
            result.add_warning(
                path=f"panels.panels[{i}]",
                message=(
                    f"Panel {panel.mark_no or panel.id} ({panel.width} x "
                    f"{panel.height}) does not fit on any available sheet"
                ),
                suggestion=(
                    "Raise the search maximums"
                    if panels.find_optimal
                    else "Add larger sheet stock or allow rotation"
                ),
            )

    return result


def validate_config(config: JobConfiguration) -> ValidationResult:
    """Perform full validation of a job configuration.

    Args:
        config: A JobConfiguration instance (already validated by pydantic)

    Returns:
        ValidationResult containing any errors or warnings
    """
    result = ValidationResult()
    if config.bars is not None:
        result.merge(check_bar_job(config.bars))
    if config.panels is not None:
        result.merge(check_panel_job(config.panels))
    return result
