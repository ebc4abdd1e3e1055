"""Pydantic response schemas for the REST API.

Result schemas are read straight from the domain result objects
(``from_attributes``) and serialized with camelCase keys, the same key names
the JSON exporter writes.
"""

from typing import Any

from pydantic import AliasGenerator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from cutstock.application.dtos import BarJobOutput, PanelJobOutput


class ResultSchema(BaseModel):
    """Base for schemas built from domain objects."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=AliasGenerator(serialization_alias=to_camel),
    )


class BarCutSchema(ResultSchema):
    """A single cut on a bar."""

    part_id: int
    bar_id: int
    bar_no: int
    position: float = Field(..., description="Offset from the bar start in inches")
    length: float
    mark_no: str
    finish: str | None = None
    fab: str | None = None
    part_no: str | None = None


class CutBarSchema(ResultSchema):
    """A consumed bar and its cuts."""

    bar_id: int
    bar_no: int
    length: float
    used_length: float
    waste_percentage: float
    part_no: str | None = None
    description: str = ""
    cuts: list[BarCutSchema] = Field(default_factory=list)


class BarSummarySchema(ResultSchema):
    total_bars: int
    total_length: float
    used_length: float
    waste_percentage: float
    yield_percentage: float
    total_parts_placed: int
    total_parts_needed: int
    bar_types_used: int


class PartSchema(ResultSchema):
    """A part that could not be placed."""

    id: int
    length: float
    mark_no: str = ""
    part_no: str | None = None
    finish: str | None = None
    fab: str | None = None
    qty: int = 1


class OptimalBarSchema(ResultSchema):
    part_no: str | None = None
    length: float


class BarOptimizationResponse(ResultSchema):
    """Response for a bar cut list."""

    cuts: list[BarCutSchema]
    bars: list[CutBarSchema]
    summary: BarSummarySchema
    unplaced: list[PartSchema] = Field(default_factory=list)
    optimal_bars: list[OptimalBarSchema] | None = Field(
        default=None, description="Stock lengths found when find_optimal is set"
    )
    warnings: list[str] = Field(default_factory=list)

    @classmethod
    def from_output(
        cls, output: BarJobOutput, include_optimal: bool
    ) -> "BarOptimizationResponse":
        result = output.result
        return cls(
            cuts=[BarCutSchema.model_validate(c) for c in result.cuts],
            bars=[CutBarSchema.model_validate(b) for b in result.bars],
            summary=BarSummarySchema.model_validate(result.summary),
            unplaced=[PartSchema.model_validate(p) for p in result.unplaced],
            optimal_bars=(
                [OptimalBarSchema.model_validate(o) for o in output.optimal_bars]
                if include_optimal
                else None
            ),
            warnings=output.warnings,
        )


class PlacementSchema(ResultSchema):
    """A panel placed on a sheet; (x, y) is the lower left corner."""

    panel_id: int
    sheet_id: int
    sheet_no: int
    x: float
    y: float
    width: float
    height: float
    rotated: bool
    mark: str


class CutSheetSchema(ResultSchema):
    sheet_id: int
    sheet_no: int
    width: float
    height: float
    used_area: float
    waste_percentage: float


class PanelSummarySchema(ResultSchema):
    total_sheets: int
    total_area: float
    used_area: float
    waste_percentage: float
    yield_percentage: float
    total_panels_placed: int
    total_panels_needed: int
    sheet_types_used: int


class PanelSchema(ResultSchema):
    """A panel that could not be placed."""

    id: int
    width: float
    height: float
    mark_no: str = ""
    part_no: str | None = None
    finish: str | None = None
    qty: int = 1


class SheetSizeSchema(ResultSchema):
    width: float
    height: float


class SheetStockSchema(ResultSchema):
    """Usage of one sheet stock definition."""

    sheet_id: int
    width: float
    height: float
    qty: int
    max_qty: int
    used: int


class PanelOptimizationResponse(ResultSchema):
    """Response for a panel nesting layout."""

    placements: list[PlacementSchema]
    sheets: list[CutSheetSchema]
    summary: PanelSummarySchema
    unplaced: list[PanelSchema] = Field(default_factory=list)
    optimal_sheet: SheetSizeSchema | None = Field(
        default=None, description="Sheet size found when find_optimal is set"
    )
    stock: list[SheetStockSchema] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    @classmethod
    def from_output(cls, output: PanelJobOutput) -> "PanelOptimizationResponse":
        result = output.result
        return cls(
            placements=[PlacementSchema.model_validate(p) for p in result.placements],
            sheets=[CutSheetSchema.model_validate(s) for s in result.sheets],
            summary=PanelSummarySchema.model_validate(result.summary),
            unplaced=[PanelSchema.model_validate(p) for p in result.unplaced],
            optimal_sheet=(
                SheetSizeSchema.model_validate(result.optimal_sheet)
                if result.optimal_sheet is not None
                else None
            ),
            stock=[
                SheetStockSchema(
                    sheet_id=sheet.id,
                    width=sheet.width,
                    height=sheet.height,
                    qty=sheet.qty,
                    max_qty=sheet.effective_max_qty,
                    used=result.sheets_used(sheet.id),
                )
                for sheet in output.stock
            ],
            warnings=output.warnings,
        )


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
