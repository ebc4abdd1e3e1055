"""Pydantic schemas for the REST API."""

from cutstock.web.schemas.requests import (
    ConfigValidateRequest,
    OptimizeBarsRequest,
    OptimizePanelsRequest,
)
from cutstock.web.schemas.responses import (
    BarCutSchema,
    BarOptimizationResponse,
    BarSummarySchema,
    CutBarSchema,
    CutSheetSchema,
    ErrorResponseSchema,
    OptimalBarSchema,
    PanelOptimizationResponse,
    PanelSchema,
    PanelSummarySchema,
    PartSchema,
    PlacementSchema,
    SheetSizeSchema,
    SheetStockSchema,
    ValidationResultSchema,
)

__all__ = [
    # Requests
    "ConfigValidateRequest",
    "OptimizeBarsRequest",
    "OptimizePanelsRequest",
    # Responses
    "BarCutSchema",
    "BarOptimizationResponse",
    "BarSummarySchema",
    "CutBarSchema",
    "CutSheetSchema",
    "ErrorResponseSchema",
    "OptimalBarSchema",
    "PanelOptimizationResponse",
    "PanelSchema",
    "PanelSummarySchema",
    "PartSchema",
    "PlacementSchema",
    "SheetSizeSchema",
    "SheetStockSchema",
    "ValidationResultSchema",
]
