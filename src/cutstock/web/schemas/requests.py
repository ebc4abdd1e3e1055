"""Pydantic request schemas for the REST API.

Optimization requests take the same shape as the matching section of a job
file, so a job file section can be posted as is.
"""

from typing import Any

from pydantic import BaseModel, Field

from cutstock.application.config.schema import BarJobConfig, PanelJobConfig


class OptimizeBarsRequest(BarJobConfig):
    """Request for a bar cut list."""


class OptimizePanelsRequest(PanelJobConfig):
    """Request for a panel nesting layout."""


class ConfigValidateRequest(BaseModel):
    """Request for validating a job configuration."""

    config: dict[str, Any] = Field(..., description="Job configuration JSON")
