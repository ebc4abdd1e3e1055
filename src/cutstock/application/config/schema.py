"""Pydantic models for cutting job configuration files.

A job file holds a bar cutting section, a panel nesting section, or both.
Field names are snake_case; unknown keys are rejected so typos surface as
validation errors rather than silently using defaults.
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

# Supported schema versions for job files
# Version 1.0: Bar cutting and panel nesting sections
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class PartConfig(BaseModel):
    """A linear part to cut.

    A ``qty`` of 0 is accepted and treated as a single piece.
    """

    model_config = ConfigDict(extra="forbid")

    id: int
    length: float = Field(..., gt=0, description="Cut length in inches")
    mark_no: str = ""
    part_no: str | None = None
    finish: str | None = None
    fab: str | None = None
    qty: int = Field(default=1, ge=0)


class BarStockConfig(BaseModel):
    """A bar stock definition; no ``part_no`` means universal stock."""

    model_config = ConfigDict(extra="forbid")

    id: int
    length: float = Field(..., gt=0, description="Bar length in inches")
    qty: int = Field(..., ge=0)
    part_no: str | None = None
    description: str = ""


class BarSearchConfig(BaseModel):
    """Range of bar lengths tried when ``find_optimal`` is set."""

    model_config = ConfigDict(extra="forbid")

    min_length: float = Field(default=120.0, gt=0)
    max_length: float = Field(default=480.0, gt=0)
    step_size: float = Field(default=12.0, gt=0)

    @model_validator(mode="after")
    def validate_range(self) -> "BarSearchConfig":
        if self.max_length < self.min_length:
            raise ValueError(
                f"max_length ({self.max_length}) must not be less than "
                f"min_length ({self.min_length})"
            )
        return self


class BarJobConfig(BaseModel):
    """Bar cutting section of a job file.

    Attributes:
        kerf: Saw kerf in inches.
        find_optimal: Search the best stock length per part number.
        search: Search range used when ``find_optimal`` is set.
        parts: Parts to cut.
        stock: Available bar stock.
    """

    model_config = ConfigDict(extra="forbid")

    kerf: float = Field(default=0.125, ge=0, description="Saw kerf in inches")
    find_optimal: bool = False
    search: BarSearchConfig = Field(default_factory=BarSearchConfig)
    parts: list[PartConfig] = Field(default_factory=list)
    stock: list[BarStockConfig] = Field(default_factory=list)


class PanelConfig(BaseModel):
    """A rectangular panel to cut."""

    model_config = ConfigDict(extra="forbid")

    id: int
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    mark_no: str = ""
    part_no: str | None = None
    finish: str | None = None
    qty: int = Field(default=1, ge=0)


class SheetStockConfig(BaseModel):
    """A sheet stock definition."""

    model_config = ConfigDict(extra="forbid")

    id: int
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    qty: int = Field(..., ge=0)
    max_qty: int | None = Field(default=None, ge=0)


class SheetSearchConfig(BaseModel):
    """Range of sheet sizes tried when ``find_optimal`` is set."""

    model_config = ConfigDict(extra="forbid")

    min_width: float = Field(default=48.0, gt=0)
    max_width: float = Field(default=96.0, gt=0)
    min_height: float = Field(default=48.0, gt=0)
    max_height: float = Field(default=96.0, gt=0)
    step_size: float = Field(default=12.0, gt=0)

    @model_validator(mode="after")
    def validate_range(self) -> "SheetSearchConfig":
        if self.max_width < self.min_width:
            raise ValueError("max_width must not be less than min_width")
        if self.max_height < self.min_height:
            raise ValueError("max_height must not be less than min_height")
        return self


class PanelJobConfig(BaseModel):
    """Panel nesting section of a job file."""

    model_config = ConfigDict(extra="forbid")

    blade_width: float = Field(default=0.25, ge=0, description="Blade width in inches")
    allow_rotation: bool = True
    edge_trim: float = Field(default=0.0, ge=0)
    find_optimal: bool = False
    search: SheetSearchConfig = Field(default_factory=SheetSearchConfig)
    panels: list[PanelConfig] = Field(default_factory=list)
    sheets: list[SheetStockConfig] = Field(default_factory=list)


class JobConfiguration(BaseModel):
    """Root model of a cutting job file.

    Attributes:
        schema_version: Job file format version.
        bars: Bar cutting section (optional).
        panels: Panel nesting section (optional).
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default="1.0")
    bars: BarJobConfig | None = None
    panels: PanelJobConfig | None = None

    @field_validator("schema_version")
    @classmethod
    def validate_schema_version(cls, v: str) -> str:
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version '{v}'. Supported versions: {supported}"
            )
        return v

    @model_validator(mode="after")
    def validate_has_section(self) -> "JobConfiguration":
        if self.bars is None and self.panels is None:
            raise ValueError("Job must contain a 'bars' or 'panels' section")
        return self
