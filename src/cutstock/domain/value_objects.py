"""Value objects describing cutting demand and stock supply.

Parts and panels are the demand side, bars and sheets the supply side.
All dimensions are in inches. All value objects are frozen so that a caller's
definitions can be shared with the optimizers without risk of mutation.
"""

from __future__ import annotations

from dataclasses import dataclass

# Saw kerf for bar cutting and blade width for panel cutting, in inches.
DEFAULT_KERF: float = 0.125
DEFAULT_BLADE_WIDTH: float = 0.25

# Mill lengths (10' through 40') always considered by the stock-length search.
STANDARD_BAR_LENGTHS: tuple[float, ...] = (120, 144, 192, 240, 288, 360, 480)

# Quantity given to synthetic stock so supply never limits a search run.
OPTIMIZATION_STOCK_QTY: int = 1000

# Group keys for demand with no part number or finish.
NO_PART_NO = "NO_PART_NO"
NO_FINISH = "NO_FINISH"


@dataclass(frozen=True)
class Part:
    """A linear part to be cut from bar stock.

    Attributes:
        id: Caller-assigned part identifier.
        length: Cut length in inches.
        mark_no: Shop mark printed on the cut list.
        part_no: Profile/part number, restricts which bars may be used.
        finish: Finish code; parts with different finishes never share a bar.
        fab: Fabrication tag carried through to the cut records.
        qty: Number of identical pieces required.
    """

    id: int
    length: float
    mark_no: str = ""
    part_no: str | None = None
    finish: str | None = None
    fab: str | None = None
    qty: int = 1

    def __post_init__(self) -> None:
        if self.length <= 0:
            raise ValueError("Part length must be positive")
        if self.qty < 1:
            raise ValueError("Part quantity must be at least 1")

    @property
    def group_key(self) -> tuple[str, str]:
        """Key used to keep part numbers and finishes on separate bars."""
        return (self.part_no or NO_PART_NO, self.finish or NO_FINISH)

    @property
    def total_length(self) -> float:
        """Length of all pieces combined, excluding kerf."""
        return self.length * self.qty


@dataclass(frozen=True)
class Bar:
    """A bar stock definition.

    A bar with no part number is universal stock usable by any part group.

    Attributes:
        id: Stock identifier.
        length: Bar length in inches.
        qty: Number of bars available.
        part_no: Part number this stock is reserved for, if any.
        description: Free text shown on reports.
    """

    id: int
    length: float
    qty: int
    part_no: str | None = None
    description: str = ""

    def __post_init__(self) -> None:
        if self.length <= 0:
            raise ValueError("Bar length must be positive")
        if self.qty < 0:
            raise ValueError("Bar quantity must be non-negative")

    @property
    def is_universal(self) -> bool:
        """True if any part number may be cut from this bar."""
        return not self.part_no

    def accepts(self, part_no: str | None) -> bool:
        """Check whether parts of the given part number may use this bar."""
        return self.is_universal or self.part_no == part_no


@dataclass(frozen=True)
class Panel:
    """A rectangular panel to be cut from sheet stock.

    Attributes:
        id: Caller-assigned panel identifier.
        width: Panel width in inches.
        height: Panel height in inches.
        mark_no: Shop mark printed on the layout.
        part_no: Optional grouping key.
        finish: Optional finish; panels with different finishes never share a sheet.
        qty: Number of identical panels required.
    """

    id: int
    width: float
    height: float
    mark_no: str = ""
    part_no: str | None = None
    finish: str | None = None
    qty: int = 1

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Panel dimensions must be positive")
        if self.qty < 1:
            raise ValueError("Panel quantity must be at least 1")

    @property
    def area(self) -> float:
        """Panel area in square inches."""
        return self.width * self.height

    @property
    def longest_side(self) -> float:
        return max(self.width, self.height)

    @property
    def group_key(self) -> tuple[str, str]:
        return (self.part_no or NO_PART_NO, self.finish or NO_FINISH)


@dataclass(frozen=True)
class Sheet:
    """A sheet stock definition.

    Attributes:
        id: Stock identifier.
        width: Sheet width in inches.
        height: Sheet height in inches.
        qty: Number of sheets available.
        max_qty: Purchasing cap reported alongside results (defaults to qty).
    """

    id: int
    width: float
    height: float
    qty: int
    max_qty: int | None = None

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError("Sheet width must be positive")
        if self.height <= 0:
            raise ValueError("Sheet height must be positive")
        if self.qty < 0:
            raise ValueError("Sheet quantity must be non-negative")

    @property
    def area(self) -> float:
        """Sheet area in square inches."""
        return self.width * self.height

    @property
    def effective_max_qty(self) -> int:
        return self.qty if self.max_qty is None else self.max_qty


@dataclass(frozen=True)
class OptimalBar:
    """Best bar length found for one part number.

    An empty ``part_no`` denotes parts that carry no part number.
    """

    part_no: str
    length: float


@dataclass(frozen=True)
class SheetSize:
    """Sheet dimensions chosen by the sheet-size search."""

    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height
