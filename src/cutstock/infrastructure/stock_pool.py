"""Per-run stock pools shared by the bar and panel packers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Sequence, TypeVar

StockT = TypeVar("StockT")


@dataclass
class StockSlot(Generic[StockT]):
    """Remaining instances of one stock definition during a run.

    Instances are numbered 1..qty in the order they are consumed.

    Attributes:
        stock: The caller's stock definition.
        remaining: Instances not yet consumed.
        next_no: Instance number handed out by the next ``take``.
    """

    stock: StockT
    remaining: int
    next_no: int = 1

    def take(self) -> int:
        """Consume one instance and return its 1-based number."""
        if self.remaining <= 0:
            raise ValueError("Stock slot is exhausted")
        number = self.next_no
        self.next_no += 1
        self.remaining -= 1
        return number


class StockPool(Generic[StockT]):
    """Owned pool of stock instances for a single optimization call.

    Each stock definition with quantity ``n`` supplies ``n`` instances.
    Slots keep the caller's order, which is the final tie-break when
    choosing stock. Taking an instance from a slot is equivalent to
    removing the lowest-numbered remaining instance of that stock.
    """

    def __init__(
        self,
        stock: Sequence[StockT],
        quantity_of: Callable[[StockT], int],
    ) -> None:
        self._slots: list[StockSlot[StockT]] = [
            StockSlot(stock=item, remaining=quantity_of(item))
            for item in stock
            if quantity_of(item) > 0
        ]

    def available(self) -> list[StockSlot[StockT]]:
        """Slots that still have at least one instance, in caller order."""
        return [slot for slot in self._slots if slot.remaining > 0]
