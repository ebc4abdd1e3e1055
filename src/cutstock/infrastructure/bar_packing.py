"""Linear (1-D) bin packing for bar stock cutting.

Parts are sorted longest first, then grouped by part number and finish, so
groups are packed in order of their longest part. Each group is packed onto
bars with a first-fit decreasing heuristic. Each bar is chosen best-fit: stock
reserved for the group's part number is preferred over universal stock,
then the shortest bar that holds the longest remaining part.

The packer never raises for demand it cannot satisfy. Pieces that do not fit
any available bar are reported in ``BarOptimizationResult.unplaced`` and via
``summary.total_parts_placed < summary.total_parts_needed``.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Sequence

from cutstock.domain.results import (
    BarCut,
    BarOptimizationResult,
    BarSummary,
    CutBar,
)
from cutstock.domain.value_objects import DEFAULT_KERF, NO_PART_NO, Bar, Part

from .stock_pool import StockPool, StockSlot

logger = logging.getLogger(__name__)


class LinearBinPacker:
    """First-fit decreasing bar packer with best-fit bar selection.

    Kerf is charged between consecutive cuts on a bar but not after the last
    cut, so a bar of length L holds cuts whose lengths plus the kerfs between
    them sum to at most L.

    Attributes:
        kerf: Saw blade kerf in inches.
    """

    def __init__(self, kerf: float = DEFAULT_KERF) -> None:
        if kerf < 0:
            raise ValueError("Kerf must be non-negative")
        self.kerf = kerf

    def pack(self, parts: Sequence[Part], bars: Sequence[Bar]) -> BarOptimizationResult:
        """Pack parts onto bars.

        Args:
            parts: Parts to cut (quantities are expanded to single pieces).
            bars: Available bar stock.

        Returns:
            BarOptimizationResult with cuts, consumed bars and summary.
        """
        pieces_needed = sum(part.qty for part in parts)
        if pieces_needed == 0:
            return BarOptimizationResult.empty()

        pool: StockPool[Bar] = StockPool(bars, lambda bar: bar.qty)
        groups = self._group_pieces(parts)

        logger.info(
            "Packing %d pieces in %d groups onto %d bar types (kerf %.4f)",
            pieces_needed,
            len(groups),
            len(bars),
            self.kerf,
        )

        cut_bars: list[CutBar] = []
        unplaced: list[Part] = []

        for (part_no, finish), pieces in groups.items():
            queue = list(pieces)
            group_part_no = None if part_no == NO_PART_NO else part_no

            while queue:
                slot = self._select_bar(pool, queue[0].length, group_part_no)
                if slot is None:
                    logger.warning(
                        "No bar holds %.3f\" for part number %s, finish %s; "
                        "%d pieces left unplaced",
                        queue[0].length,
                        part_no,
                        finish,
                        len(queue),
                    )
                    break

                bar_no = slot.take()
                cut_bar, queue = self._fill_bar(slot.stock, bar_no, queue)
                cut_bars.append(cut_bar)

                logger.debug(
                    "Bar %d #%d (%.3f\"): %d cuts, %.1f%% waste",
                    cut_bar.bar_id,
                    cut_bar.bar_no,
                    cut_bar.length,
                    len(cut_bar.cuts),
                    cut_bar.waste_percentage,
                )

            unplaced.extend(replace(piece, qty=1) for piece in queue)

        cuts = tuple(cut for bar in cut_bars for cut in bar.cuts)
        return BarOptimizationResult(
            cuts=cuts,
            bars=tuple(cut_bars),
            summary=BarSummary.from_bars(cut_bars, pieces_needed),
            unplaced=tuple(unplaced),
        )

    def _group_pieces(
        self,
        parts: Sequence[Part],
    ) -> dict[tuple[str, str], list[Part]]:
        """Expand quantities, sort longest first, then group by (part number, finish).

        Grouping the sorted pieces orders groups by their longest piece, so the
        group holding the longest part draws on shared stock first. Each group
        keeps the longest-first order.
        """
        pieces = [part for part in parts for _ in range(part.qty)]
        groups: dict[tuple[str, str], list[Part]] = {}
        for piece in self._sort_by_length(pieces):
            groups.setdefault(piece.group_key, []).append(piece)
        return groups

    def _sort_by_length(self, pieces: list[Part]) -> list[Part]:
        """Sort pieces longest first; equal lengths keep their input order."""
        return sorted(pieces, key=lambda p: p.length, reverse=True)

    def _select_bar(
        self,
        pool: StockPool[Bar],
        length: float,
        part_no: str | None,
    ) -> StockSlot[Bar] | None:
        """Pick the bar for a piece of the given length.

        Candidates hold the piece and accept the part number. Reserved stock
        for this part number wins over universal stock, then the shortest
        bar, then the earliest stock definition.
        """
        best: StockSlot[Bar] | None = None
        best_key: tuple[int, float] | None = None

        for slot in pool.available():
            bar = slot.stock
            if bar.length < length or not bar.accepts(part_no):
                continue
            exact = 0 if (part_no is not None and bar.part_no == part_no) else 1
            key = (exact, bar.length)
            if best_key is None or key < best_key:
                best, best_key = slot, key

        return best

    def _fill_bar(
        self,
        bar: Bar,
        bar_no: int,
        queue: list[Part],
    ) -> tuple[CutBar, list[Part]]:
        """Cut the head piece at position 0, then fill greedily.

        The rest of the queue is scanned in order and every piece that still
        fits (kerf plus length within the remaining length) is cut next.

        Returns:
            The consumed bar and the pieces that were not cut from it.
        """
        head = queue[0]
        cuts = [self._make_cut(head, bar, bar_no, 0.0)]
        remaining = bar.length - head.length
        left_over: list[Part] = []

        for piece in queue[1:]:
            needed = self.kerf + piece.length
            if needed <= remaining:
                position = cuts[-1].end + self.kerf
                cuts.append(self._make_cut(piece, bar, bar_no, position))
                remaining -= needed
            else:
                left_over.append(piece)

        used_length = bar.length - remaining
        cut_bar = CutBar(
            bar_id=bar.id,
            bar_no=bar_no,
            length=bar.length,
            used_length=used_length,
            waste_percentage=100 * remaining / bar.length,
            cuts=tuple(cuts),
            part_no=bar.part_no,
            description=bar.description,
        )
        return cut_bar, left_over

    @staticmethod
    def _make_cut(part: Part, bar: Bar, bar_no: int, position: float) -> BarCut:
        return BarCut(
            part_id=part.id,
            bar_id=bar.id,
            bar_no=bar_no,
            position=position,
            length=part.length,
            mark_no=part.mark_no,
            finish=part.finish,
            fab=part.fab,
            part_no=part.part_no,
        )


def optimize_bars(
    parts: Sequence[Part],
    bars: Sequence[Bar],
    kerf: float = DEFAULT_KERF,
) -> BarOptimizationResult:
    """Pack parts onto bars with the default packer.

    Args:
        parts: Parts to cut.
        bars: Available bar stock.
        kerf: Saw kerf in inches (default 1/8").

    Returns:
        BarOptimizationResult with cuts, consumed bars and summary.
    """
    return LinearBinPacker(kerf).pack(parts, bars)
