"""Search for the stock size that cuts a set of parts with the least waste.

Each candidate size is evaluated by running the packer against a single
synthetic stock definition with effectively unlimited quantity. Candidates
are compared on pieces left unplaced, then stock consumed, then absolute
waste; the first candidate in ascending order wins exact ties, so smaller
stock is preferred.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, Sequence

from cutstock.domain.value_objects import (
    DEFAULT_BLADE_WIDTH,
    DEFAULT_KERF,
    OPTIMIZATION_STOCK_QTY,
    STANDARD_BAR_LENGTHS,
    Bar,
    OptimalBar,
    Panel,
    Part,
    Sheet,
    SheetSize,
)

from .bar_packing import LinearBinPacker
from .bin_packing import PanelPackingConfig, ShelfPanelPacker

logger = logging.getLogger(__name__)

# Float tolerance when stepping through candidate sizes.
_EPSILON = 1e-9


def _arithmetic_range(start: float, stop: float, step: float) -> list[float]:
    """Values start, start + step, ... up to and including stop."""
    if step <= 0:
        raise ValueError("Step size must be positive")
    values: list[float] = []
    i = 0
    while True:
        value = start + i * step
        if value > stop + _EPSILON:
            break
        values.append(value)
        i += 1
    return values


def candidate_bar_lengths(
    min_length: float,
    max_length: float,
    step_size: float,
    standard_lengths: Iterable[float] = STANDARD_BAR_LENGTHS,
) -> list[float]:
    """Candidate bar lengths between ``min_length`` and ``max_length``.

    The arithmetic sequence from ``min_length`` by ``step_size``, merged with
    the standard mill lengths that fall in range, deduplicated and sorted.
    """
    candidates = set(_arithmetic_range(min_length, max_length, step_size))
    candidates.update(
        length for length in standard_lengths if min_length <= length <= max_length
    )
    return sorted(candidates)


def find_best_bar_length(
    parts: Sequence[Part],
    min_length: float = 120,
    max_length: float = 480,
    step_size: float = 12,
    kerf: float = DEFAULT_KERF,
) -> float:
    """Find the bar length that cuts ``parts`` with the fewest bars.

    ``min_length`` is raised to the longest part, since a shorter bar could
    never hold it. Ties on bar count are broken by absolute waste
    (``bars * length - used length``), then by the shorter length.

    Args:
        parts: Parts to cut, typically a single part-number group.
        min_length: Shortest bar length to consider in inches.
        max_length: Longest bar length to consider in inches.
        step_size: Increment between candidate lengths in inches.
        kerf: Saw kerf in inches.

    Returns:
        The best bar length. If no candidate lies in range (the longest part
        exceeds ``max_length``), the longer of ``max_length`` and the longest
        part.

    Raises:
        ValueError: If ``step_size`` is not positive.
    """
    longest = max((part.length for part in parts), default=0.0)
    min_length = max(min_length, longest)
    candidates = candidate_bar_lengths(min_length, max_length, step_size)

    if not candidates:
        logger.warning(
            "Longest part %.3f\" exceeds maximum bar length %.3f\"",
            longest,
            max_length,
        )
        return max(max_length, min_length)

    packer = LinearBinPacker(kerf)
    best_length = candidates[0]
    best_key: tuple[int, int, float] | None = None

    for length in candidates:
        bar = Bar(id=1, length=length, qty=OPTIMIZATION_STOCK_QTY)
        summary = packer.pack(parts, [bar]).summary
        waste = summary.total_bars * length - summary.used_length
        key = (
            summary.total_parts_needed - summary.total_parts_placed,
            summary.total_bars,
            waste,
        )
        if best_key is None or key < best_key:
            best_length, best_key = length, key

    logger.debug(
        "Best bar length %.3f\" from %d candidates (%d bars)",
        best_length,
        len(candidates),
        best_key[1] if best_key else 0,
    )
    return best_length


def find_optimal_bars_by_part_no(
    parts: Sequence[Part],
    min_length: float = 120,
    max_length: float = 480,
    step_size: float = 12,
    kerf: float = DEFAULT_KERF,
) -> list[OptimalBar]:
    """Find the best bar length separately for each part number.

    Parts without a part number form their own group, labelled ``""``. That
    group is only searched when it is the only group: when specific part
    numbers are present no universal bar is proposed for it.

    Returns:
        One OptimalBar per searched group, in order of first appearance.
    """
    groups: dict[str, list[Part]] = {}
    for part in parts:
        groups.setdefault(part.part_no or "", []).append(part)

    results: list[OptimalBar] = []
    for part_no, group in groups.items():
        if part_no == "" and len(groups) > 1:
            logger.info(
                "Skipping %d parts without a part number; no universal bar proposed",
                len(group),
            )
            continue
        length = find_best_bar_length(group, min_length, max_length, step_size, kerf)
        results.append(OptimalBar(part_no=part_no, length=length))

    return results


def create_bars_from_optimal_results(
    optimal_results: Sequence[OptimalBar],
    default_bars: Sequence[Bar] = (),
) -> list[Bar]:
    """Merge search results into a list of bar stock definitions.

    A result matching an existing bar on (length, part number) raises that
    bar's quantity to at least ``OPTIMIZATION_STOCK_QTY``; otherwise a new
    bar is appended with the next free id. The inputs are not modified.

    Args:
        optimal_results: Lengths found by ``find_optimal_bars_by_part_no``.
        default_bars: Stock the caller already has.

    Returns:
        A new list of bars.
    """
    bars: list[Bar] = list(default_bars)
    next_id = max((bar.id for bar in bars), default=0) + 1

    for result in optimal_results:
        part_no = result.part_no or None
        index = next(
            (
                i
                for i, bar in enumerate(bars)
                if bar.length == result.length and (bar.part_no or None) == part_no
            ),
            None,
        )

        if index is not None:
            existing = bars[index]
            bars[index] = replace(
                existing, qty=max(existing.qty, OPTIMIZATION_STOCK_QTY)
            )
            continue

        suffix = f" for {part_no}" if part_no else ""
        bars.append(
            Bar(
                id=next_id,
                length=result.length,
                qty=OPTIMIZATION_STOCK_QTY,
                part_no=part_no,
                description=f'Optimal {result.length:g}" bar{suffix}',
            )
        )
        next_id += 1

    return bars


def find_best_sheet_size(
    panels: Sequence[Panel],
    min_width: float = 48,
    max_width: float = 96,
    min_height: float = 48,
    max_height: float = 96,
    step_size: float = 12,
    blade_width: float = DEFAULT_BLADE_WIDTH,
    allow_rotation: bool = True,
    edge_trim: float = 0.0,
) -> SheetSize:
    """Find the sheet size that nests ``panels`` with the fewest sheets.

    Minimum dimensions are raised so the largest panel fits (in either
    orientation when rotation is allowed). Candidates are the grid of widths
    and heights from the minimums by ``step_size``, visited in ascending
    width then height; ties on sheet count are broken by waste area.

    Returns:
        The best sheet size. If the grid is empty, the maximum dimensions
        raised to the clamped minimums.

    Raises:
        ValueError: If ``step_size`` is not positive.
    """
    min_width, min_height = _clamp_sheet_minimums(
        panels, min_width, max_width, min_height, max_height, allow_rotation, edge_trim
    )
    widths = _arithmetic_range(min_width, max_width, step_size)
    heights = _arithmetic_range(min_height, max_height, step_size)

    if not widths or not heights:
        logger.warning("No sheet size in range holds the largest panel")
        return SheetSize(max(max_width, min_width), max(max_height, min_height))

    packer = ShelfPanelPacker(
        PanelPackingConfig(
            blade_width=blade_width,
            allow_rotation=allow_rotation,
            edge_trim=edge_trim,
        )
    )
    best = SheetSize(widths[0], heights[0])
    best_key: tuple[int, int, float] | None = None

    for width in widths:
        for height in heights:
            sheet = Sheet(id=1, width=width, height=height, qty=OPTIMIZATION_STOCK_QTY)
            summary = packer.pack(panels, [sheet]).summary
            key = (
                summary.total_panels_needed - summary.total_panels_placed,
                summary.total_sheets,
                summary.total_area - summary.used_area,
            )
            if best_key is None or key < best_key:
                best, best_key = SheetSize(width, height), key

    logger.debug(
        "Best sheet %sx%s from %d candidates",
        best.width,
        best.height,
        len(widths) * len(heights),
    )
    return best


def _clamp_sheet_minimums(
    panels: Sequence[Panel],
    min_width: float,
    max_width: float,
    min_height: float,
    max_height: float,
    allow_rotation: bool,
    edge_trim: float,
) -> tuple[float, float]:
    """Raise the minimum sheet dimensions so every panel can fit.

    With rotation allowed each panel is laid long side along the dimension
    that is already longer, unless only the other orientation stays within
    the maximums.
    """
    trim = 2 * edge_trim
    for panel in panels:
        need_width, need_height = panel.width, panel.height
        if allow_rotation:
            short, long = sorted((panel.width, panel.height))
            if min_width >= min_height:
                options = [(long, short), (short, long)]
            else:
                options = [(short, long), (long, short)]
            need_width, need_height = next(
                (
                    (w, h)
                    for w, h in options
                    if w + trim <= max_width and h + trim <= max_height
                ),
                options[0],
            )
        min_width = max(min_width, need_width + trim)
        min_height = max(min_height, need_height + trim)
    return min_width, min_height
