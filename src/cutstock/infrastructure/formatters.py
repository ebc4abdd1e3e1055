"""Text and JSON formatters for optimization results."""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any, Sequence

from pydantic.alias_generators import to_camel

from cutstock.domain.results import (
    BarOptimizationResult,
    CutBar,
    PanelOptimizationResult,
)
from cutstock.domain.value_objects import OptimalBar, Sheet


class BarCutListFormatter:
    """Formats a bar optimization result as a cut list, one block per bar."""

    def format(
        self,
        result: BarOptimizationResult,
        optimal_bars: list[OptimalBar] | None = None,
    ) -> str:
        """Format cut list and summary as a table."""
        if not result.bars and not result.unplaced:
            return "No bars used."

        lines = ["BAR CUT LIST", "=" * 78]

        if optimal_bars:
            lines.append("Optimal stock lengths:")
            for optimal in optimal_bars:
                label = optimal.part_no or "(no part number)"
                lines.append(f"  {label:<24} {optimal.length:>10.3f}\"")
            lines.append("-" * 78)

        for bar in result.bars:
            lines.extend(self._format_bar(bar))

        lines.append("=" * 78)
        lines.extend(self._format_summary(result))
        return "\n".join(lines)

    def _format_bar(self, bar: CutBar) -> list[str]:
        header = f"Bar {bar.bar_id} #{bar.bar_no}  {bar.length:.3f}\""
        if bar.part_no:
            header += f"  [{bar.part_no}]"
        if bar.description:
            header += f"  {bar.description}"
        lines = [
            header,
            f"  {'Mark':<12} {'Part No':<12} {'Finish':<10} {'Position':>10} {'Length':>10}",
        ]
        for cut in bar.cuts:
            lines.append(
                f"  {cut.mark_no:<12} {cut.part_no or '':<12} {cut.finish or '':<10} "
                f"{cut.position:>10.3f} {cut.length:>10.3f}"
            )
        lines.append(
            f"  Drop: {bar.remaining_length:.3f}\"  Waste: {bar.waste_percentage:.1f}%"
        )
        lines.append("-" * 78)
        return lines

    def _format_summary(self, result: BarOptimizationResult) -> list[str]:
        summary = result.summary
        lines = [
            f"Bars used:      {summary.total_bars} ({summary.bar_types_used} types)",
            f"Total length:   {summary.total_length:.3f}\"",
            f"Used length:    {summary.used_length:.3f}\"",
            f"Waste:          {summary.waste_percentage:.2f}%",
            f"Yield:          {summary.yield_percentage:.2f}%",
            f"Parts placed:   {summary.total_parts_placed} of {summary.total_parts_needed}",
        ]
        if result.unplaced:
            lines.append("UNPLACED PARTS:")
            for part in result.unplaced:
                lines.append(
                    f"  {part.mark_no or part.id:<12} {part.part_no or '':<12} "
                    f"{part.length:>10.3f}\""
                )
        return lines


class SheetLayoutFormatter:
    """Formats a panel optimization result as a placement list per sheet."""

    def format(
        self,
        result: PanelOptimizationResult,
        stock: Sequence[Sheet] | None = None,
    ) -> str:
        """Format placements per sheet, the summary and, when given, stock usage."""
        if not result.sheets and not result.unplaced:
            return "No sheets used."

        lines = ["SHEET LAYOUT", "=" * 78]
        if result.optimal_sheet is not None:
            lines.append(
                f"Optimal sheet size: {result.optimal_sheet.width:.3f}\" x "
                f"{result.optimal_sheet.height:.3f}\""
            )
            lines.append("-" * 78)

        for sheet in result.sheets:
            lines.append(
                f"Sheet {sheet.sheet_id} #{sheet.sheet_no}  "
                f"{sheet.width:.3f}\" x {sheet.height:.3f}\"  "
                f"Waste: {sheet.waste_percentage:.1f}%"
            )
            lines.append(
                f"  {'Mark':<12} {'X':>9} {'Y':>9} {'Width':>9} {'Height':>9}  Rotated"
            )
            for p in result.placements_for(sheet.sheet_id, sheet.sheet_no):
                lines.append(
                    f"  {p.mark:<12} {p.x:>9.3f} {p.y:>9.3f} {p.width:>9.3f} "
                    f"{p.height:>9.3f}  {'yes' if p.rotated else 'no'}"
                )
            lines.append("-" * 78)

        summary = result.summary
        lines.append("=" * 78)
        lines.extend(
            [
                f"Sheets used:    {summary.total_sheets} ({summary.sheet_types_used} types)",
                f"Total area:     {summary.total_area:.1f} sq in "
                f"({summary.total_area / 144:.2f} sq ft)",
                f"Used area:      {summary.used_area:.1f} sq in",
                f"Waste:          {summary.waste_percentage:.2f}%",
                f"Yield:          {summary.yield_percentage:.2f}%",
                f"Panels placed:  {summary.total_panels_placed} of {summary.total_panels_needed}",
            ]
        )
        if result.unplaced:
            lines.append("UNPLACED PANELS:")
            for panel in result.unplaced:
                lines.append(
                    f"  {panel.mark_no or panel.id:<12} {panel.width:>9.3f} x {panel.height:.3f}"
                )
        if stock:
            lines.append("SHEET STOCK:")
            for sheet in stock:
                lines.append(
                    f"  Sheet {sheet.id:<4} {sheet.width:.3f}\" x {sheet.height:.3f}\"  "
                    f"used {result.sheets_used(sheet.id)} of {sheet.qty} "
                    f"(max {sheet.effective_max_qty})"
                )
        return "\n".join(lines)


class JsonExporter:
    """Exports optimization results to JSON with camelCase keys.

    Key names match what the visualization and export collaborators consume
    (``barId``, ``usedLength``, ``totalPartsPlaced`` and so on).
    """

    def export_bars(
        self,
        result: BarOptimizationResult,
        optimal_bars: list[OptimalBar] | None = None,
    ) -> str:
        return json.dumps(self.bars_to_dict(result, optimal_bars), indent=2)

    def export_panels(
        self,
        result: PanelOptimizationResult,
        stock: Sequence[Sheet] | None = None,
    ) -> str:
        return json.dumps(self.panels_to_dict(result, stock), indent=2)

    def bars_to_dict(
        self,
        result: BarOptimizationResult,
        optimal_bars: list[OptimalBar] | None = None,
    ) -> dict[str, Any]:
        data: dict[str, Any] = {
            "cuts": [_camel(asdict(cut)) for cut in result.cuts],
            "bars": [
                {
                    **_camel(asdict(bar)),
                    "cuts": [_camel(asdict(cut)) for cut in bar.cuts],
                }
                for bar in result.bars
            ],
            "summary": {
                **_camel(asdict(result.summary)),
                "yieldPercentage": result.summary.yield_percentage,
            },
            "unplaced": [_camel(asdict(part)) for part in result.unplaced],
        }
        if optimal_bars is not None:
            data["optimalBars"] = [_camel(asdict(o)) for o in optimal_bars]
        return data

    def panels_to_dict(
        self,
        result: PanelOptimizationResult,
        stock: Sequence[Sheet] | None = None,
    ) -> dict[str, Any]:
        data: dict[str, Any] = {
            "placements": [_camel(asdict(p)) for p in result.placements],
            "sheets": [_camel(asdict(s)) for s in result.sheets],
            "summary": {
                **_camel(asdict(result.summary)),
                "yieldPercentage": result.summary.yield_percentage,
            },
            "unplaced": [_camel(asdict(panel)) for panel in result.unplaced],
        }
        if result.optimal_sheet is not None:
            data["optimalSheet"] = _camel(asdict(result.optimal_sheet))
        if stock is not None:
            data["stock"] = [
                {
                    "sheetId": sheet.id,
                    "width": sheet.width,
                    "height": sheet.height,
                    "qty": sheet.qty,
                    "maxQty": sheet.effective_max_qty,
                    "used": result.sheets_used(sheet.id),
                }
                for sheet in stock
            ]
        return data


def _camel(data: dict[str, Any]) -> dict[str, Any]:
    return {to_camel(key): value for key, value in data.items()}
