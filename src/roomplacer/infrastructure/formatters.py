"""Output formatters and exporters for room layouts."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from roomplacer.domain.catalog import CAT_KIND
from roomplacer.domain.services import PlacementResult, RandomizeReport
from roomplacer.domain.value_objects import Transform


def _is_off_field(transform: Transform | None, failed_ids: set[str], entity_id: str) -> bool:
    return transform is None or transform.is_parked or entity_id in failed_ids


class LayoutReportFormatter:
    """Formats a bulk layout report as a table."""

    def format(
        self,
        report: RandomizeReport,
        transforms: Mapping[str, Transform],
        kinds: Mapping[str, str],
    ) -> str:
        """Format positions of every furniture entity and the parked failures.

        Args:
            report: Report returned by the bulk layout.
            transforms: Entity transforms after the layout.
            kinds: Entity kinds.
        """
        furniture = sorted(
            entity_id for entity_id, kind in kinds.items() if kind != CAT_KIND
        )
        if not furniture:
            return "No furniture in room."

        failed_ids = {failure.entity_id for failure in report.failed}
        lines = [
            "ROOM LAYOUT",
            "=" * 72,
            f"{'Entity':<22} {'Kind':<24} {'X':>7} {'Y':>7} {'Z':>7}",
            "-" * 72,
        ]
        for entity_id in furniture:
            transform = transforms.get(entity_id)
            if _is_off_field(transform, failed_ids, entity_id):
                lines.append(f"{entity_id:<22} {kinds[entity_id]:<24} {'(parked)':>23}")
                continue
            lines.append(
                f"{entity_id:<22} {kinds[entity_id]:<24} "
                f"{transform.x:>7.0f} {transform.y:>7.0f} {transform.z:>7.0f}"
            )

        lines.append("-" * 72)
        lines.append(f"Placed: {report.success_count}/{report.total}")

        if report.failed:
            lines.append("")
            lines.append("PARKED")
            for failure in report.failed:
                lines.append(f"  {failure.entity_id} ({failure.kind}): {failure.reason}")

        return "\n".join(lines)


class PlacementResultFormatter:
    """Formats single-item placement results."""

    def format(self, kind: str, result: PlacementResult) -> str:
        if result.success and result.position is not None:
            position = result.position
            return (
                f"OK: {kind} at x={position.x:.1f}, y={position.y:.1f}, z={position.z:.1f}"
            )
        return f"REJECTED: {kind}: {result.reason}"

    def format_heights(self, kind: str, heights: list[float]) -> str:
        """Format Y candidates in the order the search tries them."""
        if not heights:
            return f"No height candidates for {kind}."
        lines = [f"Y candidates for {kind} (in try order):"]
        for index, y in enumerate(heights, start=1):
            lines.append(f"  {index}. {y:.0f}")
        return "\n".join(lines)


class JsonLayoutExporter:
    """Exports a bulk layout as JSON."""

    def export(
        self,
        report: RandomizeReport,
        transforms: Mapping[str, Transform],
        kinds: Mapping[str, str],
    ) -> str:
        """Export the layout as a JSON string.

        Parked entities keep their parking coordinates and are flagged so
        hosts can tell them apart from placed ones.
        """
        failed_ids = {failure.entity_id for failure in report.failed}
        entities: list[dict[str, Any]] = []
        for entity_id in sorted(kinds):
            kind = kinds[entity_id]
            if kind == CAT_KIND:
                continue
            transform = transforms.get(entity_id)
            entry: dict[str, Any] = {
                "id": entity_id,
                "kind": kind,
                "parked": _is_off_field(transform, failed_ids, entity_id),
            }
            if transform is not None:
                entry["position"] = {"x": transform.x, "y": transform.y, "z": transform.z}
            entities.append(entry)

        data = {
            "placed": report.success_count,
            "total": report.total,
            "failed": [
                {"id": failure.entity_id, "kind": failure.kind, "reason": failure.reason}
                for failure in report.failed
            ],
            "entities": entities,
        }
        return json.dumps(data, indent=2)
