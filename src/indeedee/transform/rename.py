"""Rename/merge step: fold the mapping export into one rename plan."""

from __future__ import annotations

from collections.abc import Iterable

from indeedee.core.types import RenameMap, SourceName
from indeedee.models.mapping import ColumnMapping, MappingSections
from indeedee.models.prompt import RenamePlan


def _ordered_mappings(
    overtime_data: Iterable[ColumnMapping],
    fixed_overtime_allowance: ColumnMapping | None,
    fixed_overtime_excess: ColumnMapping | None,
) -> list[ColumnMapping]:
    mappings = list(overtime_data)
    for extra in (fixed_overtime_allowance, fixed_overtime_excess):
        if extra is not None:
            mappings.append(extra)
    return mappings


def build_rename_plan(
    overtime_data: Iterable[ColumnMapping],
    fixed_overtime_allowance: ColumnMapping | None = None,
    fixed_overtime_excess: ColumnMapping | None = None,
) -> RenamePlan:
    """Build the source->target dictionary and the extraction column order.

    Mappings are visited section rows first, then the fixed allowance, then the
    fixed excess. A later mapping for an already-seen source overwrites the
    earlier target, while the column keeps its first-seen position.
    """
    renames: RenameMap = {}
    extract_columns: list[SourceName] = []
    seen: set[SourceName] = set()

    for mapping in _ordered_mappings(
        overtime_data, fixed_overtime_allowance, fixed_overtime_excess,
    ):
        if mapping.is_set:
            renames[mapping.source] = mapping.target
        if mapping.source.strip() and mapping.source not in seen:
            seen.add(mapping.source)
            extract_columns.append(mapping.source)

    return RenamePlan(renames=renames, extract_columns=extract_columns)


def plan_from_sections(sections: MappingSections) -> RenamePlan:
    return build_rename_plan(
        sections.overtime_data,
        sections.fixed_overtime_allowance,
        sections.fixed_overtime_excess,
    )
