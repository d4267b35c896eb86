"""Mapping export models: name correspondences between the two payroll schemes."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ColumnMapping(BaseModel):
    """One source-to-target column name correspondence.

    ``target`` is the name in the destination payroll scheme, ``source`` the
    column header in the current salary export. Either may be empty (unset).
    """

    target: str = ""
    source: str = ""

    model_config = {"frozen": True}

    @property
    def is_set(self) -> bool:
        """Both halves are non-blank after trimming."""
        return bool(self.target.strip() and self.source.strip())


class MappingSections(BaseModel):
    """Everything extracted from one mapping export."""

    overtime_data: list[ColumnMapping] = Field(default_factory=list)
    employee_code: ColumnMapping = ColumnMapping()
    fixed_overtime_allowance: ColumnMapping = ColumnMapping()
    fixed_overtime_excess: ColumnMapping = ColumnMapping()
