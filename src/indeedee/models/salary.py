"""Salary export models: one ordered header-to-value row per employee."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, PrivateAttr, model_serializer, model_validator


class SalaryRow(BaseModel):
    """Header-name-to-value association for one employee.

    The key set is fixed at construction and always equals the header list of
    the file, in header order. Serializes as a plain ordered ``{header: value}``.
    """

    columns: tuple[str, ...]
    values: tuple[str, ...]

    model_config = {"frozen": True}

    _positions: dict[str, int] = PrivateAttr(default_factory=dict)

    @model_validator(mode="after")
    def _check_shape(self) -> SalaryRow:
        if len(self.columns) != len(self.values):
            raise ValueError(
                f"row has {len(self.values)} values for {len(self.columns)} columns"
            )
        if len(set(self.columns)) != len(self.columns):
            raise ValueError("row columns must be unique")
        return self

    def model_post_init(self, __context: Any) -> None:
        self._positions = {column: i for i, column in enumerate(self.columns)}

    @classmethod
    def from_fields(cls, columns: tuple[str, ...], fields: list[str]) -> SalaryRow:
        """Pair ``columns`` with ``fields``; missing trailing fields become "" and extras are dropped."""
        values = tuple(fields[i] if i < len(fields) else "" for i in range(len(columns)))
        return cls(columns=columns, values=values)

    @model_serializer
    def _serialize(self) -> dict[str, str]:
        return self.as_dict()

    def __getitem__(self, column: str) -> str:
        return self.values[self._positions[column]]

    def __contains__(self, column: object) -> bool:
        return column in self._positions

    def get(self, column: str, default: str = "") -> str:
        position = self._positions.get(column)
        return default if position is None else self.values[position]

    def as_dict(self) -> dict[str, str]:
        return dict(zip(self.columns, self.values))


class SalaryTable(BaseModel):
    """Header list plus every surviving data row of a salary export."""

    columns: list[str]
    rows: list[SalaryRow]

    @model_validator(mode="before")
    @classmethod
    def _rows_from_dicts(cls, data: Any) -> Any:
        # Accept rows in their serialized ``{header: value}`` form as well.
        if isinstance(data, dict) and "columns" in data:
            columns = tuple(data["columns"])
            data = dict(data)
            data["rows"] = [
                SalaryRow(columns=columns, values=tuple(row.get(c, "") for c in columns))
                if isinstance(row, dict) else row
                for row in data.get("rows", [])
            ]
        return data

    @model_validator(mode="after")
    def _check_rows(self) -> SalaryTable:
        header = tuple(self.columns)
        for row in self.rows:
            if row.columns != header:
                raise ValueError("every row must carry the table header in order")
        return self
