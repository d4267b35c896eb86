"""Tests for SalaryRow and SalaryTable invariants."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from indeedee.models.salary import SalaryRow, SalaryTable

COLUMNS = ("id", "name", "dept")


class TestSalaryRow:
    def test_from_fields_pads_missing_values(self):
        row = SalaryRow.from_fields(COLUMNS, ["1"])
        assert row.as_dict() == {"id": "1", "name": "", "dept": ""}

    def test_from_fields_drops_extra_values(self):
        row = SalaryRow.from_fields(COLUMNS, ["1", "a", "b", "c"])
        assert row.as_dict() == {"id": "1", "name": "a", "dept": "b"}

    def test_mismatched_lengths_rejected(self):
        with pytest.raises(ValidationError):
            SalaryRow(columns=COLUMNS, values=("1",))

    def test_duplicate_columns_rejected(self):
        with pytest.raises(ValidationError):
            SalaryRow(columns=("id", "id"), values=("1", "2"))

    def test_lookup(self):
        row = SalaryRow.from_fields(COLUMNS, ["1", "a", "b"])
        assert row["name"] == "a"
        assert row.get("missing") == ""
        assert row.get("missing", "-") == "-"
        assert "dept" in row
        assert "missing" not in row

    def test_unknown_key_raises_key_error(self):
        row = SalaryRow.from_fields(COLUMNS, ["1", "a", "b"])
        with pytest.raises(KeyError):
            row["missing"]

    def test_rows_are_frozen(self):
        row = SalaryRow.from_fields(COLUMNS, ["1", "a", "b"])
        with pytest.raises(ValidationError):
            row.values = ("2", "b", "c")

    def test_lookup_by_position_on_wide_row(self):
        columns = tuple(f"col{i}" for i in range(500))
        row = SalaryRow.from_fields(columns, [str(i) for i in range(500)])
        assert row["col0"] == "0"
        assert row["col499"] == "499"
        assert row.get("col250") == "250"

    def test_copy_keeps_lookups(self):
        row = SalaryRow.from_fields(COLUMNS, ["1", "a", "b"])
        assert row.model_copy()["dept"] == "b"

    def test_serializes_as_ordered_dict(self):
        row = SalaryRow.from_fields(("z", "a"), ["1", "2"])
        assert list(row.model_dump()) == ["z", "a"]


class TestSalaryTable:
    def test_rows_must_match_header(self):
        row = SalaryRow.from_fields(("id",), ["1"])
        with pytest.raises(ValidationError):
            SalaryTable(columns=["id", "name"], rows=[row])

    def test_accepts_serialized_rows(self):
        table = SalaryTable.model_validate(
            {"columns": ["id", "name"], "rows": [{"id": "1", "name": "a"}, {"id": "2"}]}
        )
        assert table.rows[1].as_dict() == {"id": "2", "name": ""}
        assert table.rows[0]["name"] == "a"

    def test_dump_and_reload(self):
        row = SalaryRow.from_fields(COLUMNS, ["1", "a", "b"])
        table = SalaryTable(columns=list(COLUMNS), rows=[row])
        assert SalaryTable.model_validate(table.model_dump()) == table
