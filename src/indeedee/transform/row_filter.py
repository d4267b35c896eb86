"""Row selection helpers backing the employee filter."""

from __future__ import annotations

from collections.abc import Collection, Sequence

from indeedee.models.salary import SalaryRow


def distinct_values(rows: Sequence[SalaryRow], column: str) -> list[str]:
    """Sorted distinct non-blank values of ``column``."""
    return sorted({row.get(column) for row in rows if row.get(column).strip()})


def filter_rows(
    rows: Sequence[SalaryRow], column: str | None, values: Collection[str],
) -> list[SalaryRow]:
    """Rows whose ``column`` value is in ``values``; no column or no values keeps all rows."""
    if not column or not values:
        return list(rows)
    return [row for row in rows if row.get(column) in values]
