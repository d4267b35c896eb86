"""Prompt text generator: renders selected salary rows as labelled text blocks."""

from __future__ import annotations

from collections.abc import Sequence

from indeedee.models.prompt import RenamePlan
from indeedee.models.salary import SalaryRow

DEFAULT_HEADING = "## 従業員番号: {code}"


def period_line(year: int, month: int) -> str:
    return f"{year}年{month}月"


def render_row(
    row: SalaryRow, plan: RenamePlan, employee_column: str, heading_template: str,
) -> list[str]:
    """Lines for one employee: heading, one ``target: value`` per column, blank."""
    lines = [heading_template.format(code=row.get(employee_column, ""))]
    for source in plan.extract_columns:
        lines.append(f"{plan.target_for(source)}: {row.get(source, '')}")
    lines.append("")
    return lines


def generate_prompt(
    year: int,
    month: int,
    plan: RenamePlan,
    rows: Sequence[SalaryRow],
    employee_column: str,
    heading_template: str = DEFAULT_HEADING,
) -> str:
    """Render ``rows`` in the given order; no rows renders as ``""``.

    Values are inserted verbatim. Every line, including the blank separator
    after each employee block, ends with a newline.
    """
    if not rows:
        return ""

    lines = [period_line(year, month), ""]
    for row in rows:
        lines.extend(render_row(row, plan, employee_column, heading_template))
    return "".join(f"{line}\n" for line in lines)
