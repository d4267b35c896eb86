"""Salary export parser: header-driven table with uniqueness validation."""

from __future__ import annotations

import re

from indeedee.core.config import SalaryConfig
from indeedee.core.exceptions import (
    DuplicateHeaderError,
    EmptyInputError,
    HeaderOnlyError,
    MissingRequiredColumnError,
    NoDataRowsError,
    ParseError,
)
from indeedee.core.log import get_logger
from indeedee.models.outcome import ErrorKind, Failure, Success
from indeedee.models.salary import SalaryRow, SalaryTable
from indeedee.parsing.tokenizer import QUOTE, split_lines, strip_row_number, tokenize_line

logger = get_logger("parsing.salary_parser")

LABEL = "現行給与ファイル"


def duplicate_names(headers: list[str]) -> list[str]:
    """Each repeated header once, in first-seen order."""
    seen: set[str] = set()
    duplicates: list[str] = []
    for name in headers:
        if name in seen and name not in duplicates:
            duplicates.append(name)
        seen.add(name)
    return duplicates


def _unquote(value: str) -> str:
    if len(value) >= 2 and value.startswith(QUOTE) and value.endswith(QUOTE):
        return value[1:-1]
    return value


def build_table(text: str, required_column: str | None, row_prefix: str) -> SalaryTable:
    """Build the salary table, raising a ``ParseError`` on invalid input."""
    if not text or not text.strip():
        raise EmptyInputError(LABEL)

    lines = [line for line in split_lines(text) if line.strip()]
    if len(lines) < 2:
        raise HeaderOnlyError(LABEL)

    prefix = re.compile(row_prefix)
    headers = tokenize_line(strip_row_number(lines[0], prefix))

    duplicates = duplicate_names(headers)
    if duplicates:
        raise DuplicateHeaderError(LABEL, duplicates)

    if required_column is not None and required_column not in headers:
        raise MissingRequiredColumnError(LABEL, required_column)

    columns = tuple(headers)
    rows: list[SalaryRow] = []
    for line in lines[1:]:
        fields = tokenize_line(strip_row_number(line, prefix))
        if all(not field.strip() for field in fields):
            continue
        rows.append(SalaryRow.from_fields(columns, [_unquote(field) for field in fields]))

    if not rows:
        raise NoDataRowsError(LABEL)

    logger.debug("Salary export: %d columns, %d rows", len(columns), len(rows))
    return SalaryTable(columns=headers, rows=rows)


def parse_salary_file(
    text: str,
    required_column: str | None = None,
    config: SalaryConfig | None = None,
) -> Success[SalaryTable] | Failure:
    """Parse a salary export into a ``Success`` or a single ``Failure``.

    Args:
        text: Full export text.
        required_column: Column that must appear in the header; falls back to
            ``config.required_column`` when omitted.
        config: Parsing options; defaults are read from the environment.
    """
    config = config or SalaryConfig()
    if required_column is None:
        required_column = config.required_column

    try:
        table = build_table(text, required_column, config.row_number_prefix)
    except ParseError as exc:
        logger.warning("Salary export rejected (%s): %s", exc.kind, exc.message)
        return Failure(kind=exc.kind, error=exc.message)
    except Exception:
        logger.exception("Unexpected failure while parsing salary export")
        return Failure(
            kind=ErrorKind.UNEXPECTED_PARSE_FAILURE,
            error=f"{LABEL}の読み込み中にエラーが発生しました。ファイル形式を確認してください。",
        )

    count = len(table.rows)
    logger.info("Parsed salary export: %d rows", count)
    return Success[SalaryTable](
        data=table,
        message=f"{LABEL}を読み込みました ({count}件)",
    )
