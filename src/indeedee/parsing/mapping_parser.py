"""Mapping export parser.

Locates the overtime mapping section (bracketed by the overtime-premium and
absence-deduction markers in column 1) plus three fixed-label rows that may
sit anywhere in the file. Only the first three columns of each line matter:
column 1 holds labels, column 2 the target name, column 3 the source name.
"""

from __future__ import annotations

from indeedee.core.config import MarkerConfig
from indeedee.core.exceptions import (
    EmptyInputError,
    NoMappingRowsError,
    ParseError,
    SectionMarkerNotFoundError,
)
from indeedee.core.log import get_logger
from indeedee.core.types import Record
from indeedee.models.mapping import ColumnMapping, MappingSections
from indeedee.models.outcome import ErrorKind, Failure, Success
from indeedee.parsing.tokenizer import split_lines, tokenize_line

logger = get_logger("parsing.mapping_parser")

LABEL = "マッピングファイル"
MEANINGFUL_COLUMNS = 3
LABEL_COL, TARGET_COL, SOURCE_COL = 0, 1, 2


def _field(record: Record, index: int) -> str:
    return record[index] if index < len(record) else ""


def _find_row(records: list[Record], column: int, marker: str, start: int = 0) -> int | None:
    """Index of the first record at or after ``start`` whose ``column`` contains ``marker``."""
    for i in range(start, len(records)):
        if marker in _field(records[i], column):
            return i
    return None


def _labelled_mapping(records: list[Record], column: int, marker: str) -> ColumnMapping:
    """Trimmed target/source of the first row matching ``marker``; unset when absent."""
    index = _find_row(records, column, marker)
    if index is None:
        return ColumnMapping()
    record = records[index]
    return ColumnMapping(
        target=_field(record, TARGET_COL).strip(),
        source=_field(record, SOURCE_COL).strip(),
    )


def read_records(text: str) -> list[Record]:
    """Tokenize every line, keeping only the meaningful leading columns."""
    return [tokenize_line(line)[:MEANINGFUL_COLUMNS] for line in split_lines(text)]


def extract_sections(text: str, markers: MarkerConfig) -> MappingSections:
    """Extract all mapping data, raising a ``ParseError`` on invalid input."""
    if not text or not text.strip():
        raise EmptyInputError(LABEL)

    records = read_records(text)

    employee_code = _labelled_mapping(records, TARGET_COL, markers.employee_number)
    fixed_allowance = _labelled_mapping(records, LABEL_COL, markers.fixed_overtime_allowance)
    fixed_excess = _labelled_mapping(records, LABEL_COL, markers.fixed_overtime_excess)

    start = _find_row(records, LABEL_COL, markers.overtime_premium)
    if start is None:
        raise SectionMarkerNotFoundError(LABEL, markers.overtime_premium)

    end = _find_row(records, LABEL_COL, markers.absence_deduction, start + 1)
    if end is None:
        end = len(records)
    logger.debug("Mapping section spans records [%d, %d) of %d", start, end, len(records))

    overtime_data = [
        ColumnMapping(target=_field(record, TARGET_COL), source=_field(record, SOURCE_COL))
        for record in records[start:end]
        if _field(record, TARGET_COL) or _field(record, SOURCE_COL)
    ]
    if not overtime_data:
        raise NoMappingRowsError(markers.overtime_premium)

    return MappingSections(
        overtime_data=overtime_data,
        employee_code=employee_code,
        fixed_overtime_allowance=fixed_allowance,
        fixed_overtime_excess=fixed_excess,
    )


def parse_mapping_file(
    text: str, markers: MarkerConfig | None = None,
) -> Success[MappingSections] | Failure:
    """Parse a mapping export into a ``Success`` or a single ``Failure``."""
    try:
        sections = extract_sections(text, markers or MarkerConfig())
    except ParseError as exc:
        logger.warning("Mapping export rejected (%s): %s", exc.kind, exc.message)
        return Failure(kind=exc.kind, error=exc.message)
    except Exception:
        logger.exception("Unexpected failure while parsing mapping export")
        return Failure(
            kind=ErrorKind.UNEXPECTED_PARSE_FAILURE,
            error=f"{LABEL}の読み込み中にエラーが発生しました。ファイル形式を確認してください。",
        )

    count = len(sections.overtime_data)
    logger.info("Parsed mapping export: %d mapping rows", count)
    return Success[MappingSections](
        data=sections,
        message=f"{LABEL}を読み込みました ({count}件)",
    )
