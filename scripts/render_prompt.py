"""Render the payroll prompt text from a mapping export and a salary export.

Usage:
    python scripts/render_prompt.py mapping.csv salary.csv --year 2025 --month 10
    python scripts/render_prompt.py s3://exports/mapping.csv s3://exports/salary.csv \
        --year 2025 --month 10 --filter-column 部門 --filter-value 営業
"""

from __future__ import annotations

import argparse
import sys

from indeedee.core.config import AppSettings
from indeedee.core.exceptions import ExportSourceError
from indeedee.core.log import configure_logging
from indeedee.models.outcome import Failure
from indeedee.persistence import read_export
from indeedee.services.prompt_session import PromptSession


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render payroll prompt text from two exports")
    parser.add_argument("mapping", help="Mapping export path or s3://bucket/key")
    parser.add_argument("salary", help="Salary export path or s3://bucket/key")
    parser.add_argument("--year", type=int, required=True, help="Payroll year (e.g. 2025)")
    parser.add_argument("--month", type=int, required=True, choices=range(1, 13), metavar="MONTH",
                        help="Payroll month (1-12)")
    parser.add_argument("--required-column", default=None, help="Column the salary export must contain")
    parser.add_argument("--filter-column", default=None, help="Column used to select employees")
    parser.add_argument("--filter-value", action="append", default=[], dest="filter_values",
                        help="Keep rows whose filter column equals this value (repeatable)")
    return parser


def run(argv: list[str] | None = None, settings: AppSettings | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = settings or AppSettings()
    configure_logging(settings.log_level)

    session = PromptSession(settings=settings)
    try:
        mapping_text = read_export(args.mapping, settings)
        salary_text = read_export(args.salary, settings)
    except ExportSourceError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    for outcome in (
        session.load_mapping(mapping_text),
        session.load_salary(salary_text, args.required_column),
    ):
        if isinstance(outcome, Failure):
            print(outcome.error, file=sys.stderr)
            return 1
        print(outcome.message, file=sys.stderr)

    session.select(args.filter_column, args.filter_values)
    sys.stdout.write(session.render(args.year, args.month))
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
