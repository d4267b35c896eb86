"""PromptSession — holds the loaded exports for one user and renders the prompt."""

from __future__ import annotations

from indeedee.core.config import AppSettings
from indeedee.core.log import get_logger
from indeedee.models.mapping import MappingSections
from indeedee.models.outcome import Failure, Success
from indeedee.models.prompt import RenamePlan
from indeedee.models.salary import SalaryRow, SalaryTable
from indeedee.parsing.mapping_parser import parse_mapping_file
from indeedee.parsing.salary_parser import parse_salary_file
from indeedee.transform.prompt import generate_prompt
from indeedee.transform.rename import plan_from_sections
from indeedee.transform.row_filter import distinct_values, filter_rows

logger = get_logger("services.prompt_session")


class PromptSession:
    """Caller-side state between file loads.

    A failed load clears whatever was previously loaded for that file; data
    from a rejected export is never merged with an earlier one.
    """

    def __init__(self, *, settings: AppSettings | None = None) -> None:
        self._settings = settings or AppSettings()
        self.mapping: MappingSections | None = None
        self.salary: SalaryTable | None = None
        self.filter_column: str | None = None
        self.filter_values: list[str] = []

    def load_mapping(self, text: str) -> Success[MappingSections] | Failure:
        outcome = parse_mapping_file(text, self._settings.markers)
        self.mapping = outcome.data if isinstance(outcome, Success) else None
        return outcome

    def load_salary(
        self, text: str, required_column: str | None = None,
    ) -> Success[SalaryTable] | Failure:
        outcome = parse_salary_file(text, required_column, self._settings.salary)
        if isinstance(outcome, Success):
            self.salary = outcome.data
        else:
            self.salary = None
        self.clear_filter()
        return outcome

    def select(self, column: str | None, values: list[str]) -> None:
        """Restrict rendering to rows whose ``column`` value is one of ``values``."""
        self.filter_column = column
        self.filter_values = list(values)

    def clear_filter(self) -> None:
        self.filter_column = None
        self.filter_values = []

    def filter_options(self) -> list[str]:
        if self.salary is None or not self.filter_column:
            return []
        return distinct_values(self.salary.rows, self.filter_column)

    def selected_rows(self) -> list[SalaryRow]:
        if self.salary is None:
            return []
        return filter_rows(self.salary.rows, self.filter_column, self.filter_values)

    def rename_plan(self) -> RenamePlan | None:
        return plan_from_sections(self.mapping) if self.mapping is not None else None

    def employee_column(self) -> str:
        """Heading column: the configured one, else the employee-number source column from the mapping export."""
        configured = self._settings.prompt.employee_column
        if self.salary is None or configured in self.salary.columns or self.mapping is None:
            return configured
        mapped = self.mapping.employee_code.source
        return mapped if mapped in self.salary.columns else configured

    def render(self, year: int, month: int) -> str:
        """Prompt text for the selected rows; "" until both exports are loaded."""
        plan = self.rename_plan()
        rows = self.selected_rows()
        if plan is None or not rows:
            return ""
        logger.debug("Rendering %d rows x %d columns", len(rows), len(plan.extract_columns))
        return generate_prompt(
            year,
            month,
            plan,
            rows,
            employee_column=self.employee_column(),
            heading_template=self._settings.prompt.heading_template,
        )
