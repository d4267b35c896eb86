"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class MarkerConfig(BaseSettings):
    """Marker substrings that locate rows in the mapping export."""

    model_config = {"env_prefix": "INDEEDEE_MARKER_"}

    overtime_premium: str = "割増賃金"  # start of the mapping section (column 1)
    absence_deduction: str = "欠勤控除"  # end of the mapping section (column 1)
    employee_number: str = "従業員番号"  # matched against column 2
    fixed_overtime_allowance: str = "固定残業代"
    fixed_overtime_excess: str = "固定残業超過"


class SalaryConfig(BaseSettings):
    """Salary export parsing options."""

    model_config = {"env_prefix": "INDEEDEE_SALARY_"}

    required_column: str | None = None
    row_number_prefix: str = r"^\s*\d+→"  # e.g. "12→" pasted from a line-numbered viewer


class PromptConfig(BaseSettings):
    """Prompt text rendering options."""

    model_config = {"env_prefix": "INDEEDEE_PROMPT_"}

    employee_column: str = "従業員コード"
    heading_template: str = "## 従業員番号: {code}"


class S3Config(BaseSettings):
    """S3 export source configuration."""

    model_config = {"env_prefix": "INDEEDEE_S3_"}

    bucket: str = "indeedee-payroll-exports"
    region: str = "ap-northeast-1"
    endpoint_url: str | None = None  # LocalStack override


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "INDEEDEE_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    markers: MarkerConfig = MarkerConfig()
    salary: SalaryConfig = SalaryConfig()
    prompt: PromptConfig = PromptConfig()
    s3: S3Config = S3Config()
