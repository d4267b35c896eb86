"""Tests for PromptSession state handling."""

from __future__ import annotations

import pytest

from indeedee.core.config import AppSettings, PromptConfig
from indeedee.models.outcome import Failure, Success
from indeedee.services.prompt_session import PromptSession


@pytest.fixture
def session():
    return PromptSession(settings=AppSettings())


@pytest.fixture
def loaded(session, mapping_csv, salary_csv):
    session.load_mapping(mapping_csv)
    session.load_salary(salary_csv)
    return session


class TestLoading:
    def test_successful_loads_are_kept(self, loaded):
        assert loaded.mapping is not None
        assert loaded.salary is not None

    def test_failed_mapping_load_clears_previous(self, loaded):
        outcome = loaded.load_mapping("")
        assert isinstance(outcome, Failure)
        assert loaded.mapping is None

    def test_failed_salary_load_clears_previous(self, loaded):
        outcome = loaded.load_salary("id,id\n1,2")
        assert isinstance(outcome, Failure)
        assert loaded.salary is None
        assert loaded.selected_rows() == []

    def test_new_salary_load_resets_filter(self, loaded, salary_csv):
        loaded.select("部門", ["営業"])
        assert isinstance(loaded.load_salary(salary_csv), Success)
        assert loaded.filter_column is None
        assert len(loaded.selected_rows()) == 3


class TestSelection:
    def test_filter_options(self, loaded):
        loaded.select("部門", [])
        assert loaded.filter_options() == ["営業", "開発"]

    def test_no_filter_options_without_column(self, loaded):
        assert loaded.filter_options() == []

    def test_selected_rows(self, loaded):
        loaded.select("部門", ["開発"])
        assert [r["従業員コード"] for r in loaded.selected_rows()] == ["E002"]


class TestRender:
    def test_empty_until_both_loaded(self, session, mapping_csv):
        assert session.render(2025, 10) == ""
        session.load_mapping(mapping_csv)
        assert session.render(2025, 10) == ""

    def test_empty_when_selection_matches_nothing(self, loaded):
        loaded.select("部門", ["総務"])
        assert loaded.render(2025, 10) == ""

    def test_renders_selected_rows(self, loaded):
        loaded.select("部門", ["開発"])
        text = loaded.render(2025, 10)
        assert text.startswith("2025年10月\n\n## 従業員番号: E002\n時間外労働手当: 8000\n")
        assert "E001" not in text

    def test_prompt_config_applies(self, mapping_csv, salary_csv):
        settings = AppSettings(prompt=PromptConfig(employee_column="氏名", heading_template="# {code}"))
        session = PromptSession(settings=settings)
        session.load_mapping(mapping_csv)
        session.load_salary(salary_csv)
        assert "\n# 山田 太郎\n" in session.render(2025, 10)


class TestEmployeeColumn:
    MAPPING = "基本情報,従業員番号,社員番号\n割増賃金,時間外労働手当,残業手当"

    def test_configured_column_wins_when_present(self, loaded):
        assert loaded.employee_column() == "従業員コード"

    def test_falls_back_to_mapped_employee_column(self, session):
        session.load_mapping(self.MAPPING)
        session.load_salary("社員番号,残業手当\nS-9,100")
        assert session.employee_column() == "社員番号"
        assert session.render(2025, 10) == "2025年10月\n\n## 従業員番号: S-9\n時間外労働手当: 100\n\n"

    def test_keeps_configured_column_when_mapping_column_absent(self, session):
        session.load_mapping(self.MAPPING)
        session.load_salary("id,残業手当\n1,100")
        assert session.employee_column() == "従業員コード"
