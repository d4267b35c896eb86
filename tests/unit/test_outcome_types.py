"""Tests that public parse signatures resolve to concrete outcome types."""

from __future__ import annotations

import typing

from indeedee.models.mapping import MappingSections
from indeedee.models.outcome import Failure, Success
from indeedee.models.salary import SalaryTable
from indeedee.parsing.mapping_parser import parse_mapping_file
from indeedee.parsing.salary_parser import parse_salary_file
from indeedee.services.prompt_session import PromptSession


class TestReturnHints:
    def test_mapping_parser(self):
        hints = typing.get_type_hints(parse_mapping_file)
        assert set(typing.get_args(hints["return"])) == {Success[MappingSections], Failure}

    def test_salary_parser(self):
        hints = typing.get_type_hints(parse_salary_file)
        assert set(typing.get_args(hints["return"])) == {Success[SalaryTable], Failure}

    def test_session_loaders(self):
        mapping_hints = typing.get_type_hints(PromptSession.load_mapping)
        salary_hints = typing.get_type_hints(PromptSession.load_salary)
        assert Success[MappingSections] in typing.get_args(mapping_hints["return"])
        assert Success[SalaryTable] in typing.get_args(salary_hints["return"])


class TestParametrizedSuccess:
    def test_outcome_is_instance_of_parametrized_class(self, mapping_csv):
        outcome = parse_mapping_file(mapping_csv)
        assert isinstance(outcome, Success[MappingSections])

    def test_payload_type_is_validated(self):
        table = SalaryTable(columns=["id"], rows=[])
        outcome = Success[SalaryTable](data=table, message="ok")
        assert outcome.data == table
