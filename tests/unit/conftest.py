"""Unit test fixtures — sample mapping and salary exports."""

from __future__ import annotations

import pytest

from tests.samples import MAPPING_CSV, SALARY_CSV


@pytest.fixture
def mapping_csv() -> str:
    return MAPPING_CSV


@pytest.fixture
def salary_csv() -> str:
    return SALARY_CSV
