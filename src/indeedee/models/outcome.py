"""Parse outcome models: every parser returns Success or Failure, never raises."""

from __future__ import annotations

from enum import StrEnum
from typing import Generic, Literal, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ErrorKind(StrEnum):
    EMPTY_INPUT = "EMPTY_INPUT"
    SECTION_MARKER_NOT_FOUND = "SECTION_MARKER_NOT_FOUND"
    NO_MAPPING_ROWS = "NO_MAPPING_ROWS"
    HEADER_ONLY = "HEADER_ONLY"
    DUPLICATE_HEADER = "DUPLICATE_HEADER"
    MISSING_REQUIRED_COLUMN = "MISSING_REQUIRED_COLUMN"
    NO_DATA_ROWS = "NO_DATA_ROWS"
    UNEXPECTED_PARSE_FAILURE = "UNEXPECTED_PARSE_FAILURE"


class Success(BaseModel, Generic[T]):
    """Parsed payload plus a user-facing message stating the row count."""

    ok: Literal[True] = True
    data: T
    message: str


class Failure(BaseModel):
    """Exactly one error for the whole file; no partial data."""

    ok: Literal[False] = False
    kind: ErrorKind
    error: str

