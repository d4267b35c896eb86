"""Indeedee exception hierarchy."""

from __future__ import annotations

from indeedee.models.outcome import ErrorKind


class IndeedeeError(Exception):
    """Base exception for all Indeedee errors."""


class ExportSourceError(IndeedeeError):
    """An export file could not be read or decoded."""


class ParseError(IndeedeeError):
    """An export file failed validation.

    Public parse functions never let these escape; they are converted into a
    ``Failure`` carrying ``kind`` and the message.
    """

    kind: ErrorKind = ErrorKind.UNEXPECTED_PARSE_FAILURE

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class EmptyInputError(ParseError):
    """The export text is empty or whitespace only."""

    kind = ErrorKind.EMPTY_INPUT

    def __init__(self, label: str) -> None:
        self.label = label
        super().__init__(f"{label}が空です。正しいCSVファイルを選択してください。")


class SectionMarkerNotFoundError(ParseError):
    """No row carries the section start marker."""

    kind = ErrorKind.SECTION_MARKER_NOT_FOUND

    def __init__(self, label: str, marker: str) -> None:
        self.label = label
        self.marker = marker
        super().__init__(
            f"{label}に「{marker}」の行が見つかりませんでした。"
            "「P2.マッピング」シートからエクスポートしたCSVファイルを選択してください。"
        )


class NoMappingRowsError(ParseError):
    """The located section holds no non-blank mapping rows."""

    kind = ErrorKind.NO_MAPPING_ROWS

    def __init__(self, marker: str) -> None:
        self.marker = marker
        super().__init__(
            "マッピングデータが見つかりませんでした。"
            f"「{marker}」セクションにデータが含まれていることを確認してください。"
        )


class HeaderOnlyError(ParseError):
    """Fewer than two non-blank lines: no data below the header."""

    kind = ErrorKind.HEADER_ONLY

    def __init__(self, label: str) -> None:
        self.label = label
        super().__init__(
            f"{label}が空またはヘッダーのみです。"
            "データ行が含まれているCSVファイルを選択してください。"
        )


class DuplicateHeaderError(ParseError):
    """One or more header names repeat."""

    kind = ErrorKind.DUPLICATE_HEADER

    def __init__(self, label: str, names: list[str]) -> None:
        self.label = label
        self.names = names
        super().__init__(
            f"{label}のヘッダーに重複があります: {', '.join(names)}。"
            "正しいCSVファイルを選択してください。"
        )


class MissingRequiredColumnError(ParseError):
    """A caller-required column is absent from the header."""

    kind = ErrorKind.MISSING_REQUIRED_COLUMN

    def __init__(self, label: str, name: str) -> None:
        self.label = label
        self.name = name
        super().__init__(
            f"{label}に必須カラム「{name}」が見つかりませんでした。"
            "正しいCSVファイルを選択してください。"
        )


class NoDataRowsError(ParseError):
    """Every line below the header was blank."""

    kind = ErrorKind.NO_DATA_ROWS

    def __init__(self, label: str) -> None:
        self.label = label
        super().__init__(
            f"{label}のデータが見つかりませんでした。"
            "データ行が含まれているCSVファイルを選択してください。"
        )
