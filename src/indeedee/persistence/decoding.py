"""Bytes-to-text decoding for spreadsheet exports."""

from __future__ import annotations

from indeedee.core.exceptions import ExportSourceError

# Tried in order: UTF-8 (BOM stripped), then the Windows Japanese code page
# Excel uses for "CSV" saves.
EXPORT_ENCODINGS = ("utf-8-sig", "cp932")


def decode_export(data: bytes) -> str:
    for encoding in EXPORT_ENCODINGS:
        try:
            return data.decode(encoding)
        except UnicodeDecodeError:
            continue
    raise ExportSourceError(
        f"Export is not valid {' or '.join(EXPORT_ENCODINGS)} text"
    )


EXPORT_SUFFIXES = (".csv", ".txt")


def is_export_key(key: str) -> bool:
    """True for keys naming a spreadsheet export rather than a folder or other file."""
    return key.lower().endswith(EXPORT_SUFFIXES)
