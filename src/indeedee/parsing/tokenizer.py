"""Line tokenizer for comma-separated spreadsheet exports.

Input is split into physical lines before tokenizing, so a quoted field that
contains a real newline is split across two records. That limitation is kept
as-is: reconstructing such fields is not attempted.
"""

from __future__ import annotations

import re

from indeedee.core.types import Record

QUOTE = '"'
DELIMITER = ","


def split_lines(text: str) -> list[str]:
    """Split on ``\\n`` and drop one trailing ``\\r`` per line (CRLF exports)."""
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


def strip_row_number(line: str, prefix: str | re.Pattern[str]) -> str:
    """Remove a leading row-number prefix such as ``"12→"`` if present."""
    return re.sub(prefix, "", line, count=1)


def tokenize_line(line: str) -> Record:
    """Split one line into fields, honoring double-quote quoting.

    A quote toggles the in-quotes state, except that two consecutive quotes
    inside a quoted run produce one literal quote. Commas inside quotes are
    literal. An empty line yields a single empty field.
    """
    fields: Record = []
    current: list[str] = []
    in_quotes = False
    i = 0
    n = len(line)
    while i < n:
        char = line[i]
        if char == QUOTE:
            if in_quotes and i + 1 < n and line[i + 1] == QUOTE:
                current.append(QUOTE)
                i += 1
            else:
                in_quotes = not in_quotes
        elif char == DELIMITER and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)
        i += 1

    fields.append("".join(current))
    return fields
