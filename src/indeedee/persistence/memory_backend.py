"""In-memory export source for unit tests — dict-backed fake."""

from __future__ import annotations

from indeedee.core.exceptions import ExportSourceError


class MemoryFileStore:
    """Dict-backed IFileStore for unit tests."""

    def __init__(self, files: dict[str, bytes] | None = None) -> None:
        self._files: dict[str, bytes] = dict(files or {})

    def read(self, path: str) -> bytes:
        try:
            return self._files[path]
        except KeyError:
            raise ExportSourceError(f"No such export: {path!r}") from None

    def write(self, path: str, data: bytes) -> str:
        self._files[path] = data
        return path

    def list_files(self, prefix: str) -> list[str]:
        return [k for k in self._files if k.startswith(prefix)]
