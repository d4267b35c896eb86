"""Local filesystem export source implementing IFileStore."""

from __future__ import annotations

from pathlib import Path

from indeedee.core.exceptions import ExportSourceError
from indeedee.persistence.decoding import is_export_key


class LocalFileStore:
    """IFileStore reading exports from disk, optionally below a root directory."""

    def __init__(self, root: str | Path | None = None) -> None:
        self._root = Path(root) if root is not None else None

    def _resolve(self, path: str) -> Path:
        return self._root / path if self._root is not None else Path(path)

    def read(self, path: str) -> bytes:
        try:
            return self._resolve(path).read_bytes()
        except OSError as exc:
            raise ExportSourceError(f"Local read failed for {path!r}: {exc}") from exc

    def list_files(self, prefix: str) -> list[str]:
        base = self._root or Path(".")
        return sorted(
            str(p.relative_to(base)) for p in base.rglob("*")
            if p.is_file() and is_export_key(p.name)
            and str(p.relative_to(base)).startswith(prefix)
        )
