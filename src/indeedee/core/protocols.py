"""Protocol interfaces for Indeedee abstractions.

Structural typing, no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


# ---------------------------------------------------------------------------
# Export sources
# ---------------------------------------------------------------------------

@runtime_checkable
class IFileStore(Protocol):
    """Read-only source of raw spreadsheet export bytes (local disk, S3, memory)."""

    def read(self, path: str) -> bytes: ...

    def list_files(self, prefix: str) -> list[str]: ...
