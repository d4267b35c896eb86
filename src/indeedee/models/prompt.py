"""Rename plan model consumed by the prompt generator."""

from __future__ import annotations

from pydantic import BaseModel, Field


class RenamePlan(BaseModel):
    """Source-to-target rename dictionary plus the ordered columns to extract."""

    renames: dict[str, str] = Field(default_factory=dict)
    extract_columns: list[str] = Field(default_factory=list)

    def target_for(self, source: str) -> str:
        """Target name for ``source``; a column without a target keeps its own name."""
        return self.renames.get(source) or source
