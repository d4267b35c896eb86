"""Type aliases used across the Indeedee package."""

from __future__ import annotations

Record = list[str]
SourceName = str
TargetName = str
RenameMap = dict[SourceName, TargetName]
