"""Domain models for the remote content store."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional


@dataclass(frozen=True, slots=True)
class ContentEntry:
    path: str
    kind: Literal["file", "dir"]
    sha: Optional[str] = None

    @property
    def is_directory(self) -> bool:
        return self.kind == "dir"
