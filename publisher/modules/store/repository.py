"""Repository protocol for the remote content store."""

from __future__ import annotations

from typing import Optional, Protocol

from .models import ContentEntry


class ContentStore(Protocol):
    async def exists(self, path: str) -> ContentEntry | None:
        """Return the entry at ``path`` on the configured branch, or ``None``."""
        ...

    async def put_file(
        self,
        path: str,
        content: bytes,
        message: str,
        sha: Optional[str] = None,
    ) -> None:
        """Create ``path``, or update it when ``sha`` is the current revision."""
        ...
