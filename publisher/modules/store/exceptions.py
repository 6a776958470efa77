"""Remote content store exceptions."""

from __future__ import annotations

from typing import Optional

from publisher.core.exceptions import PublishingError


class StoreError(PublishingError):
    """Raised when the remote content store rejects or fails a request."""

    def __init__(
        self,
        message: str,
        *,
        details: Optional[str] = None,
        status_code: Optional[int] = None,
        path: Optional[str] = None,
    ) -> None:
        super().__init__(message, details=details)
        self.status_code = status_code
        self.path = path


class ConflictError(StoreError):
    """Raised when a write is rejected because the revision token is stale."""
