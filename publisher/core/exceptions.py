"""Base exceptions shared by the publishing workflow."""

from __future__ import annotations

from typing import Optional


class PublishingError(Exception):
    """Base class for errors surfaced to callers of the publishing workflow.

    ``stage`` and ``index`` are filled in by the orchestrator once the error
    crosses a workflow stage; ``index`` is the 1-based image position.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[str] = None,
        stage: Optional[str] = None,
        index: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details
        self.stage = stage
        self.index = index

    def annotate(self, stage: str, index: Optional[int] = None) -> "PublishingError":
        if self.stage is None:
            self.stage = stage
        if self.index is None:
            self.index = index
        return self

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ValidationError(PublishingError):
    """Raised when a submission is missing a required field."""


class ConfigurationError(PublishingError):
    """Raised when credentials or the target repository are not configured."""


class DirectoryMissingError(PublishingError):
    """Raised when the repository's base assets directory does not exist."""
