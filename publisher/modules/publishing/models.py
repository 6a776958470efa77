"""Domain models for project publishing."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional


class PublishStage(str, Enum):
    VALIDATING = "validating"
    ENSURING_DIRECTORIES = "ensuring_directories"
    UPLOADING_ASSETS = "uploading_assets"
    WRITING_DOCUMENTS = "writing_documents"


@dataclass(slots=True)
class ProjectSubmission:
    """One admin form submission: project metadata plus raw image bytes."""

    title: str
    category: str
    description: str
    publish_date: Optional[date]
    images: list[bytes] = field(default_factory=list)
    image_alts: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    subtitle: Optional[str] = None
    image_names: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class ResolvedPaths:
    category_slug: str
    assets_directory: str
    assets_url: str
    markdown_directory: str


@dataclass(frozen=True, slots=True)
class ResolvedImage:
    index: int
    asset_path: str
    asset_url: str
    markdown_file_name: str
    markdown_path: str


@dataclass(frozen=True, slots=True)
class CommitResult:
    created_file_names: list[str]
    assets_directory: str
