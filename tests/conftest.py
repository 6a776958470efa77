"""Pytest configuration and fixtures."""

from __future__ import annotations

import base64
import hashlib
import io
from datetime import date
from typing import Optional

import pytest
from PIL import Image

from publisher.core.config import GitHubSettings, PublishingSettings, Settings
from publisher.modules.publishing import ProjectSubmission
from publisher.modules.store import ConflictError, ContentEntry, StoreError


def create_test_image(width: int = 32, height: int = 24, color: str = "red", fmt: str = "PNG") -> bytes:
    """Create a test image and return its encoded bytes."""
    img = Image.new("RGB", (width, height), color)
    buffer = io.BytesIO()
    img.save(buffer, format=fmt)
    return buffer.getvalue()


def to_data_uri(data: bytes, mime: str = "image/png") -> str:
    return f"data:{mime};base64,{base64.b64encode(data).decode('ascii')}"


# =============================================================================
# Store double
# =============================================================================


class InMemoryContentStore:
    """ContentStore double that keeps files in a dict and records every call."""

    def __init__(self, directories: tuple[str, ...] = ("public/assets",)) -> None:
        self.directories: set[str] = set(directories)
        self.files: dict[str, tuple[bytes, str]] = {}
        self.messages: dict[str, str] = {}
        self.calls: list[tuple[str, str, Optional[str]]] = []
        self.fail_writes: dict[str, Exception] = {}
        self._revision = 0

    async def exists(self, path: str) -> ContentEntry | None:
        self.calls.append(("exists", path, None))
        if path in self.files:
            return ContentEntry(path=path, kind="file", sha=self.files[path][1])
        if path in self.directories or any(name.startswith(path + "/") for name in self.files):
            return ContentEntry(path=path, kind="dir")
        return None

    async def put_file(self, path: str, content: bytes, message: str, sha: Optional[str] = None) -> None:
        self.calls.append(("put_file", path, sha))
        if path in self.fail_writes:
            raise self.fail_writes[path]
        current = self.files.get(path)
        if current is not None and current[1] != sha:
            raise ConflictError(f"Conflicting update for {path}", status_code=409, path=path)
        if current is None and sha is not None:
            raise StoreError(f"Failed to write {path}", details="404: Not Found", status_code=404, path=path)

        self._revision += 1
        revision = hashlib.sha1(content + str(self._revision).encode()).hexdigest()
        self.files[path] = (content, revision)
        self.messages[path] = message

    @property
    def put_calls(self) -> list[tuple[str, str, Optional[str]]]:
        return [call for call in self.calls if call[0] == "put_file"]

    def text(self, path: str) -> str:
        return self.files[path][0].decode("utf-8")


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def store() -> InMemoryContentStore:
    return InMemoryContentStore()


@pytest.fixture
def publishing_settings() -> PublishingSettings:
    return PublishingSettings()


@pytest.fixture
def github_settings() -> GitHubSettings:
    return GitHubSettings(token="test-token", owner="octo", repo="portfolio", branch="main")


@pytest.fixture
def settings(github_settings: GitHubSettings) -> Settings:
    return Settings(environment="test", github=github_settings)


@pytest.fixture
def png_bytes() -> bytes:
    return create_test_image()


@pytest.fixture
def submission() -> ProjectSubmission:
    return ProjectSubmission(
        title="Brand refresh",
        subtitle="Landing pages",
        category="Web Design",
        description="A full redesign of the marketing site.",
        publish_date=date(2024, 5, 1),
        images=[create_test_image(color=color) for color in ("red", "green", "blue")],
        image_alts=["Home page", "About page", "Contact page"],
        tags=["branding", "web"],
    )
