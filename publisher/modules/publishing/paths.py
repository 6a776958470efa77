"""Storage paths and file names derived from a submission's category."""

from __future__ import annotations

import re

from publisher.core.config import PublishingSettings

from .models import ResolvedImage, ResolvedPaths

_WHITESPACE = re.compile(r"\s+")


def slugify_category(category: str) -> str:
    """Lower-case ``category`` and collapse each whitespace run into one hyphen."""
    return _WHITESPACE.sub("-", category.strip().lower())


def category_prefix(category: str) -> str:
    return slugify_category(category).replace("-", "")[:2].upper()


class PathResolver:
    """Maps (category, title, index) onto repository paths.

    Markdown files are named ``{file_prefix}{XX}{n}.md`` where ``XX`` is the
    first two characters of the category slug, hyphens removed and upper-cased,
    and ``n`` the 1-based image number, e.g. ``PGWE1.md`` for the first
    "Web Design" image and ``PGAB1.md`` for "A B". The title does not take part
    in the name, so re-publishing a category overwrites its previous documents.
    """

    def __init__(self, settings: PublishingSettings) -> None:
        self._settings = settings

    @property
    def extension(self) -> str:
        return self._settings.image_format

    def paths_for(self, category: str) -> ResolvedPaths:
        slug = slugify_category(category)
        assets_root = self._settings.assets_root.strip("/")
        url_prefix = self._settings.assets_url_prefix.rstrip("/")
        return ResolvedPaths(
            category_slug=slug,
            assets_directory=f"{assets_root}/{slug}",
            assets_url=f"{url_prefix}/{slug}",
            markdown_directory=self._settings.markdown_directory,
        )

    def resolve(self, category: str, title: str, index: int) -> ResolvedImage:
        if index < 0:
            raise ValueError(f"index must be zero or positive, got {index}")
        paths = self.paths_for(category)
        number = index + 1
        asset_name = f"{number}.{self.extension}"
        file_name = f"{self._settings.file_prefix}{category_prefix(category)}{number}.md"
        return ResolvedImage(
            index=number,
            asset_path=f"{paths.assets_directory}/{asset_name}",
            asset_url=f"{paths.assets_url}/{asset_name}",
            markdown_file_name=file_name,
            markdown_path=f"{paths.markdown_directory}/{file_name}",
        )
