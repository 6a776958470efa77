"""Commit workflow that publishes a project submission to the content store."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from publisher.core.config import PublishingSettings
from publisher.core.exceptions import DirectoryMissingError, PublishingError, ValidationError
from publisher.modules.images import WebpImageCodec
from publisher.modules.store import ContentStore

from .markdown import build_markdown
from .models import CommitResult, ProjectSubmission, PublishStage, ResolvedPaths
from .paths import PathResolver

logger = logging.getLogger(__name__)

GITKEEP = ".gitkeep"


class PublishingService:
    """Validates a submission, uploads its images and writes its markdown files.

    Runs strictly in order: directories, then every image, then every
    document. The first failure stops the run; files committed before it stay
    in the repository.
    """

    def __init__(
        self,
        store: ContentStore,
        settings: PublishingSettings,
        codec: Optional[WebpImageCodec] = None,
        resolver: Optional[PathResolver] = None,
    ) -> None:
        self._store = store
        self._settings = settings
        self._codec = codec or WebpImageCodec(quality=settings.image_quality)
        self._resolver = resolver or PathResolver(settings)

    async def publish(self, submission: ProjectSubmission) -> CommitResult:
        self.validate(submission)

        paths = self._resolver.paths_for(submission.category)
        logger.info(
            "Publishing %d image(s) for category %s into %s",
            len(submission.images),
            paths.category_slug,
            paths.assets_directory,
        )

        try:
            await self._ensure_directories(paths)
        except PublishingError as exc:
            raise exc.annotate(PublishStage.ENSURING_DIRECTORIES.value)

        for position in range(len(submission.images)):
            try:
                await self._upload_asset(submission, paths, position)
            except PublishingError as exc:
                logger.error("Image %d failed: %s", position + 1, exc)
                raise exc.annotate(PublishStage.UPLOADING_ASSETS.value, position + 1)

        created: list[str] = []
        for position in range(len(submission.images)):
            try:
                created.append(await self._write_document(submission, position))
            except PublishingError as exc:
                logger.error("Document %d failed: %s", position + 1, exc)
                raise exc.annotate(PublishStage.WRITING_DOCUMENTS.value, position + 1)

        logger.info("Published %s", ", ".join(created))
        return CommitResult(created_file_names=created, assets_directory=paths.assets_url)

    def validate(self, submission: ProjectSubmission) -> None:
        missing = [
            name
            for name, value in (
                ("title", submission.title),
                ("category", submission.category),
                ("publishDate", submission.publish_date),
                ("description", submission.description),
            )
            if not value or (isinstance(value, str) and not value.strip())
        ]
        if missing:
            raise _invalid(f"Missing required field(s): {', '.join(missing)}")
        if not submission.images:
            raise _invalid("No images provided")
        if not submission.image_alts:
            raise _invalid("Image alt text is required")
        if len(submission.image_alts) != len(submission.images):
            raise _invalid(
                "Image alt text count does not match image count",
                details=f"{len(submission.image_alts)} alt text(s) for {len(submission.images)} image(s)",
            )
        blank = [str(position) for position, alt in enumerate(submission.image_alts, start=1) if not alt.strip()]
        if blank:
            raise _invalid(
                "Image alt text is required",
                details=f"blank alt text for image(s): {', '.join(blank)}",
            )

    async def _ensure_directories(self, paths: ResolvedPaths) -> None:
        assets_root = self._settings.assets_root.strip("/")
        root = await self._store.exists(assets_root)
        if root is None or not root.is_directory:
            raise DirectoryMissingError(
                "Assets directory not found in repository",
                details=assets_root,
            )

        category_dir = await self._store.exists(paths.assets_directory)
        if category_dir is not None:
            return
        if self._settings.create_category_directory:
            logger.info("Creating %s", paths.assets_directory)
            await self._store.put_file(
                f"{paths.assets_directory}/{GITKEEP}",
                b"",
                f"Create assets directory for {paths.category_slug}",
            )
        else:
            logger.info("%s does not exist yet; the first image will create it", paths.assets_directory)

    async def _upload_asset(self, submission: ProjectSubmission, paths: ResolvedPaths, position: int) -> None:
        target = self._resolver.resolve(submission.category, submission.title, position)
        raw = submission.images[position]
        logger.info("Processing image %d (%d bytes)", target.index, len(raw))

        encoded = await asyncio.to_thread(self._codec.encode, raw)
        logger.info(
            "Image %d: %s %sx%s -> %s (%d bytes)",
            target.index,
            encoded.source_format,
            encoded.width,
            encoded.height,
            encoded.format,
            len(encoded.data),
        )

        existing = await self._store.exists(target.asset_path)
        sha = existing.sha if existing else None
        await self._store.put_file(
            target.asset_path,
            encoded.data,
            f"Add image {target.index} for {paths.category_slug}",
            sha,
        )
        logger.info("Uploaded %s (%s)", target.asset_path, "updated" if sha else "created")

    async def _write_document(self, submission: ProjectSubmission, position: int) -> str:
        target = self._resolver.resolve(submission.category, submission.title, position)
        content = build_markdown(submission, position, target.asset_url)

        existing = await self._store.exists(target.markdown_path)
        sha = existing.sha if existing else None
        await self._store.put_file(
            target.markdown_path,
            content.encode("utf-8"),
            f"Add {target.markdown_file_name}",
            sha,
        )
        logger.info("Wrote %s (%s)", target.markdown_path, "updated" if sha else "created")
        return target.markdown_file_name


def _invalid(message: str, details: Optional[str] = None) -> ValidationError:
    return ValidationError(message, details=details, stage=PublishStage.VALIDATING.value)
