"""Simple dependency container for wiring core services."""

from __future__ import annotations

from dataclasses import dataclass

from publisher.core.config import Settings
from publisher.modules.images import WebpImageCodec
from publisher.modules.publishing import PathResolver, PublishingService
from publisher.modules.store import ContentStore, GitHubContentStore


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings

    def create_content_store(self) -> GitHubContentStore:
        """Build a GitHub client; raises ConfigurationError before any request."""
        return GitHubContentStore.from_settings(self.settings.github)

    def create_publishing_service(self, store: ContentStore) -> PublishingService:
        publishing = self.settings.publishing
        return PublishingService(
            store,
            publishing,
            codec=WebpImageCodec(quality=publishing.image_quality),
            resolver=PathResolver(publishing),
        )


__all__ = ["ApplicationContainer"]
