"""Reusable FastAPI dependencies."""

from __future__ import annotations

from typing import AsyncIterator

from fastapi import Depends, Request

from publisher.core.container import ApplicationContainer
from publisher.modules.publishing import PublishingService
from publisher.modules.store import ContentStore


def get_app_container(request: Request) -> ApplicationContainer:
    return request.app.state.container


async def get_content_store(
    container: ApplicationContainer = Depends(get_app_container),
) -> AsyncIterator[ContentStore]:
    store = container.create_content_store()
    try:
        yield store
    finally:
        await store.aclose()


def get_publishing_service(
    store: ContentStore = Depends(get_content_store),
    container: ApplicationContainer = Depends(get_app_container),
) -> PublishingService:
    return container.create_publishing_service(store)


__all__ = [
    "get_app_container",
    "get_content_store",
    "get_publishing_service",
]
