"""Routes that publish project submissions to the content repository."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from publisher.api.deps import get_publishing_service
from publisher.modules.publishing import PublishingService
from publisher.schemas import CreateMarkdownRequest, CreateMarkdownResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/create-md",
    response_model=CreateMarkdownResponse,
    summary="Convert project images and commit them with one markdown file per image",
    responses={
        400: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)
async def create_markdown(
    payload: CreateMarkdownRequest,
    service: PublishingService = Depends(get_publishing_service),
) -> CreateMarkdownResponse:
    logger.info(
        "Received submission: category=%r subtitle=%r images=%d tags=%d",
        payload.category,
        payload.subtitle,
        len(payload.images),
        len(payload.tags),
    )
    submission = payload.to_submission()
    result = await service.publish(submission)
    return CreateMarkdownResponse(files=result.created_file_names, assets_path=result.assets_directory)
