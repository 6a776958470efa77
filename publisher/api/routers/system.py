"""Service health and configuration status."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from publisher import __version__
from publisher.api.deps import get_app_container
from publisher.core.container import ApplicationContainer
from publisher.schemas import ConfigStatusResponse, HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse, summary="Liveness check")
async def health() -> HealthResponse:
    return HealthResponse(version=__version__)


@router.get("/config/status", response_model=ConfigStatusResponse, summary="Which GitHub settings are present")
async def config_status(container: ApplicationContainer = Depends(get_app_container)) -> ConfigStatusResponse:
    github = container.settings.github
    return ConfigStatusResponse(
        github_token=bool(github.token),
        github_owner=bool(github.repository_owner),
        github_repo=bool(github.repository_name),
        github_branch=bool(github.branch),
    )
