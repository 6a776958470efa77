from fastapi import APIRouter

from publisher.api.routers import projects, system


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(projects.router, tags=["projects"])
    router.include_router(system.router, tags=["system"])
    return router


__all__ = [
    "create_api_router",
]
