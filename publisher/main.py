import logging
import traceback

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from publisher import __version__
from publisher.api import create_api_router
from publisher.core.config import Settings, get_settings
from publisher.core.container import ApplicationContainer
from publisher.core.exceptions import (
    ConfigurationError,
    DirectoryMissingError,
    PublishingError,
    ValidationError,
)
from publisher.core.logging import configure_logging
from publisher.modules.images import DecodeError
from publisher.modules.publishing import PublishStage
from publisher.modules.store import ConflictError, StoreError

logger = logging.getLogger(__name__)

# Most specific first; the first matching class decides the status code.
ERROR_STATUS: tuple[tuple[type[PublishingError], int], ...] = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (DecodeError, 422),
    (ConflictError, status.HTTP_409_CONFLICT),
    (StoreError, status.HTTP_502_BAD_GATEWAY),
    (ConfigurationError, status.HTTP_500_INTERNAL_SERVER_ERROR),
    (DirectoryMissingError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def status_for(exc: PublishingError) -> int:
    for error_cls, code in ERROR_STATUS:
        if isinstance(exc, error_cls):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_summary(exc: PublishingError) -> tuple[str, str | None]:
    """Return the ``error`` and ``details`` fields for ``exc``."""
    if exc.index is not None and exc.stage == PublishStage.UPLOADING_ASSETS:
        return f"Failed to process image {exc.index}", str(exc)
    return exc.message, exc.details


def error_body(error: str, details=None, stage=None, index=None) -> dict:
    body = {"error": error}
    if details:
        body["details"] = details
    if stage:
        body["stage"] = stage
    if index is not None:
        body["index"] = index
    return body


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    @app.exception_handler(PublishingError)
    async def publishing_error_handler(request: Request, exc: PublishingError) -> JSONResponse:
        code = status_for(exc)
        log = logger.warning if code < 500 else logger.error
        log("%s %s failed (%s): %s", request.method, request.url.path, code, exc)
        error, details = error_summary(exc)
        return JSONResponse(
            status_code=code,
            content=error_body(error, details, exc.stage, exc.index),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}" for err in exc.errors()
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body("Invalid request", problems),
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        details = str(exc) or exc.__class__.__name__
        if settings.debug:
            details = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body("Failed to process request", details),
        )


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.logging)

    app = FastAPI(
        title=settings.project_name,
        description="Publishes portfolio projects to a GitHub content repository",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.container = ApplicationContainer(settings=settings)

    register_exception_handlers(app, settings)
    app.include_router(create_api_router(settings.api_prefix))
    return app


app = create_app()
