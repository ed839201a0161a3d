import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from jobtracker.api.v1.router import api_v1_router
from jobtracker.core.config import get_settings
from jobtracker.core.database import engine
from jobtracker.core.exceptions import format_validation_errors

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Startup
    yield
    # Shutdown
    await engine.dispose()


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = jsonable_encoder(exc.errors())
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": format_validation_errors(errors)},
    )


def create_app() -> FastAPI:
    settings = get_settings()
    logging.getLogger("jobtracker").setLevel(settings.log_level.upper())

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.include_router(api_v1_router, prefix="/api/v1")
    return app
