"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from growthcheck.api.v1 import api_router
from growthcheck.core.config import get_settings
from growthcheck.schemas.growth import field_errors, first_error_message
from growthcheck.web import views

logger = logging.getLogger(__name__)
settings = get_settings()


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """422 with the same user-facing messages the HTML form shows."""
    errors = exc.errors()
    logger.info("Rejected %s %s: %s", request.method, request.url.path, first_error_message(errors))
    return JSONResponse(
        status_code=422,
        content={"detail": first_error_message(errors), "errors": field_errors(errors)},
    )


def create_application() -> FastAPI:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = FastAPI(
        title=settings.app_name,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    # CORS: allow everything in debug, localhost in dev; in production use CORS_ORIGINS env (comma-separated)
    if settings.debug:
        cors_origins = ["*"]
    elif settings.environment == "development":
        cors_origins = ["http://localhost:3000", "http://127.0.0.1:3000"]
    else:
        cors_origins = settings.cors_origin_list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(views.router, include_in_schema=False)
    app.include_router(api_router, prefix=settings.api_v1_prefix)
    return app


app = create_application()
